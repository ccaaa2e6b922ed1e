"""core/shunting_yard.py - 中缀表达式转后缀（调度场算法）"""
import logging

from core.errors import EmptyStackError, InvalidExpressionError
from core.operators import Operators
from core.stack import Stack
from core.token_system import TokenType, tokenize

logger = logging.getLogger(__name__)


class InfixConverter:
    """把已校验的中缀Token序列转换为后缀顺序"""

    @staticmethod
    def token_precedence(token):
        # 操作符串按化简后的符号取优先级；括号取哨兵值
        if token.is_operator:
            return Operators.precedence(Operators.resolve_sign(token.text))
        return Operators.precedence(token.text)

    @staticmethod
    def convert(tokens):
        """
        Args:
            tokens: 中缀Token序列
        Returns:
            后缀Token列表
        """
        output = []
        op_stack = Stack()

        for token in tokens:
            if token.type == TokenType.LPAREN:
                op_stack.push(token)
            elif token.type == TokenType.RPAREN:
                try:
                    while op_stack.peek().type != TokenType.LPAREN:
                        output.append(op_stack.pop())
                except EmptyStackError:
                    logger.debug("Unmatched ')'")
                    raise InvalidExpressionError() from None
                op_stack.pop()  # 丢弃 '('
            elif token.is_operator:
                current = InfixConverter.token_precedence(token)
                # <= 保证同级操作符左结合
                while (not op_stack.is_empty()
                       and current <= InfixConverter.token_precedence(op_stack.peek())):
                    output.append(op_stack.pop())
                op_stack.push(token)
            else:
                # 操作数直接输出
                output.append(token)

        if op_stack.has_parenthesis():
            logger.debug("Unmatched '(' left on operator stack")
            raise InvalidExpressionError()

        while not op_stack.is_empty():
            output.append(op_stack.pop())
        return output

    @staticmethod
    def to_postfix(expression):
        """字符串版本：返回以空格连接的后缀表达式"""
        postfix = InfixConverter.convert(tokenize(expression))
        return format_postfix(postfix)


def format_postfix(tokens):
    return ' '.join(token.text for token in tokens)
