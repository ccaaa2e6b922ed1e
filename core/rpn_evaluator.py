"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import EmptyStackError, InvalidOperandError, InvalidPostfixError
from core.operators import Operators
from core.stack import Stack
from core.token_system import Token, TokenType, is_number, is_sign, make_number

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀表达式的值"""

    @staticmethod
    def parse(postfix):
        """以空格分隔的后缀字符串 -> Token列表"""
        tokens = []
        for word in postfix.split():
            if is_sign(word):
                tokens.append(Token(TokenType.OPERATOR, word))
            elif is_number(word):
                tokens.append(make_number(word))
            else:
                logger.debug(f"Non-numeric operand in postfix: {word!r}")
                raise InvalidOperandError()
        return tokens

    @staticmethod
    def evaluate(postfix):
        """
        评估后缀表达式
        Args:
            postfix: 后缀Token列表，或以空格分隔的后缀字符串
        Returns:
            np.float32 结果
        """
        tokens = RPNEvaluator.parse(postfix) if isinstance(postfix, str) else postfix
        stack = Stack()

        for token in tokens:
            if token.is_operator:
                symbol = Operators.resolve_sign(token.text)
                try:
                    operand2 = stack.pop()
                    operand1 = stack.pop()
                except EmptyStackError:
                    logger.debug(f"Insufficient operands for {token.text}")
                    raise InvalidPostfixError() from None
                stack.push(Operators.apply(symbol, operand1, operand2))
            elif token.type == TokenType.NUMBER:
                stack.push(token.value)
            else:
                logger.debug(f"Non-numeric operand: {token.text!r}")
                raise InvalidOperandError()

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise InvalidPostfixError()
        return stack.pop()
