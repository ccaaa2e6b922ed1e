"""core/token_system.py"""
import logging
import re
import unicodedata
from enum import Enum

import numpy as np

from config.config import ENGINE_CONFIG
from core.errors import InvalidExpressionError, InvalidOperandError

logger = logging.getLogger(__name__)

OPERATOR_CHARS = ENGINE_CONFIG["operator_chars"]
MERGEABLE_CHARS = "+-"  # 只有加减号可以跨空格合并

_PAREN_RE = re.compile(r'([()])')
_NUMBER_RE = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$')


class TokenType(Enum):
    NUMBER = "number"  # 数值字面量
    IDENTIFIER = "identifier"  # 变量名（代入后不应再出现）
    OPERATOR = "operator"  # 操作符串，如 "-", "--", "+-"
    LPAREN = "lparen"
    RPAREN = "rparen"


class Token:
    def __init__(self, token_type, text, value=None):
        self.type = token_type
        self.text = text
        self.value = value  # 仅NUMBER有值 (np.float32)

    @property
    def is_parenthesis(self):
        return self.type in (TokenType.LPAREN, TokenType.RPAREN)

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.text == other.text

    def __repr__(self):
        return f"Token({self.type.name}, {self.text!r})"


LPAREN = Token(TokenType.LPAREN, '(')
RPAREN = Token(TokenType.RPAREN, ')')


# ================== 单词分类 ==================

def is_number(word):
    return bool(_NUMBER_RE.match(word))


def is_sign(word):
    """整个单词都由操作符字符组成"""
    return bool(word) and all(ch in OPERATOR_CHARS for ch in word)


def is_parenthesis(word):
    return word in ('(', ')')


def is_identifier(word):
    """非空且只含拉丁字母（区分大小写）"""
    if not word:
        return False
    for ch in word:
        if not ch.isalpha() or 'LATIN' not in unicodedata.name(ch, ''):
            return False
    return True


def normalize(expression):
    """在括号两侧插入空格"""
    return _PAREN_RE.sub(r' \1 ', expression)


def split_words(expression):
    return normalize(expression).split()


def make_number(text):
    """数值字面量 -> NUMBER Token；超出float32范围视为非法操作数"""
    with np.errstate(over='ignore'):
        value = np.float32(float(text))
    if not np.isfinite(value):
        logger.debug(f"Literal out of float32 range: {text}")
        raise InvalidOperandError()
    return Token(TokenType.NUMBER, text, value=value)


def tokenize(expression):
    """
    将表达式切分为带类型的Token序列
    Args:
        expression: 中缀表达式字符串
    Returns:
        Token列表；以空格分开的连续 +/- 合并为一个操作符串
    """
    tokens = []
    for word in split_words(expression):
        if word == '(':
            tokens.append(LPAREN)
        elif word == ')':
            tokens.append(RPAREN)
        elif is_number(word):
            tokens.append(make_number(word))
        elif is_sign(word):
            last = tokens[-1] if tokens else None
            if (last is not None and last.is_operator
                    and all(ch in MERGEABLE_CHARS for ch in last.text + word)):
                tokens[-1] = Token(TokenType.OPERATOR, last.text + word)
            else:
                tokens.append(Token(TokenType.OPERATOR, word))
        else:
            # 变量名或无法识别的单词，交给代入/校验处理
            tokens.append(Token(TokenType.IDENTIFIER, word))
    return tokens


class ExpressionValidator:
    """检查相邻Token是否合法"""

    @staticmethod
    def is_valid(tokens):
        last = None
        for token in tokens:
            if last is None:
                # 第一个Token总是接受
                last = token
                continue

            if token.is_parenthesis or last.is_parenthesis:
                last = token
                continue

            is_token_number = token.type == TokenType.NUMBER
            is_last_number = last.type == TokenType.NUMBER
            both_numbers = is_token_number and is_last_number
            both_signs = token.is_operator and last.is_operator

            if both_numbers or both_signs:
                logger.debug(f"Rejected adjacency: {last.text!r} {token.text!r}")
                return False
            if not is_token_number and not token.is_operator:
                logger.debug(f"Rejected token: {token.text!r}")
                return False
            last = token
        return True

    @staticmethod
    def validate(tokens):
        if not ExpressionValidator.is_valid(tokens):
            raise InvalidExpressionError()
        return tokens
