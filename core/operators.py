"""core/operators.py"""
import logging
from functools import reduce

import numpy as np

from config.config import ENGINE_CONFIG
from core.errors import ArithmeticOverflowError, DivisionByZeroError, InvalidExpressionError

logger = logging.getLogger(__name__)

PRECEDENCE = ENGINE_CONFIG["precedence"]
UNKNOWN_PRECEDENCE = ENGINE_CONFIG["unknown_precedence"]


class Operators:
    """所有操作符的静态方法集合"""

    # 符号串合并====================

    @staticmethod
    def combine(first, second):
        """两个符号两两合并：乘除不能与其他符号组合"""
        if first in '*/' or second in '*/':
            raise InvalidExpressionError()
        if first == '-' and second == '-':
            return '+'
        if first == '-' or second == '-':
            return '-'
        return '+'

    @staticmethod
    def resolve_sign(run):
        """
        将操作符串化简为单个操作符
        Args:
            run: 由 + - * / 组成的字符串，长度>=1
        Returns:
            '+', '-', '*' 或 '/'
        """
        if not run:
            raise InvalidExpressionError()
        if len(run) == 1:
            return run
        return reduce(Operators.combine, run)

    @staticmethod
    def precedence(symbol):
        """* / 为1，+ - 为0，其他（括号）为-1"""
        return PRECEDENCE.get(symbol, UNKNOWN_PRECEDENCE)

    # 二元操作符========================================
    # float32 操作数先提升为 float64 计算，再截回 float32

    @staticmethod
    def _to_float32(result):
        with np.errstate(over='ignore', invalid='ignore'):
            value = np.float32(result)
        if not np.isfinite(value):
            logger.debug(f"Non-finite result: {result}")
            raise ArithmeticOverflowError()
        return value

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        return Operators._to_float32(np.float64(operand1) + np.float64(operand2))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        return Operators._to_float32(np.float64(operand1) - np.float64(operand2))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        return Operators._to_float32(np.float64(operand1) * np.float64(operand2))

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：除数为0直接报错，不返回inf/nan"""
        if operand2 == 0:
            raise DivisionByZeroError()
        return Operators._to_float32(np.float64(operand1) / np.float64(operand2))

    @staticmethod
    def apply(symbol, operand1, operand2):
        op_method = BINARY_OPERATORS.get(symbol)
        if op_method is None:
            logger.error(f"Unknown binary operator: {symbol}")
            raise InvalidExpressionError()
        return op_method(operand1, operand2)


BINARY_OPERATORS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
}
