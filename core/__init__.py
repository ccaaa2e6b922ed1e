"""核心模块 - Token系统、调度场转换、RPN评估器和操作符"""
from .errors import (
    CalculatorError, InvalidIdentifierError, MalformedWordError, UnknownVariableError,
    InvalidExpressionError, InvalidOperandError, InvalidPostfixError,
    EmptyStackError, DivisionByZeroError, ArithmeticOverflowError
)
from .token_system import (
    TokenType, Token, ExpressionValidator, tokenize, split_words,
    is_number, is_sign, is_identifier, is_parenthesis
)
from .operators import Operators
from .shunting_yard import InfixConverter, format_postfix
from .rpn_evaluator import RPNEvaluator
from .stack import Stack

__all__ = [
    'CalculatorError', 'InvalidIdentifierError', 'MalformedWordError', 'UnknownVariableError',
    'InvalidExpressionError', 'InvalidOperandError', 'InvalidPostfixError',
    'EmptyStackError', 'DivisionByZeroError', 'ArithmeticOverflowError',
    'TokenType', 'Token', 'ExpressionValidator', 'tokenize', 'split_words',
    'is_number', 'is_sign', 'is_identifier', 'is_parenthesis',
    'Operators', 'InfixConverter', 'format_postfix', 'RPNEvaluator', 'Stack'
]
