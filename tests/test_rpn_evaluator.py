import numpy as np
import pytest

from core.errors import (
    DivisionByZeroError, InvalidExpressionError, InvalidOperandError, InvalidPostfixError
)
from core.rpn_evaluator import RPNEvaluator
from core.shunting_yard import InfixConverter
from core.token_system import tokenize


@pytest.mark.parametrize("postfix,expected", [
    ("2 3 4 * +", 14),
    ("10 4 -", 6),
    ("8 2 /", 4),
    ("5 3 --", 8),
    ("5 3 +-", 2),
    ("5 3 ---", 2),
    ("-2.5 2 *", -5),
    ("7", 7),
])
def test_evaluate_string(postfix, expected):
    result = RPNEvaluator.evaluate(postfix)
    assert isinstance(result, np.float32)
    assert result == np.float32(expected)


def test_evaluate_token_list():
    postfix = InfixConverter.convert(tokenize("( 1 + 2 ) * ( 10 - 4 )"))
    assert RPNEvaluator.evaluate(postfix) == np.float32(18)


@pytest.mark.parametrize("postfix", ["5 +", "+", "1 2", ""])
def test_malformed_postfix(postfix):
    with pytest.raises(InvalidPostfixError) as exc:
        RPNEvaluator.evaluate(postfix)
    assert str(exc.value) == "invalid postfix expression"


def test_non_numeric_operand():
    with pytest.raises(InvalidOperandError) as exc:
        RPNEvaluator.evaluate("1 abc +")
    assert str(exc.value) == "invalid operand"


def test_invalid_sign_run():
    with pytest.raises(InvalidExpressionError):
        RPNEvaluator.evaluate("2 3 *-")


def test_division_by_zero():
    with pytest.raises(DivisionByZeroError):
        RPNEvaluator.evaluate("1 0 /")
