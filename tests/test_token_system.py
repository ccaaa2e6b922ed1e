import numpy as np
import pytest

from core.errors import InvalidExpressionError, InvalidOperandError
from core.token_system import (
    ExpressionValidator, Token, TokenType, is_identifier, is_number, is_parenthesis, is_sign,
    make_number, normalize, split_words, tokenize
)


def test_normalize_spaces_parentheses():
    assert normalize("(2+3)*4") == " ( 2+3 ) *4"
    assert split_words("(2 + 3) * x") == ["(", "2", "+", "3", ")", "*", "x"]


def test_word_classifiers():
    for word in ["3", "-3.5", ".5", "1e3", "1.", "+7"]:
        assert is_number(word), word
    for word in ["abc", "--3", "", "3x", "-"]:
        assert not is_number(word), word

    assert is_sign("--") and is_sign("*") and is_sign("+-")
    assert not is_sign("-3") and not is_sign("")

    assert is_parenthesis("(") and is_parenthesis(")")
    assert not is_parenthesis("(2") and not is_parenthesis("")

    assert is_identifier("abc") and is_identifier("Xy") and is_identifier("café")
    assert not is_identifier("a1")
    assert not is_identifier("")
    assert not is_identifier("Ω")  # 希腊字母


def test_tokenize_tags_tokens():
    tokens = tokenize("( 12 + x ) / 4")
    assert [t.type for t in tokens] == [
        TokenType.LPAREN, TokenType.NUMBER, TokenType.OPERATOR, TokenType.IDENTIFIER,
        TokenType.RPAREN, TokenType.OPERATOR, TokenType.NUMBER,
    ]
    assert tokens[1].value == np.float32(12)
    assert isinstance(tokens[1].value, np.float32)


def test_tokenize_merges_spaced_sign_runs():
    assert tokenize("5 - - 3") == tokenize("5 -- 3")
    assert tokenize("5 - + - 3")[1] == Token(TokenType.OPERATOR, "-+-")


def test_tokenize_keeps_multiplicative_runs_apart():
    tokens = tokenize("5 * - 3")
    assert [t.text for t in tokens] == ["5", "*", "-", "3"]


def test_out_of_range_literal_is_invalid_operand():
    with pytest.raises(InvalidOperandError):
        make_number("1e39")


def test_validator_rejects_adjacent_numbers():
    assert not ExpressionValidator.is_valid(tokenize("2 3 +"))
    with pytest.raises(InvalidExpressionError):
        ExpressionValidator.validate(tokenize("2 3 +"))


def test_validator_rejects_adjacent_operator_runs():
    assert not ExpressionValidator.is_valid(tokenize("2 * * 3"))
    assert not ExpressionValidator.is_valid(tokenize("2 * - 3"))
    assert ExpressionValidator.is_valid(tokenize("2 + + 3"))


def test_validator_rejects_unknown_words():
    assert not ExpressionValidator.is_valid(tokenize("1 == 2"))
    assert not ExpressionValidator.is_valid(tokenize("1 + y"))


def test_validator_parentheses_never_conflict():
    assert ExpressionValidator.is_valid(tokenize("( 2 + 3"))
    assert ExpressionValidator.is_valid(tokenize("( ( 1 ) )"))
    assert ExpressionValidator.is_valid(tokenize("2 ( 3 )"))


def test_validator_accepts_any_first_token():
    assert ExpressionValidator.is_valid(tokenize("- 3"))
    assert ExpressionValidator.is_valid(tokenize("abc"))
    assert ExpressionValidator.is_valid([])
