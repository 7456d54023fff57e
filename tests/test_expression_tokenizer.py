import pytest
from hypothesis import given, strategies as st

from calculator_errors import ErrorKind, InvalidCharacterError
from expression_tokenizer import NumberToken, OperatorToken, token_text, tokenize


def _texts(tokens):
    return [token_text(t) for t in tokens]


def test_splits_numbers_and_operators():
    assert tokenize("12+3.5*4") == [
        NumberToken("12"),
        OperatorToken("+"),
        NumberToken("3.5"),
        OperatorToken("*"),
        NumberToken("4"),
    ]


def test_empty_string_has_no_tokens():
    assert tokenize("") == []


def test_consecutive_operators_are_separate_tokens():
    assert _texts(tokenize("3*-2")) == ["3", "*", "-", "2"]


def test_bare_dots_stay_inside_number_token():
    assert tokenize("1.2.3") == [NumberToken("1.2.3")]
    assert tokenize(".") == [NumberToken(".")]


def test_leading_and_trailing_dot_numbers():
    assert _texts(tokenize(".5+2.")) == [".5", "+", "2."]


@pytest.mark.parametrize(
    "expression, char, position",
    [("3+a", "a", 2), ("1 + 2", " ", 1), ("2^3", "^", 1), ("(1)", "(", 0), ("1,5", ",", 1)],
)
def test_rejects_characters_outside_alphabet(expression, char, position):
    with pytest.raises(InvalidCharacterError) as info:
        tokenize(expression)
    assert info.value.kind is ErrorKind.INVALID_CHARACTER
    assert info.value.char == char
    assert info.value.position == position


def test_tokens_compare_by_value():
    assert NumberToken("7") == NumberToken("7")
    assert OperatorToken("+") != OperatorToken("-")
    assert NumberToken("1") != OperatorToken("1")


@given(st.text(alphabet="0123456789.+-*/"))
def test_joining_tokens_reconstructs_input(expression):
    assert "".join(_texts(tokenize(expression))) == expression


@given(st.text(alphabet="0123456789.+-*/"))
def test_number_tokens_never_contain_operators(expression):
    for token in tokenize(expression):
        if isinstance(token, NumberToken):
            assert token.text
            assert not set(token.text) & set("+-*/")
        else:
            assert token.symbol in "+-*/"
