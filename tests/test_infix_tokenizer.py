from __future__ import annotations

import pytest

from adapters.tokenizer.infix_tokenizer import InfixTokenizer
from contracts import TokenType
from errors import ParseError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2x + 3", "2*x+3"),
        ("2sin(x)", "2*sin(x)"),
        ("(x+1)(x-1)", "(x+1)*(x-1)"),
        ("(x)y", "(x)*y"),
        ("(x)2", "(x)*2"),
        ("x(y)", "x*(y)"),
        ("x2", "x*2"),
        ("x^2y", "x^2*y"),
        ("cos(x)", "cos(x)"),
        ("-x+2x", "0-x+2*x"),
        ("3(-x)", "3*(0-x)"),
        ("2*-3", "2*0-3"),
        ("--x", "0-0-x"),
        ("x - y", "x-y"),
    ],
)
def test_normalize(text, expected):
    assert InfixTokenizer().normalize(text) == expected


def test_tokenize_number_variable_and_operators():
    tokens = InfixTokenizer().tokenize("2.5x^2")

    assert [(t.type, t.value) for t in tokens] == [
        (TokenType.NUMBER, "2.5"),
        (TokenType.OPERATOR, "*"),
        (TokenType.VARIABLE, "x"),
        (TokenType.OPERATOR, "^"),
        (TokenType.NUMBER, "2"),
    ]


def test_tokenize_function_call():
    tokens = InfixTokenizer().tokenize("sin(x)")

    assert [t.type for t in tokens] == [
        TokenType.FUNCTION,
        TokenType.LEFT_PAREN,
        TokenType.VARIABLE,
        TokenType.RIGHT_PAREN,
    ]


def test_letters_ending_in_function_name_keep_following_digit():
    tokens = InfixTokenizer().tokenize("sin2")

    assert [(t.type, t.value) for t in tokens] == [(TokenType.VARIABLE, "sin2")]


def test_whitespace_between_digits_joins_number():
    tokens = InfixTokenizer().tokenize("2 3")

    assert [(t.type, t.value) for t in tokens] == [(TokenType.NUMBER, "23")]


def test_exponent_letter_becomes_variable():
    tokens = InfixTokenizer().tokenize("2e5")

    assert [t.value for t in tokens] == ["2", "*", "e", "*", "5"]


@pytest.mark.parametrize("text", ["x # 2", "3 % 2", "x = 1", "2,5"])
def test_unknown_character_raises(text):
    with pytest.raises(ParseError) as exc:
        InfixTokenizer().tokenize(text)
    assert exc.value.code == "1002"


@pytest.mark.parametrize("text", ["1..2", ".5", "5.", "x.5"])
def test_malformed_literal_raises(text):
    with pytest.raises(ParseError) as exc:
        InfixTokenizer().tokenize(text)
    assert exc.value.code == "1003"
