"""Tests for the condition tokenizer."""

import pytest

from shaderperm.conditions.lexer import TokenKind, tokenize, unquote
from shaderperm.errors import ConditionSyntaxError


def _kinds(text):
    return [token.kind for token in tokenize(text)]


def test_tokenize_scenario_condition():
    tokens = tokenize('boolOptA && enumOpt == "a"')
    assert [(token.kind, token.text) for token in tokens] == [
        (TokenKind.NAME, "boolOptA"),
        (TokenKind.OPERATOR, "&&"),
        (TokenKind.NAME, "enumOpt"),
        (TokenKind.OPERATOR, "=="),
        (TokenKind.STRING, '"a"'),
        (TokenKind.END, ""),
    ]


def test_token_positions():
    tokens = tokenize("a || 12")
    assert [token.position for token in tokens] == [0, 2, 5, 7]


def test_keywords():
    assert _kinds("true false truth") == [
        TokenKind.TRUE,
        TokenKind.FALSE,
        TokenKind.NAME,
        TokenKind.END,
    ]


def test_unicode_names():
    tokens = tokenize("été && _x1")
    assert [(token.kind, token.text) for token in tokens[::2]] == [
        (TokenKind.NAME, "été"),
        (TokenKind.NAME, "_x1"),
    ]


def test_two_character_operators_win():
    tokens = tokenize("a<=b!=!c")
    assert [token.text for token in tokens if token.kind is TokenKind.OPERATOR] == [
        "<=",
        "!=",
        "!",
    ]


def test_parentheses():
    assert _kinds("(a)") == [
        TokenKind.LPAREN,
        TokenKind.NAME,
        TokenKind.RPAREN,
        TokenKind.END,
    ]


@pytest.mark.parametrize("text", ["a & b", "a = 1", '"open', "a + 1", "#"])
def test_unexpected_character(text):
    with pytest.raises(ConditionSyntaxError):
        tokenize(text)


def test_unquote_resolves_escapes():
    assert unquote(r'"a\"b"') == 'a"b'
    assert unquote('""') == ""
