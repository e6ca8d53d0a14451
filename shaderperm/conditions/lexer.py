"""Tokenizer for option conditions."""

import re
from dataclasses import dataclass
from enum import Enum, auto

from shaderperm.errors import ConditionSyntaxError


class TokenKind(Enum):
    """Kinds of condition tokens."""

    NAME = auto()
    INTEGER = auto()
    STRING = auto()
    TRUE = auto()
    FALSE = auto()
    OPERATOR = auto()
    LPAREN = auto()
    RPAREN = auto()
    END = auto()


@dataclass(frozen=True)
class Token:
    """A single token with its offset in the condition text."""

    kind: TokenKind
    text: str
    position: int


# Option names and condition variables, Unicode letters included
IDENTIFIER = r"[^\W\d]\w*"

RESERVED_WORDS = frozenset({"true", "false"})

_TOKEN_PATTERN = re.compile(
    rf"""
    (?P<space>\s+)
    |(?P<string>"[^"\\]*(?:\\.[^"\\]*)*")
    |(?P<integer>\d+)
    |(?P<name>{IDENTIFIER})
    |(?P<operator>&&|\|\||==|!=|<=|>=|<|>|!)
    |(?P<lparen>\()
    |(?P<rparen>\))
    """,
    re.VERBOSE,
)

_KEYWORDS = {"true": TokenKind.TRUE, "false": TokenKind.FALSE}

_STRING_ESCAPES = re.compile(r"\\(.)")


def unquote(text: str) -> str:
    """Strip the quotes of a string token and resolve backslash escapes."""
    return _STRING_ESCAPES.sub(r"\1", text[1:-1])


def tokenize(text: str) -> list[Token]:
    """Split condition text into tokens.

    Args:
        text: Condition text

    Returns:
        Tokens in order, terminated by an END token

    Raises:
        ConditionSyntaxError: If the text contains an unrecognized character
    """
    tokens: list[Token] = []
    position = 0
    while position < len(text):
        match = _TOKEN_PATTERN.match(text, position)
        if not match:
            raise ConditionSyntaxError(
                f"Unexpected character {text[position]!r} at offset {position}",
                position=position,
            )

        group = match.lastgroup
        lexeme = match.group()
        if group == "name":
            kind = _KEYWORDS.get(lexeme, TokenKind.NAME)
            tokens.append(Token(kind, lexeme, position))
        elif group == "integer":
            tokens.append(Token(TokenKind.INTEGER, lexeme, position))
        elif group == "string":
            tokens.append(Token(TokenKind.STRING, lexeme, position))
        elif group == "operator":
            tokens.append(Token(TokenKind.OPERATOR, lexeme, position))
        elif group == "lparen":
            tokens.append(Token(TokenKind.LPAREN, lexeme, position))
        elif group == "rparen":
            tokens.append(Token(TokenKind.RPAREN, lexeme, position))
        position = match.end()

    tokens.append(Token(TokenKind.END, "", position))
    return tokens
