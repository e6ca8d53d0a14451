"""
Recursive-descent parser for option conditions.

Precedence from lowest to highest: ``||``, ``&&``, comparisons, ``!``,
then parenthesized expressions, literals and option names.
"""

from loguru import logger

from shaderperm.conditions.ir import (
    EQUALITY_OPERATORS,
    ORDERING_OPERATORS,
    CondBoolOp,
    CondCompare,
    CondExpr,
    CondLiteral,
    CondName,
    CondNot,
)
from shaderperm.conditions.lexer import Token, TokenKind, tokenize, unquote
from shaderperm.errors import ConditionSyntaxError


class ConditionParser:
    """Parser over the token stream of a single condition."""

    def __init__(self, text: str):
        self.text = text
        self.tokens = tokenize(text)
        self.index = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.index]

    def _advance(self) -> Token:
        token = self.tokens[self.index]
        if token.kind is not TokenKind.END:
            self.index += 1
        return token

    def _at_operator(self, *operators: str) -> bool:
        token = self.current
        return token.kind is TokenKind.OPERATOR and token.text in operators

    def _error(self, message: str) -> ConditionSyntaxError:
        token = self.current
        found = "end of condition" if token.kind is TokenKind.END else repr(token.text)
        return ConditionSyntaxError(
            f"{message}, found {found} at offset {token.position} in {self.text!r}",
            position=token.position,
        )

    def parse(self) -> CondExpr:
        """Parse the whole condition.

        Returns:
            Root of the untyped syntax tree

        Raises:
            ConditionSyntaxError: If the text is not a valid condition
        """
        if self.current.kind is TokenKind.END:
            raise self._error("Expected an expression")
        expr = self._parse_logical("||", self._parse_and)
        if self.current.kind is not TokenKind.END:
            raise self._error("Unexpected token")
        return expr

    def _parse_and(self) -> CondExpr:
        return self._parse_logical("&&", self._parse_comparison)

    def _parse_logical(self, op: str, parse_operand) -> CondExpr:
        first = parse_operand()
        operands = [first]
        while self._at_operator(op):
            self._advance()
            operands.append(parse_operand())
        if len(operands) == 1:
            return first
        return CondBoolOp(first.position, op=op, operands=operands)

    def _parse_comparison(self) -> CondExpr:
        left = self._parse_unary()
        if self._at_operator(*EQUALITY_OPERATORS, *ORDERING_OPERATORS):
            op = self._advance().text
            right = self._parse_unary()
            # Comparisons do not chain
            if self._at_operator(*EQUALITY_OPERATORS, *ORDERING_OPERATORS):
                raise self._error("Comparisons cannot be chained")
            return CondCompare(left.position, op=op, left=left, right=right)
        return left

    def _parse_unary(self) -> CondExpr:
        if self._at_operator("!"):
            token = self._advance()
            return CondNot(token.position, operand=self._parse_unary())
        return self._parse_primary()

    def _parse_primary(self) -> CondExpr:
        token = self.current
        if token.kind is TokenKind.LPAREN:
            self._advance()
            expr = self._parse_logical("||", self._parse_and)
            if self.current.kind is not TokenKind.RPAREN:
                raise self._error("Expected ')'")
            self._advance()
            return expr
        if token.kind is TokenKind.TRUE or token.kind is TokenKind.FALSE:
            self._advance()
            return CondLiteral(token.position, value=token.kind is TokenKind.TRUE)
        if token.kind is TokenKind.INTEGER:
            self._advance()
            return CondLiteral(token.position, value=int(token.text))
        if token.kind is TokenKind.STRING:
            self._advance()
            return CondLiteral(token.position, value=unquote(token.text))
        if token.kind is TokenKind.NAME:
            self._advance()
            return CondName(token.position, name=token.text)
        raise self._error("Expected an expression")


def parse_condition(text: str) -> CondExpr:
    """Parse condition text into an untyped syntax tree."""
    logger.debug(f"Parsing condition: {text}")
    return ConditionParser(text).parse()
