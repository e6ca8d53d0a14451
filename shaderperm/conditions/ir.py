"""Syntax tree for option conditions."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ValueType(Enum):
    """Type of a condition sub-expression."""

    BOOL = "bool"
    STRING = "string"
    INT = "int"


# Expressions


@dataclass
class CondExpr:
    """Base for all condition expressions.

    ``value_type`` is None until the type checker has visited the node.
    """

    position: int

    # Set by the type checker
    value_type: ValueType | None = None


@dataclass
class CondLiteral(CondExpr):
    """Boolean, integer or string literal."""

    value: Any = None


@dataclass
class CondName(CondExpr):
    """Reference to an option by name."""

    name: str = ""

    # Option position in the binding, set by the type checker
    index: int | None = None


@dataclass
class CondNot(CondExpr):
    """Logical negation."""

    operand: CondExpr | None = None


@dataclass
class CondCompare(CondExpr):
    """Equality or ordering comparison."""

    op: str = "=="
    left: CondExpr | None = None
    right: CondExpr | None = None


@dataclass
class CondBoolOp(CondExpr):
    """Logical ``&&`` or ``||`` over two or more operands."""

    op: str = "&&"
    operands: list[CondExpr] | None = None


EQUALITY_OPERATORS = ("==", "!=")
ORDERING_OPERATORS = ("<", "<=", ">", ">=")
LOGICAL_OPERATORS = ("&&", "||")
