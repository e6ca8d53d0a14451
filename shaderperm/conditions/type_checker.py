"""
Type checking for option conditions.

Resolves every option name to its position in the binding and assigns a
value type to every node, rejecting mismatched comparisons and logical
operators applied to non-boolean operands.
"""

from collections.abc import Sequence

from shaderperm.conditions.ir import (
    ORDERING_OPERATORS,
    CondBoolOp,
    CondCompare,
    CondExpr,
    CondLiteral,
    CondName,
    CondNot,
    ValueType,
)
from shaderperm.errors import ConditionTypeError
from shaderperm.options import Option, OptionKind

KIND_VALUE_TYPES: dict[OptionKind, ValueType] = {
    OptionKind.BOOLEAN: ValueType.BOOL,
    OptionKind.ENUM: ValueType.STRING,
    OptionKind.INTEGER: ValueType.INT,
}

# Symbol table entry: option position and the type it binds
Symbol = tuple[int, ValueType]


def build_symbols(options: Sequence[Option]) -> dict[str, Symbol]:
    """Build the symbol table for all parsed options.

    Args:
        options: Options in declared order

    Returns:
        Dictionary mapping option names to (binding index, value type)
    """
    return {
        option.name: (index, KIND_VALUE_TYPES[option.kind])
        for index, option in enumerate(options)
    }


class ConditionTypeChecker:
    """Visitor assigning value types to condition nodes."""

    def __init__(self, symbols: dict[str, Symbol]):
        """Initialize the type checker.

        Args:
            symbols: Dictionary of option names to (binding index, value type)
        """
        self.symbols = symbols

    def visit(self, node: CondExpr) -> ValueType:
        """Type a node and its children, returning the node's type."""
        visitor = getattr(self, f"visit_{type(node).__name__}", self.generic_visit)
        node.value_type = visitor(node)
        return node.value_type

    def generic_visit(self, node: CondExpr) -> ValueType:
        raise ConditionTypeError(f"Cannot determine type for: {type(node).__name__}")

    def visit_CondLiteral(self, node: CondLiteral) -> ValueType:
        if isinstance(node.value, bool):
            return ValueType.BOOL
        elif isinstance(node.value, int):
            return ValueType.INT
        elif isinstance(node.value, str):
            return ValueType.STRING
        raise ConditionTypeError(
            f"Unsupported literal type: {type(node.value).__name__}"
        )

    def visit_CondName(self, node: CondName) -> ValueType:
        if node.name not in self.symbols:
            raise ConditionTypeError(f"Undefined option: {node.name}")
        node.index, value_type = self.symbols[node.name]
        return value_type

    def visit_CondNot(self, node: CondNot) -> ValueType:
        operand_type = self.visit(node.operand)
        if operand_type is not ValueType.BOOL:
            raise ConditionTypeError(
                f"Operator '!' requires a bool operand, got {operand_type.value}"
            )
        return ValueType.BOOL

    def visit_CondCompare(self, node: CondCompare) -> ValueType:
        left_type = self.visit(node.left)
        right_type = self.visit(node.right)
        if left_type is not right_type:
            raise ConditionTypeError(
                f"Cannot compare {left_type.value} with {right_type.value} "
                f"using '{node.op}'"
            )
        if node.op in ORDERING_OPERATORS and left_type is not ValueType.INT:
            raise ConditionTypeError(
                f"Operator '{node.op}' requires int operands, got {left_type.value}"
            )
        return ValueType.BOOL

    def visit_CondBoolOp(self, node: CondBoolOp) -> ValueType:
        for operand in node.operands:
            operand_type = self.visit(operand)
            if operand_type is not ValueType.BOOL:
                raise ConditionTypeError(
                    f"Operator '{node.op}' requires bool operands, "
                    f"got {operand_type.value}"
                )
        return ValueType.BOOL


def check_condition(node: CondExpr, symbols: dict[str, Symbol]) -> None:
    """Type check a condition tree in place.

    Raises:
        ConditionTypeError: If the tree is ill-typed or does not yield a bool
    """
    result_type = ConditionTypeChecker(symbols).visit(node)
    if result_type is not ValueType.BOOL:
        raise ConditionTypeError(
            f"Condition must evaluate to bool, got {result_type.value}"
        )
