"""
Compilation of typed condition trees into predicates.

A compiled predicate takes the binding of one candidate (a tuple of typed
values indexed by option position) and returns a bool. It reads nothing but
that binding.
"""

import operator
from collections.abc import Callable, Sequence
from typing import Any

from loguru import logger

from shaderperm.conditions.ir import (
    CondBoolOp,
    CondCompare,
    CondExpr,
    CondLiteral,
    CondName,
    CondNot,
)
from shaderperm.conditions.parser import parse_condition
from shaderperm.conditions.type_checker import build_symbols, check_condition
from shaderperm.errors import ConditionTypeError
from shaderperm.options import Binding, Option, Predicate

Evaluator = Callable[[Binding], Any]

COMPARISON_FUNCTIONS: dict[str, Callable[[Any, Any], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}


def compile_expr(node: CondExpr) -> Evaluator:
    """Compile a type-checked node into a function of the binding.

    Args:
        node: Condition node with types and option indices resolved

    Returns:
        Function evaluating the node against a binding

    Raises:
        ConditionTypeError: If the node has not been type checked
    """
    if node.value_type is None:
        raise ConditionTypeError(f"Untyped condition node: {type(node).__name__}")

    if isinstance(node, CondLiteral):
        value = node.value
        return lambda binding: value

    elif isinstance(node, CondName):
        return operator.itemgetter(node.index)

    elif isinstance(node, CondNot):
        operand = compile_expr(node.operand)
        return lambda binding: not operand(binding)

    elif isinstance(node, CondCompare):
        compare = COMPARISON_FUNCTIONS[node.op]
        left = compile_expr(node.left)
        right = compile_expr(node.right)
        return lambda binding: compare(left(binding), right(binding))

    elif isinstance(node, CondBoolOp):
        operands = [compile_expr(operand) for operand in node.operands]
        if node.op == "&&":
            return lambda binding: all(operand(binding) for operand in operands)
        return lambda binding: any(operand(binding) for operand in operands)

    raise ConditionTypeError(f"Unsupported condition node: {type(node).__name__}")


def compile_condition(text: str, options: Sequence[Option]) -> Predicate:
    """Compile condition text against the full list of parsed options.

    Args:
        text: Condition text
        options: All parsed options, in declared order

    Returns:
        Predicate over a binding

    Raises:
        ConditionSyntaxError: If the text does not parse
        ConditionTypeError: If the condition is ill-typed or names an unknown option
    """
    tree = parse_condition(text)
    check_condition(tree, build_symbols(options))
    evaluate = compile_expr(tree)
    logger.debug(f"Compiled condition: {text}")

    def predicate(binding: Binding) -> bool:
        return bool(evaluate(binding))

    return predicate
