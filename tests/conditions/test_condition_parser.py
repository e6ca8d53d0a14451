"""Tests for the condition parser."""

import pytest

from shaderperm.conditions.ir import (
    CondBoolOp,
    CondCompare,
    CondLiteral,
    CondName,
    CondNot,
)
from shaderperm.conditions.parser import parse_condition
from shaderperm.errors import ConditionSyntaxError


class TestPrecedence:
    """Tests for operator precedence and grouping."""

    def test_and_binds_tighter_than_or(self):
        tree = parse_condition("a || b && c")
        assert isinstance(tree, CondBoolOp)
        assert tree.op == "||"
        assert isinstance(tree.operands[0], CondName)
        assert isinstance(tree.operands[1], CondBoolOp)
        assert tree.operands[1].op == "&&"

    def test_comparison_binds_tighter_than_and(self):
        tree = parse_condition('a && e == "x"')
        assert tree.op == "&&"
        compare = tree.operands[1]
        assert isinstance(compare, CondCompare)
        assert compare.op == "=="
        assert compare.left.name == "e"
        assert compare.right.value == "x"

    def test_parentheses_group(self):
        tree = parse_condition("(a || b) && c")
        assert tree.op == "&&"
        assert tree.operands[0].op == "||"

    def test_same_operator_flattens(self):
        tree = parse_condition("a && b && c")
        assert [operand.name for operand in tree.operands] == ["a", "b", "c"]

    def test_not(self):
        tree = parse_condition("!!a")
        assert isinstance(tree, CondNot)
        assert isinstance(tree.operand, CondNot)
        assert tree.operand.operand.name == "a"


class TestLiterals:
    """Tests for literal parsing."""

    @pytest.mark.parametrize(
        "text,value",
        [("true", True), ("false", False), ("42", 42), ('"high"', "high")],
    )
    def test_literal(self, text, value):
        tree = parse_condition(text)
        assert isinstance(tree, CondLiteral)
        assert tree.value == value
        assert type(tree.value) is type(value)


class TestSyntaxErrors:
    """Tests for rejected conditions."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "a &&",
            "(a",
            "a)",
            "a b",
            "== 1",
            "a == b == c",
            "()",
        ],
    )
    def test_invalid_condition(self, text):
        with pytest.raises(ConditionSyntaxError):
            parse_condition(text)

    def test_error_reports_offset(self):
        with pytest.raises(ConditionSyntaxError) as excinfo:
            parse_condition("a && && b")
        assert excinfo.value.position == 5
        assert "offset 5" in str(excinfo.value)
