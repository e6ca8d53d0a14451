"""Tests for the option models."""

from shaderperm.definitions import UNSET, Definition
from shaderperm.options import BooleanOption, EnumOption, IntegerOption, OptionKind


class TestBooleanOption:
    """Tests for boolean options."""

    def test_domain(self):
        option = BooleanOption("fog")
        assert option.domain() == (UNSET, Definition("fog"))

    def test_domain_is_the_same_when_conditional(self):
        option = BooleanOption("fog", condition="lights > 0")
        assert option.domain() == (UNSET, Definition("fog"))

    def test_bind(self):
        option = BooleanOption("fog")
        assert option.bind(Definition("fog")) is True
        assert option.bind(UNSET) is False


class TestEnumOption:
    """Tests for enumeration options."""

    def test_domain_keeps_declared_order(self):
        option = EnumOption("quality", ["high", "low", "high"])
        assert option.domain() == (
            Definition("quality", "high"),
            Definition("quality", "low"),
            Definition("quality", "high"),
        )

    def test_conditional_domain_ends_with_unset(self):
        option = EnumOption("quality", ["low", "high"], condition="fog")
        domain = option.domain()
        assert len(domain) == 3
        assert domain[-1] == UNSET

    def test_bind(self):
        option = EnumOption("quality", ["low", "high"])
        assert option.bind(Definition("quality", "high")) == "high"
        assert option.bind(UNSET) == ""


class TestIntegerOption:
    """Tests for integer range options."""

    def test_domain_is_half_open(self):
        option = IntegerOption("lights", 1, 4)
        assert option.domain() == (
            Definition("lights", "1"),
            Definition("lights", "2"),
            Definition("lights", "3"),
        )

    def test_conditional_domain_ends_with_unset(self):
        option = IntegerOption("lights", 0, 2, condition="fog")
        assert option.domain() == (
            Definition("lights", "0"),
            Definition("lights", "1"),
            UNSET,
        )

    def test_bind(self):
        option = IntegerOption("lights", 1, 4)
        assert option.bind(Definition("lights", "3")) == 3
        assert option.bind(UNSET) == 0


def test_kind_defaults():
    """Unset options read as the default value of their kind."""
    assert OptionKind.BOOLEAN.default is False
    assert OptionKind.ENUM.default == ""
    assert OptionKind.INTEGER.default == 0


def test_kind_is_not_an_init_argument():
    option = IntegerOption("lights", 1, 4, condition="fog")
    assert option.kind is OptionKind.INTEGER
    assert option.is_conditional
    assert not BooleanOption("fog").is_conditional
