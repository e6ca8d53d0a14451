"""
Shader option models.

Each option knows its name, its optional condition and how to compute its
domain: the ordered choices it may contribute to a candidate.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from shaderperm.definitions import UNSET, Choice, Definition

# Typed option values indexed by option position
Binding = tuple[Any, ...]
Predicate = Callable[[Binding], bool]


class OptionKind(Enum):
    """Kind of an option, with the value type it binds in conditions."""

    BOOLEAN = "bool"
    ENUM = "string"
    INTEGER = "int"

    @property
    def default(self) -> Any:
        """Value bound for an option that is unset in a candidate."""
        return _KIND_DEFAULTS[self]


_KIND_DEFAULTS: dict[OptionKind, Any] = {
    OptionKind.BOOLEAN: False,
    OptionKind.ENUM: "",
    OptionKind.INTEGER: 0,
}


@dataclass
class Option(ABC):
    """Base for all shader options.

    Attributes:
        name: Option name, also the preprocessor symbol name
        condition: Condition text, or None if the option is unconditional
        predicate: Compiled condition, filled in by the parser
    """

    name: str
    condition: str | None = field(default=None, kw_only=True)
    predicate: Predicate | None = field(
        default=None, kw_only=True, repr=False, compare=False
    )

    kind: OptionKind = field(init=False, repr=False)

    @property
    def is_conditional(self) -> bool:
        return self.condition is not None

    @abstractmethod
    def domain(self) -> tuple[Choice, ...]:
        """Compute the ordered choices this option contributes."""

    @abstractmethod
    def bind(self, choice: Choice) -> Any:
        """Map a chosen domain entry to the value seen by conditions."""

    def _conditional_tail(self) -> tuple[Choice, ...]:
        return (UNSET,) if self.is_conditional else ()


@dataclass
class BooleanOption(Option):
    """Option that is either defined or absent."""

    kind: OptionKind = field(default=OptionKind.BOOLEAN, init=False, repr=False)

    def domain(self) -> tuple[Choice, ...]:
        return (UNSET, Definition(self.name))

    def bind(self, choice: Choice) -> bool:
        return choice != UNSET


@dataclass
class EnumOption(Option):
    """Option defined to one of a list of identifiers.

    Attributes:
        values: Allowed values in declared order, duplicates kept
    """

    values: list[str] = field(default_factory=list)
    kind: OptionKind = field(default=OptionKind.ENUM, init=False, repr=False)

    def domain(self) -> tuple[Choice, ...]:
        present = tuple(Definition(self.name, value) for value in self.values)
        return present + self._conditional_tail()

    def bind(self, choice: Choice) -> str:
        if isinstance(choice, Definition):
            return choice.value or ""
        return self.kind.default


@dataclass
class IntegerOption(Option):
    """Option defined to an integer from a half-open range.

    Attributes:
        start: First value, inclusive
        stop: Last value, exclusive
    """

    start: int = 0
    stop: int = 0
    kind: OptionKind = field(default=OptionKind.INTEGER, init=False, repr=False)

    def domain(self) -> tuple[Choice, ...]:
        present = tuple(
            Definition(self.name, str(value)) for value in range(self.start, self.stop)
        )
        return present + self._conditional_tail()

    def bind(self, choice: Choice) -> int:
        if isinstance(choice, Definition) and choice.value is not None:
            return int(choice.value)
        return self.kind.default
