"""
Preprocessor definitions produced for each shader variant.

A ``Definition`` is one concrete preprocessor symbol, optionally carrying a
value. ``UNSET`` is a separate tagged value meaning "this option contributes
nothing to the combination"; it lives only in domains and candidates and is
never part of a reported permutation.
"""

import re
from dataclasses import dataclass
from typing import Final

from shaderperm.errors import DslSyntaxError

_DEFINITION_PATTERN = re.compile(
    r"^\s*(?P<name>\w+)\s*(?:=\s*(?P<value>\S(?:.*\S)?)\s*)?$"
)


@dataclass(frozen=True)
class Definition:
    """A preprocessor symbol, e.g. ``USE_FOG`` or ``LIGHT_COUNT = 4``.

    Attributes:
        name: Symbol name
        value: Symbol value, or None for value-less symbols
    """

    name: str
    value: str | None = None

    def __str__(self) -> str:
        if self.value is None:
            return self.name
        return f"{self.name} = {self.value}"

    @classmethod
    def parse(cls, text: str) -> "Definition":
        """Parse the textual rendering of a definition.

        Args:
            text: ``NAME`` or ``NAME = VALUE``

        Returns:
            The parsed definition

        Raises:
            DslSyntaxError: If the text is not a rendered definition
        """
        match = _DEFINITION_PATTERN.match(text)
        if not match:
            raise DslSyntaxError(f"Invalid definition: {text}", fragment=text)
        return cls(match.group("name"), match.group("value"))

    def to_flag(self, prefix: str = "-D") -> str:
        """Render the definition as a compiler command line flag."""
        if self.value is None:
            return f"{prefix}{self.name}"
        return f"{prefix}{self.name}={self.value}"

    def as_macro(self) -> tuple[str, str]:
        """Return the ``(name, value)`` pair used by macro tables."""
        return self.name, self.value or ""


class Unset:
    """Marker for an option that contributes no definition to a candidate."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Unset)

    def __hash__(self) -> int:
        return hash(Unset)

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = Unset()

# One entry of a domain or candidate
Choice = Definition | Unset
