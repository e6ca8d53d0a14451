"""Boolean conditions gating when an option may be set."""

from shaderperm.conditions.compiler import compile_condition
from shaderperm.conditions.parser import parse_condition

__all__ = ["compile_condition", "parse_condition"]
