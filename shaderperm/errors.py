"""
Exceptions raised while parsing shader options and enumerating permutations.

Every error is detected before enumeration produces any output, so callers
can treat any of these as a fatal configuration problem in the option text.
"""

from typing import Optional


class ShaderOptionError(Exception):
    """Base class for all errors reported by shaderperm.

    The error keeps the bare message and the name of the option it belongs to
    (when known), and formats both into the string representation.

    Examples:
        >>> raise ShaderOptionError("Unknown option: fog", option="useFog")
        ShaderOptionError: Unknown option: fog in option 'useFog'
    """

    def __init__(self, message: str, option: Optional[str] = None):
        """Initialize the exception with a message and optional option name.

        Args:
            message: The error message
            option: Name of the option the error is tied to
        """
        self.message = message
        self.option = option

        location_info = ""
        if option:
            location_info = f" in option '{option}'"

        super().__init__(f"{message}{location_info}")

    def with_option(self, option: str) -> "ShaderOptionError":
        """Create a new error of the same kind attached to another option.

        Args:
            option: Name of the option to associate with the error

        Returns:
            A new error instance with the updated option
        """
        return type(self)(self.message, option)


class DslSyntaxError(ShaderOptionError):
    """Option text, or its argument suffix, does not match the option grammar."""

    def __init__(
        self,
        message: str,
        option: Optional[str] = None,
        fragment: Optional[str] = None,
    ):
        self.fragment = fragment
        super().__init__(message, option)

    def with_option(self, option: str) -> "DslSyntaxError":
        return DslSyntaxError(self.message, option, self.fragment)


class ConditionSyntaxError(ShaderOptionError):
    """A condition's text fails to parse as a boolean expression."""

    def __init__(
        self,
        message: str,
        option: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.position = position
        super().__init__(message, option)

    def with_option(self, option: str) -> "ConditionSyntaxError":
        return ConditionSyntaxError(self.message, option, self.position)


class ConditionTypeError(ShaderOptionError):
    """A condition compares mismatched kinds or references an unknown option."""


class EnumerationError(ShaderOptionError):
    """Internal invariant violated while building candidates or bindings."""


class PermutationLimitError(EnumerationError):
    """The cartesian product is larger than the configured candidate limit."""
