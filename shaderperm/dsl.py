"""
Parser for the option description language.

The input is a comma separated list of options::

    useFog, quality low | high (useFog), lights 1..4

An option without arguments is boolean, ``a | b | c`` arguments make an
enumeration and ``FROM..TO`` arguments make a half-open integer range. A
parenthesized suffix is the option's condition.
"""

import re

from loguru import logger

from shaderperm.conditions import compile_condition
from shaderperm.conditions.lexer import IDENTIFIER, RESERVED_WORDS
from shaderperm.errors import DslSyntaxError, ShaderOptionError
from shaderperm.options import BooleanOption, EnumOption, IntegerOption, Option

OPTION_PATTERN = re.compile(
    rf"^(?P<name>{IDENTIFIER})(?P<arguments>[^(]*)(?:\((?P<condition>.*)\))?$",
    re.DOTALL,
)
ENUM_ARGUMENTS_PATTERN = re.compile(r"^\w+(?:\s*\|\s*\w+)*$")
ENUM_VALUE_PATTERN = re.compile(r"\w+")
INTEGER_ARGUMENTS_PATTERN = re.compile(r"^(?P<start>\d+)\s*\.\.\s*(?P<stop>\d+)$")


def split_option_list(text: str) -> list[str]:
    """Split option list text on commas outside parentheses and strings.

    Args:
        text: Option list text

    Returns:
        Raw option fragments, untrimmed
    """
    fragments: list[str] = []
    depth = 0
    in_string = False
    start = 0
    index = 0
    while index < len(text):
        char = text[index]
        if in_string:
            if char == "\\":
                index += 1
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        elif char == "," and depth == 0:
            fragments.append(text[start:index])
            start = index + 1
        index += 1
    fragments.append(text[start:])
    return fragments


def _parse_arguments(name: str, arguments: str) -> Option:
    if not arguments:
        return BooleanOption(name)

    if ENUM_ARGUMENTS_PATTERN.match(arguments):
        return EnumOption(name, ENUM_VALUE_PATTERN.findall(arguments))

    match = INTEGER_ARGUMENTS_PATTERN.match(arguments)
    if match:
        start, stop = int(match.group("start")), int(match.group("stop"))
        if stop <= start:
            raise DslSyntaxError(
                f"Integer range must not be empty: {arguments}",
                option=name,
                fragment=arguments,
            )
        return IntegerOption(name, start, stop)

    raise DslSyntaxError(
        f"Invalid option arguments: {arguments}", option=name, fragment=arguments
    )


def parse_option(text: str) -> Option:
    """Parse a single option without compiling its condition.

    Args:
        text: One option fragment, e.g. ``lights 1..4 (useLights)``

    Returns:
        The parsed option

    Raises:
        DslSyntaxError: If the text is not a valid option
    """
    stripped = text.strip()
    match = OPTION_PATTERN.match(stripped)
    if not match:
        raise DslSyntaxError(f"Invalid option: {stripped}", fragment=stripped)

    name = match.group("name")
    if name in RESERVED_WORDS:
        raise DslSyntaxError(
            f"Reserved word cannot name an option: {name}",
            option=name,
            fragment=stripped,
        )

    option = _parse_arguments(name, match.group("arguments").strip())

    condition = (match.group("condition") or "").strip()
    if condition:
        option.condition = condition

    return option


def parse_options(text: str) -> list[Option]:
    """Parse option list text and compile every condition.

    Args:
        text: Option list text

    Returns:
        Options in declared order, each conditional option with its predicate

    Raises:
        DslSyntaxError: If an option is malformed or a name is declared twice
        ConditionSyntaxError: If a condition does not parse
        ConditionTypeError: If a condition is ill-typed or names an unknown option
    """
    logger.debug("Parsing option list")
    if not text.strip():
        return []

    options: list[Option] = []
    seen: set[str] = set()
    for fragment in split_option_list(text):
        option = parse_option(fragment)
        if option.name in seen:
            raise DslSyntaxError(
                f"Duplicate option: {option.name}",
                option=option.name,
                fragment=fragment.strip(),
            )
        seen.add(option.name)
        options.append(option)
        logger.debug(f"Parsed {option.kind.name.lower()} option: {option.name}")

    for option in options:
        if option.condition is None:
            continue
        try:
            option.predicate = compile_condition(option.condition, options)
        except ShaderOptionError as e:
            raise e.with_option(option.name) from e

    logger.debug(f"Parsed {len(options)} options")
    return options
