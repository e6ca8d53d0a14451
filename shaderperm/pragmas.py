"""
Shader source scanning.

Shaders declare their build configuration with pragma lines::

    #pragma target ps_5_0
    #pragma entry main
    #pragma option useFog, quality low | high (useFog)

Multiple ``option`` pragmas are concatenated in source order.
"""

import re
from dataclasses import dataclass, field

from loguru import logger

from shaderperm.dsl import parse_options, split_option_list
from shaderperm.errors import DslSyntaxError
from shaderperm.options import Option

PRAGMA_PATTERN = re.compile(
    r"^\s*#pragma\s+(?P<directive>target|entry|option)\s+(?P<rest>.*?)\s*$"
)

# Typed declarations such as `bool useFog` or `int lights {1..4}`
TYPED_OPTION_PATTERN = re.compile(r"^(?P<type>bool|enum|int)\s+\w+\s*(?:\{.*)?$")


@dataclass
class ShaderInfo:
    """Build configuration declared by a shader source.

    Attributes:
        target: Compiler target profile, if declared
        entry_point: Entry point function name
        option_text: Option list text from all option pragmas
        options: Parsed options
    """

    target: str | None = None
    entry_point: str = "main"
    option_text: str = ""
    options: list[Option] = field(default_factory=list)


def _reject_typed_options(rest: str) -> None:
    for fragment in split_option_list(rest):
        match = TYPED_OPTION_PATTERN.match(fragment.strip())
        if match:
            raise DslSyntaxError(
                f"Typed option declarations are not supported: {fragment.strip()}. "
                f"Drop the '{match.group('type')}' keyword and use the option list "
                "form, e.g. 'useFog', 'quality low | high' or 'lights 1..4'",
                fragment=fragment.strip(),
            )


def scan_shader_source(source: str) -> ShaderInfo:
    """Collect pragma declarations from shader source text.

    Args:
        source: Shader source code

    Returns:
        The declared build configuration, with options parsed

    Raises:
        ShaderOptionError: If the declared options are invalid
    """
    info = ShaderInfo()
    option_fragments: list[str] = []

    for line in source.splitlines():
        match = PRAGMA_PATTERN.match(line)
        if not match:
            continue

        directive, rest = match.group("directive"), match.group("rest")
        if directive == "target":
            info.target = rest
        elif directive == "entry":
            info.entry_point = rest
        elif rest:
            _reject_typed_options(rest)
            option_fragments.append(rest)

    info.option_text = ", ".join(option_fragments)
    info.options = parse_options(info.option_text)
    logger.debug(
        f"Scanned shader: target={info.target}, entry={info.entry_point}, "
        f"{len(info.options)} options"
    )
    return info
