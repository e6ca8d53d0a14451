"""Command line interface for shaderperm.

This module provides commands for listing the shader variant permutations
described by an option list, either given directly or declared through
pragmas in a shader source file.
"""

import json
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Optional, TypeVar, cast

import typer
from loguru import logger

from shaderperm.config import Settings, load_settings
from shaderperm.dsl import parse_options
from shaderperm.errors import ShaderOptionError
from shaderperm.options import Option
from shaderperm.permutations import Permutation, candidate_count, generate_permutations
from shaderperm.pragmas import scan_shader_source

F = TypeVar("F", bound=Callable[..., Any])


def typed_command(app_command: Any) -> Callable[[F], F]:
    """Wrap typer command with proper typing for mypy."""

    def decorator(func: F) -> F:
        return cast(F, app_command(func))

    return decorator


app = typer.Typer(
    name="shaderperm",
    help=(
        "Enumerate the preprocessor definitions of every valid shader variant. "
        "Commands: permutations, count, scan."
    ),
    add_completion=False,
)

OUTPUT_FORMATS = ("plain", "flags", "json")


def _configure(verbose: bool) -> Settings:
    """Load settings and route log messages to stderr at the chosen level."""
    settings = load_settings()
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else settings.log_level)
    return settings


def _format_permutations(
    permutations: Sequence[Permutation], output_format: str, flag_prefix: str
) -> str:
    """Render permutations for printing.

    Args:
        permutations: Permutations to render
        output_format: One of plain, flags or json
        flag_prefix: Prefix for compiler flags

    Returns:
        Rendered text
    """
    if output_format == "json":
        records = [
            {
                "key": permutation.key,
                "defines": {d.name: d.value for d in permutation.definitions},
            }
            for permutation in permutations
        ]
        return json.dumps(records, indent=2)
    elif output_format == "flags":
        return "\n".join(" ".join(p.flags(flag_prefix)) for p in permutations)
    return "\n".join(f"{p.key}: {p}" for p in permutations)


def _enumerate(
    options: list[Option], limit: int | None, settings: Settings
) -> list[Permutation]:
    effective_limit = limit if limit is not None else settings.max_candidates
    if effective_limit is not None and effective_limit <= 0:
        effective_limit = None
    return generate_permutations(options, effective_limit)


def _check_format(output_format: str) -> None:
    if output_format not in OUTPUT_FORMATS:
        logger.error(
            f"Unknown format: {output_format}. Use one of {', '.join(OUTPUT_FORMATS)}"
        )
        raise typer.Exit(1)


FORMAT_OPTION = typer.Option(
    "plain", "--format", "-f", help="Output format (plain, flags, json)"
)
LIMIT_OPTION = typer.Option(
    None, "--limit", "-l", help="Maximum number of candidates (0 for unlimited)"
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Log debug messages")


@typed_command(app.command("permutations"))
def list_permutations(
    option_text: str = typer.Argument(
        ..., help="Option list, e.g. 'useFog, lights 1..4'"
    ),
    output_format: str = FORMAT_OPTION,
    limit: Optional[int] = LIMIT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print every valid permutation of an option list.

    Example: shaderperm permutations "useFog, quality low | high (useFog)"
    """
    settings = _configure(verbose)
    _check_format(output_format)
    try:
        permutations = _enumerate(parse_options(option_text), limit, settings)
    except ShaderOptionError as e:
        logger.error(f"Invalid options: {e}")
        raise typer.Exit(1) from e

    logger.info(f"Found {len(permutations)} permutations")
    typer.echo(_format_permutations(permutations, output_format, settings.flag_prefix))


@typed_command(app.command("count"))
def count_permutations(
    option_text: str = typer.Argument(..., help="Option list"),
    limit: Optional[int] = LIMIT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print the number of candidates and of valid permutations."""
    settings = _configure(verbose)
    try:
        options = parse_options(option_text)
        total = candidate_count(options)
        valid = len(_enumerate(options, limit, settings))
    except ShaderOptionError as e:
        logger.error(f"Invalid options: {e}")
        raise typer.Exit(1) from e

    typer.echo(f"candidates: {total}")
    typer.echo(f"permutations: {valid}")


@typed_command(app.command("scan"))
def scan_shader(
    shader_file: Path = typer.Argument(..., help="Shader source declaring pragmas"),
    output_format: str = FORMAT_OPTION,
    limit: Optional[int] = LIMIT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print the permutations declared by a shader's option pragmas.

    Example: shaderperm scan shaders/lit.hlsl --format flags
    """
    settings = _configure(verbose)
    _check_format(output_format)
    try:
        source = shader_file.read_text()
    except OSError as e:
        logger.error(f"Failed to read shader file: {e}")
        raise typer.Exit(1) from e

    try:
        info = scan_shader_source(source)
        permutations = _enumerate(info.options, limit, settings)
    except ShaderOptionError as e:
        logger.error(f"Invalid options in {shader_file}: {e}")
        raise typer.Exit(1) from e

    logger.info(f"Target: {info.target}, entry point: {info.entry_point}")
    if output_format != "json":
        typer.echo(f"# target: {info.target or '-'}")
        typer.echo(f"# entry: {info.entry_point}")
    typer.echo(_format_permutations(permutations, output_format, settings.flag_prefix))


if __name__ == "__main__":
    app()
