"""
Enumeration of valid option permutations.

The candidates are the cartesian product of all option domains in declared
order, the last option varying fastest. A candidate is kept when every option
that is set in it and carries a condition accepts the candidate's binding.
"""

import itertools
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from loguru import logger

from shaderperm.definitions import UNSET, Choice, Definition
from shaderperm.dsl import parse_options
from shaderperm.errors import EnumerationError, PermutationLimitError
from shaderperm.options import (
    Binding,
    BooleanOption,
    EnumOption,
    IntegerOption,
    Option,
)

Candidate = tuple[Choice, ...]


@dataclass(frozen=True)
class Permutation:
    """One valid combination of preprocessor definitions.

    Attributes:
        definitions: Definitions in declared option order, unset options omitted
        key: Position of the combination in the full candidate product
    """

    definitions: tuple[Definition, ...]
    key: int

    def __str__(self) -> str:
        return ", ".join(str(definition) for definition in self.definitions)

    def flags(self, prefix: str = "-D") -> list[str]:
        """Render the definitions as compiler flags."""
        return [definition.to_flag(prefix) for definition in self.definitions]

    def macros(self) -> list[tuple[str, str]]:
        """Render the definitions as ``(name, value)`` macro pairs."""
        return [definition.as_macro() for definition in self.definitions]


def domains(options: Sequence[Option]) -> list[tuple[Choice, ...]]:
    """Compute the domain of every option in declared order."""
    return [option.domain() for option in options]


def candidate_count(options: Sequence[Option]) -> int:
    """Number of candidates before filtering: the product of domain sizes."""
    return math.prod(len(domain) for domain in domains(options))


def iter_candidates(options: Sequence[Option]) -> Iterator[tuple[int, Candidate]]:
    """Yield every candidate with its key, in enumeration order.

    Args:
        options: Options in declared order

    Yields:
        Tuples of (key, candidate), one choice per option
    """
    yield from enumerate(itertools.product(*domains(options)))


def make_binding(options: Sequence[Option], candidate: Candidate) -> Binding:
    """Build the typed values seen by conditions for one candidate.

    Unset options bind the default value of their kind.

    Args:
        options: Options in declared order
        candidate: One choice per option

    Returns:
        Tuple of typed values indexed by option position

    Raises:
        EnumerationError: If an option has an unknown kind or the candidate
            does not match the options
    """
    if len(candidate) != len(options):
        raise EnumerationError(
            f"Candidate has {len(candidate)} choices for {len(options)} options"
        )

    values = []
    for option, choice in zip(options, candidate):
        if not isinstance(option, (BooleanOption, EnumOption, IntegerOption)):
            raise EnumerationError(
                f"Unsupported option type: {type(option).__name__}", option.name
            )
        values.append(option.bind(choice))
    return tuple(values)


def is_valid(options: Sequence[Option], candidate: Candidate, binding: Binding) -> bool:
    """Check every set, conditional option of a candidate against its binding."""
    for option, choice in zip(options, candidate):
        if choice == UNSET or option.predicate is None:
            continue
        if not option.predicate(binding):
            return False
    return True


def generate_permutations(
    options: Sequence[Option], limit: int | None = None
) -> list[Permutation]:
    """Enumerate the valid permutations of a parsed option list.

    Args:
        options: Options in declared order, with conditions compiled
        limit: Maximum number of candidates to enumerate, None for no limit

    Returns:
        Valid permutations in enumeration order

    Raises:
        PermutationLimitError: If the candidate count exceeds ``limit``
        EnumerationError: If a candidate cannot be bound
    """
    total = candidate_count(options)
    if limit is not None and total > limit:
        raise PermutationLimitError(
            f"{total} candidates exceed the limit of {limit}"
        )
    logger.debug(f"Enumerating {total} candidates for {len(options)} options")

    permutations = []
    for key, candidate in iter_candidates(options):
        binding = make_binding(options, candidate)
        if not is_valid(options, candidate, binding):
            continue
        definitions = tuple(
            choice for choice in candidate if isinstance(choice, Definition)
        )
        permutations.append(Permutation(definitions, key))

    logger.debug(f"Kept {len(permutations)} of {total} candidates")
    return permutations


def permutations_from_text(text: str, limit: int | None = None) -> list[Permutation]:
    """Parse option list text and enumerate its valid permutations."""
    return generate_permutations(parse_options(text), limit)
