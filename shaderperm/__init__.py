from shaderperm.definitions import UNSET, Definition, Unset
from shaderperm.dsl import parse_options
from shaderperm.errors import (
    ConditionSyntaxError,
    ConditionTypeError,
    DslSyntaxError,
    EnumerationError,
    PermutationLimitError,
    ShaderOptionError,
)
from shaderperm.options import (
    BooleanOption,
    EnumOption,
    IntegerOption,
    Option,
    OptionKind,
)
from shaderperm.permutations import (
    Permutation,
    candidate_count,
    generate_permutations,
    permutations_from_text,
)
from shaderperm.pragmas import ShaderInfo, scan_shader_source

__version__ = "0.1.0"


__all__ = [
    "UNSET",
    "Definition",
    "Unset",
    "Option",
    "OptionKind",
    "BooleanOption",
    "EnumOption",
    "IntegerOption",
    "parse_options",
    "Permutation",
    "candidate_count",
    "generate_permutations",
    "permutations_from_text",
    "ShaderInfo",
    "scan_shader_source",
    "ShaderOptionError",
    "DslSyntaxError",
    "ConditionSyntaxError",
    "ConditionTypeError",
    "EnumerationError",
    "PermutationLimitError",
]
