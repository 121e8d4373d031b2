"""Compiler version range engine and toolchain output helpers."""

from .compare import compare_versions
from .compiler import (
    are_compilers_compatible,
    compilers_intersect,
    compilers_intersection,
    expand_compiler_id,
)
from .models import CompilerVersionSpec, IntersectionOutcome, IntersectionResult
from .output import OutputType, OutputTypes, get_output_affixes, set_output_type

__all__ = [
    "CompilerVersionSpec",
    "IntersectionOutcome",
    "IntersectionResult",
    "OutputType",
    "OutputTypes",
    "are_compilers_compatible",
    "compare_versions",
    "compilers_intersect",
    "compilers_intersection",
    "expand_compiler_id",
    "get_output_affixes",
    "set_output_type",
]
