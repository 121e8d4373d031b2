"""Data models for compiler version specifications."""

from dataclasses import dataclass
from enum import Enum


class IntersectionOutcome(Enum):
    """Outcome of intersecting two compiler version specifications."""
    EMPTY = "empty"
    UNREPRESENTABLE = "unrepresentable"
    VALUE = "value"


@dataclass(frozen=True)
class CompilerVersionSpec:
    """Compiler name with an inclusive version range.

    ``max_version == ""`` means no upper bound; ``min_version`` equal to
    ``Grammar.any_version`` ("0.0.0") means no lower bound.
    """
    name: str
    min_version: str
    max_version: str = ""

    @property
    def is_exact(self) -> bool:
        """True for a pinned ``name@version`` spec."""
        return bool(self.max_version) and self.min_version == self.max_version


@dataclass(frozen=True)
class IntersectionResult:
    """Tagged intersection outcome; ``value`` is only set for VALUE."""
    outcome: IntersectionOutcome
    value: str = ""
    min_version: str = ""
    max_version: str = ""

    def __bool__(self) -> bool:
        return self.outcome is IntersectionOutcome.VALUE
