"""Compiler id expansion, compatibility and intersection.

A compiler id has the form ``<name>[@[>=]<version>]``:

- ``GCC``            any GCC version
- ``GCC@>=10.3.1``   GCC 10.3.1 or newer
- ``GCC@10.3.1``     exactly GCC 10.3.1
"""
from __future__ import annotations

import logging

from constants import GRAMMAR, Grammar
from common.logging_utils import extra_context, is_debug_enabled

from .compare import VersionComparator, compare_versions
from .models import CompilerVersionSpec, IntersectionOutcome, IntersectionResult

logger = logging.getLogger(__name__)


def expand_compiler_id(compiler: str, grammar: Grammar = GRAMMAR) -> CompilerVersionSpec:
    """Split a compiler id into name, minimum and maximum version."""
    name, _, version = compiler.partition(grammar.prefix_cversion)
    if not version:
        return CompilerVersionSpec(name=name, min_version=grammar.any_version)
    if version.startswith(grammar.min_version_marker):
        return CompilerVersionSpec(name=name, min_version=version[len(grammar.min_version_marker):])
    return CompilerVersionSpec(name=name, min_version=version, max_version=version)


def are_compilers_compatible(
    first: str,
    second: str,
    compare: VersionComparator = compare_versions,
    grammar: Grammar = GRAMMAR,
) -> bool:
    """Return True if the two compiler ids can be satisfied by one compiler.

    An empty id places no constraint and is compatible with anything.
    """
    if not first or not second:
        return True
    a = expand_compiler_id(first, grammar)
    b = expand_compiler_id(second, grammar)
    if a.name != b.name:
        return False
    if a.max_version and b.min_version and compare(a.max_version, b.min_version) < 0:
        return False
    if b.max_version and a.min_version and compare(b.max_version, a.min_version) < 0:
        return False
    return True


def compilers_intersection(
    first: str,
    second: str,
    compare: VersionComparator = compare_versions,
    grammar: Grammar = GRAMMAR,
) -> IntersectionResult:
    """Intersect two compiler ids.

    The id grammar can express "any", "at least X" and "exactly X" but not a
    bounded range, so a bounded result with distinct ends is reported as
    ``IntersectionOutcome.UNREPRESENTABLE`` instead of a value.
    """
    if (not first and not second) or not are_compilers_compatible(first, second, compare, grammar):
        if is_debug_enabled(logger):
            logger.debug(
                "No compiler intersection",
                extra=extra_context(
                    event="decision",
                    component="compiler_range",
                    action="intersect",
                    outcome="empty",
                    target=f"{first}|{second}",
                ),
            )
        return IntersectionResult(IntersectionOutcome.EMPTY)

    a = expand_compiler_id(first, grammar)
    b = expand_compiler_id(second, grammar)
    first_max = a.max_version or b.max_version
    second_max = b.max_version or first_max

    name = a.name or b.name
    min_version = b.min_version if compare(a.min_version, b.min_version) < 0 else a.min_version
    max_version = second_max if compare(first_max, second_max) > 0 else first_max

    if not max_version:
        if compare(min_version, grammar.any_version) == 0:
            value = name
        else:
            value = f"{name}{grammar.prefix_cversion}{grammar.min_version_marker}{min_version}"
        return IntersectionResult(IntersectionOutcome.VALUE, value, min_version, max_version)

    if min_version == max_version:
        value = f"{name}{grammar.prefix_cversion}{min_version}"
        return IntersectionResult(IntersectionOutcome.VALUE, value, min_version, max_version)

    logger.warning(
        "Compiler intersection of '%s' and '%s' is the range %s..%s, which has no id form",
        first,
        second,
        min_version,
        max_version,
    )
    return IntersectionResult(IntersectionOutcome.UNREPRESENTABLE, "", min_version, max_version)


def compilers_intersect(
    first: str,
    second: str,
    compare: VersionComparator = compare_versions,
    grammar: Grammar = GRAMMAR,
) -> str:
    """Return the intersection id of two compiler ids, or "" when there is none."""
    return compilers_intersection(first, second, compare, grammar).value
