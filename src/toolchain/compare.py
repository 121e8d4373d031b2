"""Version ordering used by the compiler range engine.

Every version string maps to one sort key:

- the numeric dot-separated core (``6``, ``9.30``, ``5.4.0.1234``), with
  trailing zero segments dropped so ``6 == 6.0 == 6.0.0``;
- a pre-release label (text after the core, e.g. ``-beta.2``), which sorts
  below the release with the same core and is ordered among other labels
  with ``semantic_version`` pre-release precedence;
- build metadata (``+...``) is ignored.
"""
from __future__ import annotations

import re
from typing import Callable, Optional, Tuple

import semantic_version

VersionComparator = Callable[[str, str], int]

_CORE_RE = re.compile(r"^(\d+(?:\.\d+)*)?(.*)$")
_INVALID_IDENT_RE = re.compile(r"[^0-9A-Za-z-]")

VersionKey = Tuple[Tuple[int, ...], int, Optional[semantic_version.Version]]


def _prerelease(label: str) -> semantic_version.Version:
    parts = []
    for part in label.split("."):
        part = _INVALID_IDENT_RE.sub("-", part)
        if not part:
            continue
        parts.append(str(int(part)) if part.isdigit() else part)
    return semantic_version.Version(major=0, minor=0, patch=0, prerelease=tuple(parts or ["0"]))


def version_key(version: str) -> VersionKey:
    """Return the sort key of ``version``; any two keys are comparable."""
    text = version.strip().partition("+")[0]
    match = _CORE_RE.match(text)
    core, rest = match.group(1) or "", match.group(2)
    numbers = [int(n) for n in core.split(".")] if core else []
    while numbers and numbers[-1] == 0:
        numbers.pop()
    label = rest.lstrip("-.")
    if not label:
        return tuple(numbers), 1, None
    return tuple(numbers), 0, _prerelease(label)


def compare_versions(first: str, second: str) -> int:
    """Return -1, 0 or 1 as ``first`` sorts before, equal to or after ``second``."""
    if first == second:
        return 0
    left, right = version_key(first), version_key(second)
    return (left > right) - (left < right)
