"""Small string and list helpers shared by the configuration resolver."""
from __future__ import annotations

import re
from typing import List, TypeVar

T = TypeVar("T")

_DECIMAL_RE = re.compile(r"^\+?([0-9]+)$")
_INT_MAX = 2**31 - 1


def string_to_int(value: str) -> int:
    """Convert an unsigned decimal string (optional leading '+') to int.

    Returns 0 for empty, non-decimal or out-of-range input.
    """
    match = _DECIMAL_RE.match(value or "")
    if not match:
        return 0
    number = int(match.group(1))
    return number if number <= _INT_MAX else 0


def push_back_uniquely(items: List[T], value: T) -> List[T]:
    """Append ``value`` to ``items`` unless an equal item is already there."""
    if value not in items:
        items.append(value)
    return items
