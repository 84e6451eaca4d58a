"""Three-way comparators shared by the list and map containers.

A comparator is any callable ``cmp(a, b) -> int`` returning a negative number
when ``a`` orders before ``b``, zero when they are equal and a positive number
otherwise. Containers take one at construction time; when none is given they
fall back to the builtin ``<``/``==`` operators through the helpers below.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Optional

from .errors import ConfigError

Comparator = Callable[[Any, Any], int]


def default_compare(a: Any, b: Any) -> int:
    """Order two values with the builtin rich comparisons."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def reverse(cmp: Comparator) -> Comparator:
    """Return a comparator with the opposite ordering of ``cmp``."""

    def _reversed(a: Any, b: Any) -> int:
        return cmp(b, a)

    return _reversed


def validate(cmp: Optional[Comparator]) -> Optional[Comparator]:
    if cmp is not None and not callable(cmp):
        raise ConfigError(f"Comparator must be callable, got {type(cmp)!r}")
    return cmp


def equal(a: Any, b: Any, cmp: Optional[Comparator] = None) -> bool:
    """Value equality under ``cmp``, or ``==`` when no comparator is set."""
    if cmp is not None:
        return cmp(a, b) == 0
    return a == b


def sort_key(cmp: Optional[Comparator] = None) -> Callable[[Any], Any]:
    return cmp_to_key(cmp if cmp is not None else default_compare)
