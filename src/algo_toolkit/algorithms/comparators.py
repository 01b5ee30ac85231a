"""
Comparator abstraction shared by the sorting and searching routines.

A comparator is a plain callable ``compare(a, b) -> int`` returning a negative
number when ``a`` orders before ``b``, zero when they are equal and a positive
number otherwise. Callers are responsible for supplying a consistent total
order; nothing here validates it.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], int]


def natural_order(a: Any, b: Any) -> int:
    """Order by the elements' own ``<`` and ``>`` (numeric ascending, lexicographic text)."""
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


def reverse_order(compare: Comparator = natural_order) -> Comparator:
    """Return a comparator that inverts *compare*."""

    def _reversed(a, b) -> int:
        return compare(b, a)

    return _reversed


def by_key(key: Callable[[T], Any], compare: Comparator = natural_order) -> Comparator:
    """
    Build a comparator that compares ``key(a)`` with ``key(b)``.

    Example::

        merge_sort(people, by_key(lambda p: p.age))
    """

    def _by_key(a, b) -> int:
        return compare(key(a), key(b))

    return _by_key
