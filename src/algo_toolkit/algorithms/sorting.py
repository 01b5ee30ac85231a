"""
Comparator-based sorting.

Both sorts return a fresh list and never touch the caller's sequence.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple, TypeVar

from .comparators import Comparator, natural_order

T = TypeVar("T")


def merge_sort(seq: Sequence[T], compare: Comparator = natural_order) -> List[T]:
    """
    Stable top-down merge sort.

    Args:
        seq: Elements to sort (left untouched)
        compare: Three-way comparator, defaults to natural ordering

    Returns:
        New list ordered non-decreasingly under *compare*. Equal elements keep
        their input order.
    """
    items = list(seq)
    if len(items) <= 1:
        return items

    mid = len(items) // 2
    left = merge_sort(items[:mid], compare)
    right = merge_sort(items[mid:], compare)
    return _merge(left, right, compare)


def _merge(left: List[T], right: List[T], compare: Comparator) -> List[T]:
    """Merge two sorted runs; ties take from *left* to stay stable."""
    result: List[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if compare(left[i], right[j]) <= 0:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def quick_sort(seq: Sequence[T], compare: Comparator = natural_order) -> List[T]:
    """
    Three-way quicksort with a middle-element pivot.

    Each chunk is split into strictly-less, equal and strictly-greater
    partitions around ``chunk[len(chunk) // 2]``. Pending chunks live on an
    explicit stack rather than the call stack, so already-sorted or adversarial
    inputs degrade to O(n^2) time but cannot hit the recursion limit.

    Stability is not guaranteed.

    Args:
        seq: Elements to sort (left untouched)
        compare: Three-way comparator, defaults to natural ordering

    Returns:
        New list ordered non-decreasingly under *compare*.
    """
    result: List[T] = []
    # (final, chunk): final chunks are emitted as-is, others still need partitioning.
    # Pushed greater -> equal -> less so they pop in output order.
    stack: List[Tuple[bool, List[T]]] = [(False, list(seq))]

    while stack:
        final, chunk = stack.pop()
        if final or len(chunk) <= 1:
            result.extend(chunk)
            continue

        pivot = chunk[len(chunk) // 2]
        less: List[T] = []
        equal: List[T] = []
        greater: List[T] = []
        for item in chunk:
            c = compare(item, pivot)
            if c < 0:
                less.append(item)
            elif c > 0:
                greater.append(item)
            else:
                equal.append(item)

        stack.append((False, greater))
        stack.append((True, equal))
        stack.append((False, less))

    return result
