"""
Binary search and approximate string matching.

Provides halving search over sorted sequences, Levenshtein edit distance and
a threshold-based fuzzy search built on top of it.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, NamedTuple, Sequence, TypeVar

from .comparators import Comparator, natural_order

T = TypeVar("T")

NOT_FOUND = -1


class FuzzyMatch(NamedTuple):
    """An item that passed the fuzzy filter and its similarity score."""

    item: object
    similarity: float


def binary_search(
    sorted_seq: Sequence[T], target: T, compare: Comparator = natural_order
) -> int:
    """
    Locate *target* in an ascending sequence.

    The sequence must already be sorted under *compare*; this is not checked
    and unsorted input simply gives a wrong answer.

    Args:
        sorted_seq: Sequence sorted ascending by *compare*
        target: Value to look for
        compare: Three-way comparator, defaults to natural ordering

    Returns:
        Index of an element equal to *target* (any one, when duplicated), or
        ``NOT_FOUND`` (-1).
    """
    lo, hi = 0, len(sorted_seq) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        c = compare(sorted_seq[mid], target)
        if c == 0:
            return mid
        if c < 0:
            lo = mid + 1
        else:
            hi = mid - 1
    return NOT_FOUND


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning *a* into *b*.

    Keeps two DP rows sized to the shorter string, so memory is
    O(min(len(a), len(b))).
    """
    if a == b:
        return 0
    # Iterate over the longer string, keep rows for the shorter one
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        curr = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            curr.append(min(curr[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost))
        prev = curr
    return prev[-1]


def similarity(query: str, key: str) -> float:
    """
    Case-insensitive similarity in (-inf, 1].

    ``1 - distance / max(len(query), len(key))``. Two empty strings are
    identical and score 1.0.
    """
    longest = max(len(query), len(key))
    if longest == 0:
        return 1.0
    distance = levenshtein_distance(query.lower(), key.lower())
    return 1.0 - distance / longest


def fuzzy_search(
    items: Iterable[T],
    query: str,
    key_of: Callable[[T], str],
    threshold: float = 0.7,
) -> List[FuzzyMatch]:
    """
    Score every item against *query* and keep the close ones.

    Args:
        items: Candidates to score
        query: Search string (compared case-insensitively)
        key_of: Extracts the comparison string from an item; exceptions it
            raises propagate
        threshold: Minimum similarity kept (inclusive)

    Returns:
        ``FuzzyMatch(item, similarity)`` tuples, best first. Items with equal
        similarity keep their input order.
    """
    scored = [FuzzyMatch(item, similarity(query, key_of(item))) for item in items]
    matches = [m for m in scored if m.similarity >= threshold]
    # sorted() is stable, including with reverse=True
    return sorted(matches, key=lambda m: m.similarity, reverse=True)
