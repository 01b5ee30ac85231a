"""
Tests for merge sort, quicksort and the comparator helpers.
"""

from collections import Counter

import numpy as np
import pytest

from algo_toolkit.algorithms.comparators import by_key, natural_order, reverse_order
from algo_toolkit.algorithms.sorting import merge_sort, quick_sort

SORTS = [merge_sort, quick_sort]


def _is_sorted(seq, compare=natural_order):
    return all(compare(seq[i], seq[i + 1]) <= 0 for i in range(len(seq) - 1))


# ------------------------------------------------------------------
# Comparators
# ------------------------------------------------------------------


def test_natural_order():
    assert natural_order(1, 2) < 0
    assert natural_order(2, 1) > 0
    assert natural_order(3, 3) == 0
    assert natural_order("apple", "banana") < 0


def test_reverse_order():
    desc = reverse_order()
    assert desc(1, 2) > 0
    assert desc(2, 1) < 0
    assert desc(5, 5) == 0


def test_by_key():
    by_len = by_key(len)
    assert by_len("aa", "b") > 0
    assert by_len("a", "b") == 0


# ------------------------------------------------------------------
# Shared properties
# ------------------------------------------------------------------


@pytest.mark.parametrize("sort", SORTS)
def test_sort_basic(sort):
    """Numbers come back ascending."""
    assert sort([5, 3, 8, 1, 9, 2]) == [1, 2, 3, 5, 8, 9]


@pytest.mark.parametrize("sort", SORTS)
def test_sort_strings_lexicographic(sort):
    assert sort(["pear", "apple", "fig"]) == ["apple", "fig", "pear"]


@pytest.mark.parametrize("sort", SORTS)
def test_sort_empty_and_singleton(sort):
    assert sort([]) == []
    assert sort([42]) == [42]


@pytest.mark.parametrize("sort", SORTS)
def test_sort_permutation_and_sortedness_random(sort):
    """Result is a sorted permutation of the input (with many duplicates)."""
    rng = np.random.default_rng(42)
    for _ in range(20):
        data = rng.integers(-20, 20, size=rng.integers(0, 60)).tolist()
        result = sort(data)
        assert Counter(result) == Counter(data)
        assert _is_sorted(result)


@pytest.mark.parametrize("sort", SORTS)
def test_sort_does_not_mutate_input(sort):
    data = [3, 1, 2]
    sort(data)
    assert data == [3, 1, 2]


@pytest.mark.parametrize("sort", SORTS)
def test_sort_accepts_tuple(sort):
    assert sort((3, 1, 2)) == [1, 2, 3]


@pytest.mark.parametrize("sort", SORTS)
def test_sort_custom_comparator_descending(sort):
    assert sort([1, 4, 2, 3], reverse_order()) == [4, 3, 2, 1]


@pytest.mark.parametrize("sort", SORTS)
def test_sort_comparator_exception_propagates(sort):
    """A failing comparator is not swallowed."""

    def broken(a, b):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        sort([2, 1, 3], broken)


# ------------------------------------------------------------------
# merge_sort specifics
# ------------------------------------------------------------------


def test_merge_sort_is_stable():
    """Equal keys keep their input order."""
    records = [("b", 1), ("a", 2), ("b", 3), ("a", 4), ("c", 5), ("a", 6)]
    result = merge_sort(records, by_key(lambda r: r[0]))
    assert result == [("a", 2), ("a", 4), ("a", 6), ("b", 1), ("b", 3), ("c", 5)]


def test_merge_sort_idempotent():
    data = [9, 2, 7, 2, 5, 1]
    once = merge_sort(data)
    assert merge_sort(once) == once


def test_merge_sort_returns_new_list():
    data = [1]
    result = merge_sort(data)
    assert result == data
    assert result is not data


# ------------------------------------------------------------------
# quick_sort specifics
# ------------------------------------------------------------------


def test_quick_sort_sorted_input_no_recursion_error():
    """Large already-sorted and reversed inputs must not exhaust the stack."""
    data = list(range(5000))
    assert quick_sort(data) == data
    assert quick_sort(data[::-1]) == data


def test_quick_sort_all_equal():
    assert quick_sort([7] * 100) == [7] * 100
