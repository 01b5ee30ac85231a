"""
Algorithm Core Library - sorting, searching, clustering and regression.

Pure functions over caller-owned data: no shared state, no I/O, no
configuration lookups. Designed for reuse and testing.
"""

from .comparators import Comparator, natural_order, reverse_order, by_key
from .sorting import merge_sort, quick_sort
from .searching import (
    NOT_FOUND,
    FuzzyMatch,
    binary_search,
    levenshtein_distance,
    similarity,
    fuzzy_search,
)
from .clustering import KMeansResult, kmeans, euclidean_distance
from .regression import RegressionModel, linear_regression

__all__ = [
    # Comparators
    "Comparator",
    "natural_order",
    "reverse_order",
    "by_key",
    # Sorting
    "merge_sort",
    "quick_sort",
    # Searching
    "NOT_FOUND",
    "FuzzyMatch",
    "binary_search",
    "levenshtein_distance",
    "similarity",
    "fuzzy_search",
    # Clustering
    "KMeansResult",
    "kmeans",
    "euclidean_distance",
    # Regression
    "RegressionModel",
    "linear_regression",
]
