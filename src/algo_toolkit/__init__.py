"""
Algo Toolkit - Core Package

A generic, in-memory algorithms toolkit.

This package provides:
- Comparator-driven sorting (merge sort, quicksort)
- Binary search, Levenshtein distance and fuzzy search
- K-means clustering
- One-dimensional ordinary least squares regression
"""

__version__ = "0.1.0"

from .algorithms import (
    NOT_FOUND,
    binary_search,
    fuzzy_search,
    kmeans,
    levenshtein_distance,
    linear_regression,
    merge_sort,
    quick_sort,
)
from .errors import AlgoToolkitError, ConfigurationError, NumericalError

# Explicitly import subpackages to ensure they're discoverable
from . import algorithms
from . import services
from . import utils

__all__ = [
    "NOT_FOUND",
    "binary_search",
    "fuzzy_search",
    "kmeans",
    "levenshtein_distance",
    "linear_regression",
    "merge_sort",
    "quick_sort",
    "AlgoToolkitError",
    "ConfigurationError",
    "NumericalError",
    "algorithms",
    "services",
    "utils",
]
