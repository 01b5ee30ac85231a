"""
Algorithm Service - configured, logged access to the algorithm core.

The functions in ``algo_toolkit.algorithms`` take every parameter explicitly.
This service sits on top of them for application code: it fills in defaults
from ``ToolkitConfig``, keeps a seeded random source when one is configured,
and logs calls and rejected inputs.

Usage:
    service = AlgorithmService()
    ordered = service.merge_sort([3, 1, 2])
    matches = service.fuzzy_search(names, "jon", key_of=str)
    result = service.kmeans(points, k=3)

    # From async code, off the event loop
    result = await service.run_in_thread("kmeans", points, 3)
"""

from __future__ import annotations

import asyncio
import threading
from typing import Any, Callable, Iterable, List, Optional, Sequence

import numpy as np

from ..algorithms import (
    Comparator,
    FuzzyMatch,
    KMeansResult,
    RegressionModel,
    binary_search,
    fuzzy_search,
    kmeans,
    levenshtein_distance,
    linear_regression,
    merge_sort,
    natural_order,
    quick_sort,
)
from ..config import ToolkitConfig, config as default_config
from ..errors import AlgoToolkitError
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

OPERATIONS = (
    "merge_sort",
    "quick_sort",
    "binary_search",
    "levenshtein_distance",
    "fuzzy_search",
    "kmeans",
    "linear_regression",
)


class AlgorithmService:
    """
    Facade over the sorting, searching, clustering and regression routines.

    Args:
        toolkit_config: Defaults to the global ``config.toolkit``
        rng: Random source for k-means initialisation. When omitted, a
            generator seeded with ``kmeans_seed`` is created (unseeded if the
            seed is unset). Each k-means call without an explicit *rng* draws
            its own child generator from it under a lock, so concurrent calls
            never share generator state. Which child a call gets follows the
            order calls reach the lock: sequential calls are reproducible,
            concurrent ones are only reproducible as a set.
    """

    def __init__(
        self,
        toolkit_config: Optional[ToolkitConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = toolkit_config or default_config.toolkit
        self.rng = rng if rng is not None else np.random.default_rng(self.config.kmeans_seed)
        self._rng_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def merge_sort(self, seq: Sequence[Any], compare: Comparator = natural_order) -> List[Any]:
        logger.debug("merge_sort: %d items", len(seq))
        return merge_sort(seq, compare)

    def quick_sort(self, seq: Sequence[Any], compare: Comparator = natural_order) -> List[Any]:
        logger.debug("quick_sort: %d items", len(seq))
        return quick_sort(seq, compare)

    # ------------------------------------------------------------------
    # Searching
    # ------------------------------------------------------------------

    def binary_search(
        self, sorted_seq: Sequence[Any], target: Any, compare: Comparator = natural_order
    ) -> int:
        index = binary_search(sorted_seq, target, compare)
        logger.debug("binary_search: %d items, index=%d", len(sorted_seq), index)
        return index

    def levenshtein_distance(self, a: str, b: str) -> int:
        return levenshtein_distance(a, b)

    def fuzzy_search(
        self,
        items: Iterable[Any],
        query: str,
        key_of: Callable[[Any], str],
        threshold: Optional[float] = None,
    ) -> List[FuzzyMatch]:
        """Fuzzy search; *threshold* defaults to ``fuzzy_threshold``."""
        if threshold is None:
            threshold = self.config.fuzzy_threshold
        matches = fuzzy_search(items, query, key_of, threshold)
        logger.debug(
            "fuzzy_search: query=%r threshold=%.3f matches=%d", query, threshold, len(matches)
        )
        return matches

    # ------------------------------------------------------------------
    # Clustering / regression
    # ------------------------------------------------------------------

    def kmeans(
        self,
        points: Sequence[Sequence[float]],
        k: int,
        max_iter: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> KMeansResult:
        """K-means; *max_iter* and tolerance default from config."""
        if max_iter is None:
            max_iter = self.config.kmeans_max_iter
        try:
            result = kmeans(
                points,
                k,
                max_iter=max_iter,
                rng=rng if rng is not None else self._child_rng(),
                tol=self.config.kmeans_tol,
            )
        except AlgoToolkitError as e:
            logger.warning("kmeans rejected input (k=%s): %s", k, e)
            raise

        if not result.converged:
            logger.info(
                "kmeans did not converge within %d iterations (k=%d, n=%d)",
                max_iter,
                k,
                len(points),
            )
        logger.debug(
            "kmeans: k=%d n_iter=%d inertia=%.6g", k, result.n_iter, result.inertia
        )
        return result

    def linear_regression(self, x: Sequence[float], y: Sequence[float]) -> RegressionModel:
        try:
            model = linear_regression(x, y)
        except AlgoToolkitError as e:
            logger.warning("linear_regression rejected input: %s", e)
            raise
        logger.debug(
            "linear_regression: n=%d slope=%.6g intercept=%.6g",
            model.n_samples,
            model.slope,
            model.intercept,
        )
        return model

    def _child_rng(self) -> np.random.Generator:
        """Independent generator seeded from the service generator."""
        with self._rng_lock:
            seed = int(self.rng.integers(0, 2**63 - 1))
        return np.random.default_rng(seed)

    # ------------------------------------------------------------------
    # Async adapter
    # ------------------------------------------------------------------

    async def run_in_thread(self, operation: str, *args, **kwargs) -> Any:
        """
        Run one of the service operations in a worker thread.

        The algorithms never block on I/O, but large inputs are CPU-bound;
        this keeps them off the event loop.

        Raises:
            ValueError: If *operation* is not a service operation
        """
        if operation not in OPERATIONS:
            raise ValueError(
                f"Unknown operation: {operation}. Expected one of {', '.join(OPERATIONS)}"
            )
        method = getattr(self, operation)
        return await asyncio.to_thread(method, *args, **kwargs)
