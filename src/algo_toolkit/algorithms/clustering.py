"""
K-means clustering.

Lloyd iterations with Euclidean distance, random distinct-point
initialisation drawn from an injectable numpy random source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import numpy as np

from ..errors import ConfigurationError

Array2D = np.ndarray
RandomSource = Union[np.random.Generator, int, None]

DEFAULT_TOL = 1e-4


@dataclass
class KMeansResult:
    """Result of a single k-means run."""

    clusters: List[List[int]]
    centroids: Array2D
    n_iter: int = 0
    converged: bool = False
    inertia: float = 0.0

    @property
    def k(self) -> int:
        return len(self.clusters)

    @property
    def labels(self) -> np.ndarray:
        """Cluster index of every input point, shape (n_samples,)."""
        n = sum(len(members) for members in self.clusters)
        labels = np.empty(n, dtype=int)
        for j, members in enumerate(self.clusters):
            labels[members] = j
        return labels


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two equal-length vectors."""
    diff = np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)
    return float(np.sqrt(np.sum(diff * diff)))


def _as_matrix(points: Sequence[Sequence[float]]) -> Array2D:
    """Validate *points* and stack them into an (n, d) float array."""
    if len(points) == 0:
        raise ConfigurationError("points must contain at least one vector")

    rows = []
    for i, p in enumerate(points):
        try:
            rows.append(np.asarray(p, dtype=np.float64))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"points[{i}] is not a numeric vector") from e
    first = rows[0]
    if first.ndim != 1 or first.shape[0] == 0:
        raise ConfigurationError(
            f"points[0] must be a non-empty 1-D vector; got shape {first.shape}"
        )
    d = first.shape[0]
    for i, row in enumerate(rows):
        if row.shape != (d,):
            raise ConfigurationError(
                f"points[{i}] has shape {row.shape}, expected ({d},)"
            )
    return np.stack(rows, axis=0)


def _make_rng(rng: RandomSource) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def _assign(X: Array2D, centroids: Array2D) -> np.ndarray:
    """Index of the nearest centroid for every row of *X* (ties -> lowest index)."""
    diffs = X[:, None, :] - centroids[None, :, :]  # (n, k, d)
    sq = np.sum(diffs ** 2, axis=2)  # (n, k)
    return np.argmin(sq, axis=1)


def kmeans(
    points: Sequence[Sequence[float]],
    k: int,
    max_iter: int = 100,
    rng: RandomSource = None,
    *,
    tol: float = DEFAULT_TOL,
) -> KMeansResult:
    """
    Partition *points* into *k* clusters.

    Initial centroids are *k* distinct input points drawn uniformly without
    replacement. Each iteration assigns every point to its nearest centroid,
    then moves each centroid to the mean of its members; a centroid with no
    members stays where it was. Iteration stops once every centroid moves less
    than *tol*, or after *max_iter* iterations.

    Args:
        points: n vectors of equal dimensionality d
        k: Number of clusters, 1 <= k <= n
        max_iter: Maximum number of iterations (>= 1)
        rng: ``np.random.Generator``, integer seed, or None for an unseeded
            generator
        tol: Convergence threshold on centroid movement (Euclidean)

    Returns:
        KMeansResult where ``clusters[j]`` lists the input indices assigned to
        centroid j (ascending) and ``centroids[j]`` is that cluster's mean.

    Raises:
        ConfigurationError: If points are empty or ragged, or k, max_iter or
            tol are out of range
    """
    X = _as_matrix(points)
    n = X.shape[0]

    if k < 1:
        raise ConfigurationError(f"k must be >= 1, got {k}")
    if k > n:
        raise ConfigurationError(f"k ({k}) cannot exceed number of samples ({n})")
    if max_iter < 1:
        raise ConfigurationError(f"max_iter must be >= 1, got {max_iter}")
    if tol < 0:
        raise ConfigurationError(f"tol must be >= 0, got {tol}")

    generator = _make_rng(rng)
    init_idx = generator.choice(n, size=k, replace=False)
    centroids = X[init_idx].copy()

    labels = np.zeros(n, dtype=int)
    n_iter = 0
    converged = False
    for _ in range(max_iter):
        n_iter += 1

        # ---- ASSIGNMENT STEP ----
        labels = _assign(X, centroids)

        # ---- CENTROID UPDATE STEP ----
        new_centroids = centroids.copy()
        for j in range(k):
            members = labels == j
            if np.any(members):
                new_centroids[j] = X[members].mean(axis=0)

        shift = np.sqrt(np.sum((new_centroids - centroids) ** 2, axis=1))
        centroids = new_centroids
        if np.all(shift < tol):
            converged = True
            break

    clusters = [np.flatnonzero(labels == j).tolist() for j in range(k)]
    diffs = X - centroids[labels]
    inertia = float(np.sum(diffs ** 2))

    return KMeansResult(
        clusters=clusters,
        centroids=centroids,
        n_iter=n_iter,
        converged=converged,
        inertia=inertia,
    )
