"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test modules.
"""

import numpy as np
import pytest

from algo_toolkit.config import ToolkitConfig
from algo_toolkit.services import AlgorithmService


@pytest.fixture
def toolkit_config():
    """Toolkit defaults independent of the developer's environment/.env."""
    return ToolkitConfig(
        fuzzy_threshold=0.7,
        kmeans_max_iter=100,
        kmeans_tol=1e-4,
        kmeans_seed=0,
    )


@pytest.fixture
def service(toolkit_config):
    """AlgorithmService wired to the fixed test configuration."""
    return AlgorithmService(toolkit_config)


@pytest.fixture
def blobs():
    """
    Three well-separated 2-D blobs of 10 points each.

    Returns (points, true_labels); points are plain lists of lists.
    """
    gen = np.random.default_rng(7)
    centers = np.array([[0.0, 0.0], [10.0, 10.0], [-10.0, 10.0]])
    points = []
    labels = []
    for j, c in enumerate(centers):
        for p in c + gen.standard_normal((10, 2)) * 0.3:
            points.append(p.tolist())
            labels.append(j)
    return points, np.array(labels)
