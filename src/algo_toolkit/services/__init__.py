"""
Service Layer

Services sit between the pure algorithm functions and application entry
points (CLI, notebooks, other packages). They apply configured defaults and
log what they run; the algorithms themselves stay free of both.
"""

from .algorithm_service import AlgorithmService

__all__ = [
    "AlgorithmService",
]
