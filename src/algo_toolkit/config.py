"""
Configuration management for Algo Toolkit.

Loads configuration from environment variables (typically from a .env file).
Uses python-dotenv to load .env automatically.

The algorithm functions themselves never read configuration; everything here
feeds the service facade, the CLI and logging setup.

Usage:
    from algo_toolkit.config import config

    threshold = config.toolkit.fuzzy_threshold
    level = config.logging.level
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Look for .env in project root (parent of src/)
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Normalize the level name."""
        self.level = (self.level or "INFO").upper()
        if not self.log_file:
            self.log_file = None


@dataclass
class ToolkitConfig:
    """Default parameters used when a caller does not supply them."""
    fuzzy_threshold: float = 0.7
    kmeans_max_iter: int = 100
    kmeans_tol: float = 1e-4
    kmeans_seed: Optional[int] = None

    def __post_init__(self):
        """Validate ranges."""
        if not 0.0 <= self.fuzzy_threshold <= 1.0:
            raise ValueError(
                f"fuzzy_threshold must be in [0, 1], got {self.fuzzy_threshold}"
            )
        if self.kmeans_max_iter < 1:
            raise ValueError(
                f"kmeans_max_iter must be >= 1, got {self.kmeans_max_iter}"
            )
        if self.kmeans_tol < 0:
            raise ValueError(f"kmeans_tol must be >= 0, got {self.kmeans_tol}")


class Config:
    """
    Application configuration loaded from environment variables.

    Environment variables can be set:
    1. In a .env file in the project root
    2. In the system environment
    """

    def __init__(self):
        """Load configuration from environment."""
        self.logging = LoggingConfig(
            level=os.getenv("ALGO_TOOLKIT_LOG_LEVEL", "INFO"),
            log_file=os.getenv("ALGO_TOOLKIT_LOG_FILE"),
        )
        self.toolkit = ToolkitConfig(
            fuzzy_threshold=float(os.getenv("ALGO_TOOLKIT_FUZZY_THRESHOLD", "0.7")),
            kmeans_max_iter=int(os.getenv("ALGO_TOOLKIT_KMEANS_MAX_ITER", "100")),
            kmeans_tol=float(os.getenv("ALGO_TOOLKIT_KMEANS_TOL", "1e-4")),
            kmeans_seed=_optional_int(os.getenv("ALGO_TOOLKIT_KMEANS_SEED")),
        )


# Global config instance
config = Config()
