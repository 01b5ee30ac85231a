"""
Ordinary least squares in one dimension.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..errors import ConfigurationError, NumericalError


@dataclass(frozen=True)
class RegressionModel:
    """Fitted line ``y = slope * x + intercept``."""

    slope: float
    intercept: float
    n_samples: int

    def predict(self, x):
        """Predict y for a scalar or a numpy array of x values."""
        if isinstance(x, np.ndarray):
            return self.slope * x + self.intercept
        return float(self.slope * x + self.intercept)

    def __call__(self, x):
        return self.predict(x)


def linear_regression(x: Sequence[float], y: Sequence[float]) -> RegressionModel:
    """
    Fit a line to paired samples with the closed-form OLS estimate.

        slope     = (n*Sxy - Sx*Sy) / (n*Sxx - Sx^2)
        intercept = (Sy - slope*Sx) / n

    Args:
        x: Independent values
        y: Dependent values, same length as *x*

    Returns:
        Immutable RegressionModel

    Raises:
        ConfigurationError: If the inputs are empty, non-numeric, not 1-D, or
            differ in length
        NumericalError: If all x values are equal, or the fit is otherwise
            not finite
    """
    try:
        xa = np.asarray(x, dtype=np.float64)
        ya = np.asarray(y, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"x and y must be numeric sequences: {e}") from e

    if xa.ndim != 1 or ya.ndim != 1:
        raise ConfigurationError(
            f"x and y must be 1-D; got shapes {xa.shape} and {ya.shape}"
        )
    if xa.shape[0] != ya.shape[0]:
        raise ConfigurationError(
            f"x and y must have the same length; got {xa.shape[0]} and {ya.shape[0]}"
        )
    n = xa.shape[0]
    if n == 0:
        raise ConfigurationError("linear regression needs at least one (x, y) pair")
    # Checked on the raw values: the centered denominator can come out as
    # rounding noise instead of exactly zero for constant non-integer x.
    if np.all(xa == xa[0]):
        raise NumericalError(
            f"x has zero variance (all {n} values equal {xa[0]}); slope is undefined"
        )

    # Same estimate as (n*Sxy - Sx*Sy) / (n*Sxx - Sx^2), on centered values so
    # large offsets in x do not cancel the denominator to zero.
    mean_x = xa.mean()
    mean_y = ya.mean()
    xc = xa - mean_x
    sxx = np.dot(xc, xc)
    if not sxx > 0:
        raise NumericalError(
            f"x has no usable variance (centered Sxx={sxx}); slope is undefined"
        )

    slope = np.dot(xc, ya - mean_y) / sxx
    intercept = mean_y - slope * mean_x
    if not (np.isfinite(slope) and np.isfinite(intercept)):
        raise NumericalError(
            f"regression produced a non-finite fit (slope={slope}, intercept={intercept})"
        )

    return RegressionModel(slope=float(slope), intercept=float(intercept), n_samples=int(n))
