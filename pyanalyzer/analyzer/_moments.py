"""
Moment sums shared by the variance, skewness and kurtosis statistics.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def moment_sum(
    values: NDArray[np.floating[Any]],
    center: float,
    power: int,
) -> float:
    """
    Sum of deviations from center raised to power.

    Computes sum((x - center) ** power) over all values. Variance uses
    power=2, skewness power=3 and kurtosis power=4.
    """
    deviations = values - center
    return float(np.sum(deviations ** power))


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Divide with IEEE-754 semantics.

    Division by zero yields +/-inf or nan instead of raising, the same
    way float64 arithmetic behaves everywhere else in the library.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(numerator) / np.float64(denominator))
