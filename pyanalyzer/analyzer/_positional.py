"""
Positional median and median-filtered quartiles.

The positional rule takes med = n // 2. Odd-length sequences return the
average of the elements at positions med and med + 1; even-length
sequences return the element at position med. Quartiles filter the sorted
dataset against that median by value (<= for the lower half, >= for the
upper half) and apply the same rule to the filtered slice, so the halves
can share values equal to the median.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyanalyzer.core.exceptions import InsufficientData


def positional_median(
    items: NDArray[np.floating[Any]],
    statistic: str = 'median',
) -> float:
    """
    Median of an ordered sequence under the positional rule.

    Parameters
    ----------
    items : ndarray
        Values already sorted ascending.
    statistic : str
        Name reported in the error if the rule reads past the end.

    Raises
    ------
    InsufficientData
        If the sequence is odd-length with a single element or is empty,
        so position med + 1 does not exist.
    """
    n = int(items.shape[0])
    med = n // 2

    if n % 2 != 0:
        if med + 1 >= n:
            raise InsufficientData(
                f"{statistic}: odd-length sequence of {n} has no element at "
                f"position {med + 1}; requires at least 2 values",
                statistic=statistic,
                n_observations=n,
                required=2,
            )
        return (float(items[med]) + float(items[med + 1])) / 2

    if n == 0:
        raise InsufficientData(
            f"{statistic}: no values to take a median of; requires at least 2 values",
            statistic=statistic,
            n_observations=0,
            required=2,
        )
    return float(items[med])


def lower_half(data: NDArray[np.floating[Any]], median: float) -> NDArray[np.floating[Any]]:
    """Values <= median, in their sorted order."""
    return data[data <= median]


def upper_half(data: NDArray[np.floating[Any]], median: float) -> NDArray[np.floating[Any]]:
    """Values >= median, in their sorted order."""
    return data[data >= median]
