"""
AnalyzerDesign: sorted dataset wrapper for the Analyzer.

Validates the input once, sorts a private copy ascending and freezes it.
Every statistic reads this one array; nothing re-sorts or mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyanalyzer.core.validation import check_array, check_1d, check_not_empty


@dataclass(frozen=True)
class AnalyzerDesign:
    """
    Design for a single-variable dataset.

    Holds the values sorted ascending as a read-only float64 array.
    Immutable after construction.

    Construction:
        AnalyzerDesign.from_array([3.0, 1.0, 2.0])
        AnalyzerDesign.from_array(pandas_series)
    """
    _data: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_array(cls, values: ArrayLike) -> AnalyzerDesign:
        """
        Build AnalyzerDesign from array-like data.

        Parameters
        ----------
        values : array-like
            1D sequence of real numbers. Lists, tuples, numpy arrays, and
            objects with a .values attribute (pandas Series) are accepted.
            The caller's buffer is copied, never sorted in place.
        """
        if hasattr(values, 'values') and not isinstance(values, np.ndarray):
            values = values.values

        data = check_array(values, 'values')
        return cls._build(data)

    @classmethod
    def _build(cls, data: NDArray) -> AnalyzerDesign:
        """Internal builder with validation."""
        check_1d(data, 'values')
        check_not_empty(data, 'values')

        # np.sort returns a copy, so the caller's array is left untouched
        sorted_data = np.sort(data, kind='stable')
        sorted_data.flags.writeable = False

        return cls(_data=sorted_data, _n=int(sorted_data.shape[0]))

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Values sorted ascending (read-only)."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    def __repr__(self) -> str:
        return (
            f"AnalyzerDesign(n={self._n}, "
            f"min={float(self._data[0])!r}, max={float(self._data[-1])!r})"
        )
