"""
Analyzer: descriptive statistics over one immutable dataset.

The dataset is sorted once at construction. Every query is a pure
function of that sorted array and returns a Python float; nothing is
cached between calls.

The median, quartile and mode rules are positional/filter based and do
not match the textbook definitions:

    median()          odd n -> mean of positions n//2 and n//2 + 1,
                      even n -> position n//2
    first_quartile()  positional median of values <= median()
    third_quartile()  positional median of values >= median()
    mode()            least frequent value, smallest value on ties
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyanalyzer.core.exceptions import DegenerateDataset
from pyanalyzer.core.validation import check_min_samples
from pyanalyzer.analyzer.design import AnalyzerDesign
from pyanalyzer.analyzer._moments import moment_sum, ieee_divide
from pyanalyzer.analyzer._positional import (
    positional_median, lower_half, upper_half,
)
from pyanalyzer.analyzer import noise


class Analyzer:
    """
    Descriptive statistics for a single dataset.

    Parameters
    ----------
    values : array-like or AnalyzerDesign
        Non-empty 1D sequence of real numbers. A sorted copy is kept;
        the caller's sequence is not modified.

    Raises
    ------
    InvalidDataset
        If values is empty.
    ValidationError
        If values is not numeric.
    DimensionError
        If values is not one-dimensional.

    Examples
    --------
    >>> a = Analyzer([5, 1, 4, 2, 3])
    >>> a.mean()
    3.0
    >>> a.median()
    3.5
    """

    def __init__(self, values: ArrayLike | AnalyzerDesign):
        if isinstance(values, AnalyzerDesign):
            design = values
        else:
            design = AnalyzerDesign.from_array(values)
        self._design = design

    @property
    def count(self) -> int:
        """Number of values, fixed at construction."""
        return self._design.n

    @property
    def design(self) -> AnalyzerDesign:
        return self._design

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Sorted read-only view of the dataset."""
        return self._design.data

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return f"Analyzer(count={self.count})"

    # --- Central tendency ---

    def mean(self) -> float:
        """Arithmetic mean of the dataset."""
        return float(np.mean(self._design.data))

    def median(self) -> float:
        """
        Positional median.

        With med = count // 2: odd count returns the average of the values
        at positions med and med + 1, even count returns the value at
        position med. For [1, 2, 3, 4, 5] this is 3.5.

        Raises
        ------
        InsufficientData
            If count is 1 (position 1 does not exist).
        """
        return positional_median(self._design.data, 'median')

    def mode(self) -> float:
        """
        Least frequent value.

        Values are grouped by equality in ascending order and the first
        group with the smallest occurrence count wins.
        """
        unique_values, counts = np.unique(self._design.data, return_counts=True)
        # argmin returns the first minimum, i.e. the smallest tied value
        return float(unique_values[np.argmin(counts)])

    def standardized_score(self, value: float) -> float:
        """
        z-score of value: (value - mean()) / population_standard_deviation().

        A constant dataset has zero spread, so the result is +/-inf (or nan
        when value equals the mean).
        """
        return ieee_divide(value - self.mean(), self.population_standard_deviation())

    # --- Range statistics ---

    def max(self) -> float:
        """Largest value."""
        return float(np.max(self._design.data))

    def min(self) -> float:
        """Smallest value."""
        return float(np.min(self._design.data))

    def range(self) -> float:
        """max() - min()."""
        return self.max() - self.min()

    def first_quartile(self) -> float:
        """Positional median of the values <= median()."""
        data = self._design.data
        return positional_median(lower_half(data, self.median()), 'first_quartile')

    def third_quartile(self) -> float:
        """Positional median of the values >= median()."""
        data = self._design.data
        return positional_median(upper_half(data, self.median()), 'third_quartile')

    def interquartile_range(self) -> float:
        """third_quartile() - first_quartile()."""
        return self.third_quartile() - self.first_quartile()

    # --- Population moments ---

    def _moment_sum(self, power: int) -> float:
        return moment_sum(self._design.data, self.mean(), power)

    def population_variance(self) -> float:
        """Sum of squared deviations divided by count."""
        return self._moment_sum(2) / self.count

    def population_standard_deviation(self) -> float:
        """Square root of population_variance()."""
        return math.sqrt(self.population_variance())

    def population_skewness(self) -> float:
        """
        (1 / N) * sum((x - mean)**3) / population_standard_deviation().

        The cubed deviations are divided by sigma, not sigma**3. A constant
        dataset gives nan.
        """
        third = self._moment_sum(3)
        return (1.0 / self.count) * ieee_divide(third, self.population_standard_deviation())

    def population_kurtosis(self) -> float:
        """
        N * sum((x - mean)**4) / sum((x - mean)**2)**2.

        Raises
        ------
        DegenerateDataset
            If every value is identical (second moment sum is zero).
        """
        fourth = self._moment_sum(4)
        second = self._moment_sum(2)

        if second == 0:
            raise DegenerateDataset(
                f"population_kurtosis: sum of squared deviations is 0 "
                f"(all {self.count} values equal {self.min()!r})",
                statistic='population_kurtosis',
                moment_sum=second,
            )

        return self.count * (fourth / second ** 2)

    # --- Sample moments ---

    def sample_variance(self) -> float:
        """
        Sum of squared deviations divided by count - 1.

        Raises
        ------
        InsufficientData
            If count <= 1.
        """
        check_min_samples(self.count, 2, 'sample_variance')
        return self._moment_sum(2) / (self.count - 1)

    def sample_standard_deviation(self) -> float:
        """Square root of sample_variance()."""
        return math.sqrt(self.sample_variance())

    def sample_skewness(self) -> float:
        """
        (N / ((N - 1) * (N - 2))) * sum((x - mean)**3) / sample_standard_deviation().

        Raises
        ------
        InsufficientData
            If count < 3.
        """
        check_min_samples(self.count, 3, 'sample_skewness')
        n = self.count
        third = self._moment_sum(3)
        return (n / ((n - 1.0) * (n - 2.0))) * ieee_divide(third, self.sample_standard_deviation())

    def sample_kurtosis(self) -> float:
        """
        ((N (N + 1) (N - 1)) / ((N - 2) (N - 3))) * population_kurtosis() / N.

        Raises
        ------
        InsufficientData
            If count < 4.
        DegenerateDataset
            If every value is identical.
        """
        check_min_samples(self.count, 4, 'sample_kurtosis')
        n = float(self.count)
        interim = self.population_kurtosis() / n
        return ((n * (n + 1) * (n - 1)) / ((n - 2) * (n - 3))) * interim

    # --- Generators ---

    @staticmethod
    def uniform_distribution(rng: Any, n: int, min: float = 0.0, max: float = 1.0) -> NDArray[np.floating[Any]]:
        """See pyanalyzer.analyzer.noise.uniform_distribution."""
        return noise.uniform_distribution(rng, n, min, max)

    @staticmethod
    def normal_distribution(rng: Any, n: int, mean: float = 0.0, std: float = 1.0) -> NDArray[np.floating[Any]]:
        """See pyanalyzer.analyzer.noise.normal_distribution."""
        return noise.normal_distribution(rng, n, mean, std)
