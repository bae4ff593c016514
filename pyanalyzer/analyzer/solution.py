"""
Analyzer solution types.

Contains the parameter payload and user-facing solution wrapper returned
by describe().
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, TYPE_CHECKING

from pyanalyzer.core.result import Result

if TYPE_CHECKING:
    from pyanalyzer.analyzer.design import AnalyzerDesign


@dataclass(frozen=True)
class AnalyzerParams:
    """
    Parameter payload for describe().

    Statistics that were not requested are None. Statistics that were
    requested but are undefined for the dataset (too few values, constant
    values) are nan, with the reason recorded in Result.warnings.
    """
    count: int

    # Central tendency
    mean: float | None = None
    median: float | None = None
    mode: float | None = None

    # Range
    min: float | None = None
    max: float | None = None
    range: float | None = None
    first_quartile: float | None = None
    third_quartile: float | None = None
    interquartile_range: float | None = None

    # Population moments
    population_variance: float | None = None
    population_standard_deviation: float | None = None
    population_skewness: float | None = None
    population_kurtosis: float | None = None

    # Sample moments
    sample_variance: float | None = None
    sample_standard_deviation: float | None = None
    sample_skewness: float | None = None
    sample_kurtosis: float | None = None


# Row labels for summary(), in payload order
_LABELS = {
    'mean': 'Mean',
    'median': 'Median',
    'mode': 'Mode',
    'min': 'Min.',
    'max': 'Max.',
    'range': 'Range',
    'first_quartile': '1st Qu.',
    'third_quartile': '3rd Qu.',
    'interquartile_range': 'IQR',
    'population_variance': 'Pop. variance',
    'population_standard_deviation': 'Pop. std. dev.',
    'population_skewness': 'Pop. skewness',
    'population_kurtosis': 'Pop. kurtosis',
    'sample_variance': 'Sample variance',
    'sample_standard_deviation': 'Sample std. dev.',
    'sample_skewness': 'Sample skewness',
    'sample_kurtosis': 'Sample kurtosis',
}


@dataclass
class AnalyzerSolution:
    """
    User-facing describe() results.

    Wraps Result[AnalyzerParams] and provides convenient accessors.
    """
    _result: Result[AnalyzerParams]
    _design: 'AnalyzerDesign'

    @property
    def count(self) -> int:
        return self._result.params.count

    # --- Central tendency ---

    @property
    def mean(self) -> float | None:
        return self._result.params.mean

    @property
    def median(self) -> float | None:
        """Positional median (see Analyzer.median)."""
        return self._result.params.median

    @property
    def mode(self) -> float | None:
        """Least frequent value (see Analyzer.mode)."""
        return self._result.params.mode

    # --- Range ---

    @property
    def min(self) -> float | None:
        return self._result.params.min

    @property
    def max(self) -> float | None:
        return self._result.params.max

    @property
    def range(self) -> float | None:
        return self._result.params.range

    @property
    def first_quartile(self) -> float | None:
        return self._result.params.first_quartile

    @property
    def third_quartile(self) -> float | None:
        return self._result.params.third_quartile

    @property
    def interquartile_range(self) -> float | None:
        return self._result.params.interquartile_range

    # --- Population moments ---

    @property
    def population_variance(self) -> float | None:
        return self._result.params.population_variance

    @property
    def population_standard_deviation(self) -> float | None:
        return self._result.params.population_standard_deviation

    @property
    def population_skewness(self) -> float | None:
        return self._result.params.population_skewness

    @property
    def population_kurtosis(self) -> float | None:
        return self._result.params.population_kurtosis

    # --- Sample moments ---

    @property
    def sample_variance(self) -> float | None:
        return self._result.params.sample_variance

    @property
    def sample_standard_deviation(self) -> float | None:
        return self._result.params.sample_standard_deviation

    @property
    def sample_skewness(self) -> float | None:
        return self._result.params.sample_skewness

    @property
    def sample_kurtosis(self) -> float | None:
        return self._result.params.sample_kurtosis

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, statistic: str) -> bool:
        """True if the named statistic was undefined and recorded a warning."""
        return self._result.has_warning(statistic)

    def to_dict(self) -> dict[str, float | int]:
        """Computed statistics keyed by name; unrequested ones are omitted."""
        params = self._result.params
        out: dict[str, float | int] = {}
        for f in fields(params):
            value = getattr(params, f.name)
            if value is not None:
                out[f.name] = value
        return out

    def summary(self) -> str:
        """Two-column text table of the computed statistics."""
        params = self._result.params
        rows = [('N', str(params.count))]
        for name, label in _LABELS.items():
            value = getattr(params, name)
            if value is None:
                continue
            rows.append((label, 'NA' if math.isnan(value) else f"{value:.6f}"))

        label_width = max(len(label) for label, _ in rows)
        value_width = max(len(text) for _, text in rows)

        lines = ["Descriptive Statistics:"]
        for label, text in rows:
            lines.append(f"  {label.ljust(label_width)}  {text.rjust(value_width)}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        computed = [name for name in _LABELS if getattr(self._result.params, name) is not None]
        stats_str = ", ".join(computed) if computed else "none"
        return f"AnalyzerSolution(n={self.count}, computed=[{stats_str}])"
