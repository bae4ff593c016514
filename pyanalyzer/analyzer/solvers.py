"""
Batch entry point: describe() computes many statistics in one call.

Unlike the Analyzer methods, describe() does not raise for statistics
that are undefined on the given dataset. Those come back as nan with a
warning string on the result.
"""

from __future__ import annotations

from typing import Iterable
from numpy.typing import ArrayLike

from pyanalyzer.core.exceptions import NumericalError, ValidationError
from pyanalyzer.core.result import Result
from pyanalyzer.core.timing import Timer
from pyanalyzer.analyzer.analyzer import Analyzer
from pyanalyzer.analyzer.design import AnalyzerDesign
from pyanalyzer.analyzer.solution import AnalyzerParams, AnalyzerSolution


# Every statistic describe() knows, mapped to the section it is timed under
STATISTICS = {
    'mean': 'central',
    'median': 'central',
    'mode': 'central',
    'min': 'range',
    'max': 'range',
    'range': 'range',
    'first_quartile': 'range',
    'third_quartile': 'range',
    'interquartile_range': 'range',
    'population_variance': 'population',
    'population_standard_deviation': 'population',
    'population_skewness': 'population',
    'population_kurtosis': 'population',
    'sample_variance': 'sample',
    'sample_standard_deviation': 'sample',
    'sample_skewness': 'sample',
    'sample_kurtosis': 'sample',
}


def _resolve_statistics(statistics: Iterable[str] | None) -> list[str]:
    """Validate requested names and return them in canonical order."""
    if statistics is None:
        return list(STATISTICS)

    if isinstance(statistics, str):
        statistics = [statistics]
    requested = set(statistics)

    unknown = sorted(requested - STATISTICS.keys())
    if unknown:
        raise ValidationError(
            f"Unknown statistics: {unknown}. "
            f"Valid names: {sorted(STATISTICS)}"
        )
    return [name for name in STATISTICS if name in requested]


def describe(
    data: ArrayLike | AnalyzerDesign | Analyzer,
    *,
    statistics: Iterable[str] | None = None,
) -> AnalyzerSolution:
    """
    Compute descriptive statistics for a dataset.

    Parameters
    ----------
    data : array-like, AnalyzerDesign, or Analyzer
        Non-empty 1D data.
    statistics : iterable of str, optional
        Subset of STATISTICS to compute. Default computes all of them.

    Returns
    -------
    AnalyzerSolution

    Raises
    ------
    InvalidDataset
        If data is empty.
    ValidationError
        If data is not numeric or a requested statistic name is unknown.
    """
    names = _resolve_statistics(statistics)
    analyzer = data if isinstance(data, Analyzer) else Analyzer(data)

    timer = Timer()
    timer.start()

    values: dict[str, float] = {}
    warnings_list: list[str] = []

    for name in names:
        with timer.section(STATISTICS[name]):
            try:
                values[name] = getattr(analyzer, name)()
            except NumericalError as e:
                values[name] = float('nan')
                warnings_list.append(str(e))

    timer.stop()

    params = AnalyzerParams(count=analyzer.count, **values)

    result = Result(
        params=params,
        info={'computed': names, 'n': analyzer.count},
        timing=timer.result(),
        backend_name='cpu_analyzer',
        warnings=tuple(warnings_list),
    )

    return AnalyzerSolution(_result=result, _design=analyzer.design)
