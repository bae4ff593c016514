"""
Single-dataset descriptive statistics.

Public API:
    Analyzer(values)          - Query object over one sorted dataset
    describe(data)            - All statistics at once
    uniform_distribution(...) - Uniform noise on [min, max)
    normal_distribution(...)  - Irwin-Hall approximately normal noise
"""

from pyanalyzer.analyzer.analyzer import Analyzer
from pyanalyzer.analyzer.design import AnalyzerDesign
from pyanalyzer.analyzer.noise import (
    IRWIN_HALL_TERMS,
    uniform_distribution,
    normal_distribution,
)
from pyanalyzer.analyzer.solution import AnalyzerParams, AnalyzerSolution
from pyanalyzer.analyzer.solvers import STATISTICS, describe

__all__ = [
    "Analyzer",
    "AnalyzerDesign",
    "AnalyzerParams",
    "AnalyzerSolution",
    "describe",
    "STATISTICS",
    "uniform_distribution",
    "normal_distribution",
    "IRWIN_HALL_TERMS",
]
