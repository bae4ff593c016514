"""
pyanalyzer: descriptive statistics over a single numeric dataset.

Submodules:
    analyzer: Analyzer query object, describe(), noise generators
    core: exceptions, validation, result envelope, timing
"""

__version__ = "0.1.0"

from pyanalyzer.analyzer import (
    Analyzer,
    AnalyzerDesign,
    describe,
    uniform_distribution,
    normal_distribution,
)
from pyanalyzer.core.exceptions import (
    PyAnalyzerError,
    ValidationError,
    InvalidDataset,
    InsufficientData,
    DegenerateDataset,
)

__all__ = [
    "__version__",
    "Analyzer",
    "AnalyzerDesign",
    "describe",
    "uniform_distribution",
    "normal_distribution",
    "PyAnalyzerError",
    "ValidationError",
    "InvalidDataset",
    "InsufficientData",
    "DegenerateDataset",
]
