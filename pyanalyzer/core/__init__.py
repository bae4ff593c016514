"""
Core infrastructure for pyanalyzer.

Shared abstractions used by the analyzer subpackage.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    timing: Section timers
    tolerances: Numerical comparison tiers
"""

from pyanalyzer.core.result import Result
from pyanalyzer.core.exceptions import (
    PyAnalyzerError,
    ValidationError,
    DimensionError,
    InvalidDataset,
    NumericalError,
    InsufficientData,
    DegenerateDataset,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyAnalyzerError",
    "ValidationError",
    "DimensionError",
    "InvalidDataset",
    "NumericalError",
    "InsufficientData",
    "DegenerateDataset",
]
