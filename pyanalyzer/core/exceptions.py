"""
Exception hierarchy for pyanalyzer.

All exceptions inherit from PyAnalyzerError to allow catching any
library-specific error. Input problems derive from ValidationError,
statistics that are undefined for the stored dataset derive from
NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs required values
    - Never catch and re-raise with less information
"""


class PyAnalyzerError(Exception):
    """Base exception for all pyanalyzer errors."""
    pass


class ValidationError(PyAnalyzerError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Input has the wrong number of dimensions.

    An Analyzer wraps a single one-dimensional dataset; anything else
    raises this.
    """
    pass


class InvalidDataset(ValidationError):
    """
    Dataset cannot back an Analyzer.

    Raised at construction when the input sequence is empty. No partial
    Analyzer is produced.

    Attributes:
        n_observations: Number of values received (0)
    """

    def __init__(self, message: str, n_observations: int = 0):
        super().__init__(message)
        self.n_observations = n_observations


class NumericalError(PyAnalyzerError):
    """
    Statistic is not defined for the stored dataset.

    Base class for errors arising from the numbers themselves rather than
    from the shape or type of the input.
    """
    pass


class InsufficientData(NumericalError):
    """
    Dataset is too small for the requested statistic.

    Sample variance needs 2 observations, sample skewness 3, sample
    kurtosis 4. Positional medians need a second element whenever they
    read past the midpoint of an odd-length sequence.

    Attributes:
        statistic: Name of the statistic that was requested
        n_observations: Number of observations available
        required: Minimum number of observations the statistic needs
    """

    def __init__(
        self,
        message: str,
        statistic: str | None = None,
        n_observations: int | None = None,
        required: int | None = None,
    ):
        super().__init__(message)
        self.statistic = statistic
        self.n_observations = n_observations
        self.required = required


class DegenerateDataset(NumericalError):
    """
    Dataset has no spread.

    Raised by population kurtosis (and so sample kurtosis) when the sum of
    squared deviations is exactly zero, which happens when every value is
    identical.

    Attributes:
        statistic: Name of the statistic that was requested
        moment_sum: The offending second moment sum (0.0)
    """

    def __init__(
        self,
        message: str,
        statistic: str | None = None,
        moment_sum: float | None = None,
    ):
        super().__init__(message)
        self.statistic = statistic
        self.moment_sum = moment_sum
