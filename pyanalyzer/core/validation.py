"""
Input validation utilities for pyanalyzer.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyanalyzer.core.exceptions import (
    DimensionError,
    InsufficientData,
    InvalidDataset,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, bool, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array holds at least one value.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        InvalidDataset: If array has no values
    """
    if array.size == 0:
        raise InvalidDataset(
            f"{name}: you must provide a dataset with at least 1 value, got 0",
            n_observations=0,
        )


def check_min_samples(n: int, min_samples: int, statistic: str) -> None:
    """
    Verify a dataset is large enough for a statistic.

    Args:
        n: Number of observations available
        min_samples: Minimum required observations
        statistic: Statistic name for error messages

    Raises:
        InsufficientData: If n < min_samples
    """
    if n < min_samples:
        raise InsufficientData(
            f"{statistic}: requires at least {min_samples} observations, got {n}",
            statistic=statistic,
            n_observations=n,
            required=min_samples,
        )


def check_sample_size(n: Any, name: str) -> int:
    """
    Verify a requested sample size is a non-negative integer.

    Args:
        n: Requested number of values
        name: Parameter name for error messages

    Returns:
        n as a Python int

    Raises:
        ValidationError: If n is not an integer or is negative
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(n).__name__}"
        )
    if n < 0:
        raise ValidationError(f"{name}: must be non-negative, got {n}")
    return int(n)


def check_interval(low: float, high: float, names: tuple[str, str]) -> None:
    """
    Verify low <= high.

    Args:
        low: Lower bound
        high: Upper bound
        names: Parameter names for (low, high) in error messages

    Raises:
        ValidationError: If low > high
    """
    if low > high:
        raise ValidationError(
            f"{names[0]} ({low}) must not exceed {names[1]} ({high})"
        )
