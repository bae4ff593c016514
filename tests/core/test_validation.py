"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, non-numeric rejection
    - check_ndim / check_1d: dimensionality checks
    - check_not_empty: empty dataset rejection
    - check_min_samples: minimum observations per statistic
    - check_sample_size: generator length argument
    - check_interval: ordered bounds
"""

import numpy as np
import pytest

from pyanalyzer.core.exceptions import (
    DimensionError,
    InsufficientData,
    InvalidDataset,
    ValidationError,
)
from pyanalyzer.core.validation import (
    check_1d,
    check_array,
    check_interval,
    check_min_samples,
    check_ndim,
    check_not_empty,
    check_sample_size,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "values")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float64(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "values")
        assert result.dtype == np.float64

    def test_float32_promoted_to_float64(self):
        result = check_array(np.array([1.5, 2.5], dtype=np.float32), "values")
        assert result.dtype == np.float64

    def test_tuple_accepted(self):
        result = check_array((1.0, 2.0), "values")
        np.testing.assert_array_equal(result, [1.0, 2.0])

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "values")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1, "a", None], "values")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([True, False], "values")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "values")

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="my_param"):
            check_array(["x"], "my_param")


# ═══════════════════════════════════════════════════════════════════════
# check_ndim / check_1d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_1d_passes(self):
        check_1d(np.array([1.0, 2.0]), "values")

    def test_2d_fails_check_1d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.ones((2, 2)), "values")

    def test_scalar_fails_check_1d(self):
        with pytest.raises(DimensionError, match="got 0D"):
            check_1d(np.array(3.0), "values")

    def test_explicit_ndim(self):
        check_ndim(np.ones((2, 3)), 2, "values")


# ═══════════════════════════════════════════════════════════════════════
# check_not_empty
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNotEmpty:

    def test_nonempty_passes(self):
        check_not_empty(np.array([0.0]), "values")

    def test_empty_raises_invalid_dataset(self):
        with pytest.raises(InvalidDataset) as exc_info:
            check_not_empty(np.array([]), "values")
        assert exc_info.value.n_observations == 0


# ═══════════════════════════════════════════════════════════════════════
# check_min_samples
# ═══════════════════════════════════════════════════════════════════════


class TestCheckMinSamples:

    def test_exact_minimum_passes(self):
        check_min_samples(3, 3, "sample_skewness")

    def test_below_minimum_raises(self):
        with pytest.raises(InsufficientData) as exc_info:
            check_min_samples(3, 4, "sample_kurtosis")
        err = exc_info.value
        assert err.statistic == "sample_kurtosis"
        assert err.n_observations == 3
        assert err.required == 4
        assert "requires at least 4 observations, got 3" in str(err)


# ═══════════════════════════════════════════════════════════════════════
# check_sample_size / check_interval
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSampleSize:

    def test_int_returned(self):
        assert check_sample_size(10, "n") == 10

    def test_numpy_int_accepted(self):
        result = check_sample_size(np.int64(7), "n")
        assert result == 7
        assert type(result) is int

    def test_zero_accepted(self):
        assert check_sample_size(0, "n") == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            check_sample_size(-1, "n")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_sample_size(2.5, "n")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_sample_size(True, "n")


class TestCheckInterval:

    def test_ordered_passes(self):
        check_interval(-1.0, 1.0, ("min", "max"))

    def test_equal_passes(self):
        check_interval(2.0, 2.0, ("min", "max"))

    def test_reversed_raises(self):
        with pytest.raises(ValidationError, match="min"):
            check_interval(1.0, 0.0, ("min", "max"))
