"""
Tests for uniform and Irwin-Hall normal noise generators.

Determinism tests rebuild the expected output from a second Generator
with the same seed, drawing in the same order.
"""

import math

import numpy as np
import pytest

from pyanalyzer import Analyzer
from pyanalyzer.analyzer.noise import (
    IRWIN_HALL_TERMS,
    normal_distribution,
    uniform_distribution,
)
from pyanalyzer.core.exceptions import ValidationError


# ═══════════════════════════════════════════════════════════════════════
# uniform_distribution
# ═══════════════════════════════════════════════════════════════════════


class TestUniform:

    def test_unit_interval(self, rng):
        x = uniform_distribution(rng, 1000, 0, 1)
        assert x.shape == (1000,)
        assert x.dtype == np.float64
        assert np.all(x >= 0.0)
        assert np.all(x < 1.0)

    def test_custom_interval(self, rng):
        x = uniform_distribution(rng, 500, -3.0, 2.0)
        assert np.all(x >= -3.0)
        assert np.all(x < 2.0)

    def test_reproducible_per_seed(self):
        a = uniform_distribution(np.random.default_rng(7), 1000)
        b = uniform_distribution(np.random.default_rng(7), 1000)
        np.testing.assert_array_equal(a, b)

    def test_matches_scaled_draws(self):
        x = uniform_distribution(np.random.default_rng(11), 50, 10.0, 14.0)
        u = np.random.default_rng(11).random(50)
        np.testing.assert_array_equal(x, 4.0 * u + 10.0)

    def test_consumes_exactly_n_draws(self):
        rng = np.random.default_rng(3)
        reference = np.random.default_rng(3)
        uniform_distribution(rng, 17)
        reference.random(17)
        assert rng.random() == reference.random()

    def test_integer_seed_accepted(self):
        a = uniform_distribution(5, 20)
        b = uniform_distribution(np.random.default_rng(5), 20)
        np.testing.assert_array_equal(a, b)

    def test_not_sorted(self, rng):
        x = uniform_distribution(rng, 100)
        assert not np.all(np.diff(x) >= 0)

    def test_reversed_bounds_rejected(self, rng):
        with pytest.raises(ValidationError):
            uniform_distribution(rng, 10, 1.0, 0.0)

    def test_negative_n_rejected(self, rng):
        with pytest.raises(ValidationError):
            uniform_distribution(rng, -1)

    def test_non_integer_n_rejected(self, rng):
        with pytest.raises(ValidationError):
            uniform_distribution(rng, 2.5)

    def test_zero_warns_and_returns_empty(self, rng):
        with pytest.warns(RuntimeWarning, match="empty dataset"):
            x = uniform_distribution(rng, 0)
        assert x.shape == (0,)

    def test_static_method_delegates(self):
        a = Analyzer.uniform_distribution(np.random.default_rng(9), 30, -1.0, 1.0)
        b = uniform_distribution(np.random.default_rng(9), 30, -1.0, 1.0)
        np.testing.assert_array_equal(a, b)


# ═══════════════════════════════════════════════════════════════════════
# normal_distribution
# ═══════════════════════════════════════════════════════════════════════


class TestNormal:

    def test_length(self, rng):
        for n in (1, 10, 1000):
            assert normal_distribution(rng, n).shape == (n,)

    def test_terms_fixed_at_45(self):
        assert IRWIN_HALL_TERMS == 45

    def test_matches_summed_rounds(self):
        n = 64
        x = normal_distribution(np.random.default_rng(21), n, mean=2.0, std=0.5)

        reference = np.random.default_rng(21)
        total = np.zeros(n)
        for _ in range(45):
            total += 2.0 * reference.random(n) - 1.0
        np.testing.assert_array_equal(x, 0.5 * total + 2.0)

    def test_consumes_45n_draws(self):
        rng = np.random.default_rng(8)
        reference = np.random.default_rng(8)
        normal_distribution(rng, 10)
        reference.random(450)
        assert rng.random() == reference.random()

    def test_reproducible_per_seed(self):
        a = normal_distribution(np.random.default_rng(1), 200, 5.0, 2.0)
        b = normal_distribution(np.random.default_rng(1), 200, 5.0, 2.0)
        np.testing.assert_array_equal(a, b)

    def test_bounded_by_term_count(self, rng):
        x = normal_distribution(rng, 2000, mean=1.0, std=2.0)
        assert np.all(np.abs(x - 1.0) <= 45 * 2.0)

    def test_empirical_mean_converges(self):
        x = normal_distribution(np.random.default_rng(2024), 200_000, mean=10.0, std=1.0)
        # standard error is sqrt(15) / sqrt(n) ~ 0.0087
        assert abs(np.mean(x) - 10.0) < 0.05

    def test_spread_is_not_normalised(self):
        """Effective sd is std * sqrt(45 / 3) = std * sqrt(15)."""
        x = normal_distribution(np.random.default_rng(99), 100_000, std=1.0)
        np.testing.assert_allclose(np.std(x), math.sqrt(15), rtol=0.02)

    def test_zero_warns(self, rng):
        with pytest.warns(RuntimeWarning):
            x = normal_distribution(rng, 0)
        assert x.shape == (0,)

    def test_static_method_delegates(self):
        a = Analyzer.normal_distribution(np.random.default_rng(4), 30, 1.0, 3.0)
        b = normal_distribution(np.random.default_rng(4), 30, 1.0, 3.0)
        np.testing.assert_array_equal(a, b)


class TestGeneratedDatasetFeedsAnalyzer:
    """The presentation layer builds one Analyzer over 1000 uniform points."""

    def test_uniform_thousand(self):
        values = Analyzer.uniform_distribution(np.random.default_rng(0), 1000)
        a = Analyzer(values)
        q1, q3 = a.first_quartile(), a.third_quartile()
        assert 0.0 <= q1 < a.median() < q3 < 1.0
        assert 0.0 <= a.mean() < 1.0
