"""
Uncorrelated noise generators.

Both generators draw from a caller-supplied numpy Generator so that a
fixed seed reproduces the same dataset bit for bit. Anything accepted by
np.random.default_rng (a Generator, an integer seed, a SeedSequence, or
None for fresh entropy) may be passed as rng.
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyanalyzer.core.validation import check_interval, check_sample_size

# Number of uniform rounds summed by normal_distribution
IRWIN_HALL_TERMS = 45


def _as_generator(rng: Any) -> np.random.Generator:
    """Return rng itself if it is a Generator, otherwise seed a new one."""
    return np.random.default_rng(rng)


def _scaled_draws(
    generator: np.random.Generator,
    n: int,
    low: float,
    high: float,
) -> NDArray[np.floating[Any]]:
    magnitude = high - low
    return magnitude * generator.random(n) + low


def uniform_distribution(
    rng: Any,
    n: int,
    min: float = 0.0,
    max: float = 1.0,
) -> NDArray[np.floating[Any]]:
    """
    Uncorrelated noise, uniformly distributed on [min, max).

    Draws n values u from [0, 1) and maps each to (max - min) * u + min.
    Exactly n draws are consumed from rng, in output order.

    Parameters
    ----------
    rng : numpy.random.Generator, int, or None
        Random source.
    n : int
        Sequence length (>= 0).
    min, max : float
        Interval bounds, min <= max.

    Returns
    -------
    ndarray of shape (n,), float64, in draw order (not sorted).

    Raises
    ------
    ValidationError
        If min > max. Reversed bounds would map draws onto (max, min]
        rather than [min, max), so they are refused instead of accepted.
    """
    n = check_sample_size(n, 'n')
    check_interval(min, max, ('min', 'max'))
    generator = _as_generator(rng)

    if n == 0:
        warnings.warn(
            "uniform_distribution: n=0 produces an empty dataset, which "
            "cannot be used to construct an Analyzer",
            RuntimeWarning,
            stacklevel=2,
        )

    return _scaled_draws(generator, n, min, max)


def normal_distribution(
    rng: Any,
    n: int,
    mean: float = 0.0,
    std: float = 1.0,
) -> NDArray[np.floating[Any]]:
    """
    Uncorrelated noise, approximately normally distributed.

    Irwin-Hall construction: IRWIN_HALL_TERMS rounds of
    uniform_distribution(rng, n, -1, 1) are summed element-wise, then
    each total is scaled by std and shifted by mean.

    The sum is not normalised to unit variance first. Each uniform on
    [-1, 1) has variance 1/3, so the output standard deviation is
    std * sqrt(IRWIN_HALL_TERMS / 3) = std * sqrt(15), not std.

    Parameters
    ----------
    rng : numpy.random.Generator, int, or None
        Random source. n * IRWIN_HALL_TERMS draws are consumed, one full
        round of n at a time.
    n : int
        Sequence length (>= 0).
    mean : float
        Location shift.
    std : float
        Scale multiplier applied to the summed uniforms.

    Returns
    -------
    ndarray of shape (n,), float64.
    """
    n = check_sample_size(n, 'n')
    generator = _as_generator(rng)

    if n == 0:
        warnings.warn(
            "normal_distribution: n=0 produces an empty dataset, which "
            "cannot be used to construct an Analyzer",
            RuntimeWarning,
            stacklevel=2,
        )

    total = np.zeros(n, dtype=np.float64)
    for _ in range(IRWIN_HALL_TERMS):
        total += _scaled_draws(generator, n, -1.0, 1.0)

    return std * total + mean
