"""
Tolerance tiers for numerical validation.

Every statistic is computed in float64 on the CPU, so a single tier
covers exact formula checks. A looser tier covers comparisons between
algebraically equal formulas that accumulate rounding differently
(e.g. np.var against a sum of squared deviations).

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='fp64',
    description='double precision, same formula',
)

FP64_REASSOCIATED = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='fp64_reassociated',
    description='double precision, algebraically equal formula',
)

__all__ = ['ToleranceTier', 'FP64', 'FP64_REASSOCIATED']
