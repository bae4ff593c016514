"""
Generic result container for pyanalyzer computations.

The Result class provides a standardized envelope for batch computations
such as describe(). It carries timing, warnings and reproducibility
metadata alongside a domain-specific parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (requested statistics, counts)
    - timing is optional (don't burden unit tests)
    - provenance for reproducibility (versions, algorithm)
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, Any]:
    """Generate minimal provenance metadata."""
    import numpy as np
    import pyanalyzer
    return {
        'pyanalyzer_version': pyanalyzer.__version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (statistic values)
        info: Structured metadata (requested statistics, dataset size)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Reproducibility metadata (versions, algorithm)

    Examples:
        >>> Result(
        ...     params=AnalyzerParams(count=5, mean=3.0),
        ...     info={'computed': ['mean']},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_analyzer'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
