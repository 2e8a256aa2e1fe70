"""
Generic result container for figfit computations.

The Result class is the envelope every fit is wrapped in before it reaches
the user-facing solution object. It keeps timing, diagnostics and
warnings alongside the fitted parameters.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (method, rank, condition number)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for fitting computations.

    Attributes:
        params: Fit payload (figure, variance, per-sample residuals)
        info: Structured metadata (method, rank, condition number)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the engine that produced this result
        warnings: Non-fatal issues encountered during the fit

    Examples:
        >>> Result(
        ...     params=FitParams(kind='circle', figure=circle, ...),
        ...     info={'method': 'pinv', 'rank': 3},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_pinv'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
