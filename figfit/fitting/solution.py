"""
Fit solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from figfit.core.protocols import Figure
from figfit.core.result import Result

if TYPE_CHECKING:
    from figfit.fitting.design import FitDesign


@dataclass(frozen=True)
class FitParams:
    """
    Parameter payload for a figure fit.

    This is the immutable data computed by the Fitter.
    """
    kind: str
    figure: Figure
    variance: float
    squared_distances: NDArray[np.floating[Any]]


@dataclass
class FitSolution:
    """
    User-facing fit results.

    Wraps the Result envelope and provides accessors for the fitted figure
    and its goodness-of-fit numbers.
    """
    _result: Result[FitParams]
    _design: 'FitDesign'

    @property
    def figure(self) -> Figure:
        return self._result.params.figure

    @property
    def kind(self) -> str:
        return self._result.params.kind

    @property
    def variance(self) -> float:
        """Mean squared distance of the samples to the figure."""
        return self._result.params.variance

    @property
    def rms(self) -> float:
        return float(np.sqrt(self.variance))

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """Unsigned distance of each sample to the figure, in input order."""
        return np.sqrt(self._result.params.squared_distances)

    @property
    def max_residual(self) -> float:
        return float(self.residuals.max())

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text fit report."""
        lines = [
            f"{self.kind.capitalize()} Fit Results",
            "=" * 60,
            f"Samples: {self.n}",
            f"Figure: {self.figure!r}",
            f"Variance: {self.variance:.6g}",
            f"RMS distance: {self.rms:.6g}",
            f"Max distance: {self.max_residual:.6g}",
        ]

        if 'rank' in self.info:
            lines.append(f"Rank: {self.info['rank']}")
        if 'condition_number' in self.info:
            lines.append(f"Condition number: {self.info['condition_number']:.4g}")

        if self.warnings:
            lines.append("-" * 60)
            lines.append("Warnings:")
            for w in self.warnings:
                lines.append(f"  {w}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"FitSolution(kind={self.kind!r}, n={self.n}, "
            f"variance={self.variance:.4g})"
        )
