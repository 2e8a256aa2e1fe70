"""
Figure fitting.

Least squares regression of points, lines, segments and circles onto a
sample set, with a mean-squared-distance variance as fit quality.

Public API:
    Fitter(points)            -> fit_point / fit_line / fit_segment / fit_circle
    fit(points, figure=...)   -> FitSolution

Example:
    >>> from figfit.fitting import Fitter
    >>> line, variance = Fitter(samples).fit_line(with_variance=True)

    >>> from figfit.fitting import fit
    >>> result = fit(samples, figure='segment')
    >>> print(result.summary())
"""

from figfit.fitting.design import FitDesign
from figfit.fitting.fitter import Fitter, FigureKind, MIN_SAMPLES
from figfit.fitting.solution import FitSolution, FitParams
from figfit.fitting.solvers import fit

__all__ = [
    "fit",
    "Fitter",
    "FigureKind",
    "MIN_SAMPLES",
    "FitDesign",
    "FitSolution",
    "FitParams",
]
