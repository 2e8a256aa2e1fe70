"""
Solver dispatch for figure fitting.

This module provides the fit() function, the one-call public API that
wraps a Fitter run in a timed Result.
"""

import warnings
from typing import Iterable

from numpy.typing import ArrayLike

from figfit.core.compute.timing import Timer
from figfit.core.result import Result
from figfit.fitting.design import FitDesign
from figfit.fitting.fitter import Fitter, FigureKind
from figfit.fitting.solution import FitParams, FitSolution
from figfit.geometry.vec import Vec


def fit(
    points: Iterable[Vec] | ArrayLike | FitDesign,
    *,
    figure: FigureKind = 'line',
    rcond: float | None = None,
) -> FitSolution:
    """
    Fit a figure to a sample set.

    Args:
        points: Sequence of Point/Vec objects, of (x, y) pairs, an (N, 2)
            array, or a prebuilt FitDesign
        figure: Figure to fit:
            - 'point': centroid of the samples
            - 'line': infinite line, pseudo-inverse regression
            - 'segment': fitted line bounded by the first and last samples
            - 'circle': algebraic circle fit
        rcond: Relative cutoff for small singular values in the
            pseudo-inverse. None uses scipy's default.

    Returns:
        FitSolution with the figure, variance, residuals and summary

    Raises:
        ValueError: If figure is not a known figure
        ValidationError: If the samples are malformed or non-finite
        InsufficientSamplesError: If there are too few samples for the figure
        DegenerateInputError: If the samples cannot determine the figure

    Example:
        >>> from figfit import fit
        >>> result = fit([(1, 0), (-1, 0), (0, 1), (0, -1)], figure='circle')
        >>> print(result.figure)
        >>> print(result.summary())
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(points, FitDesign):
        design = points
    else:
        design = FitDesign.from_points(points)

    fitter = Fitter(design, rcond=rcond)

    # === Solve ===
    timer = Timer()
    timer.start()

    with timer.section('fit'):
        fitted, info, messages = fitter.fit_figure(figure)

    with timer.section('variance'):
        squared = fitter.squared_distances_to(fitted)
        variance = fitter.find_variance_about(fitted)

    timer.stop()

    warnings_list = list(messages)
    for message in warnings_list:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    # === Wrap and Return ===
    result = Result(
        params=FitParams(
            kind=figure,
            figure=fitted,
            variance=variance,
            squared_distances=squared,
        ),
        info=info,
        timing=timer.result(),
        backend_name=fitter.name,
        warnings=tuple(warnings_list),
    )
    return FitSolution(_result=result, _design=design)
