"""
Fitter: least squares regression of figures onto a sample set.

Every fit except the point fit rewrites its figure's implicit equation
as a linear system in the unknown parameters and solves it with the
Moore-Penrose pseudo-inverse:

    line:    [x_i, y_i]    @ (A, B)        = 1               (C fixed to -1)
    circle:  [x_i, y_i, 1] @ (a1, a2, a3)  = (x_i^2 + y_i^2) / 2

with center = (a1, a2) and radius^2 = a1^2 + a2^2 + 2*a3 for the circle.

Fixing the line's right-hand side to a non-zero constant turns the
homogeneous line problem into ordinary least squares, at the price of not
being able to represent lines through the origin. Samples exactly collinear
with the origin make the design rank-deficient and raise
DegenerateInputError; noisy samples near such a line produce a warning.

The variance reported alongside a figure is the mean squared distance of
the samples to it, computed through the Figure protocol so it means the
same thing for every figure kind.
"""

from __future__ import annotations

import math
import warnings
from typing import Any, Iterable, Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from figfit.core.compute.linalg import pinv_solve
from figfit.core.compute.tolerances import ORIGIN_PROXIMITY, SEGMENT_OVERHANG
from figfit.core.exceptions import DegenerateInputError
from figfit.core.protocols import Figure
from figfit.core.validation import check_min_samples
from figfit.fitting.design import FitDesign
from figfit.geometry.circle import Circle
from figfit.geometry.line import Line
from figfit.geometry.point import Point
from figfit.geometry.segment import Segment
from figfit.geometry.vec import Vec


FigureKind = Literal['point', 'line', 'segment', 'circle']

MIN_SAMPLES: dict[str, int] = {
    'point': 1,
    'line': 2,
    'segment': 2,
    'circle': 3,
}


class Fitter:
    """
    Regression engine over one immutable sample set.

    Each fit_* call is independent and leaves the Fitter untouched, so a
    single instance can serve any number of fits, from any thread.

    Args:
        points: Sequence of Point/Vec objects, of (x, y) pairs, or an
            (N, 2) array. Order is preserved.
        rcond: Relative cutoff for small singular values in the
            pseudo-inverse. None uses scipy's default.

    Example:
        >>> fitter = Fitter([(1, 0), (-1, 0), (0, 1), (0, -1)])
        >>> circle, variance = fitter.fit_circle(with_variance=True)
        >>> circle.radius
        1.0
    """

    def __init__(
        self,
        points: Iterable[Vec] | ArrayLike | FitDesign,
        *,
        rcond: float | None = None,
    ):
        if isinstance(points, FitDesign):
            self._design = points
        else:
            self._design = FitDesign.from_points(points)
        self._rcond = rcond

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike, *, rcond: float | None = None) -> Fitter:
        return cls(FitDesign.from_arrays(x, y), rcond=rcond)

    @property
    def name(self) -> str:
        return 'cpu_pinv'

    # === Accessors ===

    @property
    def design(self) -> FitDesign:
        return self._design

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def x_coords(self) -> NDArray[np.floating[Any]]:
        return self._design.x

    @property
    def y_coords(self) -> NDArray[np.floating[Any]]:
        return self._design.y

    def points(self) -> list[Point]:
        return self._design.points()

    # === Public fits ===

    def fit_point(self, *, with_variance: bool = False) -> Point | tuple[Point, float]:
        """
        Fit the centroid of the samples.

        Raises:
            InsufficientSamplesError: If there are no samples
        """
        point, _, _ = self._fit_point()
        return self._with_variance(point, with_variance)

    def fit_line(self, *, with_variance: bool = False) -> Line | tuple[Line, float]:
        """
        Fit a line by pseudo-inverse regression with C fixed to -1.

        Raises:
            InsufficientSamplesError: If there are fewer than two samples
            DegenerateInputError: If the samples are collinear with the
                origin or all coincide, so that (A, B) is undetermined
        """
        line, _, messages = self._fit_line()
        _issue(messages)
        return self._with_variance(line, with_variance)

    def fit_segment(self, *, with_variance: bool = False) -> Segment | tuple[Segment, float]:
        """
        Fit a segment: fit_line(), then project the first and last samples.

        The segment's extent comes from the input order, not from the
        extreme projections, so samples should run along the segment.

        Raises:
            InsufficientSamplesError: If there are fewer than two samples
            DegenerateInputError: As fit_line(), or if the first and last
                samples project onto the same point
        """
        segment, _, messages = self._fit_segment()
        _issue(messages)
        return self._with_variance(segment, with_variance)

    def fit_circle(self, *, with_variance: bool = False) -> Circle | tuple[Circle, float]:
        """
        Fit a circle with the algebraic (Kasa) formulation.

        Raises:
            InsufficientSamplesError: If there are fewer than three samples
            DegenerateInputError: If the samples are collinear or the
                recovered squared radius is negative
        """
        circle, _, _ = self._fit_circle()
        return self._with_variance(circle, with_variance)

    def fit_figure(self, kind: FigureKind) -> tuple[Figure, dict[str, Any], list[str]]:
        """
        Fit the figure named by kind.

        Returns the figure, the solver info, and the diagnostic messages
        about the fit's reliability. The messages are returned, not issued
        as warnings, so callers can record them without touching the
        process-wide warnings state.

        Raises:
            ValueError: If kind is not a known figure
        """
        dispatch = {
            'point': self._fit_point,
            'line': self._fit_line,
            'segment': self._fit_segment,
            'circle': self._fit_circle,
        }
        if kind not in dispatch:
            raise ValueError(f"Unknown figure: {kind!r}")
        return dispatch[kind]()

    # === Variance ===

    def squared_distances_to(self, figure: Figure) -> NDArray[np.floating[Any]]:
        """Squared distance of every sample to the figure, in input order."""
        return np.array(
            [figure.distance_squared_to(p) for p in self._design.points()],
            dtype=np.float64,
        )

    def find_variance_about(self, figure: Figure) -> float:
        """
        Mean squared distance of the samples to the figure.

        Raises:
            InsufficientSamplesError: If there are no samples
        """
        check_min_samples(self.n, 1, 'variance')
        total = 0.0
        for p in self._design.points():
            total += figure.distance_squared_to(p)
        return total / self.n

    def _with_variance(self, figure, with_variance: bool):
        if with_variance:
            return figure, self.find_variance_about(figure)
        return figure

    # === Regressions ===

    def _fit_point(self) -> tuple[Point, dict[str, Any], list[str]]:
        check_min_samples(self.n, MIN_SAMPLES['point'], 'point')
        point = Point(float(np.mean(self.x_coords)), float(np.mean(self.y_coords)))
        return point, {'method': 'centroid'}, []

    def _fit_line(self) -> tuple[Line, dict[str, Any], list[str]]:
        check_min_samples(self.n, MIN_SAMPLES['line'], 'line')

        X = np.column_stack([self.x_coords, self.y_coords])
        target = np.ones(self.n)
        solved = pinv_solve(X, target, rcond=self._rcond)

        if not solved.is_full_rank:
            raise DegenerateInputError(
                f"Line fit design is rank-deficient (rank={solved.rank}, expected=2): "
                f"samples coincide or are collinear with the origin, which the "
                f"A*x + B*y = 1 formulation cannot represent",
                reason='rank_deficient',
            )

        A, B = (float(c) for c in solved.coefficients)
        if A == 0.0 and B == 0.0:
            raise DegenerateInputError(
                "Line fit yielded zero coefficients (A, B) = (0, 0)",
                reason='zero_coefficients',
            )

        line = Line(A, B, -1.0)
        return line, _solver_info(solved), self._check_origin_proximity(line)

    def _fit_segment(self) -> tuple[Segment, dict[str, Any], list[str]]:
        line, info, messages = self._fit_line()

        start = line.find_projection_of(self._design.point(0))
        end = line.find_projection_of(self._design.point(-1))
        if start == end:
            raise DegenerateInputError(
                f"First and last samples project onto the same point {start}; "
                f"cannot bound the segment",
                reason='zero_length',
            )

        segment = Segment(start, end)
        return segment, info, messages + self._check_segment_order(segment)

    def _fit_circle(self) -> tuple[Circle, dict[str, Any], list[str]]:
        check_min_samples(self.n, MIN_SAMPLES['circle'], 'circle')

        x, y = self.x_coords, self.y_coords
        X = np.column_stack([x, y, np.ones(self.n)])
        target = (x * x + y * y) / 2.0
        solved = pinv_solve(X, target, rcond=self._rcond)

        if not solved.is_full_rank:
            raise DegenerateInputError(
                f"Circle fit design is rank-deficient (rank={solved.rank}, expected=3): "
                f"samples are collinear or coincide",
                reason='rank_deficient',
            )

        a1, a2, a3 = (float(c) for c in solved.coefficients)
        radicand = a1 * a1 + a2 * a2 + 2.0 * a3
        if radicand < 0.0:
            raise DegenerateInputError(
                f"Circle fit yielded a negative squared radius ({radicand:.6g})",
                reason='negative_radicand',
            )

        return Circle(Point(a1, a2), math.sqrt(radicand)), _solver_info(solved), []

    # === Diagnostics ===

    def _check_origin_proximity(self, line: Line) -> list[str]:
        extent = self._design.extent()
        if abs(line.C) < ORIGIN_PROXIMITY.rtol * extent:
            return [
                f"Fitted line passes within {abs(line.C):.3g} of the origin "
                f"(sample extent {extent:.3g}); the fixed right-hand side "
                f"formulation is unreliable for lines through the origin"
            ]
        return []

    def _check_segment_order(self, segment: Segment) -> list[str]:
        t = np.array([segment.parametric_representation(p) for p in self._design.points()])
        overhang = max(-float(t.min()), float(t.max()) - 1.0)
        if overhang > SEGMENT_OVERHANG.atol:
            return [
                f"Samples project up to {overhang:.3g} segment lengths past an "
                f"endpoint; the first and last samples are not the extreme "
                f"points, so samples are likely not ordered along the segment"
            ]
        return []


def _issue(messages: list[str]) -> None:
    # stacklevel 3 points at the caller of the public fit_* method
    for message in messages:
        warnings.warn(message, RuntimeWarning, stacklevel=3)


def _solver_info(solved) -> dict[str, Any]:
    return {
        'method': 'pinv',
        'rank': solved.rank,
        'condition_number': solved.condition_number,
    }
