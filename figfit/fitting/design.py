"""
Fit Design.

The design holds the sample coordinates a fit works on: two parallel
float64 arrays extracted once, in input order, and frozen. Sample order
only matters to the segment fit, which takes its endpoints from the first
and last samples.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from figfit.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_point_array,
)
from figfit.geometry.point import Point
from figfit.geometry.vec import Vec


@dataclass(frozen=True)
class FitDesign:
    """
    Immutable sample set for figure fitting.

    Construction:
        FitDesign.from_points([Point(0, 1), Point(1, 2)])   # Vec / Point objects
        FitDesign.from_points([(0, 1), (1, 2)])             # coordinate pairs
        FitDesign.from_points(np.array([[0, 1], [1, 2]]))   # (N, 2) array
        FitDesign.from_arrays(x, y)                         # parallel arrays

    An empty design is valid; each fit checks its own minimum sample count.
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_points(cls, points: Iterable[Vec] | ArrayLike) -> FitDesign:
        """Build design from a sequence of points or an (N, 2) array."""
        if not isinstance(points, np.ndarray):
            points = [
                (p.x, p.y) if isinstance(p, Vec) else p
                for p in points
            ]
        arr = check_array(points, 'points')
        if arr.size == 0:
            arr = arr.reshape(0, 2)
        check_point_array(arr, 'points')
        return cls._build(arr[:, 0], arr[:, 1])

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> FitDesign:
        """Build design directly from parallel coordinate arrays."""
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        return cls._build(x_arr, y_arr)

    @classmethod
    def _build(cls, x: NDArray, y: NDArray) -> FitDesign:
        """Internal builder: validates and freezes the coordinate arrays."""
        x = np.array(x, dtype=np.float64)
        y = np.array(y, dtype=np.float64)
        check_finite(x, 'x')
        check_finite(y, 'y')
        x.flags.writeable = False
        y.flags.writeable = False
        return cls(_x=x, _y=y, _n=int(x.shape[0]))

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """x coordinates (n,), read-only."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """y coordinates (n,), read-only."""
        return self._y

    @property
    def n(self) -> int:
        """Number of samples."""
        return self._n

    def point(self, i: int) -> Point:
        """i-th sample as a Point; negative indices count from the end."""
        return Point(float(self._x[i]), float(self._y[i]))

    def points(self) -> list[Point]:
        return [Point(float(x), float(y)) for x, y in zip(self._x, self._y)]

    def extent(self) -> float:
        """Diagonal of the samples' bounding box, 0 for an empty design."""
        if self._n == 0:
            return 0.0
        return float(np.hypot(np.ptp(self._x), np.ptp(self._y)))

