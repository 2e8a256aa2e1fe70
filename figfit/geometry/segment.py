"""
Bounded line segment figure.

A Segment owns its supporting Line and two ordered endpoints. The order
matters: the parametric coordinate t runs from 0 at start to 1 at end.
Distance and projection delegate to the supporting line only while the
projection falls between the endpoints; past either end the nearest
endpoint is used instead.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from figfit.core.exceptions import DegenerateInputError
from figfit.geometry.line import Line
from figfit.geometry.point import Point
from figfit.geometry.vec import Vec


@dataclass(frozen=True, init=False)
class Segment:
    """
    Segment from start to end.

    Raises:
        DegenerateInputError: If start == end
    """
    _start: Point
    _end: Point
    _line: Line

    def __init__(self, start: Vec = Point(0.0, 0.0), end: Vec = Point(1.0, 0.0)):
        start = Point(start.x, start.y)
        end = Point(end.x, end.y)
        if start == end:
            raise DegenerateInputError(
                f"Cannot create segment with identical endpoints {start}",
                reason='zero_length',
            )
        object.__setattr__(self, '_start', start)
        object.__setattr__(self, '_end', end)
        object.__setattr__(self, '_line', Line.from_points(start, end))

    # === Properties ===

    @property
    def start_point(self) -> Point:
        return self._start

    @property
    def end_point(self) -> Point:
        return self._end

    @property
    def line(self) -> Line:
        """Supporting line."""
        return self._line

    @property
    def midpoint(self) -> Point:
        return self.point_at(0.5)

    @property
    def direction(self) -> Vec:
        """Unit vector from start to end."""
        return (self._end - self._start).normalized()

    def length_squared(self) -> float:
        return (self._end - self._start).length_squared()

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    # === Parametrization ===

    def parametric_representation(self, p: Vec) -> float:
        """
        Position t of p's projection along the segment.

        t is 0 at start and 1 at end; it is below 0 or above 1 when the
        projection onto the supporting line falls outside the segment.

        Raises:
            DegenerateInputError: If the segment has zero length
        """
        length_squared = self.length_squared()
        if length_squared == 0.0:
            raise DegenerateInputError(
                "Could not find parametric representation for zero-length segment",
                reason='zero_length',
            )
        a = self._end - self._start
        b = p - self._start
        return a.dot(b) / length_squared

    def point_at(self, t: float) -> Point:
        """Point start + t * (end - start); t outside [0, 1] extrapolates."""
        return self._start + t * (self._end - self._start)

    # === Figure protocol ===

    def distance_squared_to(self, p: Vec) -> float:
        t = self.parametric_representation(p)
        if t < 0.0:
            return (p - self._start).length_squared()
        if t > 1.0:
            return (p - self._end).length_squared()
        return self._line.distance_squared_to(p)

    def distance_to(self, p: Vec) -> float:
        return math.sqrt(self.distance_squared_to(p))

    def find_projection_of(self, p: Vec) -> Point:
        t = self.parametric_representation(p)
        if t < 0.0:
            return self._start
        if t > 1.0:
            return self._end
        return self._line.find_projection_of(p)

    def normal_to(self, p: Vec) -> Vec:
        """
        Unit vector from the nearest point of the segment towards p.

        Past either end this points away from the nearest endpoint.

        Raises:
            UndefinedOperationError: If p lies on the segment
        """
        return (p - self.find_projection_of(p)).normalized()

    def __repr__(self) -> str:
        return f"Segment(start={self._start!r}, end={self._end!r})"

    def __str__(self) -> str:
        return f"[{self._start}, {self._end}]"
