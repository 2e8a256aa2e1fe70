"""
Infinite line figure.

The line is stored in normalized general form A*x + B*y + C = 0 with
A^2 + B^2 = 1 and C <= 0. Under that normalization (A, B) is the unit
normal and |C| the distance from the origin, which is what makes the
closed-form distance and projection below valid.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from figfit.core.compute.tolerances import ANGULAR, ToleranceTier
from figfit.core.exceptions import DegenerateInputError
from figfit.geometry.point import Point
from figfit.geometry.vec import Vec


@dataclass(frozen=True, init=False)
class Line:
    """
    Line A*x + B*y + C = 0 in canonical form.

    Construction:
        Line(A, B, C)                  # any non-degenerate coefficients
        Line.from_points(p1, p2)       # through two distinct points

    Raises:
        DegenerateInputError: If A == B == 0, or if the two points coincide
    """
    _A: float
    _B: float
    _C: float

    def __init__(self, A: float = 1.0, B: float = 0.0, C: float = 0.0):
        norm = math.hypot(A, B)
        if norm == 0.0:
            raise DegenerateInputError(
                f"Cannot normalize line coefficients: A^2 + B^2 == 0 (C={C})",
                reason='zero_coefficients',
            )
        mu = -1.0 / norm if C > 0.0 else 1.0 / norm
        object.__setattr__(self, '_A', A * mu)
        object.__setattr__(self, '_B', B * mu)
        object.__setattr__(self, '_C', C * mu)

    @classmethod
    def from_points(cls, p1: Vec, p2: Vec) -> Line:
        dx = p2.x - p1.x
        dy = p2.y - p1.y
        if dx == 0.0 and dy == 0.0:
            raise DegenerateInputError(
                f"Cannot calculate line parameters from two identical points {p1}",
                reason='coincident_points',
            )
        return cls(dy, -dx, dx * p1.y - dy * p1.x)

    # === Properties ===

    @property
    def A(self) -> float:
        return self._A

    @property
    def B(self) -> float:
        return self._B

    @property
    def C(self) -> float:
        return self._C

    @property
    def coefficients(self) -> tuple[float, float, float]:
        return (self._A, self._B, self._C)

    @property
    def normal(self) -> Vec:
        """Unit normal (A, B), pointing away from the origin."""
        return Vec(self._A, self._B)

    @property
    def direction(self) -> Vec:
        """Unit direction vector, the normal rotated by -90 degrees."""
        return Vec(self._B, -self._A)

    # === Figure protocol ===

    def signed_distance_to(self, p: Vec) -> float:
        """A*x + B*y + C; positive on the side the normal points to."""
        return self._A * p.x + self._B * p.y + self._C

    def distance_squared_to(self, p: Vec) -> float:
        d = self.signed_distance_to(p)
        return d * d

    def distance_to(self, p: Vec) -> float:
        return abs(self.signed_distance_to(p))

    def find_projection_of(self, p: Vec) -> Point:
        A, B, C = self._A, self._B, self._C
        return Point(
            B * (B * p.x - A * p.y) - A * C,
            A * (A * p.y - B * p.x) - B * C,
        )

    def normal_to(self, p: Vec) -> Vec:
        """
        Unit vector from the line towards p.

        Raises:
            UndefinedOperationError: If p lies on the line
        """
        return (p - self.find_projection_of(p)).normalized()

    # === Line specific ===

    def contains(self, p: Vec, atol: float = 1e-12) -> bool:
        return self.distance_to(p) <= atol

    def is_parallel_to(self, other: Line, tolerance: ToleranceTier = ANGULAR) -> bool:
        """True for parallel and anti-parallel lines, coincident included."""
        return tolerance.is_close(self.normal.cross(other.normal), 0.0)

    def is_perpendicular_to(self, other: Line, tolerance: ToleranceTier = ANGULAR) -> bool:
        return tolerance.is_close(self.normal.dot(other.normal), 0.0)

    def intersection_with(self, other: Line) -> Point:
        """
        Intersection point of two lines (Cramer's rule).

        Raises:
            DegenerateInputError: If the lines are parallel or coincident, up
                to the ANGULAR tolerance on their unit normals
        """
        if self.is_parallel_to(other):
            raise DegenerateInputError(
                f"Lines {self} and {other} are parallel and do not intersect",
                reason='parallel_lines',
            )
        det = self._A * other._B - self._B * other._A
        x = (self._B * other._C - other._B * self._C) / det
        y = (other._A * self._C - self._A * other._C) / det
        return Point(x, y)

    def __repr__(self) -> str:
        return f"Line(A={self._A!r}, B={self._B!r}, C={self._C!r})"

    def __str__(self) -> str:
        return f"({self._A:g}, {self._B:g}, {self._C:g})"
