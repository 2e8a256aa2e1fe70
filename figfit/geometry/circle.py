"""
Circle figure.

A Circle is represented by its circumference, not its interior: the
distance from an interior point is its distance to the rim.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from figfit.core.compute.tolerances import ANGULAR
from figfit.core.exceptions import DegenerateInputError, UndefinedOperationError
from figfit.geometry.point import Point
from figfit.geometry.vec import Vec


@dataclass(frozen=True, init=False)
class Circle:
    """
    Circle with a center and a non-negative radius.

    Construction:
        Circle(center, radius)                 # absolute value of radius is kept
        Circle.from_three_points(p1, p2, p3)   # circumscribed circle
    """
    _center: Point
    _radius: float

    def __init__(self, center: Vec = Point(0.0, 0.0), radius: float = 1.0):
        object.__setattr__(self, '_center', Point(center.x, center.y))
        object.__setattr__(self, '_radius', abs(float(radius)))

    @classmethod
    def from_three_points(cls, p1: Vec, p2: Vec, p3: Vec) -> Circle:
        """
        Circle through three points, via the circumcenter formula.

        Collinearity is judged on the sine of the angle at p1, within the
        ANGULAR tolerance, not on an exact zero denominator.

        Raises:
            DegenerateInputError: If the points are collinear (or coincide)
        """
        a = p2 - p1
        b = p3 - p1
        scale = a.length() * b.length()
        if scale == 0.0 or ANGULAR.is_close(a.cross(b) / scale, 0.0):
            raise DegenerateInputError(
                f"Cannot create circle from three points lying on the same line: "
                f"{p1}, {p2}, {p3}",
                reason='collinear_points',
            )

        denominator = 2.0 * (p1.x * (p2.y - p3.y)
                             - p1.y * (p2.x - p3.x)
                             + p2.x * p3.y - p3.x * p2.y)
        s1 = p1.length_squared()
        s2 = p2.length_squared()
        s3 = p3.length_squared()

        x0 = (s1 * (p2.y - p3.y) + s2 * (p3.y - p1.y) + s3 * (p1.y - p2.y)) / denominator
        y0 = (s1 * (p3.x - p2.x) + s2 * (p1.x - p3.x) + s3 * (p2.x - p1.x)) / denominator

        center = Point(x0, y0)
        return cls(center, center.distance_to(p1))

    # === Properties ===

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    def circumference(self) -> float:
        return 2.0 * math.pi * self._radius

    def area(self) -> float:
        return math.pi * self._radius * self._radius

    # === Figure protocol ===

    def distance_squared_to(self, p: Vec) -> float:
        d = (p - self._center).length() - self._radius
        return d * d

    def distance_to(self, p: Vec) -> float:
        return abs((p - self._center).length() - self._radius)

    def find_projection_of(self, p: Vec) -> Point:
        """
        Nearest point on the circumference.

        Raises:
            UndefinedOperationError: If p coincides with the center
        """
        offset = p - self._center
        if offset.length_squared() == 0.0:
            raise UndefinedOperationError(
                f"Projection onto circle is undefined at its center {self._center}",
                operation='find_projection_of',
            )
        return self._center + self._radius * offset.normalized()

    def normal_to(self, p: Vec) -> Vec:
        """
        Unit vector from the circumference towards p.

        Points inward for encircled points and outward otherwise.

        Raises:
            UndefinedOperationError: If p coincides with the center or lies
                on the circumference
        """
        return (p - self.find_projection_of(p)).normalized()

    # === Containment ===

    def is_encircling(self, other: Vec | Circle) -> bool:
        """
        Check if a point or another circle lies inside this circle.

        Points on the circumference, and circles internally tangent to this
        one, count as encircled.
        """
        if isinstance(other, Circle):
            return self._radius >= self._center.distance_to(other._center) + other._radius
        return self._radius * self._radius >= (other - self._center).length_squared()

    def __repr__(self) -> str:
        return f"Circle(center={self._center!r}, radius={self._radius!r})"

    def __str__(self) -> str:
        return f"[{self._center}, {self._radius:g}]"
