"""
Point figure.

A Point is a Vec used as a location. Point - Point is a displacement Vec,
Point + Vec (or Vec + Point) is a translated Point.
"""

from __future__ import annotations

from dataclasses import dataclass

from figfit.geometry.vec import Vec


@dataclass(frozen=True)
class Point(Vec):
    """
    Point in the plane, and the simplest Figure.

    The projection of any point onto a Point is the Point itself.
    """

    @classmethod
    def from_vec(cls, v: Vec) -> Point:
        return cls(v.x, v.y)

    # === Figure protocol ===

    def distance_squared_to(self, p: Vec) -> float:
        return (p - self).length_squared()

    def distance_to(self, p: Vec) -> float:
        return (p - self).length()

    def find_projection_of(self, p: Vec) -> Point:
        return self

    def normal_to(self, p: Vec) -> Vec:
        """
        Unit vector from this point towards p.

        Raises:
            UndefinedOperationError: If p coincides with this point
        """
        return Vec(p.x - self.x, p.y - self.y).normalized()

    # === Affine arithmetic ===

    def __add__(self, other: Vec) -> Point:
        if not isinstance(other, Vec):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __radd__(self, other: Vec) -> Point:
        if not isinstance(other, Vec):
            return NotImplemented
        return Point(other.x + self.x, other.y + self.y)

    def __sub__(self, other: Vec) -> Vec:
        if isinstance(other, Point):
            return Vec(self.x - other.x, self.y - other.y)
        if isinstance(other, Vec):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Point(x={self.x!r}, y={self.y!r})"
