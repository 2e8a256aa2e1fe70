"""
Planar vector value type.

Vec is the arithmetic primitive everything else in figfit is built on.
It is immutable: every operation returns a new Vec.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from figfit.core.exceptions import UndefinedOperationError


@dataclass(frozen=True)
class Vec:
    """
    2D vector with x and y coordinates.

    Equality is exact coordinate comparison between values of the same
    type: Vec(1, 2) == Point(1, 2) is False, since a displacement is not a
    location. Compare coordinates (tuple(v) == tuple(p)) to mix them. The
    zero vector is a valid value, but normalized() is undefined for it.
    """
    x: float = 0.0
    y: float = 0.0

    # === Metrics ===

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def angle(self) -> float:
        """Orientation in radians, in range [-pi, pi]."""
        return math.atan2(self.y, self.x)

    def angle_deg(self) -> float:
        """Orientation in degrees, in range [-180, 180]."""
        return math.degrees(self.angle())

    # === Products ===

    def dot(self, v: Vec) -> float:
        return self.x * v.x + self.y * v.y

    def cross(self, v: Vec) -> float:
        """
        z coordinate of the cross product.

        Both vectors lie in the plane, so only the z component is non-zero.
        Note that a.cross(b) == -b.cross(a).
        """
        return self.x * v.y - self.y * v.x

    # === Transformations ===

    def normalized(self) -> Vec:
        """
        Unit vector with the same orientation.

        Raises:
            UndefinedOperationError: If this is the zero vector
        """
        length = self.length()
        if length == 0.0:
            raise UndefinedOperationError(
                "Cannot normalize a zero-length vector", operation='normalize'
            )
        return Vec(self.x / length, self.y / length)

    def rotate(self, angle: float) -> Vec:
        """Rotate counter-clockwise by angle (radians)."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Vec(c * self.x - s * self.y, s * self.x + c * self.y)

    def rotate90(self) -> Vec:
        """Rotate counter-clockwise by 90 degrees."""
        return Vec(-self.y, self.x)

    def perpendicular(self) -> Vec:
        return self.rotate90()

    def reflect(self, normal: Vec) -> Vec:
        """
        Reflect against a surface with the given normal.

        The normal is assumed to be of unit length; this is not checked.
        """
        k = 2.0 * normal.dot(self)
        return Vec(self.x - k * normal.x, self.y - k * normal.y)

    # === Conversion ===

    def to_array(self) -> NDArray[np.floating[Any]]:
        return np.array([self.x, self.y], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # === Arithmetic ===

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x - other.x, self.y - other.y)

    def __mul__(self, d: float) -> Vec:
        if isinstance(d, Vec):
            return NotImplemented
        return Vec(self.x * d, self.y * d)

    def __rmul__(self, d: float) -> Vec:
        return self.__mul__(d)

    def __truediv__(self, d: float) -> Vec:
        if isinstance(d, Vec):
            return NotImplemented
        return Vec(self.x / d, self.y / d)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y)

    def __pos__(self) -> Vec:
        return Vec(self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


def dot(v1: Vec, v2: Vec) -> float:
    """Dot product; dot(v1, v2) == dot(v2, v1)."""
    return v1.dot(v2)


def cross(v1: Vec, v2: Vec) -> float:
    """z coordinate of the cross product; cross(v1, v2) == -cross(v2, v1)."""
    return v1.cross(v2)


def normalize(v: Vec) -> Vec:
    """Free-function form of Vec.normalized()."""
    return v.normalized()
