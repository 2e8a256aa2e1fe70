"""
Planar geometry: the Vec primitive and the fittable figures.

Every figure (Point, Line, Segment, Circle) satisfies the
figfit.core.protocols.Figure protocol: distance_squared_to, distance_to,
find_projection_of and normal_to.
"""

from figfit.geometry.vec import Vec, dot, cross, normalize
from figfit.geometry.point import Point
from figfit.geometry.line import Line
from figfit.geometry.segment import Segment
from figfit.geometry.circle import Circle

__all__ = [
    "Vec",
    "dot",
    "cross",
    "normalize",
    "Point",
    "Line",
    "Segment",
    "Circle",
]
