"""
Tests for the Circle figure.
"""

import math

import pytest

from figfit.core.exceptions import DegenerateInputError, UndefinedOperationError
from figfit.core.protocols import Figure
from figfit.geometry import Circle, Point


@pytest.fixture
def circle():
    """Circle centered at (1, 2) with radius 5."""
    return Circle(Point(1.0, 2.0), 5.0)


class TestConstruction:

    def test_fields(self, circle):
        assert circle.center == Point(1.0, 2.0)
        assert circle.radius == 5.0
        assert isinstance(circle, Figure)

    def test_negative_radius_made_absolute(self):
        assert Circle(Point(0.0, 0.0), -2.0).radius == 2.0

    def test_default_unit_circle(self):
        c = Circle()
        assert c.center == Point(0.0, 0.0)
        assert c.radius == 1.0

    def test_from_three_points(self):
        c = Circle.from_three_points(Point(1.0, 0.0), Point(-1.0, 0.0), Point(0.0, 1.0))
        assert c.center.x == pytest.approx(0.0)
        assert c.center.y == pytest.approx(0.0)
        assert c.radius == pytest.approx(1.0)

    def test_from_three_points_offset(self, circle, rng):
        angles = rng.uniform(0.0, 2.0 * math.pi, 3)
        pts = [circle.center + circle.radius * Point(math.cos(a), math.sin(a)) for a in angles]
        c = Circle.from_three_points(*pts)
        assert c.center.x == pytest.approx(1.0)
        assert c.center.y == pytest.approx(2.0)
        assert c.radius == pytest.approx(5.0)

    def test_collinear_points_raise(self):
        with pytest.raises(DegenerateInputError) as exc:
            Circle.from_three_points(Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 2.0))
        assert exc.value.reason == "collinear_points"

    def test_coincident_points_raise(self):
        with pytest.raises(DegenerateInputError):
            Circle.from_three_points(Point(1.0, 1.0), Point(1.0, 1.0), Point(3.0, 0.0))

    @pytest.mark.parametrize("points", [
        ((1.0, 0.1), (2.0, 0.2), (3.0, 0.3)),
        ((0.1, 0.3), (0.7, 2.1), (1.1, 3.3)),
        ((0.1, 0.2), (0.3, 0.6), (0.7, 1.4)),
    ])
    def test_rounded_collinear_points_raise(self, points):
        """Collinear points with inexact coordinates still count as collinear."""
        with pytest.raises(DegenerateInputError) as exc:
            Circle.from_three_points(*(Point(x, y) for x, y in points))
        assert exc.value.reason == "collinear_points"


class TestFigureContract:

    def test_distance_outside(self, circle):
        p = Point(1.0, 10.0)
        assert circle.distance_to(p) == 3.0
        assert circle.distance_squared_to(p) == 9.0

    def test_distance_inside(self, circle):
        assert circle.distance_to(Point(1.0, 4.0)) == 3.0

    def test_distance_at_center_is_radius(self, circle):
        assert circle.distance_to(circle.center) == 5.0

    def test_projection(self, circle):
        assert circle.find_projection_of(Point(1.0, 10.0)) == Point(1.0, 7.0)
        assert circle.find_projection_of(Point(2.0, 2.0)) == Point(6.0, 2.0)

    def test_projection_at_center_undefined(self, circle):
        with pytest.raises(UndefinedOperationError):
            circle.find_projection_of(Point(1.0, 2.0))

    def test_normal_outward_and_inward(self, circle):
        out = circle.normal_to(Point(1.0, 10.0))
        assert (out.x, out.y) == pytest.approx((0.0, 1.0))
        inward = circle.normal_to(Point(1.0, 4.0))
        assert (inward.x, inward.y) == pytest.approx((0.0, -1.0))

    def test_normal_at_center_undefined(self, circle):
        with pytest.raises(UndefinedOperationError):
            circle.normal_to(circle.center)

    def test_distance_is_sqrt_of_squared(self, circle, rng):
        for _ in range(30):
            p = Point(*rng.uniform(-10.0, 10.0, 2))
            assert circle.distance_to(p) == pytest.approx(math.sqrt(circle.distance_squared_to(p)))


class TestCircleSpecific:

    def test_encircles_point(self, circle):
        assert circle.is_encircling(Point(1.0, 2.0))
        assert circle.is_encircling(Point(6.0, 2.0))  # on circumference
        assert not circle.is_encircling(Point(7.0, 2.0))

    def test_encircles_circle(self, circle):
        assert circle.is_encircling(Circle(Point(1.0, 2.0), 2.0))
        assert circle.is_encircling(Circle(Point(4.0, 2.0), 2.0))  # internally tangent
        assert not circle.is_encircling(Circle(Point(5.0, 2.0), 2.0))
        assert not Circle(Point(1.0, 2.0), 2.0).is_encircling(circle)

    def test_measures(self, circle):
        assert circle.circumference() == pytest.approx(10.0 * math.pi)
        assert circle.area() == pytest.approx(25.0 * math.pi)

    def test_repr(self):
        assert repr(Circle(Point(0.0, 1.0), 2.0)) == "Circle(center=Point(x=0.0, y=1.0), radius=2.0)"
