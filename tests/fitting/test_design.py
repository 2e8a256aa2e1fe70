"""
Tests for FitDesign construction and validation.
"""

import numpy as np
import pytest

from figfit.core.exceptions import DimensionError, ValidationError
from figfit.fitting import FitDesign
from figfit.geometry import Point, Vec


class TestFromPoints:

    def test_from_point_objects(self):
        design = FitDesign.from_points([Point(1.0, 2.0), Point(3.0, 4.0), Vec(5.0, 6.0)])
        assert design.n == 3
        np.testing.assert_array_equal(design.x, [1.0, 3.0, 5.0])
        np.testing.assert_array_equal(design.y, [2.0, 4.0, 6.0])

    def test_from_pairs(self):
        design = FitDesign.from_points([(1, 2), (3, 4)])
        assert design.x.dtype == np.float64
        assert design.n == 2

    def test_from_array(self):
        arr = np.array([[0.0, 1.0], [2.0, 3.0]])
        design = FitDesign.from_points(arr)
        np.testing.assert_array_equal(design.y, [1.0, 3.0])

    def test_from_generator(self):
        design = FitDesign.from_points(Point(float(i), 0.0) for i in range(4))
        assert design.n == 4

    def test_order_preserved(self):
        design = FitDesign.from_points([(3.0, 0.0), (1.0, 0.0), (2.0, 0.0)])
        assert design.point(0) == Point(3.0, 0.0)
        assert design.point(-1) == Point(2.0, 0.0)
        assert design.points() == [Point(3.0, 0.0), Point(1.0, 0.0), Point(2.0, 0.0)]

    def test_empty_is_valid(self):
        design = FitDesign.from_points([])
        assert design.n == 0
        assert design.extent() == 0.0

    def test_wrong_shape(self):
        with pytest.raises(DimensionError):
            FitDesign.from_points(np.zeros((4, 3)))

    def test_non_finite(self):
        with pytest.raises(ValidationError, match="non-finite"):
            FitDesign.from_points([(0.0, 1.0), (np.nan, 2.0)])

    def test_non_numeric(self):
        with pytest.raises(ValidationError):
            FitDesign.from_points([("a", "b")])


class TestFromArrays:

    def test_parallel_arrays(self):
        design = FitDesign.from_arrays([0.0, 1.0, 2.0], [5.0, 6.0, 7.0])
        assert design.n == 3
        assert design.point(1) == Point(1.0, 6.0)

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match="Inconsistent lengths"):
            FitDesign.from_arrays([0.0, 1.0], [0.0])

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            FitDesign.from_arrays(np.zeros((2, 2)), np.zeros((2, 2)))


class TestImmutability:

    def test_arrays_read_only(self):
        design = FitDesign.from_points([(0.0, 1.0), (2.0, 3.0)])
        with pytest.raises(ValueError):
            design.x[0] = 10.0

    def test_input_not_aliased(self):
        arr = np.array([[0.0, 1.0], [2.0, 3.0]])
        design = FitDesign.from_points(arr)
        arr[0, 0] = 99.0
        assert design.x[0] == 0.0

    def test_extent(self):
        design = FitDesign.from_points([(0.0, 0.0), (3.0, 4.0), (1.0, 1.0)])
        assert design.extent() == pytest.approx(5.0)
