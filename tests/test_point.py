"""
Tests for the Point geometry.
"""

import math

import pytest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vectorgeom.core.exceptions import (
    InvalidGeometryError,
    MalformedComponentsError,
    NonNumericCoordinateError,
)
from vectorgeom.core.models import (
    Geometry,
    GeometryCollection,
    GeometryType,
    LineString,
    MultiPoint,
    Point,
)


class TestPointCreation:
    """Tests for Point creation and validation."""

    @pytest.mark.parametrize("coordinates", [
        (1, 2),
        (1, 2, 3),
        (1, 2, None, 4),
        (1, 2, 3, 4),
        (1.5, -2.25),
    ])
    def test_valid_coordinates(self, coordinates):
        """Numeric coordinates are stored as floats."""
        point = Point(*coordinates)

        assert isinstance(point.x, float)
        assert isinstance(point.y, float)
        assert point.x == coordinates[0]
        assert point.y == coordinates[1]

    def test_create_xyzm_point(self):
        point = Point(1, 2, 3, 4)

        assert point.x == 1.0
        assert point.y == 2.0
        assert point.z == 3.0
        assert point.m == 4.0

    def test_point_is_a_geometry(self):
        point = Point(1, 2)

        assert isinstance(point, Geometry)
        assert point.geometry_type() == GeometryType.POINT
        assert point.geometry_type().value == "Point"

    def test_create_empty_point(self):
        point = Point()

        assert point.is_empty()
        assert point.x is None
        assert point.y is None
        assert point.z is None
        assert point.m is None

    @pytest.mark.parametrize("coordinates", [
        (None, 20),
        (10, None),
        (None, None, 30),
        (None, None, None, 40),
        (10, None, 30, 40),
    ])
    def test_missing_x_or_y_gives_empty_point(self, coordinates):
        """A point without both X and Y is empty and reads no coordinates."""
        point = Point(*coordinates)

        assert point.is_empty()
        assert (point.x, point.y, point.z, point.m) == (None, None, None, None)
        assert point.as_array()[2:] == []

    @pytest.mark.parametrize("coordinates,is_3d,is_measured", [
        ((), False, False),
        ((None, None, 3, 4), True, True),
        ((None, None, 3), True, False),
        ((None, None, None, 4), False, True),
        ((10, None, 30, 40), True, True),
    ])
    def test_empty_point_keeps_dimension_flags(self, coordinates, is_3d, is_measured):
        point = Point(*coordinates)

        assert point.is_3d() is is_3d
        assert point.is_measured() is is_measured
        assert point.z is None
        assert point.m is None

    def test_flatten_clears_flags_of_empty_point(self):
        point = Point(None, None, 3, 4).flatten()

        assert point.is_3d() is False
        assert point.is_measured() is False

    def test_nan_is_an_absent_coordinate(self):
        point = Point(1, 2, math.nan)

        assert point.z is None
        assert point.is_3d() is False

    @pytest.mark.parametrize("coordinates", [
        ("x", "y"),
        ("1", 2),
        (1, 2, "z"),
        (1, 2, 3, "m"),
        (True, 2),
        (1, [2]),
    ])
    def test_non_numeric_coordinates_rejected(self, coordinates):
        with pytest.raises(NonNumericCoordinateError, match="must be numeric"):
            Point(*coordinates)

    def test_construction_errors_share_a_base(self):
        """All construction failures are InvalidGeometryError (a ValueError)."""
        with pytest.raises(InvalidGeometryError):
            Point("x", 1)
        with pytest.raises(ValueError):
            Point(1, "y")


class TestPointFromArray:
    """Tests for Point.from_array."""

    def test_from_xy(self):
        point = Point.from_array([1, 2])
        assert point == Point(1, 2)

    def test_from_xyzm(self):
        point = Point.from_array((1, 2, 3, 4))
        assert point == Point(1, 2, 3, 4)

    def test_from_xym(self):
        point = Point.from_array([1, 2, None, 4])
        assert point.z is None
        assert point.m == 4.0

    def test_from_empty_array(self):
        assert Point.from_array([]).is_empty()

    def test_from_nan_array(self):
        assert Point.from_array([math.nan, math.nan]).is_empty()

    @pytest.mark.parametrize("coordinates", [[1], [1, 2, 3, 4, 5], "12", 12])
    def test_malformed_array(self, coordinates):
        with pytest.raises(MalformedComponentsError):
            Point.from_array(coordinates)


class TestPointProperties:
    """Tests for the point's derived properties."""

    @pytest.mark.parametrize("point,is_3d,is_measured", [
        (Point(1, 2), False, False),
        (Point(1, 2, 3), True, False),
        (Point(1, 2, None, 4), False, True),
        (Point(1, 2, 3, 4), True, True),
    ])
    def test_dimension_flags(self, point, is_3d, is_measured):
        assert point.is_3d() is is_3d
        assert point.is_measured() is is_measured

    def test_trivial_properties(self):
        point = Point(1, 2)

        assert point.dimension() == 0
        assert point.num_points() == 1
        assert point.is_simple() is True
        assert point.get_points() == [point]
        assert point.get_points()[0] is point

    def test_components_is_the_point_itself(self):
        point = Point(1, 2)
        components = point.get_components()

        assert len(components) == 1
        assert components[0] is point

    def test_centroid_is_the_point_itself(self):
        point = Point(1, 2)
        assert point.centroid() is point

    def test_bbox(self):
        assert Point(1, 2).get_bbox() == {"minx": 1.0, "miny": 2.0, "maxx": 1.0, "maxy": 2.0}
        assert Point().get_bbox() is None

    def test_boundary_is_empty_collection(self):
        boundary = Point(1, 2).boundary()

        assert isinstance(boundary, GeometryCollection)
        assert boundary.is_empty()

    def test_min_max_z_and_m(self):
        point = Point(1, 2, 3, 4)

        assert point.minimum_z() == 3.0
        assert point.maximum_z() == 3.0
        assert point.minimum_m() == 4.0
        assert point.maximum_m() == 4.0
        assert Point(1, 2).minimum_z() is None
        assert Point(1, 2).maximum_m() is None


class TestPointNeutralOperations:
    """Operations not defined on points answer a neutral value."""

    @pytest.mark.parametrize("method", [
        "area",
        "length",
        "length_3d",
        "great_circle_length",
        "haversine_length",
        "vincenty_length",
    ])
    def test_numeric_accumulators_are_zero(self, method):
        assert getattr(Point(1, 2), method)() == 0.0

    @pytest.mark.parametrize("method", [
        "num_geometries",
        "start_point",
        "end_point",
        "is_closed",
        "is_ring",
        "exterior_ring",
        "num_interior_rings",
        "explode",
        "z_difference",
        "elevation_gain",
        "elevation_loss",
    ])
    def test_structural_queries_are_none(self, method):
        assert getattr(Point(1, 2, 3), method)() is None

    @pytest.mark.parametrize("method", ["geometry_n", "point_n", "interior_ring_n"])
    def test_indexed_queries_are_none(self, method):
        assert getattr(Point(1, 2), method)(1) is None

    def test_coordinate_accessors_of_other_geometries(self):
        line = LineString.from_array([[1, 2], [3, 4]])
        assert line.x is None
        assert line.y is None
        assert line.z is None
        assert line.m is None


class TestPointSerialization:
    """Tests for as_array and repr."""

    @pytest.mark.parametrize("point,expected", [
        (Point(1, 2), [1.0, 2.0]),
        (Point(1, 2, 3), [1.0, 2.0, 3.0]),
        (Point(1, 2, None, 4), [1.0, 2.0, None, 4.0]),
        (Point(1, 2, 3, 4), [1.0, 2.0, 3.0, 4.0]),
    ])
    def test_as_array(self, point, expected):
        assert point.as_array() == expected

    def test_empty_as_array_is_nan_pair(self):
        array = Point().as_array()

        assert len(array) == 2
        assert all(math.isnan(v) for v in array)

    def test_from_as_array(self):
        point = Point(1, 2, None, 4)
        assert Point.from_array(point.as_array()) == point

    def test_repr(self):
        assert repr(Point(1, 2)) == "Point(1.0, 2.0)"
        assert repr(Point()) == "Point(EMPTY)"


class TestPointMutation:
    """Tests for in-place transformations."""

    def test_invert_xy(self):
        point = Point(1, 2, 3, 4)
        result = point.invert_xy()

        assert result is point
        assert (point.x, point.y, point.z, point.m) == (2.0, 1.0, 3.0, 4.0)

    def test_invert_xy_twice_restores_point(self):
        point = Point(1, 2, 3)
        original = point.copy()

        point.invert_xy().invert_xy()
        assert point == original

    def test_flatten(self):
        point = Point(1, 2, 3, 4)
        point.flatten()

        assert point.is_3d() is False
        assert point.is_measured() is False
        assert point.as_array() == [1.0, 2.0]

    def test_copy_is_independent(self):
        point = Point(1, 2)
        other = point.copy()
        other.invert_xy()

        assert point == Point(1, 2)


class TestPointEquals:
    """Tests for epsilon-tolerant equality."""

    @pytest.mark.parametrize("a,b,expected", [
        (Point(), Point(), True),
        (Point(1, 2), Point(1, 2), True),
        (Point(1, 2), Point(1 + 1e-10, 2 - 1e-10), True),
        (Point(1, 2), Point(1 + 1e-8, 2), False),
        (Point(1, 2, 3), Point(1, 2, 3), True),
        (Point(1, 2, 3), Point(1, 2), False),
        (Point(1, 2, 3), Point(1, 2, 4), False),
        (Point(1, 2, None, 4), Point(1, 2, None, 4), True),
        (Point(1, 2, None, 4), Point(1, 2), False),
        (Point(1, 2), Point(), False),
        (Point(), Point(1, 2), False),
    ])
    def test_equals(self, a, b, expected):
        assert a.equals(b) is expected

    def test_not_equal_to_other_variants(self):
        assert Point(1, 2).equals(MultiPoint([Point(1, 2)])) is False
        assert Point().equals(GeometryCollection()) is False


class TestPointDistance:
    """Tests for planar distance from a point."""

    @pytest.mark.parametrize("other,expected", [
        (Point(10, 0), 10.0),
        (Point(0, 10), 10.0),
        (Point(10, 10), 14.142135623730951),
        (LineString.from_array([[-10, 10], [0, 0], [10, 10]]), 0.0),
        (LineString.from_array([[0, 10], [0, 10]]), 10.0),
        (LineString.from_array([[-10, -10], [10, 10]]), 0.0),
        (LineString.from_array([[-10, 10], [10, 10]]), 10.0),
        (MultiPoint.from_array([[0, 0], [10, 20]]), 0.0),
        (MultiPoint.from_array([[10, 20], [0, 10]]), 10.0),
        (MultiPoint.from_array([[], [0, 10]]), 10.0),
        (GeometryCollection([Point(0, 10), Point()]), 10.0),
    ])
    def test_distance_from_origin(self, other, expected):
        assert Point(0, 0).distance(other) == pytest.approx(expected)

    def test_distance_is_symmetric(self):
        line = LineString.from_array([[-10, 10], [10, 10]])
        assert line.distance(Point(0, 0)) == Point(0, 0).distance(line)

    @pytest.mark.parametrize("a,b", [
        (Point(), Point(1, 2)),
        (Point(1, 2), Point()),
        (Point(1, 2), GeometryCollection()),
        (Point(), LineString.from_array([[0, 0], [1, 1]])),
    ])
    def test_distance_with_empty_is_none(self, a, b):
        assert a.distance(b) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
