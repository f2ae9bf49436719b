"""
Tests for GeodesyOptions and Ellipsoid.
"""

import pytest

from vectorgeom.core.models import Ellipsoid, GeodesyOptions
from vectorgeom.core.models.options import (
    WGS84_FLATTENING,
    WGS84_SEMI_MAJOR_AXIS,
    WGS84_SEMI_MINOR_AXIS,
)


class TestEllipsoid:
    """Tests for the reference ellipsoid."""

    def test_wgs84_defaults(self):
        ellipsoid = Ellipsoid.wgs84()

        assert ellipsoid.semi_major_axis == 6378137.0
        assert ellipsoid.semi_minor_axis == pytest.approx(6356752.314245, abs=1e-6)
        assert ellipsoid.flattening == pytest.approx(1 / 298.257223563)

    def test_sphere(self):
        sphere = Ellipsoid.sphere(6371000.0)

        assert sphere.semi_major_axis == sphere.semi_minor_axis == 6371000.0
        assert sphere.flattening == 0.0

    @pytest.mark.parametrize("kwargs,message", [
        ({"semi_major_axis": 0}, "semi_major_axis must be positive"),
        ({"semi_minor_axis": -1}, "semi_minor_axis must be positive"),
        ({"semi_minor_axis": 7000000.0}, "cannot exceed"),
        ({"flattening": 1.0}, "flattening"),
        ({"flattening": -0.1}, "flattening"),
    ])
    def test_invalid_parameters(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            Ellipsoid(**kwargs)

    def test_dict_round_trip(self):
        ellipsoid = Ellipsoid.sphere(1000.0)
        assert Ellipsoid.from_dict(ellipsoid.to_dict()) == ellipsoid

    def test_from_partial_dict(self):
        ellipsoid = Ellipsoid.from_dict({})
        assert ellipsoid == Ellipsoid.wgs84()

    def test_semi_minor_axis_is_derived(self):
        ellipsoid = Ellipsoid(semi_major_axis=7000000.0)

        assert ellipsoid.semi_minor_axis == pytest.approx(7000000.0 * (1 - WGS84_FLATTENING))
        assert Ellipsoid(semi_major_axis=1000.0, flattening=0.0).semi_minor_axis == 1000.0

    def test_inconsistent_axes_rejected(self):
        with pytest.raises(ValueError, match="does not match"):
            Ellipsoid(semi_major_axis=7000000.0, semi_minor_axis=WGS84_SEMI_MINOR_AXIS)
        with pytest.raises(ValueError, match="does not match"):
            Ellipsoid(semi_major_axis=1000.0, semi_minor_axis=1000.0)

    def test_rounded_semi_minor_axis_is_accepted(self):
        ellipsoid = Ellipsoid(semi_minor_axis=6356752.314245)
        assert ellipsoid.semi_minor_axis == 6356752.314245


class TestGeodesyOptions:
    """Tests for the geodesy configuration."""

    def test_defaults(self):
        options = GeodesyOptions.default()

        assert options.ellipsoid == Ellipsoid.wgs84()
        assert options.earth_radius == WGS84_SEMI_MAJOR_AXIS
        assert options.max_iterations == 100
        assert options.convergence_threshold == 1e-12

    def test_ellipsoid_from_dict(self):
        options = GeodesyOptions(ellipsoid={"semi_major_axis": 10.0, "semi_minor_axis": 10.0, "flattening": 0.0})

        assert isinstance(options.ellipsoid, Ellipsoid)
        assert options.ellipsoid.semi_major_axis == 10.0

    @pytest.mark.parametrize("kwargs,message", [
        ({"earth_radius": 0}, "earth_radius must be positive"),
        ({"max_iterations": 0}, "max_iterations must be at least 1"),
        ({"convergence_threshold": 0}, "convergence_threshold must be positive"),
    ])
    def test_invalid_options(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            GeodesyOptions(**kwargs)

    def test_to_dict(self):
        data = GeodesyOptions().to_dict()

        assert data["ellipsoid"] == {
            "semi_major_axis": WGS84_SEMI_MAJOR_AXIS,
            "semi_minor_axis": WGS84_SEMI_MINOR_AXIS,
            "flattening": WGS84_FLATTENING,
        }
        assert data["max_iterations"] == 100

    def test_from_dict(self):
        options = GeodesyOptions.from_dict({"max_iterations": 20, "earth_radius": 6371000.0})

        assert options.max_iterations == 20
        assert options.earth_radius == 6371000.0
        assert options.ellipsoid == Ellipsoid.wgs84()

    def test_repr(self):
        text = repr(GeodesyOptions())

        assert text.startswith("GeodesyOptions(")
        assert "max_iter=100" in text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
