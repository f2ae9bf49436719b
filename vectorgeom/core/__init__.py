"""
Core module for vectorgeom.

This module contains the geometry model and its algorithms, implemented in
pure Python on top of numpy. It has no knowledge of file formats: codecs
build geometries with ``geometry_from_array`` and serialize them with
``as_array``.
"""

from .exceptions import (
    InvalidGeometryError,
    NonNumericCoordinateError,
    MalformedComponentsError,
    EmptyComponentError,
    WrongComponentTypeError,
    TooFewPointsError,
    UnclosedRingError,
)

from .models import (
    Geometry,
    GeometryType,
    EPSILON,
    Point,
    Collection,
    Curve,
    LineString,
    Surface,
    Polygon,
    MultiGeometry,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
    Ellipsoid,
    GeodesyOptions,
    geometry_from_array,
)

from .geodesy import (
    great_circle_distance,
    haversine_distance,
    vincenty_distance,
)

from .analysis import ElevationProfile

from .validation import GeometryHealth, HealthStatus, check_geometry

__all__ = [
    # Exceptions
    "InvalidGeometryError",
    "NonNumericCoordinateError",
    "MalformedComponentsError",
    "EmptyComponentError",
    "WrongComponentTypeError",
    "TooFewPointsError",
    "UnclosedRingError",

    # Models
    "Geometry",
    "GeometryType",
    "EPSILON",
    "Point",
    "Collection",
    "Curve",
    "LineString",
    "Surface",
    "Polygon",
    "MultiGeometry",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",
    "Ellipsoid",
    "GeodesyOptions",
    "geometry_from_array",

    # Geodesy
    "great_circle_distance",
    "haversine_distance",
    "vincenty_distance",

    # Analysis
    "ElevationProfile",

    # Validation
    "GeometryHealth",
    "HealthStatus",
    "check_geometry",
]
