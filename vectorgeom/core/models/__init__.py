"""
Geometry model.

This module provides the geometry variants and their configuration:
- Geometry: Base class defining the capability contract
- Point: 0-dimensional geometry with optional Z and M
- Collection, Curve, Surface, MultiGeometry: Abstract intermediate classes
- LineString, Polygon: Connected curves and surfaces
- MultiPoint, MultiLineString, MultiPolygon, GeometryCollection: Aggregates
- GeodesyOptions, Ellipsoid: Configuration of the geodesic computations
"""

from .geometry import Geometry, GeometryType, EPSILON
from .point import Point
from .collection import Collection
from .linestring import Curve, LineString
from .polygon import Surface, Polygon
from .multi import (
    MultiGeometry,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
)
from .options import Ellipsoid, GeodesyOptions
from .builder import geometry_from_array, parse_geometry_type

__all__ = [
    # Base
    "Geometry",
    "GeometryType",
    "EPSILON",

    # Variants
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

    # Options
    "Ellipsoid",
    "GeodesyOptions",

    # Builder
    "geometry_from_array",
    "parse_geometry_type",
]
