"""
vectorgeom - vector geometry model and algorithms

An in-memory model of points, lines, polygons and their collections, with
planar and geodesic measures, nearest-distance queries, simplicity tests and
elevation-profile analysis.

Conventions:
- Coordinates: X (easting / longitude), Y (northing / latitude), optional
  Z (elevation) and M (measure)
- Planar measures: units of the coordinates
- Geodesic measures: meters, with X/Y read as longitude/latitude in degrees
- Equality: coordinates equal within an absolute tolerance of 1e-9
"""

__version__ = "1.0.0"

from .core.models import (
    Geometry,
    GeometryType,
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
    GeodesyOptions,
    Ellipsoid,
    geometry_from_array,
)
from .core.exceptions import InvalidGeometryError

__all__ = [
    # Version
    "__version__",

    # Models
    "Geometry",
    "GeometryType",
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",

    # Options
    "GeodesyOptions",
    "Ellipsoid",

    # Building
    "geometry_from_array",

    # Errors
    "InvalidGeometryError",
]
