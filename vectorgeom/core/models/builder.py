"""
Build geometries from nested coordinate arrays.

This is the reader-side counterpart of ``Geometry.as_array()``: a format
reader that has decoded a geometry type and its coordinates hands them to
geometry_from_array() and gets a validated geometry back, or one of the
InvalidGeometryError subclasses describing what is wrong with the input.
"""

from typing import Any, Dict, Type, Union

from ..exceptions import InvalidGeometryError, MalformedComponentsError
from .geometry import Geometry, GeometryType
from .linestring import LineString
from .multi import GeometryCollection, MultiLineString, MultiPoint, MultiPolygon
from .point import Point
from .polygon import Polygon


GEOMETRY_CLASSES: Dict[GeometryType, Type[Geometry]] = {
    GeometryType.POINT: Point,
    GeometryType.LINE_STRING: LineString,
    GeometryType.POLYGON: Polygon,
    GeometryType.MULTI_POINT: MultiPoint,
    GeometryType.MULTI_LINE_STRING: MultiLineString,
    GeometryType.MULTI_POLYGON: MultiPolygon,
    GeometryType.GEOMETRY_COLLECTION: GeometryCollection,
}


def parse_geometry_type(value: Union[GeometryType, str]) -> GeometryType:
    """
    Resolve a geometry type from an enum member or its name.

    Names are matched case-insensitively ("linestring", "LineString").

    Raises:
        InvalidGeometryError: If the name is unknown
    """
    if isinstance(value, GeometryType):
        return value
    if isinstance(value, str):
        wanted = value.replace("_", "").lower()
        for geometry_type in GeometryType:
            if geometry_type.value.lower() == wanted:
                return geometry_type
    raise InvalidGeometryError(f"Unknown geometry type: {value!r}")


def geometry_from_array(geometry_type: Union[GeometryType, str], coordinates: Any) -> Geometry:
    """
    Create a geometry of the given type from nested coordinate lists.

    Args:
        geometry_type: Target variant, as GeometryType or name
        coordinates: Nested lists shaped like the variant's as_array()

    Returns:
        The validated geometry

    Raises:
        InvalidGeometryError: If the type is unknown or the coordinates
            violate a construction invariant
    """
    geometry_type = parse_geometry_type(geometry_type)
    if geometry_type is GeometryType.GEOMETRY_COLLECTION and coordinates:
        raise MalformedComponentsError(
            "GeometryCollection cannot be built from a bare coordinate array, "
            "its component types are unknown"
        )
    return GEOMETRY_CLASSES[geometry_type].from_array(coordinates)
