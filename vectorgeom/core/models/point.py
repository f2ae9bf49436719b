"""
Point geometry.

Conventions:
- X and Y are present together or absent together; a point without them is
  an empty point. Its Z and M read as None, but the point still reports
  whether they were given (is_3d / is_measured)
- Z (elevation) and M (measure) are independently optional
- Coordinates are stored as floats
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..exceptions import MalformedComponentsError, NonNumericCoordinateError
from ..planar.segments import point_distance
from .geometry import (
    Geometry,
    GeometryType,
    coordinates_close,
    optional_coordinates_close,
)


@dataclass
class Point(Geometry):
    """
    A 0-dimensional geometry with up to four coordinates.

    Attributes:
        x: X coordinate (easting / longitude), None for an empty point
        y: Y coordinate (northing / latitude), None for an empty point
        z: Elevation, None if absent
        m: Measure, None if absent
    """

    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None
    m: Optional[float] = None
    _has_z: bool = field(default=False, init=False, repr=False)
    _has_m: bool = field(default=False, init=False, repr=False)

    def __post_init__(self):
        """Validate and normalize coordinates after initialization."""
        self.x = _parse_coordinate("x", self.x)
        self.y = _parse_coordinate("y", self.y)
        self.z = _parse_coordinate("z", self.z)
        self.m = _parse_coordinate("m", self.m)

        if self.x is None or self.y is None:
            self._has_z = self.z is not None
            self._has_m = self.m is not None
            self.x = self.y = self.z = self.m = None

    @classmethod
    def from_array(cls, coordinates: Any) -> 'Point':
        """
        Create a Point from ``[x, y]``, ``[x, y, z]`` or ``[x, y, z, m]``.

        An empty sequence gives an empty point; None entries are absent
        coordinates.

        Raises:
            MalformedComponentsError: If coordinates is not a sequence of
                0, 2, 3 or 4 values
        """
        if not isinstance(coordinates, (list, tuple)):
            raise MalformedComponentsError(
                f"Point coordinates must be passed as a list, got {type(coordinates).__name__}"
            )
        if len(coordinates) not in (0, 2, 3, 4):
            raise MalformedComponentsError(
                f"Point needs 0, 2, 3 or 4 coordinates, got {len(coordinates)}"
            )
        return cls(*coordinates)

    def geometry_type(self) -> GeometryType:
        return GeometryType.POINT

    def dimension(self) -> int:
        return 0

    def is_empty(self) -> bool:
        return self.x is None

    def is_3d(self) -> bool:
        return self.z is not None or self._has_z

    def is_measured(self) -> bool:
        return self.m is not None or self._has_m

    def is_simple(self) -> bool:
        return True

    def get_bbox(self) -> Optional[Dict[str, float]]:
        if self.is_empty():
            return None
        return {"minx": self.x, "miny": self.y, "maxx": self.x, "maxy": self.y}

    def centroid(self) -> 'Point':
        """A point is its own centroid."""
        return self

    def get_points(self) -> List['Point']:
        return [self]

    def get_components(self) -> List[Geometry]:
        return [self]

    def boundary(self) -> Geometry:
        """The boundary of a point is the empty set."""
        from .multi import GeometryCollection
        return GeometryCollection()

    def as_array(self) -> List[Optional[float]]:
        """
        Serialize to a coordinate list.

        Returns:
            ``[x, y]``, ``[x, y, z]``, ``[x, y, None, m]`` or ``[x, y, z, m]``;
            ``[nan, nan]`` for an empty point
        """
        if self.is_empty():
            return [math.nan, math.nan]
        coordinates = [self.x, self.y]
        if self.z is not None or self.m is not None:
            coordinates.append(self.z)
        if self.m is not None:
            coordinates.append(self.m)
        return coordinates

    def flatten(self) -> 'Point':
        self.z = None
        self.m = None
        self._has_z = self._has_m = False
        return self

    def invert_xy(self) -> 'Point':
        self.x, self.y = self.y, self.x
        return self

    def equals(self, other: Geometry) -> bool:
        """
        Compare with another geometry.

        X and Y must differ by less than EPSILON; Z and M must be present on
        both points or on neither, and agree within EPSILON when present.
        """
        if not isinstance(other, Point):
            return False
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()
        return (
            coordinates_close(self.x, other.x)
            and coordinates_close(self.y, other.y)
            and optional_coordinates_close(self.z, other.z)
            and optional_coordinates_close(self.m, other.m)
        )

    def distance(self, other: Geometry) -> Optional[float]:
        """Planar distance to another geometry; None if either is empty."""
        if isinstance(other, Point):
            if self.is_empty() or other.is_empty():
                return None
            return point_distance(self.x, self.y, other.x, other.y)
        return super().distance(other)

    def _distance_parts(self) -> List[Tuple]:
        if self.is_empty():
            return []
        return [(self.x, self.y)]

    def minimum_z(self) -> Optional[float]:
        return self.z

    def maximum_z(self) -> Optional[float]:
        return self.z

    def minimum_m(self) -> Optional[float]:
        return self.m

    def maximum_m(self) -> Optional[float]:
        return self.m

    def __repr__(self) -> str:
        """Return string representation of the point."""
        if self.is_empty():
            return "Point(EMPTY)"
        values = ", ".join(str(v) for v in self.as_array())
        return f"Point({values})"


def _parse_coordinate(axis: str, value: Any) -> Optional[float]:
    """Validate one coordinate; None and NaN mean absent."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise NonNumericCoordinateError(
            f"Cannot create Point: {axis} coordinate must be numeric, got {value!r}"
        )
    value = float(value)
    if math.isnan(value):
        return None
    return value
