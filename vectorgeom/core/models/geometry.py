"""
Geometry base class for the vector geometry model.

Conventions:
- Coordinates: X (easting / longitude), Y (northing / latitude), optional
  Z (elevation) and M (measure)
- Planar operations (length, distance, centroid, area) use X and Y only
- Geodesic operations interpret X as longitude and Y as latitude, degrees

Every geometry variant answers the whole capability contract defined here.
Operations that are meaningless for a variant (area of a curve, pointN of a
point, ...) do not raise: numeric accumulators return 0.0, everything else
returns None. The neutral answers are spelled out below and overridden by
the variants for which the operation is defined.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, TYPE_CHECKING

from ..exceptions import MalformedComponentsError
from ..planar.segments import nearest_distance

if TYPE_CHECKING:
    from .point import Point
    from .options import GeodesyOptions


# Absolute tolerance used by equals(): two coordinates are equal when they
# differ by strictly less than this value.
EPSILON = 1e-9


class GeometryType(Enum):
    """Enumeration of the supported geometry variants."""
    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"


def coordinates_close(a: float, b: float) -> bool:
    """Compare two coordinate values with the EPSILON tolerance."""
    return abs(a - b) < EPSILON


def optional_coordinates_close(a: Optional[float], b: Optional[float]) -> bool:
    """Compare two optional coordinates: both absent, or both present and close."""
    if a is None or b is None:
        return a is None and b is None
    return coordinates_close(a, b)


class Geometry(ABC):
    """
    Base class for all geometry variants.

    Coordinate accessors are only meaningful on Point; every other variant
    answers None.
    """

    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None
    m: Optional[float] = None

    # ------------------------------------------------------------------
    # Core contract
    # ------------------------------------------------------------------

    @abstractmethod
    def geometry_type(self) -> GeometryType:
        """Return the variant of this geometry."""

    @abstractmethod
    def dimension(self) -> int:
        """Topological dimension: 0 for points, 1 for curves, 2 for surfaces."""

    @abstractmethod
    def is_empty(self) -> bool:
        """True if the geometry holds no coordinates."""

    @abstractmethod
    def is_3d(self) -> bool:
        """True if any point of the geometry carries a Z coordinate."""

    @abstractmethod
    def is_measured(self) -> bool:
        """True if any point of the geometry carries an M coordinate."""

    @abstractmethod
    def get_bbox(self) -> Optional[Dict[str, float]]:
        """Bounding box as a dict with minx, miny, maxx, maxy; None when empty."""

    @abstractmethod
    def centroid(self) -> 'Point':
        """Planar centroid of the geometry; an empty Point when empty."""

    @abstractmethod
    def equals(self, other: 'Geometry') -> bool:
        """Epsilon-tolerant structural equality."""

    @abstractmethod
    def as_array(self) -> List[Any]:
        """Nested coordinate lists mirroring the structure of the geometry."""

    @abstractmethod
    def flatten(self) -> 'Geometry':
        """Drop Z and M from every point, in place."""

    @abstractmethod
    def invert_xy(self) -> 'Geometry':
        """Swap X and Y of every point, in place."""

    @abstractmethod
    def get_points(self) -> List['Point']:
        """All points of the geometry in tree order."""

    @abstractmethod
    def get_components(self) -> List['Geometry']:
        """Direct children (a Point is its own single component)."""

    @abstractmethod
    def is_simple(self) -> bool:
        """True if the geometry has no anomalous self-intersection."""

    @abstractmethod
    def boundary(self) -> Optional['Geometry']:
        """Combinatorial boundary of the geometry."""

    @abstractmethod
    def _distance_parts(self) -> List[Tuple]:
        """
        Decompose the geometry for nearest-distance queries.

        Returns:
            List of bare points ``(x, y)`` and segments ``((x1, y1), (x2, y2))``
        """

    @classmethod
    def from_array(cls, coordinates: Any) -> 'Geometry':
        """
        Build a geometry from the nested lists produced by as_array().

        Raises:
            MalformedComponentsError: If the variant cannot be rebuilt from
                bare coordinates
        """
        raise MalformedComponentsError(
            f"{cls.__name__} cannot be built from a bare coordinate array"
        )

    # ------------------------------------------------------------------
    # Shared implementations
    # ------------------------------------------------------------------

    def distance(self, other: 'Geometry') -> Optional[float]:
        """
        Minimum planar distance between this geometry and another one.

        Returns:
            The distance, or None if either geometry is empty
        """
        if self.is_empty() or other.is_empty():
            return None
        return nearest_distance(self._distance_parts(), other._distance_parts())

    def num_points(self) -> int:
        return len(self.get_points())

    def copy(self) -> 'Geometry':
        """Return an independent deep copy of the geometry."""
        return copy.deepcopy(self)

    def minimum_z(self) -> Optional[float]:
        values = [p.z for p in self.get_points() if p.z is not None]
        return min(values) if values else None

    def maximum_z(self) -> Optional[float]:
        values = [p.z for p in self.get_points() if p.z is not None]
        return max(values) if values else None

    def minimum_m(self) -> Optional[float]:
        values = [p.m for p in self.get_points() if p.m is not None]
        return min(values) if values else None

    def maximum_m(self) -> Optional[float]:
        values = [p.m for p in self.get_points() if p.m is not None]
        return max(values) if values else None

    # ------------------------------------------------------------------
    # Neutral answers for operations not defined on every variant
    # ------------------------------------------------------------------

    def area(self) -> float:
        return 0.0

    def length(self) -> float:
        return 0.0

    def length_3d(self) -> float:
        return 0.0

    def great_circle_length(
        self, radius: Optional[float] = None, options: Optional['GeodesyOptions'] = None
    ) -> float:
        return 0.0

    def haversine_length(
        self, radius: Optional[float] = None, options: Optional['GeodesyOptions'] = None
    ) -> float:
        return 0.0

    def vincenty_length(self, options: Optional['GeodesyOptions'] = None) -> Optional[float]:
        return 0.0

    def num_geometries(self) -> Optional[int]:
        return None

    def geometry_n(self, n: int) -> Optional['Geometry']:
        return None

    def point_n(self, n: int) -> Optional['Point']:
        return None

    def start_point(self) -> Optional['Point']:
        return None

    def end_point(self) -> Optional['Point']:
        return None

    def is_closed(self) -> Optional[bool]:
        return None

    def is_ring(self) -> Optional[bool]:
        return None

    def exterior_ring(self) -> Optional['Geometry']:
        return None

    def num_interior_rings(self) -> Optional[int]:
        return None

    def interior_ring_n(self, n: int) -> Optional['Geometry']:
        return None

    def explode(self, as_components: bool = False) -> Optional[List[Any]]:
        return None

    def z_difference(self) -> Optional[float]:
        return None

    def elevation_gain(self, tolerance: Optional[float] = None) -> Optional[float]:
        return None

    def elevation_loss(self, tolerance: Optional[float] = None) -> Optional[float]:
        return None
