"""
Surface and Polygon geometries.

A polygon is a collection of closed LineStrings (rings): the first ring is
the exterior boundary, the following ones are holes. Ring segments reuse
the LineString machinery, so explode(), lengths and distance queries work
ring by ring.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..exceptions import UnclosedRingError
from ..planar.segments import has_crossing_segments, ring_area_and_centroid
from .collection import Collection
from .geometry import Geometry, GeometryType
from .linestring import LineString
from .point import Point


@dataclass
class Surface(Collection):
    """Abstract 2-dimensional geometry."""

    def dimension(self) -> int:
        return 2


@dataclass
class Polygon(Surface):
    """
    A planar surface bounded by one exterior ring and zero or more holes.

    Every ring must be closed and hold at least four points.
    """

    component_type = LineString
    allow_empty_components = False

    def __post_init__(self):
        """Validate rings after initialization."""
        super().__post_init__()
        for i, ring in enumerate(self.components):
            if ring.num_points() < 4:
                raise UnclosedRingError(
                    f"Cannot create Polygon: ring {i} has {ring.num_points()} points, at least 4 are required"
                )
            if not ring.is_closed():
                raise UnclosedRingError(
                    f"Cannot create Polygon: ring {i} is not closed "
                    f"(first point {ring.start_point()!r}, last point {ring.end_point()!r})"
                )

    def geometry_type(self) -> GeometryType:
        return GeometryType.POLYGON

    # ------------------------------------------------------------------
    # Rings
    # ------------------------------------------------------------------

    def exterior_ring(self) -> LineString:
        if not self.components:
            return LineString()
        return self.components[0]

    def num_interior_rings(self) -> int:
        return max(len(self.components) - 1, 0)

    def interior_ring_n(self, n: int) -> Optional[LineString]:
        """Return the n-th hole (1-based), None if out of range."""
        if 1 <= n <= self.num_interior_rings():
            return self.components[n]
        return None

    # ------------------------------------------------------------------
    # Measures
    # ------------------------------------------------------------------

    def area(self, exterior_only: bool = False, signed: bool = False) -> float:
        """
        Planar area.

        Args:
            exterior_only: Ignore holes
            signed: Keep the sign of the exterior ring (positive when
                counter-clockwise)

        Returns:
            Exterior area minus the area of the holes
        """
        if self.is_empty():
            return 0.0

        exterior_area = ring_area_and_centroid(_ring_coordinates(self.components[0]))[0]
        area = exterior_area if signed else abs(exterior_area)
        if exterior_only:
            return area

        for hole in self.components[1:]:
            hole_area = abs(ring_area_and_centroid(_ring_coordinates(hole))[0])
            area = area - hole_area if area >= 0 else area + hole_area
        return area

    def centroid(self) -> Point:
        """
        Area-weighted centroid of the exterior ring minus its holes.

        A polygon of zero area falls back to the centroid of its exterior
        ring as a line.
        """
        if self.is_empty():
            return Point()

        total_area = 0.0
        x = 0.0
        y = 0.0
        for i, ring in enumerate(self.components):
            ring_area, cx, cy = ring_area_and_centroid(_ring_coordinates(ring))
            if ring_area == 0.0:
                continue
            weight = abs(ring_area) if i == 0 else -abs(ring_area)
            total_area += weight
            x += cx * weight
            y += cy * weight

        if total_area == 0.0:
            return self.exterior_ring().centroid()
        return Point(x / total_area, y / total_area)

    def is_simple(self) -> bool:
        """True if no two ring segments, within or across rings, properly cross."""
        segments = []
        for ring in self.components:
            segments.extend(ring._segments())
        return not has_crossing_segments(segments)

    def boundary(self) -> Geometry:
        """The rings: the exterior ring alone, or a MultiLineString of all rings."""
        from .multi import MultiLineString

        if self.is_empty():
            return LineString()
        if len(self.components) == 1:
            return self.components[0].copy()
        return MultiLineString([ring.copy() for ring in self.components])


def _ring_coordinates(ring: LineString) -> List[tuple]:
    return [(p.x, p.y) for p in ring.get_points()]
