"""
Multi-geometries and the heterogeneous GeometryCollection.

Multi-geometries impose no adjacency between their components: centroid is
the plain mean of the component centroids and distance queries simply
recurse into every component.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Optional

from ..planar.segments import coordinates_mean
from .collection import Collection
from .geometry import Geometry, GeometryType
from .linestring import LineString
from .point import Point
from .polygon import Polygon


@dataclass
class MultiGeometry(Collection):
    """Abstract collection without connectivity between its components."""

    def centroid(self) -> Point:
        """Unweighted mean of the centroids of the non-empty components."""
        centroids = [c.centroid() for c in self.components if not c.is_empty()]
        if not centroids:
            return Point()
        return Point(*coordinates_mean([(c.x, c.y) for c in centroids]))


@dataclass
class MultiPoint(MultiGeometry):
    """A set of points; empty points are allowed as members."""

    component_type = Point
    allow_empty_components = True

    def geometry_type(self) -> GeometryType:
        return GeometryType.MULTI_POINT

    def dimension(self) -> int:
        return 0

    def is_simple(self) -> bool:
        """True if no two non-empty members are equal."""
        points = [p for p in self.components if not p.is_empty()]
        for i, point in enumerate(points):
            for other in points[i + 1:]:
                if point.equals(other):
                    return False
        return True

    def explode(self, as_components: bool = False) -> None:
        """Points have no segments."""
        return None

    def boundary(self) -> Geometry:
        return GeometryCollection()


@dataclass
class MultiLineString(MultiGeometry):
    """A set of LineStrings."""

    component_type = LineString
    allow_empty_components = True

    def geometry_type(self) -> GeometryType:
        return GeometryType.MULTI_LINE_STRING

    def dimension(self) -> int:
        return 1

    def is_closed(self) -> bool:
        """True if there is at least one line and every line is closed."""
        lines = [line for line in self.components if not line.is_empty()]
        return bool(lines) and all(line.is_closed() for line in lines)

    def boundary(self) -> Geometry:
        """
        Endpoints shared by an odd number of lines (mod-2 rule).

        Closed lines contribute nothing.
        """
        counts: Counter = Counter()
        endpoints = {}
        for line in self.components:
            if line.is_empty() or line.is_closed():
                continue
            for point in (line.start_point(), line.end_point()):
                key = (point.x, point.y)
                counts[key] += 1
                endpoints.setdefault(key, point)
        return MultiPoint([endpoints[key].copy() for key, count in counts.items() if count % 2 == 1])


@dataclass
class MultiPolygon(MultiGeometry):
    """A set of Polygons."""

    component_type = Polygon
    allow_empty_components = True

    def geometry_type(self) -> GeometryType:
        return GeometryType.MULTI_POLYGON

    def dimension(self) -> int:
        return 2

    def boundary(self) -> Geometry:
        """All rings of all polygons."""
        rings = []
        for polygon in self.components:
            rings.extend(ring.copy() for ring in polygon.get_components())
        return MultiLineString(rings)


@dataclass
class GeometryCollection(MultiGeometry):
    """A heterogeneous collection of any geometries."""

    def geometry_type(self) -> GeometryType:
        return GeometryType.GEOMETRY_COLLECTION

    def boundary(self) -> Optional[Geometry]:
        """Not defined for heterogeneous collections."""
        return None
