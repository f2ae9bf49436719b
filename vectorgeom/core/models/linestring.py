"""
Curve and LineString geometries.

A curve is an ordered, connected sequence of points; consecutive points
form its segments. Order matters for every measure below (length, centroid,
elevation analysis), so a curve's points are always processed in sequence.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, TYPE_CHECKING

from ..analysis.elevation import ElevationProfile
from ..analysis.elevation import elevation_gain as _elevation_gain
from ..analysis.elevation import elevation_loss as _elevation_loss
from ..exceptions import TooFewPointsError
from ..geodesy import distance as geodesy
from ..planar.segments import coordinates_mean, has_crossing_segments
from .collection import Collection
from .geometry import Geometry, GeometryType
from .point import Point

if TYPE_CHECKING:
    from .options import GeodesyOptions


@dataclass
class Curve(Collection):
    """
    Abstract 1-dimensional collection of points.

    A non-empty curve has at least two points, none of them empty.
    """

    component_type = Point
    allow_empty_components = False

    def __post_init__(self):
        """Validate components and the point count."""
        super().__post_init__()
        if len(self.components) == 1:
            raise TooFewPointsError(
                f"Cannot construct a {type(self).__name__} with a single point"
            )

    def dimension(self) -> int:
        return 1

    # ------------------------------------------------------------------
    # Point access
    # ------------------------------------------------------------------

    def get_points(self) -> List[Point]:
        return list(self.components)

    def point_n(self, n: int) -> Optional[Point]:
        """
        Return the n-th point, 1-based.

        Negative n counts from the end (-1 is the last point); 0 and out of
        range values give None.
        """
        count = len(self.components)
        if n < 0:
            n = count + n + 1
        if 1 <= n <= count:
            return self.components[n - 1]
        return None

    def start_point(self) -> Optional[Point]:
        return self.point_n(1)

    def end_point(self) -> Optional[Point]:
        return self.point_n(-1)

    def is_closed(self) -> bool:
        """True if the curve is not empty and its first point equals its last."""
        if self.is_empty():
            return False
        return self.start_point().equals(self.end_point())

    def is_ring(self) -> bool:
        return self.is_closed() and self.is_simple()

    def is_simple(self) -> bool:
        """
        True if no two segments properly cross each other.

        Segments touching at their shared vertex are not crossings. A vertex
        touching a collinear, non-adjacent segment (self-tangency) is not
        detected either.
        """
        return not has_crossing_segments(self._segments())

    # ------------------------------------------------------------------
    # Planar measures
    # ------------------------------------------------------------------

    def length(self) -> float:
        """Planar length in the XY plane."""
        length = 0.0
        previous = None
        for point in self.components:
            if previous is not None:
                length += math.sqrt((previous.x - point.x) ** 2 + (previous.y - point.y) ** 2)
            previous = point
        return length

    def length_3d(self) -> float:
        """Length using X, Y and Z; a missing Z counts as 0."""
        length = 0.0
        previous = None
        for point in self.components:
            if previous is not None:
                length += math.sqrt(
                    (previous.x - point.x) ** 2
                    + (previous.y - point.y) ** 2
                    + ((previous.z or 0.0) - (point.z or 0.0)) ** 2
                )
            previous = point
        return length

    def centroid(self) -> Point:
        """
        Length-weighted average of the segment midpoints.

        Computed in the XY plane regardless of whether the coordinates are
        geographic. A curve of zero length falls back to the mean of its
        points.
        """
        if self.is_empty():
            return Point()

        x = 0.0
        y = 0.0
        length = 0.0
        previous = None
        for point in self.components:
            if previous is not None:
                segment_length = math.sqrt((previous.x - point.x) ** 2 + (previous.y - point.y) ** 2)
                length += segment_length
                x += (previous.x + point.x) / 2 * segment_length
                y += (previous.y + point.y) / 2 * segment_length
            previous = point

        if length == 0.0:
            return Point(*coordinates_mean([(p.x, p.y) for p in self.components]))
        return Point(x / length, y / length)

    # ------------------------------------------------------------------
    # Geodesic measures
    # ------------------------------------------------------------------

    def great_circle_length(
        self, radius: Optional[float] = None, options: Optional['GeodesyOptions'] = None
    ) -> float:
        """Spherical length in meters, corrected for elevation changes."""
        return geodesy.great_circle_length(self.components, radius=radius, options=options)

    def haversine_length(
        self, radius: Optional[float] = None, options: Optional['GeodesyOptions'] = None
    ) -> float:
        """Spherical length in meters, ignoring elevation."""
        return geodesy.haversine_length(self.components, radius=radius, options=options)

    def vincenty_length(self, options: Optional['GeodesyOptions'] = None) -> Optional[float]:
        """Ellipsoidal length in meters; None if any segment does not converge."""
        return geodesy.vincenty_length(self.components, options=options)

    # ------------------------------------------------------------------
    # Elevation
    # ------------------------------------------------------------------

    def z_difference(self) -> Optional[float]:
        """Absolute elevation difference between the first and the last point."""
        start = self.start_point()
        end = self.end_point()
        if start is None or start.z is None or end.z is None:
            return None
        return abs(start.z - end.z)

    def elevation_gain(self, tolerance: Optional[float] = None) -> float:
        return _elevation_gain(self.components, tolerance)

    def elevation_loss(self, tolerance: Optional[float] = None) -> float:
        return _elevation_loss(self.components, tolerance)

    def elevation_profile(self, tolerance: Optional[float] = None) -> ElevationProfile:
        return ElevationProfile.from_points(self.components, tolerance)

    # ------------------------------------------------------------------
    # Decomposition
    # ------------------------------------------------------------------

    def explode(self, as_components: bool = False) -> List[Any]:
        """
        Split the curve into its consecutive segments.

        The segments reference the points of this curve.

        Args:
            as_components: Return ``[Point, Point]`` pairs instead of
                two-point LineStrings
        """
        points = self.components
        if as_components:
            return [[start, end] for start, end in zip(points, points[1:])]
        return [LineString([start, end]) for start, end in zip(points, points[1:])]

    def boundary(self) -> Geometry:
        """Endpoints of an open curve; empty for a closed one."""
        from .multi import MultiPoint

        if self.is_empty():
            return LineString()
        if self.is_closed():
            return MultiPoint()
        return MultiPoint([self.start_point().copy(), self.end_point().copy()])

    def _segments(self) -> List[Tuple]:
        points = self.components
        return [((p.x, p.y), (q.x, q.y)) for p, q in zip(points, points[1:])]

    def _distance_parts(self) -> List[Tuple]:
        return self._segments()


class LineString(Curve):
    """A curve with straight segments between consecutive points."""

    def geometry_type(self) -> GeometryType:
        return GeometryType.LINE_STRING
