"""vectorgeom.core.planar.segments

Planar helpers working on bare coordinates.

Conventions:
  - A point is an ``(x, y)`` tuple
  - A segment is a ``((x1, y1), (x2, y2))`` tuple
  - Distances are Euclidean in the XY plane; Z and M never participate

Implementation detail:
  - Segment crossing for simplicity tests is *proper* crossing only: shared
    endpoints and collinear overlaps are not reported.
  - Segment intersection for distance queries is inclusive: touching
    segments are at distance 0.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np


Coord = Tuple[float, float]
Segment = Tuple[Coord, Coord]


def point_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    dx = x1 - x2
    dy = y1 - y2
    return math.sqrt(dx * dx + dy * dy)


def point_segment_distance(
    px: float,
    py: float,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
) -> float:
    """Distance from a point to a segment (orthogonal projection, clamped)."""
    sx = x2 - x1
    sy = y2 - y1
    d = sx * sx + sy * sy
    if d == 0.0:
        # Degenerate segment: both endpoints coincide.
        return point_distance(px, py, x2, y2)

    u = ((px - x1) * sx + (py - y1) * sy) / d
    if u > 1.0:
        u = 1.0
    elif u < 0.0:
        u = 0.0
    return point_distance(x1 + u * sx, y1 + u * sy, px, py)


def _orientation(ax: float, ay: float, bx: float, by: float, cx: float, cy: float) -> int:
    """Turn direction of a->b->c: 1 clockwise, -1 counter-clockwise, 0 collinear."""
    value = (by - ay) * (cx - bx) - (bx - ax) * (cy - by)
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def _within_box(ax: float, ay: float, bx: float, by: float, cx: float, cy: float) -> bool:
    """True if b lies in the bounding box of a and c."""
    return min(ax, cx) <= bx <= max(ax, cx) and min(ay, cy) <= by <= max(ay, cy)


def segments_intersect(p1: Coord, p2: Coord, q1: Coord, q2: Coord) -> bool:
    """True if the closed segments p1-p2 and q1-q2 share at least one point."""
    o1 = _orientation(p1[0], p1[1], p2[0], p2[1], q1[0], q1[1])
    o2 = _orientation(p1[0], p1[1], p2[0], p2[1], q2[0], q2[1])
    o3 = _orientation(q1[0], q1[1], q2[0], q2[1], p1[0], p1[1])
    o4 = _orientation(q1[0], q1[1], q2[0], q2[1], p2[0], p2[1])

    if o1 != o2 and o3 != o4:
        return True

    # Collinear special cases
    if o1 == 0 and _within_box(p1[0], p1[1], q1[0], q1[1], p2[0], p2[1]):
        return True
    if o2 == 0 and _within_box(p1[0], p1[1], q2[0], q2[1], p2[0], p2[1]):
        return True
    if o3 == 0 and _within_box(q1[0], q1[1], p1[0], p1[1], q2[0], q2[1]):
        return True
    if o4 == 0 and _within_box(q1[0], q1[1], p2[0], p2[1], q2[0], q2[1]):
        return True
    return False


def segments_cross(p1: Coord, p2: Coord, q1: Coord, q2: Coord) -> bool:
    """
    True if the segments cross at a point interior to both of them.

    Parallel (including collinear) segments never cross, so a vertex
    touching a collinear segment is not reported.
    """
    d = (q2[1] - q1[1]) * (p2[0] - p1[0]) - (q2[0] - q1[0]) * (p2[1] - p1[1])
    if d == 0:
        return False

    ua = ((q2[0] - q1[0]) * (p1[1] - q1[1]) - (q2[1] - q1[1]) * (p1[0] - q1[0])) / d
    ub = ((p2[0] - p1[0]) * (p1[1] - q1[1]) - (p2[1] - p1[1]) * (p1[0] - q1[0])) / d
    return 0.0 < ua < 1.0 and 0.0 < ub < 1.0


def has_crossing_segments(segments: Sequence[Segment]) -> bool:
    """True if any two segments of the sequence properly cross."""
    for i in range(len(segments)):
        p1, p2 = segments[i]
        for j in range(i + 1, len(segments)):
            q1, q2 = segments[j]
            if segments_cross(p1, p2, q1, q2):
                return True
    return False


def segment_distance(p1: Coord, p2: Coord, q1: Coord, q2: Coord) -> float:
    """Minimum distance between two segments."""
    if segments_intersect(p1, p2, q1, q2):
        return 0.0
    return min(
        point_segment_distance(p1[0], p1[1], q1[0], q1[1], q2[0], q2[1]),
        point_segment_distance(p2[0], p2[1], q1[0], q1[1], q2[0], q2[1]),
        point_segment_distance(q1[0], q1[1], p1[0], p1[1], p2[0], p2[1]),
        point_segment_distance(q2[0], q2[1], p1[0], p1[1], p2[0], p2[1]),
    )


def _is_segment(part: Tuple) -> bool:
    return isinstance(part[0], tuple)


def part_distance(a: Tuple, b: Tuple) -> float:
    """Distance between two parts, each either a point or a segment."""
    if _is_segment(a):
        if _is_segment(b):
            return segment_distance(a[0], a[1], b[0], b[1])
        return point_segment_distance(b[0], b[1], a[0][0], a[0][1], a[1][0], a[1][1])
    if _is_segment(b):
        return point_segment_distance(a[0], a[1], b[0][0], b[0][1], b[1][0], b[1][1])
    return point_distance(a[0], a[1], b[0], b[1])


def nearest_distance(parts_a: Iterable[Tuple], parts_b: Iterable[Tuple]) -> Optional[float]:
    """
    Minimum distance over all pairs of parts.

    Returns:
        The minimum distance, or None if either side has no parts
    """
    parts_b = list(parts_b)
    best: Optional[float] = None
    for a in parts_a:
        for b in parts_b:
            d = part_distance(a, b)
            if best is None or d < best:
                best = d
                if best == 0.0:
                    return 0.0
    return best


def ring_area_and_centroid(coordinates: Sequence[Coord]) -> Tuple[float, float, float]:
    """Signed area (shoelace) and centroid of a closed ring.

    Counter-clockwise rings have a positive area.

    Args:
        coordinates: ring vertices, first equal to last

    Returns:
        (signed_area, cx, cy); the centroid is NaN for a zero-area ring
    """
    xy = np.asarray(coordinates, dtype=float)
    if xy.shape[0] < 3:
        return 0.0, math.nan, math.nan

    x0 = xy[:-1, 0]
    y0 = xy[:-1, 1]
    x1 = xy[1:, 0]
    y1 = xy[1:, 1]
    cross = x0 * y1 - x1 * y0

    area = 0.5 * float(np.sum(cross))
    if area == 0.0:
        return 0.0, math.nan, math.nan

    cx = float(np.sum((x0 + x1) * cross)) / (6.0 * area)
    cy = float(np.sum((y0 + y1) * cross)) / (6.0 * area)
    return area, cx, cy


def coordinates_mean(coordinates: Sequence[Coord]) -> Coord:
    """Arithmetic mean of a non-empty list of coordinates."""
    mean = np.mean(np.asarray(coordinates, dtype=float), axis=0)
    return float(mean[0]), float(mean[1])
