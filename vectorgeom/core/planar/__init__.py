"""Planar (XY) computational helpers, independent of the geometry classes."""

from .segments import (
    point_distance,
    point_segment_distance,
    segments_intersect,
    segments_cross,
    has_crossing_segments,
    segment_distance,
    nearest_distance,
    ring_area_and_centroid,
    coordinates_mean,
)

__all__ = [
    "point_distance",
    "point_segment_distance",
    "segments_intersect",
    "segments_cross",
    "has_crossing_segments",
    "segment_distance",
    "nearest_distance",
    "ring_area_and_centroid",
    "coordinates_mean",
]
