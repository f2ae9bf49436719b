"""Geodesic distance and length functions (pure, stateless)."""

from .distance import (
    great_circle_distance,
    haversine_distance,
    vincenty_distance,
    great_circle_length,
    haversine_length,
    vincenty_length,
)

__all__ = [
    "great_circle_distance",
    "haversine_distance",
    "vincenty_distance",
    "great_circle_length",
    "haversine_length",
    "vincenty_length",
]
