"""Validation helpers for constructed geometries."""

from .geometry_health import GeometryHealth, HealthStatus, check_geometry

__all__ = [
    "GeometryHealth",
    "HealthStatus",
    "check_geometry",
]
