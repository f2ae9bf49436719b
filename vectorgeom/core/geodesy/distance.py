"""vectorgeom.core.geodesy.distance

Geodesic distances between geographic coordinates.

Conventions:
  - Inputs: longitude (X) and latitude (Y) in decimal degrees
  - Outputs: meters
  - Consecutive coordinate pairs are used as given; longitudes are never
    unwrapped across the antimeridian

Implemented:
  - Spherical great-circle distance (Vincenty's formula with equal axes),
    optionally combined with the elevation difference
  - Central-angle distance via the spherical law of cosines, used for the
    "haversine" line length
  - Vincenty's inverse formula on an ellipsoid; non-convergence yields None

References (algorithms):
- T. Vincenty, "Direct and inverse solutions of geodesics on the ellipsoid
  with application of nested equations", Survey Review, 1975.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Sequence

from ..models.options import GeodesyOptions, WGS84_SEMI_MAJOR_AXIS


logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = GeodesyOptions()


def _deg2rad(value: float) -> float:
    # Divide first: keeps the central-angle lengths bit-stable for short segments.
    return value / 180.0 * math.pi


def great_circle_distance(
    lon1: float,
    lat1: float,
    lon2: float,
    lat2: float,
    z1: Optional[float] = None,
    z2: Optional[float] = None,
    radius: float = WGS84_SEMI_MAJOR_AXIS,
) -> float:
    """Spherical distance between two points, elevation-aware.

    When both points carry an elevation, the spherical distance and the
    elevation difference are combined as the legs of a right triangle.
    """
    lat1 = math.radians(lat1)
    lat2 = math.radians(lat2)
    delta_lon = math.radians(lon2) - math.radians(lon1)

    d = radius * math.atan2(
        math.sqrt(
            (math.cos(lat2) * math.sin(delta_lon)) ** 2
            + (math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(delta_lon)) ** 2
        ),
        math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(lat2) * math.cos(delta_lon),
    )

    if z1 is not None and z2 is not None:
        d = math.sqrt(d ** 2 + (z2 - z1) ** 2)
    return d


def haversine_distance(
    lon1: float,
    lat1: float,
    lon2: float,
    lat2: float,
    radius: float = WGS84_SEMI_MAJOR_AXIS,
) -> float:
    """Central-angle distance between two points on a sphere, elevation-blind.

    The central angle is evaluated with ``acos`` (spherical law of cosines),
    so precision degrades for segments shorter than about a meter; use
    great_circle_distance for those.
    """
    lat1 = _deg2rad(lat1)
    lat2 = _deg2rad(lat2)
    cos_angle = (
        math.sin(lat1) * math.sin(lat2)
        + math.cos(lat1) * math.cos(lat2) * math.cos(_deg2rad(abs(lon1 - lon2)))
    )
    # Rounding can push the cosine just outside [-1, 1].
    cos_angle = max(-1.0, min(1.0, cos_angle))
    return radius * math.acos(cos_angle)


def vincenty_distance(
    lon1: float,
    lat1: float,
    lon2: float,
    lat2: float,
    options: Optional[GeodesyOptions] = None,
) -> Optional[float]:
    """Ellipsoidal distance using Vincenty's inverse formula.

    Args:
        lon1, lat1: First point (degrees)
        lon2, lat2: Second point (degrees)
        options: Ellipsoid and iteration control; WGS84 defaults if None

    Returns:
        Distance in meters, or None if the iteration does not converge
        (typically for nearly antipodal points)
    """
    options = options or _DEFAULT_OPTIONS
    a = options.ellipsoid.semi_major_axis
    b = options.ellipsoid.semi_minor_axis
    f = options.ellipsoid.flattening

    L = math.radians(lon2) - math.radians(lon1)
    u1 = math.atan((1 - f) * math.tan(math.radians(lat1)))
    u2 = math.atan((1 - f) * math.tan(math.radians(lat2)))
    sin_u1 = math.sin(u1)
    cos_u1 = math.cos(u1)
    sin_u2 = math.sin(u2)
    cos_u2 = math.cos(u2)

    lam = L
    for _ in range(options.max_iterations):
        sin_lam = math.sin(lam)
        cos_lam = math.cos(lam)
        sin_sigma = math.sqrt(
            (cos_u2 * sin_lam) ** 2
            + (cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam) ** 2
        )
        if sin_sigma == 0:
            # Coincident points
            return 0.0

        cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
        sigma = math.atan2(sin_sigma, cos_sigma)
        sin_alpha = cos_u1 * cos_u2 * sin_lam / sin_sigma
        cos_sq_alpha = 1 - sin_alpha ** 2
        if cos_sq_alpha == 0:
            # Equatorial line
            cos_2sigma_m = 0.0
        else:
            cos_2sigma_m = cos_sigma - 2 * sin_u1 * sin_u2 / cos_sq_alpha

        C = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))
        lam_prev = lam
        lam = L + (1 - C) * f * sin_alpha * (
            sigma + C * sin_sigma * (
                cos_2sigma_m + C * cos_sigma * (-1 + 2 * cos_2sigma_m ** 2)
            )
        )
        if abs(lam - lam_prev) <= options.convergence_threshold:
            break
    else:
        logger.debug(
            "Vincenty formula did not converge after %d iterations for (%s, %s) -> (%s, %s)",
            options.max_iterations, lon1, lat1, lon2, lat2,
        )
        return None

    u_sq = cos_sq_alpha * (a ** 2 - b ** 2) / b ** 2
    A = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    B = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    delta_sigma = B * sin_sigma * (
        cos_2sigma_m + B / 4 * (
            cos_sigma * (-1 + 2 * cos_2sigma_m ** 2)
            - B / 6 * cos_2sigma_m * (-3 + 4 * sin_sigma ** 2) * (-3 + 4 * cos_2sigma_m ** 2)
        )
    )
    return b * A * (sigma - delta_sigma)


# ----------------------------
# Line lengths
# ----------------------------

def _pairs(points: Sequence) -> Iterable:
    return zip(points, points[1:])


def _sphere_radius(radius: Optional[float], options: Optional[GeodesyOptions]) -> float:
    if radius is not None:
        return radius
    return (options or _DEFAULT_OPTIONS).earth_radius


def great_circle_length(
    points: Sequence,
    radius: Optional[float] = None,
    options: Optional[GeodesyOptions] = None,
) -> float:
    """Sum of great-circle distances between consecutive points.

    Args:
        points: Point-like objects with x (longitude), y (latitude) and
            optional z attributes
        radius: Sphere radius in meters; overrides options.earth_radius
        options: Geodesy options; the defaults (WGS84 semi-major axis) if None
    """
    radius = _sphere_radius(radius, options)
    length = 0.0
    for p, q in _pairs(points):
        length += great_circle_distance(p.x, p.y, q.x, q.y, p.z, q.z, radius=radius)
    return length


def haversine_length(
    points: Sequence,
    radius: Optional[float] = None,
    options: Optional[GeodesyOptions] = None,
) -> float:
    """Sum of central-angle distances between consecutive points."""
    radius = _sphere_radius(radius, options)
    length = 0.0
    for p, q in _pairs(points):
        length += haversine_distance(p.x, p.y, q.x, q.y, radius=radius)
    return length


def vincenty_length(points: Sequence, options: Optional[GeodesyOptions] = None) -> Optional[float]:
    """Sum of Vincenty distances between consecutive points.

    Returns:
        Length in meters, or None if any segment fails to converge
    """
    length = 0.0
    for p, q in _pairs(points):
        d = vincenty_distance(p.x, p.y, q.x, q.y, options=options)
        if d is None:
            return None
        length += d
    return length
