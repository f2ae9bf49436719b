"""Geometry health analysis.

Construction already rejects geometries that break the model invariants
(see ``vectorgeom.core.exceptions``). This module looks for the softer
problems a well-formed geometry can still have, and reports them as a
structured checklist instead of raising:

- LineStrings that cross themselves (warning)
- Polygon rings that cross themselves or each other (error)
- Polygon holes lying outside the exterior ring's bounding box (error)
- Repeated consecutive points in lines and rings (warning)
- Duplicate members in a MultiPoint (warning)

Pure Python, no external geometry engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from ..models.geometry import Geometry
from ..models.linestring import Curve
from ..models.multi import MultiPoint
from ..models.polygon import Polygon


logger = logging.getLogger(__name__)


class HealthStatus(Enum):
    """Overall status of a geometry."""
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class GeometryHealth:
    """Structured summary of a geometry's validity."""
    geometry_type: str
    status: HealthStatus = HealthStatus.OK
    num_geometries: int = 0
    num_points: int = 0
    is_empty: bool = False
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when no error was found (warnings are allowed)."""
        return not self.errors

    def to_dict(self) -> Dict:
        """Serialize to dictionary for JSON output."""
        return {
            "geometry_type": self.geometry_type,
            "status": self.status.value,
            "is_valid": self.is_valid,
            "is_empty": self.is_empty,
            "num_geometries": self.num_geometries,
            "num_points": self.num_points,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }

    def get_summary(self) -> str:
        """Human-readable one-paragraph summary."""
        lines = [f"{self.geometry_type}: {self.status.value.upper()}"]
        for msg in self.errors:
            lines.append(f"  ERROR: {msg}")
        for msg in self.warnings:
            lines.append(f"  WARNING: {msg}")
        return "\n".join(lines)


def check_geometry(geometry: Geometry) -> GeometryHealth:
    """Analyse a geometry and return its health report.

    Args:
        geometry: Any constructed geometry

    Returns:
        GeometryHealth with errors and warnings; status is ERROR if any
        error was found, WARNING if only warnings were found, OK otherwise
    """
    health = GeometryHealth(
        geometry_type=geometry.geometry_type().value,
        num_geometries=geometry.num_geometries() or 1,
        num_points=geometry.num_points(),
        is_empty=geometry.is_empty(),
    )

    if not health.is_empty:
        _check(geometry, "", health)

    if health.errors:
        health.status = HealthStatus.ERROR
    elif health.warnings:
        health.status = HealthStatus.WARNING

    logger.debug(
        "Checked %s: %s (%d errors, %d warnings)",
        health.geometry_type, health.status.value, len(health.errors), len(health.warnings),
    )
    return health


def _check(geometry: Geometry, path: str, health: GeometryHealth) -> None:
    label = f"{geometry.geometry_type().value}{path}"

    if isinstance(geometry, Curve):
        _check_repeated_points(geometry, label, health.warnings)
        if not geometry.is_simple():
            health.warnings.append(f"{label} crosses itself")

    elif isinstance(geometry, Polygon):
        _check_polygon(geometry, label, health)

    elif isinstance(geometry, MultiPoint):
        if not geometry.is_simple():
            health.warnings.append(f"{label} contains duplicate points")

    elif geometry.num_geometries() is not None:
        for i, component in enumerate(geometry.get_components(), start=1):
            if not component.is_empty():
                _check(component, f"{path}[{i}]", health)


def _check_polygon(polygon: Polygon, label: str, health: GeometryHealth) -> None:
    rings = polygon.get_components()
    for i, ring in enumerate(rings):
        _check_repeated_points(ring, f"{label} ring {i}", health.warnings)

    if not polygon.is_simple():
        health.errors.append(f"{label} has self-intersecting rings")

    exterior = rings[0].get_bbox()
    for i, hole in enumerate(rings[1:], start=1):
        bbox = hole.get_bbox()
        if (
            bbox["minx"] < exterior["minx"]
            or bbox["miny"] < exterior["miny"]
            or bbox["maxx"] > exterior["maxx"]
            or bbox["maxy"] > exterior["maxy"]
        ):
            health.errors.append(f"{label} hole {i} lies outside the exterior ring")


def _check_repeated_points(line: Curve, label: str, messages: List[str]) -> None:
    points = line.get_points()
    for i in range(1, len(points)):
        if points[i].equals(points[i - 1]):
            messages.append(f"{label} repeats a point at position {i + 1}")
            return
