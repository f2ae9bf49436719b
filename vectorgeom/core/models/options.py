"""
Geodesy options for geometry length computations.

This module defines the reference ellipsoid and the configuration used by
the geodesic length functions: sphere radius for the spherical formulas,
iteration control for Vincenty's inverse formula.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


WGS84_SEMI_MAJOR_AXIS = 6378137.0
WGS84_FLATTENING = 1.0 / 298.257223563
WGS84_SEMI_MINOR_AXIS = WGS84_SEMI_MAJOR_AXIS * (1.0 - WGS84_FLATTENING)

# Relative mismatch allowed between a given semi-minor axis and a * (1 - f)
AXIS_TOLERANCE = 1e-9


@dataclass
class Ellipsoid:
    """
    Reference ellipsoid.

    Attributes:
        semi_major_axis: Equatorial radius in meters (a)
        semi_minor_axis: Polar radius in meters (b); derived from a and f
            when None, otherwise it must agree with a * (1 - f)
        flattening: Flattening (a - b) / a
    """

    semi_major_axis: float = WGS84_SEMI_MAJOR_AXIS
    semi_minor_axis: Optional[float] = None
    flattening: float = WGS84_FLATTENING

    def __post_init__(self):
        """Validate ellipsoid parameters."""
        if self.semi_major_axis <= 0:
            raise ValueError("semi_major_axis must be positive")
        if not 0 <= self.flattening < 1:
            raise ValueError("flattening must be in [0, 1)")

        derived = self.semi_major_axis * (1.0 - self.flattening)
        if self.semi_minor_axis is None:
            self.semi_minor_axis = derived
            return

        if self.semi_minor_axis <= 0:
            raise ValueError("semi_minor_axis must be positive")
        if self.semi_minor_axis > self.semi_major_axis:
            raise ValueError("semi_minor_axis cannot exceed semi_major_axis")
        if abs(self.semi_minor_axis - derived) > AXIS_TOLERANCE * self.semi_major_axis:
            raise ValueError(
                f"semi_minor_axis {self.semi_minor_axis} does not match "
                f"semi_major_axis and flattening (expected {derived})"
            )

    @classmethod
    def wgs84(cls) -> 'Ellipsoid':
        """The WGS84 ellipsoid."""
        return cls()

    @classmethod
    def sphere(cls, radius: float) -> 'Ellipsoid':
        """A degenerate ellipsoid with equal axes."""
        return cls(semi_major_axis=radius, semi_minor_axis=radius, flattening=0.0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "semi_major_axis": self.semi_major_axis,
            "semi_minor_axis": self.semi_minor_axis,
            "flattening": self.flattening,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Ellipsoid':
        return cls(
            semi_major_axis=float(data.get("semi_major_axis", WGS84_SEMI_MAJOR_AXIS)),
            semi_minor_axis=_optional_float(data.get("semi_minor_axis")),
            flattening=float(data.get("flattening", WGS84_FLATTENING)),
        )


@dataclass
class GeodesyOptions:
    """
    Configuration for geodesic length computations.

    Attributes:
        ellipsoid: Reference ellipsoid for Vincenty's formula (default: WGS84)
        earth_radius: Sphere radius in meters for the spherical formulas
            (default: WGS84 semi-major axis)
        max_iterations: Iteration limit for Vincenty's formula (default: 100)
        convergence_threshold: Convergence criterion on lambda, radians
            (default: 1e-12)
    """

    ellipsoid: Ellipsoid = field(default_factory=Ellipsoid.wgs84)
    earth_radius: float = WGS84_SEMI_MAJOR_AXIS
    max_iterations: int = 100
    convergence_threshold: float = 1e-12

    def __post_init__(self):
        """Validate options after initialization."""
        if isinstance(self.ellipsoid, dict):
            self.ellipsoid = Ellipsoid.from_dict(self.ellipsoid)

        if self.earth_radius <= 0:
            raise ValueError("earth_radius must be positive")

        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")

        if self.convergence_threshold <= 0:
            raise ValueError("convergence_threshold must be positive")

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "ellipsoid": self.ellipsoid.to_dict(),
            "earth_radius": self.earth_radius,
            "max_iterations": self.max_iterations,
            "convergence_threshold": self.convergence_threshold,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GeodesyOptions':
        """
        Create GeodesyOptions from a dictionary.

        Args:
            data: Dictionary with option values

        Returns:
            New GeodesyOptions instance
        """
        ellipsoid = data.get("ellipsoid")
        return cls(
            ellipsoid=Ellipsoid.from_dict(ellipsoid) if ellipsoid else Ellipsoid.wgs84(),
            earth_radius=data.get("earth_radius", WGS84_SEMI_MAJOR_AXIS),
            max_iterations=data.get("max_iterations", 100),
            convergence_threshold=data.get("convergence_threshold", 1e-12),
        )

    @classmethod
    def default(cls) -> 'GeodesyOptions':
        """
        Create options with default values.

        Returns:
            GeodesyOptions with WGS84 settings
        """
        return cls()

    def __repr__(self) -> str:
        return (
            f"GeodesyOptions("
            f"a={self.ellipsoid.semi_major_axis}, "
            f"f={self.ellipsoid.flattening}, "
            f"max_iter={self.max_iterations}, "
            f"conv={self.convergence_threshold})"
        )


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)
