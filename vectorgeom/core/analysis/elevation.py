"""
Elevation profile analysis for lines.

Gain and loss are accumulated with a hysteresis filter. The walk follows the
current trend (climbing or descending) and remembers its running extreme. A
leg is committed only once the elevation turns back from that extreme by more
than the vertical tolerance; the pending leg is committed at the end of the
profile. Until the first move beyond the tolerance the trend is undecided.
Noise smaller than the tolerance is thus absorbed instead of being counted as
a series of small climbs and descents, and a larger tolerance never yields a
larger gain or loss. With a tolerance of 0 every change counts and the result
is the plain sum of positive (resp. negative) elevation deltas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple


def _accumulate(elevations: Sequence[float], tolerance: Optional[float]) -> Tuple[float, float]:
    """Return (gain, loss) for a sequence of elevations."""
    if tolerance is None:
        tolerance = 0.0
    if tolerance < 0:
        raise ValueError(f"Vertical tolerance cannot be negative, got {tolerance}")

    gain = 0.0
    loss = 0.0
    if not elevations:
        return gain, loss

    # trend: +1 climbing, -1 descending, 0 undecided
    trend = 0
    anchor = extreme = elevations[0]
    for elevation in elevations[1:]:
        if trend == 0:
            if elevation - anchor > tolerance:
                trend, extreme = 1, elevation
            elif anchor - elevation > tolerance:
                trend, extreme = -1, elevation
        elif trend > 0:
            if elevation > extreme:
                extreme = elevation
            elif extreme - elevation > tolerance:
                gain += extreme - anchor
                anchor, extreme, trend = extreme, elevation, -1
        else:
            if elevation < extreme:
                extreme = elevation
            elif elevation - extreme > tolerance:
                loss += anchor - extreme
                anchor, extreme, trend = extreme, elevation, 1

    if trend > 0:
        gain += extreme - anchor
    elif trend < 0:
        loss += anchor - extreme
    return gain, loss


def elevations_of(points: Sequence) -> List[float]:
    """Z values of the points carrying one, in order."""
    return [p.z for p in points if p.z is not None]


def elevation_gain(points: Sequence, tolerance: Optional[float] = None) -> float:
    """
    Total climb along a sequence of points.

    Args:
        points: Point-like objects; those without z are skipped
        tolerance: Vertical tolerance in the units of z; None means 0

    Returns:
        Accumulated positive elevation change
    """
    return _accumulate(elevations_of(points), tolerance)[0]


def elevation_loss(points: Sequence, tolerance: Optional[float] = None) -> float:
    """Total descent along a sequence of points, as a positive number."""
    return _accumulate(elevations_of(points), tolerance)[1]


@dataclass
class ElevationProfile:
    """
    Summary of the elevation along a line.

    Attributes:
        minimum_z: Lowest elevation, None if no point has one
        maximum_z: Highest elevation, None if no point has one
        z_difference: Absolute difference between first and last point
            elevation, None if either lacks one
        gain: Accumulated climb
        loss: Accumulated descent
        tolerance: Vertical tolerance used for gain and loss
    """

    minimum_z: Optional[float]
    maximum_z: Optional[float]
    z_difference: Optional[float]
    gain: float
    loss: float
    tolerance: float = 0.0

    @property
    def has_elevation(self) -> bool:
        return self.minimum_z is not None

    @property
    def net_change(self) -> float:
        """Gain minus loss."""
        return self.gain - self.loss

    @classmethod
    def from_points(cls, points: Sequence, tolerance: Optional[float] = None) -> 'ElevationProfile':
        """Build the profile of an ordered sequence of points."""
        elevations = elevations_of(points)
        gain, loss = _accumulate(elevations, tolerance)

        z_difference = None
        if points and points[0].z is not None and points[-1].z is not None:
            z_difference = abs(points[0].z - points[-1].z)

        return cls(
            minimum_z=min(elevations) if elevations else None,
            maximum_z=max(elevations) if elevations else None,
            z_difference=z_difference,
            gain=gain,
            loss=loss,
            tolerance=tolerance or 0.0,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the profile to a dictionary."""
        return {
            "minimum_z": self.minimum_z,
            "maximum_z": self.maximum_z,
            "z_difference": self.z_difference,
            "gain": self.gain,
            "loss": self.loss,
            "tolerance": self.tolerance,
        }
