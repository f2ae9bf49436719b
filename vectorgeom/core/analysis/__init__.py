"""Analysis helpers operating on point sequences."""

from .elevation import ElevationProfile, elevation_gain, elevation_loss

__all__ = [
    "ElevationProfile",
    "elevation_gain",
    "elevation_loss",
]
