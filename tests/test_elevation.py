"""
Tests for elevation gain/loss accumulation and elevation profiles.
"""

import numpy as np
import pytest

from vectorgeom.core.analysis import ElevationProfile, elevation_gain, elevation_loss
from vectorgeom.core.models import Point


PROFILE = [100, 102, 105, 103, 110, 118, 102, 108, 102, 108, 102, 120]


def points(elevations):
    return [Point(0, i, z) for i, z in enumerate(elevations)]


class TestElevationGainLoss:
    """Tests for the hysteresis accumulation."""

    @pytest.mark.parametrize("tolerance,gain,loss", [
        (None, 50.0, 30.0),
        (0, 50.0, 30.0),
        (5, 48.0, 28.0),
        (15, 36.0, 16.0),
    ])
    def test_reference_profile(self, tolerance, gain, loss):
        assert elevation_gain(points(PROFILE), tolerance) == gain
        assert elevation_loss(points(PROFILE), tolerance) == loss

    def test_results_do_not_increase_with_tolerance(self):
        previous_gain = previous_loss = float("inf")
        for tolerance in (0, 1, 2, 5, 10, 15, 20, 50):
            gain = elevation_gain(points(PROFILE), tolerance)
            loss = elevation_loss(points(PROFILE), tolerance)

            assert gain <= previous_gain
            assert loss <= previous_loss
            previous_gain, previous_loss = gain, loss

    def test_random_profiles_do_not_increase_with_tolerance(self):
        rng = np.random.default_rng(20240517)
        for _ in range(500):
            elevations = rng.integers(0, 30, size=rng.integers(2, 12)).tolist()
            previous_gain = previous_loss = float("inf")
            for tolerance in range(21):
                gain = elevation_gain(points(elevations), tolerance)
                loss = elevation_loss(points(elevations), tolerance)

                assert gain <= previous_gain, (elevations, tolerance)
                assert loss <= previous_loss, (elevations, tolerance)
                previous_gain, previous_loss = gain, loss

    def test_reversal_within_tolerance_is_not_counted(self):
        sequence = points([20, 12, 6, 3, 15])

        assert elevation_gain(sequence, 5) == 12.0
        assert elevation_loss(sequence, 5) == 17.0
        assert elevation_gain(sequence, 6) == 12.0
        assert elevation_loss(sequence, 6) == 17.0
        assert elevation_gain(sequence, 12) == 0.0
        assert elevation_loss(sequence, 12) == 17.0

    def test_noise_below_tolerance_is_absorbed(self):
        sequence = points([100, 103, 99, 102, 110, 107, 115])

        assert elevation_gain(sequence, 5) == 15.0
        assert elevation_loss(sequence, 5) == 0.0

    def test_tolerance_above_total_range_filters_everything(self):
        assert elevation_gain(points(PROFILE), 20) == 0.0
        assert elevation_loss(points(PROFILE), 1000) == 0.0

    def test_monotonic_climb(self):
        assert elevation_gain(points([0, 10, 20, 30])) == 30.0
        assert elevation_loss(points([0, 10, 20, 30])) == 0.0

    def test_monotonic_descent(self):
        assert elevation_gain(points([30, 20, 10, 0])) == 0.0
        assert elevation_loss(points([30, 20, 10, 0])) == 30.0

    def test_points_without_elevation_are_skipped(self):
        sequence = [Point(0, 0, 100), Point(0, 1), Point(0, 2, 110), Point(0, 3), Point(0, 4, 105)]

        assert elevation_gain(sequence) == 10.0
        assert elevation_loss(sequence) == 5.0

    def test_no_elevation(self):
        assert elevation_gain([Point(0, 0), Point(1, 1)]) == 0.0
        assert elevation_loss([]) == 0.0

    def test_negative_tolerance_rejected(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            elevation_gain(points(PROFILE), -1)


class TestElevationProfile:
    """Tests for the ElevationProfile summary."""

    def test_from_points(self):
        profile = ElevationProfile.from_points(points(PROFILE), 15)

        assert profile.has_elevation is True
        assert profile.minimum_z == 100.0
        assert profile.maximum_z == 120.0
        assert profile.z_difference == 20.0
        assert profile.gain == 36.0
        assert profile.loss == 16.0
        assert profile.tolerance == 15
        assert profile.net_change == 20.0

    def test_without_elevation(self):
        profile = ElevationProfile.from_points([Point(0, 0), Point(1, 1)])

        assert profile.has_elevation is False
        assert profile.minimum_z is None
        assert profile.maximum_z is None
        assert profile.z_difference is None
        assert profile.gain == 0.0
        assert profile.loss == 0.0
        assert profile.tolerance == 0.0

    def test_empty_sequence(self):
        profile = ElevationProfile.from_points([])

        assert profile.has_elevation is False
        assert profile.z_difference is None

    def test_to_dict(self):
        data = ElevationProfile.from_points(points([100, 90, 95])).to_dict()

        assert data == {
            "minimum_z": 90.0,
            "maximum_z": 100.0,
            "z_difference": 5.0,
            "gain": 5.0,
            "loss": 10.0,
            "tolerance": 0.0,
        }


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
