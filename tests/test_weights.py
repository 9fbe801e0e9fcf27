"""Tests for competitor weighting."""

import numpy as np
import pytest

from hotel_pricing.features.weights import (
    compute_competitor_weights,
    occupancy_fit_score,
    proximity_score,
    reputation_score,
    weighted_average,
)


class TestFactors:
    """Each factor is positive, bounded and moves in the right direction."""

    def test_proximity_is_one_at_zero_distance(self):
        assert proximity_score(0.0) == pytest.approx(1.0)

    def test_proximity_halves_at_scale(self):
        assert proximity_score(250.0) == pytest.approx(0.5)

    def test_proximity_decreases_with_distance(self):
        scores = proximity_score([0, 100, 500, 1000, 5000])
        assert np.all(np.diff(scores) < 0)
        assert np.all(scores > 0)

    def test_reputation_bounds(self):
        """0/5 → floor (0.2), 5/5 → 1.0."""
        assert reputation_score(0.0) == pytest.approx(0.2)
        assert reputation_score(5.0) == pytest.approx(1.0)
        assert reputation_score(2.5) == pytest.approx(0.6)

    def test_reputation_increases_with_score(self):
        scores = reputation_score([1.0, 2.0, 3.5, 4.9])
        assert np.all(np.diff(scores) > 0)

    def test_occupancy_fit_peaks_at_target(self):
        fits = occupancy_fit_score([0.5, 0.6, 0.7, 0.8, 0.9], desired_occupancy=0.7)
        assert fits[2] == pytest.approx(1.0)
        assert fits[1] == pytest.approx(fits[3])
        assert fits[0] < fits[1]

    def test_occupancy_fit_floor(self):
        """A 100pp gap still carries half weight."""
        assert occupancy_fit_score(0.0, desired_occupancy=1.0) == pytest.approx(0.5)


class TestCompositeWeights:
    """Test composite weight computation."""

    def test_hand_computed_weights(self, two_competitors):
        weights = compute_competitor_weights(two_competitors, desired_occupancy=0.70)

        near, far = weights
        assert near.proximity == pytest.approx(0.5)
        assert near.reputation == pytest.approx(1.0)
        assert near.occupancy_fit == pytest.approx(1.0)
        assert near.weight == pytest.approx(0.80)

        assert far.proximity == pytest.approx(0.25)
        assert far.reputation == pytest.approx(0.6)
        assert far.occupancy_fit == pytest.approx(0.8)
        assert far.weight == pytest.approx(0.51)

    def test_shares_sum_to_one(self, mixed_catalog):
        weights = compute_competitor_weights(mixed_catalog, desired_occupancy=0.75)
        assert sum(w.share for w in weights) == pytest.approx(1.0)

    def test_weights_strictly_positive_for_worst_case(self, hotel_factory):
        """Far away, 0/5 reviews, fully mismatched occupancy."""
        worst = hotel_factory('worst', distance_meters=50_000.0, review_score=0.0, occupancy_rate=0.0)
        (weight,) = compute_competitor_weights([worst], desired_occupancy=1.0)
        assert weight.weight > 0.19
        assert weight.share == pytest.approx(1.0)

    def test_preserves_input_order(self, mixed_catalog):
        weights = compute_competitor_weights(mixed_catalog, desired_occupancy=0.7)
        assert [w.hotel_id for w in weights] == [h.id for h in mixed_catalog]

    def test_empty_reference_set(self):
        assert compute_competitor_weights([], desired_occupancy=0.7) == []

    def test_custom_shares(self, two_competitors):
        """Proximity-only weighting reduces to proximity scores."""
        shares = {'proximity': 1.0, 'reputation': 1e-9, 'occupancy_fit': 1e-9}
        near, far = compute_competitor_weights(two_competitors, 0.7, weight_shares=shares)
        assert near.weight == pytest.approx(0.5, abs=1e-6)
        assert far.weight == pytest.approx(0.25, abs=1e-6)


class TestWeightedAverage:

    def test_matches_manual_formula(self):
        result = weighted_average([120.0, 95.0], [0.80, 0.51])
        assert result == pytest.approx((0.80 * 120 + 0.51 * 95) / 1.31)

    def test_single_value(self):
        assert weighted_average([133.0], [0.4]) == pytest.approx(133.0)
