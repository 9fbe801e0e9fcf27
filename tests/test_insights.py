"""Tests for insight generation."""

import pytest

from hotel_pricing.config import PricingConfig
from hotel_pricing.recommender.engine import recommend
from hotel_pricing.recommender.insights import (
    Impact,
    demand_regime_insight,
    market_position_insight,
    occupancy_target_insight,
)


def by_id(rec):
    return {insight.id: insight for insight in rec.insights}


class TestInsightOrder:
    """Insights appear in a fixed order with stable ids."""

    def test_unclamped_ids(self, target_hotel, two_competitors, scenario):
        rec = recommend(target_hotel, two_competitors, scenario)
        assert [i.id for i in rec.insights] == [
            "market_position", "demand_regime", "occupancy_target", "current_rate_gap", "reference_set",
        ]

    def test_clamped_adds_price_band(self, target_hotel, two_competitors, scenario):
        rec = recommend(target_hotel, two_competitors, scenario.replace(ceiling_price=100.0))
        assert [i.id for i in rec.insights] == [
            "market_position", "demand_regime", "occupancy_target", "current_rate_gap",
            "price_band", "reference_set",
        ]

    def test_ids_unique(self, bundled_target, bundled_competitors, scenario):
        rec = recommend(bundled_target, bundled_competitors, scenario.replace(floor_price=140.0))
        ids = [i.id for i in rec.insights]
        assert len(ids) == len(set(ids))


class TestNeutralScenario:
    """Pivot occupancy, stable demand, price inside the band."""

    def test_classifications(self, target_hotel, two_competitors, scenario):
        insights = by_id(recommend(target_hotel, two_competitors, scenario))

        assert insights["market_position"].impact == Impact.NEUTRAL
        assert insights["demand_regime"].impact == Impact.NEUTRAL
        # 70% target vs 68% today
        assert insights["occupancy_target"].impact == Impact.POSITIVE
        # ~€110 vs €112 current
        assert insights["current_rate_gap"].impact == Impact.NEUTRAL
        assert insights["reference_set"].impact == Impact.NEUTRAL
        assert "2 competitors" in insights["reference_set"].detail


class TestPeakDemand:

    def test_above_market_is_positive(self, target_hotel, two_competitors, scenario):
        insights = by_id(recommend(target_hotel, two_competitors, scenario.replace(demand_index=1.12)))

        assert insights["market_position"].impact == Impact.POSITIVE
        assert insights["market_position"].label == "Above market"
        assert insights["demand_regime"].impact == Impact.POSITIVE
        assert insights["current_rate_gap"].impact == Impact.POSITIVE


class TestClampInsights:

    def test_large_ceiling_cut_is_negative(self, target_hotel, two_competitors, scenario):
        """Raw ≈ €153 capped at €100."""
        rec = recommend(
            target_hotel, two_competitors,
            scenario.replace(demand_index=1.2, desired_occupancy=0.82, ceiling_price=100.0),
        )
        insights = by_id(rec)

        assert insights["price_band"].label == "Ceiling applied"
        assert insights["price_band"].impact == Impact.NEGATIVE
        assert insights["market_position"].impact == Impact.NEGATIVE
        assert insights["current_rate_gap"].impact == Impact.NEGATIVE

    def test_small_ceiling_cut_is_neutral(self, target_hotel, two_competitors, scenario):
        """Raw ≈ €110.3 capped at €105 (<5% cut)."""
        insights = by_id(recommend(target_hotel, two_competitors, scenario.replace(ceiling_price=105.0)))

        assert insights["price_band"].impact == Impact.NEUTRAL
        assert insights["market_position"].label == "Below market"
        assert insights["market_position"].impact == Impact.NEUTRAL

    def test_floor_lift_is_neutral(self, target_hotel, two_competitors, scenario):
        """Raw ≈ €86 lifted to a €120 floor."""
        rec = recommend(
            target_hotel, two_competitors,
            scenario.replace(demand_index=0.9, desired_occupancy=0.58, floor_price=120.0, ceiling_price=200.0),
        )
        insights = by_id(rec)

        assert rec.recommended_price == 120.0
        assert insights["price_band"].label == "Floor applied"
        assert insights["price_band"].impact == Impact.NEUTRAL
        # Above market only because of the floor
        assert insights["market_position"].impact == Impact.NEUTRAL
        assert insights["demand_regime"].impact == Impact.NEGATIVE
        assert insights["occupancy_target"].impact == Impact.NEGATIVE


class TestInsightFunctions:
    """Direct checks on the individual insight builders."""

    @pytest.mark.parametrize("demand_index,impact", [
        (0.85, Impact.NEGATIVE),
        (0.90, Impact.NEGATIVE),
        (1.00, Impact.NEUTRAL),
        (1.12, Impact.POSITIVE),
    ])
    def test_demand_regime(self, demand_index, impact):
        assert demand_regime_insight(demand_index).impact == impact

    def test_occupancy_within_tolerance_is_neutral(self):
        insight = occupancy_target_insight(0.685, 0.68, 1.0, PricingConfig())
        assert insight.impact == Impact.NEUTRAL

    def test_market_position_in_line(self):
        insight = market_position_insight(101.0, 100.0, 101.0, PricingConfig())
        assert insight.label == "In line with market"

    def test_thresholds_follow_config(self):
        """A 5% premium counts as in line with a 10% threshold."""
        insight = market_position_insight(105.0, 100.0, 105.0, PricingConfig(market_gap_threshold=0.10))
        assert insight.impact == Impact.NEUTRAL

    def test_to_dict(self):
        d = demand_regime_insight(1.12).to_dict()
        assert d == {
            'id': 'demand_regime',
            'label': 'Elevated demand',
            'detail': d['detail'],
            'impact': 'positive',
        }
