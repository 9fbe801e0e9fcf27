"""
Insight generation.

Turns the intermediate values of a recommendation into a short, ordered
list of labeled observations. Insights only read values the engine has
already computed; ids are fixed strings so the same scenario always yields
the same ids in the same order.

Order:
1. market_position    recommended price vs weighted market average
2. demand_regime      demand index vs stable demand
3. occupancy_target   target occupancy vs the hotel's current occupancy
4. current_rate_gap   recommended price vs the hotel's current ADR
5. price_band         only when the floor or ceiling was applied
6. reference_set      comparison set summary
   market_fallback    (instead of 6) when no competitor was retained
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from hotel_pricing.config import DEMAND_TOLERANCE, PricingConfig
from hotel_pricing.data.catalog import Hotel
from hotel_pricing.features.weights import CompetitorWeight
from hotel_pricing.recommender.scenario import PricingScenario


class Impact(Enum):
    """How an observation bears on revenue."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class Insight:
    """A labeled, impact-classified note explaining the recommendation."""
    id: str
    label: str
    detail: str
    impact: Impact

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'label': self.label,
            'detail': self.detail,
            'impact': self.impact.value,
        }


def _relative_gap(value: float, reference: float) -> float:
    return (value - reference) / reference if reference > 0 else 0.0


def market_position_insight(
    recommended_price: float,
    market_average: float,
    raw_price: float,
    config: PricingConfig
) -> Insight:
    """Recommended price vs the weighted market average."""
    gap = _relative_gap(recommended_price, market_average)
    downward_clamp = (raw_price - recommended_price) / raw_price if raw_price > 0 else 0.0

    if gap > config.market_gap_threshold:
        if recommended_price > raw_price:
            return Insight(
                id="market_position",
                label="Above market",
                detail=(f"Recommended €{recommended_price:.0f} sits {gap*100:.1f}% above the weighted "
                        f"market average of €{market_average:.0f} only because of the price floor."),
                impact=Impact.NEUTRAL,
            )
        return Insight(
            id="market_position",
            label="Above market",
            detail=(f"Recommended €{recommended_price:.0f} sits {gap*100:.1f}% above the weighted "
                    f"market average of €{market_average:.0f}, supported by demand and occupancy target."),
            impact=Impact.POSITIVE,
        )
    if gap < -config.market_gap_threshold:
        if downward_clamp > config.clamp_severity_threshold:
            return Insight(
                id="market_position",
                label="Below market",
                detail=(f"Recommended €{recommended_price:.0f} is {abs(gap)*100:.1f}% below the weighted "
                        f"market average of €{market_average:.0f} because the price ceiling cut "
                        f"{downward_clamp*100:.0f}% off the adjusted price."),
                impact=Impact.NEGATIVE,
            )
        return Insight(
            id="market_position",
            label="Below market",
            detail=(f"Recommended €{recommended_price:.0f} is {abs(gap)*100:.1f}% below the weighted "
                    f"market average of €{market_average:.0f}."),
            impact=Impact.NEUTRAL,
        )
    return Insight(
        id="market_position",
        label="In line with market",
        detail=(f"Recommended €{recommended_price:.0f} is within {config.market_gap_threshold*100:.0f}% "
                f"of the weighted market average of €{market_average:.0f}."),
        impact=Impact.NEUTRAL,
    )


def demand_regime_insight(demand_index: float) -> Insight:
    """Demand multiplier vs stable demand (1.0)."""
    delta = demand_index - 1.0
    if delta > DEMAND_TOLERANCE:
        return Insight(
            id="demand_regime",
            label="Elevated demand",
            detail=f"Market pressure lifts the price by {delta*100:.0f}% over stable demand.",
            impact=Impact.POSITIVE,
        )
    if delta < -DEMAND_TOLERANCE:
        return Insight(
            id="demand_regime",
            label="Soft demand",
            detail=f"A quiet market lowers the price by {abs(delta)*100:.0f}% versus stable demand.",
            impact=Impact.NEGATIVE,
        )
    return Insight(
        id="demand_regime",
        label="Stable demand",
        detail="Regular demand, no demand adjustment applied.",
        impact=Impact.NEUTRAL,
    )


def occupancy_target_insight(
    desired_occupancy: float,
    current_occupancy: float,
    adjustment: float,
    config: PricingConfig
) -> Insight:
    """Target occupancy vs the subject hotel's current occupancy."""
    gap = desired_occupancy - current_occupancy
    factor = f"occupancy factor ×{adjustment:.3f}"

    if gap > config.occupancy_gap_threshold:
        return Insight(
            id="occupancy_target",
            label="Target above current occupancy",
            detail=(f"Targeting {desired_occupancy*100:.0f}% against {current_occupancy*100:.0f}% "
                    f"today (+{gap*100:.0f}pp, {factor})."),
            impact=Impact.POSITIVE,
        )
    if gap < -config.occupancy_gap_threshold:
        return Insight(
            id="occupancy_target",
            label="Target below current occupancy",
            detail=(f"Targeting {desired_occupancy*100:.0f}% against {current_occupancy*100:.0f}% "
                    f"today ({gap*100:.0f}pp, {factor})."),
            impact=Impact.NEGATIVE,
        )
    return Insight(
        id="occupancy_target",
        label="Target matches current occupancy",
        detail=f"Targeting {desired_occupancy*100:.0f}%, in line with current occupancy ({factor}).",
        impact=Impact.NEUTRAL,
    )


def current_rate_insight(recommended_price: float, current_rate: float, config: PricingConfig) -> Insight:
    """Adjustment needed from the hotel's current ADR."""
    delta = recommended_price - current_rate
    gap = _relative_gap(recommended_price, current_rate)

    if gap > config.rate_gap_threshold:
        return Insight(
            id="current_rate_gap",
            label="Room to raise the rate",
            detail=f"Current rate €{current_rate:.0f}: raise by €{delta:.0f} ({gap*100:+.1f}%).",
            impact=Impact.POSITIVE,
        )
    if gap < -config.rate_gap_threshold:
        return Insight(
            id="current_rate_gap",
            label="Current rate above recommendation",
            detail=f"Current rate €{current_rate:.0f}: lower by €{abs(delta):.0f} ({gap*100:+.1f}%).",
            impact=Impact.NEGATIVE,
        )
    return Insight(
        id="current_rate_gap",
        label="Current rate on target",
        detail=f"Current rate €{current_rate:.0f} is within {config.rate_gap_threshold*100:.0f}% of the recommendation.",
        impact=Impact.NEUTRAL,
    )


def price_band_insight(
    raw_price: float,
    recommended_price: float,
    scenario: PricingScenario,
    config: PricingConfig
) -> Optional[Insight]:
    """Floor/ceiling note, None when the raw price already fits the band."""
    if raw_price > scenario.ceiling_price:
        cut = (raw_price - recommended_price) / raw_price
        return Insight(
            id="price_band",
            label="Ceiling applied",
            detail=(f"Adjusted price €{raw_price:.0f} capped at the €{scenario.ceiling_price:.0f} "
                    f"ceiling ({cut*100:.1f}% cut)."),
            impact=Impact.NEGATIVE if cut > config.clamp_severity_threshold else Impact.NEUTRAL,
        )
    if raw_price < scenario.floor_price:
        return Insight(
            id="price_band",
            label="Floor applied",
            detail=(f"Adjusted price €{raw_price:.0f} raised to the €{scenario.floor_price:.0f} floor."),
            impact=Impact.NEUTRAL,
        )
    return None


def reference_set_insight(
    reference_hotels: Sequence[Hotel],
    weights: Sequence[CompetitorWeight],
    scenario: PricingScenario,
    target: Hotel
) -> Insight:
    """Comparison set summary, or the fallback note when it is empty."""
    if len(reference_hotels) == 0:
        return Insight(
            id="market_fallback",
            label="No comparable competitors",
            detail=(f"No competitor matched the comparison filters; the hotel's own rate "
                    f"€{target.average_daily_rate:.0f} is used as the market reference."),
            impact=Impact.NEUTRAL,
        )

    nearest = min(reference_hotels, key=lambda h: h.distance_meters)
    top = max(weights, key=lambda w: w.weight)
    top_name = next(h.name for h in reference_hotels if h.id == top.hotel_id)
    upscale = "included" if scenario.include_upscale else "excluded"

    return Insight(
        id="reference_set",
        label="Comparison set",
        detail=(f"{len(reference_hotels)} competitors (upscale {upscale}); nearest is "
                f"{nearest.name} at {nearest.distance_meters:.0f} m, heaviest weight "
                f"{top_name} ({top.share*100:.0f}%)."),
        impact=Impact.NEUTRAL,
    )


def build_insights(
    target: Hotel,
    scenario: PricingScenario,
    reference_hotels: Sequence[Hotel],
    weights: Sequence[CompetitorWeight],
    market_average: float,
    occupancy_adjustment: float,
    raw_price: float,
    recommended_price: float,
    config: PricingConfig,
) -> List[Insight]:
    """
    Build the ordered insight list for a recommendation.

    Args:
        target: Subject hotel
        scenario: Scenario the recommendation was computed for
        reference_hotels: Competitors used in the market average
        weights: Weight breakdown for reference_hotels
        market_average: Weighted market average (or fallback rate)
        occupancy_adjustment: Occupancy factor applied to the raw price
        raw_price: Price before clamping
        recommended_price: Clamped price
        config: Insight thresholds

    Returns:
        Insights in display order
    """
    insights = [
        market_position_insight(recommended_price, market_average, raw_price, config),
        demand_regime_insight(scenario.demand_index),
        occupancy_target_insight(
            scenario.desired_occupancy, target.occupancy_rate, occupancy_adjustment, config
        ),
        current_rate_insight(recommended_price, target.average_daily_rate, config),
    ]

    band = price_band_insight(raw_price, recommended_price, scenario, config)
    if band is not None:
        insights.append(band)

    insights.append(reference_set_insight(reference_hotels, weights, scenario, target))
    return insights
