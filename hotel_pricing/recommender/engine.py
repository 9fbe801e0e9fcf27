"""
Competitor-weighted price recommendation engine.

Main API for generating a nightly price recommendation:

1. Select the reference set (upscale toggle)
2. Weight each competitor by proximity, reputation and occupancy fit
3. Weighted market average of competitor ADRs
   (falls back to the hotel's own ADR when the reference set is empty)
4. raw = market average × demand index × occupancy adjustment
5. Clamp raw to [floor_price, ceiling_price]
6. Explain the result with insights

Every call is a pure function of (target, competitors, scenario, config).
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from hotel_pricing.config import PricingConfig, get_default_config
from hotel_pricing.data.catalog import Hotel, default_competitors, default_target_hotel
from hotel_pricing.data.validator import validate_catalog
from hotel_pricing.features.weights import (
    CompetitorWeight,
    compute_competitor_weights,
    weighted_average,
)
from hotel_pricing.recommender.adjustments import get_occupancy_policy
from hotel_pricing.recommender.insights import Insight, build_insights
from hotel_pricing.recommender.scenario import DEFAULT_SCENARIO, PricingScenario
from hotel_pricing.recommender.selector import select_competitors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceRecommendation:
    """Result of a price recommendation for one scenario."""
    # Recommendation
    recommended_price: float
    weighted_market_average: float

    # Intermediate values
    raw_price: float              # before clamping
    occupancy_adjustment: float
    used_fallback: bool           # market average is the hotel's own ADR

    # Context
    reference_hotels: Tuple[Hotel, ...]
    weights: Tuple[CompetitorWeight, ...]
    insights: Tuple[Insight, ...]
    scenario: PricingScenario

    def __repr__(self) -> str:
        return (
            f"PriceRecommendation(\n"
            f"  €{self.recommended_price:.0f} (market €{self.weighted_market_average:.0f}, "
            f"raw €{self.raw_price:.0f})\n"
            f"  reference={len(self.reference_hotels)} hotels, insights={[i.id for i in self.insights]}\n"
            f")"
        )

    @property
    def was_clamped(self) -> bool:
        return self.raw_price != self.recommended_price

    def ranked_competitors(self) -> List[Tuple[Hotel, CompetitorWeight]]:
        """Reference hotels ordered by descending weight, for display."""
        pairs = list(zip(self.reference_hotels, self.weights))
        return sorted(pairs, key=lambda pair: pair[1].weight, reverse=True)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'recommended_price': round(self.recommended_price, 2),
            'weighted_market_average': round(self.weighted_market_average, 2),
            'raw_price': round(self.raw_price, 2),
            'occupancy_adjustment': round(self.occupancy_adjustment, 4),
            'used_fallback': self.used_fallback,
            'reference_hotels': [h.to_dict() for h in self.reference_hotels],
            'weights': [w.to_dict() for w in self.weights],
            'insights': [i.to_dict() for i in self.insights],
            'scenario': self.scenario.to_dict(),
        }


def recommend(
    target: Hotel,
    competitors: Sequence[Hotel],
    scenario: PricingScenario,
    config: Optional[PricingConfig] = None
) -> PriceRecommendation:
    """
    Recommend a nightly price for the target hotel.

    Args:
        target: Subject hotel
        competitors: Full competitor catalog (excludes the target)
        scenario: Operator scenario
        config: Weighting and insight configuration (defaults if None)

    Returns:
        PriceRecommendation with price, market reference, reference set and insights

    Raises:
        InvalidScenario: floor_price >= ceiling_price or a non-positive bound
    """
    scenario.validate()
    config = config or get_default_config()
    occupancy_policy = get_occupancy_policy(config.occupancy_policy)

    # 1. Reference set
    reference = select_competitors(competitors, scenario)

    # 2. Weights
    weights = compute_competitor_weights(
        reference,
        scenario.desired_occupancy,
        weight_shares=config.weight_shares,
        proximity_scale_m=config.proximity_scale_m,
        reputation_floor=config.reputation_floor,
        occupancy_fit_floor=config.occupancy_fit_floor,
    )

    # 3. Weighted market average
    if weights:
        market_average = weighted_average(
            [h.average_daily_rate for h in reference],
            [w.weight for w in weights],
        )
        used_fallback = False
    else:
        market_average = float(target.average_daily_rate)
        used_fallback = True
        logger.debug(f"Empty reference set, using {target.id} own rate €{market_average:.2f}")

    # 4. Demand and occupancy adjustment
    adjustment = occupancy_policy(scenario.desired_occupancy)
    raw_price = market_average * scenario.demand_index * adjustment

    # 5. Clamp
    recommended = float(np.clip(raw_price, scenario.floor_price, scenario.ceiling_price))

    # 6. Insights
    insights = build_insights(
        target=target,
        scenario=scenario,
        reference_hotels=reference,
        weights=weights,
        market_average=market_average,
        occupancy_adjustment=adjustment,
        raw_price=raw_price,
        recommended_price=recommended,
        config=config,
    )

    logger.debug(
        f"{target.id}: market €{market_average:.2f} × {scenario.demand_index} × {adjustment:.4f} "
        f"= €{raw_price:.2f} → €{recommended:.2f}"
    )

    return PriceRecommendation(
        recommended_price=recommended,
        weighted_market_average=market_average,
        raw_price=raw_price,
        occupancy_adjustment=adjustment,
        used_fallback=used_fallback,
        reference_hotels=tuple(reference),
        weights=tuple(weights),
        insights=tuple(insights),
        scenario=scenario,
    )


class PriceRecommender:
    """
    Price recommender bound to one subject hotel and its competitor catalog.

    The catalog is validated once on construction; each call to
    recommend() is then an independent engine run.

    Usage:
        recommender = PriceRecommender()
        rec = recommender.recommend(DEFAULT_SCENARIO.replace(demand_index=1.12))
    """

    def __init__(
        self,
        target: Optional[Hotel] = None,
        competitors: Optional[Sequence[Hotel]] = None,
        config: Optional[PricingConfig] = None
    ):
        self.target = target or default_target_hotel()
        self.competitors = tuple(competitors if competitors is not None else default_competitors())
        self.config = config or get_default_config()
        self.catalog_stats = validate_catalog(self.target, self.competitors)

    def recommend(self, scenario: PricingScenario = DEFAULT_SCENARIO) -> PriceRecommendation:
        """Recommend a price for one scenario."""
        return recommend(self.target, self.competitors, scenario, self.config)

    def recommend_batch(self, scenarios: Iterable[PricingScenario]) -> pd.DataFrame:
        """Recommend prices for several scenarios, one row per scenario."""
        results = []
        for scenario in scenarios:
            rec = self.recommend(scenario)
            row = scenario.to_dict()
            row.update({
                'recommended_price': rec.recommended_price,
                'weighted_market_average': rec.weighted_market_average,
                'raw_price': rec.raw_price,
                'n_reference': len(rec.reference_hotels),
                'used_fallback': rec.used_fallback,
            })
            results.append(row)

        return pd.DataFrame(results)


def build_price_recommendation(
    scenario: PricingScenario = DEFAULT_SCENARIO,
    config: Optional[PricingConfig] = None
) -> PriceRecommendation:
    """Recommendation for the bundled subject hotel and catalog."""
    return recommend(default_target_hotel(), default_competitors(), scenario, config)
