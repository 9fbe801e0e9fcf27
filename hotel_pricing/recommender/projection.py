"""
Scenario sweeps and reference-set aggregation for reporting.

- project_occupancy: one independent engine run per occupancy step, keeping
  every other scenario parameter fixed
- category_breakdown: average rate and occupancy per competitor category
"""

from typing import Optional, Sequence

import numpy as np
import pandas as pd

from hotel_pricing.config import PricingConfig
from hotel_pricing.data.catalog import Hotel, category_label
from hotel_pricing.recommender.engine import recommend
from hotel_pricing.recommender.scenario import PricingScenario

OCCUPANCY_STEPS = (0.58, 0.62, 0.66, 0.70, 0.74, 0.78, 0.82)


def project_occupancy(
    target: Hotel,
    competitors: Sequence[Hotel],
    scenario: PricingScenario,
    steps: Sequence[float] = OCCUPANCY_STEPS,
    config: Optional[PricingConfig] = None
) -> pd.DataFrame:
    """
    Price projection across occupancy targets.

    Args:
        target: Subject hotel
        competitors: Competitor catalog
        scenario: Base scenario (its desired_occupancy is replaced per step)
        steps: Occupancy targets, in display order
        config: Engine configuration

    Returns:
        DataFrame with columns occupancy, raw_price, price, market_average,
        adjustment_vs_market, is_current
    """
    base = recommend(target, competitors, scenario, config)

    rows = []
    for occupancy in steps:
        rec = recommend(target, competitors, scenario.replace(desired_occupancy=occupancy), config)
        rows.append({
            'occupancy': occupancy,
            'raw_price': rec.raw_price,
            'price': rec.recommended_price,
            'market_average': rec.weighted_market_average,
            # Offset from the current scenario's market reference
            'adjustment_vs_market': rec.recommended_price - base.weighted_market_average,
            'is_current': bool(np.isclose(occupancy, scenario.desired_occupancy)),
        })

    return pd.DataFrame(rows)


def category_breakdown(hotels: Sequence[Hotel]) -> pd.DataFrame:
    """
    Average rate and occupancy per category.

    Categories appear in the order they are first seen in ``hotels``.

    Returns:
        DataFrame with columns category, label, average_rate,
        average_occupancy, count (empty when hotels is empty)
    """
    columns = ['category', 'label', 'average_rate', 'average_occupancy', 'count']
    if len(hotels) == 0:
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame({
        'category': [h.category for h in hotels],
        'average_daily_rate': [h.average_daily_rate for h in hotels],
        'occupancy_rate': [h.occupancy_rate for h in hotels],
    })

    breakdown = df.groupby('category', sort=False).agg(
        average_rate=('average_daily_rate', 'mean'),
        average_occupancy=('occupancy_rate', 'mean'),
        count=('average_daily_rate', 'size'),
    ).reset_index()
    breakdown['label'] = breakdown['category'].map(category_label)

    return breakdown[columns]
