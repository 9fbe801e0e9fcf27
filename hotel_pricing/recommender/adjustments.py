"""
Occupancy adjustment policies.

The raw price is the weighted market average scaled by the demand index
and by an occupancy adjustment of the operator's target occupancy:

    raw_price = market_average * demand_index * adjustment(desired_occupancy)

Whether a higher target should push the price up or down is a revenue
management choice, so the adjustment is a named policy rather than inline
arithmetic. Both policies are monotonic and equal 1.0 at OCCUPANCY_PIVOT.
"""

import math
from typing import Callable, Dict

from hotel_pricing.config import OCCUPANCY_ELASTICITY, OCCUPANCY_PIVOT

OccupancyPolicy = Callable[[float], float]


def premium_occupancy_adjustment(desired_occupancy: float) -> float:
    """
    Increasing policy: a higher occupancy target carries a higher price.

    exp(1.2 * (o - 0.70)): 0.58 -> 0.866, 0.70 -> 1.0, 0.82 -> 1.155
    """
    return math.exp(OCCUPANCY_ELASTICITY * (desired_occupancy - OCCUPANCY_PIVOT))


def volume_occupancy_adjustment(desired_occupancy: float) -> float:
    """Decreasing policy: discount to fill rooms when targeting higher occupancy."""
    return math.exp(-OCCUPANCY_ELASTICITY * (desired_occupancy - OCCUPANCY_PIVOT))


OCCUPANCY_POLICIES: Dict[str, OccupancyPolicy] = {
    'premium': premium_occupancy_adjustment,
    'volume': volume_occupancy_adjustment,
}


def get_occupancy_policy(name: str) -> OccupancyPolicy:
    """Look up an occupancy adjustment policy by name."""
    try:
        return OCCUPANCY_POLICIES[name]
    except KeyError:
        raise KeyError(
            f"Unknown occupancy policy '{name}'. Available: {sorted(OCCUPANCY_POLICIES)}"
        ) from None
