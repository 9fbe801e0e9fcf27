"""
Composite competitor weights for the weighted market average.

Each competitor gets three normalized factors, all in (0, 1]:

- proximity:     p = 1 / (1 + distance_m / PROXIMITY_SCALE_M)
                 1.0 at distance 0, 0.5 at PROXIMITY_SCALE_M (250 m)
- reputation:    r = REPUTATION_FLOOR + (1 - REPUTATION_FLOOR) * review / 5
                 0.2 for a 0/5 review, 1.0 for 5/5
- occupancy fit: f = 1 - (1 - OCCUPANCY_FIT_FLOOR) * |occupancy - target|
                 1.0 for an exact match, 0.5 for a 100pp gap

combined as a weighted sum with WEIGHT_SHARES (0.40 / 0.35 / 0.25):

    w = 0.40 * p + 0.35 * r + 0.25 * f

The composite weight lies in (0.195, 1] for every valid hotel record, so
the weighted average is defined even for a single competitor.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from hotel_pricing.config import (
    MAX_REVIEW_SCORE,
    OCCUPANCY_FIT_FLOOR,
    PROXIMITY_SCALE_M,
    REPUTATION_FLOOR,
    WEIGHT_SHARES,
)
from hotel_pricing.data.catalog import Hotel


@dataclass(frozen=True)
class CompetitorWeight:
    """Weight breakdown for one reference hotel."""
    hotel_id: str
    proximity: float
    reputation: float
    occupancy_fit: float
    weight: float
    share: float  # weight / total weight of the reference set

    def to_dict(self) -> dict:
        return {
            'hotel_id': self.hotel_id,
            'proximity': self.proximity,
            'reputation': self.reputation,
            'occupancy_fit': self.occupancy_fit,
            'weight': self.weight,
            'share': self.share,
        }


def proximity_score(distance_meters, scale_m: float = PROXIMITY_SCALE_M) -> np.ndarray:
    """Decaying proximity factor, bounded at 1.0 for distance 0."""
    distance = np.asarray(distance_meters, dtype=float)
    return 1.0 / (1.0 + distance / scale_m)


def reputation_score(review_score, floor: float = REPUTATION_FLOOR) -> np.ndarray:
    """Review score mapped linearly onto [floor, 1]."""
    review = np.clip(np.asarray(review_score, dtype=float), 0.0, MAX_REVIEW_SCORE)
    return floor + (1.0 - floor) * review / MAX_REVIEW_SCORE


def occupancy_fit_score(
    occupancy_rate,
    desired_occupancy: float,
    floor: float = OCCUPANCY_FIT_FLOOR
) -> np.ndarray:
    """Linear penalty on the absolute occupancy gap, mapped onto [floor, 1]."""
    gap = np.abs(np.asarray(occupancy_rate, dtype=float) - desired_occupancy)
    return 1.0 - (1.0 - floor) * np.clip(gap, 0.0, 1.0)


def compute_competitor_weights(
    hotels: Sequence[Hotel],
    desired_occupancy: float,
    weight_shares: Optional[Dict[str, float]] = None,
    proximity_scale_m: float = PROXIMITY_SCALE_M,
    reputation_floor: float = REPUTATION_FLOOR,
    occupancy_fit_floor: float = OCCUPANCY_FIT_FLOOR,
) -> List[CompetitorWeight]:
    """
    Compute composite weights for a reference set.

    Args:
        hotels: Reference hotels (may be empty)
        desired_occupancy: Scenario occupancy target (0-1)
        weight_shares: Factor shares, defaults to WEIGHT_SHARES
        proximity_scale_m: Half-weight distance for the proximity factor
        reputation_floor: Reputation factor for a 0/5 review
        occupancy_fit_floor: Occupancy-fit factor for a 100pp gap

    Returns:
        One CompetitorWeight per hotel, in input order
    """
    if len(hotels) == 0:
        return []

    shares = weight_shares or WEIGHT_SHARES

    proximity = proximity_score([h.distance_meters for h in hotels], proximity_scale_m)
    reputation = reputation_score([h.review_score for h in hotels], reputation_floor)
    occupancy_fit = occupancy_fit_score(
        [h.occupancy_rate for h in hotels], desired_occupancy, occupancy_fit_floor
    )

    weights = (
        shares['proximity'] * proximity +
        shares['reputation'] * reputation +
        shares['occupancy_fit'] * occupancy_fit
    )
    total = weights.sum()

    return [
        CompetitorWeight(
            hotel_id=hotel.id,
            proximity=float(proximity[i]),
            reputation=float(reputation[i]),
            occupancy_fit=float(occupancy_fit[i]),
            weight=float(weights[i]),
            share=float(weights[i] / total),
        )
        for i, hotel in enumerate(hotels)
    ]


def weighted_average(values: Sequence[float], weights: Sequence[float]) -> float:
    """Σ(w·v) / Σ(w). Caller guarantees a non-empty set with positive weights."""
    return float(np.average(np.asarray(values, dtype=float), weights=np.asarray(weights, dtype=float)))
