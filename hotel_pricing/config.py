"""
Configuration for the competitor-weighted price recommender.

Contains the composite weighting parameters, the occupancy adjustment
constants, demand regimes and the thresholds used to classify insights.
"""

from dataclasses import dataclass, field
from typing import Dict


# =============================================================================
# COMPETITOR WEIGHTING
# =============================================================================

# Share of each normalized factor in the composite weight (sums to 1.0)
WEIGHT_SHARES = {
    'proximity': 0.40,       # 1 / (1 + distance / PROXIMITY_SCALE_M)
    'reputation': 0.35,      # Review score mapped onto [REPUTATION_FLOOR, 1]
    'occupancy_fit': 0.25,   # Closeness of competitor occupancy to the target
}

# Distance (m) at which the proximity factor drops to 0.5
PROXIMITY_SCALE_M = 250.0

# Reputation factor for a 0/5 review score
REPUTATION_FLOOR = 0.2
MAX_REVIEW_SCORE = 5.0

# Occupancy-fit factor for a 100pp occupancy gap
OCCUPANCY_FIT_FLOOR = 0.5


# =============================================================================
# OCCUPANCY ADJUSTMENT
# =============================================================================

# Target occupancy at which the adjustment is neutral (1.0)
OCCUPANCY_PIVOT = 0.70

# Log-price change per unit of target occupancy.
# Keeps the raw price monotonic in target occupancy as long as the
# highest reference rate is below ~2.8x the lowest one.
OCCUPANCY_ELASTICITY = 1.2

DEFAULT_OCCUPANCY_POLICY = 'premium'


# =============================================================================
# DEMAND REGIMES
# =============================================================================

DEMAND_INDEX_LOW = 0.90
DEMAND_INDEX_STABLE = 1.00
DEMAND_INDEX_PEAK = 1.12

# Nominal operating range for the demand multiplier
DEMAND_INDEX_RANGE = (0.85, 1.20)


# =============================================================================
# INSIGHT THRESHOLDS
# =============================================================================

MARKET_GAP_THRESHOLD = 0.02       # ±2% vs weighted market = "in line"
CLAMP_SEVERITY_THRESHOLD = 0.05   # Clamp moving price >5% of raw = significant
OCCUPANCY_GAP_THRESHOLD = 0.01    # ±1pp vs current occupancy = "on target"
RATE_GAP_THRESHOLD = 0.02         # ±2% vs current ADR = "hold"
DEMAND_TOLERANCE = 0.005          # |index - 1| below this = stable


@dataclass
class PricingConfig:
    """Configuration for the recommendation engine."""
    weight_shares: Dict[str, float] = field(default_factory=lambda: dict(WEIGHT_SHARES))
    proximity_scale_m: float = PROXIMITY_SCALE_M
    reputation_floor: float = REPUTATION_FLOOR
    occupancy_fit_floor: float = OCCUPANCY_FIT_FLOOR
    occupancy_policy: str = DEFAULT_OCCUPANCY_POLICY
    market_gap_threshold: float = MARKET_GAP_THRESHOLD
    clamp_severity_threshold: float = CLAMP_SEVERITY_THRESHOLD
    occupancy_gap_threshold: float = OCCUPANCY_GAP_THRESHOLD
    rate_gap_threshold: float = RATE_GAP_THRESHOLD

    def __post_init__(self):
        missing = set(WEIGHT_SHARES) - set(self.weight_shares)
        if missing:
            raise ValueError(f"weight_shares missing factors: {sorted(missing)}")
        if any(share <= 0 for share in self.weight_shares.values()):
            raise ValueError("weight_shares must all be positive")
        if self.proximity_scale_m <= 0:
            raise ValueError("proximity_scale_m must be positive")
        if not 0 < self.reputation_floor <= 1 or not 0 < self.occupancy_fit_floor <= 1:
            raise ValueError("factor floors must lie in (0, 1]")


def get_default_config() -> PricingConfig:
    """Return a fresh default configuration."""
    return PricingConfig()
