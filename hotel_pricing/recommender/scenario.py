"""
Pricing scenarios: the operator inputs of a recommendation.

A scenario is a value object. The presentation layer builds a new one on
every parameter change and passes it to the engine; the engine keeps no
state between calls.
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hotel_pricing.config import DEMAND_INDEX_LOW, DEMAND_INDEX_PEAK, DEMAND_INDEX_STABLE


class InvalidScenario(ValueError):
    """The scenario's price band cannot be used for clamping."""


class DemandLevel(Enum):
    """Market demand regimes offered to the operator."""
    LOW = ("low", DEMAND_INDEX_LOW, "Low", "Quiet month, guests book well in advance")
    STABLE = ("stable", DEMAND_INDEX_STABLE, "Normal", "Regular demand, no major event")
    PEAK = ("peak", DEMAND_INDEX_PEAK, "High", "Event in town or strong pressure on supply")

    def __init__(self, key: str, index: float, label: str, description: str):
        self.key = key
        self.index = index
        self.label = label
        self.description = description

    @classmethod
    def from_key(cls, key: str) -> 'DemandLevel':
        for level in cls:
            if level.key == key:
                return level
        raise KeyError(f"Unknown demand level '{key}'. Available: {[lvl.key for lvl in cls]}")

    @classmethod
    def from_index(cls, index: float) -> Optional['DemandLevel']:
        """Level whose multiplier equals ``index``, or None for custom values."""
        for level in cls:
            if abs(level.index - index) < 1e-9:
                return level
        return None


@dataclass(frozen=True)
class PricingScenario:
    """
    Operator inputs for one recommendation.

    Attributes:
        desired_occupancy: Occupancy target (0-1)
        demand_index: Market demand multiplier (nominally 0.85-1.20)
        floor_price: Minimum acceptable price (> 0)
        ceiling_price: Maximum acceptable price (> floor_price)
        include_upscale: Whether upscale competitors enter the comparison set
    """
    desired_occupancy: float
    demand_index: float
    floor_price: float
    ceiling_price: float
    include_upscale: bool = False

    def validate(self) -> 'PricingScenario':
        """Raise InvalidScenario if the price band is ill-defined."""
        if self.floor_price <= 0 or self.ceiling_price <= 0:
            raise InvalidScenario(
                f"Price bounds must be positive (floor={self.floor_price}, ceiling={self.ceiling_price})"
            )
        if self.floor_price >= self.ceiling_price:
            raise InvalidScenario(
                f"Floor price {self.floor_price} must be below ceiling price {self.ceiling_price}"
            )
        return self

    def replace(self, **changes) -> 'PricingScenario':
        """Copy of this scenario with some fields changed."""
        return dataclasses.replace(self, **changes)

    @property
    def demand_level(self) -> Optional[DemandLevel]:
        return DemandLevel.from_index(self.demand_index)

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


DEFAULT_SCENARIO = PricingScenario(
    desired_occupancy=0.72,
    demand_index=DemandLevel.STABLE.index,
    floor_price=90.0,
    ceiling_price=160.0,
    include_upscale=False,
)
