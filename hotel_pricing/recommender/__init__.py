"""Price recommendation engine.

Main entry point: engine.recommend
"""
from .engine import PriceRecommendation, PriceRecommender, build_price_recommendation, recommend
from .insights import Impact, Insight
from .scenario import DEFAULT_SCENARIO, DemandLevel, InvalidScenario, PricingScenario
from .selector import select_competitors

__all__ = [
    'recommend',
    'build_price_recommendation',
    'PriceRecommender',
    'PriceRecommendation',
    'PricingScenario',
    'DemandLevel',
    'DEFAULT_SCENARIO',
    'InvalidScenario',
    'Insight',
    'Impact',
    'select_competitors',
]
