#!/usr/bin/env python
"""
Generate a nightly price recommendation.

Usage:
    python entrypoint/recommend.py                          # Default scenario
    python entrypoint/recommend.py --occupancy 0.78 --demand peak
    python entrypoint/recommend.py --include-upscale --projection --breakdown
    python entrypoint/recommend.py --catalog hotels.csv --json
    python entrypoint/recommend.py --plot outputs/figures
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import argparse
import json
import logging

from hotel_pricing.config import PricingConfig
from hotel_pricing.data.catalog import CatalogError, load_catalog
from hotel_pricing.recommender.adjustments import OCCUPANCY_POLICIES
from hotel_pricing.recommender.engine import PriceRecommender
from hotel_pricing.recommender.projection import category_breakdown, project_occupancy
from hotel_pricing.recommender.scenario import (
    DEFAULT_SCENARIO,
    DemandLevel,
    InvalidScenario,
    PricingScenario,
)

logger = logging.getLogger(__name__)

IMPACT_MARKERS = {'positive': '▲', 'negative': '▼', 'neutral': '•'}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Generate a competitor-weighted price recommendation')
    parser.add_argument('--catalog', type=Path, help='CSV catalog (defaults to the bundled Toulouse catalog)')
    parser.add_argument('--occupancy', type=float, default=DEFAULT_SCENARIO.desired_occupancy,
                        help='Target occupancy (0-1)')
    demand = parser.add_mutually_exclusive_group()
    demand.add_argument('--demand', choices=[level.key for level in DemandLevel],
                        help='Demand regime')
    demand.add_argument('--demand-index', type=float, help='Custom demand multiplier')
    parser.add_argument('--floor', type=float, default=DEFAULT_SCENARIO.floor_price, help='Floor price (€)')
    parser.add_argument('--ceiling', type=float, default=DEFAULT_SCENARIO.ceiling_price, help='Ceiling price (€)')
    parser.add_argument('--include-upscale', action='store_true', help='Compare against upscale hotels too')
    parser.add_argument('--policy', choices=sorted(OCCUPANCY_POLICIES), default='premium',
                        help='Occupancy adjustment policy')
    parser.add_argument('--projection', action='store_true', help='Show price projection by occupancy')
    parser.add_argument('--breakdown', action='store_true', help='Show rate mix by category')
    parser.add_argument('--plot', type=Path, help='Directory to save charts to')
    parser.add_argument('--json', action='store_true', help='Print the recommendation as JSON')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def scenario_from_args(args: argparse.Namespace) -> PricingScenario:
    if args.demand_index is not None:
        demand_index = args.demand_index
    elif args.demand:
        demand_index = DemandLevel.from_key(args.demand).index
    else:
        demand_index = DEFAULT_SCENARIO.demand_index

    return PricingScenario(
        desired_occupancy=args.occupancy,
        demand_index=demand_index,
        floor_price=args.floor,
        ceiling_price=args.ceiling,
        include_upscale=args.include_upscale,
    )


def print_report(recommender: PriceRecommender, rec) -> None:
    target = recommender.target
    scenario = rec.scenario
    level = scenario.demand_level

    print("\n" + "=" * 70)
    print(f"RECOMMENDATION: {target.name}")
    print("=" * 70)

    print(f"\nScenario:")
    print(f"  Target occupancy: {scenario.desired_occupancy:.0%} (current {target.occupancy_rate:.0%})")
    print(f"  Demand: {level.label if level else 'Custom'} (×{scenario.demand_index:.2f})")
    print(f"  Price band: €{scenario.floor_price:.0f} - €{scenario.ceiling_price:.0f}")
    print(f"  Upscale competitors: {'included' if scenario.include_upscale else 'excluded'}")

    print(f"\nPrice:")
    print(f"  Recommended: €{rec.recommended_price:.2f}")
    print(f"  Market index: €{rec.weighted_market_average:.2f}"
          f"{' (own rate fallback)' if rec.used_fallback else ''}")
    print(f"  Current rate: €{target.average_daily_rate:.2f} "
          f"(last observed {target.last_updated.isoformat() if target.last_updated else 'n/a'})")
    print(f"  Change: €{rec.recommended_price - target.average_daily_rate:+.2f}")

    print(f"\nInsights:")
    for insight in rec.insights:
        print(f"  {IMPACT_MARKERS[insight.impact.value]} {insight.label}: {insight.detail}")

    print(f"\nDirect competition ({len(rec.reference_hotels)}):")
    for hotel, weight in rec.ranked_competitors():
        print(f"  {hotel.name:<36} €{hotel.average_daily_rate:>6.0f}  {hotel.distance_meters:>5.0f} m  "
              f"{hotel.review_score:.1f}/5  {hotel.occupancy_rate:.0%}  weight {weight.share:.0%}")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='%(message)s')

    try:
        if args.catalog:
            target, competitors = load_catalog(args.catalog)
        else:
            target, competitors = None, None
        recommender = PriceRecommender(target, competitors, PricingConfig(occupancy_policy=args.policy))

        scenario = scenario_from_args(args)
        rec = recommender.recommend(scenario)
    except (InvalidScenario, CatalogError) as e:
        logger.error(f"Error: {e}")
        return 2

    if args.json:
        print(json.dumps(rec.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_report(recommender, rec)

    projection = None
    if args.projection or args.plot:
        projection = project_occupancy(recommender.target, recommender.competitors, scenario,
                                       config=recommender.config)
    breakdown = None
    if args.breakdown or args.plot:
        breakdown = category_breakdown(rec.reference_hotels)

    if args.projection:
        print("\nProjection by occupancy target:")
        print(projection.round(2).to_string(index=False))

    if args.breakdown:
        print("\nRate mix by segment:")
        print(breakdown.round(2).to_string(index=False))

    if args.plot:
        from hotel_pricing.recommender.visualize import plot_category_mix, plot_occupancy_projection

        plot_occupancy_projection(projection, rec.weighted_market_average,
                                  args.plot / 'occupancy_projection.png')
        if len(breakdown) > 0:
            plot_category_mix(breakdown, args.plot / 'category_mix.png')

    return 0


if __name__ == "__main__":
    sys.exit(main())
