"""
Catalog validation.

Checks the hotel invariants before a catalog is handed to the engine:
- average_daily_rate > 0
- 0 <= occupancy_rate <= 1
- 0 <= review_score <= 5
- distance_meters >= 0
- 1 <= star_rating <= 5

The engine assumes validated input, so this runs once at the catalog
boundary (CLI, loaders), not on every recommendation.
"""

import logging
import math
from typing import Dict, List, Sequence

from hotel_pricing.data.catalog import CatalogError, Hotel

logger = logging.getLogger(__name__)


def _is_finite(value: float) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)


def validate_hotel(hotel: Hotel) -> List[str]:
    """
    Return the list of invariant violations for a hotel (empty if valid).
    """
    problems = []

    if not hotel.id:
        problems.append("empty id")
    if not _is_finite(hotel.average_daily_rate) or hotel.average_daily_rate <= 0:
        problems.append(f"average_daily_rate must be > 0 (got {hotel.average_daily_rate})")
    if not _is_finite(hotel.occupancy_rate) or not 0 <= hotel.occupancy_rate <= 1:
        problems.append(f"occupancy_rate must be in [0, 1] (got {hotel.occupancy_rate})")
    if not _is_finite(hotel.review_score) or not 0 <= hotel.review_score <= 5:
        problems.append(f"review_score must be in [0, 5] (got {hotel.review_score})")
    if not _is_finite(hotel.distance_meters) or hotel.distance_meters < 0:
        problems.append(f"distance_meters must be >= 0 (got {hotel.distance_meters})")
    if not _is_finite(hotel.star_rating) or not 1 <= hotel.star_rating <= 5:
        problems.append(f"star_rating must be in [1, 5] (got {hotel.star_rating})")

    return problems


def validate_catalog(target: Hotel, competitors: Sequence[Hotel]) -> Dict[str, int]:
    """
    Validate a subject hotel and its competitor catalog.

    Every violation is logged; a CatalogError is raised afterwards if any
    were found, so the log lists all problems rather than just the first.

    Args:
        target: Subject hotel
        competitors: Competitor catalog (must not contain the target)

    Returns:
        Dict of catalog statistics
    """
    n_errors = 0

    for hotel in [target, *competitors]:
        for problem in validate_hotel(hotel):
            logger.error(f"  ✗ {hotel.id}: {problem}")
            n_errors += 1

    seen = set()
    for hotel in competitors:
        if hotel.id in seen:
            logger.error(f"  ✗ duplicate competitor id: {hotel.id}")
            n_errors += 1
        seen.add(hotel.id)

    if target.id in seen:
        logger.error(f"  ✗ target hotel {target.id} is listed among its competitors")
        n_errors += 1

    if n_errors:
        raise CatalogError(f"Catalog failed validation with {n_errors} error(s)")

    stats = {
        'n_competitors': len(competitors),
        'n_upscale': sum(1 for h in competitors if h.is_upscale),
        'n_categories': len({h.category for h in competitors}),
    }
    logger.debug(
        f"  ✓ catalog valid: {stats['n_competitors']} competitors "
        f"({stats['n_upscale']} upscale, {stats['n_categories']} categories)"
    )
    return stats
