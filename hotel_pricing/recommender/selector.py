"""
Competitor selection.

Filters the competitor catalog down to the reference set for a scenario:
every non-upscale hotel, plus upscale hotels when the scenario includes
them. Catalog order is preserved.
"""

import logging
from typing import List, Sequence

from hotel_pricing.data.catalog import Hotel
from hotel_pricing.recommender.scenario import PricingScenario

logger = logging.getLogger(__name__)


def select_competitors(catalog: Sequence[Hotel], scenario: PricingScenario) -> List[Hotel]:
    """
    Select the reference set.

    Args:
        catalog: Competitor catalog (excludes the subject hotel)
        scenario: Scenario carrying the include_upscale toggle

    Returns:
        Reference hotels in catalog order (may be empty)
    """
    if scenario.include_upscale:
        selected = list(catalog)
    else:
        selected = [hotel for hotel in catalog if not hotel.is_upscale]

    excluded = len(catalog) - len(selected)
    if excluded:
        logger.debug(f"Excluded {excluded} upscale competitor(s) from the reference set")

    return selected
