"""
Shared pytest fixtures for the price recommender tests.
"""

from datetime import date

import pytest

from hotel_pricing.data.catalog import Hotel, default_competitors, default_target_hotel
from hotel_pricing.recommender.scenario import PricingScenario


def make_hotel(hotel_id: str, **overrides) -> Hotel:
    """Build a valid competitor with sensible defaults."""
    fields = {
        'id': hotel_id,
        'name': f"Hotel {hotel_id}",
        'address': f"{hotel_id} rue de Test, 31000 Toulouse",
        'category': 'midscale',
        'star_rating': 3.0,
        'average_daily_rate': 100.0,
        'occupancy_rate': 0.70,
        'review_score': 4.0,
        'distance_meters': 300.0,
    }
    fields.update(overrides)
    return Hotel(**fields)


@pytest.fixture
def target_hotel():
    """Subject hotel at €112."""
    return Hotel(
        id="target",
        name="Target Hotel",
        address="12 rue Croix-Baragnon, 31000 Toulouse",
        category="midscale",
        star_rating=3.0,
        average_daily_rate=112.0,
        occupancy_rate=0.68,
        review_score=4.3,
        distance_meters=0.0,
        last_updated=date(2024, 10, 14),
    )


@pytest.fixture
def two_competitors():
    """
    Two competitors with hand-computable weights at desired occupancy 0.70.

    near:  250 m, 5.0/5, occ 0.70 → p=0.5,  r=1.0, f=1.0 → w=0.80
    far:   750 m, 2.5/5, occ 0.30 → p=0.25, r=0.6, f=0.8 → w=0.51
    """
    return [
        make_hotel('near', average_daily_rate=120.0, distance_meters=250.0,
                   review_score=5.0, occupancy_rate=0.70),
        make_hotel('far', average_daily_rate=95.0, distance_meters=750.0,
                   review_score=2.5, occupancy_rate=0.30),
    ]


@pytest.fixture
def mixed_catalog():
    """Catalog mixing all categories, including an unknown one."""
    return [
        make_hotel('eco', category='economy', average_daily_rate=82.0, distance_meters=400.0),
        make_hotel('lux-1', category='upscale', average_daily_rate=175.0, distance_meters=600.0),
        make_hotel('mid', category='midscale', average_daily_rate=108.0, distance_meters=200.0),
        make_hotel('lux-2', category='upscale', average_daily_rate=160.0, distance_meters=150.0),
        make_hotel('bout', category='boutique', average_daily_rate=138.0, distance_meters=500.0),
        make_hotel('hostel', category='hostel', average_daily_rate=60.0, distance_meters=900.0),
    ]


@pytest.fixture
def scenario():
    """Neutral scenario: pivot occupancy, stable demand, wide band."""
    return PricingScenario(
        desired_occupancy=0.70,
        demand_index=1.0,
        floor_price=80.0,
        ceiling_price=150.0,
        include_upscale=False,
    )


@pytest.fixture
def bundled_target():
    return default_target_hotel()


@pytest.fixture
def bundled_competitors():
    return default_competitors()


@pytest.fixture
def hotel_factory():
    """Factory for valid competitors, see make_hotel."""
    return make_hotel
