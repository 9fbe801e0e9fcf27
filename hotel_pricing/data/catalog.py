"""
Hotel catalog: the subject hotel and its competitor set.

The bundled catalog covers Hôtel Croix Baragnon (Toulouse city centre) and
the competitors within roughly 1 km of it. Catalogs can also be loaded from
CSV, one row per hotel:

    id,name,address,category,star_rating,average_daily_rate,
    occupancy_rate,review_score,distance_meters[,last_updated][,is_target]

Hotels are frozen dataclasses and catalogs are returned as fresh lists, so
nothing downstream can mutate the reference data.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import pandas as pd


class CatalogError(ValueError):
    """Catalog data violates the hotel invariants or is malformed."""


class HotelCategory(str, Enum):
    """Known hotel categories. Unknown categories pass through as plain strings."""
    ECONOMY = "economy"
    MIDSCALE = "midscale"
    UPSCALE = "upscale"
    BOUTIQUE = "boutique"


CATEGORY_LABELS = {
    HotelCategory.ECONOMY.value: "Economy",
    HotelCategory.MIDSCALE.value: "Midscale",
    HotelCategory.UPSCALE.value: "Upscale",
    HotelCategory.BOUTIQUE.value: "Boutique",
}

REQUIRED_COLUMNS = [
    'id', 'name', 'address', 'category', 'star_rating',
    'average_daily_rate', 'occupancy_rate', 'review_score', 'distance_meters',
]


def category_label(category: str) -> str:
    """Human label for a category; unknown categories are returned as-is."""
    return CATEGORY_LABELS.get(category, category)


@dataclass(frozen=True)
class Hotel:
    """
    A hotel in the comparison catalog (competitor or subject hotel).

    Attributes:
        id: Unique identifier
        name: Display name
        address: Street address
        category: economy / midscale / upscale / boutique (open set)
        star_rating: Official rating, 1.0-5.0
        average_daily_rate: ADR in EUR (> 0)
        occupancy_rate: Rooms sold / rooms available (0-1)
        review_score: Guest review average (0-5)
        distance_meters: Distance from the subject hotel (0 for itself)
        last_updated: Date of the last rate observation (subject hotel only)
    """
    id: str
    name: str
    address: str
    category: str
    star_rating: float
    average_daily_rate: float
    occupancy_rate: float
    review_score: float
    distance_meters: float
    last_updated: Optional[date] = None

    @property
    def is_upscale(self) -> bool:
        return self.category == HotelCategory.UPSCALE.value

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'id': self.id,
            'name': self.name,
            'address': self.address,
            'category': self.category,
            'star_rating': self.star_rating,
            'average_daily_rate': self.average_daily_rate,
            'occupancy_rate': self.occupancy_rate,
            'review_score': self.review_score,
            'distance_meters': self.distance_meters,
            'last_updated': self.last_updated.isoformat() if self.last_updated else None,
        }


# =============================================================================
# BUNDLED CATALOG
# =============================================================================

TARGET_HOTEL = Hotel(
    id="croix-baragnon",
    name="Hôtel Croix Baragnon",
    address="12 rue Croix-Baragnon, 31000 Toulouse",
    category="midscale",
    star_rating=3.0,
    average_daily_rate=112.0,
    occupancy_rate=0.68,
    review_score=4.3,
    distance_meters=0.0,
    last_updated=date(2024, 10, 14),
)

COMPETITORS: Tuple[Hotel, ...] = (
    Hotel("saint-etienne", "Hôtel Saint-Étienne Centre", "4 place Saint-Étienne, 31000 Toulouse",
          "midscale", 3.0, 118.0, 0.74, 4.2, 180.0),
    Hotel("clos-des-carmes", "Le Clos des Carmes", "21 rue des Filatiers, 31000 Toulouse",
          "boutique", 3.5, 134.0, 0.71, 4.6, 420.0),
    Hotel("capitole-eco", "Hôtel Capitole Éco", "9 rue Lafayette, 31000 Toulouse",
          "economy", 2.0, 84.0, 0.82, 3.8, 650.0),
    Hotel("opera-toulousain", "Grand Hôtel de l'Opéra Toulousain", "1 place du Capitole, 31000 Toulouse",
          "upscale", 4.0, 168.0, 0.66, 4.5, 700.0),
    Hotel("residence-ozenne", "Résidence Ozenne", "15 rue Ozenne, 31000 Toulouse",
          "midscale", 3.0, 104.0, 0.69, 4.0, 350.0),
    Hotel("pont-neuf", "Hôtel Pont Neuf", "3 rue de Metz, 31000 Toulouse",
          "midscale", 3.0, 109.0, 0.63, 3.9, 820.0),
    Hotel("maison-garonne", "Maison Garonne", "28 quai de la Daurade, 31000 Toulouse",
          "boutique", 4.0, 142.0, 0.77, 4.7, 900.0),
    Hotel("esquirol", "Hôtel Esquirol", "6 place Esquirol, 31000 Toulouse",
          "economy", 2.0, 89.0, 0.79, 3.6, 510.0),
    Hotel("palais-dupuy", "Palais Dupuy", "2 allée François Verdier, 31000 Toulouse",
          "upscale", 4.0, 176.0, 0.61, 4.4, 760.0),
)


def default_target_hotel() -> Hotel:
    """The bundled subject hotel."""
    return TARGET_HOTEL


def default_competitors() -> List[Hotel]:
    """The bundled competitor catalog (excludes the subject hotel)."""
    return list(COMPETITORS)


# =============================================================================
# CSV LOADING
# =============================================================================

def _parse_date(value) -> Optional[date]:
    if value is None or pd.isna(value) or value == '':
        return None
    return pd.to_datetime(value).date()


def _row_to_hotel(row: pd.Series) -> Hotel:
    return Hotel(
        id=str(row['id']),
        name=str(row['name']),
        address=str(row['address']),
        category=str(row['category']).strip().lower(),
        star_rating=float(row['star_rating']),
        average_daily_rate=float(row['average_daily_rate']),
        occupancy_rate=float(row['occupancy_rate']),
        review_score=float(row['review_score']),
        distance_meters=float(row['distance_meters']),
        last_updated=_parse_date(row.get('last_updated')),
    )


def load_catalog(path: Union[str, Path]) -> Tuple[Hotel, List[Hotel]]:
    """
    Load a catalog from CSV.

    The subject hotel is the row flagged ``is_target`` when that column is
    present, otherwise the single row with ``distance_meters == 0``.

    Args:
        path: CSV file with one row per hotel

    Returns:
        Tuple of (target hotel, competitor list in file order)
    """
    df = pd.read_csv(path, dtype={'id': str})

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise CatalogError(f"Catalog {path} is missing columns: {missing}")

    if 'is_target' in df.columns:
        target_mask = df['is_target'].astype(str).str.strip().str.lower().isin(['true', '1', 'yes'])
    else:
        target_mask = df['distance_meters'].astype(float) == 0

    n_targets = int(target_mask.sum())
    if n_targets != 1:
        raise CatalogError(f"Catalog {path} must contain exactly one target hotel, found {n_targets}")

    target = _row_to_hotel(df[target_mask].iloc[0])
    competitors = [_row_to_hotel(row) for _, row in df[~target_mask].iterrows()]

    return target, competitors


def catalog_frame(hotels: Sequence[Hotel]) -> pd.DataFrame:
    """Tabular view of a list of hotels."""
    return pd.DataFrame([h.to_dict() for h in hotels], columns=REQUIRED_COLUMNS + ['last_updated'])
