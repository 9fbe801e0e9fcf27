"""Catalog loading and validation utilities."""
from .catalog import (
    CatalogError,
    Hotel,
    HotelCategory,
    category_label,
    catalog_frame,
    default_competitors,
    default_target_hotel,
    load_catalog,
)
from .validator import validate_catalog, validate_hotel
