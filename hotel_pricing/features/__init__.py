"""Competitor weighting features."""
from .weights import (
    CompetitorWeight,
    compute_competitor_weights,
    occupancy_fit_score,
    proximity_score,
    reputation_score,
    weighted_average,
)
