"""
Hotel Price Recommender - Source Code.

Modules:
- data: Competitor catalog loading and validation
- features: Competitor weighting
- recommender: Competitor selection, price recommendation and insights
"""
