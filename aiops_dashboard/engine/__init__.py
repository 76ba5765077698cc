"""
Filter engine for the dashboard.

Pure, synchronous functions over the in-memory review set:
- Filtering: sentiment, free-text and date-range predicates
- Aggregation: counts, shares, aspect breakdowns, KPI tiles
"""

from aiops_dashboard.engine.aggregation import FilterEngine

__all__ = ["FilterEngine"]
