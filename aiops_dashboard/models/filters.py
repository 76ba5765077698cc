"""
Filter criteria model.

The operator's current selection in the filter panel plus the focused
aspect tile.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from aiops_dashboard.models.review import AspectKey, Sentiment


class SentimentFilter(str, Enum):
    """Sentiment chips in the filter panel."""
    ALL = "All"
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"

    def matches(self, sentiment: Sentiment) -> bool:
        if self is SentimentFilter.ALL:
            return True
        return sentiment.value == self.value


@dataclass(frozen=True)
class FilterCriteria:
    """
    Filter selection applied to the loaded reviews.

    ``focused_aspect`` only changes which counts are charted; it never
    changes which reviews are included. None means the overall breakdown.
    """
    sentiment: SentimentFilter = SentimentFilter.ALL
    search: str = ""
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    focused_aspect: Optional[AspectKey] = None

    @property
    def search_term(self) -> str:
        return self.search.strip().lower()

    @property
    def has_date_range(self) -> bool:
        return self.date_from is not None or self.date_to is not None

    @property
    def is_filtered(self) -> bool:
        """True when any row-level filter is active."""
        return (
            self.sentiment is not SentimentFilter.ALL
            or bool(self.search.strip())
            or self.has_date_range
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "sentiment": self.sentiment.value,
            "search": self.search,
            "date_from": self.date_from.isoformat() if self.date_from else None,
            "date_to": self.date_to.isoformat() if self.date_to else None,
            "focused_aspect": self.focused_aspect.value if self.focused_aspect else None,
        }
