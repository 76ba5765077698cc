"""
Review data model.

Represents a single review as delivered by the backend, already labelled
with an overall sentiment and four aspect sentiments.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from aiops_dashboard.utils.timestamps import parse_timestamp


class Sentiment(str, Enum):
    """
    Closed set of sentiment labels.

    Anything the backend sends that is not an exact match becomes
    UNRECOGNIZED, which never matches a specific filter bucket.
    """
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"
    NOT_MENTIONED = "NotMentioned"
    UNRECOGNIZED = "Unrecognized"

    @classmethod
    def parse(cls, value) -> "Sentiment":
        """Map a raw label to a member (exact, case-sensitive match)."""
        if not isinstance(value, str):
            return cls.UNRECOGNIZED
        try:
            return cls(value)
        except ValueError:
            return cls.UNRECOGNIZED


class AspectKey(str, Enum):
    """The four fixed feedback dimensions, in reporting order."""
    TIMELINESS = "timeliness"
    ORDER_COMPLETENESS = "order_completeness"
    DRIVER_BEHAVIOR = "driver_behavior"
    CLEANING_QUALITY = "cleaning_quality"

    @property
    def label(self) -> str:
        return ASPECT_LABELS[self]


ASPECT_LABELS = {
    AspectKey.TIMELINESS: "Timeliness",
    AspectKey.ORDER_COMPLETENESS: "Order completeness",
    AspectKey.DRIVER_BEHAVIOR: "Driver behavior",
    AspectKey.CLEANING_QUALITY: "Cleaning quality",
}

# Iteration order of the enum is the tie-break order for the worst aspect
ASPECT_ORDER = tuple(AspectKey)


def _text(value) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class ReviewRecord:
    """
    A review as received from ``GET /api/reviews/``.

    Raw string values are kept verbatim; use ``overall`` and
    ``aspect_sentiment()`` for the parsed enum view.
    """
    id: str
    source: str
    overall_sentiment: str
    original_complaint: str
    detected_language: str
    created_ts: Optional[str] = None
    timeliness: str = Sentiment.NOT_MENTIONED.value
    order_completeness: str = Sentiment.NOT_MENTIONED.value
    driver_behavior: str = Sentiment.NOT_MENTIONED.value
    cleaning_quality: str = Sentiment.NOT_MENTIONED.value

    @property
    def overall(self) -> Sentiment:
        return Sentiment.parse(self.overall_sentiment)

    @property
    def created_at(self) -> Optional[datetime]:
        """Parsed ``created_ts``, or None when missing/unparsable."""
        return parse_timestamp(self.created_ts)

    def aspect_value(self, key: AspectKey) -> str:
        return getattr(self, AspectKey(key).value)

    def aspect_sentiment(self, key: AspectKey) -> Sentiment:
        return Sentiment.parse(self.aspect_value(key))

    def aspect_mentioned(self, key: AspectKey) -> bool:
        """True when the aspect has a non-empty value other than NotMentioned."""
        raw = self.aspect_value(key)
        return bool(raw) and raw != Sentiment.NOT_MENTIONED.value

    @classmethod
    def from_dict(cls, data: dict) -> "ReviewRecord":
        """Create ReviewRecord from a backend JSON object."""
        created_ts = data.get("created_ts")
        return cls(
            id=_text(data.get("id")),
            source=_text(data.get("source")),
            overall_sentiment=_text(data.get("overall_sentiment")),
            original_complaint=_text(data.get("original_complaint")),
            detected_language=_text(data.get("detected_language")),
            created_ts=None if created_ts is None else str(created_ts),
            timeliness=_text(data.get("timeliness")),
            order_completeness=_text(data.get("order_completeness")),
            driver_behavior=_text(data.get("driver_behavior")),
            cleaning_quality=_text(data.get("cleaning_quality")),
        )

    def to_dict(self) -> dict:
        """Convert to the backend's JSON shape."""
        return {
            "id": self.id,
            "source": self.source,
            "overall_sentiment": self.overall_sentiment,
            "original_complaint": self.original_complaint,
            "detected_language": self.detected_language,
            "created_ts": self.created_ts,
            "timeliness": self.timeliness,
            "order_completeness": self.order_completeness,
            "driver_behavior": self.driver_behavior,
            "cleaning_quality": self.cleaning_quality,
        }
