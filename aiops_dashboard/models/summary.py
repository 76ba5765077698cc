"""
Aggregate data models.

Derived, read-only views over a filtered review set: sentiment counts,
per-aspect breakdowns, KPI tiles and the bundled filter result.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from aiops_dashboard.models.filters import FilterCriteria
from aiops_dashboard.models.review import AspectKey, ReviewRecord

PLACEHOLDER = "—"
OVERALL_CHART_TITLE = "Sentiment breakdown"


@dataclass(frozen=True)
class SentimentCounts:
    """Positive/neutral/negative triple fed to the chart."""
    positive: int = 0
    neutral: int = 0
    negative: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative

    def as_pairs(self) -> List[Tuple[str, int]]:
        return [
            ("Positive", self.positive),
            ("Neutral", self.neutral),
            ("Negative", self.negative),
        ]


@dataclass(frozen=True)
class AspectStats:
    """Mention counts for one aspect within the filtered set."""
    key: AspectKey
    total_mentioned: int = 0
    positive: int = 0
    neutral: int = 0
    negative: int = 0

    @property
    def label(self) -> str:
        return self.key.label

    @property
    def counts(self) -> SentimentCounts:
        return SentimentCounts(self.positive, self.neutral, self.negative)

    def to_dict(self) -> dict:
        return {
            "key": self.key.value,
            "label": self.label,
            "total_mentioned": self.total_mentioned,
            "positive": self.positive,
            "neutral": self.neutral,
            "negative": self.negative,
        }


@dataclass(frozen=True)
class ReviewSummary:
    """
    Aggregates over a filtered review set.

    Share-style metrics are None when the set is empty.
    """
    total: int
    positives: int
    neutrals: int
    negatives: int
    aspects: Tuple[AspectStats, ...]
    negative_share: Optional[int] = None
    net_sentiment: Optional[int] = None
    worst_aspect: Optional[AspectStats] = None

    @property
    def overall_counts(self) -> SentimentCounts:
        return SentimentCounts(self.positives, self.neutrals, self.negatives)

    def aspect(self, key: AspectKey) -> AspectStats:
        for stats in self.aspects:
            if stats.key is key:
                return stats
        raise KeyError(key)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "positives": self.positives,
            "neutrals": self.neutrals,
            "negatives": self.negatives,
            "negative_share": self.negative_share,
            "net_sentiment": self.net_sentiment,
            "worst_aspect": self.worst_aspect.key.value if self.worst_aspect else None,
            "aspects": [a.to_dict() for a in self.aspects],
        }


@dataclass(frozen=True)
class KpiCard:
    """One KPI tile in the overview row."""
    id: str
    label: str
    value: str
    helper: str = ""


@dataclass(frozen=True)
class FilterResult:
    """Everything the dashboard renders for one filter selection."""
    reviews: Tuple[ReviewRecord, ...]
    summary: ReviewSummary
    criteria: FilterCriteria
    chart_counts: SentimentCounts
    chart_title: str
    kpis: Tuple[KpiCard, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.reviews
