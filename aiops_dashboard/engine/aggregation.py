"""
Sentiment Aggregator and Filter Engine.

Derives counts, shares, per-aspect breakdowns and KPI tiles from a
filtered review set.
"""

import logging
import math
from collections import Counter
from typing import Iterable, List, Optional, Sequence

from aiops_dashboard.engine.filtering import filter_reviews
from aiops_dashboard.models.filters import FilterCriteria
from aiops_dashboard.models.review import ASPECT_ORDER, AspectKey, ReviewRecord, Sentiment
from aiops_dashboard.models.summary import (
    OVERALL_CHART_TITLE,
    PLACEHOLDER,
    AspectStats,
    FilterResult,
    KpiCard,
    ReviewSummary,
    SentimentCounts,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round .5 towards positive infinity (12.5 -> 13, -33.5 -> -33)."""
    return int(math.floor(value + 0.5))


def percentage(part: int, total: int) -> Optional[int]:
    if total == 0:
        return None
    return round_half_up(100 * part / total)


def aspect_stats(reviews: Sequence[ReviewRecord], key: AspectKey) -> AspectStats:
    """
    Count mentions of one aspect.

    Reviews where the aspect is empty or NotMentioned are skipped; an
    unrecognized label counts as a mention but not as positive, neutral
    or negative.
    """
    mentioned = [r.aspect_sentiment(key) for r in reviews if r.aspect_mentioned(key)]
    counts = Counter(mentioned)
    return AspectStats(
        key=key,
        total_mentioned=len(mentioned),
        positive=counts[Sentiment.POSITIVE],
        neutral=counts[Sentiment.NEUTRAL],
        negative=counts[Sentiment.NEGATIVE],
    )


def pick_worst_aspect(aspects: Iterable[AspectStats]) -> Optional[AspectStats]:
    """
    Aspect with the strictly highest negative count.

    Ties keep the earlier aspect; returns None if no aspect has a
    negative mention.
    """
    worst = None
    for stats in aspects:
        if stats.negative == 0:
            continue
        if worst is None or stats.negative > worst.negative:
            worst = stats
    return worst


def summarize(reviews: Sequence[ReviewRecord]) -> ReviewSummary:
    """
    Aggregate a filtered review set.

    Args:
        reviews: Reviews that passed the filters

    Returns:
        ReviewSummary with counts, shares and aspect breakdowns
    """
    overall = Counter(r.overall for r in reviews)
    total = len(reviews)
    positives = overall[Sentiment.POSITIVE]
    neutrals = overall[Sentiment.NEUTRAL]
    negatives = overall[Sentiment.NEGATIVE]

    aspects = tuple(aspect_stats(reviews, key) for key in ASPECT_ORDER)

    return ReviewSummary(
        total=total,
        positives=positives,
        neutrals=neutrals,
        negatives=negatives,
        aspects=aspects,
        negative_share=percentage(negatives, total),
        net_sentiment=percentage(positives - negatives, total),
        worst_aspect=pick_worst_aspect(aspects),
    )


def chart_counts(summary: ReviewSummary, focused: Optional[AspectKey]) -> SentimentCounts:
    if focused is None:
        return summary.overall_counts
    return summary.aspect(focused).counts


def chart_title(focused: Optional[AspectKey]) -> str:
    if focused is None:
        return OVERALL_CHART_TITLE
    return f"{focused.label} sentiment"


def build_kpis(summary: ReviewSummary, criteria: FilterCriteria) -> List[KpiCard]:
    """Build the four overview tiles."""
    worst = summary.worst_aspect

    return [
        KpiCard(
            id="total",
            label="Total reviews",
            value=str(summary.total),
            helper="Within current filters" if criteria.is_filtered else "All reviews",
        ),
        KpiCard(
            id="negativeShare",
            label="Negative share",
            value=f"{summary.negative_share}%" if summary.negative_share is not None else PLACEHOLDER,
            helper="Share of reviews that are negative" if summary.total > 0 else "No data",
        ),
        KpiCard(
            id="netSentiment",
            label="Net sentiment",
            value=str(summary.net_sentiment) if summary.net_sentiment is not None else PLACEHOLDER,
            helper="Scale -100 (all negative) to +100 (all positive)",
        ),
        KpiCard(
            id="topPainPoint",
            label="Top pain point",
            value=worst.label if worst else "None",
            helper=f"{worst.negative} negative mentions" if worst else "No aspect stands out negatively",
        ),
    ]


class FilterEngine:
    """
    Applies filter criteria to the loaded reviews and derives everything
    the dashboard renders from the result.

    Stateless; safe to share between sessions.
    """

    def apply(
        self,
        reviews: Iterable[ReviewRecord],
        criteria: Optional[FilterCriteria] = None
    ) -> FilterResult:
        """
        Filter and aggregate.

        Args:
            reviews: Full in-memory review set
            criteria: Current filter selection (defaults to no filters)

        Returns:
            FilterResult with filtered reviews, summary, chart data and KPIs
        """
        criteria = criteria or FilterCriteria()
        filtered = filter_reviews(reviews, criteria)
        summary = summarize(filtered)

        return FilterResult(
            reviews=tuple(filtered),
            summary=summary,
            criteria=criteria,
            chart_counts=chart_counts(summary, criteria.focused_aspect),
            chart_title=chart_title(criteria.focused_aspect),
            kpis=tuple(build_kpis(summary, criteria)),
        )
