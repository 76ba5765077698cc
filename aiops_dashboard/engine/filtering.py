"""
Review filtering.

A review passes when it matches the sentiment chip, the search box and
the date range. Output keeps the input order.
"""

import logging
from datetime import date
from typing import Iterable, List, Optional

from aiops_dashboard.models.filters import FilterCriteria, SentimentFilter
from aiops_dashboard.models.review import ReviewRecord
from aiops_dashboard.utils.timestamps import end_of_day, start_of_day

logger = logging.getLogger(__name__)


def matches_sentiment(review: ReviewRecord, selector: SentimentFilter) -> bool:
    return SentimentFilter(selector).matches(review.overall)


def search_haystack(review: ReviewRecord) -> str:
    """Lower-cased text the search box is matched against."""
    return " ".join(
        [review.original_complaint, review.source, review.detected_language]
    ).lower()


def matches_search(review: ReviewRecord, search: str) -> bool:
    term = (search or "").strip().lower()
    if not term:
        return True
    return term in search_haystack(review)


def matches_date_range(
    review: ReviewRecord,
    date_from: Optional[date],
    date_to: Optional[date]
) -> bool:
    """
    Check the review's timestamp against inclusive calendar-day bounds.

    With no bounds every review passes. With any bound set, a review
    without a parsable timestamp is excluded.
    """
    if date_from is None and date_to is None:
        return True

    created = review.created_at
    if created is None:
        return False

    if date_from is not None and created < start_of_day(date_from):
        return False
    if date_to is not None and created > end_of_day(date_to):
        return False
    return True


def review_matches(review: ReviewRecord, criteria: FilterCriteria) -> bool:
    return (
        matches_sentiment(review, criteria.sentiment)
        and matches_search(review, criteria.search)
        and matches_date_range(review, criteria.date_from, criteria.date_to)
    )


def filter_reviews(
    reviews: Iterable[ReviewRecord],
    criteria: FilterCriteria
) -> List[ReviewRecord]:
    """
    Apply the row-level filters.

    Args:
        reviews: Full in-memory review set
        criteria: Current filter selection

    Returns:
        Matching reviews in their original order
    """
    reviews = list(reviews)
    filtered = [r for r in reviews if review_matches(r, criteria)]

    logger.debug(
        f"Filtered {len(reviews)} reviews to {len(filtered)} "
        f"(sentiment={criteria.sentiment.value}, search={criteria.search!r}, "
        f"from={criteria.date_from}, to={criteria.date_to})"
    )
    return filtered
