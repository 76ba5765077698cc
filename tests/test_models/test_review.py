"""
Unit tests for the review and filter models.
"""

from datetime import date, datetime

from aiops_dashboard.models.filters import FilterCriteria, SentimentFilter
from aiops_dashboard.models.review import ASPECT_ORDER, AspectKey, ReviewRecord, Sentiment


def test_sentiment_parse_exact_match():
    """Test that labels match exactly and case-sensitively."""
    assert Sentiment.parse("Positive") is Sentiment.POSITIVE
    assert Sentiment.parse("NotMentioned") is Sentiment.NOT_MENTIONED
    assert Sentiment.parse("positive") is Sentiment.UNRECOGNIZED
    assert Sentiment.parse("Mixed") is Sentiment.UNRECOGNIZED
    assert Sentiment.parse(None) is Sentiment.UNRECOGNIZED
    assert Sentiment.parse(3) is Sentiment.UNRECOGNIZED


def test_aspect_order_and_labels():
    """Test the fixed aspect enumeration order."""
    assert [k.value for k in ASPECT_ORDER] == [
        "timeliness",
        "order_completeness",
        "driver_behavior",
        "cleaning_quality",
    ]
    assert AspectKey.DRIVER_BEHAVIOR.label == "Driver behavior"


def test_from_dict_tolerates_missing_fields():
    """Test that absent keys become empty strings / None."""
    review = ReviewRecord.from_dict({"id": 7, "overall_sentiment": "Negative"})

    assert review.id == "7"
    assert review.source == ""
    assert review.created_ts is None
    assert review.created_at is None
    assert review.overall is Sentiment.NEGATIVE
    assert review.timeliness == ""


def test_serialization_keeps_raw_values(make_review):
    """Test that unrecognized labels survive a to_dict/from_dict trip."""
    review = make_review(overall_sentiment="Very Negative", driver_behavior="Rude")

    restored = ReviewRecord.from_dict(review.to_dict())

    assert restored == review
    assert restored.overall_sentiment == "Very Negative"
    assert restored.overall is Sentiment.UNRECOGNIZED


def test_aspect_mentioned(make_review):
    """Test mention detection for empty, NotMentioned and unknown values."""
    review = make_review(
        timeliness="Negative",
        order_completeness="NotMentioned",
        driver_behavior="",
        cleaning_quality="Mixed",
    )

    assert review.aspect_mentioned(AspectKey.TIMELINESS)
    assert not review.aspect_mentioned(AspectKey.ORDER_COMPLETENESS)
    assert not review.aspect_mentioned(AspectKey.DRIVER_BEHAVIOR)
    assert review.aspect_mentioned(AspectKey.CLEANING_QUALITY)
    assert review.aspect_sentiment(AspectKey.CLEANING_QUALITY) is Sentiment.UNRECOGNIZED


def test_created_at_parsing(make_review):
    """Test timestamp parsing including timezone normalisation."""
    assert make_review(created_ts="2024-06-10T23:59:00").created_at == datetime(2024, 6, 10, 23, 59)
    assert make_review(created_ts="2024-06-10T10:00:00+03:00").created_at == datetime(2024, 6, 10, 7, 0)
    assert make_review(created_ts="2024-06-10").created_at == datetime(2024, 6, 10)
    assert make_review(created_ts="garbage").created_at is None
    assert make_review(created_ts="").created_at is None


def test_filter_criteria_is_filtered():
    """Test that the focused aspect does not count as a filter."""
    assert not FilterCriteria().is_filtered
    assert not FilterCriteria(search="   ").is_filtered
    assert not FilterCriteria(focused_aspect=AspectKey.TIMELINESS).is_filtered
    assert FilterCriteria(sentiment=SentimentFilter.NEGATIVE).is_filtered
    assert FilterCriteria(search="late").is_filtered
    assert FilterCriteria(date_to=date(2024, 6, 1)).is_filtered


def test_filter_criteria_to_dict():
    criteria = FilterCriteria(
        sentiment=SentimentFilter.POSITIVE,
        date_from=date(2024, 6, 1),
        focused_aspect=AspectKey.CLEANING_QUALITY,
    )

    assert criteria.to_dict() == {
        "sentiment": "Positive",
        "search": "",
        "date_from": "2024-06-01",
        "date_to": None,
        "focused_aspect": "cleaning_quality",
    }
