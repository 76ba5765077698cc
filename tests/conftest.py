"""
Shared fixtures for dashboard tests.
"""

import pytest

from aiops_dashboard.models.review import ReviewRecord


def build_review(**overrides) -> ReviewRecord:
    data = {
        "id": "r-1",
        "source": "App Store",
        "overall_sentiment": "Neutral",
        "original_complaint": "It was fine",
        "detected_language": "en",
        "created_ts": "2024-06-10T12:00:00",
        "timeliness": "NotMentioned",
        "order_completeness": "NotMentioned",
        "driver_behavior": "NotMentioned",
        "cleaning_quality": "NotMentioned",
    }
    data.update(overrides)
    return ReviewRecord.from_dict(data)


@pytest.fixture
def make_review():
    """Factory for reviews with sensible defaults."""
    return build_review


@pytest.fixture
def sample_reviews():
    """Small mixed review set in a fixed order."""
    return [
        build_review(
            id="r-1",
            source="Google Play",
            overall_sentiment="Positive",
            original_complaint="Driver was very polite and quick",
            created_ts="2024-06-01T09:00:00",
            driver_behavior="Positive",
            timeliness="Positive",
        ),
        build_review(
            id="r-2",
            source="Instagram",
            overall_sentiment="Negative",
            original_complaint="My shirts came back still stained",
            detected_language="en",
            created_ts="2024-06-05T18:30:00",
            cleaning_quality="Negative",
        ),
        build_review(
            id="r-3",
            source="WhatsApp",
            overall_sentiment="Negative",
            original_complaint="التوصيل متأخر جدا",
            detected_language="ar",
            created_ts="2024-06-10T23:59:00",
            timeliness="Negative",
            order_completeness="Negative",
        ),
        build_review(
            id="r-4",
            source="Call Center",
            overall_sentiment="Neutral",
            original_complaint="Order arrived, one sock missing",
            created_ts=None,
            order_completeness="Neutral",
        ),
        build_review(
            id="r-5",
            source="Google Play",
            overall_sentiment="Mixed",
            original_complaint="Some good, some bad",
            created_ts="garbage",
            timeliness="Mixed",
        ),
    ]
