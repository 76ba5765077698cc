"""
Unit tests for the review API client.

Note: These tests use a mocked requests session; no network access.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from aiops_dashboard.client.api_client import NO_ANSWER_FALLBACK, ReviewApiClient
from aiops_dashboard.errors import ASK_ERROR_MESSAGE, LOAD_ERROR_MESSAGE, AskFailure, LoadFailure


def make_response(status_code=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return ReviewApiClient(base_url="http://backend.test/", session=session)


def test_urls_strip_trailing_slash(client):
    assert client.reviews_url == "http://backend.test/api/reviews/"
    assert client.ask_url == "http://backend.test/api/ask/"


def test_fetch_reviews_success(client, session):
    """Test parsing a valid review list."""
    session.get.return_value = make_response(payload=[
        {"id": "1", "source": "App", "overall_sentiment": "Positive",
         "original_complaint": "Great", "detected_language": "en",
         "created_ts": "2024-06-01T10:00:00", "timeliness": "Positive",
         "order_completeness": "NotMentioned", "driver_behavior": "NotMentioned",
         "cleaning_quality": "NotMentioned"},
        {"id": "2", "overall_sentiment": "Negative"},
    ])

    reviews = client.fetch_reviews()

    session.get.assert_called_once_with("http://backend.test/api/reviews/", timeout=None)
    assert [r.id for r in reviews] == ["1", "2"]
    assert reviews[0].timeliness == "Positive"
    assert reviews[1].source == ""


def test_fetch_reviews_non_2xx(client, session):
    session.get.return_value = make_response(status_code=500)

    with pytest.raises(LoadFailure) as exc_info:
        client.fetch_reviews()

    assert exc_info.value.user_message == LOAD_ERROR_MESSAGE
    assert "500" in exc_info.value.detail


def test_fetch_reviews_network_error(client, session):
    session.get.side_effect = requests.exceptions.ConnectionError("refused")

    with pytest.raises(LoadFailure):
        client.fetch_reviews()


@pytest.mark.parametrize("payload", [{"results": []}, "oops", [1, 2], None])
def test_fetch_reviews_rejects_bad_payload(client, session, payload):
    """Test that anything other than an array of objects fails the load."""
    session.get.return_value = make_response(payload=payload)

    with pytest.raises(LoadFailure):
        client.fetch_reviews()


def test_fetch_reviews_invalid_json(client, session):
    session.get.return_value = make_response(json_error=ValueError("bad json"))

    with pytest.raises(LoadFailure):
        client.fetch_reviews()


def test_fetch_reviews_keeps_duplicates(client, session, caplog):
    session.get.return_value = make_response(payload=[{"id": "1"}, {"id": "1"}])

    reviews = client.fetch_reviews()

    assert len(reviews) == 2
    assert "duplicate review ids" in caplog.text


@pytest.mark.parametrize("question", ["", "   ", None])
def test_ask_blank_question_makes_no_request(client, session, question):
    """Test that blank questions are ignored."""
    assert client.ask(question) is None
    session.post.assert_not_called()


def test_ask_success(client, session):
    session.post.return_value = make_response(payload={"answer": "Drivers are late."})

    answer = client.ask("  Why are customers unhappy?  ")

    session.post.assert_called_once_with(
        "http://backend.test/api/ask/",
        json={"question": "Why are customers unhappy?"},
        timeout=None
    )
    assert answer == "Drivers are late."


@pytest.mark.parametrize("payload", [{"answer": ""}, {"answer": None}, {}, ["not", "a", "dict"]])
def test_ask_missing_answer_uses_fallback(client, session, payload):
    """Test the literal fallback for empty or missing answers."""
    session.post.return_value = make_response(payload=payload)
    assert client.ask("Anything?") == NO_ANSWER_FALLBACK


def test_ask_non_2xx(client, session):
    session.post.return_value = make_response(status_code=503)

    with pytest.raises(AskFailure) as exc_info:
        client.ask("Anything?")

    assert exc_info.value.user_message == ASK_ERROR_MESSAGE


def test_ask_network_error(client, session):
    session.post.side_effect = requests.exceptions.Timeout("slow")

    with pytest.raises(AskFailure):
        client.ask("Anything?")


def test_timeout_is_passed_through(session):
    client = ReviewApiClient(base_url="http://backend.test", timeout=2.5, session=session)
    session.get.return_value = make_response(payload=[])

    client.fetch_reviews()

    session.get.assert_called_once_with("http://backend.test/api/reviews/", timeout=2.5)


def test_default_session_is_created():
    """Test that a requests session is created when none is given."""
    with patch("aiops_dashboard.client.api_client.requests.Session") as mock_session_cls:
        client = ReviewApiClient(base_url="http://backend.test")

    assert client.session is mock_session_cls.return_value
