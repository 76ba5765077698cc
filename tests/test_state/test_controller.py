"""
Unit tests for the dashboard controller.

The API client is mocked; controller behaviour is checked through the
resulting view state.
"""

from unittest.mock import MagicMock

import pytest

from aiops_dashboard.dashboard import DashboardController
from aiops_dashboard.errors import AskFailure, LoadFailure
from aiops_dashboard.state import view_state
from aiops_dashboard.state.view_state import AskStatus, LoadStatus


@pytest.fixture
def client(sample_reviews):
    mock_client = MagicMock()
    mock_client.fetch_reviews.return_value = sample_reviews
    mock_client.ask.return_value = "Mostly late deliveries."
    return mock_client


@pytest.fixture
def controller(client):
    return DashboardController(client=client)


def test_load_reviews_once(controller, client):
    """Test that loading happens once per session."""
    state = controller.load_reviews()
    assert state.load_status is LoadStatus.LOADED
    assert len(state.reviews) == 5

    controller.load_reviews()
    client.fetch_reviews.assert_called_once()


def test_load_failure_sets_error(controller, client):
    client.fetch_reviews.side_effect = LoadFailure("status 500")

    state = controller.load_reviews()

    assert state.load_status is LoadStatus.ERRORED
    assert state.load_error == "Could not load reviews."
    assert state.reviews == ()
    assert controller.view().is_empty

    controller.load_reviews()
    client.fetch_reviews.assert_called_once()


def test_view_reflects_filters(controller):
    controller.load_reviews()
    controller.apply(view_state.set_sentiment_filter, "Negative")

    result = controller.view()

    assert [r.id for r in result.reviews] == ["r-2", "r-3"]
    assert result.summary.total == 2


def test_ask_success(controller, client):
    controller.apply(view_state.set_question, "Why are customers unhappy?")

    state = controller.ask()

    client.ask.assert_called_once_with("Why are customers unhappy?")
    assert state.ask_status is AskStatus.ANSWERED
    assert state.answer == "Mostly late deliveries."


def test_ask_blank_makes_no_request(controller, client):
    """Test that a blank question leaves state unchanged."""
    before = controller.apply(view_state.set_question, "  ")

    after = controller.ask()

    client.ask.assert_not_called()
    assert after is before


def test_ask_failure_clears_stale_answer(controller, client):
    controller.ask("First question?")
    assert controller.state.answer == "Mostly late deliveries."

    client.ask.side_effect = AskFailure("status 502")
    state = controller.ask("Second question?")

    assert state.answer is None
    assert state.ask_status is AskStatus.ERRORED
    assert state.ask_error == "Could not get an answer from the backend."


def test_out_of_order_responses_last_issued_wins(controller, client):
    """Test the sequence guard when responses arrive out of order."""
    client.ask.side_effect = lambda question: f"answer to {question}"

    first = controller.submit_question("first")
    second = controller.submit_question("second")

    controller.resolve_question(second)
    controller.resolve_question(first)

    assert controller.state.answer == "answer to second"
    assert controller.state.question == "second"


def test_ask_does_not_touch_reviews_or_filters(controller):
    controller.load_reviews()
    controller.apply(view_state.set_search, "google")
    before = controller.state

    after = controller.ask("Anything?")

    assert after.reviews == before.reviews
    assert after.criteria == before.criteria
