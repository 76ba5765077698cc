"""
Dashboard Controller.

Coordinates the API client, the view state and the filter engine for one
dashboard session.
"""

import logging
import threading
from typing import Callable, Optional

from aiops_dashboard.client.api_client import ReviewApiClient
from aiops_dashboard.engine.aggregation import FilterEngine
from aiops_dashboard.errors import AskFailure, LoadFailure
from aiops_dashboard.models.summary import FilterResult
from aiops_dashboard.state import view_state
from aiops_dashboard.state.view_state import AskTicket, DashboardState, LoadStatus

logger = logging.getLogger(__name__)


class DashboardController:
    """
    Owns the state of one dashboard session.

    Flow:
    1. load_reviews() once on first render
    2. apply() a transition for every filter/ask-box interaction
    3. submit_question() -> resolve_question(ticket) for each ask
    4. view() to get what should be rendered right now
    """

    def __init__(
        self,
        client: ReviewApiClient,
        engine: Optional[FilterEngine] = None,
        state: Optional[DashboardState] = None
    ):
        """
        Initialize dashboard controller.

        Args:
            client: API client for the review backend
            engine: Filter engine (a default one is created if omitted)
            state: Initial state, mainly for tests
        """
        self.client = client
        self.engine = engine or FilterEngine()
        self._state = state or DashboardState()
        self._lock = threading.Lock()

    @property
    def state(self) -> DashboardState:
        return self._state

    def apply(self, transition: Callable[..., DashboardState], *args) -> DashboardState:
        """Run a state transition and store the result."""
        with self._lock:
            self._state = transition(self._state, *args)
            return self._state

    def load_reviews(self) -> DashboardState:
        """
        Fetch the review set. Runs once; later calls are no-ops.

        Returns:
            State after the load attempt
        """
        if self._state.load_status is not LoadStatus.LOADING:
            logger.debug(f"Reviews already {self._state.load_status.value}, not reloading")
            return self._state

        try:
            reviews = self.client.fetch_reviews()
        except LoadFailure as e:
            logger.error(f"Review load failed: {e.detail}")
            return self.apply(view_state.reviews_failed, e.user_message)

        return self.apply(view_state.reviews_loaded, reviews)

    def submit_question(self, preset: Optional[str] = None) -> Optional[AskTicket]:
        """
        Move into the asking state.

        Args:
            preset: Quick-question text, or None to use the current question

        Returns:
            Ticket to resolve, or None if the question was blank
        """
        with self._lock:
            self._state, ticket = view_state.begin_ask(self._state, preset)

        if ticket:
            logger.info(f"Ask #{ticket.seq}: {ticket.question!r}")
        return ticket

    def resolve_question(self, ticket: AskTicket) -> DashboardState:
        """
        Send the ticket's question and record the outcome.

        Results of superseded tickets are discarded by the transition.
        """
        try:
            answer = self.client.ask(ticket.question)
        except AskFailure as e:
            logger.error(f"Ask #{ticket.seq} failed: {e.detail}")
            return self.apply(view_state.ask_failed, ticket.seq, e.user_message)

        return self.apply(view_state.answer_received, ticket.seq, answer)

    def ask(self, preset: Optional[str] = None) -> DashboardState:
        """Submit and resolve a question in one call."""
        ticket = self.submit_question(preset)
        if ticket is None:
            return self._state
        return self.resolve_question(ticket)

    def view(self) -> FilterResult:
        """Filter and aggregate the loaded reviews with the current criteria."""
        state = self._state
        return self.engine.apply(state.reviews, state.criteria)
