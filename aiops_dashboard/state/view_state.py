"""
Dashboard view state and transitions.

The whole screen state lives in one frozen DashboardState. Each user
action is a function taking the current state and returning a new one;
nothing is mutated in place.

Review load: LOADING -> LOADED | ERRORED (once per session).
Ask:         IDLE -> ASKING -> ANSWERED | ERRORED, re-enterable.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Iterable, Optional, Tuple

from aiops_dashboard.models.filters import FilterCriteria, SentimentFilter
from aiops_dashboard.models.review import AspectKey, ReviewRecord

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


class AskStatus(str, Enum):
    IDLE = "idle"
    ASKING = "asking"
    ANSWERED = "answered"
    ERRORED = "errored"


@dataclass(frozen=True)
class AskTicket:
    """Handle for one issued ask request."""
    seq: int
    question: str


@dataclass(frozen=True)
class DashboardState:
    """Complete, serializable state of the dashboard screen."""
    reviews: Tuple[ReviewRecord, ...] = ()
    load_status: LoadStatus = LoadStatus.LOADING
    load_error: Optional[str] = None
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    question: str = ""
    answer: Optional[str] = None
    ask_error: Optional[str] = None
    ask_status: AskStatus = AskStatus.IDLE
    ask_seq: int = 0  # sequence number of the latest issued ask
    dark_mode: bool = False

    @property
    def loading(self) -> bool:
        return self.load_status is LoadStatus.LOADING

    @property
    def asking(self) -> bool:
        return self.ask_status is AskStatus.ASKING

    @property
    def can_submit_question(self) -> bool:
        return not self.asking and bool(self.question.strip())

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "reviews": [r.to_dict() for r in self.reviews],
            "load_status": self.load_status.value,
            "load_error": self.load_error,
            "criteria": self.criteria.to_dict(),
            "question": self.question,
            "answer": self.answer,
            "ask_error": self.ask_error,
            "ask_status": self.ask_status.value,
            "ask_seq": self.ask_seq,
            "dark_mode": self.dark_mode,
        }


# --- Review load ---

def reviews_loaded(state: DashboardState, reviews: Iterable[ReviewRecord]) -> DashboardState:
    return replace(
        state,
        reviews=tuple(reviews),
        load_status=LoadStatus.LOADED,
        load_error=None,
    )


def reviews_failed(state: DashboardState, message: str) -> DashboardState:
    return replace(
        state,
        reviews=(),
        load_status=LoadStatus.ERRORED,
        load_error=message,
    )


# --- Filters ---

def _with_criteria(state: DashboardState, **changes) -> DashboardState:
    return replace(state, criteria=replace(state.criteria, **changes))


def set_criteria(state: DashboardState, criteria: FilterCriteria) -> DashboardState:
    return replace(state, criteria=criteria)


def set_sentiment_filter(state: DashboardState, selector) -> DashboardState:
    return _with_criteria(state, sentiment=SentimentFilter(selector))


def set_search(state: DashboardState, search: Optional[str]) -> DashboardState:
    return _with_criteria(state, search=search or "")


def set_date_from(state: DashboardState, day: Optional[date]) -> DashboardState:
    return _with_criteria(state, date_from=day)


def set_date_to(state: DashboardState, day: Optional[date]) -> DashboardState:
    return _with_criteria(state, date_to=day)


def toggle_focused_aspect(state: DashboardState, key) -> DashboardState:
    """Focus an aspect in the chart; clicking the focused one again unfocuses."""
    key = AspectKey(key)
    focused = None if state.criteria.focused_aspect is key else key
    return _with_criteria(state, focused_aspect=focused)


# --- Ask ---

def set_question(state: DashboardState, question: Optional[str]) -> DashboardState:
    return replace(state, question=question or "")


def begin_ask(
    state: DashboardState,
    preset: Optional[str] = None
) -> Tuple[DashboardState, Optional[AskTicket]]:
    """
    Start an ask request.

    Clears the previous answer and error and issues a new sequence
    number. A preset question also replaces the text box content.

    Args:
        state: Current state
        preset: Quick-question text, or None to use the text box

    Returns:
        (new state, ticket); the state is unchanged and the ticket is None
        when the question is blank
    """
    base = preset if preset is not None else state.question
    trimmed = (base or "").strip()
    if not trimmed:
        return state, None

    seq = state.ask_seq + 1
    new_state = replace(
        state,
        question=trimmed if preset is not None else state.question,
        answer=None,
        ask_error=None,
        ask_status=AskStatus.ASKING,
        ask_seq=seq,
    )
    return new_state, AskTicket(seq=seq, question=trimmed)


def _is_stale(state: DashboardState, seq: int) -> bool:
    if seq != state.ask_seq:
        logger.debug(f"Discarding result of ask #{seq}; latest is #{state.ask_seq}")
        return True
    return False


def answer_received(state: DashboardState, seq: int, answer: str) -> DashboardState:
    if _is_stale(state, seq):
        return state
    return replace(
        state,
        answer=answer,
        ask_error=None,
        ask_status=AskStatus.ANSWERED,
    )


def ask_failed(state: DashboardState, seq: int, message: str) -> DashboardState:
    if _is_stale(state, seq):
        return state
    return replace(
        state,
        answer=None,
        ask_error=message,
        ask_status=AskStatus.ERRORED,
    )


# --- Display ---

def toggle_theme(state: DashboardState) -> DashboardState:
    return replace(state, dark_mode=not state.dark_mode)
