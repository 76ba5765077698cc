"""
AIOps Review Dashboard - Streamlit app

Run:
    streamlit run app.py

Set AIOPS_API_BASE_URL to point at the review backend.
"""

import logging

import streamlit as st

from aiops_dashboard.client.api_client import ReviewApiClient
from aiops_dashboard.dashboard import DashboardController
from aiops_dashboard.ui import components
from aiops_dashboard.ui.theme import apply_theme
from aiops_dashboard.utils.logging_setup import setup_logging
import config.settings as settings

logger = logging.getLogger(__name__)

CONTROLLER_KEY = "dashboard_controller"


@st.cache_resource
def get_client() -> ReviewApiClient:
    """
    Shared API client for all sessions.

    Using @st.cache_resource ensures logging and the HTTP session are set
    up only once per server process.
    """
    setup_logging(settings.LOG_LEVEL)
    return ReviewApiClient(
        base_url=settings.API_BASE_URL,
        timeout=settings.REQUEST_TIMEOUT_SECONDS
    )


def get_controller() -> DashboardController:
    """One controller per browser session."""
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = DashboardController(client=get_client())
        logger.info("Started new dashboard session")
    return st.session_state[CONTROLLER_KEY]


def resolve_pending_ask(controller: DashboardController) -> None:
    """Send a question queued by the ask panel, then rerun to show the outcome."""
    ticket = st.session_state.pop(components.PENDING_ASK_KEY, None)
    if ticket is None:
        return
    with st.spinner("Asking…"):
        controller.resolve_question(ticket)
    st.rerun()


st.set_page_config(page_title=settings.DASHBOARD_TITLE, page_icon="📊", layout="wide")

controller = get_controller()

if controller.state.loading:
    with st.spinner(components.LOADING_MESSAGE):
        controller.load_reviews()

state = controller.state
result = controller.view()

apply_theme(state.dark_mode)

components.render_header(controller)
components.render_kpi_cards(result)
components.render_sentiment_chart(result, dark_mode=state.dark_mode)
components.render_aspect_cards(controller, result)

st.subheader("AI Assistant & Filters")
ask_col, filter_col = st.columns([2, 1])
with ask_col:
    components.render_ask_panel(controller)
with filter_col:
    components.render_filter_panel(controller)

components.render_review_table(state, result)

resolve_pending_ask(controller)
