"""
Streamlit components for the dashboard screen.

Each render_* function draws one section. Widgets report changes back
through controller transitions in their callbacks; nothing here talks to
the backend directly.
"""

import html
from typing import Optional

import streamlit as st

from aiops_dashboard.dashboard import DashboardController
from aiops_dashboard.models.filters import SentimentFilter
from aiops_dashboard.models.summary import FilterResult
from aiops_dashboard.state import view_state
from aiops_dashboard.state.view_state import DashboardState
from aiops_dashboard.ui.charts import EMPTY_CHART_MESSAGE, build_sentiment_figure, sentiment_badge_style
from aiops_dashboard.ui.theme import theme_toggle_label
from aiops_dashboard.utils.export import review_table
import config.settings as settings


# Session-state keys
QUESTION_KEY = "question_input"
SEARCH_KEY = "search_input"
DATE_FROM_KEY = "date_from_input"
DATE_TO_KEY = "date_to_input"
SENTIMENT_KEY = "sentiment_input"
PENDING_ASK_KEY = "pending_ask"

ASK_HINT = "Ask a question about recent reviews, or use a quick query above."
ASK_PLACEHOLDER = "Example: Why did timeliness complaints increase this week?"
SEARCH_PLACEHOLDER = "Search by text, source, or language…"
FILTER_FOOTNOTE = "Filters apply to both the KPIs and the table."
LOADING_MESSAGE = "Loading reviews…"
EMPTY_TABLE_MESSAGE = "No reviews found for the current filters."


def _sync(controller: DashboardController, transition, key: str) -> None:
    controller.apply(transition, st.session_state[key])


def _submit_question(controller: DashboardController, preset: Optional[str] = None) -> None:
    if preset is None:
        controller.apply(view_state.set_question, st.session_state.get(QUESTION_KEY, ""))

    ticket = controller.submit_question(preset)
    if ticket is None:
        return

    if preset is not None:
        st.session_state[QUESTION_KEY] = ticket.question
    st.session_state[PENDING_ASK_KEY] = ticket


def render_header(controller: DashboardController) -> None:
    state = controller.state
    title_col, badge_col = st.columns([3, 2])

    with title_col:
        st.title(settings.DASHBOARD_TITLE)
        st.markdown(
            f'<p class="aiops-subtitle">{html.escape(settings.DASHBOARD_SUBTITLE)}</p>',
            unsafe_allow_html=True
        )

    with badge_col:
        primary, outline = settings.DASHBOARD_BADGES
        st.markdown(
            f'<span class="aiops-badge aiops-badge-primary">{html.escape(primary)}</span>'
            f'<span class="aiops-badge aiops-badge-outline">{html.escape(outline)}</span>',
            unsafe_allow_html=True
        )
        st.button(
            theme_toggle_label(state.dark_mode),
            key="theme_toggle",
            on_click=controller.apply,
            args=(view_state.toggle_theme,)
        )


def render_kpi_cards(result: FilterResult) -> None:
    st.subheader("Overview")
    for col, kpi in zip(st.columns(len(result.kpis)), result.kpis):
        with col:
            with st.container(border=True):
                st.metric(label=kpi.label.upper(), value=kpi.value)
                if kpi.helper:
                    st.markdown(
                        f'<p class="aiops-kpi-helper">{html.escape(kpi.helper)}</p>',
                        unsafe_allow_html=True
                    )


def render_sentiment_chart(result: FilterResult, dark_mode: bool = False) -> None:
    st.subheader("Sentiment Analysis")
    with st.container(border=True):
        if result.chart_counts.total == 0:
            st.markdown(f"**{result.chart_title}**")
            st.caption(EMPTY_CHART_MESSAGE)
            return
        fig = build_sentiment_figure(result.chart_counts, result.chart_title, dark_mode)
        st.plotly_chart(fig, use_container_width=True)


def render_aspect_cards(controller: DashboardController, result: FilterResult) -> None:
    st.subheader("Aspect Breakdown")
    focused = result.criteria.focused_aspect

    for col, stats in zip(st.columns(len(result.summary.aspects)), result.summary.aspects):
        with col:
            with st.container(border=True):
                st.markdown(f"**{stats.label}**")
                st.metric(label="mentions", value=stats.total_mentioned)
                st.markdown(
                    f"Negative: **{stats.negative}**  \n"
                    f"Positive: **{stats.positive}**  \n"
                    f"Neutral: **{stats.neutral}**"
                )
                is_focused = focused is stats.key
                st.button(
                    "Show overall" if is_focused else "Focus chart",
                    key=f"aspect_{stats.key.value}",
                    type="primary" if is_focused else "secondary",
                    on_click=controller.apply,
                    args=(view_state.toggle_focused_aspect, stats.key),
                    use_container_width=True
                )


def ask_button_label(state: DashboardState) -> str:
    return "Asking…" if state.asking else "Ask"


def show_ask_hint(state: DashboardState) -> bool:
    """The hint stays up until an answer or an error replaces it."""
    return not state.ask_error and not state.answer


def render_ask_panel(controller: DashboardController) -> None:
    state = controller.state

    with st.container(border=True):
        st.markdown("**Ask your data**")

        if QUESTION_KEY not in st.session_state:
            st.session_state[QUESTION_KEY] = state.question

        st.text_area(
            "Question",
            key=QUESTION_KEY,
            placeholder=ASK_PLACEHOLDER,
            label_visibility="collapsed",
            height=90,
            on_change=_sync,
            args=(controller, view_state.set_question, QUESTION_KEY)
        )
        st.button(
            ask_button_label(state),
            key="ask_submit",
            type="primary",
            disabled=not state.can_submit_question,
            on_click=_submit_question,
            args=(controller,)
        )

        quick_cols = st.columns(len(settings.QUICK_QUESTIONS))
        for i, (col, preset) in enumerate(zip(quick_cols, settings.QUICK_QUESTIONS)):
            with col:
                st.button(
                    preset,
                    key=f"quick_question_{i}",
                    disabled=state.asking,
                    on_click=_submit_question,
                    args=(controller, preset),
                    use_container_width=True
                )

        if state.ask_error:
            st.error(state.ask_error)
        elif show_ask_hint(state):
            st.caption(ASK_HINT)

        if state.answer:
            st.markdown(
                f'<div class="aiops-answer">{html.escape(state.answer)}</div>',
                unsafe_allow_html=True
            )


def render_filter_panel(controller: DashboardController) -> None:
    criteria = controller.state.criteria

    with st.container(border=True):
        st.markdown("**Filters**")

        st.text_input(
            "Search",
            value=criteria.search,
            key=SEARCH_KEY,
            placeholder=SEARCH_PLACEHOLDER,
            label_visibility="collapsed",
            on_change=_sync,
            args=(controller, view_state.set_search, SEARCH_KEY)
        )

        from_col, to_col = st.columns(2)
        with from_col:
            st.date_input(
                "From date",
                value=criteria.date_from,
                key=DATE_FROM_KEY,
                on_change=_sync,
                args=(controller, view_state.set_date_from, DATE_FROM_KEY)
            )
        with to_col:
            st.date_input(
                "To date",
                value=criteria.date_to,
                key=DATE_TO_KEY,
                on_change=_sync,
                args=(controller, view_state.set_date_to, DATE_TO_KEY)
            )

        options = [s.value for s in SentimentFilter]
        st.radio(
            "Sentiment",
            options,
            index=options.index(criteria.sentiment.value),
            key=SENTIMENT_KEY,
            horizontal=True,
            label_visibility="collapsed",
            on_change=_sync,
            args=(controller, view_state.set_sentiment_filter, SENTIMENT_KEY)
        )

        st.caption(FILTER_FOOTNOTE)


def render_review_table(state: DashboardState, result: FilterResult) -> None:
    st.subheader("Review Details")

    with st.container(border=True):
        st.markdown("**Recent Reviews**")

        if state.loading:
            st.caption(LOADING_MESSAGE)
            return

        if state.load_error:
            st.error(state.load_error)
            return

        if result.is_empty:
            st.info(EMPTY_TABLE_MESSAGE)
            return

        table = review_table(result.reviews)
        st.dataframe(
            table.style.map(sentiment_badge_style, subset=["Sentiment"]),
            height=settings.TABLE_HEIGHT_PX,
            hide_index=True,
            use_container_width=True
        )
