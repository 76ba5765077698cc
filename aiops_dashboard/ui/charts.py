"""
Plotly chart builders.
"""

import plotly.graph_objects as go

from aiops_dashboard.models.summary import OVERALL_CHART_TITLE, SentimentCounts

SENTIMENT_COLORS = {
    "Positive": "#06D6A0",
    "Neutral": "#64748b",
    "Negative": "#E63946",
}

EMPTY_CHART_MESSAGE = "No data available for the current filters."


def sentiment_badge_style(value: str) -> str:
    """CSS for the sentiment cell of the review table."""
    if value in ("Positive", "Negative"):
        return f"color: {SENTIMENT_COLORS[value]}; font-weight: 600"
    return "color: #334155"


def build_sentiment_figure(
    counts: SentimentCounts,
    title: str = OVERALL_CHART_TITLE,
    dark_mode: bool = False
) -> go.Figure:
    """Bar chart of a positive/neutral/negative triple."""
    pairs = counts.as_pairs()
    names = [name for name, _ in pairs]
    values = [value for _, value in pairs]

    fig = go.Figure(
        go.Bar(
            x=names,
            y=values,
            marker_color=[SENTIMENT_COLORS[name] for name in names],
            hovertemplate="<b>%{x}</b><br>Reviews: %{y}<extra></extra>",
            showlegend=False
        )
    )

    fig.update_yaxes(rangemode="tozero", tickformat="d")
    fig.update_layout(
        title_text=title,
        title_font_size=14,
        height=280,
        margin=dict(l=40, r=20, t=50, b=40),
        template="plotly_dark" if dark_mode else "plotly_white",
        bargap=0.35
    )
    return fig
