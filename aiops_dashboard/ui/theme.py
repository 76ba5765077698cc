"""
Page styling and the light/dark toggle.

The theme is a per-session display preference; it is never persisted.
"""

import streamlit as st

BASE_CSS = """
<style>
    .aiops-subtitle { color: #475569; font-size: 0.875rem; margin-top: -0.75rem; }
    .aiops-badge {
        display: inline-block; border-radius: 9999px; padding: 0.2rem 0.9rem;
        font-size: 0.75rem; font-weight: 500; margin-left: 0.5rem;
    }
    .aiops-badge-primary { background: #D90217; color: #ffffff; }
    .aiops-badge-outline { border: 1px solid #cbd5e1; color: #334155; background: #ffffff; }
    .aiops-kpi-helper { color: #64748b; font-size: 0.75rem; }
    .aiops-answer {
        border: 1px solid #e2e8f0; background: #f8fafc; border-radius: 6px;
        padding: 0.75rem; font-size: 0.8rem; white-space: pre-wrap;
    }
</style>
"""

DARK_CSS = """
<style>
    .stApp { background-color: #0f172a; color: #e2e8f0; }
    .aiops-subtitle, .aiops-kpi-helper { color: #94a3b8; }
    .aiops-badge-outline { background: #1e293b; color: #e2e8f0; border-color: #475569; }
    .aiops-answer { background: #1e293b; border-color: #334155; color: #e2e8f0; }
</style>
"""


def apply_theme(dark_mode: bool) -> None:
    """Inject page CSS for the current theme."""
    st.markdown(BASE_CSS, unsafe_allow_html=True)
    if dark_mode:
        st.markdown(DARK_CSS, unsafe_allow_html=True)


def theme_toggle_label(dark_mode: bool) -> str:
    return "Light mode" if dark_mode else "Dark mode"
