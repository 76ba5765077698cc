"""
Streamlit presentation layer for the dashboard.
"""
