"""
Utility modules for the dashboard.

Cross-cutting concerns:
- Timestamps: lenient parsing and calendar-day bounds
- Export: review tables and CSV snapshots
- Logging setup shared by the CLI and the Streamlit app
"""
