"""
Error types for the dashboard.

Every failure carries a short, human-readable message that is shown to
the operator as-is. Structured detail goes to the log only.
"""

LOAD_ERROR_MESSAGE = "Could not load reviews."
ASK_ERROR_MESSAGE = "Could not get an answer from the backend."


class DashboardError(Exception):
    """Base class for failures surfaced in the dashboard."""

    user_message = "Something went wrong."

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.user_message)
        self.detail = detail


class LoadFailure(DashboardError):
    """The review list request failed (network, non-2xx or bad payload)."""

    user_message = LOAD_ERROR_MESSAGE


class AskFailure(DashboardError):
    """The ask request failed (network, non-2xx or bad payload)."""

    user_message = ASK_ERROR_MESSAGE
