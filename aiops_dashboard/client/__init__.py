"""
HTTP client for the review backend.
"""

from aiops_dashboard.client.api_client import NO_ANSWER_FALLBACK, ReviewApiClient

__all__ = ["NO_ANSWER_FALLBACK", "ReviewApiClient"]
