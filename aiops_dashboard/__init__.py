"""
AIOps review dashboard.

Presentation layer over a review-sentiment backend: loads pre-labelled
reviews once, filters and aggregates them client-side, and forwards
free-form questions to the backend's ask endpoint.
"""

__version__ = "1.0.0"
