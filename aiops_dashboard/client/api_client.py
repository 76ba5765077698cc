"""
Review API client.

Performs the two backend calls the dashboard needs:
- GET  {base}/api/reviews/  -> list of reviews
- POST {base}/api/ask/      -> answer to a free-form question

One round trip per call; no retries, no caching.
"""

import logging
from collections import Counter
from typing import List, Optional

import requests

from aiops_dashboard.errors import AskFailure, LoadFailure
from aiops_dashboard.models.review import ReviewRecord
import config.settings as settings

logger = logging.getLogger(__name__)

NO_ANSWER_FALLBACK = "No answer returned."


class ReviewApiClient:
    """
    Thin wrapper around the backend's reviews and ask endpoints.

    Failures are raised as LoadFailure / AskFailure so callers can show
    the user-facing message and log the detail.
    """

    def __init__(
        self,
        base_url: str = settings.API_BASE_URL,
        timeout: Optional[float] = settings.REQUEST_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the API client.

        Args:
            base_url: Backend base URL (e.g., http://localhost:8000)
            timeout: Request timeout in seconds, None for no timeout
            session: Optional pre-configured requests session
        """
        self.base_url = (base_url or "").rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

        logger.info(f"Initialized ReviewApiClient with base_url={self.base_url}, timeout={timeout}")

    @property
    def reviews_url(self) -> str:
        return f"{self.base_url}{settings.REVIEWS_PATH}"

    @property
    def ask_url(self) -> str:
        return f"{self.base_url}{settings.ASK_PATH}"

    def fetch_reviews(self) -> List[ReviewRecord]:
        """
        Load the full review set.

        Returns:
            Reviews in the order the backend returned them

        Raises:
            LoadFailure: On network error, non-2xx status or a payload that
                is not a JSON array of objects
        """
        try:
            response = self.session.get(self.reviews_url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Review request to {self.reviews_url} failed: {e}")
            raise LoadFailure(str(e)) from e

        if not response.ok:
            logger.error(f"Review request failed with status {response.status_code}")
            raise LoadFailure(f"Request failed with status {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Review response is not valid JSON: {e}")
            raise LoadFailure("Invalid JSON in review response") from e

        if not isinstance(payload, list):
            logger.error(f"Expected a JSON array of reviews, got {type(payload).__name__}")
            raise LoadFailure("Review response is not a list")

        if not all(isinstance(item, dict) for item in payload):
            logger.error("Review response contains non-object entries")
            raise LoadFailure("Review response contains non-object entries")

        reviews = [ReviewRecord.from_dict(item) for item in payload]
        self._warn_on_duplicate_ids(reviews)

        logger.info(f"Loaded {len(reviews)} reviews from {self.reviews_url}")
        return reviews

    def ask(self, question: str) -> Optional[str]:
        """
        Ask the backend a free-form question about the reviews.

        Args:
            question: Question text; surrounding whitespace is trimmed

        Returns:
            The answer text (or the fallback when the backend sent none),
            or None if the question is blank and no request was made

        Raises:
            AskFailure: On network error, non-2xx status or invalid JSON
        """
        trimmed = (question or "").strip()
        if not trimmed:
            logger.debug("Ignoring blank question")
            return None

        try:
            response = self.session.post(
                self.ask_url,
                json={"question": trimmed},
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Ask request to {self.ask_url} failed: {e}")
            raise AskFailure(str(e)) from e

        if not response.ok:
            logger.error(f"Ask failed with status {response.status_code}")
            raise AskFailure(f"Ask failed with status {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Ask response is not valid JSON: {e}")
            raise AskFailure("Invalid JSON in ask response") from e

        answer = payload.get("answer") if isinstance(payload, dict) else None
        if not answer:
            logger.warning(f"Backend returned no answer for {trimmed!r}")
            return NO_ANSWER_FALLBACK

        logger.debug(f"Received answer ({len(str(answer))} chars) for {trimmed!r}")
        return str(answer)

    def _warn_on_duplicate_ids(self, reviews: List[ReviewRecord]) -> None:
        duplicates = [rid for rid, n in Counter(r.id for r in reviews).items() if n > 1]
        if duplicates:
            logger.warning(f"{len(duplicates)} duplicate review ids in response: {duplicates[:5]}")
