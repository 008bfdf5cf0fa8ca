from __future__ import annotations

import logging
from typing import List

import requests

logger = logging.getLogger(__name__)

RANDOM_WORD_URL = "https://random-word-api.herokuapp.com/word"
FALLBACK_TEXT = "Failed to load random text. Please try again."


class WordFetchError(Exception):
    """Raised when the word service cannot supply usable text."""


class WordSource:
    """Fetches a line of random words to type from an HTTP word service.

    The service is expected to answer ``GET <url>?number=N`` with a JSON
    array of strings.
    """

    def __init__(self, url: str = RANDOM_WORD_URL, count: int = 20, timeout: float = 5.0) -> None:
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        self._url = url
        self._count = count
        self._timeout = timeout

    @property
    def url(self) -> str:
        return self._url

    @property
    def count(self) -> int:
        return self._count

    def fetch(self) -> str:
        """Return the fetched words joined by single spaces."""
        try:
            response = requests.get(self._url, params={"number": self._count}, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            raise WordFetchError(f"Could not fetch words from {self._url}: {e}") from e

        words = _validate_words(payload)
        logger.debug("Fetched %d words from %s", len(words), self._url)
        return " ".join(words)

    def fetch_text(self) -> str:
        """Like :meth:`fetch`, but returns :data:`FALLBACK_TEXT` on failure."""
        try:
            return self.fetch()
        except WordFetchError as e:
            logger.warning("Failed to fetch random text: %s", e)
            return FALLBACK_TEXT


def _validate_words(payload: object) -> List[str]:
    if not isinstance(payload, list):
        raise WordFetchError(f"expected a JSON list of words, got {type(payload).__name__}")
    words = [item.strip() for item in payload if isinstance(item, str) and item.strip()]
    if len(words) != len(payload):
        raise WordFetchError("word list contains non-string or blank entries")
    if not words:
        raise WordFetchError("word list is empty")
    return words
