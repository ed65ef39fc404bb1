"""Dataset client: reads the catalog JSON from disk or over HTTP."""

from __future__ import annotations

import random
import time
from pathlib import Path

import requests

from VipFinder.utils.log import log

DEFAULT_TIMEOUT = 30.0
MAX_ATTEMPTS = 4
BASE_PAUSE = 0.8
MAX_SLEEP = 8.0
RETRYABLE_STATUS = {429, 500, 502, 503, 504}

HEADERS = {
    "User-Agent": "vip-finder/0.1",
    "Accept": "application/json",
}


def is_remote(source: str) -> bool:
    """Return True when ``source`` is an HTTP(S) URL."""
    return source.lower().startswith(("http://", "https://"))


class DatasetClient:
    """Fetch the raw dataset document once, from a path or a URL."""

    def __init__(self, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout
        self._session = requests.Session()

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> DatasetClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def fetch_text(self, source: str) -> str:
        """Return the dataset text.

        Args:
            source: Local file path or ``http(s)://`` URL.

        Returns:
            Document text.

        Raises:
            OSError: If a local file cannot be read.
            UnicodeDecodeError: If a local file is not UTF-8.
            requests.RequestException: If the HTTP fetch fails after retries.
        """
        if not is_remote(source):
            path = Path(source)
            log.debug("Reading dataset file %s", path)
            return path.read_text(encoding="utf-8")

        response = self._get_with_retry(source)
        response.raise_for_status()
        return response.text

    def _get_with_retry(self, url: str) -> requests.Response:
        """Issue GET with retries for transient failures."""
        last_error: Exception | None = None
        for attempt in range(1, MAX_ATTEMPTS + 1):
            try:
                response = self._session.get(url, headers=HEADERS, timeout=self.timeout)
                if response.status_code in RETRYABLE_STATUS:
                    raise requests.HTTPError(f"HTTP {response.status_code}", response=response)
                return response
            except (requests.Timeout, requests.ConnectionError, requests.HTTPError) as error:
                last_error = error
                if isinstance(error, requests.HTTPError):
                    status_code = getattr(error.response, "status_code", None)
                    if status_code not in RETRYABLE_STATUS:
                        raise
                if attempt < MAX_ATTEMPTS:
                    delay = min(BASE_PAUSE * (2 ** (attempt - 1)) + random.uniform(0, 0.3), MAX_SLEEP)
                    log.debug("Dataset retry attempt=%d/%d delay=%.2fs error=%s", attempt, MAX_ATTEMPTS, delay, error)
                    time.sleep(delay)

        assert last_error is not None
        raise last_error
