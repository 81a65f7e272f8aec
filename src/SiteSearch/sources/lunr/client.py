"""Search bundle client.

Reads the pre-built search bundle (serialized lunr index plus document
store) from a local path or an HTTP(S) URL.
"""

from __future__ import annotations

import json
import random
import time
from pathlib import Path
from typing import Any

import requests

from SiteSearch.core.errors import IndexLoadError
from SiteSearch.utils.log import log

DEFAULT_TIMEOUT = 30.0
MAX_ATTEMPTS = 3
BASE_PAUSE = 0.5
MAX_SLEEP = 4.0
RETRYABLE_STATUS = {429, 500, 502, 503, 504}

HEADERS = {
    "User-Agent": "sitesearch/0.1",
    "Accept": "application/json",
}


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class BundleClient:
    """Low-level reader for search bundle JSON documents."""

    def __init__(self) -> None:
        self._session = requests.Session()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> BundleClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def fetch(self, source: str, *, timeout: float | None = None) -> Any:
        """Return the decoded JSON payload found at ``source``.

        Args:
            source: Local file path or ``http(s)://`` URL.
            timeout: Request timeout in seconds for remote sources.

        Returns:
            Decoded JSON value.

        Raises:
            IndexLoadError: If the bundle cannot be read or is not valid JSON.
        """
        if is_remote(source):
            return self._fetch_remote(source, timeout=timeout or DEFAULT_TIMEOUT)
        return self._read_local(Path(source))

    def _read_local(self, path: Path) -> Any:
        log.debug("Reading search bundle: path=%s", path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as error:
            raise IndexLoadError(f"Cannot read search bundle {path}: {error}") from error
        try:
            return json.loads(text)
        except json.JSONDecodeError as error:
            raise IndexLoadError(f"Search bundle {path} is not valid JSON: {error}") from error

    def _fetch_remote(self, url: str, *, timeout: float) -> Any:
        log.debug("Fetching search bundle: url=%s", url)
        try:
            response = self._get_with_retry(url, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as error:
            raise IndexLoadError(f"Cannot fetch search bundle {url}: {error}") from error
        try:
            return response.json()
        except ValueError as error:
            raise IndexLoadError(f"Search bundle {url} is not valid JSON: {error}") from error

    def _get_with_retry(self, url: str, *, timeout: float) -> requests.Response:
        """Issue GET with retries for transient failures."""
        last_error: Exception | None = None
        for attempt in range(1, MAX_ATTEMPTS + 1):
            try:
                response = self._session.get(url, headers=HEADERS, timeout=timeout)
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
                    delay = min(BASE_PAUSE * (2 ** (attempt - 1)) + random.uniform(0, 0.2), MAX_SLEEP)
                    log.debug("Bundle retry attempt=%d/%d delay=%.2fs error=%s", attempt, MAX_ATTEMPTS, delay, error)
                    time.sleep(delay)

        assert last_error is not None
        raise last_error
