"""
Thin HTTP client wrapper for ESPN scoreboard endpoints.

ESPN endpoints are unofficial: this client only fetches JSON. Shape handling lives in
wins_pool.payload so every caller navigates the document the same defensive way.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """A non-2xx (or failed) upstream response, carrying the HTTP status and URL."""

    def __init__(self, status: Optional[int], url: str) -> None:
        self.status = status
        self.url = url
        super().__init__(f"Fetch failed {status} for {url}")


class ESPNClient:
    """A minimal client for retrieving JSON from the ESPN scoreboard and the pool config."""

    def __init__(self, scoreboard_url: str, timeout: int = 10) -> None:
        """Store the scoreboard URL and build request headers."""
        self.scoreboard_url = scoreboard_url.rstrip("/")
        self.timeout = timeout
        self._headers = {"User-Agent": "nfl-wins-pool/1.0"}

    def fetch_json(self, url: str, params: Optional[Dict[str, str]] = None) -> Any:
        """
        Execute a GET request and return parsed JSON.

        No retries are attempted.

        Raises:
            FetchError on non-2xx responses and on transport failures.
        """
        logger.debug("GET %s params=%s", url, params)
        try:
            r = requests.get(url, params=params, timeout=self.timeout, headers=self._headers)
        except requests.RequestException as exc:
            raise FetchError(None, url) from exc

        if not r.ok:
            raise FetchError(r.status_code, r.url or url)
        return r.json()

    def scoreboard(self) -> Any:
        """Fetch the scoreboard root (calendar + current week)."""
        return self.fetch_json(self.scoreboard_url)

    def scoreboard_for_dates(self, date_range: str) -> Any:
        """Fetch scoreboard events for a compact YYYYMMDD-YYYYMMDD range."""
        return self.fetch_json(self.scoreboard_url, params={"dates": date_range})
