# catalog/search_client.py
from __future__ import annotations

import logging
from typing import Optional

import requests

from core.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT
from core.errors import MalformedResponseError, NetworkError
from core.record import get_in

logger = logging.getLogger(__name__)

ITEMS_PATH = ("tracks", "items")


class SearchClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: float = 15.0,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": user_agent})

    @classmethod
    def from_config(cls, config) -> "SearchClient":
        return cls(base_url=config.base_url, timeout_s=config.timeout_s, user_agent=config.user_agent)

    def search(self, term: str) -> list[dict]:
        # GET /search?type=track&q=...  (requests does the URL encoding)
        params = {"type": "track", "q": term}
        logger.debug("Searching catalog for %r", term)
        try:
            r = self.session.get(f"{self.base_url}/search", params=params, timeout=self.timeout_s)
            r.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"Search request failed: {e}") from e

        try:
            data = r.json()
        except ValueError as e:
            raise MalformedResponseError("Search response is not JSON") from e

        items = get_in(data, ITEMS_PATH)
        if not isinstance(items, list):
            raise MalformedResponseError("Search response has no tracks.items list")

        logger.debug("Catalog returned %d tracks for %r", len(items), term)
        return items
