"""
image_search.py
===============
Cover art lookup through the Google Custom Search JSON API.

The game form asks for box art candidates for a title and platform and
lets the user pick one as the record's ``imageUrl``::

    GET https://www.googleapis.com/customsearch/v1
        ?key=<API_KEY>&cx=<ENGINE_ID>&q=<title platform box art>
        &searchType=image&num=10

Usage
-----
::

    client = ImageSearchClient(api_key="abc", engine_id="123")
    urls = client.search_box_art("Chrono Trigger", "Super Nintendo")
    # ["https://.../chrono-trigger-box.jpg", ...]
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from ..config.settings import ImageSearchConfig

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://www.googleapis.com/customsearch/v1"
_DEFAULT_TIMEOUT = 10  # seconds
# The API never returns more than 10 items per request
_MAX_RESULTS = 10


class ImageSearchError(Exception):
    """Raised when the image search request fails or returns garbage."""


class ImageSearchNotConfigured(ImageSearchError):
    """Raised when no API key or search engine id is available."""


class ImageSearchClient:
    """Minimal keyed image search client."""

    def __init__(
        self,
        api_key: Optional[str],
        engine_id: Optional[str],
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: int = _DEFAULT_TIMEOUT,
        max_results: int = _MAX_RESULTS,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Args:
            api_key:     Search API key.
            engine_id:   Custom search engine id (``cx``).
            endpoint:    Search endpoint URL.
            timeout:     HTTP request timeout in seconds.
            max_results: Number of candidates to request (1–10).
            session:     Optional requests session, mainly for tests.
        """
        self._api_key     = api_key
        self._engine_id   = engine_id
        self._endpoint    = endpoint
        self._timeout     = timeout
        self._max_results = max(1, min(max_results, _MAX_RESULTS))
        self._session     = session or requests.Session()

    @classmethod
    def from_config(cls, config: ImageSearchConfig) -> "ImageSearchClient":
        """Build a client from the image search settings."""
        return cls(
            api_key=config.resolved_api_key(),
            engine_id=config.engine_id,
            endpoint=config.endpoint,
            timeout=config.timeout,
            max_results=config.max_results,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key and self._engine_id)

    @staticmethod
    def build_query(title: str, platform: str) -> str:
        """Free-text query for a game's box art."""
        return " ".join(part.strip() for part in (title, platform, "box art") if part and part.strip())

    def search_box_art(self, title: str, platform: str) -> List[str]:
        """Return up to ``max_results`` candidate image URLs.

        Raises:
            ImageSearchNotConfigured: API key or engine id missing.
            ImageSearchError:         Network, HTTP or payload error.
        """
        if not self.is_configured:
            raise ImageSearchNotConfigured("Image search needs an API key and a search engine id")

        params: Dict[str, Any] = {
            "key":        self._api_key,
            "cx":         self._engine_id,
            "q":          self.build_query(title, platform),
            "searchType": "image",
            "num":        self._max_results,
        }
        try:
            resp = self._session.get(self._endpoint, params=params, timeout=self._timeout)
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as exc:
            logger.warning("Image search failed for %r: %s", params["q"], exc)
            raise ImageSearchError(f"Image search request failed: {exc}") from exc
        except ValueError as exc:
            logger.warning("Image search returned invalid JSON: %s", exc)
            raise ImageSearchError("Image search returned an invalid response") from exc

        if not isinstance(payload, dict):
            raise ImageSearchError("Image search returned an invalid response")

        urls: List[str] = []
        for item in payload.get("items") or []:
            link = item.get("link") if isinstance(item, dict) else None
            if link and link not in urls:
                urls.append(link)
            if len(urls) >= self._max_results:
                break

        logger.info("Image search for %r returned %d results", params["q"], len(urls))
        return urls
