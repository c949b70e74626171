from __future__ import annotations

from typing import Dict, Optional

import requests

from ..errors import MalformedResponseError, TransportError
from ..models import HeadlinesResult
from ..utils.config_loader import Settings
from ..utils.logging import get_logger

logger = get_logger("frontpage.fetchers.newsapi")

_DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/127.0.0.0 Safari/537.36"
    )
}


class NewsAPIClient:
    """Thin client for the ``top-headlines`` endpoint."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @property
    def endpoint(self) -> str:
        return f"{self.settings.base_url}/top-headlines"

    def _params(self, category: str, page_size: Optional[int]) -> Dict[str, str]:
        params = {"country": self.settings.country, "category": category}
        if page_size is not None:
            params["pageSize"] = str(page_size)
        params["apiKey"] = self.settings.api_key
        return params

    def top_headlines(self, category: str, *, page_size: Optional[int] = None) -> HeadlinesResult:
        """Fetch one category of headlines.

        The body is decoded regardless of HTTP status because the API reports
        its own errors as JSON with a 4xx code; checking ``status`` is left to
        the caller.
        """
        logger.debug("Fetching top headlines: category=%s page_size=%s", category, page_size)
        try:
            resp = requests.get(
                self.endpoint,
                params=self._params(category, page_size),
                headers=_DEFAULT_HEADERS,
                timeout=self.settings.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Headlines request error for category %s: %s", category, exc)
            raise TransportError(f"Request failed: {exc}", self.endpoint, {"category": category}) from exc

        if resp.status_code >= 400:
            logger.warning("Headlines fetch returned HTTP %s for category %s", resp.status_code, category)

        try:
            payload = resp.json()
        except ValueError as exc:
            raise MalformedResponseError(
                "Response body is not valid JSON",
                {"category": category, "http_status": resp.status_code},
            ) from exc

        result = HeadlinesResult.from_api(payload)
        if result.articles is not None:
            logger.info("Fetched %d article(s) for category %s", len(result.articles), category)
        return result
