from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .errors import FrontPageError, MalformedResponseError, NewsAPIError
from .fetchers import NewsAPIClient, gather_all
from .output import Page, render_error, render_hero, render_latest, render_tech
from .utils.config_loader import Settings
from .utils.logging import get_logger

logger = get_logger("frontpage.loader")

TECH_CATEGORY = "technology"
TECH_PAGE_SIZE = 3
# Fixed window of the primary list shown in the latest grid
LATEST_SLICE = slice(4, 8)


@dataclass(slots=True)
class LoadResult:
    ok: bool
    error: Optional[Exception] = None


class FrontPageLoader:
    """Runs one page load: fetch, split, render, or fall back to the warning."""

    def __init__(self, settings: Settings, page: Page, *, client: Optional[NewsAPIClient] = None) -> None:
        self.settings = settings
        self.page = page
        self.client = client or NewsAPIClient(settings)

    def _fetch(self, category: str):
        return gather_all(
            lambda: self.client.top_headlines(category),
            lambda: self.client.top_headlines(TECH_CATEGORY, page_size=TECH_PAGE_SIZE),
        )

    def load(self, category: Optional[str] = None, *, now: Optional[datetime] = None) -> LoadResult:
        category = category or self.settings.default_category
        containers = self.settings.containers
        image = self.settings.default_image
        logger.info("Loading headlines for category %s", category)

        try:
            primary, tech = self._fetch(category)

            if primary.is_error:
                raise NewsAPIError(primary.message or "Unknown API error", primary.code)

            if primary.articles is None:
                raise MalformedResponseError("Headlines response has no article list", {"category": category})
            articles = primary.articles
            if tech.articles is None:
                logger.warning("Technology response carried no articles (status=%s): %s", tech.status, tech.message)

            render_hero(self.page, articles, default_image=image, container=containers["hero"])
            render_latest(
                self.page,
                articles[LATEST_SLICE],
                default_image=image,
                now=now,
                container=containers["latest"],
            )
            render_tech(self.page, tech.articles, default_image=image, container=containers["tech"])
        except FrontPageError as exc:
            logger.exception("Error fetching news: %s", exc)
            render_error(self.page, container=containers["hero"])
            return LoadResult(ok=False, error=exc)

        logger.info(
            "Rendered page: primary=%d article(s), tech=%d article(s)",
            len(articles),
            len(tech.articles or []),
        )
        return LoadResult(ok=True)
