"""Markup for the page regions.

Each ``*_markup`` function is a pure article-list -> HTML string transform;
the matching ``render_*`` function writes it into its container with a
single assignment.
"""

from __future__ import annotations

from datetime import datetime
from html import escape
from typing import List, Optional, Sequence

from ..models import Article
from ..utils.config_loader import DEFAULT_CONTAINERS
from .formatting import format_calendar_date, format_long_date, time_ago, truncate
from .page import Page

HERO_CONTAINER = DEFAULT_CONTAINERS["hero"]
LATEST_CONTAINER = DEFAULT_CONTAINERS["latest"]
TECH_CONTAINER = DEFAULT_CONTAINERS["tech"]
DATE_CONTAINER = DEFAULT_CONTAINERS["date"]

HERO_SIZE = 4
LATEST_TITLE_LENGTH = 60
TECH_TITLE_LENGTH = 50

DESCRIPTION_PLACEHOLDER = "Click to read the full story on the source website."

_ARROW_ICON = (
    '<svg class="icon-arrow" xmlns="http://www.w3.org/2000/svg" width="20" height="20" viewBox="0 0 24 24">'
    '<path fill="#000000ff" d="M16.175 13H4v-2h12.175l-5.6-5.6L12 4l8 8l-8 8l-1.425-1.4l5.6-5.6Z"/></svg>'
)

ERROR_MARKUP = (
    '<div class="error-msg">'
    "<h3>⚠ Content could not be loaded</h3>"
    "<p>If you are running this page locally, make sure it is served from a "
    "<strong>Local Server</strong> (like VS Code Live Server). NewsAPI blocks "
    "direct file:// access and requires an API Key.</p>"
    "</div>"
)


def _image(article: Article, default_image: str, alt: str) -> str:
    src = article.url_to_image or default_image
    return f'<img src="{escape(src)}" alt="{alt}">'


def _link(article: Article, text: str) -> str:
    return f'<a href="{escape(article.url)}" target="_blank">{escape(text)}</a>'


def _meta(label: str, when: Optional[str] = None) -> str:
    when_html = f"<span>{escape(when)}</span>" if when is not None else ""
    return f'<div class="article-meta"><span class="category">{escape(label)}</span>{when_html}</div>'


def hero_markup(articles: Sequence[Article], *, default_image: str) -> str:
    main, side = articles[0], articles[1:HERO_SIZE]

    side_html = "".join(
        '<article class="side-article">'
        f"{_image(art, default_image, 'News')}"
        f"<div>{_meta(art.source_name)}<h3>{_link(art, art.title)}</h3></div>"
        "</article>"
        for art in side
    )

    return (
        '<article class="main-article">'
        f"{_image(main, default_image, 'Main News')}"
        f"{_meta(main.source_name, format_calendar_date(main.published_at))}"
        f"<h2>{_link(main, main.title)}</h2>"
        f'<p class="article-excerpt">{escape(main.description or DESCRIPTION_PLACEHOLDER)}</p>'
        f'<a href="{escape(main.url)}" target="_blank" class="read-more">Read More {_ARROW_ICON}</a>'
        "</article>"
        f'<aside class="side-articles">{side_html}</aside>'
    )


def latest_markup(articles: Sequence[Article], *, default_image: str, now: Optional[datetime] = None) -> str:
    return "".join(
        '<article class="news-card">'
        f"{_image(art, default_image, 'News')}"
        f"{_meta(art.source_name, time_ago(art.published_at, now))}"
        f'<h3 class="article-title">{_link(art, truncate(art.title, LATEST_TITLE_LENGTH))}</h3>'
        "</article>"
        for art in articles
    )


def tech_markup(articles: Sequence[Article], *, default_image: str) -> str:
    return "".join(
        '<article class="tech-card">'
        f"{_image(art, default_image, 'Tech News')}"
        f"{_meta('Technology', format_calendar_date(art.published_at))}"
        f'<h3 class="article-title">{_link(art, truncate(art.title, TECH_TITLE_LENGTH))}</h3>'
        "</article>"
        for art in articles
    )


def render_hero(
    page: Page,
    articles: Optional[List[Article]],
    *,
    default_image: str,
    container: str = HERO_CONTAINER,
) -> bool:
    """Write the featured story and three side stories.

    Leaves the container untouched when fewer than four articles are given.
    Returns whether the container was written.
    """
    if not articles or len(articles) < HERO_SIZE:
        return False
    page.set_inner_html(container, hero_markup(articles, default_image=default_image))
    return True


def render_latest(
    page: Page,
    articles: Optional[List[Article]],
    *,
    default_image: str,
    now: Optional[datetime] = None,
    container: str = LATEST_CONTAINER,
) -> bool:
    # An empty list is a valid, empty grid
    if articles is None:
        return False
    page.set_inner_html(container, latest_markup(articles, default_image=default_image, now=now))
    return True


def render_tech(
    page: Page,
    articles: Optional[List[Article]],
    *,
    default_image: str,
    container: str = TECH_CONTAINER,
) -> bool:
    if articles is None:
        return False
    page.set_inner_html(container, tech_markup(articles, default_image=default_image))
    return True


def render_error(page: Page, *, container: str = HERO_CONTAINER) -> None:
    """Replace the hero region with the load-failure warning."""
    page.set_inner_html(container, ERROR_MARKUP)


def render_current_date(page: Page, today: Optional[datetime] = None, *, container: str = DATE_CONTAINER) -> None:
    page.set_text(container, format_long_date(today or datetime.now()))
