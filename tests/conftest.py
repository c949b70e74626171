from datetime import datetime, timedelta, timezone

import pytest

from frontpage.output import Page
from frontpage.utils.config_loader import Settings

DEFAULT_IMAGE = "https://img.example.com/default.jpg"
NOW = datetime(2026, 10, 17, 12, 0, 0, tzinfo=timezone.utc)

PAGE_HTML = """<html><body>
<p id="current-date"></p>
<section id="hero-container"><p class="loading">Loading</p></section>
<div id="latest-news-grid"><p>stale latest</p></div>
<div id="tech-grid"><p>stale tech</p></div>
</body></html>"""


def make_record(i: int, *, image: bool = True, description: bool = True, age: timedelta = timedelta(hours=2)) -> dict:
    published = (NOW - age).strftime("%Y-%m-%dT%H:%M:%SZ")
    return {
        "source": {"id": None, "name": f"Source {i}"},
        "author": "Reporter",
        "title": f"Headline number {i}",
        "description": f"Description {i}" if description else None,
        "url": f"https://news.example.com/story-{i}",
        "urlToImage": f"https://img.example.com/{i}.jpg" if image else None,
        "publishedAt": published,
        "content": None,
    }


def make_payload(count: int, **kwargs) -> dict:
    return {
        "status": "ok",
        "totalResults": count,
        "articles": [make_record(i, **kwargs) for i in range(count)],
    }


@pytest.fixture
def settings():
    return Settings(
        api_key="test-key",
        base_url="https://newsapi.example.com/v2",
        default_image=DEFAULT_IMAGE,
        timeout=5.0,
    )


@pytest.fixture
def page():
    return Page.from_string(PAGE_HTML)
