from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from ..errors import MalformedResponseError
from .article import Article

# Upstream-defined headline categories. Not enforced locally.
KNOWN_CATEGORIES: Tuple[str, ...] = (
    "business",
    "entertainment",
    "general",
    "health",
    "science",
    "sports",
    "technology",
)


@dataclass(slots=True)
class HeadlinesResult:
    """Decoded ``top-headlines`` response body."""

    status: str
    message: Optional[str] = None
    code: Optional[str] = None
    total_results: Optional[int] = None
    # None when the body carried no article list (error payloads)
    articles: Optional[List[Article]] = None

    @property
    def is_error(self) -> bool:
        return self.status == "error"

    @classmethod
    def from_api(cls, payload: Any) -> "HeadlinesResult":
        if not isinstance(payload, Mapping):
            raise MalformedResponseError(f"Response body must be a JSON object, got {type(payload).__name__}")

        status = str(payload.get("status") or "")
        raw_articles = payload.get("articles")
        articles: Optional[List[Article]] = None
        # Error payloads are not inspected further; the caller decides what to do
        if raw_articles is not None and status != "error":
            if not isinstance(raw_articles, list):
                raise MalformedResponseError("'articles' must be a list", {"status": status})
            articles = [Article.from_api(item) for item in raw_articles]

        total = payload.get("totalResults")
        return cls(
            status=status,
            message=payload.get("message"),
            code=payload.get("code"),
            total_results=int(total) if isinstance(total, int) else None,
            articles=articles,
        )
