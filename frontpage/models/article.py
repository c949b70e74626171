from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from ..errors import MalformedResponseError
from ..utils.logging import get_logger

logger = get_logger("frontpage.models.article")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _optional_timestamp(value: Any) -> Optional[datetime]:
    if not value:
        return None
    try:
        return parse_timestamp(str(value))
    except ValueError:
        logger.warning("Unparseable publishedAt %r; rendering without a date", value)
        return None


@dataclass(slots=True)
class Article:
    title: str
    url: str
    source_name: str
    # None when the record had no usable timestamp
    published_at: Optional[datetime] = None
    description: Optional[str] = None
    url_to_image: Optional[str] = None

    @classmethod
    def from_api(cls, record: Mapping[str, Any]) -> "Article":
        """Build an article from one entry of the ``articles`` array.

        Missing or odd field values degrade to empty text or ``None`` so a
        single bad record never fails the page; only a record that is not an
        object at all is rejected.
        """
        if not isinstance(record, Mapping):
            raise MalformedResponseError(f"Article record must be an object, got {type(record).__name__}")

        source = record.get("source") or {}
        source_name = source.get("name") if isinstance(source, Mapping) else None

        return cls(
            title=str(record.get("title") or ""),
            url=str(record.get("url") or ""),
            source_name=str(source_name or ""),
            published_at=_optional_timestamp(record.get("publishedAt")),
            # empty strings fall back the same way missing values do
            description=record.get("description") or None,
            url_to_image=record.get("urlToImage") or None,
        )
