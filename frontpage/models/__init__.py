"""Typed models used across the application."""

from .article import Article, parse_timestamp
from .headlines import KNOWN_CATEGORIES, HeadlinesResult

__all__ = ["Article", "parse_timestamp", "HeadlinesResult", "KNOWN_CATEGORIES"]
