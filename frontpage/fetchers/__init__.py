"""Upstream fetching layer: the headlines client and the fan-out helper."""

from .gather import gather_all
from .newsapi import NewsAPIClient

__all__ = ["gather_all", "NewsAPIClient"]
