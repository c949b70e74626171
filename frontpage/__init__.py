"""Top-level package for the frontpage headline builder.

This package fetches top headlines from NewsAPI and renders them into the
named regions of a static HTML page.
"""

__all__ = []
