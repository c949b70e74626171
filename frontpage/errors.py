"""Exception hierarchy for page builds.

Every failure a load can hit derives from ``FrontPageError`` so the loader
can collapse them into the single on-page warning.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class FrontPageError(Exception):
    """Base exception carrying an optional context mapping for log output."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{ctx_str}]"
        return self.message


class ConfigError(FrontPageError):
    """Raised when configuration is missing or invalid."""


class TransportError(FrontPageError):
    """Raised when the upstream request fails before a body is received."""

    def __init__(self, message: str, url: str, context: Optional[Dict[str, Any]] = None) -> None:
        ctx = context or {}
        ctx["url"] = url
        super().__init__(message, ctx)
        self.url = url


class MalformedResponseError(FrontPageError):
    """Raised when a response body or article record has an unexpected shape."""


class NewsAPIError(FrontPageError):
    """Raised when the API answers with ``status: "error"``."""

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message, {"code": code} if code else None)
        self.code = code


class PageError(FrontPageError):
    """Raised when a page template lacks a required element."""
