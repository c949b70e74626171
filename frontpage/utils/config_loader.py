from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional
from urllib.parse import urlparse

import yaml

from ..errors import ConfigError

DEFAULT_BASE_URL = "https://newsapi.org/v2"
DEFAULT_IMAGE = (
    "https://images.unsplash.com/photo-1504711434969-e33886168f5c"
    "?q=80&w=1000&auto=format&fit=crop"
)
DEFAULT_CONFIG_PATH = Path("config/frontpage.yaml")

# Region name -> element id in the page template
DEFAULT_CONTAINERS: Dict[str, str] = {
    "hero": "hero-container",
    "latest": "latest-news-grid",
    "tech": "tech-grid",
    "date": "current-date",
}

ALLOWED_KEYS = {"base_url", "country", "default_category", "default_image", "timeout", "containers"}


@dataclass(slots=True)
class Settings:
    """Resolved runtime configuration for one page build."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    country: str = "us"
    default_category: str = "general"
    default_image: str = DEFAULT_IMAGE
    timeout: float = 30.0
    containers: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_CONTAINERS))

    def container(self, region: str) -> str:
        return self.containers[region]


def _validate_url(value: object, key: str) -> str:
    url_str = str(value).strip()
    parsed = urlparse(url_str)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"Invalid URL '{url_str}' for '{key}'. Must be absolute http(s) URL.")
    return url_str


def _validate_timeout(value: object) -> float:
    try:
        timeout = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ConfigError(f"'timeout' must be a number, got {value!r}")
    if timeout <= 0:
        raise ConfigError(f"'timeout' must be positive, got {timeout}")
    return timeout


def _validate_containers(value: object) -> Dict[str, str]:
    if not isinstance(value, dict) or not all(isinstance(k, str) and isinstance(v, str) for k, v in value.items()):
        raise ConfigError("'containers' must be a mapping of string keys to string values if provided")
    unknown = set(value) - set(DEFAULT_CONTAINERS)
    if unknown:
        raise ConfigError(
            "Unknown containers: " + ", ".join(sorted(unknown)) + f". Allowed: {sorted(DEFAULT_CONTAINERS)}"
        )
    return {**DEFAULT_CONTAINERS, **{k: v.strip() for k, v in value.items()}}


def _read_yaml(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Top-level YAML value in {path} must be a mapping")
    return data


def load_settings(path: Path | str | None = None, *, env: Optional[Dict[str, str]] = None) -> Settings:
    """Load settings from an optional YAML file, then apply environment overrides.

    YAML structure (all keys optional):
      - base_url: http(s) URL of the API root
      - country: two-letter country code sent with every request
      - default_category: category used when none is given on the command line
      - default_image: http(s) URL used for articles without an image
      - timeout: per-request timeout in seconds
      - containers: mapping of hero/latest/tech/date to element ids

    The API key is read only from ``NEWSAPI_KEY``. An explicit ``path`` that
    does not exist is an error; the default path is skipped when absent.
    """
    env = os.environ if env is None else env

    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        data = _read_yaml(config_path)
    elif DEFAULT_CONFIG_PATH.exists():
        data = _read_yaml(DEFAULT_CONFIG_PATH)
    else:
        data = {}

    unknown = set(data) - ALLOWED_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}. Allowed: {sorted(ALLOWED_KEYS)}")

    api_key = (env.get("NEWSAPI_KEY") or "").strip()
    if not api_key:
        raise ConfigError("NEWSAPI_KEY not set; export it or add it to .env")

    base_url = env.get("NEWSAPI_BASE_URL") or data.get("base_url") or DEFAULT_BASE_URL
    default_image = env.get("FRONTPAGE_DEFAULT_IMAGE") or data.get("default_image") or DEFAULT_IMAGE
    timeout = env.get("FRONTPAGE_TIMEOUT") or data.get("timeout", 30.0)
    country = str(env.get("NEWSAPI_COUNTRY") or data.get("country") or "us").strip().lower()

    containers = dict(DEFAULT_CONTAINERS)
    if data.get("containers") is not None:
        containers = _validate_containers(data["containers"])

    return Settings(
        api_key=api_key,
        base_url=_validate_url(base_url, "base_url").rstrip("/"),
        country=country,
        default_category=str(data.get("default_category") or "general").strip(),
        default_image=_validate_url(default_image, "default_image"),
        timeout=_validate_timeout(timeout),
        containers=containers,
    )
