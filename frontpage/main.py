"""Application entrypoint for the frontpage headline builder.

This script runs one page load:
1) load configuration
2) fetch the selected category and the technology strip
3) render the page (or the warning) and write it out
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigError, PageError
from .loader import FrontPageLoader
from .models import KNOWN_CATEGORIES
from .output import Page, render_current_date
from .utils.config_loader import load_settings
from .utils.logging import configure_logging, get_logger


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch top headlines from NewsAPI and render them into a static HTML page"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings file (YAML); defaults to config/frontpage.yaml when present",
    )
    parser.add_argument(
        "--template",
        default=None,
        help="HTML page to fill in; defaults to the bundled template",
    )
    parser.add_argument(
        "--output",
        default="-",
        help="Where to write the rendered page ('-' for stdout)",
    )
    parser.add_argument(
        "--category",
        default=None,
        help=f"Headline category for the hero and latest sections (e.g. {', '.join(KNOWN_CATEGORIES)})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (defaults to LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def write_page(page: Page, output: str) -> None:
    html = page.render()
    if output == "-":
        sys.stdout.write(html)
        return
    out_path = Path(output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(html, encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    logger = get_logger("frontpage.main")

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        logger.error("Failed to load configuration: %s", exc)
        return 1

    try:
        page = Page.from_file(args.template) if args.template else Page.default()
        missing = [eid for eid in settings.containers.values() if not page.has_element(eid)]
        if missing:
            raise PageError(f"Template lacks required element(s): {missing}")
        render_current_date(page, container=settings.container("date"))
    except PageError as exc:
        logger.error("Failed to prepare page template: %s", exc)
        return 1

    result = FrontPageLoader(settings, page).load(args.category)

    write_page(page, args.output)
    if args.output != "-":
        logger.info("Wrote page to %s", args.output)
    return 0 if result.ok else 1


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
