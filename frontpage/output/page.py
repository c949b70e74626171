from __future__ import annotations

from importlib import resources
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from ..errors import PageError
from ..utils.logging import get_logger

logger = get_logger("frontpage.output.page")

_PARSER = "html.parser"


class Page:
    """In-memory HTML document whose named containers can be rewritten.

    Renderers only ever write to the page; ``inner_html`` exists for tests
    and diagnostics.
    """

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @classmethod
    def from_string(cls, markup: str) -> "Page":
        return cls(BeautifulSoup(markup, _PARSER))

    @classmethod
    def from_file(cls, path: Path | str) -> "Page":
        template = Path(path)
        if not template.exists():
            raise PageError(f"Template not found: {template}")
        logger.debug("Loading page template from %s", template)
        return cls.from_string(template.read_text(encoding="utf-8"))

    @classmethod
    def default(cls) -> "Page":
        """Load the template bundled with the package."""
        markup = resources.files("frontpage").joinpath("templates/index.html").read_text(encoding="utf-8")
        return cls.from_string(markup)

    def _element(self, element_id: str) -> Tag:
        el = self._soup.find(id=element_id)
        if not isinstance(el, Tag):
            raise PageError(f"Element not found in page: #{element_id}", {"id": element_id})
        return el

    def has_element(self, element_id: str) -> bool:
        return isinstance(self._soup.find(id=element_id), Tag)

    def set_inner_html(self, element_id: str, markup: str) -> None:
        """Replace every child of the element with the parsed ``markup``."""
        el = self._element(element_id)
        fragment = BeautifulSoup(markup, _PARSER)
        el.clear()
        el.extend(list(fragment.contents))

    def set_text(self, element_id: str, text: str) -> None:
        el = self._element(element_id)
        el.clear()
        el.string = text

    def inner_html(self, element_id: str) -> str:
        return self._element(element_id).decode_contents()

    def render(self) -> str:
        return str(self._soup)
