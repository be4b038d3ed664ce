"""README metadata extraction.

Single Responsibility: Parse README text and extract portfolio fields.

Two conventions are understood. A YAML front matter block at the top of the
README is read first; element ids embedded in the README markup fill in any
field the front matter leaves out.
"""

import re
from typing import Any

import yaml
from bs4 import BeautifulSoup, Tag

from ..config import settings
from ..models import ReadmeMetadata
from ..utils.logging import get_logger

logger = get_logger(__name__)

FRONT_MATTER_PATTERN = re.compile(
    r"\A\ufeff?---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL
)


def split_technologies(value: str) -> tuple[str, ...]:
    """Split a comma-separated technology string into trimmed entries."""
    return tuple(segment.strip() for segment in value.split(",") if segment.strip())


def _clean_items(items: list[Any]) -> tuple[str, ...]:
    """Trim list entries, dropping nulls and blanks."""
    cleaned = (str(item).strip() for item in items if item is not None)
    return tuple(item for item in cleaned if item)


class ReadmeExtractor:
    """Extract title, technologies and links from README text.

    Never raises on malformed input: unmatched selectors yield empty values.
    """

    def __init__(
        self,
        title_id: str | None = None,
        techs_id: str | None = None,
        links_id: str | None = None,
    ) -> None:
        self.title_id = title_id or settings.title_marker_id
        self.techs_id = techs_id or settings.techs_marker_id
        self.links_id = links_id or settings.links_marker_id

    def extract(self, text: str) -> ReadmeMetadata:
        """Extract metadata from README text.

        Args:
            text: Raw README content

        Returns:
            ReadmeMetadata with front matter values taking precedence
        """
        front_matter, body = self._split_front_matter(text)
        soup = BeautifulSoup(body, "html.parser")

        title = self._front_matter_title(front_matter) or self._extract_title(soup)
        technologies = self._front_matter_technologies(front_matter)
        if technologies is None:
            technologies = self._extract_technologies(soup)
        links = self._front_matter_links(front_matter)
        if links is None:
            links = self._extract_links(soup)

        logger.debug(
            "Extracted title=%r, %d technologies, %d links",
            title,
            len(technologies),
            len(links),
        )
        return ReadmeMetadata(title=title, technologies=technologies, links=links)

    # -- Front matter -------------------------------------------------------

    def _split_front_matter(self, text: str) -> tuple[dict[str, Any], str]:
        """Separate a leading YAML block from the README body."""
        match = FRONT_MATTER_PATTERN.match(text)
        if not match:
            return {}, text

        try:
            data = yaml.safe_load(match.group(1))
        except yaml.YAMLError as e:
            logger.debug("Ignoring invalid front matter: %s", e)
            return {}, text

        # A rejected block stays part of the body so markers inside it are found
        if not isinstance(data, dict):
            return {}, text
        return data, text[match.end() :]

    def _front_matter_title(self, data: dict[str, Any]) -> str:
        value = data.get("title")
        return str(value).strip() if value is not None else ""

    def _front_matter_technologies(self, data: dict[str, Any]) -> tuple[str, ...] | None:
        value = data.get("technologies")
        if value is None:
            return None
        if isinstance(value, str):
            return split_technologies(value)
        if isinstance(value, list):
            return _clean_items(value)
        return None

    def _front_matter_links(self, data: dict[str, Any]) -> tuple[str, ...] | None:
        value = data.get("links")
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            return None
        return _clean_items(value)

    # -- Markup markers -----------------------------------------------------

    def _extract_title(self, soup: BeautifulSoup) -> str:
        element = soup.find(id=self.title_id)
        return element.get_text(strip=True) if element else ""

    def _extract_technologies(self, soup: BeautifulSoup) -> tuple[str, ...]:
        element = soup.find(id=self.techs_id)
        if not element:
            return ()
        return split_technologies(element.get_text())

    def _extract_links(self, soup: BeautifulSoup) -> tuple[str, ...]:
        container = soup.find(id=self.links_id)
        if not isinstance(container, Tag):
            return ()
        links = []
        for item in container.find_all("li"):
            text = item.get_text(strip=True)
            if text:
                links.append(text)
        return tuple(links)
