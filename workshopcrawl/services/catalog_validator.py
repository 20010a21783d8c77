import logging
from typing import NamedTuple, Optional

from workshopcrawl.domain.catalog_info import CatalogInfo
from workshopcrawl.domain.page_document import PageDocument
from workshopcrawl.exceptions import HttpFetchError, ValidationError
from workshopcrawl.services.catalog_urls import CatalogUrls
from workshopcrawl.services.fetcher import Fetcher

logger = logging.getLogger(__name__)

NAME_SELECTOR = "div.apphub_AppName.ellipsis"
# The last paging control is the "next" arrow; the one before it is the highest page number.
PAGE_COUNT_SELECTOR = "div.workshopBrowsePagingControls > a:nth-last-child(2)"


class CatalogCheck(NamedTuple):
    """Outcome of the independent checks made against a catalog root page."""
    canonical_url: bool
    page_count_parsed: bool

    @property
    def ok(self) -> bool:
        return self.canonical_url and self.page_count_parsed

    def reasons(self) -> list[str]:
        out = []
        if not self.canonical_url:
            out.append("redirected away from the catalog browse page")
        if not self.page_count_parsed:
            out.append("page count could not be parsed")
        return out


def parse_page_count(text: str) -> Optional[int]:
    """Parse a paging control label such as "12" or "1,234"; None if it is not a page number."""
    cleaned = (text or "").strip().replace(",", "")
    if not (cleaned.isascii() and cleaned.isdigit()):
        return None
    return int(cleaned)


class CatalogValidator:
    """Resolve a game id to its catalog, extracting the display name and total page count."""

    def __init__(self, fetcher: Fetcher, urls: CatalogUrls):
        self.fetcher = fetcher
        self.urls = urls

    def _extract_name(self, document: PageDocument, parent_id: str) -> str:
        element = document.select_one(NAME_SELECTOR)
        if element is None:
            logger.warning("No display name found on catalog root for '%s'", parent_id)
            return ""
        return element.get_text(strip=True)

    def _extract_total_pages(self, document: PageDocument) -> tuple[int, bool]:
        """Return (total_pages, parsed_ok). A missing control means a single page."""
        element = document.select_one(PAGE_COUNT_SELECTOR)
        if element is None:
            return 0, True
        text = element.get_text()
        pages = parse_page_count(text)
        if pages is None:
            logger.warning("Error parsing page integer from %r", text)
            return 0, False
        return pages, True

    def validate(self, parent_id: str) -> CatalogInfo:
        url = self.urls.catalog_root(parent_id)
        try:
            document = self.fetcher.fetch(url)
        except HttpFetchError as e:
            raise ValidationError(parent_id, [f"catalog root unreachable: {e}"]) from e

        canonical = self.urls.is_canonical(document.url, parent_id)
        if not canonical:
            logger.warning("Catalog root for '%s' resolved to %s", parent_id, document.url)
        name = self._extract_name(document, parent_id)
        total_pages, parsed = self._extract_total_pages(document)

        check = CatalogCheck(canonical_url=canonical, page_count_parsed=parsed)
        if not check.ok:
            raise ValidationError(parent_id, check.reasons())
        return CatalogInfo(name=name, total_pages=total_pages)
