import logging
from urllib.parse import parse_qs, urlparse

from workshopcrawl.domain.crawl_request import page_range
from workshopcrawl.exceptions import EntryParseError
from workshopcrawl.services.catalog_urls import CatalogUrls
from workshopcrawl.services.fetcher import Fetcher

logger = logging.getLogger(__name__)

ITEM_LINK_SELECTOR = "div.workshopBrowseItems > div a.ugc"


def parse_item_id(href: str) -> int:
    """Read the positive integer `id` query parameter of an item link."""
    if not href:
        raise EntryParseError(href, "missing href")
    try:
        query = urlparse(href).query
    except ValueError as e:
        raise EntryParseError(href, str(e)) from e
    values = parse_qs(query).get("id")
    if not values:
        raise EntryParseError(href, "no id parameter")
    raw = values[0].strip()
    if not (raw.isascii() and raw.isdigit()) or int(raw) <= 0:
        raise EntryParseError(href, f"id {raw!r} is not a positive integer")
    return int(raw)


class PaginationCrawler:
    """Visit catalog pages in ascending order and collect item ids.

    Fetch errors propagate and abort the whole crawl; a malformed entry is
    logged and skipped.
    """

    def __init__(self, fetcher: Fetcher, urls: CatalogUrls):
        self.fetcher = fetcher
        self.urls = urls

    def extract_item_ids(self, document) -> list[int]:
        ids = []
        for anchor in document.select(ITEM_LINK_SELECTOR):
            try:
                ids.append(parse_item_id(anchor.get("href")))
            except EntryParseError as e:
                logger.warning("Skipping entry on %s: %s", document.url, e)
        return ids

    def crawl(self, parent_id: str, start_page: int, end_page: int, total_pages: int) -> list[int]:
        pages = page_range(start_page, end_page, total_pages)
        identifiers: list[int] = []
        for page in pages:
            logger.info("Visiting page %d / %d", page, pages.stop - 1)
            document = self.fetcher.fetch(self.urls.page(parent_id, page))
            page_ids = self.extract_item_ids(document)
            logger.debug("Page %d yielded %d item ids", page, len(page_ids))
            identifiers.extend(page_ids)
        return identifiers
