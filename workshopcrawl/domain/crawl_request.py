from __future__ import annotations

from dataclasses import dataclass

from workshopcrawl.exceptions import UsageError


def page_range(start_page: int, end_page: int, total_pages: int) -> range:
    """Pages a crawl visits: `start_page` up to `end_page`, or up to `total_pages` when `end_page` is 0."""
    last_page = end_page if end_page > 0 else total_pages
    return range(start_page, last_page + 1)


@dataclass(frozen=True)
class CrawlRequest:
    """Immutable input for one crawl session.

    `end_page` of 0 means "crawl up to the discovered total page count".
    """

    parent_id: str
    start_page: int = 1
    end_page: int = 0
    delay_ms: int = 25
    jitter_ms: int = 0

    def __post_init__(self):
        parent_id = (self.parent_id or "").strip()
        if parent_id == "":
            raise UsageError("the game ID is required")
        object.__setattr__(self, "parent_id", parent_id)
        if self.start_page < 1:
            raise UsageError(f"start page must be at least 1, got {self.start_page}")
        if self.end_page < 0:
            raise UsageError(f"end page must not be negative, got {self.end_page}")
        if self.delay_ms < 0:
            raise UsageError(f"delay must not be negative, got {self.delay_ms}")
        if self.jitter_ms < 0:
            raise UsageError(f"random delay must not be negative, got {self.jitter_ms}")

    def effective_end_page(self, total_pages: int) -> int:
        return self.pages(total_pages).stop - 1

    def pages(self, total_pages: int) -> range:
        return page_range(self.start_page, self.end_page, total_pages)
