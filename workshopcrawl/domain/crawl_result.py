"""Crawl result data model."""
from typing import NamedTuple, Tuple


class CrawlResult(NamedTuple):
    """Result of a completed crawl, handed to the result writer."""
    parent_id: str

    name: str
    """Resolved display name of the game"""

    identifiers: Tuple[int, ...]
    """Item ids in page-then-markup order; duplicates preserved"""

    pages_visited: int = 0
