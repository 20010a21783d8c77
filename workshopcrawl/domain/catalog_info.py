"""Catalog metadata discovered on the catalog root page."""
from typing import NamedTuple


class CatalogInfo(NamedTuple):
    name: str
    """Display name of the game; empty when the name container is missing"""

    total_pages: int
    """Number of catalog pages; 0 when there are no paging controls"""
