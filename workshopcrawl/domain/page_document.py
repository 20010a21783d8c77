from typing import NamedTuple, Optional

from bs4 import BeautifulSoup, Tag


class PageDocument(NamedTuple):
    """A fetched page: the URL the server finally answered from and its parsed markup."""
    url: str
    soup: BeautifulSoup

    def select(self, selector: str) -> list:
        """Return all elements matching a CSS selector, in document order."""
        return self.soup.select(selector)

    def select_one(self, selector: str) -> Optional[Tag]:
        """Return the first element matching a CSS selector, or None."""
        return self.soup.select_one(selector)
