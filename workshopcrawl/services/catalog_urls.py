"""URL templates for the workshop browse pages."""
import re
from urllib.parse import quote

BROWSE_PATH = "/workshop/browse/"
SORT_QUERY = "browsesort=toprated&section=readytouseitems"


class CatalogUrls:
    def __init__(self, host: str = "steamcommunity.com"):
        self.host = host

    def canonical_prefix(self, parent_id: str) -> str:
        return f"https://{self.host}{BROWSE_PATH}?appid={quote(parent_id, safe='')}"

    def catalog_root(self, parent_id: str) -> str:
        return f"{self.canonical_prefix(parent_id)}&{SORT_QUERY}"

    def page(self, parent_id: str, page: int) -> str:
        return f"{self.catalog_root(parent_id)}&actualsort=toprated&p={page}"

    def is_canonical(self, url: str, parent_id: str) -> bool:
        """True if `url` is the browse page for exactly `parent_id`.

        The app id must be followed by another query parameter or the end of
        the URL, so `appid=10` does not match a request for `appid=1`.
        """
        if not url:
            return False
        pattern = "^" + re.escape(self.canonical_prefix(parent_id)) + "(&|$)"
        return re.match(pattern, url) is not None
