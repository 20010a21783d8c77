from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from bs4 import BeautifulSoup

from workshopcrawl.domain.page_document import PageDocument
from workshopcrawl.exceptions import HttpFetchError
from workshopcrawl.services.http_service import HttpService
from workshopcrawl.services.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Fetch a URL and return its parsed document."""

    def fetch(self, url: str) -> PageDocument: ...


class PageFetcher:
    """Rate-limited fetcher that only accepts 2xx responses and parses them as HTML."""

    def __init__(
        self,
        http_service: HttpService,
        rate_limiter: RateLimiter,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self._http_service = http_service
        self._rate_limiter = rate_limiter
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def fetch(self, url: str) -> PageDocument:
        self._rate_limiter.wait()
        response = self._http_service.fetch(url)
        if response.status_code < 200 or response.status_code >= 300:
            raise HttpFetchError(url, f"unexpected status {response.status_code}")
        logger.debug("Fetched %s -> status %s (final url %s)", url, response.status_code, response.url)
        return PageDocument(response.url or url, self._soup_factory(response.text or ""))
