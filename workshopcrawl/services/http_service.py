import requests
from typing import Callable

from workshopcrawl.domain.http_response import HttpResponse
from workshopcrawl.exceptions import HttpFetchError


class HttpService:
    """
    HTTP client wrapper for fetching web pages.

    Requires http_client callable for dependency injection, so tests can pass
    a mock instead of patching `requests`.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        """Fetch URL and return status code, body text, Content-Type and the final URL."""
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        # Extract Content-Type if response has headers; let real exceptions bubble up.
        ct = None
        if hasattr(resp, 'headers'):
            ct = resp.headers.get('Content-Type')

        final_url = getattr(resp, 'url', None) or url
        return HttpResponse(resp.status_code, resp.text, ct, final_url)
