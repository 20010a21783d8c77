"""Custom exceptions for WorkshopCrawl services."""

from typing import Sequence, Union


class UsageError(ValueError):
    """Raised when invocation parameters are missing or invalid."""


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors or a non-2xx status."""

    def __init__(self, url: str, original: Union[Exception, str]):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class ValidationError(Exception):
    """Raised when a catalog root does not resolve to the requested game."""

    def __init__(self, parent_id: str, reasons: Sequence[str] = ()):
        self.parent_id = parent_id
        self.reasons = tuple(reasons)
        super().__init__(f"could not find catalog for identifier '{parent_id}'")


class EntryParseError(Exception):
    """Raised when a single catalog entry link carries no usable item id."""

    def __init__(self, href: str, reason: str):
        self.href = href
        self.reason = reason
        super().__init__(f"Could not parse item id from {href!r}: {reason}")


class ResultWriteError(Exception):
    """Raised when the output file cannot be created or written."""

    def __init__(self, path, original: Exception):
        self.path = path
        self.original = original
        super().__init__(f"Could not write results to '{path}': {original}")
