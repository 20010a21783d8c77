"""Domain objects for WorkshopCrawl - explicit re-exports to satisfy linters."""
from .crawl_request import CrawlRequest as CrawlRequest
from .catalog_info import CatalogInfo as CatalogInfo
from .crawl_result import CrawlResult as CrawlResult
from .http_response import HttpResponse as HttpResponse
from .page_document import PageDocument as PageDocument

__all__ = ["CrawlRequest", "CatalogInfo", "CrawlResult", "HttpResponse", "PageDocument"]
