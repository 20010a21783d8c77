"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from workshopcrawl import config as env
from workshopcrawl.services.catalog_urls import CatalogUrls
from workshopcrawl.services.catalog_validator import CatalogValidator
from workshopcrawl.services.crawl_executor import CrawlExecutor
from workshopcrawl.services.fetcher import PageFetcher
from workshopcrawl.services.http_service import HttpService
from workshopcrawl.services.pagination_crawler import PaginationCrawler
from workshopcrawl.services.rate_limiter import RateLimiter
from workshopcrawl.services.result_writer import ResultWriter


# Environment variables used by the container (read via `workshopcrawl.config` helpers).
#
# WORKSHOP_HOST (str, default: "steamcommunity.com")
#   Host serving the workshop browse pages.
#
# USER_AGENT (str, default: "WorkshopCrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Per-request timeout. The only timeout in a crawl.
#
# CRAWL_DELAY_MS (int milliseconds, default: 25)
#   Fixed politeness delay before every request. The CLI `--delay` overrides it.
#
# CRAWL_JITTER_MS (int milliseconds, default: 0)
#   Upper bound of the random extra delay. The CLI `--random-delay` overrides it.
#
# OUTPUT_DIR (str, default: ".")
#   Directory the result file is written to.
ENV = {
    "WORKSHOP_HOST": env.WORKSHOP_HOST,
    "USER_AGENT": env.USER_AGENT,
    "HTTP_TIMEOUT": env.HTTP_TIMEOUT,
    "CRAWL_DELAY_MS": env.CRAWL_DELAY_MS,
    "CRAWL_JITTER_MS": env.CRAWL_JITTER_MS,
    "OUTPUT_DIR": env.OUTPUT_DIR,
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for WorkshopCrawl."""

    config = providers.Configuration(default=ENV)

    catalog_urls = providers.Singleton(
        CatalogUrls,
        host=config.WORKSHOP_HOST.as_(str),
    )

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    rate_limiter = providers.Singleton(
        RateLimiter.from_milliseconds,
        delay_ms=config.CRAWL_DELAY_MS.as_(int),
        jitter_ms=config.CRAWL_JITTER_MS.as_(int),
    )

    page_fetcher = providers.Singleton(
        PageFetcher,
        http_service=http_service,
        rate_limiter=rate_limiter,
    )

    catalog_validator = providers.Singleton(
        CatalogValidator,
        fetcher=page_fetcher,
        urls=catalog_urls,
    )

    pagination_crawler = providers.Singleton(
        PaginationCrawler,
        fetcher=page_fetcher,
        urls=catalog_urls,
    )

    result_writer = providers.Singleton(
        ResultWriter,
        output_dir=config.OUTPUT_DIR.as_(str),
    )

    crawl_executor = providers.Factory(
        CrawlExecutor,
        catalog_validator=catalog_validator,
        pagination_crawler=pagination_crawler,
        result_writer=result_writer,
    )
