import logging
from pathlib import Path

from workshopcrawl.domain.crawl_request import CrawlRequest
from workshopcrawl.domain.crawl_result import CrawlResult
from workshopcrawl.services.catalog_validator import CatalogValidator
from workshopcrawl.services.pagination_crawler import PaginationCrawler
from workshopcrawl.services.result_writer import ResultWriter, output_filename

logger = logging.getLogger(__name__)


class CrawlExecutor:
    """Runs one crawl session: validate the catalog, crawl its pages, then write the ids.

    Validation must succeed before any page is fetched. This class owns the
    control flow only; collaborators come from the DI layer.
    """

    def __init__(
        self,
        *,
        catalog_validator: CatalogValidator,
        pagination_crawler: PaginationCrawler,
        result_writer: ResultWriter,
    ):
        self.catalog_validator = catalog_validator
        self.pagination_crawler = pagination_crawler
        self.result_writer = result_writer

    def run(self, request: CrawlRequest) -> CrawlResult:
        info = self.catalog_validator.validate(request.parent_id)
        logger.info("found game '%s' (%d pages)", info.name, info.total_pages)

        pages = request.pages(info.total_pages)
        if not pages:
            logger.info("Start page %d is past last page %d; nothing to crawl", request.start_page, pages.stop - 1)

        identifiers = self.pagination_crawler.crawl(
            request.parent_id,
            request.start_page,
            request.end_page,
            info.total_pages,
        )
        pages_visited = len(pages)
        logger.info("Collected %d item ids from %d pages", len(identifiers), pages_visited)
        return CrawlResult(
            parent_id=request.parent_id,
            name=info.name,
            identifiers=tuple(identifiers),
            pages_visited=pages_visited,
        )

    def write(self, result: CrawlResult) -> Path:
        return self.result_writer.write(output_filename(result.parent_id, result.name), result.identifiers)

    def run_and_write(self, request: CrawlRequest) -> Path:
        return self.write(self.run(request))
