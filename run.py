import argparse
import logging
import sys
from typing import Optional

from workshopcrawl import config as env
from workshopcrawl.container import Container
from workshopcrawl.domain import CrawlRequest
from workshopcrawl.exceptions import HttpFetchError, ResultWriteError, UsageError, ValidationError

logger = logging.getLogger("workshopcrawl")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Collect every item id from a game's Steam Workshop and save them to '<id> - <name>.txt'.",
    )
    parser.add_argument("--game-id", "--gameID", dest="game_id", default="", help="ID of the game")
    parser.add_argument("--start-page", "--startPage", dest="start_page", type=int, default=1,
                        help="which workshop page to start at")
    parser.add_argument("--end-page", "--endPage", dest="end_page", type=int, default=0,
                        help="which workshop page to end at (0 = last page)")
    parser.add_argument("--delay", type=int, default=env.CRAWL_DELAY_MS,
                        help="delay before each request (in milliseconds)")
    parser.add_argument("--random-delay", "--randomDelay", dest="random_delay", type=int, default=env.CRAWL_JITTER_MS,
                        help="extra randomized delay added to --delay before each request (in milliseconds)")
    parser.add_argument("--output-dir", dest="output_dir", default=env.OUTPUT_DIR,
                        help="directory to write the result file into")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every request")
    return parser


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, env.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main(argv: Optional[list] = None, container: Optional[Container] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        request = CrawlRequest(
            parent_id=args.game_id,
            start_page=args.start_page,
            end_page=args.end_page,
            delay_ms=args.delay,
            jitter_ms=args.random_delay,
        )
    except UsageError as e:
        parser.error(str(e))

    container = container or Container()
    container.config.CRAWL_DELAY_MS.from_value(request.delay_ms)
    container.config.CRAWL_JITTER_MS.from_value(request.jitter_ms)
    container.config.OUTPUT_DIR.from_value(args.output_dir)
    executor = container.crawl_executor()

    try:
        result = executor.run(request)
    except ValidationError as e:
        logger.error("Problem: '%s' (%s)", e, "; ".join(e.reasons))
        return 1
    except HttpFetchError as e:
        logger.error("Crawl for game '%s' aborted: %s", request.parent_id, e)
        return 1

    try:
        path = executor.write(result)
    except ResultWriteError as e:
        logger.error("%s", e)
        return 1

    logger.info("File saved as '%s'", path.name)
    return 0


if __name__ == '__main__':
    sys.exit(main())
