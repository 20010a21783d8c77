import logging
from pathlib import Path
from typing import Iterable, Union

from workshopcrawl.exceptions import ResultWriteError

logger = logging.getLogger(__name__)


def output_filename(parent_id: str, name: str) -> str:
    """File name for a crawl's results; path separators in the game name become underscores."""
    safe_name = name.replace("/", "_").replace("\\", "_")
    return f"{parent_id} - {safe_name}.txt"


class ResultWriter:
    """Write item ids to a newline-delimited text file, truncating any previous contents."""

    def __init__(self, output_dir: Union[str, Path] = "."):
        self.output_dir = Path(output_dir)

    def write(self, sink_name: str, identifiers: Iterable[int]) -> Path:
        path = self.output_dir / sink_name
        count = 0
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                for identifier in identifiers:
                    f.write(f"{int(identifier)}\n")
                    count += 1
                f.flush()
        except OSError as e:
            raise ResultWriteError(path, e) from e
        logger.debug("Wrote %d ids to %s", count, path)
        return path
