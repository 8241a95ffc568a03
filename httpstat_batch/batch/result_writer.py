"""Append-only writes of comment lines to the results file."""
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Union

from .constants import BatchConstants


# Configure logging
logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now().astimezone().strftime("%a %b %d %H:%M:%S %Z %Y")


class ResultWriter:
    """Writes header and failure comment lines. The file is only ever opened for append."""

    def __init__(self, output_file: Union[Path, str], clock: Callable[[], str] = _timestamp):
        self.output_file = Path(output_file)
        self.clock = clock

    def write_header(self) -> None:
        """Append the results file header."""
        date = self.clock()
        self._append_comments([line.format(date=date) for line in BatchConstants.HEADER_LINES])

    def record_failure(self, endpoint: str, iteration: int) -> None:
        """Append a comment noting a failed probe."""
        message = BatchConstants.FAILURE_LINE.format(iteration=iteration, endpoint=endpoint, date=self.clock())
        self._append_comments([message])
        logger.debug(message)

    def _append_comments(self, lines) -> None:
        with open(self.output_file, 'a', encoding='utf-8') as f:
            f.write("".join(f"{BatchConstants.COMMENT_PREFIX} {line}\n" for line in lines))
