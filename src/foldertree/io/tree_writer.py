"""Persistence of rendered trees."""

import logging
from pathlib import Path

from foldertree.exceptions import TreeWriteError
from foldertree.types import PathType

logger = logging.getLogger(__name__)


def write_tree(text: str, destination: PathType) -> None:
    """Write rendered tree text to a file as UTF-8, replacing any existing content.

    Args:
        text: Rendered tree text.
        destination: File to write.

    Raises:
        TreeWriteError: If the file cannot be opened or written. The original
            OSError is chained as the cause.
    """
    path = Path(destination)
    try:
        with path.open("w", encoding="utf-8", newline="") as output:
            output.write(text)
    except OSError as e:
        logger.error("Error writing tree to [%s]", path.absolute())
        raise TreeWriteError(str(path), e.strerror or str(e)) from e
    logger.debug("Wrote %d characters to %s", len(text), path)
