"""Size-based filtering of tree entries."""

import logging
from pathlib import Path
from typing import Union

from humanfriendly import parse_size

from foldertree.types import PathType

from .base_filter import BaseEntryFilter

logger = logging.getLogger(__name__)


def parse_file_size(size_str: str) -> int:
    """Parse human-readable file size to bytes.

    Args:
        size_str: Size string like '1GB', '500MB', '2.5K', or just '1024'

    Returns:
        Size in bytes

    Raises:
        ValueError: If size_str is not a valid size format
    """
    try:
        return int(parse_size(size_str))
    except Exception as e:
        raise ValueError(f"Invalid size format '{size_str}': {e}")


class SizeEntryFilter(BaseEntryFilter):
    """Filter that leaves out regular files above a size limit.

    Directories are always accepted, and so are files whose size cannot be
    read. Symlinks are followed, so a link is judged by the size of its
    target.

    Attributes:
        max_size_bytes (int): Largest accepted file size in bytes.

    Example:
        >>> SizeEntryFilter("1MB").max_size_bytes
        1000000
        >>> SizeEntryFilter("2 KiB").max_size_bytes
        2048
        >>> SizeEntryFilter(0).has_rules()
        False
    """

    def __init__(self, max_size: Union[str, int]):
        """Initialize the size filter.

        Args:
            max_size: Maximum file size. Either a human-readable string ('1GB', '500MB',
                '2.5K') or a number of bytes.

        Raises:
            ValueError: If max_size is negative, of the wrong type, or cannot be parsed.
        """
        if isinstance(max_size, bool):
            raise ValueError(f"max_size must be string or int, got {type(max_size)}")
        if isinstance(max_size, str):
            self.max_size_bytes = parse_file_size(max_size)
        elif isinstance(max_size, int):
            if max_size < 0:
                raise ValueError("Size cannot be negative")
            self.max_size_bytes = max_size
        else:
            raise ValueError(f"max_size must be string or int, got {type(max_size)}")

    def accept(self, path: PathType) -> bool:
        try:
            path_obj = Path(path)
            if not path_obj.is_file():
                return True
            return path_obj.stat().st_size <= self.max_size_bytes
        except OSError as e:
            logger.debug("Cannot read size of %s, keeping it: %s", path, e)
            return True

    def has_rules(self) -> bool:
        """Check whether a positive size limit is configured.

        A zero limit is treated as unset, matching how the CLI uses it.
        """
        return self.max_size_bytes > 0
