"""Sorting method enum for ordering sibling entries."""

from enum import Enum


class SortingMethod(str, Enum):
    """Single comparison rule that an EntryComparator can apply.

    Values:
        DIRECTORIES_FIRST: Directories before regular files
        EXTENSION: Case-insensitive order of file extensions
        SIZE: Ascending size in bytes
        LAST_MODIFIED: Ascending modification time
        ALPHABETICAL: Case-insensitive order of names
    """

    DIRECTORIES_FIRST = "directories_first"
    EXTENSION = "extension"
    SIZE = "size"
    LAST_MODIFIED = "last_modified"
    ALPHABETICAL = "alphabetical"
