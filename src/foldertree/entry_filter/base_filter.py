from abc import ABC, abstractmethod

from foldertree.types import PathType


class BaseEntryFilter(ABC):
    """
    Abstract base class defining the interface for entry filters.

    A filter answers a single question for the renderer: should this file or
    directory appear in the tree? Rejecting a directory removes its whole
    subtree. Implementations must be free of side effects so that rendering
    the same directory twice gives the same result.

    Example:
        >>> from foldertree.entry_filter.entry_filter import EntryFilter
        >>> name_filter = EntryFilter()
        >>> name_filter.add_excluded_extension("pyc")
        >>> name_filter.accept("module.pyc")
        False
        >>> name_filter.accept("module.py")
        True
    """

    @abstractmethod
    def accept(self, path: PathType) -> bool:
        """
        Decide whether an entry is included in the tree.

        Args:
            path: Path of the file or directory to check.

        Returns:
            bool: True to include the entry, False to leave it (and anything beneath it) out.
        """
        pass

    def has_rules(self) -> bool:
        """
        Report whether this filter can reject anything at all.

        Filters that are always active use this default. Configurable filters override it so
        callers can skip a filter that was never set up.

        Returns:
            bool: True if the filter has active rules.
        """
        return True
