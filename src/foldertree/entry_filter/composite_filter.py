"""Composite filter for combining several entry filters."""

from typing import List, Sequence

from foldertree.types import PathType

from .base_filter import BaseEntryFilter


class CompositeEntryFilter(BaseEntryFilter):
    """Filter that accepts an entry only when every constituent filter accepts it.

    This is the logical AND of the constituent filters: any single rejection
    leaves the entry out of the tree. Filters are evaluated in the order they
    were given and evaluation stops at the first rejection.

    Attributes:
        filters (List[BaseEntryFilter]): Constituent filters.

    Example:
        >>> from foldertree.entry_filter.entry_filter import EntryFilter
        >>> from foldertree.entry_filter.size_filter import SizeEntryFilter
        >>> composite = CompositeEntryFilter([EntryFilter(excluded_extensions=["log"]), SizeEntryFilter("1MB")])
        >>> composite.accept("server.log")
        False
        >>> composite.get_filter_count()
        2
    """

    def __init__(self, filters: Sequence[BaseEntryFilter]):
        """Initialize the composite filter.

        Args:
            filters: Filters to combine. Each must implement BaseEntryFilter.

        Raises:
            ValueError: If filters is empty.
            TypeError: If any member does not implement BaseEntryFilter.
        """
        if not filters:
            raise ValueError("At least one entry filter must be provided")

        for i, entry_filter in enumerate(filters):
            if not isinstance(entry_filter, BaseEntryFilter):
                raise TypeError(f"Filter at index {i} must implement BaseEntryFilter, got {type(entry_filter)}")

        self.filters: List[BaseEntryFilter] = list(filters)

    def accept(self, path: PathType) -> bool:
        return all(entry_filter.accept(path) for entry_filter in self.filters)

    def has_rules(self) -> bool:
        return any(entry_filter.has_rules() for entry_filter in self.filters)

    def add_filter(self, entry_filter: BaseEntryFilter) -> None:
        """Append another filter to this composite.

        Raises:
            TypeError: If entry_filter does not implement BaseEntryFilter.
        """
        if not isinstance(entry_filter, BaseEntryFilter):
            raise TypeError(f"Filter must implement BaseEntryFilter, got {type(entry_filter)}")
        self.filters.append(entry_filter)

    def remove_filter(self, entry_filter: BaseEntryFilter) -> bool:
        """Remove a filter from this composite.

        Returns:
            True if the filter was found and removed, False if it wasn't in the composite.
        """
        try:
            self.filters.remove(entry_filter)
            return True
        except ValueError:
            return False

    def get_filter_count(self) -> int:
        return len(self.filters)

    def get_filters(self) -> List[BaseEntryFilter]:
        """Return a copy of the constituent filters."""
        return list(self.filters)
