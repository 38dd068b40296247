"""Configurable comparator for ordering sibling entries.

The comparator holds an ordered, duplicate-free list of sorting methods and
a reverse flag. Each sorting method maps to a pure three-way comparison over
two paths.

Combination rule:
    Every configured method is evaluated in list order and the result of the
    LAST one is returned. Earlier methods do not short-circuit. This is not
    the usual "first non-zero wins" chaining. ``[DIRECTORIES_FIRST,
    ALPHABETICAL]`` therefore orders purely by name. Callers that need a
    primary key must put it last.

With no methods configured every pair compares equal, so a stable sort
keeps the order the entries were listed in.
"""

import functools
import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from foldertree.entry import entry_mtime, entry_name, entry_size, extension_of, is_directory
from foldertree.types import PathType

from .sorting_method import SortingMethod

logger = logging.getLogger(__name__)


def _three_way(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def compare_directories_first(left: PathType, right: PathType) -> int:
    """Order directories before anything else.

    Returns:
        -1 if only ``left`` is a directory, 1 if only ``right`` is, 0 otherwise.
    """
    left_is_dir = is_directory(left)
    right_is_dir = is_directory(right)
    if left_is_dir and not right_is_dir:
        return -1
    if not left_is_dir and right_is_dir:
        return 1
    return 0


def compare_alphabetical(left: PathType, right: PathType) -> int:
    return _three_way(entry_name(left).lower(), entry_name(right).lower())


def compare_extension(left: PathType, right: PathType) -> int:
    return _three_way(extension_of(entry_name(left)).lower(), extension_of(entry_name(right)).lower())


def compare_last_modified(left: PathType, right: PathType) -> int:
    return _three_way(entry_mtime(left), entry_mtime(right))


def compare_size(left: PathType, right: PathType) -> int:
    return _three_way(entry_size(left), entry_size(right))


COMPARISONS: Dict[SortingMethod, Callable[[PathType, PathType], int]] = {
    SortingMethod.DIRECTORIES_FIRST: compare_directories_first,
    SortingMethod.ALPHABETICAL: compare_alphabetical,
    SortingMethod.EXTENSION: compare_extension,
    SortingMethod.LAST_MODIFIED: compare_last_modified,
    SortingMethod.SIZE: compare_size,
}


class EntryComparator:
    """Comparator for filesystem entries with a configurable list of sorting methods.

    Adding a method that is already configured, or inserting at a negative
    position, logs a warning and leaves the list unchanged. Inserting past
    the end logs a warning and appends.

    Attributes:
        reverse (bool): Negate every comparison result.

    Example:
        >>> comparator = EntryComparator([SortingMethod.ALPHABETICAL])
        >>> comparator.compare("beta.txt", "Alpha.txt")
        1
        >>> sorted(["b.txt", "C.txt", "a.txt"], key=comparator.sort_key())
        ['a.txt', 'b.txt', 'C.txt']
        >>> comparator.reverse = True
        >>> comparator.compare("beta.txt", "Alpha.txt")
        -1
    """

    def __init__(self, sorting_methods: Optional[Iterable[SortingMethod]] = None, reverse: bool = False) -> None:
        """Initialize the comparator.

        Args:
            sorting_methods: Methods to append in order. Duplicates are skipped with a warning.
            reverse: Whether to negate the comparison result. Defaults to False.
        """
        self._sorting_methods: List[SortingMethod] = []
        self.reverse = reverse
        if sorting_methods is not None:
            self.add_all_sorting_methods(list(sorting_methods))

    @property
    def sorting_methods(self) -> Tuple[SortingMethod, ...]:
        return tuple(self._sorting_methods)

    def compare(self, left: PathType, right: PathType) -> int:
        """Compare two entries using the configured sorting methods.

        Args:
            left: First entry.
            right: Second entry.

        Returns:
            Negative, zero or positive, from the last configured method (see module docs),
            negated when ``reverse`` is set.
        """
        result = 0
        if self._sorting_methods:
            for method in self._sorting_methods:
                comparison = COMPARISONS.get(method)
                if comparison is None:
                    logger.warning("Sorting method [%s] is not defined", method)
                    continue
                result = comparison(left, right)
        else:
            result = self.compare_default(left, right)
        return -result if self.reverse else result

    def compare_default(self, left: PathType, right: PathType) -> int:
        """Comparison used when no sorting methods are configured.

        Always returns 0, leaving entries in the order they were listed.
        """
        return 0

    def sort_key(self) -> Callable[[PathType], Any]:
        """Return a key function for ``sorted`` built from :meth:`compare`."""
        return functools.cmp_to_key(self.compare)

    def add_sorting_method(self, method: SortingMethod, position: Optional[int] = None) -> None:
        """Add a sorting method, at the end or at a given position.

        Args:
            method: Sorting method to add.
            position: Index to insert at. None appends. Positions at or past the end append
                with a warning; negative positions are rejected with a warning.
        """
        if position is None:
            self.add_last(method)
        elif method in self._sorting_methods:
            self._warn_duplicate(method)
        elif position < 0:
            logger.warning("The position can not be negative: %d", position)
        else:
            if position >= len(self._sorting_methods):
                logger.warning("The position %d is out of bounds, adding [%s] last", position, _label(method))
                self._sorting_methods.append(method)
            else:
                self._sorting_methods.insert(position, method)
            logger.info("Sorting method [%s] added", _label(method))

    def add_last(self, method: SortingMethod) -> None:
        if method in self._sorting_methods:
            self._warn_duplicate(method)
        else:
            self._sorting_methods.append(method)
            logger.info("Sorting method [%s] added", _label(method))

    def add_all_sorting_methods(
        self, methods: Union[Iterable[SortingMethod], Mapping[SortingMethod, Optional[int]]]
    ) -> None:
        """Add several sorting methods.

        Args:
            methods: Either an ordered iterable of methods, each appended in turn, or a
                mapping of method to target position, inserted in mapping order. Mapping
                entries whose position is None or negative are skipped.
        """
        if isinstance(methods, Mapping):
            for method, position in methods.items():
                if position is not None and position >= 0:
                    self.add_sorting_method(method, position)
        else:
            for method in methods:
                self.add_last(method)

    def set_reverse(self, reverse: bool) -> None:
        self.reverse = reverse

    def _warn_duplicate(self, method: SortingMethod) -> None:
        index = self._sorting_methods.index(method)
        logger.warning("The sorting method [%s] already exists at position %d", _label(method), index)


def _label(method: Any) -> str:
    return method.name if isinstance(method, SortingMethod) else str(method)
