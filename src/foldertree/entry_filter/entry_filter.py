"""Name and extension based filtering of tree entries."""

from typing import FrozenSet, Iterable, Optional, Set

from foldertree.entry import entry_name, extension_of, is_directory
from foldertree.types import PathType

from .base_filter import BaseEntryFilter


def _normalize_extension(extension: str) -> str:
    extension = extension.lower()
    if extension.startswith("."):
        extension = extension[1:]
    return extension


class EntryFilter(BaseEntryFilter):
    """Filter that includes or excludes entries by file name and extension.

    Four optional rule sets drive the decision:

    - included_extensions: files with these extensions are accepted
    - excluded_extensions: files with these extensions are rejected
    - included_files: exact file names that survive an extension exclusion
    - excluded_files: exact names that are rejected even when their extension is included

    A rule set that was never configured is ``None`` and takes no part in the
    decision. This is different from an empty set, which is active but
    matches nothing. Sets are created on first addition.

    Extensions are stored lowercased without a leading dot and match
    case-insensitively. File names match exactly.

    Directories are accepted unless their name is in ``excluded_files``;
    extension rules and ``included_files`` never apply to them.

    Example:
        >>> entry_filter = EntryFilter(included_extensions=["py"], excluded_files=["setup.py"])
        >>> entry_filter.accept("main.PY")
        True
        >>> entry_filter.accept("setup.py")
        False
        >>> entry_filter.accept("README")
        True
        >>> entry_filter.excluded_extensions is None
        True
    """

    def __init__(
        self,
        included_extensions: Optional[Iterable[str]] = None,
        excluded_extensions: Optional[Iterable[str]] = None,
        included_files: Optional[Iterable[str]] = None,
        excluded_files: Optional[Iterable[str]] = None,
    ) -> None:
        """Initialize the filter.

        Args:
            included_extensions: Extensions to include. None leaves the rule unset.
            excluded_extensions: Extensions to exclude. None leaves the rule unset.
            included_files: File names that override an extension exclusion.
            excluded_files: File or directory names that are always rejected.
        """
        self._included_extensions: Optional[Set[str]] = None
        self._excluded_extensions: Optional[Set[str]] = None
        self._included_files: Optional[Set[str]] = None
        self._excluded_files: Optional[Set[str]] = None

        if included_extensions is not None:
            self.add_included_extensions(included_extensions)
        if excluded_extensions is not None:
            self.add_excluded_extensions(excluded_extensions)
        if included_files is not None:
            self.add_included_files(included_files)
        if excluded_files is not None:
            self.add_excluded_files(excluded_files)

    def accept(self, path: PathType) -> bool:
        """Decide whether an entry is included.

        For regular files the rules are checked in this order:

        1. An included extension accepts the file, unless its exact name is excluded.
        2. Otherwise an excluded extension rejects it, unless its exact name is included.
        3. Otherwise the file is accepted.

        Args:
            path: File or directory to check.

        Returns:
            True if the entry is accepted, False otherwise.
        """
        name = entry_name(path)
        if is_directory(path):
            return not (self._excluded_files is not None and name in self._excluded_files)

        extension = extension_of(name).lower()

        if self._included_extensions is not None and extension in self._included_extensions:
            if self._excluded_files is not None and name in self._excluded_files:
                return False
            return True
        elif self._excluded_extensions is not None and extension in self._excluded_extensions:
            if self._included_files is not None and name in self._included_files:
                return True
            return False
        return True

    def has_rules(self) -> bool:
        return any(
            rules is not None
            for rules in (
                self._included_extensions,
                self._excluded_extensions,
                self._included_files,
                self._excluded_files,
            )
        )

    @property
    def included_extensions(self) -> Optional[FrozenSet[str]]:
        return None if self._included_extensions is None else frozenset(self._included_extensions)

    @property
    def excluded_extensions(self) -> Optional[FrozenSet[str]]:
        return None if self._excluded_extensions is None else frozenset(self._excluded_extensions)

    @property
    def included_files(self) -> Optional[FrozenSet[str]]:
        return None if self._included_files is None else frozenset(self._included_files)

    @property
    def excluded_files(self) -> Optional[FrozenSet[str]]:
        return None if self._excluded_files is None else frozenset(self._excluded_files)

    def add_included_extension(self, extension: str) -> None:
        self.add_included_extensions([extension])

    def add_excluded_extension(self, extension: str) -> None:
        self.add_excluded_extensions([extension])

    def add_included_file(self, name: str) -> None:
        self.add_included_files([name])

    def add_excluded_file(self, name: str) -> None:
        self.add_excluded_files([name])

    def add_included_extensions(self, extensions: Iterable[str]) -> None:
        """Add extensions to the included set, creating the set if needed.

        Args:
            extensions: Extensions with or without a leading dot, in any case.
        """
        if self._included_extensions is None:
            self._included_extensions = set()
        self._included_extensions.update(_normalize_extension(ext) for ext in extensions)

    def add_excluded_extensions(self, extensions: Iterable[str]) -> None:
        """Add extensions to the excluded set, creating the set if needed.

        Args:
            extensions: Extensions with or without a leading dot, in any case.
        """
        if self._excluded_extensions is None:
            self._excluded_extensions = set()
        self._excluded_extensions.update(_normalize_extension(ext) for ext in extensions)

    def add_included_files(self, names: Iterable[str]) -> None:
        if self._included_files is None:
            self._included_files = set()
        self._included_files.update(names)

    def add_excluded_files(self, names: Iterable[str]) -> None:
        if self._excluded_files is None:
            self._excluded_files = set()
        self._excluded_files.update(names)
