"""Text rendering of a directory hierarchy.

This module provides the TreeRenderer class, which walks a directory
depth-first, applies an optional entry filter and an optional comparator,
and renders the result in the style of the Unix ``tree`` command.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

from foldertree.entry import entry_name, is_directory
from foldertree.entry_filter.base_filter import BaseEntryFilter
from foldertree.file_system_tree.file_system_node import FileSystemNode
from foldertree.io.tree_writer import write_tree
from foldertree.sorting.entry_comparator import EntryComparator
from foldertree.types import PathType

logger = logging.getLogger(__name__)

BRANCH = "├── "
LAST_BRANCH = "└── "
VERTICAL = "│   "
EMPTY = "    "


class TreeRenderer:
    """Renders a directory hierarchy as an indented text tree.

    Each call to :meth:`render` walks the filesystem again and builds its
    output from scratch, so repeated renders of an unchanged directory give
    identical text. Only the text of the most recent render is kept, for
    :meth:`get_tree` and :meth:`flush_tree`.

    Filtering:
        An entry rejected by the filter is left out together with everything
        beneath it. Sibling glyphs are computed against the filtered list, so
        the last visible child always gets the closing branch.

    Ordering:
        Children are sorted with the comparator when one is given. Otherwise
        they keep the order the operating system lists them in.

    Error handling:
        A directory that cannot be listed is rendered without children. No
        filesystem error escapes from :meth:`render`.

    A renderer instance is meant for one caller at a time. Depth is limited
    only by the directory itself; extremely deep trees can exceed Python's
    recursion limit.

    Example:
        >>> renderer = TreeRenderer()
        >>> print(renderer.render("project"), end="")  # doctest: +SKIP
        project/
        ├── src/
        │   └── main.py
        └── README.md
    """

    def __init__(self) -> None:
        self._tree_text = ""

    def render(
        self,
        root: PathType,
        entry_filter: Optional[BaseEntryFilter] = None,
        comparator: Optional[EntryComparator] = None,
    ) -> str:
        """Render the tree rooted at ``root``.

        Args:
            root: Root file or directory. A path that does not exist renders as a single line.
            entry_filter: Filter deciding which entries appear. None includes everything.
            comparator: Comparator ordering siblings. None keeps filesystem order.

        Returns:
            The tree as text, one newline-terminated line per entry. Empty if the filter
            rejects the root itself.
        """
        tree = self.build_tree(root, entry_filter, comparator)
        lines: List[str] = []
        if tree is not None:
            self._write_node(tree, "", lines)
        self._tree_text = "".join(f"{line}\n" for line in lines)
        return self._tree_text

    def build_tree(
        self,
        root: PathType,
        entry_filter: Optional[BaseEntryFilter] = None,
        comparator: Optional[EntryComparator] = None,
    ) -> Optional[FileSystemNode]:
        """Build the filtered, ordered node tree rooted at ``root``.

        Args:
            root: Root file or directory.
            entry_filter: Filter deciding which entries appear.
            comparator: Comparator ordering siblings.

        Returns:
            The root node, or None if the filter rejects the root.
        """
        root_path = Path(root)
        if entry_filter is not None and not entry_filter.accept(root_path):
            logger.debug("Root %s rejected by filter", root_path)
            return None
        node = FileSystemNode(entry_name(root_path), root_path, is_dir=is_directory(root_path))
        self._add_children(node, entry_filter, comparator)
        return node

    def _add_children(
        self,
        node: FileSystemNode,
        entry_filter: Optional[BaseEntryFilter],
        comparator: Optional[EntryComparator],
    ) -> None:
        if not node.is_dir:
            return

        children = self._list_children(node.entry_path)
        if entry_filter is not None:
            children = [child for child in children if entry_filter.accept(child)]
        if comparator is not None:
            children = sorted(children, key=comparator.sort_key())

        for child_path in children:
            child = FileSystemNode(child_path.name, child_path, is_dir=is_directory(child_path), parent=node)
            self._add_children(child, entry_filter, comparator)

    def _list_children(self, path: Path) -> List[Path]:
        """List the direct children of a directory in filesystem order.

        Returns an empty list if the directory cannot be read.
        """
        try:
            with os.scandir(path) as entries:
                return [Path(entry.path) for entry in entries]
        except OSError as e:
            logger.debug("Cannot list %s, rendering it without children: %s", path, e)
            return []

    def _write_node(self, node: FileSystemNode, prefix: str, lines: List[str]) -> None:
        if node.is_root:
            lines.append(node.label)
            # Children of the root start at column 0, as in Unix tree. Only
            # deeper levels carry the parent's four-column continuation.
            child_prefix = ""
        else:
            connector = LAST_BRANCH if node.is_last else BRANCH
            lines.append(f"{prefix}{connector}{node.label}")
            child_prefix = prefix + (EMPTY if node.is_last else VERTICAL)

        for child in node.children:
            self._write_node(child, child_prefix, lines)

    def get_tree(self) -> str:
        """Return the text of the most recent render, or an empty string before the first one."""
        return self._tree_text

    def flush_tree(self, destination: PathType) -> None:
        """Write the most recent render to ``destination`` as UTF-8.

        Raises:
            TreeWriteError: If the destination cannot be written.
        """
        write_tree(self._tree_text, destination)
