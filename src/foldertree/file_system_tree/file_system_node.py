"""Node representation for file system elements in the tree."""

from pathlib import Path
from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in a rendered tree.

    Extends anytree.Node with the entry's location on disk and a directory
    flag. Parent/child linking, ``is_root``, ``siblings`` and traversal are
    inherited from anytree. Nodes are created fresh for every render; size
    and timestamps are not copied in, the comparator reads them from the
    filesystem while the tree is built.

    anytree already uses ``path`` for the chain of nodes from the root, so the
    location on disk is stored as ``entry_path``.

    Attributes:
        name (str): The name shown in the tree (just the basename).
        entry_path (Path): The path the node was built from.
        is_dir (bool): True if this node represents a directory.
        parent (Optional[FileSystemNode]): The parent node, None for the root.
        children (tuple[FileSystemNode]): Child nodes in display order (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("root", Path("root"), is_dir=True)
        >>> child = FileSystemNode("file.txt", Path("root/file.txt"), parent=root)
        >>> [node.name for node in root.children]
        ['file.txt']
        >>> child.is_last
        True
        >>> root.label
        'root/'
    """

    def __init__(
        self,
        name: str,
        entry_path: Path,
        is_dir: bool = False,
        parent: Optional["FileSystemNode"] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode and attach it to its parent, if any.

        Args:
            name: The name of the file or directory.
            entry_path: The path of the entry on disk.
            is_dir: Whether this node represents a directory. Defaults to False.
            parent: The parent node. The new node becomes its last child.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.entry_path = entry_path
        self.is_dir = is_dir

    @property
    def label(self) -> str:
        """Name as displayed in the tree, with a ``/`` suffix for directories."""
        return f"{self.name}/" if self.is_dir else self.name

    @property
    def is_last(self) -> bool:
        """Whether this node is the last child of its parent. The root counts as last."""
        return self.is_root or self.parent.children[-1] is self
