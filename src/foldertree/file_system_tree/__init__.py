"""Filesystem tree construction and text rendering.

This module provides classes for building a filtered, ordered tree of a
directory structure and rendering it as indented text.
"""

from .file_system_node import FileSystemNode
from .tree_renderer import TreeRenderer

__all__ = ["FileSystemNode", "TreeRenderer"]
