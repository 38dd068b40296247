"""Directory tree rendering utilities.

This package renders a directory hierarchy as an indented text tree, similar
to the Unix ``tree`` command, with pluggable entry filtering and sibling
ordering.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("foldertree")
except PackageNotFoundError:
    __version__ = "unknown"
