"""Live accessors for the observable attributes of a filesystem entry.

An entry is just a path. Nothing is cached: every accessor reads the
filesystem at call time, so two calls may disagree if the entry changes in
between. Metadata that cannot be read is reported as ``0`` rather than
raising, which keeps filters and comparators total.
"""

import os
from pathlib import Path

from foldertree.types import PathType


def entry_name(path: PathType) -> str:
    """Return the display name of an entry.

    This is the last path component. Paths without one (``"."``, ``"./"``)
    fall back to the name of the resolved directory, and the filesystem root
    falls back to the path itself.

    Example:
        >>> entry_name("projects/notes.TXT")
        'notes.TXT'
        >>> entry_name("/")
        '/'
    """
    path = Path(path)
    if path.name:
        return path.name
    resolved_name = path.resolve().name
    return resolved_name or str(path)


def extension_of(name: str) -> str:
    """Return the text after the last ``.`` in ``name``, or ``""`` if there is none.

    The result keeps its original case; callers decide how to compare it.

    Example:
        >>> extension_of("archive.tar.GZ")
        'GZ'
        >>> extension_of("Makefile")
        ''
        >>> extension_of(".bashrc")
        'bashrc'
    """
    _, dot, extension = name.rpartition(".")
    return extension if dot else ""


def is_directory(path: PathType) -> bool:
    try:
        return Path(path).is_dir()
    except OSError:
        return False


def entry_size(path: PathType) -> int:
    """Size of the entry in bytes, or 0 if it cannot be read."""
    try:
        return os.stat(path).st_size
    except OSError:
        return 0


def entry_mtime(path: PathType) -> float:
    """Last modification timestamp of the entry, or 0 if it cannot be read."""
    try:
        return os.stat(path).st_mtime
    except OSError:
        return 0.0
