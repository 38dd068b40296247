"""Entry filters deciding which files and directories appear in a tree."""

from .base_filter import BaseEntryFilter
from .composite_filter import CompositeEntryFilter
from .entry_filter import EntryFilter
from .size_filter import SizeEntryFilter

__all__ = [
    "BaseEntryFilter",
    "CompositeEntryFilter",
    "EntryFilter",
    "SizeEntryFilter",
]
