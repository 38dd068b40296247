"""Ordering of sibling entries within a directory."""

from .entry_comparator import EntryComparator
from .sorting_method import SortingMethod

__all__ = ["EntryComparator", "SortingMethod"]
