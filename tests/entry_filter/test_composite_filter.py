"""Unit tests for composite entry filters."""

import pytest

from foldertree.entry_filter.base_filter import BaseEntryFilter
from foldertree.entry_filter.composite_filter import CompositeEntryFilter
from foldertree.entry_filter.entry_filter import EntryFilter
from foldertree.entry_filter.size_filter import SizeEntryFilter


class RecordingFilter(BaseEntryFilter):
    """Filter that rejects a fixed set of names and records what it was asked about."""

    def __init__(self, rejected=(), has_rules_result=True):
        self.rejected = set(rejected)
        self.has_rules_result = has_rules_result
        self.seen = []

    def accept(self, path) -> bool:
        self.seen.append(str(path))
        return str(path) not in self.rejected

    def has_rules(self) -> bool:
        return self.has_rules_result


class TestCompositeEntryFilter:
    """Test the CompositeEntryFilter class."""

    def test_init_with_filters(self):
        first = RecordingFilter()
        second = RecordingFilter()
        composite = CompositeEntryFilter([first, second])

        assert composite.get_filter_count() == 2
        assert composite.get_filters() == [first, second]

    def test_init_with_empty_list(self):
        with pytest.raises(ValueError, match="At least one entry filter must be provided"):
            CompositeEntryFilter([])

    def test_init_with_invalid_filter(self):
        with pytest.raises(TypeError, match="Filter at index 1 must implement BaseEntryFilter"):
            CompositeEntryFilter([RecordingFilter(), "not a filter"])  # type: ignore[list-item]

    def test_accept_requires_every_filter(self):
        composite = CompositeEntryFilter([RecordingFilter(rejected=["a"]), RecordingFilter(rejected=["b"])])
        assert not composite.accept("a")
        assert not composite.accept("b")
        assert composite.accept("c")

    def test_accept_short_circuits(self):
        first = RecordingFilter(rejected=["a"])
        second = RecordingFilter()
        composite = CompositeEntryFilter([first, second])

        composite.accept("a")
        assert first.seen == ["a"]
        assert second.seen == []

    def test_has_rules(self):
        assert not CompositeEntryFilter([RecordingFilter(has_rules_result=False)]).has_rules()
        assert CompositeEntryFilter(
            [RecordingFilter(has_rules_result=False), RecordingFilter(has_rules_result=True)]
        ).has_rules()

    def test_add_and_remove_filter(self):
        first = RecordingFilter()
        composite = CompositeEntryFilter([first])
        second = RecordingFilter()

        composite.add_filter(second)
        assert composite.get_filter_count() == 2

        assert composite.remove_filter(first)
        assert not composite.remove_filter(first)
        assert composite.get_filters() == [second]

    def test_add_invalid_filter(self):
        composite = CompositeEntryFilter([RecordingFilter()])
        with pytest.raises(TypeError, match="Filter must implement BaseEntryFilter"):
            composite.add_filter(object())  # type: ignore[arg-type]

    def test_get_filters_returns_copy(self):
        composite = CompositeEntryFilter([RecordingFilter()])
        composite.get_filters().clear()
        assert composite.get_filter_count() == 1

    def test_name_and_size_filters_together(self, tmp_path):
        (tmp_path / "big.txt").write_bytes(b"x" * 100)
        (tmp_path / "small.txt").write_bytes(b"x")
        (tmp_path / "small.log").write_bytes(b"x")

        composite = CompositeEntryFilter([EntryFilter(excluded_extensions=["log"]), SizeEntryFilter(10)])
        assert not composite.accept(tmp_path / "big.txt")
        assert composite.accept(tmp_path / "small.txt")
        assert not composite.accept(tmp_path / "small.log")
