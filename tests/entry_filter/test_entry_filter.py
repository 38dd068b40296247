"""Unit tests for name and extension based entry filtering."""

import pytest

from foldertree.entry_filter.entry_filter import EntryFilter


@pytest.fixture
def entries(tmp_path):
    """Create a directory with a mix of files and subdirectories."""
    for name in ("a.x", "b.X", "keep.tmp", "scratch.tmp", "README", "setup.py", "main.py"):
        (tmp_path / name).touch()
    (tmp_path / "build").mkdir()
    (tmp_path / "build.tmp").mkdir()
    return tmp_path


def test_unconfigured_filter_accepts_everything(entries):
    entry_filter = EntryFilter()
    assert not entry_filter.has_rules()
    assert all(entry_filter.accept(path) for path in entries.iterdir())


def test_rule_sets_are_unset_until_first_addition():
    entry_filter = EntryFilter()
    assert entry_filter.included_extensions is None
    assert entry_filter.excluded_extensions is None
    assert entry_filter.included_files is None
    assert entry_filter.excluded_files is None

    entry_filter.add_excluded_files([])
    assert entry_filter.excluded_files == frozenset()
    assert entry_filter.included_files is None
    assert entry_filter.has_rules()


def test_empty_rule_set_is_active_but_matches_nothing(entries):
    entry_filter = EntryFilter(included_extensions=[], excluded_extensions=[])
    assert entry_filter.included_extensions == frozenset()
    assert entry_filter.accept(entries / "a.x")


def test_included_extension_accepts(entries):
    entry_filter = EntryFilter()
    entry_filter.add_included_extension("x")
    assert entry_filter.accept(entries / "a.x")
    assert entry_filter.accept(entries / "b.X")


def test_excluded_file_overrides_included_extension(entries):
    entry_filter = EntryFilter(included_extensions=["x"], excluded_files=["a.x"])
    assert not entry_filter.accept(entries / "a.x")
    assert entry_filter.accept(entries / "b.X")


def test_excluded_extension_rejects(entries):
    entry_filter = EntryFilter()
    entry_filter.add_excluded_extension("tmp")
    assert not entry_filter.accept(entries / "scratch.tmp")
    assert entry_filter.accept(entries / "main.py")


def test_included_file_overrides_excluded_extension(entries):
    entry_filter = EntryFilter(excluded_extensions=["tmp"], included_files=["keep.tmp"])
    assert entry_filter.accept(entries / "keep.tmp")
    assert not entry_filter.accept(entries / "scratch.tmp")


def test_included_extension_takes_precedence_over_excluded_extension(entries):
    entry_filter = EntryFilter(included_extensions=["tmp"], excluded_extensions=["tmp"])
    assert entry_filter.accept(entries / "scratch.tmp")


def test_extension_not_listed_is_accepted(entries):
    """Including some extensions does not reject the others."""
    entry_filter = EntryFilter(included_extensions=["py"])
    assert entry_filter.accept(entries / "a.x")
    assert entry_filter.accept(entries / "README")


def test_files_without_extension_match_empty_extension(entries):
    entry_filter = EntryFilter(excluded_extensions=[""])
    assert not entry_filter.accept(entries / "README")
    assert entry_filter.accept(entries / "main.py")


def test_extensions_are_normalized():
    entry_filter = EntryFilter()
    entry_filter.add_included_extensions([".PY", "Md"])
    entry_filter.add_excluded_extension(".TMP")
    assert entry_filter.included_extensions == frozenset({"py", "md"})
    assert entry_filter.excluded_extensions == frozenset({"tmp"})


def test_file_names_are_case_sensitive(entries):
    entry_filter = EntryFilter(included_extensions=["py"], excluded_files=["SETUP.PY"])
    assert entry_filter.accept(entries / "setup.py")


def test_directory_accepted_unless_name_excluded(entries):
    entry_filter = EntryFilter(excluded_files=["build"])
    assert not entry_filter.accept(entries / "build")
    assert entry_filter.accept(entries / "build.tmp")


def test_extension_rules_never_apply_to_directories(entries):
    entry_filter = EntryFilter(excluded_extensions=["tmp"], included_extensions=[])
    assert entry_filter.accept(entries / "build.tmp")


def test_included_files_not_consulted_for_directories(entries):
    entry_filter = EntryFilter(included_files=["build"], excluded_files=["build"])
    assert not entry_filter.accept(entries / "build")


def test_single_and_batch_adders_accumulate():
    entry_filter = EntryFilter()
    entry_filter.add_included_file("a.txt")
    entry_filter.add_included_files(["b.txt", "c.txt"])
    entry_filter.add_excluded_file("d.txt")
    entry_filter.add_excluded_files(("e.txt",))
    entry_filter.add_excluded_extensions(["log", "LOG"])

    assert entry_filter.included_files == frozenset({"a.txt", "b.txt", "c.txt"})
    assert entry_filter.excluded_files == frozenset({"d.txt", "e.txt"})
    assert entry_filter.excluded_extensions == frozenset({"log"})


def test_accessors_return_copies():
    entry_filter = EntryFilter(excluded_files=["a"])
    snapshot = entry_filter.excluded_files
    entry_filter.add_excluded_file("b")
    assert snapshot == frozenset({"a"})


def test_accept_has_no_side_effects(entries):
    entry_filter = EntryFilter(included_extensions=["x"], excluded_files=["a.x"])
    first = [entry_filter.accept(path) for path in sorted(entries.iterdir())]
    second = [entry_filter.accept(path) for path in sorted(entries.iterdir())]
    assert first == second
    assert entry_filter.excluded_files == frozenset({"a.x"})
