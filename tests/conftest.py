"""Test configuration and fixtures for foldertree."""

import os

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def project_tree(tmp_path):
    """Create a small project directory with files of known sizes and timestamps.

    Layout:
        project/
            docs/
                guide.md
            src/
                main.py
                main.pyc
            Makefile          (0 bytes, oldest)
            README.md         (30 bytes)
            notes.TXT         (10 bytes, newest)
    """
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "src" / "main.py").write_text("print('hi')\n")
    (root / "src" / "main.pyc").write_bytes(b"\x00" * 4)
    (root / "docs" / "guide.md").write_text("# Guide\n")
    (root / "Makefile").write_text("")
    (root / "README.md").write_text("x" * 30)
    (root / "notes.TXT").write_text("y" * 10)

    os.utime(root / "Makefile", (1_000_000, 1_000_000))
    os.utime(root / "README.md", (2_000_000, 2_000_000))
    os.utime(root / "notes.TXT", (3_000_000, 3_000_000))
    return root
