"""Shared fixtures for lsr tests."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

SGR_RE = re.compile(r"\033\[[0-9;]*m")


def plain(line: str) -> str:
    """Return ``line`` with ANSI styling removed."""
    return SGR_RE.sub("", line)


@pytest.fixture
def mixed_dir(tmp_path: Path) -> Path:
    """Directory with one regular file and one subdirectory.

    Structure::

        root/
        ├── notes.txt
        └── sub/
    """
    (tmp_path / "notes.txt").write_text("notes")
    (tmp_path / "sub").mkdir()
    return tmp_path


@pytest.fixture
def cli_tree(tmp_path: Path) -> Path:
    """Working directory holding ``myDir`` with two subdirectories and a file.

    Structure::

        cwd/
        └── myDir/
            ├── a/
            ├── b/
            └── c.txt
    """
    my_dir = tmp_path / "myDir"
    (my_dir / "a").mkdir(parents=True)
    (my_dir / "b").mkdir()
    (my_dir / "c.txt").write_text("c")
    return tmp_path
