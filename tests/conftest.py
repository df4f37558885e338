"""Shared test fixtures — sample porcelain output, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def sample_status_mixed() -> str:
    """Porcelain output covering each counted category once or twice."""
    return textwrap.dedent("""\
        M  file1.txt
         M file2.txt
        A  file3.txt
        ?? file4.txt
        R  old.txt -> new.txt
    """)


@pytest.fixture
def sample_status_overlapping() -> str:
    """Codes that hit more than one category per line."""
    return textwrap.dedent("""\
        AM staged_then_edited.py
        MD edited_then_removed.py
        RM moved_and_edited.py -> moved.py
    """)


@pytest.fixture
def sample_status_unclassified() -> str:
    """Copies, merge conflicts and ignored entries, counted in total only."""
    return textwrap.dedent("""\
        C  base.py -> copy.py
        UU conflicted.py
        !! build/
    """)


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, capture_output=True, check=True)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository with one committed file."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    _git(tmp_path, "config", "user.email", "test@test.com")
    _git(tmp_path, "config", "user.name", "Test")
    (tmp_path / "README.md").write_text("# Test\n")
    (tmp_path / "notes.txt").write_text("notes\n")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-m", "init")
    return tmp_path


@pytest.fixture
def plain_dir(tmp_path: Path, monkeypatch) -> Path:
    """A directory git must not treat as part of any enclosing repository."""
    target = tmp_path / "plain"
    target.mkdir()
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    return target
