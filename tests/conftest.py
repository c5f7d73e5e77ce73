import os
from pathlib import Path

import pytest

from tests.infrastructure import FakeVcs, record, write_config, years_ago


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """timelock.yml with the defaults spelled out."""
    return write_config(tmp_path / "timelock.yml", vcs="git", since="5 years ago")


@pytest.fixture
def two_file_vcs() -> FakeVcs:
    """
    file1.txt: 6 years old, John Doe, 1 change
    file2.txt: 4 years old, Jane Doe, 3 changes
    """
    return FakeVcs(
        files=["file1.txt", "file2.txt"],
        history={
            "file1.txt": record("file1.txt", "John Doe", years_ago(6), 1),
            "file2.txt": record("file2.txt", "Jane Doe", years_ago(4), 3),
        },
    )


@pytest.fixture
def git_env(monkeypatch, tmp_path: Path):
    """Keep git away from user/system config and from repositories above tmp_path."""
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", os.devnull)
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
