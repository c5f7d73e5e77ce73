"""
In-memory VCS backend standing in for git in pipeline and CLI tests.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from timelock.errors import UnsupportedVCS
from timelock.types import FileRecord, RepoRelPath


def years_ago(years: float) -> int:
    """Epoch seconds `years` * 365 days before now."""
    return int((datetime.now() - timedelta(days=365 * years)).timestamp())


def record(path: str, author: str, ts: int, changes: int = 1) -> FileRecord:
    return FileRecord(path=RepoRelPath(path), author=author, last_modified_at=ts, change_count=changes)


class FakeVcs:
    def __init__(
        self,
        files: List[str],
        history: Dict[str, FileRecord],
        error: Optional[Exception] = None,
    ):
        self.files = files
        self.history = history
        self.error = error
        self.calls: List[str] = []

    def list_tracked_files(self) -> List[str]:
        self.calls.append("list_tracked_files")
        if self.error is not None:
            raise self.error
        return list(self.files)

    def collect_file_history(self) -> Dict[str, FileRecord]:
        self.calls.append("collect_file_history")
        if self.error is not None:
            raise self.error
        return dict(self.history)


class FakeFactory:
    """Hands out a prepared backend for 'git', rejects anything else like VcsFactory."""

    def __init__(self, vcs: FakeVcs):
        self.vcs = vcs
        self.created: List[Tuple[str, Path]] = []

    def create(self, vcs_type: str, directory):
        self.created.append((vcs_type, Path(directory)))
        if vcs_type.lower() != "git":
            raise UnsupportedVCS(vcs_type)
        return self.vcs
