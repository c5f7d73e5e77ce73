from __future__ import annotations

from typing import Dict, List, Protocol

from ..types import FileRecord


class VcsProvider(Protocol):
    def list_tracked_files(self) -> List[str]:
        """
        Return every path the VCS currently tracks in the directory,
        in VCS-native listing order.

        Raises NotARepository if the directory fails the VCS validity check
        and ToolInvocationFailed if the VCS command cannot run or exits non-zero.
        """
        ...

    def collect_file_history(self) -> Dict[str, FileRecord]:
        """
        Scan the whole history once and return a record per touched file:
        newest author/timestamp plus the total number of touching commits.
        """
        ...


from .factory import VcsFactory  # noqa: E402
from .git import GitVcs, parse_history_log  # noqa: E402

__all__ = ["VcsProvider", "VcsFactory", "GitVcs", "parse_history_log"]
