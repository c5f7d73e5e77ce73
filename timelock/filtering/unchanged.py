from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Mapping, Optional, Sequence

from ..types import FileRecord, FilterConfig, StaleFile

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(ts: int) -> str:
    """Epoch seconds → local 'YYYY-MM-DD HH:MM:SS'."""
    return datetime.fromtimestamp(ts).strftime(TIMESTAMP_FORMAT)


class UnchangedFileFilter:
    """
    Selects tracked files with no activity after the cutoff.

    A file is kept only if ALL hold:
      1) it has history metadata
      2) last_modified_at <= since_timestamp
      3) its author is not excluded
      4) no excluded substring occurs in its path
      5) no excluded pattern matches its path (re.search)
    Input order is preserved.
    """

    def __init__(self, config: FilterConfig):
        self.config = config

    def _skip_reason(self, path: str, record: Optional[FileRecord]) -> Optional[str]:
        cfg = self.config
        if record is None:
            return "no history"
        if record.last_modified_at > cfg.since_timestamp:
            return "modified after cutoff"
        if record.author in cfg.excluded_authors:
            return f"excluded author {record.author!r}"
        for sub in cfg.excluded_path_substrings:
            if sub in path:
                return f"excluded path {sub!r}"
        for pattern in cfg.excluded_path_patterns:
            if pattern.search(path):
                return f"excluded pattern {pattern.pattern!r}"
        return None

    def accepts(self, path: str, record: Optional[FileRecord]) -> bool:
        return self._skip_reason(path, record) is None

    def filter(self, files: Sequence[str], metadata: Mapping[str, FileRecord]) -> List[StaleFile]:
        result: List[StaleFile] = []
        for path in files:
            record = metadata.get(path)
            reason = self._skip_reason(path, record)
            if reason is not None:
                logger.debug("skip %s: %s", path, reason)
                continue
            result.append(StaleFile(
                file=path,
                author=record.author,
                last_modified=format_timestamp(record.last_modified_at),
                changes=record.change_count,
            ))
        logger.debug("%d of %d tracked files unchanged", len(result), len(files))
        return result


__all__ = ["UnchangedFileFilter", "format_timestamp", "TIMESTAMP_FORMAT"]
