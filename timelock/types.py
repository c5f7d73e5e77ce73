from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import FrozenSet, NewType, Tuple

from pydantic import BaseModel


# ---- Aliases for clarity ----
RepoRelPath = NewType("RepoRelPath", str)  # path relative to the checked directory


# ---- History metadata ----

@dataclass(frozen=True)
class FileRecord:
    """
    Last known state of a file according to the VCS history.

    author/last_modified_at come from the newest commit touching the file,
    change_count counts every commit that touched it.
    """
    path: RepoRelPath
    author: str
    last_modified_at: int  # seconds since epoch
    change_count: int = 0


# ---- Filtering ----

@dataclass(frozen=True)
class FilterConfig:
    """
    Resolved exclusion rules. Empty collections disable the matching check.
    """
    since_timestamp: int
    excluded_authors: FrozenSet[str] = field(default_factory=frozenset)
    excluded_path_substrings: Tuple[str, ...] = ()
    excluded_path_patterns: Tuple[re.Pattern[str], ...] = ()


class StaleFile(BaseModel):
    """One row of the report. Field names are the JSON keys."""
    file: str
    author: str
    last_modified: str  # "YYYY-MM-DD HH:MM:SS", local time
    changes: int


__all__ = ["RepoRelPath", "FileRecord", "FilterConfig", "StaleFile"]
