from __future__ import annotations

import logging
import re
import subprocess
import time
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from ..errors import NotARepository, ToolInvocationFailed
from ..types import FileRecord, RepoRelPath
from . import VcsProvider

logger = logging.getLogger(__name__)

# Commit header line emitted by `git log`: hash,author,timestamp
LOG_FORMAT = "%H,%an,%at"

# %H is 40 hex digits for SHA-1 repositories, 64 for SHA-256 ones
_HEADER = re.compile(r"^[0-9a-f]{40}(?:[0-9a-f]{24})?,")

# Headers without a usable timestamp are dated this far before the scan
SENTINEL_AGE_SECONDS = 50 * 365 * 24 * 60 * 60

_CONTROL_CHARS = re.compile(r"[\x00-\x1F\x7F]")


def sanitize(value: str) -> str:
    """Strip control characters from a log field."""
    return _CONTROL_CHARS.sub("", value)


def is_header(line: str) -> bool:
    return _HEADER.match(line) is not None


def _parse_timestamp(raw: Optional[str], fallback: int) -> int:
    """Integer epoch seconds that datetime can represent, otherwise `fallback`."""
    if raw is None:
        return fallback
    try:
        ts = int(sanitize(raw).strip())
        datetime.fromtimestamp(ts)
    except (ValueError, OverflowError, OSError):
        return fallback
    return ts


def _parse_header(line: str, fallback_ts: int) -> tuple[str, int]:
    """
    Split `hash,author,timestamp` into (author, timestamp).
    The author is everything between the first and the last comma.
    """
    _commit, _, rest = line.partition(",")
    if "," in rest:
        author, raw_ts = rest.rsplit(",", 1)
    else:
        author, raw_ts = rest, None
    return sanitize(author), _parse_timestamp(raw_ts, fallback_ts)


def parse_history_log(output: str, *, now: Optional[float] = None) -> Dict[str, FileRecord]:
    """
    Build per-file metadata from `git log --pretty=format:%H,%an,%at --name-only`.

    The log is newest-first: the first occurrence of a file fixes its
    author/timestamp, every occurrence (including the first) bumps the counter.
    Lines starting with a full commit hash and a comma are commit headers,
    other non-empty lines are paths (which may contain commas themselves).
    """
    fallback_ts = int(now if now is not None else time.time()) - SENTINEL_AGE_SECONDS

    current: Optional[tuple[str, int]] = None
    authors: Dict[str, tuple[str, int]] = {}
    counts: Dict[str, int] = {}

    # split on "\n" only: stray control characters must not break a line
    for line in output.split("\n"):
        if is_header(line):
            current = _parse_header(line, fallback_ts)
            continue
        path = sanitize(line)
        if not path or current is None:
            continue
        if path not in authors:
            authors[path] = current
            counts[path] = 0
        counts[path] += 1

    return {
        path: FileRecord(
            path=RepoRelPath(path),
            author=author,
            last_modified_at=ts,
            change_count=counts[path],
        )
        for path, (author, ts) in authors.items()
    }


class GitVcs(VcsProvider):
    """
    Git backend, everything goes through the `git` binary:
      • git rev-parse --is-inside-work-tree   (validity check)
      • git ls-files                          (tracked files)
      • git log --name-only                   (history scan)
    """

    def __init__(self, directory: str | Path, git_bin: str = "git"):
        self.directory = Path(directory).resolve()
        self.git_bin = git_bin

    # ------------------------------------------------------------ #
    def _command(self, args: List[str]) -> List[str]:
        # quotepath=off keeps non-ASCII paths verbatim and identical in ls-files/log
        return [self.git_bin, "-C", str(self.directory), "-c", "core.quotepath=off", *args]

    def _run(self, args: List[str]) -> subprocess.CompletedProcess:
        cmd = self._command(args)
        logger.debug("Running %s", " ".join(cmd))
        try:
            return subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise ToolInvocationFailed(cmd, None, str(e)) from e

    def _output(self, args: List[str]) -> str:
        cp = self._run(args)
        if cp.returncode != 0:
            raise ToolInvocationFailed(cp.args, cp.returncode, cp.stderr or "")
        return cp.stdout

    # ------------------------------------------------------------ #
    def is_repository(self) -> bool:
        cp = self._run(["rev-parse", "--is-inside-work-tree"])
        return cp.returncode == 0 and cp.stdout.strip() == "true"

    def list_tracked_files(self) -> List[str]:
        if not self.is_repository():
            raise NotARepository(str(self.directory))
        out = self._output(["ls-files"])
        files = [ln for ln in out.splitlines() if ln.strip()]
        logger.debug("git ls-files: %d tracked files", len(files))
        return files

    def collect_file_history(self) -> Dict[str, FileRecord]:
        out = self._output([
            "log",
            f"--pretty=format:{LOG_FORMAT}",
            "--name-only",
            # paths relative to the checked directory, same as ls-files
            "--relative",
        ])
        history = parse_history_log(out)
        logger.debug("git log: history for %d files", len(history))
        return history


__all__ = ["GitVcs", "parse_history_log", "sanitize", "is_header", "LOG_FORMAT", "SENTINEL_AGE_SECONDS"]
