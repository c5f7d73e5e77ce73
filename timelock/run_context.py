from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

from .config import TimelockConfig
from .vcs import VcsProvider


@dataclass
class ExecutionTimer:
    """Wall-clock timer for a single command run."""
    started_at: float = field(default_factory=time.perf_counter)

    def elapsed(self) -> float:
        return time.perf_counter() - self.started_at


@dataclass(frozen=True)
class RunContext:
    root: Path
    config: TimelockConfig
    vcs: VcsProvider
    timer: ExecutionTimer = field(default_factory=ExecutionTimer)
