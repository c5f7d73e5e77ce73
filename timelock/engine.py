"""
Main processing pipeline.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from .filtering import UnchangedFileFilter
from .run_context import RunContext
from .types import StaleFile

logger = logging.getLogger(__name__)


def run_check(ctx: RunContext, now: Optional[datetime] = None) -> List[StaleFile]:
    """
    Tracked files + one history scan → files unchanged since the configured cutoff.
    Any VCS or config error propagates; nothing is returned partially.
    """
    logger.debug("Checking %s (vcs: %s)", ctx.root, ctx.config.vcs)
    filter_cfg = ctx.config.to_filter_config(now)
    logger.debug("Cutoff timestamp for %r: %d", ctx.config.since, filter_cfg.since_timestamp)

    files = ctx.vcs.list_tracked_files()
    history = ctx.vcs.collect_file_history()

    return UnchangedFileFilter(filter_cfg).filter(files, history)


__all__ = ["run_check"]
