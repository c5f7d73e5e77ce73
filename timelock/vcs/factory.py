from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict

from ..errors import UnsupportedVCS
from . import VcsProvider
from .git import GitVcs

# vcs type (lower-case) -> backend constructor taking the directory
_BACKENDS: Dict[str, Callable[[str | Path], VcsProvider]] = {
    "git": GitVcs,
}


class VcsFactory:
    """
    Maps a configured VCS type to a backend instance.
    Lookup is case-insensitive; new backends only need a registry entry.
    """

    def create(self, vcs_type: str, directory: str | Path) -> VcsProvider:
        backend = _BACKENDS.get((vcs_type or "").strip().lower())
        if backend is None:
            raise UnsupportedVCS(vcs_type)
        return backend(directory)


__all__ = ["VcsFactory"]
