"""
Shared test infrastructure for timelock.

Modules:
- file_utils: creating files and directories
- config_builders: timelock.yml builders
- vcs_stubs: in-memory VCS backend and factory
- git_repo: throwaway git repositories with controlled history
- cli_utils: running the CLI as a subprocess
"""

from .file_utils import write
from .config_builders import write_config
from .vcs_stubs import FakeVcs, FakeFactory, record, years_ago
from .git_repo import GitRepoBuilder, git_available, requires_git
from .cli_utils import run_cli, jload

__all__ = [
    "write",
    "write_config",
    "FakeVcs",
    "FakeFactory",
    "record",
    "years_ago",
    "GitRepoBuilder",
    "git_available",
    "requires_git",
    "run_cli",
    "jload",
]
