"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from TimelockUserError.

Programming errors and bugs should NOT inherit from TimelockUserError —
they will propagate with full tracebacks.
"""

from __future__ import annotations

from typing import Optional, Sequence


class TimelockUserError(Exception):
    """
    Base class for all user-facing errors in timelock.

    These errors indicate problems that the user can fix:
    a missing config file, an unknown VCS type, a directory
    that is not a repository, a broken VCS installation.
    """
    pass


class ConfigurationError(TimelockUserError):
    """Configuration file is missing, unreadable or invalid."""
    pass


class UnsupportedVCS(TimelockUserError):
    def __init__(self, vcs_type: str):
        self.vcs_type = vcs_type
        super().__init__(f"Unsupported VCS type: {vcs_type}")


class NotARepository(TimelockUserError):
    def __init__(self, directory: str, vcs_name: str = "Git"):
        self.directory = directory
        super().__init__(f"Directory '{directory}' is not a {vcs_name} repository.")


class ToolInvocationFailed(TimelockUserError):
    """
    The external VCS binary exited non-zero or could not be launched.

    `returncode` is None when the process never started.
    """

    def __init__(self, command: Sequence[str], returncode: Optional[int] = None, stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        cmdline = " ".join(self.command)
        if returncode is None:
            msg = f"Failed to run '{cmdline}'"
            if stderr:
                msg += f": {stderr}"
        else:
            msg = f"The command '{cmdline}' failed with exit code {returncode}."
            if stderr.strip():
                msg += f"\n\n{stderr.strip()}"
        super().__init__(msg)


__all__ = [
    "TimelockUserError",
    "ConfigurationError",
    "UnsupportedVCS",
    "NotARepository",
    "ToolInvocationFailed",
]
