"""
timelock: find version-controlled files nobody has touched since a given date.
"""

from .errors import (
    ConfigurationError,
    NotARepository,
    TimelockUserError,
    ToolInvocationFailed,
    UnsupportedVCS,
)
from .types import FileRecord, FilterConfig, StaleFile

__all__ = [
    "TimelockUserError",
    "ConfigurationError",
    "UnsupportedVCS",
    "NotARepository",
    "ToolInvocationFailed",
    "FileRecord",
    "FilterConfig",
    "StaleFile",
]
