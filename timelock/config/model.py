from __future__ import annotations

import re
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import ConfigurationError
from ..types import FilterConfig
from .since import parse_since

DEFAULT_VCS = "git"
DEFAULT_SINCE = "5 years ago"


class TimelockConfig(BaseModel):
    """
    Contents of timelock.yml.

    Keys use the camelCase names of the file; unknown keys are ignored.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    vcs: str = DEFAULT_VCS
    since: str = DEFAULT_SINCE
    exclude_authors: List[str] = Field(default_factory=list, alias="excludeAuthors")
    exclude: List[str] = Field(default_factory=list)
    exclude_regex: List[str] = Field(default_factory=list, alias="excludeRegex")

    @field_validator("vcs", "since", mode="before")
    @classmethod
    def _scalar_or_default(cls, v, info):
        # `since:` with no value in YAML yields None
        if v is None:
            return DEFAULT_VCS if info.field_name == "vcs" else DEFAULT_SINCE
        return str(v)

    @field_validator("exclude_authors", "exclude", "exclude_regex", mode="before")
    @classmethod
    def _list_of_str(cls, v):
        if v is None:
            return []
        if isinstance(v, (str, int, float)):
            return [str(v)]
        return [str(x) for x in v] if isinstance(v, list) else v

    def compile_patterns(self) -> tuple[re.Pattern[str], ...]:
        out = []
        for pattern in self.exclude_regex:
            try:
                out.append(re.compile(pattern))
            except re.error as e:
                raise ConfigurationError(f"Invalid excludeRegex pattern {pattern!r}: {e}") from e
        return tuple(out)

    def to_filter_config(self, now: Optional[datetime] = None) -> FilterConfig:
        return FilterConfig(
            since_timestamp=parse_since(self.since, now),
            excluded_authors=frozenset(self.exclude_authors),
            excluded_path_substrings=tuple(self.exclude),
            excluded_path_patterns=self.compile_patterns(),
        )


__all__ = ["TimelockConfig", "DEFAULT_VCS", "DEFAULT_SINCE"]
