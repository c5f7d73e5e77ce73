from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigurationError
from .model import TimelockConfig

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")

# Message kept verbatim regardless of the actual file name passed in
MISSING_CONFIG_MESSAGE = "Configuration file 'timelock.yml' not found."


def load_config(path: Optional[str | Path]) -> TimelockConfig:
    """
    Read and validate a timelock YAML config.

    There is no default location: a missing or empty path is an error.
    """
    if not path:
        raise ConfigurationError(MISSING_CONFIG_MESSAGE)
    cfg_path = Path(path)
    if not cfg_path.is_file():
        raise ConfigurationError(MISSING_CONFIG_MESSAGE)

    try:
        raw = _yaml.load(cfg_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file '{cfg_path}': {e}") from e
    except YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file '{cfg_path}': {e}") from e

    raw = raw or {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Configuration file '{cfg_path}' must contain a mapping")

    try:
        cfg = TimelockConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in '{cfg_path}':\n{e}") from e

    logger.debug(
        "Loaded %s: vcs=%s since=%r, %d author / %d path / %d regex exclusions",
        cfg_path, cfg.vcs, cfg.since,
        len(cfg.exclude_authors), len(cfg.exclude), len(cfg.exclude_regex),
    )
    return cfg


__all__ = ["load_config", "MISSING_CONFIG_MESSAGE"]
