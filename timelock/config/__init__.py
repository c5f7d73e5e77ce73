from .load import load_config, MISSING_CONFIG_MESSAGE
from .model import TimelockConfig, DEFAULT_SINCE, DEFAULT_VCS
from .since import parse_since

__all__ = [
    "load_config",
    "MISSING_CONFIG_MESSAGE",
    "TimelockConfig",
    "DEFAULT_SINCE",
    "DEFAULT_VCS",
    "parse_since",
]
