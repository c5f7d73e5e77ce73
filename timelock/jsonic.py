from __future__ import annotations

import json
from typing import Any


def dumps(obj: Any, *, pretty: bool = False) -> str:
    """
    JSON dumper for CLI output.
    ensure_ascii=False; 4-space indent when pretty; no trailing newline (the caller decides).
    """
    return json.dumps(obj, ensure_ascii=False, indent=4 if pretty else None)
