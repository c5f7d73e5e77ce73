"""
Parsing of the `since` expression into an absolute timestamp.

Supported forms:
  • now / today / yesterday
  • @<epoch seconds>
  • ISO dates and datetimes: 2020-01-31, 2020-01-31 12:00:00, 2020-01-31T12:00:00+02:00
  • relative terms: "5 years ago", "-6 months", "+1 week", "1 year 6 months ago"
"""

from __future__ import annotations

import calendar
import re
from datetime import datetime, timedelta
from typing import Optional

from ..errors import ConfigurationError

_UNITS = {
    "sec": "seconds", "secs": "seconds", "second": "seconds", "seconds": "seconds",
    "min": "minutes", "mins": "minutes", "minute": "minutes", "minutes": "minutes",
    "hour": "hours", "hours": "hours",
    "day": "days", "days": "days",
    "week": "weeks", "weeks": "weeks",
    "fortnight": "fortnights", "fortnights": "fortnights",
    "month": "months", "months": "months",
    "year": "years", "years": "years",
}

_TERM = re.compile(r"([+-]?\d+)\s*([a-z]+)")
_RELATIVE = re.compile(r"^(?:[+-]?\d+\s*[a-z]+\s*)+(?:ago)?$")


def _shift_months(moment: datetime, months: int) -> datetime:
    """Calendar-aware month shift; the day is clamped to the target month length."""
    total = moment.year * 12 + (moment.month - 1) + months
    year, month = divmod(total, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def _apply_relative(expr: str, now: datetime) -> Optional[datetime]:
    if not _RELATIVE.match(expr):
        return None
    sign = -1 if expr.endswith("ago") else 1
    moment = now
    for amount_raw, unit_raw in _TERM.findall(expr):
        unit = _UNITS.get(unit_raw)
        if unit is None:
            return None
        amount = int(amount_raw) * sign
        if unit == "years":
            moment = _shift_months(moment, amount * 12)
        elif unit == "months":
            moment = _shift_months(moment, amount)
        elif unit == "fortnights":
            moment += timedelta(weeks=2 * amount)
        else:
            moment += timedelta(**{unit: amount})
    return moment


def parse_since(expr: str, now: Optional[datetime] = None) -> int:
    """
    Resolve a `since` expression against `now` (local time) into epoch seconds.
    Raises ConfigurationError for anything it cannot understand.
    """
    now = now or datetime.now()
    text = " ".join(str(expr).strip().lower().split())
    if not text:
        raise ConfigurationError("Empty 'since' value")

    if text == "now":
        return int(now.timestamp())
    if text == "today":
        return int(now.replace(hour=0, minute=0, second=0, microsecond=0).timestamp())
    if text == "yesterday":
        midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
        return int((midnight - timedelta(days=1)).timestamp())
    if text.startswith("@") and text[1:].lstrip("-").isdigit():
        return int(text[1:])

    moment = _apply_relative(text, now)
    if moment is not None:
        return int(moment.timestamp())

    try:
        return int(datetime.fromisoformat(str(expr).strip()).timestamp())
    except ValueError:
        pass

    raise ConfigurationError(f"Unable to parse 'since' value: {expr!r}")


__all__ = ["parse_since"]
