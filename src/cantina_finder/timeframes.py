"""Timestamp parsing, durations and the "time left" label for contests."""

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from cantina_finder.models.opportunity import Opportunity

logger = logging.getLogger(__name__)

# date, 'T' or space, time with optional fraction, then 'Z' or +hh:mm / -hh:mm
_RFC3339 = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[Tt ](?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)

ENDED = "Ended"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_instant(value: Optional[str], now: Optional[datetime] = None) -> datetime:
    """
    Parse an RFC3339 timestamp into an aware datetime.

    Malformed input does not raise: it is logged and replaced by `now`
    (the current UTC time when not given), so one bad record cannot
    abort sorting or reporting.
    """
    m = _RFC3339.match(value or "")
    if not m:
        logger.warning("Unparseable timestamp %r; using current time instead", value)
        return now or utc_now()
    # datetime keeps microseconds only; extra fraction digits are truncated
    fraction = (m.group("fraction") or "0")[:6].ljust(6, "0")
    offset = m.group("offset").upper().replace("Z", "+00:00")
    time = m.group("time")
    if time.endswith(":60"):
        # leap second; datetime has no second 60
        time = time[:-2] + "59"
    try:
        return datetime.fromisoformat(f"{m.group('date')}T{time}.{fraction}{offset}")
    except ValueError:
        # Shape matched but a field is out of range, e.g. month 13
        logger.warning("Invalid timestamp %r; using current time instead", value)
        return now or utc_now()


def opportunity_start(opp: Opportunity, now: datetime) -> datetime:
    """Parsed start of the opportunity's timeframe."""
    return parse_instant(opp.timeframe.start, now)


def opportunity_duration(opp: Opportunity, now: datetime) -> timedelta:
    """end - start; an ongoing opportunity (no end) has zero duration."""
    start = opportunity_start(opp, now)
    if opp.timeframe.end is None:
        return timedelta(0)
    return parse_instant(opp.timeframe.end, now) - start


def format_time_left(remaining: timedelta) -> str:
    """
    Render a remaining duration as "2 days 3h 5m left", "1h 30m left" or
    "5m left". Components are truncated; seconds are never shown.
    Zero or negative durations render as "Ended".
    """
    if remaining <= timedelta(0):
        return ENDED
    total = int(remaining.total_seconds())
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes = rest // 60
    if days > 0:
        return f"{days} days {hours}h {minutes}m left"
    if hours > 0:
        return f"{hours}h {minutes}m left"
    return f"{minutes}m left"


def time_left(end: str, now: datetime) -> str:
    """Time remaining until `end` as seen from `now`."""
    return format_time_left(parse_instant(end, now) - now)
