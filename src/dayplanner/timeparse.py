from __future__ import annotations

import logging

from .errors import CorruptEntry, InvalidTime

logger = logging.getLogger(__name__)

_ALLOWED = set("0123456789:")


def parse_time(value: str) -> str:
    """
    Normalize user time input into "H:MM".
    Accepts:
      - "9:30", "09:30", "9:5" -> "9:30", "9:30", "9:05"
      - stray characters are dropped first: " 9.30 " is "930" (no colon),
        "at 14:00h" is "14:00"
    Raises InvalidTime for a missing ":", non-numeric parts, hour outside
    0-23 or minute outside 0-59.
    """
    cleaned = "".join(ch for ch in value if ch in _ALLOWED)
    if ":" not in cleaned:
        raise InvalidTime(value)

    hours_s, mins_s = cleaned.split(":", 1)
    try:
        hours = int(hours_s)
        mins = int(mins_s)
    except ValueError as e:
        raise InvalidTime(value) from e

    if not (0 <= hours <= 23) or not (0 <= mins <= 59):
        raise InvalidTime(value)

    result = f"{hours}:{mins:02d}"
    logger.debug("parsed time %r -> %s", value, result)
    return result


def time_key(time: str) -> int:
    """Order key: the time with its colon removed, read as an integer."""
    try:
        return int(time.replace(":", ""))
    except ValueError as e:
        raise CorruptEntry(f"Cannot order entry with time {time!r}") from e
