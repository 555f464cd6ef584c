"""Helpers for working with timezone-aware datetimes."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def resolve_timezone(tz_name: str) -> tzinfo:
    """Resolve ``tz_name`` (an IANA name or ``UTC+hh:mm``) into a ``tzinfo``.

    Raises ``ValueError`` when the name cannot be resolved.
    """

    candidate = (tz_name or "").strip()
    if not candidate:
        raise ValueError("Timezone name is empty")
    try:
        return ZoneInfo(candidate)
    except (ZoneInfoNotFoundError, ValueError):
        match = _OFFSET_PATTERN.match(candidate)
        if match:
            sign = -1 if match.group("sign") == "-" else 1
            hours = int(match.group("hours"))
            minutes = int(match.group("minutes") or 0)
            offset = timedelta(hours=hours, minutes=minutes)
            return timezone(sign * offset)
    raise ValueError(f"Unknown timezone '{candidate}'")


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp as returned by the Reactor API."""

    if not isinstance(value, str) or not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def localize_timestamp(value: str | None, tz: tzinfo) -> str | None:
    """Return ``value`` expressed in ``tz``; unparseable values are returned untouched."""

    parsed = parse_timestamp(value)
    if parsed is None:
        return value
    return parsed.astimezone(tz).isoformat()


__all__ = ["localize_timestamp", "parse_timestamp", "resolve_timezone", "utc_now"]
