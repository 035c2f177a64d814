from __future__ import annotations

import calendar
from datetime import date, datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Server-side 'now' in UTC (naive, canonical)."""
    return datetime.utcnow()


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a calendar date in ISO form (YYYY-MM-DD).

    - None / "" -> None
    - A full ISO datetime is accepted and truncated to its date part
    - Anything else raises ValueError
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    s = str(value).strip()
    if not s:
        return None
    if len(s) > 10:
        return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    return date.fromisoformat(s)


def parse_month(value: Optional[str]) -> tuple[date, date]:
    """
    Parse a calendar month "YYYY-MM" into its (first day, last day).

    Raises ValueError for anything else.
    """
    s = str(value or "").strip()
    if len(s) != 7:
        raise ValueError(f"invalid month: {value!r}")
    first = datetime.strptime(s, "%Y-%m").date()
    last = first.replace(day=calendar.monthrange(first.year, first.month)[1])
    return first, last


def format_date(value: Optional[date]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat()


def to_utc_z(dt: Optional[datetime]) -> Optional[str]:
    """
    Serializes datetime to ISO-8601 with trailing 'Z'.
    If dt is naive, it is treated as UTC.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt_utc = dt.astimezone(timezone.utc).replace(microsecond=0)
    return dt_utc.isoformat().replace("+00:00", "Z")
