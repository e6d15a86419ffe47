from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

# Day-bucketing key: a local calendar date, serialized as YYYY-MM-DD.
DayKey = date


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_day(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> DayKey:
    return now_local().date()


def day_key(value: datetime) -> DayKey:
    """Local calendar day a timestamp falls on."""
    return value.date()


def to_iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def from_iso(value: Any) -> Optional[datetime]:
    """Hydrate a stored timestamp back into a naive local datetime.

    Browser-era data carries UTC strings such as ``2024-05-01T09:30:00.000Z``;
    those are converted to local time so they compare with ``now_local()``.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value)
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def resolve_day(value: Any) -> DayKey:
    """Accept a date, datetime, ``YYYY-MM-DD`` string or None (today)."""
    if value is None or value == "":
        return today_local()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value))
