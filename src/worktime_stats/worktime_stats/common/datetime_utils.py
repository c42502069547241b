from __future__ import annotations

from datetime import date, datetime, time


def parse_iso_datetime(value: str) -> datetime:
    """Parse `YYYY-MM-DDTHH:MM[:SS]` (or a bare date) into a naive datetime.

    Shift timestamps are naive local time, so values carrying a UTC offset are
    rejected with ValueError.
    """
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is not None:
        raise ValueError(f"timestamp {value!r} must not carry a UTC offset")
    return parsed


def parse_clock(value: str, fmt: str) -> time:
    return datetime.strptime(value, fmt).time()


def parse_day(value: str, fmt: str) -> date:
    return datetime.strptime(value, fmt).date()


def end_of_day(moment: datetime) -> datetime:
    """Last whole second of `moment`'s calendar day (23:59:59)."""
    return moment.replace(hour=23, minute=59, second=59, microsecond=0)


def earliest(a: datetime, b: datetime) -> datetime:
    return a if a < b else b


def latest(a: datetime, b: datetime) -> datetime:
    return a if a > b else b
