from __future__ import annotations
from datetime import date, datetime, time
from typing import Union
from zoneinfo import ZoneInfo

DAY_KEY_FORMAT = "%Y-%m-%d"
DEFAULT_TIME_FORMAT = "%-I:%M %p"

DayLike = Union[str, date, datetime]
TimeLike = Union[str, time]


def day_key(value: DayLike) -> str:
    """Return the canonical YYYY-MM-DD key for a date, datetime or key string."""
    if isinstance(value, datetime):
        return value.date().strftime(DAY_KEY_FORMAT)
    if isinstance(value, date):
        return value.strftime(DAY_KEY_FORMAT)
    if isinstance(value, str):
        try:
            parsed = datetime.strptime(value.strip(), DAY_KEY_FORMAT)
        except ValueError as exc:
            raise ValueError(f"Invalid day key {value!r}; expected YYYY-MM-DD.") from exc
        return parsed.strftime(DAY_KEY_FORMAT)
    raise ValueError(f"Unsupported day value: {value!r}")


def key_to_date(key: str) -> date:
    return datetime.strptime(day_key(key), DAY_KEY_FORMAT).date()


def parse_time(value: TimeLike) -> time:
    # Minute resolution, like an hour/minute picker.
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0, tzinfo=None)
    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            raise ValueError(f"Invalid time {value!r}; expected HH:MM.")
        try:
            return time(hour=int(parts[0]), minute=int(parts[1]))
        except ValueError as exc:
            raise ValueError(f"Invalid time {value!r}; expected HH:MM.") from exc
    raise ValueError(f"Unsupported time value: {value!r}")


def format_time(t: time, fmt: str = DEFAULT_TIME_FORMAT) -> str:
    return t.strftime(fmt)


def today_key(tz: ZoneInfo) -> str:
    return day_key(datetime.now(tz=tz))
