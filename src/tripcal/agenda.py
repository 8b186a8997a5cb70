from __future__ import annotations
from typing import List

from .days import DEFAULT_TIME_FORMAT, format_time, key_to_date
from .models import Event


def _format_header(key: str) -> str:
    # Example: Your Schedule: Sunday, June 1, 2025
    return "Your Schedule: " + key_to_date(key).strftime("%A, %B %-d, %Y")


def _format_duration(event: Event) -> str:
    minutes = int(event.duration.total_seconds()) // 60
    hours, minutes = divmod(minutes, 60)
    if hours and minutes:
        return f"{hours}h {minutes}m"
    if hours:
        return f"{hours}h"
    return f"{minutes}m"


def format_event(event: Event, time_format: str = DEFAULT_TIME_FORMAT) -> str:
    span = f"{format_time(event.start_time, time_format)} - {format_time(event.end_time, time_format)}"
    line = f"{span} ({_format_duration(event)})  {event.title}  [{event.id}]"
    if event.description.strip():
        line += f"\n    {event.description.strip()}"
    return line


def render_agenda(
    key: str,
    events: List[Event],
    time_format: str = DEFAULT_TIME_FORMAT,
    empty_message: str = "No events scheduled. Press + to add one.",
) -> str:
    lines = [_format_header(key)]
    if not events:
        lines.append(empty_message)
    for e in events:
        lines.append(format_event(e, time_format))
    return "\n".join(lines)
