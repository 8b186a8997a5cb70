from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

INVALID_INTERVAL_MESSAGE = "Ensure start time is before end time and both are within the same day."


@dataclass(frozen=True)
class Event:
    id: str
    title: str
    description: str
    start_time: time            # time of day; the day key carries the date
    end_time: time

    @property
    def duration(self) -> timedelta:
        anchor = date(2000, 1, 1)
        return datetime.combine(anchor, self.end_time) - datetime.combine(anchor, self.start_time)


class SchedulerError(Exception):
    pass


class InvalidInterval(SchedulerError):
    def __init__(self, start_time: time, end_time: time) -> None:
        super().__init__(INVALID_INTERVAL_MESSAGE)
        self.start_time = start_time
        self.end_time = end_time


class NotFound(SchedulerError):
    def __init__(self, day_key: str, event_id: str) -> None:
        super().__init__(f"No event {event_id} on {day_key}.")
        self.day_key = day_key
        self.event_id = event_id


class InvalidTransition(SchedulerError):
    pass
