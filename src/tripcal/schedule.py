from __future__ import annotations
import uuid
from dataclasses import replace
from datetime import time
from typing import Callable, Dict, List, Optional

from .days import DayLike, TimeLike, day_key, parse_time
from .models import Event, InvalidInterval, NotFound

IdFactory = Callable[[], str]


def _new_id() -> str:
    return uuid.uuid4().hex


def _checked_interval(start_time: TimeLike, end_time: TimeLike) -> tuple[time, time]:
    start = parse_time(start_time)
    end = parse_time(end_time)
    if not start < end:
        raise InvalidInterval(start, end)
    return start, end


class Schedule:
    """In-memory trip calendar: day key -> events.

    The schedule is the only place events are created, replaced or removed.
    Events are frozen, so callers never hold a mutable reference to stored state.
    Every mutation touches a single day bucket and either completes or leaves
    the schedule unchanged.
    """

    def __init__(self, id_factory: IdFactory | None = None) -> None:
        self._events_by_day: Dict[str, List[Event]] = {}
        self._id_factory = id_factory or _new_id

    def add(
        self,
        day: DayLike,
        title: str,
        description: str,
        start_time: TimeLike,
        end_time: TimeLike,
    ) -> Event:
        key = day_key(day)
        start, end = _checked_interval(start_time, end_time)
        event = Event(
            id=self._id_factory(),
            title=title,
            description=description,
            start_time=start,
            end_time=end,
        )
        self._events_by_day.setdefault(key, []).append(event)
        return event

    def update(
        self,
        day: DayLike,
        event_id: str,
        title: str,
        description: str,
        start_time: TimeLike,
        end_time: TimeLike,
    ) -> Event:
        key = day_key(day)
        start, end = _checked_interval(start_time, end_time)
        bucket = self._events_by_day.get(key, [])
        index = self._index_of(bucket, event_id)
        if index is None:
            raise NotFound(key, event_id)
        updated = replace(
            bucket[index],
            title=title,
            description=description,
            start_time=start,
            end_time=end,
        )
        bucket[index] = updated
        return updated

    def delete(self, day: DayLike, event_id: str) -> Event:
        key = day_key(day)
        bucket = self._events_by_day.get(key, [])
        index = self._index_of(bucket, event_id)
        if index is None:
            raise NotFound(key, event_id)
        removed = bucket.pop(index)
        if not bucket:
            del self._events_by_day[key]
        return removed

    def list(self, day: DayLike) -> List[Event]:
        # sorted() is stable, so equal start times keep insertion order.
        return sorted(self._events_by_day.get(day_key(day), []), key=lambda e: e.start_time)

    def get(self, day: DayLike, event_id: str) -> Event:
        key = day_key(day)
        bucket = self._events_by_day.get(key, [])
        index = self._index_of(bucket, event_id)
        if index is None:
            raise NotFound(key, event_id)
        return bucket[index]

    def days(self) -> List[str]:
        return sorted(self._events_by_day)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._events_by_day.values())

    def __contains__(self, day: object) -> bool:
        try:
            return day_key(day) in self._events_by_day  # type: ignore[arg-type]
        except ValueError:
            return False

    @staticmethod
    def _index_of(bucket: List[Event], event_id: str) -> Optional[int]:
        for i, event in enumerate(bucket):
            if event.id == event_id:
                return i
        return None
