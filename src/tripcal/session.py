from __future__ import annotations
from dataclasses import dataclass
from datetime import time
from enum import Enum
from typing import List, Optional

from .days import DayLike, TimeLike, day_key, parse_time
from .models import Event, InvalidTransition, NotFound
from .schedule import Schedule


class SessionState(Enum):
    BROWSING = "browsing"
    DAY_SELECTED = "day_selected"
    EDITING = "editing"


@dataclass
class Draft:
    """Values currently held by the add/edit form."""
    title: str
    description: str
    start_time: time
    end_time: time


class SchedulerSession:
    """Drives a Schedule through the calendar screen's states.

    BROWSING -> DAY_SELECTED on pick_day, back again on back().
    DAY_SELECTED -> EDITING on start_add / start_edit.
    EDITING -> DAY_SELECTED on a successful save or on cancel; a save with an
    invalid interval raises InvalidInterval and stays in EDITING.
    """

    def __init__(
        self,
        schedule: Schedule | None = None,
        default_start: TimeLike = "09:00",
        default_end: TimeLike = "09:00",
    ) -> None:
        self.schedule = schedule or Schedule()
        self.state = SessionState.BROWSING
        self.selected_day: Optional[str] = None
        self.editing_target: Optional[Event] = None
        self.draft: Optional[Draft] = None
        self.pending_delete: Optional[Event] = None
        self._default_start = parse_time(default_start)
        self._default_end = parse_time(default_end)

    def pick_day(self, day: DayLike) -> str:
        self._require(SessionState.BROWSING, SessionState.DAY_SELECTED, action="pick a day")
        self.selected_day = day_key(day)
        self.pending_delete = None
        self.state = SessionState.DAY_SELECTED
        return self.selected_day

    def back(self) -> None:
        self._require(SessionState.DAY_SELECTED, action="go back")
        self.selected_day = None
        self.pending_delete = None
        self.state = SessionState.BROWSING

    def events(self) -> List[Event]:
        self._require(SessionState.DAY_SELECTED, SessionState.EDITING, action="list events")
        return self.schedule.list(self.current_day())

    def start_add(self) -> Draft:
        self._require(SessionState.DAY_SELECTED, action="add an event")
        self.pending_delete = None
        self.editing_target = None
        self.draft = Draft(title="", description="", start_time=self._default_start, end_time=self._default_end)
        self.state = SessionState.EDITING
        return self.draft

    def start_edit(self, event_id: str) -> Draft:
        self._require(SessionState.DAY_SELECTED, action="edit an event")
        event = self.schedule.get(self.current_day(), event_id)
        self.pending_delete = None
        self.editing_target = event
        self.draft = Draft(
            title=event.title,
            description=event.description,
            start_time=event.start_time,
            end_time=event.end_time,
        )
        self.state = SessionState.EDITING
        return self.draft

    def save(self, title: str, description: str, start_time: TimeLike, end_time: TimeLike) -> Event:
        self._require(SessionState.EDITING, action="save")
        start = parse_time(start_time)
        end = parse_time(end_time)
        self.draft = Draft(title=title, description=description, start_time=start, end_time=end)

        # InvalidInterval propagates with the form still open and the rejected values kept.
        try:
            if self.editing_target is None:
                event = self.schedule.add(self.current_day(), title, description, start, end)
            else:
                event = self.schedule.update(self.current_day(), self.editing_target.id, title, description, start, end)
        except NotFound:
            self._close_form()
            raise

        self._close_form()
        return event

    def cancel(self) -> None:
        if self.state is SessionState.EDITING:
            self._close_form()
            return
        if self.state is SessionState.DAY_SELECTED and self.pending_delete is not None:
            self.cancel_delete()
            return
        raise InvalidTransition(f"Nothing to cancel while {self.state.value}.")

    def request_delete(self, event_id: str) -> Event:
        self._require(SessionState.DAY_SELECTED, action="delete an event")
        self.pending_delete = self.schedule.get(self.current_day(), event_id)
        return self.pending_delete

    def cancel_delete(self) -> None:
        self._require(SessionState.DAY_SELECTED, action="cancel a delete")
        self.pending_delete = None

    def confirm_delete(self) -> Event:
        self._require(SessionState.DAY_SELECTED, action="confirm a delete")
        if self.pending_delete is None:
            raise InvalidTransition("No delete pending.")
        target = self.pending_delete
        self.pending_delete = None
        return self.schedule.delete(self.current_day(), target.id)

    def _close_form(self) -> None:
        self.editing_target = None
        self.draft = None
        self.state = SessionState.DAY_SELECTED

    def current_day(self) -> str:
        if self.selected_day is None:
            raise InvalidTransition("No day selected.")
        return self.selected_day

    def _require(self, *states: SessionState, action: str) -> None:
        if self.state not in states:
            raise InvalidTransition(f"Cannot {action} while {self.state.value}.")
