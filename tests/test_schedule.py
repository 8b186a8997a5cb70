from datetime import date, time
from itertools import count

import pytest

from tripcal.models import InvalidInterval, NotFound
from tripcal.schedule import Schedule

DAY = "2025-06-01"


def _schedule() -> Schedule:
    ids = count(1)
    return Schedule(id_factory=lambda: f"evt-{next(ids)}")


def test_add_returns_event_with_exact_times():
    schedule = _schedule()

    event = schedule.add(DAY, "Museum", "Modern art wing", time(9, 0), time(10, 30))

    assert event.id == "evt-1"
    assert event.start_time == time(9, 0)
    assert event.end_time == time(10, 30)
    assert schedule.list(DAY) == [event]


def test_add_accepts_hhmm_strings_and_date_keys():
    schedule = _schedule()

    event = schedule.add(date(2025, 6, 1), "Lunch", "", "12:00", "13:15")

    assert event.start_time == time(12, 0)
    assert schedule.list(DAY) == [event]


def test_list_sorts_by_start_time():
    schedule = _schedule()
    a = schedule.add(DAY, "A", "", time(9, 0), time(10, 0))
    b = schedule.add(DAY, "B", "", time(8, 0), time(9, 30))

    assert schedule.list(DAY) == [b, a]


def test_list_keeps_insertion_order_for_equal_start_times():
    schedule = _schedule()
    first = schedule.add(DAY, "First", "", time(9, 0), time(10, 0))
    second = schedule.add(DAY, "Second", "", time(9, 0), time(9, 30))
    early = schedule.add(DAY, "Early", "", time(7, 0), time(8, 0))

    assert schedule.list(DAY) == [early, first, second]


def test_list_unknown_day_is_empty():
    assert _schedule().list("2030-01-01") == []


@pytest.mark.parametrize("start,end", [(time(10, 0), time(9, 0)), (time(9, 0), time(9, 0))])
def test_add_rejects_invalid_interval_without_storing(start, end):
    schedule = _schedule()

    with pytest.raises(InvalidInterval) as exc_info:
        schedule.add(DAY, "Bad", "", start, end)

    assert exc_info.value.start_time == start
    assert "start time is before end time" in str(exc_info.value)
    assert schedule.list(DAY) == []
    assert DAY not in schedule
    assert len(schedule) == 0


def test_overlapping_events_are_allowed():
    schedule = _schedule()
    schedule.add(DAY, "Tour", "", time(9, 0), time(12, 0))
    schedule.add(DAY, "Brunch", "", time(10, 0), time(11, 0))

    assert len(schedule.list(DAY)) == 2


def test_update_replaces_fields_and_keeps_id():
    schedule = _schedule()
    event = schedule.add(DAY, "Check-in", "Hotel", time(15, 0), time(16, 0))

    updated = schedule.update(DAY, event.id, "Late check-in", "Hotel lobby", time(17, 0), time(17, 30))

    assert updated.id == event.id
    assert updated.title == "Late check-in"
    assert schedule.list(DAY) == [updated]


def test_update_rejects_invalid_interval_and_leaves_event_untouched():
    schedule = _schedule()
    event = schedule.add(DAY, "Dinner", "", time(19, 0), time(21, 0))

    with pytest.raises(InvalidInterval):
        schedule.update(DAY, event.id, "Dinner", "", time(22, 0), time(21, 0))

    assert schedule.list(DAY) == [event]


def test_update_unknown_id_raises_not_found():
    schedule = _schedule()

    with pytest.raises(NotFound) as exc_info:
        schedule.update(DAY, "missing", "x", "", time(9, 0), time(10, 0))

    assert exc_info.value.day_key == DAY
    assert exc_info.value.event_id == "missing"


def test_update_only_touches_target_event():
    schedule = _schedule()
    target = schedule.add(DAY, "Target", "", time(9, 0), time(10, 0))
    sibling = schedule.add(DAY, "Sibling", "", time(11, 0), time(12, 0))
    other_day = schedule.add("2025-06-02", "Other", "", time(9, 0), time(10, 0))

    schedule.update(DAY, target.id, "Changed", "", time(13, 0), time(14, 0))

    assert sibling in schedule.list(DAY)
    assert schedule.list("2025-06-02") == [other_day]


def test_update_with_wrong_day_raises_not_found():
    schedule = _schedule()
    event = schedule.add(DAY, "Ferry", "", time(6, 0), time(7, 0))

    with pytest.raises(NotFound):
        schedule.update("2025-06-02", event.id, "Ferry", "", time(6, 0), time(7, 0))


def test_delete_removes_event_and_second_delete_raises():
    schedule = _schedule()
    keep = schedule.add(DAY, "Keep", "", time(8, 0), time(9, 0))
    drop = schedule.add(DAY, "Drop", "", time(9, 0), time(10, 0))

    assert schedule.delete(DAY, drop.id) == drop
    assert schedule.list(DAY) == [keep]

    with pytest.raises(NotFound):
        schedule.delete(DAY, drop.id)


def test_delete_last_event_drops_day():
    schedule = _schedule()
    event = schedule.add(DAY, "Only", "", time(8, 0), time(9, 0))
    schedule.add("2025-05-31", "Earlier", "", time(8, 0), time(9, 0))

    schedule.delete(DAY, event.id)

    assert schedule.days() == ["2025-05-31"]


def test_invalid_day_key_is_rejected():
    with pytest.raises(ValueError):
        _schedule().add("06/01/2025", "x", "", time(9, 0), time(10, 0))


def test_default_ids_are_unique():
    schedule = Schedule()
    ids = {schedule.add(DAY, str(i), "", time(9, 0), time(10, 0)).id for i in range(20)}

    assert len(ids) == 20


def test_update_checks_interval_before_looking_up_event():
    schedule = _schedule()

    with pytest.raises(InvalidInterval):
        schedule.update(DAY, "missing", "x", "", time(10, 0), time(9, 0))
