from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from module_book.domain.entities import Task
from module_book.domain.enums import RecurrenceType
from module_book.domain.exceptions import InvalidRecurrenceType
from module_book.domain.values import Deadline, DoneStatus, Recurrence

HORIZON_YEARS = 1


def next_deadline(deadline: Deadline, recurrence: Optional[Recurrence]) -> Deadline:
    """Return the deadline one recurrence interval after ``deadline``."""
    return deadline.with_time(_step(deadline.time, _rule_of(recurrence)))


def materialize(seed: Task) -> list[Task]:
    """Expand the future occurrences of ``seed`` over one year.

    Occurrences fall in ``[seed + 1 step, seed + 1 year)``. Each one steps from
    the previous generated occurrence and is created not done. Near the end of
    the calendar the horizon stops at ``datetime.max``.
    """
    rule = _rule_of(seed.recurrence)
    end = _horizon_end(seed.deadline.time)
    not_done = DoneStatus(False)
    occurrences: list[Task] = []

    time = _step_within_calendar(seed.deadline.time, rule)
    while time is not None and time < end:
        occurrence = seed.with_deadline(seed.deadline.with_time(time))
        occurrences.append(occurrence.with_done_status(not_done))
        time = _step_within_calendar(time, rule)
    return occurrences


def _rule_of(recurrence: Optional[Recurrence]) -> RecurrenceType:
    if recurrence is None:
        raise InvalidRecurrenceType()
    return recurrence.rule


def _step(time: datetime, rule: RecurrenceType) -> datetime:
    if rule == RecurrenceType.DAILY:
        return time + timedelta(days=1)
    if rule == RecurrenceType.WEEKLY:
        return time + timedelta(days=7)
    if rule == RecurrenceType.MONTHLY:
        return _add_months(time, 1)
    raise InvalidRecurrenceType()


def _step_within_calendar(time: datetime, rule: RecurrenceType) -> Optional[datetime]:
    try:
        return _step(time, rule)
    except OverflowError:
        return None


def _horizon_end(start: datetime) -> datetime:
    try:
        return _add_months(start, 12 * HORIZON_YEARS)
    except OverflowError:
        return datetime.max


# Month arithmetic clamps to the last day of the target month.
def _add_months(base: datetime, months: int) -> datetime:
    year = base.year + (base.month - 1 + months) // 12
    if year > datetime.max.year:
        raise OverflowError(f"year {year} is out of range")
    month = (base.month - 1 + months) % 12 + 1
    day = min(base.day, _days_in_month(year, month))
    return base.replace(year=year, month=month, day=day)


def _days_in_month(year: int, month: int) -> int:
    if month == 12:
        return 31
    return (date(year, month + 1, 1) - timedelta(days=1)).day
