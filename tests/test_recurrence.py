from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from module_book.domain.exceptions import InvalidRecurrenceType
from module_book.domain.values import Deadline, Recurrence
from module_book.services.recurrence import materialize, next_deadline


def test_monthly_series_stops_before_one_year(make_task) -> None:
    seed = make_task(deadline="2021-03-07 08:30", recurrence="monthly")

    occurrences = materialize(seed)

    assert len(occurrences) == 11
    assert occurrences[0].deadline.value == "2021-04-07 08:30"
    assert occurrences[-1].deadline.value == "2022-02-07 08:30"
    assert all(task.deadline.time < datetime(2022, 3, 7, 8, 30) for task in occurrences)


def test_daily_series_covers_the_rest_of_the_year(make_task) -> None:
    seed = make_task(deadline="2021-01-01 00:00", recurrence="daily")

    occurrences = materialize(seed)

    assert len(occurrences) == 364
    assert occurrences[-1].deadline.value == "2021-12-31 00:00"
    gaps = {b.deadline.time - a.deadline.time for a, b in zip(occurrences, occurrences[1:])}
    assert gaps == {timedelta(days=1)}


def test_weekly_steps_seven_days_from_the_seed(make_task) -> None:
    seed = make_task(deadline="2021-01-04 09:00", recurrence="weekly")

    occurrences = materialize(seed)

    assert len(occurrences) == 52
    assert occurrences[0].deadline.time - seed.deadline.time == timedelta(days=7)
    assert occurrences[-1].deadline.value == "2022-01-03 09:00"


def test_occurrences_copy_the_seed_and_start_not_done(make_task) -> None:
    seed = make_task(recurrence="weekly", done=True, tags=("exam", "highPriority"))

    for task in materialize(seed):
        assert not task.done_status.is_done
        assert task.recurrence == seed.recurrence
        assert (task.name, task.module, task.description, task.workload, task.tags) == (
            seed.name,
            seed.module,
            seed.description,
            seed.workload,
            seed.tags,
        )


def test_materialize_is_deterministic(make_task) -> None:
    seed = make_task(recurrence="monthly")
    assert materialize(seed) == materialize(seed)


def test_monthly_step_clamps_to_month_end(make_task) -> None:
    seed = make_task(deadline="2021-01-31 10:00", recurrence="monthly")

    deadlines = [task.deadline.value for task in materialize(seed)]

    assert deadlines[:3] == ["2021-02-28 10:00", "2021-03-28 10:00", "2021-04-28 10:00"]
    assert deadlines[-1] == "2022-01-28 10:00"
    assert len(deadlines) == 12


def test_monthly_step_into_leap_february() -> None:
    deadline = next_deadline(Deadline("2024-01-30 23:59"), Recurrence("monthly"))
    assert deadline.value == "2024-02-29 23:59"


def test_horizon_from_leap_day_clamps(make_task) -> None:
    seed = make_task(deadline="2024-02-29 12:00", recurrence="daily")

    occurrences = materialize(seed)

    assert occurrences[-1].deadline.value == "2025-02-27 12:00"
    assert len(occurrences) == 364


def test_step_without_rule_is_rejected(make_task) -> None:
    with pytest.raises(InvalidRecurrenceType):
        next_deadline(Deadline("2021-01-01 00:00"), None)
    with pytest.raises(InvalidRecurrenceType):
        materialize(make_task())


def test_horizon_stops_at_the_end_of_the_calendar(make_task) -> None:
    monthly = materialize(make_task(deadline="9999-06-01 10:00", recurrence="monthly"))
    daily = materialize(make_task(deadline="9999-06-01 10:00", recurrence="daily"))

    assert [task.deadline.value for task in monthly][-1] == "9999-12-01 10:00"
    assert len(monthly) == 6
    assert daily[-1].deadline.value == "9999-12-31 10:00"
    assert len(daily) == 213


def test_early_year_series_keeps_padded_deadlines(make_task) -> None:
    occurrences = materialize(make_task(deadline="0999-12-15 08:00", recurrence="weekly"))

    assert occurrences[0].deadline.value == "0999-12-22 08:00"
    assert occurrences[-1].deadline.time.year == 1000
