from __future__ import annotations

import pytest

from module_book.domain.entities import Task
from module_book.domain.values import Deadline, Description, DoneStatus, Module, Name, Recurrence, Tag, Workload


def build_task(
    name: str = "Midterm",
    module: str = "CS3243",
    deadline: str = "2021-03-07 08:30",
    description: str = "Not include CSP.",
    workload: str = "3",
    done: bool = False,
    recurrence: str | None = None,
    tags: tuple[str, ...] = ("highPriority",),
) -> Task:
    fields = dict(
        name=Name(name),
        module=Module(module),
        deadline=Deadline(deadline),
        description=Description(description),
        workload=Workload(workload),
        done_status=DoneStatus(done),
        tags=[Tag(tag) for tag in tags],
    )
    if recurrence is None:
        return Task.one_off(**fields)
    return Task.recurring(recurrence=Recurrence(recurrence), **fields)


@pytest.fixture
def make_task():
    return build_task
