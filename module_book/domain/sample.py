from __future__ import annotations

from .book import ModuleBook
from .entities import Task
from .values import Deadline, Description, DoneStatus, Module, Name, Recurrence, Tag, Workload


def sample_tasks() -> list[Task]:
    return [
        Task.recurring(
            Name("Midterm"),
            Module("CS3243"),
            Deadline("2021-03-07 08:30"),
            Description("Not include CSP."),
            Workload("3"),
            DoneStatus(False),
            Recurrence("monthly"),
            tag_set("highPriority"),
        ),
        Task.recurring(
            Name("Team Project"),
            Module("CS2103T"),
            Deadline("2021-03-15 16:00"),
            Description("Wrap up version 1.2."),
            Workload("3"),
            DoneStatus(True),
            Recurrence("monthly"),
            tag_set(),
        ),
    ]


def sample_book() -> ModuleBook:
    return ModuleBook(sample_tasks())


def tag_set(*names: str) -> frozenset[Tag]:
    return frozenset(Tag(name) for name in names)
