from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Optional

from .values import Deadline, Description, DoneStatus, Module, Name, Recurrence, Tag, Workload


@dataclass(frozen=True)
class Task:
    """A task in the module book.

    Every field is fixed at construction. A task is recurring exactly when it
    carries a recurrence, so changing the rule means building a new task.
    """

    name: Name
    module: Module
    deadline: Deadline
    description: Description
    workload: Workload
    done_status: DoneStatus
    tags: frozenset[Tag] = frozenset()
    recurrence: Optional[Recurrence] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", frozenset(self.tags))

    @classmethod
    def one_off(
        cls,
        name: Name,
        module: Module,
        deadline: Deadline,
        description: Description,
        workload: Workload,
        done_status: DoneStatus,
        tags: Iterable[Tag] = (),
    ) -> Task:
        return cls(name, module, deadline, description, workload, done_status, frozenset(tags))

    @classmethod
    def recurring(
        cls,
        name: Name,
        module: Module,
        deadline: Deadline,
        description: Description,
        workload: Workload,
        done_status: DoneStatus,
        recurrence: Recurrence,
        tags: Iterable[Tag] = (),
    ) -> Task:
        if recurrence is None:
            raise TypeError("a recurring task needs a recurrence")
        return cls(name, module, deadline, description, workload, done_status, frozenset(tags), recurrence)

    @property
    def is_recurring(self) -> bool:
        return self.recurrence is not None

    def with_deadline(self, deadline: Deadline) -> Task:
        return replace(self, deadline=deadline)

    def with_done_status(self, done_status: DoneStatus) -> Task:
        return replace(self, done_status=done_status)

    def with_recurrence(self, recurrence: Recurrence) -> Task:
        return replace(self, recurrence=recurrence)

    def __str__(self) -> str:
        parts = [
            f"Name: {self.name}",
            f"Deadline: {self.deadline}",
            f"Module: {self.module}",
            f"Description: {self.description}",
            f"Workload: {self.workload}",
            f"Completion Status: {self.done_status}",
        ]
        if self.recurrence is not None:
            parts.append(f"Recurrence: {self.recurrence}")
        if self.tags:
            parts.append("Tags: " + "".join(sorted(str(tag) for tag in self.tags)))
        return "; ".join(parts)


def task_equals(task: Task, other: Task) -> bool:
    """All fields match."""
    return task == other


def equal_recurring_task(task: Task, other: Task) -> bool:
    """Both tasks belong to the same recurring series.

    Ignores deadline, recurrence rule and completion status, so every
    occurrence of a series matches its representative whatever rule applies.
    """
    return (
        task.name == other.name
        and task.module == other.module
        and task.description == other.description
        and task.workload == other.workload
        and task.tags == other.tags
    )


def is_same_task(task: Task, other: Task) -> bool:
    """Same name and module; used to reject duplicate submissions."""
    return task.name == other.name and task.module == other.module