from __future__ import annotations

from dataclasses import dataclass, field

from module_book.domain.entities import Task
from module_book.domain.enums import OutcomeKind
from module_book.domain.filters import SHOW_ALL, TaskFilters

MESSAGE_TASK_ADDED = "New task added successfully:\n{}"
MESSAGE_RECURRING_TASK_ADDED = "New recurring task added successfully:\n{}"
MESSAGE_RECURRENCE_UPDATED = "New recurrence to task added successfully: {}"


@dataclass(frozen=True)
class CommandResult:
    kind: OutcomeKind
    message: str
    filters: TaskFilters = SHOW_ALL
    occurrences: tuple[Task, ...] = field(default=(), compare=False)
