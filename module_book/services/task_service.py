from __future__ import annotations

import logging
from typing import Optional

from module_book.domain.book import ModuleBook
from module_book.domain.entities import Task, equal_recurring_task
from module_book.domain.enums import OutcomeKind
from module_book.domain.exceptions import DuplicateRecurrence, DuplicateTask, InvalidTaskIndex
from module_book.domain.filters import SHOW_ALL, TaskFilters
from module_book.domain.values import Index, Recurrence

from .recurrence import materialize
from .results import (
    MESSAGE_RECURRENCE_UPDATED,
    MESSAGE_RECURRING_TASK_ADDED,
    MESSAGE_TASK_ADDED,
    CommandResult,
)

logger = logging.getLogger(__name__)


def replace_series(
    book: ModuleBook,
    changed: Task,
    occurrences: Optional[list[Task]] = None,
) -> list[Task]:
    """Swap the representative of ``changed``'s series and expand its future.

    The first task in ``book`` belonging to the same series is replaced by
    ``changed``; one year of occurrences is then appended, skipping deadlines
    the series already holds. Returns the appended occurrences, or an empty
    list when the book has no task of that series.

    ``occurrences`` may carry the already materialized future of ``changed``.
    """
    match = next((task for task in book if equal_recurring_task(task, changed)), None)
    if match is None:
        logger.debug("No series found for %s", changed.name)
        return []

    if occurrences is None:
        occurrences = materialize(changed)
    taken = {
        task.deadline
        for task in book
        if task is not match and equal_recurring_task(task, changed)
    }
    fresh = [task for task in occurrences if task.deadline not in taken]

    book.set_task(match, changed)
    book.add_tasks(fresh)
    logger.info(
        "Series %s/%s now recurs %s: %s occurrences added, %s already present",
        changed.module,
        changed.name,
        changed.recurrence,
        len(fresh),
        len(occurrences) - len(fresh),
    )
    return fresh


class TaskService:
    def __init__(self, book: ModuleBook) -> None:
        self._book = book
        self._filters = SHOW_ALL

    @property
    def book(self) -> ModuleBook:
        return self._book

    @property
    def filters(self) -> TaskFilters:
        return self._filters

    def visible_tasks(self) -> list[Task]:
        return [task for task in self._book if self._filters.matches(task)]

    def update_filters(self, filters: TaskFilters) -> None:
        self._filters = filters

    def add_task(self, task: Task) -> CommandResult:
        if self._book.has_task(task):
            raise DuplicateTask()

        if task.is_recurring:
            # Materialize first so a failure leaves the book untouched.
            occurrences = materialize(task)
            self._book.add_task(task)
            occurrences = replace_series(self._book, task, occurrences)
            self.update_filters(SHOW_ALL)
            return CommandResult(
                OutcomeKind.RECURRING_TASK_ADDED,
                MESSAGE_RECURRING_TASK_ADDED.format(task),
                self._filters,
                tuple(occurrences),
            )

        self._book.add_task(task)
        self.update_filters(SHOW_ALL)
        logger.info("Added task %s/%s", task.module, task.name)
        return CommandResult(OutcomeKind.TASK_ADDED, MESSAGE_TASK_ADDED.format(task), self._filters)

    def recur_task(self, index: Index, recurrence: Recurrence) -> CommandResult:
        """Give the task shown at ``index`` a new rule and expand its series.

        The rule is applied to the first task of the series in the book, which
        need not be the one addressed: recurring a generated occurrence
        replaces the representative with a copy of that occurrence, leaving two
        tasks of the series that differ only in their rule.
        """
        shown = self.visible_tasks()
        if index.zero_based >= len(shown):
            raise InvalidTaskIndex()

        target = shown[index.zero_based]
        recurring = target.with_recurrence(recurrence)
        if target == recurring:
            raise DuplicateRecurrence(recurrence)

        occurrences = replace_series(self._book, recurring)
        self.update_filters(SHOW_ALL)
        return CommandResult(
            OutcomeKind.RECURRENCE_UPDATED,
            MESSAGE_RECURRENCE_UPDATED.format(recurring),
            self._filters,
            tuple(occurrences),
        )
