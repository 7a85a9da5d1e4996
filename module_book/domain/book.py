from __future__ import annotations

from collections.abc import Iterable, Iterator

from .entities import Task, is_same_task


class ModuleBook:
    """Ordered collection of tasks.

    Not thread-safe: callers sharing a book must serialise each command.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def has_task(self, task: Task) -> bool:
        return any(is_same_task(existing, task) for existing in self._tasks)

    def add_task(self, task: Task) -> None:
        self._tasks.append(task)

    def add_tasks(self, tasks: Iterable[Task]) -> None:
        self._tasks.extend(tasks)

    def set_task(self, target: Task, edited: Task) -> None:
        """Replace ``target`` with ``edited``, preferring the very same object over an equal one."""
        self._tasks[self._index_of(target)] = edited

    def _index_of(self, task: Task) -> int:
        for index, existing in enumerate(self._tasks):
            if existing is task:
                return index
        try:
            return self._tasks.index(task)
        except ValueError:
            raise KeyError(f"task not in module book: {task}") from None
