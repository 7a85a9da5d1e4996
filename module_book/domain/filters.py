from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .entities import Task
from .values import Module

FILTER_KEYS = ("all", "pending", "done")


@dataclass(frozen=True)
class TaskFilters:
    filter_key: str = "all"
    module: Optional[Module] = None

    def __post_init__(self) -> None:
        if self.filter_key not in FILTER_KEYS:
            raise ValueError(f"unknown filter: {self.filter_key}")

    def matches(self, task: Task) -> bool:
        if self.filter_key == "pending" and task.done_status.is_done:
            return False
        if self.filter_key == "done" and not task.done_status.is_done:
            return False
        if self.module is not None and task.module != self.module:
            return False
        return True


SHOW_ALL = TaskFilters()
