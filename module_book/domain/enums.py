from __future__ import annotations

from enum import IntEnum, StrEnum


class RecurrenceType(StrEnum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class WorkloadLevel(IntEnum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3


class OutcomeKind(StrEnum):
    TASK_ADDED = "task_added"
    RECURRING_TASK_ADDED = "recurring_task_added"
    RECURRENCE_UPDATED = "recurrence_updated"
