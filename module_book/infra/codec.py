from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from module_book.domain.entities import Task
from module_book.domain.exceptions import InvalidValue, MissingField
from module_book.domain.values import (
    Deadline,
    Description,
    DoneStatus,
    Module,
    Name,
    Recurrence,
    Tag,
    Workload,
)

FIELDS = ("name", "deadline", "module", "description", "workload", "doneStatus", "recurrence", "tagged")
TAG_FIELD = "tagName"
NOT_RECURRING = ""
RECORD_CONSTRAINTS = "Task records should be objects of named fields"
TAGGED_CONSTRAINTS = "Tags should be stored as a list of tag records"

# Scalar fields in validation order, with the value object each one builds.
_SCALARS = (
    ("name", Name),
    ("deadline", Deadline),
    ("module", Module),
    ("description", Description),
    ("workload", Workload),
    ("doneStatus", DoneStatus),
)


def encode(task: Task) -> dict[str, Any]:
    return {
        "name": task.name.value,
        "deadline": task.deadline.value,
        "module": task.module.value,
        "description": task.description.value,
        "workload": task.workload.value,
        "doneStatus": task.done_status.value,
        "recurrence": task.recurrence.value if task.recurrence is not None else NOT_RECURRING,
        "tagged": [{TAG_FIELD: tag.name} for tag in sorted(task.tags, key=lambda tag: tag.name)],
    }


def decode(record: Mapping[str, Any]) -> Task:
    """Build a task from a stored record.

    Raises ``MissingField`` for an absent scalar field and the value object's
    ``InvalidValue`` for a malformed one, checking fields in storage order.
    A missing or empty ``recurrence`` means the task does not recur.
    """
    if not isinstance(record, Mapping):
        raise InvalidValue("Task", RECORD_CONSTRAINTS)

    values = {}
    for key, value_type in _SCALARS:
        raw = record.get(key)
        if raw is None:
            raise MissingField(value_type.__name__)
        if not value_type.is_valid(raw):
            raise InvalidValue(value_type.__name__, value_type.MESSAGE_CONSTRAINTS)
        values[key] = value_type(raw)

    common = dict(
        name=values["name"],
        module=values["module"],
        deadline=values["deadline"],
        description=values["description"],
        workload=values["workload"],
        done_status=values["doneStatus"],
    )

    raw_recurrence = record.get("recurrence") or NOT_RECURRING
    recurrence = None if raw_recurrence == NOT_RECURRING else Recurrence(raw_recurrence)
    tagged = record.get("tagged") or []
    if not isinstance(tagged, list):
        raise InvalidValue(Tag.__name__, TAGGED_CONSTRAINTS)
    tags = frozenset(_decode_tag(item) for item in tagged)
    if recurrence is None:
        return Task.one_off(tags=tags, **common)
    return Task.recurring(recurrence=recurrence, tags=tags, **common)


def _decode_tag(item: Mapping[str, Any]) -> Tag:
    raw = item.get(TAG_FIELD) if isinstance(item, Mapping) else None
    if raw is None:
        raise MissingField(Tag.__name__)
    return Tag(raw)
