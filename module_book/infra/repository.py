from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, func, select

from module_book.domain.book import ModuleBook

from .codec import TAG_FIELD, decode, encode
from .db import SessionLocal
from .models import TaskModel, TaskTagModel

logger = logging.getLogger(__name__)


def _to_record(model: TaskModel) -> dict[str, Any]:
    return {
        "name": model.name,
        "deadline": model.deadline,
        "module": model.module,
        "description": model.description,
        "workload": model.workload,
        "doneStatus": model.done_status,
        "recurrence": model.recurrence or "",
        "tagged": [{TAG_FIELD: tag.tag_name} for tag in model.tags],
    }


def _to_model(record: dict[str, Any], sort_order: int) -> TaskModel:
    return TaskModel(
        sort_order=sort_order,
        name=record["name"],
        deadline=record["deadline"],
        module=record["module"],
        description=record["description"],
        workload=record["workload"],
        done_status=record["doneStatus"],
        recurrence=record["recurrence"],
        tags=[TaskTagModel(tag_name=tag[TAG_FIELD]) for tag in record["tagged"]],
    )


class TaskRepository:
    """Stores the module book as rows of task records.

    Every row goes through the codec, so a malformed row surfaces as
    ``MissingField`` or ``InvalidValue`` when the book is loaded.
    """

    def __init__(self, session_factory=SessionLocal) -> None:
        self._session_factory = session_factory

    def count(self) -> int:
        with self._session_factory() as session:
            return session.scalar(select(func.count()).select_from(TaskModel)) or 0

    def load_records(self) -> list[dict[str, Any]]:
        with self._session_factory() as session:
            stmt = select(TaskModel).order_by(TaskModel.sort_order.asc(), TaskModel.id.asc())
            return [_to_record(task) for task in session.scalars(stmt)]

    def save_records(self, records: list[dict[str, Any]]) -> None:
        with self._session_factory() as session:
            session.execute(delete(TaskTagModel))
            session.execute(delete(TaskModel))
            session.add_all(
                _to_model(record, sort_order) for sort_order, record in enumerate(records, start=1)
            )
            session.commit()
        logger.info("Saved %s tasks", len(records))

    def load_book(self) -> ModuleBook:
        return ModuleBook(decode(record) for record in self.load_records())

    def save_book(self, book: ModuleBook) -> None:
        self.save_records([encode(task) for task in book])
