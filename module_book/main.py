from __future__ import annotations

import logging
import sys
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from module_book.config import SETTINGS
from module_book.domain.book import ModuleBook
from module_book.domain.exceptions import DataConversionError, InvalidValue, MissingField
from module_book.domain.sample import sample_book
from module_book.infra.db import init_db
from module_book.infra.json_storage import JsonTaskStorage
from module_book.infra.logging import setup_logging
from module_book.infra.repository import TaskRepository
from module_book.services.task_service import TaskService

logger = logging.getLogger(__name__)


def load_initial_book(
    repo: TaskRepository,
    import_storage: Optional[JsonTaskStorage] = None,
) -> tuple[ModuleBook, bool]:
    """Return the starting book and whether it still has to be written to the database.

    An empty database is seeded from the JSON import file when one exists, else
    from the sample book. Stored or imported data that fails to decode yields an
    empty book that must not be saved over the rows it came from.
    """
    try:
        if repo.count() > 0:
            return repo.load_book(), False
    except (MissingField, InvalidValue) as exc:
        logger.warning("Stored tasks not in the correct format (%s). Starting with an empty module book", exc)
        return ModuleBook(), False

    if import_storage is not None:
        try:
            imported = import_storage.read_book()
        except DataConversionError as exc:
            logger.warning("Import file not in the correct format (%s). Starting with an empty module book", exc)
            return ModuleBook(), False
        if imported is not None:
            logger.info("Seeding the database from %s", import_storage.path)
            return imported, True

    logger.info("No stored tasks. Will be starting with a sample module book")
    return sample_book(), True


def main() -> None:
    setup_logging()
    logger.info("Initializing module book")
    try:
        init_db()
    except SQLAlchemyError as exc:
        logger.error("DB error: %s", exc)
        sys.exit(1)

    repo = TaskRepository()
    storage = JsonTaskStorage(SETTINGS.export_path) if SETTINGS.export_path else None
    book, seeded = load_initial_book(repo, storage)
    service = TaskService(book)
    if seeded:
        repo.save_book(service.book)
    elif storage is not None and len(service.book) > 0:
        # an empty unseeded book means the stored rows were unreadable
        storage.save_book(service.book)

    for position, task in enumerate(service.visible_tasks(), start=1):
        print(f"{position}. {task}")
    logger.info("Module book ready with %s tasks", len(service.book))


if __name__ == "__main__":
    main()
