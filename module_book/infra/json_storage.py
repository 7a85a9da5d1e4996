from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from module_book.domain.book import ModuleBook
from module_book.domain.exceptions import DataConversionError, InvalidValue, MissingField

from .codec import decode, encode

logger = logging.getLogger(__name__)


class JsonTaskStorage:
    """Reads and writes a module book as ``{"tasks": [record, ...]}``."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read_book(self) -> Optional[ModuleBook]:
        if not self.path.exists():
            logger.info("Data file %s not found", self.path)
            return None

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise DataConversionError(f"{self.path} is not valid JSON: {exc}") from exc

        records = data.get("tasks") if isinstance(data, dict) else None
        if not isinstance(records, list):
            raise DataConversionError(f"{self.path} has no task list")

        try:
            return ModuleBook(decode(record) for record in records)
        except (MissingField, InvalidValue) as exc:
            raise DataConversionError(f"{self.path}: {exc}") from exc

    def save_book(self, book: ModuleBook) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"tasks": [encode(task) for task in book]}
        self.path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info("Exported %s tasks to %s", len(book), self.path)
