from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from module_book.config import PROJECT_ROOT, SETTINGS, Settings

LOG_FILE_NAME = "module_book.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
# SQLAlchemy echoes every statement at INFO; the book is saved whole on boot.
QUIET_LOGGERS = ("sqlalchemy.engine", "alembic")


def setup_logging(settings: Settings = SETTINGS) -> Path:
    """Log to a rotating file under ``settings.log_dir`` and to the console.

    A relative ``log_dir`` is resolved against the project root. Returns the
    log file path.
    """
    log_dir = PROJECT_ROOT / settings.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logging.basicConfig(
        level=settings.log_level.upper(),
        handlers=[file_handler, console_handler],
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return log_file
