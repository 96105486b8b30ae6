"""
Logging configuration for the Contacts Manager service.

Handlers live on the root logger so third-party output ends up in the
same place, but levels are split: ``LOG_LEVEL`` applies to the
``contacts_manager`` package only, while chatty libraries (workbook
parsing, multipart uploads, uvicorn's per-request access lines) are
held at ``library_level``.

``setup_logging`` may be called repeatedly (every ``create_app`` does).
Levels are re-applied on each call; handlers are attached once and
recognised by name.
"""

import logging
from pathlib import Path
from typing import Optional

APP_LOGGER = "contacts_manager"
NOISY_LOGGERS = ("openpyxl", "multipart", "python_multipart", "uvicorn.access")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "contacts_manager.console"
FILE_HANDLER = "contacts_manager.file"


def _level(name: Optional[str], default: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"``; unknown names give ``default``."""
    value = logging.getLevelName((name or "").upper())
    return value if isinstance(value, int) else default


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    library_level: str = "WARNING",
) -> logging.Logger:
    """Configure logging and return the application logger.

    Parameters
    ----------
    level : str
        Level for loggers under ``contacts_manager``.
    logfile : Optional[str]
        Also write records to this file.  Empty or ``None`` means
        console only.
    library_level : str
        Level for the root logger and the libraries in
        ``NOISY_LOGGERS``.
    """
    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(_level(level))

    quiet = _level(library_level, logging.WARNING)
    root = logging.getLogger()
    root.setLevel(quiet)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(root, CONSOLE_HANDLER):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile and not _has_handler(root, FILE_HANDLER):
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return app_logger
