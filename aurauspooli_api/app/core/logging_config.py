"""
Logging setup for the API process.

Everything logs through ``logging.getLogger(__name__)``, so records from
the service layer and the directory arrive under ``aurauspooli_api.*``.
The root logger gets a console handler at ``LOG_LEVEL``.  When
``LOG_FILE`` is set a file handler is added as well, with its own
threshold (``LOG_FILE_LEVEL``) so the file can keep DEBUG records such
as skipped counter updates while the console stays at INFO.
"""

import logging
from pathlib import Path
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(name: Optional[str], default: int = logging.INFO) -> int:
    if not name:
        return default
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else default


def build_handlers(
    level: str = "INFO",
    logfile: Optional[str] = None,
    file_level: Optional[str] = None,
) -> List[logging.Handler]:
    """Console handler, plus a UTF-8 file handler when ``logfile`` is set.

    ``file_level`` defaults to ``level``.  Unknown level names fall back
    to INFO.
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    console_level = _level(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    handlers: List[logging.Handler] = [console_handler]

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setLevel(_level(file_level, console_level))
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, file_level: Optional[str] = None) -> None:
    """Attach the handlers from ``build_handlers`` to the root logger once.

    The root level is the lowest of the handler levels so that each
    handler applies its own threshold.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (tests, repeated ``create_app`` calls).
        return

    handlers = build_handlers(level, logfile, file_level)
    root.setLevel(min(handler.level for handler in handlers))
    for handler in handlers:
        root.addHandler(handler)
