"""Rotating file + console logging setup."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3


def resolve_level(level: Union[int, str]) -> int:
    """Accept a logging constant or a level name from config ("debug", "INFO")."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    log_dir: str = "logs",
    level: Union[int, str] = logging.INFO,
    name: str = "candidate_portal",
) -> logging.Logger:
    """Attach a rotating ``<name>.log`` file and a stderr console to logger ``name``.

    Re-running replaces the handlers instead of stacking duplicates.
    stdout is left to the CLI's table and CSV output.
    """
    level = resolve_level(level)
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    file_handler = RotatingFileHandler(
        log_path / f"{name}.log",
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    console_handler = logging.StreamHandler(sys.stderr)

    for handler in (file_handler, console_handler):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
