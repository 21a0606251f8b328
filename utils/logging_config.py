"""Logging setup for the Wiscreen service."""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'
LOG_FILE_NAME = "wiscreen.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUPS = 3

# Per-request access lines from the Flask dev server drown out engine logs
QUIET_LOGGERS = ("werkzeug",)


def level_from_env(var: str = "WISCREEN_LOG_LEVEL", default: str = "INFO") -> int:
    """Parse a level name from the environment, falling back to default."""
    name = os.environ.get(var, default).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return getattr(logging, default.upper())
    return level


def setup_logging(level: int = logging.INFO, data_dir: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger for the service.

    Args:
        level: Console level; the rotating file (if any) always records DEBUG
        data_dir: Directory for wiscreen.log (None = console only)

    Returns:
        The "wiscreen" application logger
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if data_dir else level)
    root.handlers = []

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    if data_dir:
        log_path = Path(data_dir) / LOG_FILE_NAME
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return logging.getLogger("wiscreen")
