from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from snss_reader.app_config import AppConfig

CONSOLE_FORMAT = "<level>{level:<8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} - {message}"

FILE_ROTATION = "5 MB"
FILE_RETENTION = 3


def setup_logging(config: AppConfig) -> list[str]:
    """Send log records to stderr, and to ``config.log_file`` when one is set.

    Returns a short description of each sink.
    """
    logger.remove()
    logger.add(sys.stderr, level=config.log_level, format=CONSOLE_FORMAT)
    sinks = [f"stderr ({config.log_level})"]

    if config.log_file:
        path = Path(config.log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            path,
            level=config.log_level,
            format=FILE_FORMAT,
            rotation=FILE_ROTATION,
            retention=FILE_RETENTION,
        )
        sinks.append(f"{path} ({config.log_level})")

    return sinks
