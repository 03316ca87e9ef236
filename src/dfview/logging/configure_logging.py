from __future__ import annotations

import sys
from typing import Literal

from loguru import logger

LOG_LEVEL = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOGURU_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level}</level> | "
    "<cyan>{module}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

_console_handler_id: int | None = None


def configure_logger(console_log_level: LOG_LEVEL = "WARNING") -> None:
    global _console_handler_id

    if _console_handler_id is not None:
        logger.remove(_console_handler_id)
    else:
        logger.remove()  # remove the default stderr handler

    _console_handler_id = logger.add(
        sys.stderr, level=console_log_level, format=LOGURU_CONSOLE_FORMAT
    )
