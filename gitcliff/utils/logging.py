from __future__ import annotations

import os
import sys

from loguru import logger

LOG_FORMAT = "{time:HH:mm:ss} | {level:<7} | gitcliff.{module}:{function}:{line} - {message}"

_HANDLER_ID: int | None = None


def setup_logging(level: str | None = None) -> None:
    """
    Send gitcliff's own records to stderr.

    The first call replaces loguru's default sink; later calls only swap the
    level. Records go through `sys.stderr` as it is at write time, so the
    launcher's lines land in the same stream the child inherited.
    """
    global _HANDLER_ID
    resolved = (level or os.getenv("GITCLIFF_LOG_LEVEL") or "WARNING").upper()
    if _HANDLER_ID is None:
        logger.remove()
    else:
        logger.remove(_HANDLER_ID)

    _HANDLER_ID = logger.add(
        lambda message: sys.stderr.write(message),
        level=resolved,
        format=LOG_FORMAT,
        filter="gitcliff",
        backtrace=False,
        diagnose=False,
    )
    logger.enable("gitcliff")
