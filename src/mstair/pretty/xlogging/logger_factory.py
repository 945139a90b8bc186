# File: src/mstair/pretty/xlogging/logger_factory.py
"""
Logger factory for creating CoreLogger instances.
"""

import logging
import sys
from pathlib import Path

from mstair.pretty.xlogging.core_logger import CoreLogger


__all__ = ["create_logger"]


def create_logger(name: str, *, level: int | str | None = None) -> CoreLogger:
    """
    Return the CoreLogger registered under `name`, creating it if needed.

    `__main__` is replaced by the running script's stem so that environment
    level overrides can address it by name.
    """
    if name == "__main__":
        arg0 = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
        name = arg0.stem if arg0 and arg0.stem else "main"

    existing = logging.Logger.manager.loggerDict.get(name)
    if isinstance(existing, CoreLogger):
        logger = existing
    else:
        logger = _get_core_logger_from_logging(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def _get_core_logger_from_logging(name: str) -> CoreLogger:
    """
    Create a CoreLogger through logging.getLogger() so it joins the logger hierarchy.

    Temporarily swaps the logger class; without this, parent links are missing
    and records never reach the root handlers (or pytest's caplog).
    """
    logging_class = logging.getLoggerClass()
    logging.setLoggerClass(CoreLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(logging_class)
    if not isinstance(logger, CoreLogger):
        raise TypeError(f"Failed to create CoreLogger: {logger!r}")
    return logger


# End of file: src/mstair/pretty/xlogging/logger_factory.py
