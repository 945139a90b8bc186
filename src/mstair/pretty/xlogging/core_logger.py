# File: src/mstair/pretty/xlogging/core_logger.py
"""
Structured logging with environment-driven configuration.

Example:
    >>> from mstair.pretty.xlogging.logger_factory import create_logger
    >>> _LOG = create_logger(__name__)
    >>> with _LOG.prefix_with("[render]"):
    ...     _LOG.debug("width=%d", 64)

Design:
- Only the root logger owns handlers; CoreLogger instances propagate.
- Log levels are resolved per-logger from the environment (LogLevelConfig).
- initialize_root() is the only entry point for root setup and is idempotent.
"""

from __future__ import annotations

import contextvars
import inspect
import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, ClassVar, TextIO

from mstair.pretty.xlogging.logger_constants import (
    K_KLASS_NAME,
    TRACE,
    initialize_logger_constants,
)
from mstair.pretty.xlogging.logger_formatter import CoreFormatter
from mstair.pretty.xlogging.logger_util import LogLevelConfig


__all__: list[str] = [
    "CoreLogger",
    "initialize_root",
]

_LOG_ROOT_ATTR_NAME = "_mstair_pretty_corelogger_initialized"

_log_prefix: contextvars.ContextVar[str] = contextvars.ContextVar("log_prefix", default="")


class CoreLogger(logging.Logger):
    """
    Application logger that extends logging.Logger with:

    - A TRACE level below DEBUG.
    - Environment-resolved initial level.
    - The calling class name recorded for the formatter.
    - A prefix context manager for scoped message prefixes.
    """

    _INTERNAL_FRAME_OFFSET: ClassVar[int] = 2  # _emit() + public wrapper (debug/info/log/...)

    def __init__(self, name: str, level: int | str = logging.NOTSET) -> None:
        initialize_logger_constants()
        if level in {logging.NOTSET, "NOTSET", ""}:
            level = LogLevelConfig.get_instance().get_effective_level(name)
        super().__init__(name, level)

    def __repr__(self) -> str:
        level = self.getEffectiveLevel()
        return f"<{type(self).__name__} '{self.name}' {logging.getLevelName(level)}={level}>"

    def log(self, level: int, msg: object, *args: Any, **kwargs: Any) -> None:
        self._emit(level, msg, args, kwargs)

    def trace(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log a message at TRACE level (below DEBUG)."""
        self._emit(TRACE, msg, args, kwargs)

    def debug(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.INFO, msg, args, kwargs)

    def warning(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.WARNING, msg, args, kwargs)

    def error(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.ERROR, msg, args, kwargs)

    def critical(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.CRITICAL, msg, args, kwargs)

    def exception(self, msg: object, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self._emit(logging.ERROR, msg, args, kwargs)

    def _emit(self, level: int, msg: object, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        """Common path for every level method: prefix, caller class, then logging.Logger.log()."""
        initialize_root()
        if not self.isEnabledFor(level):
            return

        stacklevel: int = kwargs.pop("stacklevel", 1)
        extra: dict[str, Any] = dict(kwargs.pop("extra", None) or {})
        extra.setdefault(K_KLASS_NAME, _caller_class_name(stacklevel + 1))

        if prefix := _log_prefix.get():
            msg = f"{prefix}{msg}"

        super().log(
            level,
            msg,
            *args,
            stacklevel=stacklevel + self._INTERNAL_FRAME_OFFSET,
            extra=extra,
            **kwargs,
        )

    @contextmanager
    def prefix_with(self, prefix: str) -> Iterator[None]:
        """
        Prefix all log messages emitted within the current context.

        Nested contexts stack their prefixes. Uses contextvars so that
        concurrent contexts do not see each other's prefixes.
        """
        current = _log_prefix.get()
        token = _log_prefix.set(f"{current}{prefix} > ")
        try:
            yield
        finally:
            _log_prefix.reset(token)


def _caller_class_name(depth: int) -> str:
    """Return the class name of the frame `depth` levels above the caller, or ''."""
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                return ""
            frame = frame.f_back
        if frame is None:
            return ""
        if (zelf := frame.f_locals.get("self")) is not None:
            return type(zelf).__name__
        if isinstance(klass := frame.f_locals.get("cls"), type):
            return klass.__name__
        return ""
    finally:
        del frame


def initialize_root(
    fmt: str | None = None,
    datefmt: str | None = None,
    level: int | str | None = None,
    force: bool = False,
) -> None:
    """
    Idempotently configure the root logger for CoreLogger.

    - Ensures exactly one stderr StreamHandler with CoreFormatter exists.
    - With `force=True`, drops existing stderr handlers and reapplies settings.
    - Sets the root level to `level` if given, otherwise WARNING when unset.
    - Never modifies non-stderr handlers owned by the host application.

    :param fmt: Format string. Defaults to LOG_FORMAT or the package default.
    :param datefmt: Date format. Defaults to LOG_DATEFMT or the package default.
    :param level: Root logger level (int or name).
    :param force: Reinitialize even if already initialized.
    """
    root = logging.getLogger()
    if getattr(root, _LOG_ROOT_ATTR_NAME, False) and not force:
        return
    setattr(root, _LOG_ROOT_ATTR_NAME, True)
    initialize_logger_constants()

    if force:
        root.handlers = [h for h in root.handlers if not _is_stderr_handler(h)]

    stderr_handlers = [h for h in root.handlers if _is_stderr_handler(h)]
    if not stderr_handlers:
        handler: logging.StreamHandler[TextIO] = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            CoreFormatter(fmt or os.environ.get("LOG_FORMAT"), datefmt or os.environ.get("LOG_DATEFMT"))
        )
        root.addHandler(handler)

    if level is not None:
        if isinstance(level, str):
            level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)
        root.setLevel(level)
    elif root.level == logging.NOTSET:
        root.setLevel(logging.WARNING)


def _is_stderr_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and handler.stream is sys.stderr


# End of file: src/mstair/pretty/xlogging/core_logger.py
