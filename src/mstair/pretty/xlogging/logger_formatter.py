# File: src/mstair/pretty/xlogging/logger_formatter.py
"""
Log record formatting with colored levels and project-relative file paths.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Literal

import pytz
from colorama import Fore

from mstair.pretty.base import config as cfg
from mstair.pretty.base.constants import K_LOG_TIMEZONE
from mstair.pretty.base.fs_helpers import fs_find_pyproject_toml
from mstair.pretty.xlogging.logger_constants import K_COLOR, K_KLASS_NAME


__all__ = ["CoreFormatter", "get_color_code", "rgb_code"]

FormatStyle = Literal["%", "{", "$"]

DEFAULT_LOG_FORMAT = r"%(levelName)s %(asctime)s %(fileAndLine)s %(klassAndMethod)s %(message)s"
DEFAULT_LOG_DATEFMT = "%-I:%M:%S%p"
DEFAULT_LOG_TIMEZONE = "US/Eastern"


def rgb_code(r: int, g: int, b: int) -> str:
    """
    Convert RGB values to an ANSI 24-bit foreground escape code.

    :param r: Red component (0-255)
    :param g: Green component (0-255)
    :param b: Blue component (0-255)
    :return str: ANSI escape code for the specified RGB color.
    """
    return f"\033[38;2;{max(0, min(255, r))};{max(0, min(255, g))};{max(0, min(255, b))}m"


RGB_LOCATION = rgb_code(4 << 4, 8 << 4, 10 << 4)
RGB_CALLER = rgb_code(3 << 4, 12 << 4, 10 << 4)
COLOR_MAP: dict[str | None, str] = {
    "fileAndLine": RGB_LOCATION,
    "klassAndMethod": RGB_CALLER,
    "TRACE": rgb_code(96, 0, 64),
    "DEBUG": rgb_code(128, 128, 128),
    "INFO": rgb_code(184, 184, 216),
    "WARNING": rgb_code(192, 176, 0),
    "ERROR": rgb_code(224, 128, 0),
    "CRITICAL": rgb_code(255, 64, 64),
    None: Fore.RESET,
}


def get_color_code(key: str | None = None) -> str:
    """Return the ANSI code for `key` (a COLOR_MAP key, '#rrggbb', or a colorama Fore name)."""
    if not cfg.in_desktop_mode():
        return ""
    if not key or key == "RESET":
        return Fore.RESET
    if key in COLOR_MAP:
        return COLOR_MAP[key]
    if key.startswith("#") and len(key) == 7:
        return rgb_code(*(int(key[i : i + 2], 16) for i in (1, 3, 5)))
    fore_name = key.upper().replace("BRIGHT", "LIGHT")
    if "LIGHT" in fore_name and not fore_name.endswith("_EX"):
        fore_name += "_EX"
    return getattr(Fore, fore_name, Fore.RESET)


class CoreFormatter(logging.Formatter):
    """
    Formatter for CoreLogger records.

    Adds the `levelName`, `fileAndLine` and `klassAndMethod` record fields,
    colors them in desktop mode, and stamps times in the LOG_TIMEZONE zone.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: FormatStyle = "%",
        validate: bool = True,
    ) -> None:
        super().__init__(
            fmt=fmt or DEFAULT_LOG_FORMAT,
            datefmt=datefmt,
            style=style,
            validate=validate,
        )
        self.tz = pytz.timezone(os.environ.get(K_LOG_TIMEZONE, DEFAULT_LOG_TIMEZONE))

    def format(self, record: logging.LogRecord) -> str:
        record.levelName = get_color_code(record.levelname) + record.levelname + get_color_code()
        record.fileAndLine = self.format_fileAndLine(record.pathname, record.lineno)
        record.klassAndMethod = self.format_klassAndMethod(record)
        message = super().format(record)
        color_key = getattr(record, K_COLOR, record.levelname)
        return get_color_code(color_key) + message + get_color_code()

    @staticmethod
    def format_file(file: str) -> str:
        """Return `file` relative to its project root when one is found, else absolute."""
        if not file:
            return "<unknown file>"
        path = Path(file)
        project_root = fs_find_pyproject_toml(start_dir=path.parent)
        if project_root is not None and path.is_relative_to(project_root):
            return path.relative_to(project_root).as_posix()
        return path.absolute().as_posix()

    def format_fileAndLine(self, file: str, lineno: int) -> str:
        return get_color_code("fileAndLine") + f"{self.format_file(file)}:{lineno}" + get_color_code()

    @staticmethod
    def format_klassAndMethod(record: logging.LogRecord) -> str:
        klass_name: str = getattr(record, K_KLASS_NAME, "")
        if record.funcName == "<module>":
            klass_and_method = record.funcName
        elif not klass_name:
            klass_and_method = f"{record.funcName}()"
        elif record.funcName == "__init__":
            klass_and_method = f"{klass_name}()"
        else:
            klass_and_method = f"{klass_name}.{record.funcName}()"
        return get_color_code("klassAndMethod") + klass_and_method + get_color_code()

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        stamp = datetime.fromtimestamp(record.created, self.tz)
        datefmt = datefmt or DEFAULT_LOG_DATEFMT
        try:
            text = stamp.strftime(datefmt.replace("%-", "%")).lstrip("0")
            text = text.replace("AM", "am").replace("PM", "pm")
        except ValueError:
            text = stamp.isoformat()
        return get_color_code(record.levelname) + text + get_color_code()

    def formatMessage(self, record: logging.LogRecord) -> str:
        # Multi-line messages keep their continuation lines aligned under the first
        return super().formatMessage(record).replace("\n", "\n  ")

    def __repr__(self) -> str:
        fmt: Any = getattr(self._style, "_fmt", None)
        return f"<{type(self).__name__} fmt={fmt!r} tz={self.tz.zone}>"


# End of file: src/mstair/pretty/xlogging/logger_formatter.py
