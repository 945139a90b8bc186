# File: src/mstair/pretty/xlogging/logger_util.py
"""
Environment variable-driven log level configuration.

Two sources are supported:
- Pattern-based DSL strings in LOG_LEVEL / LOG_LEVELS, e.g.
  ``LOG_LEVELS="mstair.pretty.*:DEBUG; root=WARNING"``
- Per-logger overrides in variables like LOG_LEVEL_MSTAIR_PRETTY_XPRETTY
  (``_`` separates name parts, ``__`` stands for a literal underscore)

See LogLevelConfig for resolution rules.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar, Final, NamedTuple

from mstair.pretty.base.fs_helpers import fs_load_dotenv
from mstair.pretty.xlogging.logger_constants import initialize_logger_constants


__all__ = ["LogLevelConfig"]

_FRAGMENT_SEPARATOR_RX: Final[re.Pattern[str]] = re.compile(r"[;, ]+")
_ASSIGNMENT_OPERATOR_RX: Final[re.Pattern[str]] = re.compile(r"[:=]+")

_log_level_config_instance: LogLevelConfig | None = None


@dataclass(slots=True)
class LogEnvVar:
    """A LOG_LEVEL / LOG_LEVELS[_<MODULE>] environment variable, split into its parts."""

    NAME_RX: ClassVar[re.Pattern[str]] = re.compile(
        r"^(?P<BASENAME>LOG_LEVELS?)(?P<SUFFIX>(?:_[A-Z][A-Z0-9_]*)*)$"
    )

    name: str = ""
    module: str = ""
    value: str = field(default="", repr=False)

    @classmethod
    def from_env_var(cls, name: str, value: str) -> LogEnvVar | None:
        """Return a LogEnvVar if `name` is a log level variable, else None."""
        match = cls.NAME_RX.match(name)
        if match is None:
            return None
        suffix = match["SUFFIX"].lstrip("_")
        if not suffix or suffix == "ROOT":
            module = ""
        else:
            module = suffix.replace("__", "\0").replace("_", ".").replace("\0", "_").lower()
        return cls(name=name, module=module, value=value)

    @classmethod
    def from_environ(cls) -> Iterator[LogEnvVar]:
        """Yield a LogEnvVar for every matching environment variable."""
        fs_load_dotenv()
        for name, value in sorted(os.environ.items(), reverse=True):
            if (env_var := cls.from_env_var(name, value)) is not None:
                yield env_var


class LogEnvPatternLevel(NamedTuple):
    """Mapping from a logger name pattern to an integer log level."""

    pattern: str
    level: int


@dataclass(slots=True)
class LogLevelConfig:
    """
    Resolve log levels from environment variables.

    Precedence: exact > ancestor > glob (longest fixed prefix) > default > fallback.
    """

    pattern_to_level: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.pattern_to_level:
            self.update_from_environment()

    @classmethod
    def get_instance(cls) -> LogLevelConfig:
        """Return the process-wide LogLevelConfig, creating it on first use."""
        global _log_level_config_instance
        if _log_level_config_instance is None:
            initialize_logger_constants()
            _log_level_config_instance = LogLevelConfig()
        return _log_level_config_instance

    def update_from_environment(self) -> None:
        """Rebuild the pattern->level mapping from the current environment."""
        self.pattern_to_level.clear()
        for var in LogEnvVar.from_environ():
            for entry in self.parse_log_var(var):
                self.pattern_to_level[entry.pattern] = entry.level

    def override(self, pattern: str, level: int) -> None:
        """
        Set the level for `pattern` and apply it to loggers that already exist under it.

        :param pattern: A logger name; its descendants are updated too.
        :param level: The new level.
        """
        self.pattern_to_level[pattern] = level
        prefix = f"{pattern.lower()}."
        for name, logger in list(logging.Logger.manager.loggerDict.items()):
            if not isinstance(logger, logging.Logger):
                continue
            if not pattern or name.lower() == pattern.lower() or name.lower().startswith(prefix):
                logger.setLevel(level)

    def get_effective_level(self, logger_name: str, *, default: int = logging.WARNING) -> int:
        """Return the configured level for `logger_name`."""
        name_lc = logger_name.lower()
        named = {k.lower(): v for k, v in self.pattern_to_level.items() if k}

        if name_lc in named:
            return named[name_lc]

        parts = name_lc.split(".")
        for end in range(len(parts) - 1, 0, -1):
            ancestor = ".".join(parts[:end])
            if ancestor in named:
                return named[ancestor]

        best: tuple[int, int] | None = None
        for pattern, level in named.items():
            if not any(ch in pattern for ch in "*?[") or not fnmatch.fnmatch(name_lc, pattern):
                continue
            score = min((i for i, ch in enumerate(pattern) if ch in "*?["), default=len(pattern))
            if best is None or score > best[0]:
                best = (score, level)
        if best is not None:
            return best[1]

        return self.pattern_to_level.get("", default)

    def parse_log_var(self, var: LogEnvVar) -> Iterator[LogEnvPatternLevel]:
        """Parse one variable's DSL value into pattern/level pairs, skipping unknown levels."""
        level_names = {
            k.upper(): v for k, v in logging.getLevelNamesMapping().items() if k.isupper()
        }
        for fragment in _FRAGMENT_SEPARATOR_RX.split(var.value):
            if not (fragment := fragment.strip()):
                continue
            parts = _ASSIGNMENT_OPERATOR_RX.split(fragment, maxsplit=1)
            if len(parts) == 2:
                pattern, level_name = (p.strip().strip("'\"") for p in parts)
            else:
                pattern, level_name = "", parts[0].strip().strip("'\"")

            if var.module:
                pattern = var.module if pattern in {"", "root"} else f"{var.module}.{pattern}"
            if pattern.lower() == "root":
                pattern = ""

            level = level_names.get(level_name.upper(), logging.NOTSET)
            if level != logging.NOTSET:
                yield LogEnvPatternLevel(pattern, level)


# End of file: src/mstair/pretty/xlogging/logger_util.py
