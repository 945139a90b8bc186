# File: src/mstair/pretty/xpretty/options.py
"""
Immutable rendering options.

A `PrettyOptions` snapshot is validated once, when it is built, so a
render never starts with a configuration it cannot honor. Per-call
overrides produce a new snapshot; nothing here is mutated in place.
"""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import cache
from typing import Any, TypeAlias

from mstair.pretty.base.constants import (
    DEFAULT_INDENT,
    DEFAULT_LINE_WIDTH,
    DEFAULT_LITERALS,
    DEFAULT_MAX_GAPS,
    DEFAULT_QUOTE,
    K_PRETTY_INDENT_WIDTH,
    K_PRETTY_LINE_WIDTH,
    K_PRETTY_MAX_GAPS,
    MAX_SAFE_INTEGER,
)
from mstair.pretty.base.fs_helpers import fs_load_dotenv
from mstair.pretty.xpretty.errors import ConfigurationError


__all__ = [
    "FormatHook",
    "PRETTY_VALID_KWARGS",
    "PrettyOptions",
    "options_from_environment",
]

FormatHook: TypeAlias = Callable[[Any], str]
"""Replaces the built-in formatting of one scalar kind; receives the value, returns its token."""

_HOOK_FIELDS = ("number_hook", "integer_hook", "text_hook", "boolean_hook", "opaque_hook")


def _require_int(option: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(option, value, "must be an integer")
    return value


@dataclass(frozen=True, kw_only=True)
class PrettyOptions:
    """
    Options for one render call.
    """

    line_width: int = DEFAULT_LINE_WIDTH
    """Soft line limit: a container whose compact form reaches it is wrapped."""

    indent_width: int = DEFAULT_INDENT
    """Spaces added per nesting level."""

    max_gaps: int = DEFAULT_MAX_GAPS
    """Consecutive missing positions tolerated inside the dense array prefix."""

    quote: str = DEFAULT_QUOTE
    """Quote character placed around text tokens; escaped wherever it occurs inside them."""

    literals: tuple[str, str, str] = DEFAULT_LITERALS
    """Spellings for the absent value, True and False."""

    number_hook: FormatHook | None = None
    integer_hook: FormatHook | None = None
    text_hook: FormatHook | None = None
    boolean_hook: FormatHook | None = None
    opaque_hook: FormatHook | None = None

    def __post_init__(self) -> None:
        line_width = _require_int("line_width", self.line_width)
        if line_width <= 3:
            raise ConfigurationError("line_width", line_width, "must be at least 4")
        if line_width * 2 >= MAX_SAFE_INTEGER:
            raise ConfigurationError(
                "line_width", line_width, f"must be less than half of {MAX_SAFE_INTEGER}"
            )

        indent_width = _require_int("indent_width", self.indent_width)
        if indent_width <= 0:
            raise ConfigurationError("indent_width", indent_width, "must be positive")
        if indent_width * 2 > line_width:
            raise ConfigurationError(
                "indent_width",
                indent_width,
                f"must be at most half of line_width={line_width}",
            )

        max_gaps = _require_int("max_gaps", self.max_gaps)
        if max_gaps < 0:
            raise ConfigurationError("max_gaps", max_gaps, "must not be negative")
        if max_gaps >= MAX_SAFE_INTEGER:
            raise ConfigurationError("max_gaps", max_gaps, f"must be less than {MAX_SAFE_INTEGER}")

        if not isinstance(self.quote, str):
            raise ConfigurationError("quote", self.quote, "must be a string")
        if self.quote and (
            len(self.quote) != 1
            or not 0x21 <= ord(self.quote) <= 0x7E
            or self.quote.isalnum()
            or self.quote == "\\"
        ):
            raise ConfigurationError(
                "quote", self.quote, "must be empty or one ASCII punctuation character other than backslash"
            )
        if (
            not isinstance(self.literals, tuple)
            or len(self.literals) != 3
            or not all(isinstance(s, str) for s in self.literals)
        ):
            raise ConfigurationError("literals", self.literals, "must be a tuple of three strings")
        for name in _HOOK_FIELDS:
            hook = getattr(self, name)
            if hook is not None and not callable(hook):
                raise ConfigurationError(name, hook, "must be callable or None")

    @property
    def indent(self) -> str:
        """One indentation unit."""
        return " " * self.indent_width

    def merged(self, **overrides: Any) -> PrettyOptions:
        """
        Return a copy with `overrides` applied, validating the result.

        :raises ConfigurationError: For unknown option names or invalid values.
        """
        if not overrides:
            return self
        unknown = sorted(set(overrides) - PRETTY_VALID_KWARGS())
        if unknown:
            raise ConfigurationError("override", unknown[0], "unknown option name")
        return dataclasses.replace(self, **overrides)

    def non_default_fields(self) -> dict[str, Any]:
        """Return the options whose values differ from a default `PrettyOptions()`."""
        defaults = _builtin_defaults()
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) != getattr(defaults, f.name)
        }

    def __or__(self, other: PrettyOptions | Mapping[str, Any]) -> PrettyOptions:
        """
        Merge another snapshot or a mapping of overrides on top; the right side wins.

        From a snapshot only the options it changed from the built-in defaults
        are taken, so `defaults | PrettyOptions(max_gaps=2)` keeps the other
        options of `defaults`.
        """
        if isinstance(other, PrettyOptions):
            return self.merged(**other.non_default_fields())
        if isinstance(other, Mapping):
            return self.merged(**other)
        return NotImplemented


@cache
def _builtin_defaults() -> PrettyOptions:
    return PrettyOptions()


@cache
def PRETTY_VALID_KWARGS() -> frozenset[str]:
    """Return the option names accepted as per-call overrides."""
    return frozenset(f.name for f in dataclasses.fields(PrettyOptions))


def options_from_environment(base: PrettyOptions | None = None) -> PrettyOptions:
    """
    Apply PRETTY_LINE_WIDTH, PRETTY_INDENT_WIDTH and PRETTY_MAX_GAPS on top of `base`.

    A .env file found from the working directory is loaded first; variables
    already present in the environment take precedence over it.

    :raises ConfigurationError: If a variable is not an integer or is out of range.
    """
    fs_load_dotenv()
    overrides: dict[str, int] = {}
    for env_name, option in (
        (K_PRETTY_LINE_WIDTH, "line_width"),
        (K_PRETTY_INDENT_WIDTH, "indent_width"),
        (K_PRETTY_MAX_GAPS, "max_gaps"),
    ):
        raw = os.environ.get(env_name, "").strip()
        if not raw:
            continue
        try:
            overrides[option] = int(raw, 10)
        except ValueError as exc:
            raise ConfigurationError(env_name, raw, "must be a decimal integer") from exc
    return (base or PrettyOptions()).merged(**overrides)


# End of file: src/mstair/pretty/xpretty/options.py
