# File: src/mstair/pretty/xpretty/pretty_api.py
"""
Readable, deterministic text for nested Python values.

This module defines `render()` and `pretty_print()`, which turn scalars,
text and nested containers into a stable `{ a, b, [key] = value }` form
that wraps to indented lines when it grows past the line width. Output is
meant for people to read; it is not parsed back.

Compared to `pprint`, this renderer:

- Writes sequences and mappings alike as tables: positions first, then
  `[key] = value` entries in a canonical key order
- Detects cycles and renders them as `<cycle ...>` placeholders
- Escapes text byte by byte so every token is printable ASCII
- Fails loudly (StructuralOverflowError) instead of truncating deep nesting

The process-wide defaults below are a convenience for callers; the
renderer itself only ever sees the PrettyOptions snapshot it is given.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import Any, TextIO

from mstair.pretty.base.constants import MAX_SAFE_INTEGER
from mstair.pretty.xlogging.logger_factory import create_logger
from mstair.pretty.xpretty.errors import ConfigurationError
from mstair.pretty.xpretty.options import PrettyOptions
from mstair.pretty.xpretty.renderer import Renderer


__all__ = [
    "get_defaults",
    "pretty_print",
    "render",
    "reset_defaults",
    "resolve_options",
    "set_defaults",
    "set_indent_width",
    "set_line_width",
    "set_max_gaps",
]

_LOG = create_logger(__name__)

_default_options: PrettyOptions = PrettyOptions()


def get_defaults() -> PrettyOptions:
    """Return the current process-wide default options."""
    return _default_options


def set_defaults(options: PrettyOptions) -> PrettyOptions:
    """Replace the process-wide default options; returns the previous ones."""
    global _default_options
    if not isinstance(options, PrettyOptions):
        raise ConfigurationError("options", options, "must be a PrettyOptions instance")
    previous, _default_options = _default_options, options
    _LOG.debug("defaults: %r", options)
    return previous


def reset_defaults() -> None:
    """Restore the built-in default options."""
    set_defaults(PrettyOptions())


def set_line_width(limit: int) -> None:
    """
    Set the default line width.

    The width only decides when containers wrap; single tokens may exceed it.

    :raises ConfigurationError: If `limit` is below 4, at least half of the
        largest safe integer, or less than twice the indent width.
    """
    if not isinstance(limit, bool) and isinstance(limit, int):
        if limit * 2 >= MAX_SAFE_INTEGER:
            raise ConfigurationError("line_width", limit, "is too large")
        if limit <= 3:
            raise ConfigurationError("line_width", limit, "is too small")
        if limit < _default_options.indent_width * 2:
            raise ConfigurationError(
                "line_width",
                limit,
                f"is too small for indent_width={_default_options.indent_width}",
            )
    set_defaults(_default_options.merged(line_width=limit))


def set_indent_width(width: int) -> None:
    """
    Set the default indent width.

    :raises ConfigurationError: If `width` is not positive or is at least
        half the line width.
    """
    if not isinstance(width, bool) and isinstance(width, int):
        if width <= 0:
            raise ConfigurationError("indent_width", width, "is too small")
        if width * 2 >= _default_options.line_width:
            raise ConfigurationError(
                "indent_width",
                width,
                f"is too large for line_width={_default_options.line_width}",
            )
    set_defaults(_default_options.merged(indent_width=width))


def set_max_gaps(count: int) -> None:
    """
    Set how many consecutive missing positions the dense array prefix tolerates.

    :raises ConfigurationError: If `count` is negative or not an integer.
    """
    set_defaults(_default_options.merged(max_gaps=count))


def resolve_options(
    options: PrettyOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> PrettyOptions:
    """
    Combine the process defaults, an optional options bundle and keyword overrides.

    A PrettyOptions bundle contributes the options it changed from the built-in
    defaults; a mapping is merged over them as given.
    """
    resolved = _default_options
    if options is not None:
        if not isinstance(options, (PrettyOptions, Mapping)):
            raise ConfigurationError("options", options, "must be PrettyOptions or a mapping")
        resolved = resolved | options
    return resolved.merged(**overrides)


def render(
    value: Any,
    options: PrettyOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """
    Render `value` as readable text.

    Args:
        value: The value to render.
        options: A PrettyOptions snapshot, or a mapping of option overrides.
        **overrides: Individual options (line_width, indent_width, max_gaps,
            quote, literals, and the *_hook formatters) for this call only.

    Returns:
        str: The rendering, on one line when it fits, otherwise as a `{ ... }` block.

    Raises:
        ConfigurationError: If the merged options are invalid.
        StructuralOverflowError: If nesting is too deep for the line width.
    """
    return Renderer(resolve_options(options, **overrides)).render(value)


def pretty_print(
    *values: Any,
    options: PrettyOptions | Mapping[str, Any] | None = None,
    file: TextIO | None = None,
    **overrides: Any,
) -> None:
    """
    Write each value's rendering to `file` (default stdout), tab-separated, then a newline.

    Every value is rendered before anything is written, so a failure
    leaves the output untouched.
    """
    resolved = resolve_options(options, **overrides)
    texts = [Renderer(resolved).render(value) for value in values]
    stream = file if file is not None else sys.stdout
    stream.write("\t".join(texts) + "\n")


# End of file: src/mstair/pretty/xpretty/pretty_api.py
