# File: src/mstair/pretty/xpretty/errors.py
"""
Exceptions raised by the pretty printer.

Cycles are not errors: a container met again while it is still being
rendered becomes a placeholder token in the output.
"""

from __future__ import annotations


__all__ = [
    "ConfigurationError",
    "PrettyError",
    "StructuralOverflowError",
    "UnsupportedRuntimeError",
]


class PrettyError(Exception):
    """Base class for every error raised by mstair.pretty."""


class ConfigurationError(PrettyError, ValueError):
    """An option value (line width, indent width, gap count, hook) was rejected."""

    def __init__(self, option: str, value: object, reason: str) -> None:
        self.option = option
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {option}={value!r}: {reason}")


class StructuralOverflowError(PrettyError):
    """Nesting grew too deep for the configured line width; the whole render is abandoned."""

    def __init__(self, *, depth: int, indentation: int, line_width: int, reason: str = "") -> None:
        self.depth = depth
        self.indentation = indentation
        self.line_width = line_width
        super().__init__(
            reason
            or (
                f"Leading indentation {indentation} at nesting depth {depth} reaches the "
                f"line width {line_width}; widen the line width or reduce the indent width"
            )
        )


class UnsupportedRuntimeError(PrettyError, RuntimeError):
    """The interpreter's float model cannot tell integer-valued numbers apart reliably."""


# End of file: src/mstair/pretty/xpretty/errors.py
