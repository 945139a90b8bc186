# File: src/mstair/pretty/base/constants.py
"""
Package-wide defaults and host numeric capabilities.
"""

from __future__ import annotations

import sys
from typing import Final


DEFAULT_INDENT: Final[int] = 2
DEFAULT_LINE_WIDTH: Final[int] = 64
DEFAULT_MAX_GAPS: Final[int] = 0
DEFAULT_QUOTE: Final[str] = '"'
DEFAULT_LITERALS: Final[tuple[str, str, str]] = ("nil", "true", "false")

MAX_NESTING_DEPTH: Final[int] = 200
"""Deepest container nesting rendered before the interpreter stack is at risk."""

FLOAT_RADIX: Final[int] = sys.float_info.radix
FLOAT_MANTISSA_DIGITS: Final[int] = sys.float_info.mant_dig

MAX_SAFE_INTEGER: Final[int] = FLOAT_RADIX**FLOAT_MANTISSA_DIGITS
"""Largest integer every smaller integer of which is exactly representable as a float."""

# Environment variable names

K_PRETTY_LINE_WIDTH = "PRETTY_LINE_WIDTH"
K_PRETTY_INDENT_WIDTH = "PRETTY_INDENT_WIDTH"
K_PRETTY_MAX_GAPS = "PRETTY_MAX_GAPS"
K_LOG_TIMEZONE = "LOG_TIMEZONE"


# End of file: src/mstair/pretty/base/constants.py
