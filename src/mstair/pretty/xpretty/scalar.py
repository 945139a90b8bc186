# File: src/mstair/pretty/xpretty/scalar.py
"""
Canonical tokens for non-container values.

Numbers are written so they read back to the same value: integer-valued
numbers without a fractional part, everything else with 14 significant
digits. NaN and the infinities get their own literals. Exact values beyond
the float range (huge Decimal, Fraction or int) keep 14 digits in
scientific form instead of collapsing to Inf or 0.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import MAX_EMAX, MIN_EMIN, Decimal, localcontext
from typing import Any, Final, TypeAlias

from mstair.pretty.xpretty import model
from mstair.pretty.xpretty.escape import escape_text
from mstair.pretty.xpretty.options import PrettyOptions


__all__ = [
    "ScalarFormatter",
    "format_number",
    "identity_token",
]

_KindFormatterFunction: TypeAlias = Callable[[Any], str]

SIGNIFICANT_DIGITS: Final[int] = 14


def format_number(value: Any) -> str:
    """Return the default token for a number."""
    if model.is_integer_valued(value):
        return _format_integer(int(value))
    if isinstance(value, Decimal):
        if value.is_nan():
            return "NaN"
        if value.is_infinite():
            return "-Inf" if value.is_signed() else "Inf"
    try:
        number = float(value)
    except OverflowError:
        number = math.inf if value > 0 else -math.inf
    if math.isnan(number):
        return "NaN"
    exact = isinstance(value, (Decimal, numbers.Rational))
    if math.isinf(number):
        if exact:
            return _format_scientific(value)
        return "Inf" if number > 0 else "-Inf"
    if exact and number == 0.0 and value != 0:
        return _format_scientific(value)
    return f"{number:.14g}"


def _format_integer(value: int) -> str:
    try:
        return str(value)
    except ValueError:
        # Past sys.get_int_max_str_digits()
        return _format_scientific(value)


def _format_scientific(value: int | Decimal | numbers.Rational) -> str:
    """Format a value outside the float range with 14 significant digits, e.g. `3.3333333333333e+399`."""
    with localcontext() as ctx:
        ctx.prec = SIGNIFICANT_DIGITS
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        if isinstance(value, Decimal):
            number = ctx.plus(value)
        elif isinstance(value, int):
            number = ctx.plus(Decimal(value))
        else:
            number = ctx.divide(Decimal(value.numerator), Decimal(value.denominator))
        return f"{ctx.normalize(number):e}"


def identity_token(value: Any) -> str:
    """Return `typename: 0xADDRESS` for a value that is shown by identity."""
    return f"{type(value).__name__}: 0x{id(value):x}"


@dataclass
class ScalarFormatter:
    """
    Formats absent, number, text, boolean and opaque values for one options snapshot.
    """

    options: PrettyOptions
    """Source of the literals, the quote character and the per-kind hooks."""

    _kind_formatters: dict[model.KindT, _KindFormatterFunction] = field(init=False, repr=False)
    """Registry of value kind to formatting functions, initialized in __post_init__."""

    def __post_init__(self) -> None:
        self._kind_formatters = {
            model.Kind.ABSENT: self._format_absent,
            model.Kind.NUMBER: self._format_number,
            model.Kind.TEXT: self._format_text,
            model.Kind.BOOLEAN: self._format_boolean,
            model.Kind.CONTAINER: self._format_by_identity,
            model.Kind.CALLABLE: self._format_opaque,
            model.Kind.HANDLE: self._format_opaque,
            model.Kind.THREAD: self._format_opaque,
        }

    def format(self, value: Any) -> str:
        """
        Return the token for `value`.

        Containers reaching this method (mapping keys such as tuples) are
        shown by identity, like opaque values, but never through the opaque hook.
        """
        return self._kind_formatters[model.classify(value)](value)

    def format_key(self, key: Any) -> str:
        """Return the `[key] = ` prefix of a keyed entry."""
        return f"[{self.format(key)}] = "

    def _format_absent(self, _value: None) -> str:
        return self.options.literals[0]

    def _format_number(self, value: Any) -> str:
        if self.options.integer_hook is not None and model.is_integer_valued(value):
            return self.options.integer_hook(value)
        if self.options.number_hook is not None:
            return self.options.number_hook(value)
        return format_number(value)

    def _format_text(self, value: str | bytes | bytearray) -> str:
        if self.options.text_hook is not None:
            return self.options.text_hook(value)
        return escape_text(value, self.options.quote)

    def _format_boolean(self, value: bool) -> str:
        if self.options.boolean_hook is not None:
            return self.options.boolean_hook(value)
        return self.options.literals[1] if value else self.options.literals[2]

    def _format_opaque(self, value: Any) -> str:
        if self.options.opaque_hook is not None:
            return self.options.opaque_hook(value)
        return self._format_by_identity(value)

    @staticmethod
    def _format_by_identity(value: Any) -> str:
        return f"<{identity_token(value)}>"


# End of file: src/mstair/pretty/xpretty/scalar.py
