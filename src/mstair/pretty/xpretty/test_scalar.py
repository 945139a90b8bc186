# File: src/mstair/pretty/xpretty/test_scalar.py
"""
Tests for number formatting and the per-kind scalar formatter.
"""

from __future__ import annotations

import math
import re
import sys
from decimal import Decimal
from fractions import Fraction
from typing import Any

import pytest

from mstair.pretty.xpretty.options import PrettyOptions
from mstair.pretty.xpretty.scalar import ScalarFormatter, format_number


OPAQUE_RX = r"<{}: 0x[0-9a-f]+>"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0"),
        (-17, "-17"),
        (1.0, "1"),
        (-0.0, "-0"),
        (0.1, "0.1"),
        (1 / 3, "0.33333333333333"),
        (2.0**53, "9007199254740992"),
        (2.0**60, "1.1529215046068e+18"),
        (2**60, "1152921504606846976"),
        (math.nan, "NaN"),
        (math.inf, "Inf"),
        (-math.inf, "-Inf"),
        (Decimal("2.50"), "2.5"),
        (Decimal("3"), "3"),
        (Fraction(1, 2), "0.5"),
        (Fraction(10**400, 3), "3.3333333333333e+399"),
        (Fraction(1, 10**400), "1e-400"),
        (Decimal("1.5e400"), "1.5e+400"),
        (Decimal("-1.5e400"), "-1.5e+400"),
        (Decimal("1e-400"), "1e-400"),
        (Decimal("NaN"), "NaN"),
        (Decimal("Infinity"), "Inf"),
        (Decimal("-Infinity"), "-Inf"),
        (Decimal("-0"), "-0"),
    ],
)
def test_format_number(value: Any, expected: str) -> None:
    assert format_number(value) == expected


@pytest.mark.unit
def test_format_number_past_the_int_digit_limit() -> None:
    limit = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    try:
        assert format_number(10**5000) == "1e+5000"
        assert format_number(-(10**5000) - 1) == "-1e+5000"
        assert format_number(10**4000) == "1" + "0" * 4000
    finally:
        sys.set_int_max_str_digits(limit)


class TestScalarFormatter:
    def test_defaults(self) -> None:
        fmt = ScalarFormatter(PrettyOptions())
        assert fmt.format(None) == "nil"
        assert fmt.format(True) == "true"
        assert fmt.format(False) == "false"
        assert fmt.format(12) == "12"
        assert fmt.format("hi") == '"hi"'
        assert fmt.format(b"hi") == '"hi"'

    def test_keys(self) -> None:
        fmt = ScalarFormatter(PrettyOptions())
        assert fmt.format_key("a") == '["a"] = '
        assert fmt.format_key(1) == "[1] = "
        assert fmt.format_key(False) == "[false] = "
        assert re.fullmatch(r"\[" + OPAQUE_RX.format("tuple") + r"\] = ", fmt.format_key((1, 2)))

    def test_literals_and_quote(self) -> None:
        fmt = ScalarFormatter(PrettyOptions(literals=("null", "yes", "no"), quote="'"))
        assert fmt.format(None) == "null"
        assert fmt.format(True) == "yes"
        assert fmt.format(False) == "no"
        assert fmt.format("it's") == "'it\\'s'"

    def test_opaque_values(self) -> None:
        fmt = ScalarFormatter(PrettyOptions())
        thing = object()
        assert fmt.format(thing) == f"<object: 0x{id(thing):x}>"
        assert re.fullmatch(OPAQUE_RX.format("function"), fmt.format(lambda: None))
        assert re.fullmatch(OPAQUE_RX.format("generator"), fmt.format(x for x in ()))

    def test_integer_hook_takes_precedence_over_number_hook(self) -> None:
        fmt = ScalarFormatter(
            PrettyOptions(integer_hook=lambda v: f"i{v}", number_hook=lambda v: f"n{v}")
        )
        assert fmt.format(3) == "i3"
        assert fmt.format(3.0) == "i3.0"
        assert fmt.format(2.5) == "n2.5"

    def test_number_hook_applies_to_integers_without_integer_hook(self) -> None:
        fmt = ScalarFormatter(PrettyOptions(number_hook=lambda v: "N"))
        assert fmt.format(3) == "N"
        assert fmt.format(True) == "true"

    def test_text_boolean_and_opaque_hooks(self) -> None:
        fmt = ScalarFormatter(
            PrettyOptions(
                text_hook=str.upper,
                boolean_hook=lambda v: "on" if v else "off",
                opaque_hook=lambda v: "<opaque>",
            )
        )
        assert fmt.format("abc") == "ABC"
        assert fmt.format(False) == "off"
        assert fmt.format(print) == "<opaque>"
        assert fmt.format(object()) == "<opaque>"

    def test_opaque_hook_does_not_apply_to_container_keys(self) -> None:
        fmt = ScalarFormatter(PrettyOptions(opaque_hook=lambda v: "<opaque>"))
        assert re.fullmatch(OPAQUE_RX.format("tuple"), fmt.format(("k",)))


# End of file: src/mstair/pretty/xpretty/test_scalar.py
