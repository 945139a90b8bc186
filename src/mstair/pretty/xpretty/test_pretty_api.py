# File: src/mstair/pretty/xpretty/test_pretty_api.py
"""
Tests for the public render/pretty_print functions and the default-option setters.
"""

from __future__ import annotations

import io
from collections.abc import Iterator
from typing import Any

import pytest

from mstair.pretty.xpretty.errors import ConfigurationError, StructuralOverflowError
from mstair.pretty.xpretty.options import PrettyOptions
from mstair.pretty.xpretty.pretty_api import (
    get_defaults,
    pretty_print,
    render,
    reset_defaults,
    set_indent_width,
    set_line_width,
    set_max_gaps,
)


@pytest.fixture(autouse=True)
def fresh_defaults() -> Iterator[None]:
    reset_defaults()
    yield
    reset_defaults()


def _deep(levels: int) -> Any:
    value: Any = 0
    for _ in range(levels):
        value = [value]
    return value


class TestRender:
    def test_uses_defaults(self) -> None:
        assert render([1, 2, 3]) == "{ 1, 2, 3 }"

    def test_per_call_override_leaves_defaults(self) -> None:
        assert render([1, 2, 3], line_width=8) == "{\n  1, 2,\n  3\n}"
        assert get_defaults().line_width == 64

    def test_options_mapping(self) -> None:
        assert render([1, None, 3], {"max_gaps": 1}) == "{ 1, nil, 3 }"

    def test_options_snapshot_then_override(self) -> None:
        options = PrettyOptions(literals=("null", "yes", "no"))
        assert render([True, None, False], options, max_gaps=1) == "{ yes, null, no }"

    def test_options_snapshot_merges_over_changed_defaults(self) -> None:
        set_line_width(200)
        values = list(range(1000, 1012))
        expected = "{ " + ", ".join(str(v) for v in values) + " }"
        assert render(values, PrettyOptions(integer_hook=str)) == expected
        assert render(values, PrettyOptions(max_gaps=1)) == expected
        assert get_defaults().line_width == 200

    def test_invalid_override(self) -> None:
        with pytest.raises(ConfigurationError):
            render([], indent_width=0)
        with pytest.raises(ConfigurationError):
            render([], colour=True)

    def test_invalid_options_type(self) -> None:
        with pytest.raises(ConfigurationError):
            render([], options=64)  # type: ignore[arg-type]


class TestSetters:
    def test_set_line_width(self) -> None:
        set_line_width(8)
        assert get_defaults().line_width == 8
        assert render([1, 2, 3]) == "{\n  1, 2,\n  3\n}"

    @pytest.mark.parametrize("limit", [3, 0, -1, 2**52])
    def test_set_line_width_rejected(self, limit: int) -> None:
        with pytest.raises(ConfigurationError):
            set_line_width(limit)
        assert get_defaults().line_width == 64

    def test_set_line_width_must_hold_two_indents(self) -> None:
        set_indent_width(4)
        with pytest.raises(ConfigurationError):
            set_line_width(7)
        set_line_width(8)
        assert get_defaults().line_width == 8

    def test_set_indent_width(self) -> None:
        set_indent_width(4)
        assert get_defaults().indent == "    "
        assert render(list(range(1000, 1012))).splitlines()[1].startswith("    1000")

    @pytest.mark.parametrize("width", [0, -2, 32, 40])
    def test_set_indent_width_rejected(self, width: int) -> None:
        with pytest.raises(ConfigurationError):
            set_indent_width(width)
        assert get_defaults().indent_width == 2

    def test_set_max_gaps(self) -> None:
        set_max_gaps(1)
        assert render([1, None, 3]) == "{ 1, nil, 3 }"
        with pytest.raises(ConfigurationError):
            set_max_gaps(-1)
        assert get_defaults().max_gaps == 1

    def test_reset_defaults(self) -> None:
        set_line_width(100)
        set_max_gaps(5)
        reset_defaults()
        assert get_defaults() == PrettyOptions()


class TestPrettyPrint:
    def test_tab_separated_with_newline(self) -> None:
        buffer = io.StringIO()
        pretty_print(1, "a", [1], file=buffer)
        assert buffer.getvalue() == '1\t"a"\t{ 1 }\n'

    def test_no_values(self) -> None:
        buffer = io.StringIO()
        pretty_print(file=buffer)
        assert buffer.getvalue() == "\n"

    def test_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        pretty_print({"a": 1})
        assert capsys.readouterr().out == '{ ["a"] = 1 }\n'

    def test_failure_writes_nothing(self) -> None:
        buffer = io.StringIO()
        with pytest.raises(StructuralOverflowError):
            pretty_print("first", _deep(64), file=buffer)
        assert buffer.getvalue() == ""


# End of file: src/mstair/pretty/xpretty/test_pretty_api.py
