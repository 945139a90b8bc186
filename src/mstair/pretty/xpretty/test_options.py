# File: src/mstair/pretty/xpretty/test_options.py
"""
Tests for PrettyOptions validation, merging and environment loading.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from mstair.pretty.xpretty import options as opts
from mstair.pretty.xpretty.errors import ConfigurationError, PrettyError
from mstair.pretty.xpretty.options import PRETTY_VALID_KWARGS, PrettyOptions, options_from_environment


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove PRETTY_* variables and skip .env loading."""
    monkeypatch.setattr(opts, "fs_load_dotenv", lambda *a, **k: False)
    for name in ("PRETTY_LINE_WIDTH", "PRETTY_INDENT_WIDTH", "PRETTY_MAX_GAPS"):
        monkeypatch.delenv(name, raising=False)
    yield


class TestValidation:
    def test_defaults(self) -> None:
        options = PrettyOptions()
        assert options.line_width == 64
        assert options.indent_width == 2
        assert options.indent == "  "
        assert options.max_gaps == 0
        assert options.literals == ("nil", "true", "false")

    @pytest.mark.parametrize(
        ("kwargs", "option"),
        [
            ({"line_width": 3}, "line_width"),
            ({"line_width": 2**52}, "line_width"),
            ({"line_width": True}, "line_width"),
            ({"line_width": 64.0}, "line_width"),
            ({"indent_width": 0}, "indent_width"),
            ({"line_width": 10, "indent_width": 6}, "indent_width"),
            ({"max_gaps": -1}, "max_gaps"),
            ({"quote": 1}, "quote"),
            ({"quote": "ab"}, "quote"),
            ({"quote": "x"}, "quote"),
            ({"quote": "7"}, "quote"),
            ({"quote": "\\"}, "quote"),
            ({"quote": " "}, "quote"),
            ({"quote": "\u00e9"}, "quote"),
            ({"literals": ("nil", "true")}, "literals"),
            ({"number_hook": "str"}, "number_hook"),
        ],
    )
    def test_rejected(self, kwargs: dict[str, Any], option: str) -> None:
        with pytest.raises(ConfigurationError) as excinfo:
            PrettyOptions(**kwargs)
        assert excinfo.value.option == option
        assert isinstance(excinfo.value, ValueError)
        assert isinstance(excinfo.value, PrettyError)

    def test_smallest_accepted(self) -> None:
        options = PrettyOptions(line_width=4, indent_width=2)
        assert options.line_width == 4
        assert PrettyOptions(line_width=10, indent_width=5).indent == " " * 5

    @pytest.mark.parametrize("quote", ["'", "|", "`", ""])
    def test_quote_accepted(self, quote: str) -> None:
        assert PrettyOptions(quote=quote).quote == quote


class TestMerging:
    def test_merged_returns_new_snapshot(self) -> None:
        base = PrettyOptions()
        merged = base.merged(line_width=80)
        assert merged.line_width == 80
        assert base.line_width == 64
        assert base.merged() is base

    def test_merged_validates(self) -> None:
        with pytest.raises(ConfigurationError):
            PrettyOptions().merged(indent_width=-2)

    def test_unknown_option(self) -> None:
        with pytest.raises(ConfigurationError) as excinfo:
            PrettyOptions().merged(width=80)
        assert excinfo.value.option == "override"
        assert excinfo.value.value == "width"

    def test_or_operator(self) -> None:
        base = PrettyOptions()
        other = PrettyOptions(max_gaps=2)
        assert (base | other) == other
        assert (base | {"max_gaps": 3}).max_gaps == 3

    def test_or_operator_keeps_options_the_snapshot_left_at_default(self) -> None:
        wide = PrettyOptions(line_width=200, indent_width=4)
        merged = wide | PrettyOptions(max_gaps=2)
        assert merged.line_width == 200
        assert merged.indent_width == 4
        assert merged.max_gaps == 2
        assert PrettyOptions(max_gaps=2).non_default_fields() == {"max_gaps": 2}
        assert PrettyOptions().non_default_fields() == {}

    def test_valid_kwargs(self) -> None:
        names = PRETTY_VALID_KWARGS()
        assert {"line_width", "indent_width", "max_gaps", "quote", "literals"} <= names
        assert "integer_hook" in names


class TestEnvironment:
    def test_no_variables(self, clean_env: None) -> None:
        assert options_from_environment() == PrettyOptions()

    def test_variables_apply(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("PRETTY_LINE_WIDTH", "80")
        monkeypatch.setenv("PRETTY_INDENT_WIDTH", " 4 ")
        monkeypatch.setenv("PRETTY_MAX_GAPS", "1")
        options = options_from_environment()
        assert (options.line_width, options.indent_width, options.max_gaps) == (80, 4, 1)

    def test_base_is_kept(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("PRETTY_MAX_GAPS", "2")
        options = options_from_environment(PrettyOptions(quote="'"))
        assert options.quote == "'"
        assert options.max_gaps == 2

    def test_not_a_number(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("PRETTY_LINE_WIDTH", "wide")
        with pytest.raises(ConfigurationError) as excinfo:
            options_from_environment()
        assert excinfo.value.option == "PRETTY_LINE_WIDTH"

    def test_out_of_range(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("PRETTY_INDENT_WIDTH", "40")
        with pytest.raises(ConfigurationError) as excinfo:
            options_from_environment()
        assert excinfo.value.option == "indent_width"


# End of file: src/mstair/pretty/xpretty/test_options.py
