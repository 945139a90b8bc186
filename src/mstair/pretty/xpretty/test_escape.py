# File: src/mstair/pretty/xpretty/test_escape.py
"""
Tests for byte-wise text escaping.
"""

from __future__ import annotations

import pytest

from mstair.pretty.xpretty.escape import ESCAPE_TABLE, escape_text


@pytest.mark.unit
def test_plain_ascii_passes_through() -> None:
    assert escape_text("hello, world") == "hello, world"
    assert escape_text("hello", '"') == '"hello"'


@pytest.mark.unit
@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a\nb", "a\\nb"),
        ("tab\there", "tab\\there"),
        ("\x00", "\\0"),
        ("\x01\x1f", "\\x01\\x1f"),
        ("\x7f", "\\x7f"),
        ("back\\slash", "back\\\\slash"),
        ('say "hi"', 'say \\"hi\\"'),
        ("it's", "it\\'s"),
        ("a=b", "a\\x3db"),
        ("\a\b\v\f\r", "\\a\\b\\v\\f\\r"),
    ],
)
def test_reserved_and_control_bytes(text: str, expected: str) -> None:
    assert escape_text(text) == expected


@pytest.mark.unit
def test_non_ascii_is_escaped_over_utf8() -> None:
    assert escape_text("é") == "\\xc3\\xa9"
    assert escape_text("€", "'") == "'\\xe2\\x82\\xac'"


@pytest.mark.unit
def test_lone_surrogates_are_escaped_as_their_bytes() -> None:
    assert escape_text("bad\udcff") == "bad\\xed\\xb3\\xbf"
    assert escape_text("\ud800", "'") == "'\\xed\\xa0\\x80'"


@pytest.mark.unit
def test_custom_quote_is_escaped_inside_the_token() -> None:
    assert escape_text("a|b", "|") == "|a\\x7cb|"
    assert escape_text("plain", "|") == "|plain|"
    assert escape_text("\n|", "|") == "|\\n\\x7c|"
    assert escape_text("a|b", "") == "a|b"


@pytest.mark.unit
def test_bytes_input() -> None:
    assert escape_text(b"ok") == "ok"
    assert escape_text(b"\xff\x00") == "\\xff\\0"
    assert escape_text(bytearray(b"x=1")) == "x\\x3d1"


@pytest.mark.unit
def test_table_is_printable_ascii() -> None:
    assert len(ESCAPE_TABLE) == 256
    for replacement in ESCAPE_TABLE:
        assert replacement
        assert all(0x20 <= ord(ch) <= 0x7E for ch in replacement)


# End of file: src/mstair/pretty/xpretty/test_escape.py
