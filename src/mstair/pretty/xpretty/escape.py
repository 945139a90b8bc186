# File: src/mstair/pretty/xpretty/escape.py
"""
Text escaping for quoted text tokens.

Text is escaped over its UTF-8 encoding, one byte at a time. Control bytes,
bytes 0x7F-0xFF, the backslash, both quote characters and `=` (which the
output grammar uses for keyed entries) are replaced; every other printable
ASCII byte passes through, except a custom quote character, which becomes
`\\xHH`.
"""

from __future__ import annotations

import re
from typing import Final


__all__ = [
    "ESCAPE_TABLE",
    "escape_text",
]

_NAMED_ESCAPES: Final[dict[int, str]] = {
    0x00: "\\0",
    0x07: "\\a",
    0x08: "\\b",
    0x09: "\\t",
    0x0A: "\\n",
    0x0B: "\\v",
    0x0C: "\\f",
    0x0D: "\\r",
    0x22: '\\"',
    0x27: "\\'",
    0x5C: "\\\\",
}

_RESERVED: Final[frozenset[int]] = frozenset(b"\\\"'=")


def _build_escape_table() -> tuple[str, ...]:
    table: list[str] = []
    for byte in range(256):
        if byte in _NAMED_ESCAPES:
            table.append(_NAMED_ESCAPES[byte])
        elif 0x20 <= byte <= 0x7E and byte not in _RESERVED:
            table.append(chr(byte))
        else:
            table.append(f"\\x{byte:02x}")
    return tuple(table)


ESCAPE_TABLE: Final[tuple[str, ...]] = _build_escape_table()
"""The replacement for each byte value 0-255."""

_ESCAPE_RX: Final[re.Pattern[bytes]] = re.compile(rb"[\x00-\x1f\x7f-\xff\\\"'=]")


def escape_text(text: str | bytes | bytearray, quote: str | None = None) -> str:
    """
    Escape `text` so it can sit between quotes in the output grammar.

    :param text: The text to escape; `str` is encoded as UTF-8 first, with
        lone surrogates kept as their three-byte sequences.
    :param quote: Added before and after the result when given. A single
        printable ASCII quote character never appears unescaped inside.
    :return: The escaped (and optionally quoted) text.
    """
    data = text.encode("utf-8", "surrogatepass") if isinstance(text, str) else bytes(text)
    quote_byte = _quote_byte(quote)
    if _ESCAPE_RX.search(data) is None and (quote_byte is None or quote_byte not in data):
        escaped = data.decode("ascii")
    else:
        escaped = "".join(
            f"\\x{byte:02x}" if byte == quote_byte else ESCAPE_TABLE[byte] for byte in data
        )
    if quote is not None:
        return f"{quote}{escaped}{quote}"
    return escaped


def _quote_byte(quote: str | None) -> int | None:
    """The byte of a one-character quote that the table would otherwise pass through."""
    if quote is None or len(quote) != 1:
        return None
    byte = ord(quote)
    if byte > 0x7E or ESCAPE_TABLE[byte] != quote:
        return None
    return byte


# End of file: src/mstair/pretty/xpretty/escape.py
