# File: src/mstair/pretty/xpretty/line_packer.py
"""
Line packing for rendered container children.

`pack_compact()` decides whether a finished block fits on one line as
`{ a, b, c }`. `LinePacker` builds the block itself: children are laid
out greedily, wrapping to a new line at the block's indentation when the
next token would cross the line width.
"""

from __future__ import annotations

from mstair.pretty.xpretty.model import RenderToken


__all__ = [
    "COMPACT_OVERHEAD",
    "ITEM_SEPARATOR",
    "LinePacker",
    "pack_compact",
]

ITEM_SEPARATOR = ", "
COMPACT_OVERHEAD = 4
"""Width of the compact form's punctuation: `{ ` and ` }`."""


def pack_compact(
    lines: list[str],
    leading_width: int,
    trim_width: int,
    line_width: int,
) -> str | None:
    """
    Return the one-line form of a block, or None if it does not fit.

    :param lines: The block's physical lines, each indented by `trim_width` spaces.
    :param leading_width: Columns already used on the line the compact form would join.
    :param trim_width: Indentation removed from each line before joining.
    :param line_width: The line width limit.
    :return: `{ ... }` (`{ }` for an empty block), or None if the running
        width reaches `line_width`.
    """
    size = COMPACT_OVERHEAD + leading_width
    parts: list[str] = []
    for line in lines:
        part = line[trim_width:]
        size += len(part) + 1
        if size >= line_width:
            return None
        parts.append(part)
    if not parts:
        return "{ }"
    return "{ " + " ".join(parts) + " }"


class LinePacker:
    """
    Greedy layout of one container's children into physical lines.

    Every line starts with `leading`; children of a nested block are
    expected to be indented by `child_leading`.
    """

    leading: str
    """Indentation of this block's lines."""

    child_leading: str
    """Indentation of a nested block's lines (one level deeper)."""

    line_width: int
    """Soft line width limit."""

    lines: list[str]
    """Finished physical lines."""

    def __init__(self, leading: str, child_leading: str, line_width: int) -> None:
        self.leading = leading
        self.child_leading = child_leading
        self.line_width = line_width
        self.lines = []
        self._reset_line()

    def _reset_line(self) -> None:
        self._chunks: list[str] = [self.leading]
        self._size: int = len(self.leading)

    def _has_content(self) -> bool:
        return len(self._chunks) > 1

    def _next_line(self) -> None:
        """Finish the current line with a trailing comma and start an empty one."""
        self._chunks[-1] = ","
        self.lines.append("".join(self._chunks))
        self._reset_line()

    def push_text(self, text: str) -> None:
        """Append an inline token, wrapping first if it does not fit the rest of the line."""
        if len(text) >= self.line_width - self._size and self._has_content():
            self._next_line()
        self._chunks.append(text)
        self._chunks.append(ITEM_SEPARATOR)
        self._size += len(text) + len(ITEM_SEPARATOR)

    def push(self, token: RenderToken, prefix: str = "") -> None:
        """
        Append a rendered child.

        :param token: An inline string, or the lines of a nested block.
        :param prefix: Text placed before the child, e.g. `["key"] = `.
        """
        if isinstance(token, str):
            self.push_text(prefix + token)
            return
        compact = pack_compact(
            token,
            len(self.leading) + len(prefix),
            len(self.child_leading),
            self.line_width,
        )
        if compact is not None:
            self.push_text(prefix + compact)
            return
        self._chunks.append(prefix)
        self._chunks.append("{")
        self.lines.append("".join(self._chunks))
        self._reset_line()
        self.lines.extend(token)
        self.push_text("}")

    def finish(self) -> list[str]:
        """Flush the last line without its trailing separator and return all lines."""
        if self._has_content():
            self._chunks.pop()
            self.lines.append("".join(self._chunks))
            self._reset_line()
        return self.lines


# End of file: src/mstair/pretty/xpretty/line_packer.py
