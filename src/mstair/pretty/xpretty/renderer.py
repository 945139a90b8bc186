# File: src/mstair/pretty/xpretty/renderer.py
"""
Recursive rendering of nested values.

Each container is rendered depth-first: its dense array prefix in
position order, then its remaining keys in canonical order as
`[key] = value`. The children are laid out by a LinePacker, and the
parent decides whether the resulting block can be folded onto one line.

A container met again while it is still being rendered higher up the
same path is written as `<cycle typename: 0x...>`. The same container
reached through two sibling paths is rendered twice.
"""

from __future__ import annotations

from typing import Any

from mstair.pretty.base.constants import MAX_NESTING_DEPTH
from mstair.pretty.xlogging.logger_factory import create_logger
from mstair.pretty.xpretty import model
from mstair.pretty.xpretty.dense import dense_prefix_length
from mstair.pretty.xpretty.errors import StructuralOverflowError
from mstair.pretty.xpretty.line_packer import LinePacker, pack_compact
from mstair.pretty.xpretty.options import PrettyOptions
from mstair.pretty.xpretty.scalar import ScalarFormatter, identity_token


__all__ = [
    "Renderer",
]

_LOG = create_logger(__name__)


class Renderer:
    """
    Renders one value tree; create a new Renderer (or call render()) per top-level value.
    """

    options: PrettyOptions
    """The configuration snapshot used for the whole render."""

    scalars: ScalarFormatter
    """Formatter for every non-container value and mapping key."""

    _visiting: set[int]
    """Identities of the containers on the current path from the root."""

    def __init__(self, options: PrettyOptions) -> None:
        self.options = options
        self.scalars = ScalarFormatter(options)
        self._visiting = set()

    def render(self, value: Any) -> str:
        """
        Render `value` to text.

        :raises StructuralOverflowError: If nesting is too deep for the line width.
        """
        self._visiting.clear()
        _LOG.trace("render %s with %r", type(value).__name__, self.options)
        token = self.render_token(value, self.options.indent, depth=0)
        if isinstance(token, str):
            return token
        compact = pack_compact(token, 0, self.options.indent_width, self.options.line_width)
        if compact is not None:
            return compact
        return "{\n" + "\n".join(token) + "\n}"

    def render_token(self, value: Any, leading: str, *, depth: int) -> model.RenderToken:
        """
        Render one node: a scalar token, a cycle placeholder, or the lines of a container block.

        :param value: The value to render.
        :param leading: Indentation of this container's lines.
        :param depth: Nesting depth of `value` (the root is 0).
        """
        if model.classify(value) is not model.Kind.CONTAINER:
            return self.scalars.format(value)

        identity = id(value)
        if identity in self._visiting:
            _LOG.trace("cycle at depth %d: %s", depth, identity_token(value))
            return f"<cycle {identity_token(value)}>"

        self._check_depth(leading, depth)
        self._visiting.add(identity)
        try:
            return self._render_container(model.ContainerView(value), leading, depth)
        finally:
            self._visiting.discard(identity)

    def _render_container(self, container: model.ContainerView, leading: str, depth: int) -> list[str]:
        child_leading = leading + self.options.indent
        packer = LinePacker(leading, child_leading, self.options.line_width)

        dense_length = dense_prefix_length(container, self.options.max_gaps)
        for position in range(1, dense_length + 1):
            packer.push(self.render_token(container.get(position), child_leading, depth=depth + 1))

        for key, value in container.extra_entries(dense_length):
            packer.push(
                self.render_token(value, child_leading, depth=depth + 1),
                self.scalars.format_key(key),
            )
        return packer.finish()

    def _check_depth(self, leading: str, depth: int) -> None:
        if len(leading) >= self.options.line_width:
            _LOG.debug(
                "leading indentation %d reached line width %d at depth %d",
                len(leading),
                self.options.line_width,
                depth,
            )
            raise StructuralOverflowError(
                depth=depth, indentation=len(leading), line_width=self.options.line_width
            )
        if depth >= MAX_NESTING_DEPTH:
            raise StructuralOverflowError(
                depth=depth,
                indentation=len(leading),
                line_width=self.options.line_width,
                reason=f"Nesting depth {depth} exceeds the supported maximum of {MAX_NESTING_DEPTH}",
            )


# End of file: src/mstair/pretty/xpretty/renderer.py
