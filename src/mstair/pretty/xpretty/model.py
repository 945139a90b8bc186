# File: src/mstair/pretty/xpretty/model.py
"""
Value kinds and the container view consumed by the renderer.

Every input value falls into exactly one `Kind`. The kinds carry the
precedence used to order mapping keys of different types:
number < text < boolean < container < callable < handle < thread.
"""

from __future__ import annotations

import inspect
import math
import numbers
import threading
from collections.abc import Callable, Mapping, Sequence, Set
from decimal import Decimal
from functools import total_ordering
from typing import Any, Final, Self, TypeAlias

from mstair.pretty.base.constants import FLOAT_MANTISSA_DIGITS, FLOAT_RADIX, MAX_SAFE_INTEGER
from mstair.pretty.xpretty.errors import UnsupportedRuntimeError


__all__ = [
    "ContainerView",
    "Kind",
    "KindT",
    "NUMBER_TYPES",
    "RenderToken",
    "TEXT_TYPES",
    "classify",
    "is_integer_valued",
    "key_sort_key",
]

RenderToken: TypeAlias = str | list[str]
"""A rendered child: one inline string, or the finished physical lines of a block."""

NUMBER_TYPES: Final[tuple[type, ...]] = (numbers.Real, Decimal)
TEXT_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray)


def check_runtime() -> None:
    """
    Verify that integer-valued floats can be recognized exactly on this interpreter.

    :raises UnsupportedRuntimeError: If floats are not binary or too narrow.
    """
    if FLOAT_RADIX != 2:
        raise UnsupportedRuntimeError(f"Unsupported float radix {FLOAT_RADIX}; expected 2")
    if FLOAT_MANTISSA_DIGITS < 24:
        raise UnsupportedRuntimeError(
            f"Unsupported float mantissa width {FLOAT_MANTISSA_DIGITS}; expected at least 24"
        )


check_runtime()


@total_ordering
class KindT:
    """A value kind; instances order by their key precedence."""

    _order: int
    """Rank used when sorting keys of different kinds."""

    name: str
    """Name of the kind, used for debugging and display."""

    def __init__(self, name: str, order: int) -> None:
        self.name = name
        self._order = order

    def __lt__(self, other: Self) -> bool:
        return self._order < other._order

    def __eq__(self, other: object) -> bool:
        return isinstance(other, KindT) and self._order == other._order

    def __hash__(self) -> int:
        return hash(self._order)

    @property
    def order(self) -> int:
        return self._order

    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


class Kind:
    """Static namespace for all defined KindT value categories."""

    ABSENT = KindT("ABSENT", -1)
    NUMBER = KindT("NUMBER", 0)
    TEXT = KindT("TEXT", 1)
    BOOLEAN = KindT("BOOLEAN", 2)
    CONTAINER = KindT("CONTAINER", 3)
    CALLABLE = KindT("CALLABLE", 4)
    HANDLE = KindT("HANDLE", 5)
    THREAD = KindT("THREAD", 6)


def classify(value: Any) -> KindT:
    """Return the Kind of `value`."""
    if value is None:
        return Kind.ABSENT
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, NUMBER_TYPES):
        return Kind.NUMBER
    if isinstance(value, TEXT_TYPES):
        return Kind.TEXT
    if isinstance(value, (Mapping, Sequence, Set)):
        return Kind.CONTAINER
    if (
        isinstance(value, threading.Thread)
        or inspect.isgenerator(value)
        or inspect.iscoroutine(value)
        or inspect.isasyncgen(value)
    ):
        return Kind.THREAD
    if callable(value):
        return Kind.CALLABLE
    return Kind.HANDLE


def is_integer_valued(value: numbers.Real | Decimal) -> bool:
    """
    True if `value` should be written without a fractional part.

    Python ints always qualify. Other reals qualify when finite, integral,
    not negative zero, and within the exactly representable float range.
    Decimal and Fraction values are tested exactly, without a float round trip.
    """
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            return False
        if value.is_zero():
            return not value.is_signed()
        return abs(value) <= MAX_SAFE_INTEGER
    if isinstance(value, numbers.Rational):
        return value.denominator == 1 and abs(value) <= MAX_SAFE_INTEGER
    try:
        number = float(value)
    except OverflowError:
        return False
    if not math.isfinite(number) or not number.is_integer():
        return False
    if number == 0.0 and math.copysign(1.0, number) < 0:
        return False
    return abs(number) <= MAX_SAFE_INTEGER


def _is_position(key: Any) -> bool:
    """True if `key` can occupy a slot of the dense array prefix (1, 2, 3, ...)."""
    return (
        classify(key) is Kind.NUMBER
        and is_integer_valued(key)
        and 1 <= key <= MAX_SAFE_INTEGER
    )


def _natural_number(key: Any) -> tuple[int, Any]:
    return (1, 0) if key != key else (0, key)


def _natural_text(key: Any) -> bytes:
    return key.encode("utf-8", "surrogatepass") if isinstance(key, str) else bytes(key)


_NATURAL_ORDER: Final[dict[KindT, Callable[[Any], Any]]] = {
    Kind.ABSENT: lambda _key: 0,
    Kind.NUMBER: _natural_number,
    Kind.TEXT: _natural_text,
    Kind.BOOLEAN: int,
}


def key_sort_key(key: Any) -> tuple[int, Any]:
    """
    Sort key placing mapping keys in canonical order.

    Keys rank by kind first; within a kind numbers and booleans compare by
    value, text compares bytewise over UTF-8, and kinds without a natural
    order (containers and opaque values) fall back to identity.
    """
    kind = classify(key)
    return (kind.order, _NATURAL_ORDER.get(kind, id)(key))


class ContainerView:
    """
    Read-only view of a container as a table.

    Sequences expose element i under position i + 1; set members become
    positions in canonical key order; mappings keep their keys. A `None`
    value means the key is absent.
    """

    value: Any
    """The viewed container; its identity is what cycle detection tracks."""

    entries: list[tuple[Any, Any]]
    """Present (key, value) pairs in the container's own iteration order."""

    positions: dict[int, Any]
    """Values held under integer-valued keys >= 1, by integer position."""

    def __init__(self, value: Mapping[Any, Any] | Sequence[Any] | Set[Any]) -> None:
        self.value = value
        if isinstance(value, Mapping):
            items: list[tuple[Any, Any]] = list(value.items())
        elif isinstance(value, Set):
            items = list(enumerate(sorted(value, key=key_sort_key), start=1))
        else:
            items = list(enumerate(value, start=1))
        self.entries = [(k, v) for k, v in items if v is not None]
        self.positions = {int(k): v for k, v in self.entries if _is_position(k)}

    def get(self, position: int) -> Any:
        return self.positions.get(position)

    def extra_entries(self, dense_length: int) -> list[tuple[Any, Any]]:
        """Entries not covered by the dense prefix, in canonical key order."""
        extras = [
            (k, v) for k, v in self.entries if not (_is_position(k) and int(k) <= dense_length)
        ]
        return sorted(extras, key=lambda kv: key_sort_key(kv[0]))


# End of file: src/mstair/pretty/xpretty/model.py
