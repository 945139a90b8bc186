# File: src/mstair/pretty/xpretty/dense.py
"""
Dense array prefix detection.
"""

from __future__ import annotations

from mstair.pretty.base.constants import MAX_SAFE_INTEGER
from mstair.pretty.xpretty.model import ContainerView


__all__ = ["dense_prefix_length"]


def dense_prefix_length(container: ContainerView, max_gaps: int) -> int:
    """
    Return how many leading positions (1, 2, 3, ...) are written positionally.

    Up to `max_gaps` consecutive missing positions are tolerated inside the
    prefix; a longer run ends it. The prefix always ends on a present
    position, so trailing gaps never belong to it.

    :param container: The container to scan.
    :param max_gaps: Longest run of missing positions allowed inside the prefix.
    :return: The last position of the dense prefix (0 when the run of missing
        positions before the first present one is already too long).
    """
    prefix = 0
    for position in sorted(container.positions):
        if position >= MAX_SAFE_INTEGER or position - prefix - 1 > max_gaps:
            break
        prefix = position
    return prefix


# End of file: src/mstair/pretty/xpretty/dense.py
