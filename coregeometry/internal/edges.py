from __future__ import annotations

from enum import IntFlag
from typing import Iterable, List, Union


class RectangleEdge(IntFlag):
    """Bit flags addressing the sides of a rect for inset/outset."""

    MIN_X = 1 << 0
    MIN_Y = 1 << 1
    MAX_X = 1 << 2
    MAX_Y = 1 << 3

    HORIZONTAL = MIN_X | MAX_X
    VERTICAL = MIN_Y | MAX_Y
    ALL = MIN_X | MIN_Y | MAX_X | MAX_Y
    NONE = 0

    @classmethod
    def mask_of(cls, *edges: Union[RectangleEdge, int, Iterable[Union[RectangleEdge, int]]]) -> RectangleEdge:
        """Build a flag set from one or more edges or edge collections."""
        bits = 0
        for item in edges:
            if isinstance(item, (list, tuple, set, frozenset)):
                for sub in item:
                    bits |= int(sub)
            else:
                bits |= int(item)
        return cls(bits)

    def single_edges(self) -> List[RectangleEdge]:
        order = (RectangleEdge.MIN_X, RectangleEdge.MIN_Y, RectangleEdge.MAX_X, RectangleEdge.MAX_Y)
        return [edge for edge in order if edge in self]
