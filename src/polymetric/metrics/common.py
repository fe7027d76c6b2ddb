"""Pieces shared by the metric accumulators."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, NamedTuple, Optional

if TYPE_CHECKING:
    from tree_sitter import Node

    from ..langs.base import LanguageSpec
    from ..spaces import SpaceKind


class Visit(NamedTuple):
    """Everything an accumulator may look at for one node.

    Attributes:
        node: The node being visited
        parent: Its parent, None for the root
        lang: Classification table of the file's language
        code: Raw source bytes
        opens: Kind of the space this node opened, None if it opened none
        in_comment: Node is a comment, a docstring, or inside one
    """

    node: Node
    parent: Optional[Node]
    lang: LanguageSpec
    code: bytes
    opens: Optional[SpaceKind]
    in_comment: bool


class FunctionAggregate:
    """Sum, min and max of a per-function value over a subtree of spaces.

    The minimum starts at ``math.inf`` so that merging is a plain ``min``;
    it is reported as 0 while no function has been recorded.
    """

    __slots__ = ("total", "count", "_minimum", "_maximum")

    def __init__(self) -> None:
        self.total = 0.0
        self.count = 0
        self._minimum = math.inf
        self._maximum = 0.0

    def record(self, value: float) -> None:
        self.total += value
        self.count += 1
        self._minimum = min(self._minimum, value)
        self._maximum = max(self._maximum, value)

    def merge(self, other: FunctionAggregate) -> None:
        self.total += other.total
        self.count += other.count
        self._minimum = min(self._minimum, other._minimum)
        self._maximum = max(self._maximum, other._maximum)

    @property
    def average(self) -> float:
        return self.total / self.count if self.count else 0.0

    @property
    def minimum(self) -> float:
        return self._minimum if self.count else 0.0

    @property
    def maximum(self) -> float:
        return self._maximum if self.count else 0.0

    def to_dict(self) -> dict[str, float]:
        return {
            "sum": float(self.total),
            "average": self.average,
            "min": float(self.minimum),
            "max": float(self.maximum),
        }


def row_span(node: Node) -> range:
    """0-based rows a node covers; a trailing end at column 0 is not counted."""
    start_row = node.start_point[0]
    end_row, end_col = node.end_point
    if end_col == 0 and end_row > start_row:
        end_row -= 1
    return range(start_row, end_row + 1)
