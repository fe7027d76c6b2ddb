"""Cyclomatic complexity: decision points plus one, per space."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..spaces import SpaceKind
from .common import FunctionAggregate, Visit

if TYPE_CHECKING:
    from ..spaces import Space


class CyclomaticStats:
    """Cyclomatic accumulator for one space.

    Attributes:
        value: 1 plus the decision points met directly in this space
        cumulative: ``value`` summed over this space and every descendant
        functions: Aggregate of ``value`` over the function spaces beneath
    """

    def __init__(self) -> None:
        self.value = 1
        self.cumulative = 0
        self.functions = FunctionAggregate()

    def compute(self, visit: Visit) -> None:
        if visit.lang.is_decision(visit.node, visit.parent):
            self.value += 1

    def finalize(self, space: Space) -> None:
        self.cumulative += self.value
        if space.kind is SpaceKind.FUNCTION:
            self.functions.record(self.value)

    def merge(self, child: CyclomaticStats) -> None:
        self.cumulative += child.cumulative
        self.functions.merge(child.functions)

    def to_dict(self) -> dict[str, float]:
        out = {"value": float(self.value)}
        out.update(self.functions.to_dict())
        return out
