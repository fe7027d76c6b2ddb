"""Exit points: returns, raises and loop jumps, per innermost space."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..spaces import SpaceKind
from .common import FunctionAggregate, Visit

if TYPE_CHECKING:
    from ..spaces import Space


class ExitStats:
    def __init__(self) -> None:
        self.value = 0
        self.functions = FunctionAggregate()

    def compute(self, visit: Visit) -> None:
        if visit.lang.is_exit(visit.node, visit.parent):
            self.value += 1

    def finalize(self, space: Space) -> None:
        if space.kind is SpaceKind.FUNCTION:
            self.functions.record(self.value)

    def merge(self, child: ExitStats) -> None:
        self.functions.merge(child.functions)

    def to_dict(self) -> dict[str, float]:
        out = {"value": float(self.value)}
        out.update(self.functions.to_dict())
        return out
