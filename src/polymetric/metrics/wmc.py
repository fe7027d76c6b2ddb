"""WMC: weighted methods per class (sum of method cyclomatic values)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..spaces import SpaceKind

if TYPE_CHECKING:
    from ..spaces import Space
    from .cyclomatic import CyclomaticStats


class WmcStats:
    def __init__(self) -> None:
        self.value = 0
        self.total = 0

    def add_method(self, cyclomatic: CyclomaticStats) -> None:
        self.value += cyclomatic.value

    def finalize(self, space: Space) -> None:
        if space.kind.is_class_like:
            self.total += self.value

    def merge(self, child: WmcStats) -> None:
        self.total += child.total

    def to_dict(self) -> dict[str, float]:
        return {"value": float(self.value), "total": float(self.total)}


def is_method(child: Space, parent: Space) -> bool:
    return child.kind is SpaceKind.FUNCTION and parent.kind.is_class_like
