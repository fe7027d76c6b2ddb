"""Number of methods: function and closure boundaries in a subtree."""

from __future__ import annotations

from .common import Visit


class NomStats:
    def __init__(self) -> None:
        self.functions = 0
        self.closures = 0

    @property
    def total(self) -> int:
        return self.functions + self.closures

    def compute(self, visit: Visit) -> None:
        node, lang = visit.node, visit.lang
        if visit.opens is None:
            return
        if lang.is_closure(node):
            self.closures += 1
        elif lang.is_func(node):
            self.functions += 1

    def merge(self, child: NomStats) -> None:
        self.functions += child.functions
        self.closures += child.closures

    def to_dict(self) -> dict[str, float]:
        return {
            "functions": float(self.functions),
            "closures": float(self.closures),
            "total": float(self.total),
        }
