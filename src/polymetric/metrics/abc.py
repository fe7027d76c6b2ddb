"""ABC metric: assignments, branches (calls) and conditions."""

from __future__ import annotations

import math

from .common import Visit


class AbcStats:
    def __init__(self) -> None:
        self.assignments = 0
        self.branches = 0
        self.conditions = 0

    def compute(self, visit: Visit) -> None:
        node, lang = visit.node, visit.lang
        if lang.is_assignment(node):
            self.assignments += 1
        elif lang.is_call(node):
            self.branches += 1
        elif lang.is_condition(node, visit.parent):
            self.conditions += 1

    def merge(self, child: AbcStats) -> None:
        self.assignments += child.assignments
        self.branches += child.branches
        self.conditions += child.conditions

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.assignments**2 + self.branches**2 + self.conditions**2)

    def to_dict(self) -> dict[str, float]:
        return {
            "assignments": float(self.assignments),
            "branches": float(self.branches),
            "conditions": float(self.conditions),
            "magnitude": self.magnitude,
        }
