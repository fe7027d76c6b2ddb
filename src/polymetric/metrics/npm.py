"""NPM: public methods of class-like spaces."""

from __future__ import annotations

from .common import Visit


class NpmStats:
    def __init__(self) -> None:
        self.methods = 0
        self.public_methods = 0

    def compute(self, visit: Visit) -> None:
        if visit.opens is None or not visit.opens.is_class_like:
            return
        members = visit.lang.class_members(visit.node, visit.code)
        self.methods += members.methods
        self.public_methods += members.public_methods

    def merge(self, child: NpmStats) -> None:
        self.methods += child.methods
        self.public_methods += child.public_methods

    @property
    def coa(self) -> float:
        """Class operation accessibility: share of methods that are public."""
        return self.public_methods / self.methods if self.methods else 0.0

    def to_dict(self) -> dict[str, float]:
        return {
            "methods": float(self.methods),
            "public_methods": float(self.public_methods),
            "coa": self.coa,
        }
