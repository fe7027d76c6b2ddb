"""NPA: public attributes of class-like spaces."""

from __future__ import annotations

from .common import Visit


class NpaStats:
    def __init__(self) -> None:
        self.attributes = 0
        self.public_attributes = 0

    def compute(self, visit: Visit) -> None:
        if visit.opens is None or not visit.opens.is_class_like:
            return
        members = visit.lang.class_members(visit.node, visit.code)
        self.attributes += members.attributes
        self.public_attributes += members.public_attributes

    def merge(self, child: NpaStats) -> None:
        self.attributes += child.attributes
        self.public_attributes += child.public_attributes

    @property
    def cda(self) -> float:
        """Class data accessibility: share of attributes that are public."""
        return self.public_attributes / self.attributes if self.attributes else 0.0

    def to_dict(self) -> dict[str, float]:
        return {
            "attributes": float(self.attributes),
            "public_attributes": float(self.public_attributes),
            "cda": self.cda,
        }
