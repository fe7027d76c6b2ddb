"""Space: one analyzable scope in the output hierarchy.

A file yields exactly one ``UNIT`` space at the root; functions, closures,
classes and the other container kinds nest beneath it in source order.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator, Optional

if TYPE_CHECKING:
    from .metrics import MetricsBundle


class SpaceKind(str, Enum):
    """Kind of scope a Space represents."""

    UNIT = "unit"
    FUNCTION = "function"
    CLASS = "class"
    TRAIT = "trait"
    IMPL = "impl"
    INTERFACE = "interface"
    NAMESPACE = "namespace"
    STRUCT = "struct"
    UNKNOWN = "unknown"

    @property
    def is_class_like(self) -> bool:
        """Kinds whose direct function children are methods."""
        return self in _CLASS_LIKE


_CLASS_LIKE = frozenset(
    {SpaceKind.CLASS, SpaceKind.TRAIT, SpaceKind.IMPL, SpaceKind.INTERFACE, SpaceKind.STRUCT}
)


@dataclass
class Space:
    """A node of the space tree.

    Attributes:
        kind: Scope kind
        name: Declared name, ``"<anonymous>"`` for unnamed closures, the
            analyzed path (or None) for the unit
        start_line: First line, 1-based
        end_line: Last line, 1-based, never before ``start_line``
        metrics: Metric accumulators; sealed once the space is closed
        children: Nested spaces in source order
    """

    kind: SpaceKind
    name: Optional[str]
    start_line: int
    end_line: int
    metrics: MetricsBundle
    children: list[Space] = field(default_factory=list)

    def walk(self) -> Iterator[Space]:
        """Yield this space and all descendants in pre-order."""
        stack = [self]
        while stack:
            space = stack.pop()
            yield space
            stack.extend(reversed(space.children))

    def functions(self) -> list[Space]:
        """All function spaces in this subtree, this space included."""
        return [space for space in self.walk() if space.kind is SpaceKind.FUNCTION]

    def to_dict(self) -> dict[str, Any]:
        """Serializable form with stable keys.

        Built iteratively so very deep trees do not hit the recursion limit.
        """
        root: dict[str, Any] = {}
        stack: list[tuple[Space, dict[str, Any]]] = [(self, root)]
        while stack:
            space, out = stack.pop()
            out["name"] = space.name
            out["kind"] = space.kind.value
            out["start_line"] = space.start_line
            out["end_line"] = space.end_line
            out["metrics"] = space.metrics.to_dict()
            out["spaces"] = []
            for child in space.children:
                child_out: dict[str, Any] = {}
                out["spaces"].append(child_out)
                stack.append((child, child_out))
        return root

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
