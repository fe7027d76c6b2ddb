"""Number of formal arguments of each function boundary."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..spaces import SpaceKind
from .common import FunctionAggregate, Visit

if TYPE_CHECKING:
    from ..spaces import Space


class NArgsStats:
    """Argument counts.

    Attributes:
        value: Parameters of this space's own boundary (0 for non-functions)
        fn_args: Parameters of named functions in the subtree
        closure_args: Parameters of closures in the subtree
    """

    def __init__(self) -> None:
        self.value = 0
        self.fn_args = 0
        self.closure_args = 0
        self.functions = FunctionAggregate()

    def compute(self, visit: Visit) -> None:
        if visit.opens is not SpaceKind.FUNCTION:
            return
        node, lang = visit.node, visit.lang
        self.value = lang.count_parameters(node)
        if lang.is_closure(node):
            self.closure_args += self.value
        else:
            self.fn_args += self.value

    def finalize(self, space: Space) -> None:
        if space.kind is SpaceKind.FUNCTION:
            self.functions.record(self.value)

    def merge(self, child: NArgsStats) -> None:
        self.fn_args += child.fn_args
        self.closure_args += child.closure_args
        self.functions.merge(child.functions)

    def to_dict(self) -> dict[str, float]:
        out = {
            "value": float(self.value),
            "functions": float(self.fn_args),
            "closures": float(self.closure_args),
        }
        out.update(self.functions.to_dict())
        return out
