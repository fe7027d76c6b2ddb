"""Cognitive complexity.

Nesting constructs cost ``1 + nesting + depth + lambdas`` where ``depth``
counts enclosing named functions and ``lambdas`` enclosing closures. A nested
function keeps the nesting it was declared at. Runs of one boolean
connective cost 1; every change of connective costs 1 more.

The nesting state is not stored per space: each node hands a
``NestingContext`` down to its children, so leaving a construct needs no
explicit decrement.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..spaces import SpaceKind
from .common import FunctionAggregate, Visit

if TYPE_CHECKING:
    from tree_sitter import Node

    from ..langs.base import LanguageSpec
    from ..spaces import Space


@dataclass(frozen=True)
class NestingContext:
    """Nesting state inherited from the parent node.

    ``in_function`` is set inside a named function, not inside a bare closure.
    """

    nesting: int = 0
    depth: int = 0
    lambdas: int = 0
    in_function: bool = False


ROOT_CONTEXT = NestingContext()


class BooleanSequence:
    """Last boolean connective seen in the current condition."""

    __slots__ = ("_last",)

    def __init__(self) -> None:
        self._last: Optional[str] = None

    def reset(self) -> None:
        self._last = None

    def not_operator(self, kind: str) -> None:
        # a negation splits the run: the next connective counts again
        self._last = kind

    def eval(self, connective: str) -> int:
        """Cost of meeting ``connective``: 1 if it starts or changes a run."""
        if connective == self._last:
            return 0
        self._last = connective
        return 1


class CognitiveStats:
    """Cognitive accumulator for one space."""

    def __init__(self) -> None:
        self.structural = 0
        self.boolean_seq = BooleanSequence()
        self.functions = FunctionAggregate()

    def compute(self, visit: Visit, ctx: NestingContext) -> NestingContext:
        node, parent, lang = visit.node, visit.parent, visit.lang

        if visit.opens is SpaceKind.FUNCTION:
            if lang.is_closure(node):
                ctx = NestingContext(ctx.nesting, ctx.depth, ctx.lambdas + 1, ctx.in_function)
            else:
                depth = ctx.depth + 1 if ctx.in_function else ctx.depth
                ctx = NestingContext(ctx.nesting, depth, ctx.lambdas, True)

        if lang.resets_boolean_sequence(node, parent):
            self.boolean_seq.reset()

        if lang.is_nesting(node, parent):
            self.structural += ctx.nesting + ctx.depth + ctx.lambdas + 1
            ctx = NestingContext(ctx.nesting + 1, ctx.depth, ctx.lambdas, ctx.in_function)
        elif lang.is_flat_increment(node, parent):
            self.structural += 1

        if lang.is_negation(node):
            self.boolean_seq.not_operator(node.type)
        elif lang.is_boolean_expression(node):
            if ctx.lambdas and lang.lambda_boolean_bonus and _heads_chain(node, lang):
                self.structural += ctx.lambdas
            for child in node.children:
                if child.type in lang.boolean_operators:
                    self.structural += self.boolean_seq.eval(child.type)

        return ctx

    def finalize(self, space: Space) -> None:
        if space.kind is SpaceKind.FUNCTION:
            self.functions.record(self.structural)

    def merge(self, child: CognitiveStats) -> None:
        self.functions.merge(child.functions)

    def to_dict(self) -> dict[str, float]:
        out = {"value": float(self.structural)}
        out.update(self.functions.to_dict())
        return out


def _heads_chain(node: Node, lang: LanguageSpec) -> bool:
    """No boolean expression between ``node`` and its enclosing closure."""
    current = node.parent
    while current is not None:
        if lang.is_boolean_expression(current):
            return False
        if lang.is_closure(current):
            return True
        current = current.parent
    return True
