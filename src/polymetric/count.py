"""Node counting over a syntax tree."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from tree_sitter import Tree


@dataclass
class NodeCount:
    """Totals for one tree.

    Attributes:
        total: Every node, named or anonymous
        matched: Nodes whose kind was asked for
        by_kind: ``matched`` broken down per requested kind
    """

    total: int = 0
    matched: int = 0
    by_kind: Counter[str] = field(default_factory=Counter)


def count_tree_nodes(tree: Tree, kinds: Iterable[str]) -> NodeCount:
    wanted = frozenset(kinds)
    result = NodeCount()
    stack = [tree.root_node]
    while stack:
        node = stack.pop()
        result.total += 1
        if node.type in wanted:
            result.matched += 1
            result.by_kind[node.type] += 1
        stack.extend(node.children)
    return result
