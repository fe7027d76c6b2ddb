"""Function span listing: where each function and closure starts and ends."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .builder import node_lines

if TYPE_CHECKING:
    from tree_sitter import Tree

    from .langs.base import LanguageSpec


@dataclass(frozen=True)
class FunctionSpan:
    """One function boundary.

    Attributes:
        name: Declared or bound name, ``"<anonymous>"`` otherwise
        start_line: First line, 1-based
        end_line: Last line, 1-based
        kind: ``"function"`` or ``"closure"``
    """

    name: str
    start_line: int
    end_line: int
    kind: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "kind": self.kind,
        }


@dataclass
class SpanReport:
    """Function spans of one file plus whether the parse was clean."""

    spans: list[FunctionSpan] = field(default_factory=list)
    has_error: bool = False

    def __iter__(self):
        return iter(self.spans)

    def __len__(self) -> int:
        return len(self.spans)


def collect_function_spans(tree: Tree, lang: LanguageSpec, code: bytes) -> SpanReport:
    """Pre-order list of function boundaries, nested ones included."""
    report = SpanReport(has_error=tree.root_node.has_error)
    stack = [tree.root_node]
    while stack:
        node = stack.pop()
        if node.is_named and (lang.is_func(node) or lang.is_closure(node)):
            start_line, end_line = node_lines(node)
            report.spans.append(
                FunctionSpan(
                    name=lang.space_name(node, code),
                    start_line=start_line,
                    end_line=end_line,
                    kind="closure" if lang.is_closure(node) else "function",
                )
            )
        stack.extend(reversed(node.children))
    return report
