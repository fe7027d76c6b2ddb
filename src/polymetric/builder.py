"""Scope tree builder.

Walks a syntax tree once, depth-first, with an explicit stack instead of
recursion, so adversarially deep inputs cannot exhaust the interpreter
stack. Every node is offered to every accumulator of the innermost open
space; spaces are sealed and folded into their parent on the way out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .logging_config import get_logger
from .metrics import ROOT_CONTEXT, MetricsBundle, NestingContext, Visit
from .spaces import Space, SpaceKind

if TYPE_CHECKING:
    from tree_sitter import Node, Tree

    from .langs.base import LanguageSpec

logger = get_logger(__name__)

# deepest chain of nested spaces below the unit; anything deeper is folded
# into the innermost open space so serialized trees stay shallow enough for
# the json module
MAX_SPACE_DEPTH = 200

# stack entries: (node, parent, inherited context, inside a comment)
# a None node marks the exit of the most recently opened space
_Frame = tuple[Optional["Node"], Optional["Node"], NestingContext, bool]


def node_lines(node: Node) -> tuple[int, int]:
    """1-based (start_line, end_line) of a node."""
    start_row = node.start_point[0]
    end_row, end_col = node.end_point
    if end_col == 0 and end_row > start_row:
        end_row -= 1
    return start_row + 1, end_row + 1


def _line_count(code: bytes) -> int:
    if not code:
        return 0
    lines = code.count(b"\n")
    return lines if code.endswith(b"\n") else lines + 1


class ScopeTreeBuilder:
    """Builds the Space tree of one file.

    An instance holds the traversal state of a single file and is not meant
    to be shared between threads; create one per file.
    """

    def __init__(self, lang: LanguageSpec, code: bytes, path: Optional[str] = None) -> None:
        self.lang = lang
        self.code = code
        self.path = path
        self._spaces: list[Space] = []

    def build(self, tree: Tree) -> Space:
        root = tree.root_node
        if root.has_error:
            logger.debug(f"{self.path or '<memory>'}: syntax errors, metrics are best-effort")

        unit = Space(
            kind=SpaceKind.UNIT,
            name=self.path,
            start_line=1,
            end_line=max(1, _line_count(self.code)),
            metrics=MetricsBundle(),
        )
        self._spaces = [unit]

        lang, code = self.lang, self.code
        folded = 0
        stack: list[_Frame] = [(root, None, ROOT_CONTEXT, False)]
        while stack:
            node, parent, ctx, in_comment = stack.pop()
            if node is None:
                self._close_space()
                continue

            opens: Optional[SpaceKind] = None
            if parent is not None:
                kind = lang.space_kind(node)
                if kind is not SpaceKind.UNKNOWN and kind is not SpaceKind.UNIT:
                    if len(self._spaces) > MAX_SPACE_DEPTH:
                        folded += 1
                    else:
                        opens = kind
                        self._open_space(node, kind)
                        stack.append((None, None, ctx, False))

            in_comment = in_comment or lang.is_comment(node) or lang.is_docstring(node, parent)
            visit = Visit(node, parent, lang, code, opens, in_comment)
            ctx = self._spaces[-1].metrics.compute(visit, ctx)

            for child in reversed(node.children):
                stack.append((child, node, ctx, in_comment))

        # exits are pushed with their spaces, so only the unit is left open
        while len(self._spaces) > 1:
            self._close_space()
        if folded:
            logger.warning(
                f"{self.path or '<memory>'}: spaces nest deeper than {MAX_SPACE_DEPTH}, "
                f"{folded} folded into their enclosing space"
            )
        unit.metrics.finalize(unit, empty=not code)
        self._spaces = []
        return unit

    def _open_space(self, node: Node, kind: SpaceKind) -> None:
        start_line, end_line = node_lines(node)
        # error recovery can leave zero-width nodes past the last line
        enclosing = self._spaces[-1]
        start_line = min(max(start_line, enclosing.start_line), enclosing.end_line)
        end_line = min(max(end_line, start_line), enclosing.end_line)
        self._spaces.append(
            Space(
                kind=kind,
                name=self.lang.space_name(node, self.code),
                start_line=start_line,
                end_line=end_line,
                metrics=MetricsBundle(),
            )
        )

    def _close_space(self) -> None:
        if len(self._spaces) < 2:
            return
        space = self._spaces.pop()
        parent = self._spaces[-1]
        space.metrics.finalize(space)
        parent.children.append(space)
        parent.metrics.merge(space, parent)


def build_space_tree(
    tree: Tree, lang: LanguageSpec, code: bytes, path: Optional[str] = None
) -> Space:
    """Build the Space tree for an already parsed file."""
    return ScopeTreeBuilder(lang, code, path).build(tree)
