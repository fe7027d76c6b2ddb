"""Lines of code.

Physical and comment lines are collected as sets of rows while visiting leaf
tokens and comment nodes, so lines the grammar never emits a node for (blank
lines, lines inside a comment block) are classified by exclusion.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .common import Visit, row_span

if TYPE_CHECKING:
    from ..spaces import Space


class LocStats:
    """Line counts for one space.

    Attributes:
        sloc: Source lines spanned by the space
        ploc: Lines holding at least one code token
        lloc: Logical lines (statements)
        cloc: Lines touched by a comment or docstring
        blank: Lines with neither code nor comment
    """

    def __init__(self) -> None:
        self.code_lines: set[int] = set()
        self.comment_lines: set[int] = set()
        self.lloc = 0
        self.sloc = 0

    def compute(self, visit: Visit) -> None:
        node = visit.node
        if visit.in_comment:
            self.comment_lines.update(row_span(node))
            return
        # an empty file is one zero-width root, and missing tokens are zero-width
        if node.child_count == 0 and node.start_byte != node.end_byte:
            self.code_lines.update(row_span(node))
        if visit.lang.is_statement(node, visit.parent):
            self.lloc += 1

    def finalize(self, space: Space, empty: bool = False) -> None:
        self.sloc = 0 if empty else space.end_line - space.start_line + 1

    def merge(self, child: LocStats) -> None:
        self.code_lines |= child.code_lines
        self.comment_lines |= child.comment_lines
        self.lloc += child.lloc

    @property
    def ploc(self) -> int:
        return len(self.code_lines)

    @property
    def cloc(self) -> int:
        return len(self.comment_lines)

    @property
    def blank(self) -> int:
        return max(0, self.sloc - len(self.code_lines | self.comment_lines))

    def to_dict(self) -> dict[str, float]:
        return {
            "sloc": float(self.sloc),
            "ploc": float(self.ploc),
            "lloc": float(self.lloc),
            "cloc": float(self.cloc),
            "blank": float(self.blank),
        }
