"""Comment removal.

Comment locations come from the syntax tree; the removal itself is a pure
function over raw bytes, so it works the same whether or not the rest of
the file parsed cleanly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from tree_sitter import Tree

    from .langs.base import LanguageSpec

_LINE_BREAKS = frozenset(b"\r\n")


def comment_ranges(tree: Tree, lang: LanguageSpec) -> list[tuple[int, int]]:
    """Byte ranges of every comment (and docstring), in source order."""
    ranges: list[tuple[int, int]] = []
    stack = [(tree.root_node, None)]
    while stack:
        node, parent = stack.pop()
        if lang.is_comment(node) or lang.is_docstring(node, parent):
            ranges.append((node.start_byte, node.end_byte))
            continue
        for child in reversed(node.children):
            stack.append((child, node))
    return ranges


def remove_ranges(code: bytes, ranges: Iterable[tuple[int, int]]) -> bytes:
    """Drop the given byte ranges from ``code``.

    Line breaks inside a removed range are kept, so every surviving byte
    stays on its original line. Overlapping or unsorted ranges are fine.
    """
    out = bytearray()
    position = 0
    for start, end in sorted(ranges):
        start = max(start, position)
        end = min(end, len(code))
        if start >= end:
            continue
        out += code[position:start]
        out += bytes(byte for byte in code[start:end] if byte in _LINE_BREAKS)
        position = end
    out += code[position:]
    return bytes(out)
