"""Syntax tree adapter over py-tree-sitter."""

from .treesitter_parser import TreeSitterParser, get_parser, get_supported_languages

__all__ = [
    "TreeSitterParser",
    "get_parser",
    "get_supported_languages",
]
