"""Public API for polymetric.

Example:
    >>> from polymetric import analyze
    >>> space = analyze(b"def f(a):\\n    return a\\n", "python")
    >>> space.metrics.cyclomatic.value
    1

Unsupported or unparseable input is not an error here: the functions return
``None`` and log why. ``analyze_file(..., strict=True)`` raises instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional, Union

from .builder import build_space_tree
from .comment_rm import comment_ranges, remove_ranges
from .count import NodeCount, count_tree_nodes
from .exceptions import FileAccessError, ParsingError, UnsupportedLanguageError
from .functions import SpanReport, collect_function_spans
from .langs import available_languages, detect_language, get_language, lookup_language
from .logging_config import get_logger
from .parsing import get_parser

if TYPE_CHECKING:
    from tree_sitter import Tree

    from .langs.base import LanguageSpec
    from .spaces import Space

logger = get_logger(__name__)

Source = Union[bytes, str]


def _as_bytes(code: Source) -> bytes:
    return code.encode("utf-8") if isinstance(code, str) else code


def _parse(code: bytes, language: str) -> Optional[tuple[LanguageSpec, Tree]]:
    lang = lookup_language(language)
    if lang is None:
        logger.warning(f"No classification table for language {language!r}")
        return None
    tree = get_parser().parse(code, lang.name)
    if tree is None:
        logger.warning(f"No syntax tree for {language} input (grammar missing or parser failed)")
        return None
    return lang, tree


def analyze(code: Source, language: str, path: Optional[str] = None) -> Optional[Space]:
    """Compute the metrics space tree of one source text.

    Args:
        code: Source text; ``str`` is encoded as UTF-8
        language: Language tag (see ``available_languages()``)
        path: Name given to the root unit space

    Returns:
        Root unit Space, or None if the language is unknown or the input
        could not be parsed
    """
    source = _as_bytes(code)
    parsed = _parse(source, language)
    if parsed is None:
        return None
    lang, tree = parsed
    return build_space_tree(tree, lang, source, path)


def analyze_file(
    path: Union[str, Path], language: Optional[str] = None, strict: bool = False
) -> Optional[Space]:
    """Read and analyze one file.

    Args:
        path: File to analyze
        language: Language tag; detected from the extension when omitted
        strict: Raise instead of returning None for unknown languages and
            unparseable files

    Raises:
        FileAccessError: The file cannot be read
        UnsupportedLanguageError: strict mode, no language for the file
        ParsingError: strict mode, the parser produced no tree
    """
    filepath = Path(path)
    try:
        source = filepath.read_bytes()
    except OSError as e:
        raise FileAccessError(filepath, str(e)) from e

    tag = language or detect_language(filepath)
    if tag is None:
        if strict:
            raise UnsupportedLanguageError(filepath.suffix or str(filepath), available_languages())
        logger.warning(f"Cannot detect language of {filepath}")
        return None

    if strict:
        lang = get_language(tag)
        tree = get_parser().parse(source, lang.name)
        if tree is None:
            raise ParsingError(filepath, lang.name, "no syntax tree (grammar missing or parser failed)")
        return build_space_tree(tree, lang, source, str(path))

    return analyze(source, tag, str(path))


def function_spans(code: Source, language: str) -> Optional[SpanReport]:
    """Every function and closure with its line range, in source order."""
    source = _as_bytes(code)
    parsed = _parse(source, language)
    if parsed is None:
        return None
    lang, tree = parsed
    return collect_function_spans(tree, lang, source)


def count_nodes(code: Source, language: str, kinds: Iterable[str]) -> Optional[NodeCount]:
    """Count all nodes, and the nodes of the given kinds."""
    source = _as_bytes(code)
    parsed = _parse(source, language)
    if parsed is None:
        return None
    return count_tree_nodes(parsed[1], kinds)


def strip_comments(code: Source, language: str) -> Optional[bytes]:
    """Source with comments removed; line numbering is preserved."""
    source = _as_bytes(code)
    parsed = _parse(source, language)
    if parsed is None:
        return None
    lang, tree = parsed
    return remove_ranges(source, comment_ranges(tree, lang))
