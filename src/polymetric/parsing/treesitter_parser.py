"""Tree-sitter parser wrapper.

Provides a unified interface for tree-sitter parsing across languages.
Grammar wheels are optional: a missing wheel only makes that language
unavailable.

Usage:
    parser = TreeSitterParser()
    tree = parser.parse(code_bytes, "python")
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Callable, Optional

import tree_sitter

logger = logging.getLogger(__name__)

# language tag -> callable returning the grammar's language pointer
_grammar_loaders: dict[str, Callable[[], Any]] = {}

try:
    import tree_sitter_python

    _grammar_loaders["python"] = tree_sitter_python.language
except ImportError:
    pass

try:
    import tree_sitter_javascript

    _grammar_loaders["javascript"] = tree_sitter_javascript.language
except ImportError:
    pass

try:
    import tree_sitter_typescript

    # TSX is bundled with tree-sitter-typescript
    _grammar_loaders["typescript"] = tree_sitter_typescript.language_typescript
    _grammar_loaders["tsx"] = tree_sitter_typescript.language_tsx
except ImportError:
    pass

try:
    import tree_sitter_java

    _grammar_loaders["java"] = tree_sitter_java.language
except ImportError:
    pass

try:
    import tree_sitter_rust

    _grammar_loaders["rust"] = tree_sitter_rust.language
except ImportError:
    pass

try:
    import tree_sitter_c

    _grammar_loaders["c"] = tree_sitter_c.language
except ImportError:
    pass

try:
    import tree_sitter_cpp

    _grammar_loaders["cpp"] = tree_sitter_cpp.language
except ImportError:
    pass

try:
    import tree_sitter_go

    _grammar_loaders["go"] = tree_sitter_go.language
except ImportError:
    pass

try:
    import tree_sitter_c_sharp

    _grammar_loaders["csharp"] = tree_sitter_c_sharp.language
except ImportError:
    pass

try:
    import tree_sitter_lua

    _grammar_loaders["lua"] = tree_sitter_lua.language
except ImportError:
    pass


def get_supported_languages() -> list[str]:
    """Get list of language tags with installed grammars."""
    return list(_grammar_loaders.keys())


class TreeSitterParser:
    """Wrapper around tree-sitter for multi-language parsing.

    Language objects are built lazily and shared. ``tree_sitter.Parser`` is
    not thread-safe, so each ``parse()`` call uses a fresh parser bound to
    the shared language.
    """

    def __init__(self) -> None:
        self._languages: dict[str, tree_sitter.Language] = {}
        self._lock = Lock()

    def language(self, language: str) -> Optional[tree_sitter.Language]:
        """Return the grammar for a tag, or None if it is not installed."""
        with self._lock:
            lang_obj = self._languages.get(language)
            if lang_obj is not None:
                return lang_obj

            loader = _grammar_loaders.get(language)
            if loader is None:
                return None
            try:
                # tree-sitter >= 0.22 takes the PyCapsule returned by the wheel
                lang_obj = tree_sitter.Language(loader())
            except (TypeError, ValueError) as e:
                logger.warning(f"Cannot load {language} grammar: {e}")
                return None
            self._languages[language] = lang_obj
            return lang_obj

    def parse(self, code: bytes, language: str) -> Optional[tree_sitter.Tree]:
        """Parse code and return syntax tree.

        Args:
            code: Source code as bytes
            language: Language tag (e.g., "python")

        Returns:
            Tree object if successful, None if the language is not supported
            or the parser gave up
        """
        lang_obj = self.language(language)
        if lang_obj is None:
            return None

        parser = tree_sitter.Parser(lang_obj)
        try:
            return parser.parse(code)
        except ValueError as e:
            logger.debug(f"tree-sitter refused {language} input: {e}")
            return None

    def is_language_supported(self, language: str) -> bool:
        """Check if a language grammar is installed."""
        return language in _grammar_loaders


_default_parser: Optional[TreeSitterParser] = None
_default_lock = Lock()


def get_parser() -> TreeSitterParser:
    """Shared parser wrapper; safe to call from worker threads."""
    global _default_parser
    with _default_lock:
        if _default_parser is None:
            _default_parser = TreeSitterParser()
        return _default_parser
