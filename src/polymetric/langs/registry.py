"""Language registry: tag lookup and extension-based detection."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ..exceptions import UnsupportedLanguageError
from .base import LanguageSpec
from .c_family import CppSpec, CSpec
from .csharp import CSharpSpec
from .go import GoSpec
from .java import JavaSpec
from .javascript import JavaScriptSpec, TsxSpec, TypeScriptSpec
from .lua import LuaSpec
from .python import PythonSpec
from .rust import RustSpec

# Specs are stateless, one shared instance per language
LANGUAGES: dict[str, LanguageSpec] = {
    spec.name: spec
    for spec in (
        PythonSpec(),
        JavaScriptSpec(),
        TypeScriptSpec(),
        TsxSpec(),
        JavaSpec(),
        RustSpec(),
        CSpec(),
        CppSpec(),
        GoSpec(),
        CSharpSpec(),
        LuaSpec(),
    )
}

_EXTENSIONS: dict[str, str] = {
    ext: spec.name for spec in LANGUAGES.values() for ext in spec.extensions
}

# other names a language is commonly given
_ALIASES: dict[str, str] = {
    "py": "python",
    "js": "javascript",
    "ts": "typescript",
    "golang": "go",
    "rs": "rust",
    "c++": "cpp",
    "cs": "csharp",
    "csx": "csharp",
    "c#": "csharp",
}


def available_languages() -> list[str]:
    """Every language tag with a classification table, sorted."""
    return sorted(LANGUAGES)


def lookup_language(tag: str) -> Optional[LanguageSpec]:
    """Classification table for a tag or alias (``golang``, ``c#``); None if unknown."""
    normalized = tag.strip().lower()
    return LANGUAGES.get(_ALIASES.get(normalized, normalized))


def get_language(tag: str) -> LanguageSpec:
    """Classification table for a language tag or alias.

    Raises:
        UnsupportedLanguageError: No table exists for the tag
    """
    spec = lookup_language(tag)
    if spec is None:
        raise UnsupportedLanguageError(tag, available_languages())
    return spec


def detect_language(path: Union[str, Path]) -> Optional[str]:
    """Language tag from a file extension; None when unrecognized."""
    return _EXTENSIONS.get(Path(path).suffix.lower())
