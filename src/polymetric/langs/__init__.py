"""Per-language classification tables."""

from .base import ANONYMOUS, HalsteadType, LanguageSpec, MemberCounts
from .registry import (
    LANGUAGES,
    available_languages,
    detect_language,
    get_language,
    lookup_language,
)

__all__ = [
    "ANONYMOUS",
    "HalsteadType",
    "LanguageSpec",
    "MemberCounts",
    "LANGUAGES",
    "available_languages",
    "detect_language",
    "get_language",
    "lookup_language",
]
