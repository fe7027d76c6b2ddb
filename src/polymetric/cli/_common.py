"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..exceptions import FileAccessError, UnsupportedLanguageError
from ..langs import available_languages, detect_language, get_language

console = Console()


def read_source(path: Path, language: Optional[str] = None) -> tuple[bytes, str]:
    """Read a file and resolve its language tag.

    Raises:
        FileAccessError: The file cannot be read
        UnsupportedLanguageError: No language given and none detected, or
            an unknown tag was given
    """
    try:
        source = path.read_bytes()
    except OSError as e:
        raise FileAccessError(path, str(e)) from e

    tag = language or detect_language(path)
    if tag is None:
        raise UnsupportedLanguageError(path.suffix or path.name, available_languages())
    return source, get_language(tag).name
