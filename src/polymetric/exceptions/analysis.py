"""Errors raised while turning one source file into a space tree."""

from pathlib import Path
from typing import List

from .base import PolymetricError
from .taxonomy import Diagnostic, ErrorCode


class AnalysisError(PolymetricError):
    """A single file, or a language tag, could not be analyzed."""


class FileAccessError(AnalysisError):
    """Reading the file failed."""

    code = ErrorCode.PM100

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class FileTooLargeError(AnalysisError):
    """The file is over ``max_file_size_bytes``."""

    code = ErrorCode.PM103

    def __init__(self, filepath: Path, size: int, limit: int):
        super().__init__(
            f"File too large: {filepath}",
            details={"filepath": str(filepath), "reason": f"{size} bytes exceeds limit of {limit}"},
        )
        self.filepath = filepath
        self.size = size
        self.limit = limit


class ParsingError(AnalysisError):
    """The parser produced no tree, usually because the grammar is not installed."""

    code = ErrorCode.PM102

    def __init__(self, filepath: Path, language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason


class UnsupportedLanguageError(AnalysisError):
    """A language tag or file extension has no classification table."""

    code = ErrorCode.PM101

    def __init__(self, language: str, supported_languages: List[str]):
        super().__init__(
            f"Unsupported language: {language}",
            details={"language": language, "supported": ", ".join(supported_languages)},
        )
        self.language = language
        self.supported_languages = supported_languages

    def to_diagnostic(self, path: str) -> Diagnostic:
        return Diagnostic(path, self.code, f"language {self.language!r} not recognised or not selected")
