"""Exception hierarchy for polymetric."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    FileTooLargeError,
    ParsingError,
    UnsupportedLanguageError,
)
from .base import PolymetricError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)
from .taxonomy import Diagnostic, ErrorCode

__all__ = [
    "PolymetricError",
    "AnalysisError",
    "FileAccessError",
    "FileTooLargeError",
    "ParsingError",
    "UnsupportedLanguageError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
    "Diagnostic",
    "ErrorCode",
]
