"""Error codes for per-file diagnostics.

Error Code Convention:
    PM1xx - File and parse errors
    PM2xx - Configuration errors
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Structured error codes reported by the file runner."""

    # File and parse errors (PM1xx)
    PM100 = "PM100"  # File read error
    PM101 = "PM101"  # Language not recognised
    PM102 = "PM102"  # Parser produced no tree
    PM103 = "PM103"  # File exceeds size limit
    PM104 = "PM104"  # Analysis exceeded time budget
    PM105 = "PM105"  # Unexpected failure while analysing

    # Configuration errors (PM2xx)
    PM200 = "PM200"  # Invalid config file
    PM201 = "PM201"  # Invalid environment override


@dataclass(frozen=True)
class Diagnostic:
    """A problem with one file that did not stop the run.

    Attributes:
        path: File the diagnostic refers to
        code: Structured error code
        message: Human-readable description
    """

    path: str
    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.path}: {self.message}"

    def to_json(self) -> dict[str, Any]:
        """Structured logging format."""
        return {
            "path": self.path,
            "error_code": self.code.value,
            "message": self.message,
        }
