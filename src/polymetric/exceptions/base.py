"""Root of the polymetric exception hierarchy."""

from typing import Dict, Optional

from .taxonomy import Diagnostic, ErrorCode


class PolymetricError(Exception):
    """Base exception for all polymetric errors.

    Each subclass pins ``code`` so a failure confined to one file can be
    reported as a ``Diagnostic`` while the rest of a run carries on.
    """

    code: ErrorCode = ErrorCode.PM105

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        pairs = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({pairs})"

    def to_diagnostic(self, path: str) -> Diagnostic:
        """Per-file diagnostic for this error, using ``reason`` when present."""
        return Diagnostic(path, self.code, self.details.get("reason", self.message))
