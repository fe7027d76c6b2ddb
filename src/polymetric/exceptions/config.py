"""Errors in settings and input paths, raised before any file is analyzed."""

from pathlib import Path
from typing import Any

from .base import PolymetricError
from .taxonomy import ErrorCode


class ConfigurationError(PolymetricError):
    """Config file missing, unreadable or malformed."""

    code = ErrorCode.PM200


class InvalidPathError(ConfigurationError):
    """A path given on the command line or to ``collect_files`` does not work."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid path: {path}", details={"path": str(path), "reason": reason})
        self.path = path


class InvalidConfigError(ConfigurationError):
    """A setting has the wrong type or an out-of-range value.

    ``key`` is the field name, or the ``POLYMETRIC_*`` variable it came from.
    """

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value!r}",
            details={"key": key, "reason": reason},
        )
        self.key = key
        self.value = value
        if key.startswith("POLYMETRIC_"):
            self.code = ErrorCode.PM201
