"""Run settings for polymetric.

Layers are applied lowest first; a later layer replaces whole keys:
    1. Field defaults of AnalysisConfig
    2. ~/.polymetric.toml
    3. ./polymetric.toml
    4. An explicit --config file
    5. POLYMETRIC_<FIELD> environment variables
    6. Keyword overrides from CLI flags

TOML files may hold the keys at top level or under a ``[polymetric]`` table.

Example:
    >>> config = load_config(workers=2, languages=["rust"])
    >>> config.workers, config.languages
    (2, ['rust'])
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_args, get_origin, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .langs import lookup_language

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "POLYMETRIC_"
CONFIG_FILENAME = "polymetric.toml"

# parsing is CPU bound but releases the GIL in tree-sitter; past 8 threads
# the file reads dominate
_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)

_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "off"})


def _default_excludes() -> list[str]:
    return [
        # vcs and tool state
        ".git/*",
        "__pycache__/*",
        ".tox/*",
        # vendored and installed dependencies
        "node_modules/*",
        "vendor/*",
        "venv/*",
        ".venv/*",
        # build output
        "dist/*",
        "build/*",
        "target/*",
        "bin/*",
        "obj/*",
        # generated javascript
        "*.min.js",
        "*.bundle.js",
    ]


@dataclass(frozen=True)
class AnalysisConfig:
    """Settings for one metrics run.

    Attributes:
        workers: Thread pool size; None picks one from the CPU count
        timeout_seconds: Per-file wall-clock limit; slower results are
            discarded with PM104
        languages: Only analyze these tags; empty means every registered one
        exclude_patterns: fnmatch globs; ``dir/*`` prunes that directory
            wherever it occurs
        max_file_size_mb: Larger files are skipped with PM103
        allow_hidden_files: Walk into dot-files and dot-directories
        follow_symlinks: Follow directory symlinks while walking
        verbosity: quiet, normal or verbose logging
    """

    workers: Optional[int] = None
    timeout_seconds: float = 30.0
    languages: list[str] = field(default_factory=list)
    exclude_patterns: list[str] = field(default_factory=_default_excludes)
    max_file_size_mb: float = 10.0
    allow_hidden_files: bool = False
    follow_symlinks: bool = False
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        if self.workers is not None and self.workers < 1:
            raise ValueError("workers must be at least 1")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if self.max_file_size_mb <= 0:
            raise ValueError("max_file_size_mb must be positive")
        if self.verbosity not in get_args(Verbosity):
            raise ValueError(f"verbosity must be quiet, normal or verbose, got '{self.verbosity}'")
        specs = [(tag, lookup_language(tag)) for tag in self.languages]
        unknown = sorted(tag for tag, spec in specs if spec is None)
        if unknown:
            raise ValueError(f"unknown language tag(s): {', '.join(unknown)}")
        # aliases such as "golang" are stored as the canonical tag
        object.__setattr__(self, "languages", [spec.name for _, spec in specs])

    @property
    def max_file_size_bytes(self) -> int:
        return int(self.max_file_size_mb * 1024 * 1024)

    @property
    def effective_workers(self) -> int:
        """``workers``, or the CPU-based default when unset."""
        return self.workers or _DEFAULT_WORKERS


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Merge every configuration layer into one validated AnalysisConfig.

    Args:
        config_file: Explicit TOML file; it must exist
        **overrides: Field values from CLI flags. None means "flag not given"
            and is skipped. ``verbose=True`` and ``quiet=True`` are accepted
            as shorthands for ``verbosity``.

    Raises:
        ConfigurationError: A config file is missing, unreadable or not TOML,
            or a merged value fails validation
        InvalidConfigError: An unknown key, or an unparseable environment value
    """
    if config_file is not None and not config_file.exists():
        raise ConfigurationError(f"Config file not found: {config_file}")

    merged: dict[str, Any] = {}
    candidates = [Path.home() / f".{CONFIG_FILENAME}", Path.cwd() / CONFIG_FILENAME, config_file]
    for path in candidates:
        if path is not None and path.is_file():
            merged.update(_read_config_file(path))

    merged.update(_load_env_vars())

    # quiet wins when both are set
    for flag in ("verbose", "quiet"):
        if overrides.pop(flag, None):
            overrides["verbosity"] = flag
    merged.update((key, value) for key, value in overrides.items() if value is not None)

    known = {f.name for f in fields(AnalysisConfig)}
    for key in sorted(merged):
        if key not in known:
            raise InvalidConfigError(key, merged[key], "unknown configuration key")

    try:
        return AnalysisConfig(**merged)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        data = _load_toml_file(path)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config '{path}': {e}") from e
    except ValueError as e:
        # TOMLDecodeError is a ValueError
        raise ConfigurationError(f"Invalid config file '{path}': {e}") from e

    table = data.get("polymetric")
    return dict(table) if isinstance(table, dict) else data


def _load_env_vars() -> dict[str, Any]:
    """Collect POLYMETRIC_<FIELD> variables, converted to each field's type.

    Lists are comma separated (``POLYMETRIC_LANGUAGES=python,rust``); booleans
    accept true/false, 1/0, yes/no and on/off.
    """
    hints = get_type_hints(AnalysisConfig)
    found: dict[str, Any] = {}
    for name, hint in hints.items():
        env_key = f"{ENV_PREFIX}{name.upper()}"
        raw = os.environ.get(env_key)
        if raw is None:
            continue
        try:
            found[name] = _parse_env_value(raw, hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, raw, str(e)) from e
    return found


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Convert one environment string according to a dataclass annotation.

    Raises:
        ValueError: The string does not fit the annotation
    """
    # Optional[int] -> int
    args = [arg for arg in get_args(type_hint) if arg is not type(None)]
    if get_origin(type_hint) is not Literal and type(None) in get_args(type_hint):
        type_hint = args[0]

    origin = get_origin(type_hint)
    if origin is list:
        return [item.strip() for item in value.split(",") if item.strip()]
    if origin is Literal:
        if value not in get_args(type_hint):
            raise ValueError(f"expected one of {', '.join(get_args(type_hint))}, got '{value}'")
        return value
    if type_hint is bool:
        lowered = value.strip().lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
        raise ValueError(f"expected true/false, got '{value}'")
    if type_hint in (int, float, str):
        return type_hint(value)
    raise ValueError(f"unsupported setting type {type_hint!r}")


def _load_toml_file(path: Path) -> dict:
    """Parse a TOML file with tomllib, or tomli before Python 3.11.

    Raises:
        ConfigurationError: Neither parser is importable
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "Reading polymetric.toml needs Python 3.11+ or the 'tomli' package"
            ) from None

    with open(path, "rb") as f:
        return tomllib.load(f)
