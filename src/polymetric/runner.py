"""Concurrent file runner.

Analyzes many files on a thread pool. Every file is independent: a file that
cannot be read, has no language, or runs past its time budget yields a
``Diagnostic`` and the run carries on.

Usage:
    runner = FileRunner(load_config())
    report = runner.run(collect_files(Path("src"), runner.config))
    for path, space in report.results.items():
        ...
"""

from __future__ import annotations

import os
import time
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from fnmatch import fnmatch
from pathlib import Path
from threading import Lock
from typing import Iterable, Optional

from .builder import build_space_tree
from .config import AnalysisConfig
from .exceptions import (
    AnalysisError,
    Diagnostic,
    ErrorCode,
    FileAccessError,
    FileTooLargeError,
    InvalidPathError,
    ParsingError,
    UnsupportedLanguageError,
)
from .langs import LANGUAGES, detect_language
from .logging_config import get_logger
from .parsing import get_parser
from .spaces import Space

logger = get_logger(__name__)

# how often the run loop looks for files past their budget
_POLL_SECONDS = 0.5


@dataclass
class RunReport:
    """Outcome of one run.

    Attributes:
        results: Root unit space per analyzed file, keyed by path
        diagnostics: Files that produced no result, and why
        elapsed_seconds: Wall-clock time of the whole run
    """

    results: dict[str, Space] = field(default_factory=dict)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def analyzed_count(self) -> int:
        return len(self.results)

    @property
    def failed_count(self) -> int:
        return len(self.diagnostics)


class FileRunner:
    """Runs the metrics engine over a set of files in parallel."""

    def __init__(self, config: Optional[AnalysisConfig] = None) -> None:
        self.config = config or AnalysisConfig()
        self._lock = Lock()

    def analyze_path(self, path: Path) -> tuple[Optional[Space], Optional[Diagnostic]]:
        """Analyze one file; exactly one of the returned pair is set."""
        try:
            return self._build(path), None
        except AnalysisError as e:
            return None, e.to_diagnostic(str(path))

    def _build(self, path: Path) -> Space:
        language = detect_language(path)
        if language is None or (self.config.languages and language not in self.config.languages):
            raise UnsupportedLanguageError(language or path.suffix or path.name, self.config.languages)

        try:
            size = path.stat().st_size
            if size > self.config.max_file_size_bytes:
                raise FileTooLargeError(path, size, self.config.max_file_size_bytes)
            source = path.read_bytes()
        except OSError as e:
            raise FileAccessError(path, str(e)) from e

        lang = LANGUAGES[language]
        tree = get_parser().parse(source, lang.name)
        if tree is None:
            raise ParsingError(path, language, "no syntax tree")
        return build_space_tree(tree, lang, source, str(path))

    def run(self, paths: Iterable[Path]) -> RunReport:
        """Analyze every path and collect results and diagnostics.

        A file still running when its ``timeout_seconds`` budget runs out is
        reported as PM104 straight away and the run moves on. Python threads
        cannot be interrupted, so that worker finishes in the background and
        its result is thrown away; ``run`` does not wait for it.

        Args:
            paths: Files to analyze (see ``collect_files``)

        Returns:
            RunReport with one entry per file, in results or diagnostics
        """
        files = list(paths)
        report = RunReport()
        started = time.monotonic()
        budget = self.config.timeout_seconds
        # index of a file -> monotonic time its worker picked it up
        picked_up: dict[int, float] = {}

        def _work(index: int, path: Path) -> tuple[Optional[Space], Optional[Diagnostic], float]:
            begin = time.monotonic()
            with self._lock:
                picked_up[index] = begin
            space, diagnostic = self.analyze_path(path)
            return space, diagnostic, time.monotonic() - begin

        def _record(path: Path, space: Optional[Space], diagnostic: Optional[Diagnostic]) -> None:
            with self._lock:
                if diagnostic is not None:
                    report.diagnostics.append(diagnostic)
                    logger.debug(str(diagnostic))
                elif space is not None:
                    report.results[str(path)] = space

        def _over_budget(path: Path, elapsed: float) -> Diagnostic:
            return Diagnostic(
                str(path), ErrorCode.PM104, f"took {elapsed:.1f}s, budget is {budget:.1f}s"
            )

        workers = min(self.config.effective_workers, max(1, len(files)))
        executor = ThreadPoolExecutor(max_workers=workers)
        try:
            pending = {executor.submit(_work, i, fp): (i, fp) for i, fp in enumerate(files)}
            while pending:
                done, _ = wait(
                    pending, timeout=min(budget, _POLL_SECONDS), return_when=FIRST_COMPLETED
                )
                for future in done:
                    _, fp = pending.pop(future)
                    try:
                        space, diagnostic, elapsed = future.result()
                    except Exception as e:
                        logger.error(f"Unexpected error analyzing {fp}: {e}")
                        _record(fp, None, Diagnostic(str(fp), ErrorCode.PM105, str(e)))
                        continue
                    if elapsed > budget:
                        _record(fp, None, _over_budget(fp, elapsed))
                        continue
                    _record(fp, space, diagnostic)

                now = time.monotonic()
                with self._lock:
                    overdue = [
                        (future, now - picked_up[i])
                        for future, (i, _) in pending.items()
                        if i in picked_up and now - picked_up[i] > budget
                    ]
                for future, elapsed in overdue:
                    _, fp = pending.pop(future)
                    logger.warning(f"Giving up on {fp} after {elapsed:.1f}s")
                    _record(fp, None, _over_budget(fp, elapsed))
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        report.diagnostics.sort(key=lambda d: d.path)
        report.results = dict(sorted(report.results.items()))
        report.elapsed_seconds = time.monotonic() - started
        logger.info(
            f"Run complete: {report.analyzed_count} analyzed, {report.failed_count} skipped "
            f"in {report.elapsed_seconds:.2f}s"
        )
        return report


def _is_hidden(name: str) -> bool:
    return name.startswith(".") and name not in (".", "..")


def _is_excluded(rel_path: str, patterns: list[str]) -> bool:
    for pattern in patterns:
        if fnmatch(rel_path, pattern) or fnmatch(Path(rel_path).name, pattern):
            return True
    return False


def _is_excluded_dir(rel_dir: str, patterns: list[str]) -> bool:
    name = Path(rel_dir).name
    for pattern in patterns:
        # "node_modules/*" prunes every node_modules directory
        if pattern.endswith("/*"):
            prefix = pattern[:-2]
            if fnmatch(name, prefix) or fnmatch(rel_dir, prefix):
                return True
    return False


def collect_files(root: Path, config: Optional[AnalysisConfig] = None) -> list[Path]:
    """Source files under ``root`` that have a registered language.

    A file given directly is returned as is, whatever its extension, so the
    runner can report it. Directories are walked honouring the exclude
    patterns, hidden-file and symlink settings.

    Raises:
        InvalidPathError: ``root`` does not exist
    """
    config = config or AnalysisConfig()
    root = Path(root)
    if not root.exists():
        raise InvalidPathError(root, "path does not exist")
    if root.is_file():
        return [root]

    collected: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, followlinks=config.follow_symlinks):
        current = Path(dirpath)
        rel_dir = current.relative_to(root).as_posix()

        kept = []
        for dirname in sorted(dirnames):
            rel = dirname if rel_dir == "." else f"{rel_dir}/{dirname}"
            if not config.allow_hidden_files and _is_hidden(dirname):
                continue
            if _is_excluded_dir(rel, config.exclude_patterns):
                logger.debug(f"Skipped directory (pattern): {rel}")
                continue
            kept.append(dirname)
        dirnames[:] = kept

        for filename in sorted(filenames):
            if not config.allow_hidden_files and _is_hidden(filename):
                continue
            rel = filename if rel_dir == "." else f"{rel_dir}/{filename}"
            if _is_excluded(rel, config.exclude_patterns):
                logger.debug(f"Skipped (pattern): {rel}")
                continue
            language = detect_language(filename)
            if language is None:
                continue
            if config.languages and language not in config.languages:
                continue
            collected.append(current / filename)
    return collected
