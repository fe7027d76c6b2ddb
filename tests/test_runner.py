"""Tests for file collection and the concurrent runner."""

import threading
import time

import pytest

from polymetric.config import AnalysisConfig
from polymetric.exceptions import ErrorCode, InvalidPathError
from polymetric.parsing import get_supported_languages
from polymetric.runner import FileRunner, RunReport, collect_files

HAS_PYTHON = "python" in get_supported_languages()


def _relative(paths, root):
    return sorted(p.relative_to(root).as_posix() for p in paths)


class TestCollectFiles:
    """Directory walking with exclusion rules."""

    def test_default_walk(self, source_tree):
        files = collect_files(source_tree)
        assert _relative(files, source_tree) == ["pkg/mod.py", "pkg/util.py", "web/app.js"]

    def test_hidden_files_allowed(self, source_tree):
        config = AnalysisConfig(allow_hidden_files=True)
        assert ".hidden/secret.py" in _relative(collect_files(source_tree, config), source_tree)

    def test_language_filter(self, source_tree):
        config = AnalysisConfig(languages=["javascript"])
        assert _relative(collect_files(source_tree, config), source_tree) == ["web/app.js"]

    def test_custom_patterns(self, source_tree):
        config = AnalysisConfig(exclude_patterns=["pkg/*"])
        files = _relative(collect_files(source_tree, config), source_tree)
        assert "pkg/mod.py" not in files
        assert "node_modules/dep.js" in files
        assert "web/app.min.js" in files

    def test_single_file_is_returned_as_is(self, source_tree):
        readme = source_tree / "README.md"
        assert collect_files(readme) == [readme]

    def test_missing_root(self, tmp_path):
        with pytest.raises(InvalidPathError):
            collect_files(tmp_path / "missing")


class TestRunReport:
    def test_counts(self):
        report = RunReport()
        assert report.analyzed_count == 0
        assert report.failed_count == 0


class TestFileRunner:
    """Per-file failures become diagnostics; the run carries on."""

    def test_unknown_language(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello\n")
        space, diagnostic = FileRunner().analyze_path(path)
        assert space is None
        assert diagnostic.code is ErrorCode.PM101

    def test_language_not_selected(self, tmp_path):
        path = tmp_path / "a.py"
        path.write_text("x = 1\n")
        runner = FileRunner(AnalysisConfig(languages=["rust"]))
        _, diagnostic = runner.analyze_path(path)
        assert diagnostic.code is ErrorCode.PM101

    def test_file_too_large(self, tmp_path):
        path = tmp_path / "big.py"
        path.write_text("x = 1\n" * 1000)
        runner = FileRunner(AnalysisConfig(max_file_size_mb=0.001))
        _, diagnostic = runner.analyze_path(path)
        assert diagnostic.code is ErrorCode.PM103

    def test_unreadable_file(self, tmp_path):
        _, diagnostic = FileRunner().analyze_path(tmp_path / "gone.py")
        assert diagnostic.code is ErrorCode.PM100

    @pytest.mark.skipif(not HAS_PYTHON, reason="tree-sitter-python not installed")
    def test_run_mixed(self, source_tree):
        paths = collect_files(source_tree / "pkg") + [source_tree / "README.md"]
        report = FileRunner(AnalysisConfig(workers=2)).run(paths)
        assert str(source_tree / "pkg" / "mod.py") in report.results
        assert [d.code for d in report.diagnostics] == [ErrorCode.PM101]
        assert report.analyzed_count + report.failed_count == len(paths)
        assert list(report.results) == sorted(report.results)
        assert report.elapsed_seconds >= 0

    @pytest.mark.skipif(not HAS_PYTHON, reason="tree-sitter-python not installed")
    def test_results_match_single_file_analysis(self, tmp_path):
        from polymetric import analyze

        sources = {f"m{i}.py": f"def f{i}(a):\n    if a:\n        return {i}\n" for i in range(12)}
        for name, code in sources.items():
            (tmp_path / name).write_text(code)
        report = FileRunner(AnalysisConfig(workers=4)).run(sorted(tmp_path.iterdir()))
        assert report.analyzed_count == 12
        for name, code in sources.items():
            path = str(tmp_path / name)
            assert report.results[path].to_dict() == analyze(code, "python", path).to_dict()

    def test_empty_run(self):
        report = FileRunner().run([])
        assert report.results == {}
        assert report.diagnostics == []

    def test_time_budget(self, tmp_path, monkeypatch):
        path = tmp_path / "slow.py"
        path.write_text("x = 1\n")
        runner = FileRunner(AnalysisConfig(timeout_seconds=0.01))

        def slow(p):
            time.sleep(0.05)
            return object(), None

        monkeypatch.setattr(runner, "analyze_path", slow)
        report = runner.run([path])
        assert report.results == {}
        assert [d.code for d in report.diagnostics] == [ErrorCode.PM104]

    def test_stuck_file_does_not_hold_up_the_run(self, tmp_path, monkeypatch):
        stuck, quick = tmp_path / "stuck.py", tmp_path / "quick.py"
        for path in (stuck, quick):
            path.write_text("x = 1\n")
        runner = FileRunner(AnalysisConfig(workers=2, timeout_seconds=0.2))
        release = threading.Event()
        result = object()

        def analyze(p):
            if p == stuck:
                release.wait(10)
            return result, None

        monkeypatch.setattr(runner, "analyze_path", analyze)
        try:
            started = time.monotonic()
            report = runner.run([stuck, quick])
            assert time.monotonic() - started < 5
        finally:
            release.set()
        assert report.results == {str(quick): result}
        (diagnostic,) = report.diagnostics
        assert diagnostic.code is ErrorCode.PM104
        assert diagnostic.path == str(stuck)

    def test_unexpected_exception(self, tmp_path, monkeypatch):
        path = tmp_path / "boom.py"
        path.write_text("x = 1\n")
        runner = FileRunner()

        def boom(p):
            raise RuntimeError("grammar crashed")

        monkeypatch.setattr(runner, "analyze_path", boom)
        report = runner.run([path])
        (diagnostic,) = report.diagnostics
        assert diagnostic.code is ErrorCode.PM105
        assert "grammar crashed" in diagnostic.message
