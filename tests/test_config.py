"""Tests for configuration loading."""

import os

import pytest

from polymetric.config import AnalysisConfig, load_config
from polymetric.exceptions import ConfigurationError, InvalidConfigError


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """No user or project config files, no POLYMETRIC_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for key in list(os.environ):
        if key.startswith("POLYMETRIC_"):
            monkeypatch.delenv(key)
    return project


class TestAnalysisConfig:
    """Defaults and validation."""

    def test_defaults(self):
        config = AnalysisConfig()
        assert config.workers is None
        assert config.timeout_seconds == 30.0
        assert config.languages == []
        assert config.verbosity == "normal"
        assert "node_modules/*" in config.exclude_patterns
        assert not config.allow_hidden_files
        assert not config.follow_symlinks

    def test_max_file_size_bytes(self):
        assert AnalysisConfig(max_file_size_mb=1.0).max_file_size_bytes == 1024 * 1024

    def test_effective_workers(self):
        assert AnalysisConfig(workers=3).effective_workers == 3
        assert AnalysisConfig().effective_workers >= 1

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"workers": 0},
            {"timeout_seconds": 0},
            {"max_file_size_mb": -1},
            {"verbosity": "loud"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            AnalysisConfig(**kwargs)

    def test_frozen(self):
        config = AnalysisConfig()
        with pytest.raises(AttributeError):
            config.workers = 4


class TestLoadConfig:
    """Merging of files, environment and overrides."""

    def test_defaults_without_sources(self):
        assert load_config() == AnalysisConfig()

    def test_overrides(self):
        config = load_config(workers=2, languages=["python"])
        assert config.workers == 2
        assert config.languages == ["python"]

    def test_none_overrides_are_ignored(self):
        assert load_config(workers=None, languages=None).workers is None

    def test_verbose_and_quiet_flags(self):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=None, quiet=None).verbosity == "normal"

    def test_unknown_override(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config(colour="blue")
        assert exc_info.value.key == "colour"

    def test_invalid_override_value(self):
        with pytest.raises(ConfigurationError):
            load_config(workers=0)

    def test_explicit_file(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('workers = 3\nlanguages = ["rust", "go"]\n')
        config = load_config(config_file=path)
        assert config.workers == 3
        assert config.languages == ["rust", "go"]

    def test_table_form(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text("[polymetric]\ntimeout_seconds = 5.0\n")
        assert load_config(config_file=path).timeout_seconds == 5.0

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(config_file=tmp_path / "nope.toml")

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("workers = = 3\n")
        with pytest.raises(ConfigurationError, match="Invalid config file"):
            load_config(config_file=path)

    def test_project_file_is_discovered(self, isolated):
        (isolated / "polymetric.toml").write_text("allow_hidden_files = true\n")
        assert load_config().allow_hidden_files is True

    def test_priority_order(self, isolated, tmp_path, monkeypatch):
        (isolated / "polymetric.toml").write_text("workers = 2\ntimeout_seconds = 2.0\n")
        explicit = tmp_path / "explicit.toml"
        explicit.write_text("workers = 3\n")
        monkeypatch.setenv("POLYMETRIC_WORKERS", "4")
        config = load_config(config_file=explicit)
        assert config.workers == 4
        assert config.timeout_seconds == 2.0
        assert load_config(config_file=explicit, workers=5).workers == 5


class TestEnvironment:
    """POLYMETRIC_* variables."""

    def test_int_and_float(self, monkeypatch):
        monkeypatch.setenv("POLYMETRIC_WORKERS", "6")
        monkeypatch.setenv("POLYMETRIC_MAX_FILE_SIZE_MB", "0.5")
        config = load_config()
        assert config.workers == 6
        assert config.max_file_size_mb == 0.5

    @pytest.mark.parametrize("raw,expected", [("yes", True), ("1", True), ("off", False)])
    def test_bool(self, monkeypatch, raw, expected):
        monkeypatch.setenv("POLYMETRIC_FOLLOW_SYMLINKS", raw)
        assert load_config().follow_symlinks is expected

    def test_list(self, monkeypatch):
        monkeypatch.setenv("POLYMETRIC_LANGUAGES", "python, rust,,")
        assert load_config().languages == ["python", "rust"]

    def test_literal(self, monkeypatch):
        monkeypatch.setenv("POLYMETRIC_VERBOSITY", "quiet")
        assert load_config().verbosity == "quiet"

    def test_bad_bool(self, monkeypatch):
        monkeypatch.setenv("POLYMETRIC_ALLOW_HIDDEN_FILES", "maybe")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.key == "POLYMETRIC_ALLOW_HIDDEN_FILES"

    def test_bad_int(self, monkeypatch):
        monkeypatch.setenv("POLYMETRIC_WORKERS", "many")
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_bad_literal(self, monkeypatch):
        monkeypatch.setenv("POLYMETRIC_VERBOSITY", "loud")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.code.value == "PM201"


class TestLanguageSelection:
    def test_unknown_tag_rejected(self):
        with pytest.raises(ValueError, match="cobol"):
            AnalysisConfig(languages=["python", "cobol"])

    def test_unknown_tag_from_file(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('languages = ["cobol"]\n')
        with pytest.raises(ConfigurationError, match="unknown language"):
            load_config(config_file=path)

    def test_quiet_wins_over_verbose(self):
        assert load_config(verbose=True, quiet=True).verbosity == "quiet"

    def test_aliases_become_tags(self):
        assert AnalysisConfig(languages=["golang", "C#"]).languages == ["go", "csharp"]
