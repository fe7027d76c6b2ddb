"""Shared test fixtures for polymetric."""

import textwrap

import pytest

from polymetric import analyze
from polymetric.parsing import get_supported_languages


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def require_grammar(language):
    """Skip the calling test when the grammar for ``language`` is not installed."""
    if language not in get_supported_languages():
        pytest.skip(f"tree-sitter grammar for {language} not installed")


@pytest.fixture
def analyze_code():
    """Analyze a dedented snippet, skipping when the grammar is missing."""

    def _analyze(code, language="python", path=None):
        require_grammar(language)
        space = analyze(textwrap.dedent(code), language, path)
        assert space is not None
        return space

    return _analyze


@pytest.fixture
def find_space():
    """Find the first space with a given name in a tree."""

    def _find(root, name):
        for space in root.walk():
            if space.name == name:
                return space
        raise AssertionError(f"no space named {name!r}")

    return _find


@pytest.fixture
def source_tree(tmp_path):
    """A small mixed-language project on disk."""
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "mod.py").write_text("def f(a):\n    return a\n")
    (tmp_path / "pkg" / "util.py").write_text("x = 1\n")
    (tmp_path / "web").mkdir()
    (tmp_path / "web" / "app.js").write_text("function g(b) { return b; }\n")
    (tmp_path / "web" / "app.min.js").write_text("function h(){}\n")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "dep.js").write_text("var z = 1;\n")
    (tmp_path / ".hidden").mkdir()
    (tmp_path / ".hidden" / "secret.py").write_text("y = 2\n")
    (tmp_path / "README.md").write_text("# readme\n")
    return tmp_path
