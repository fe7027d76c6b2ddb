"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from polymetric.logging_config import LOGGER_NAME, get_logger, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_default_is_package_logger(self):
        assert get_logger().name == LOGGER_NAME

    def test_module_name_kept(self):
        assert get_logger("polymetric.runner").name == "polymetric.runner"

    def test_short_name_is_namespaced(self):
        assert get_logger("runner").name == "polymetric.runner"

    def test_lookalike_prefix_is_namespaced(self):
        assert get_logger("polymetrics").name == "polymetric.polymetrics"


class TestSetupLogging:
    @pytest.mark.parametrize(
        "verbose,quiet,level",
        [
            (False, False, logging.WARNING),
            (True, False, logging.DEBUG),
            (False, True, logging.ERROR),
            (True, True, logging.ERROR),
        ],
    )
    def test_levels(self, verbose, quiet, level):
        logger = setup_logging(verbose=verbose, quiet=quiet)
        assert logger.name == LOGGER_NAME
        assert logger.level == level

    def test_rich_handler_installed(self):
        setup_logging()
        assert any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)

    def test_log_file(self, tmp_path):
        path = tmp_path / "run.log"
        setup_logging(log_file=str(path))
        get_logger("runner").warning("file skipped")
        for handler in logging.getLogger().handlers:
            handler.flush()
        text = path.read_text()
        assert "WARNING" in text
        assert "polymetric.runner" in text
        assert "file skipped" in text
