"""Tests for logging_config.py - levels, file output and logger naming."""

import logging

import pytest

from churnscope.logging_config import get_logger, setup_logging


@pytest.fixture
def restore_root_logging():
    """Put the root logger's handlers and levels back after the test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    saved_pkg_level = logging.getLogger("churnscope").level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    logging.getLogger("churnscope").setLevel(saved_pkg_level)


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
    def test_levels(self, restore_root_logging, verbose, quiet, level):
        assert setup_logging(verbose=verbose, quiet=quiet).level == level

    def test_log_file_receives_records(self, restore_root_logging, tmp_path):
        path = tmp_path / "churnscope.log"
        setup_logging(verbose=True, log_file=str(path))
        get_logger("parsing.ownership").debug("parsed 3 files")
        for handler in logging.getLogger().handlers:
            handler.flush()
        text = path.read_text(encoding="utf-8")
        assert "churnscope.parsing.ownership - DEBUG - parsed 3 files" in text

    def test_repeated_setup_replaces_handlers(self, restore_root_logging, tmp_path):
        setup_logging(log_file=str(tmp_path / "a.log"))
        setup_logging()
        assert not any(
            isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers
        )


class TestGetLogger:
    def test_namespaces_short_names(self):
        assert get_logger("git.client").name == "churnscope.git.client"

    def test_keeps_qualified_names(self):
        assert get_logger("churnscope.cli").name == "churnscope.cli"

    def test_default_is_package_logger(self):
        assert get_logger().name == "churnscope"
