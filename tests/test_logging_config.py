"""
Tests for logging setup — levels, formats, optional file handler.
"""

import logging
import sys
from pathlib import Path

import pytest

from texscaffold.core.observability.logging_config import _parse_level, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


class TestParseLevel:
    @pytest.mark.parametrize("name, expected", [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        ("Warning", logging.WARNING),
        ("ERROR", logging.ERROR),
    ])
    def test_known(self, name, expected):
        assert _parse_level(name) == expected

    @pytest.mark.parametrize("name", [None, "", "loud", "basicConfig"])
    def test_unknown_falls_back_to_warning(self, name):
        assert _parse_level(name) == logging.WARNING


class TestSetupLogging:
    def test_single_console_handler(self):
        setup_logging("INFO")
        setup_logging("INFO")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.INFO

    def test_minimal_format_at_warning(self):
        setup_logging("WARNING")
        fmt = logging.getLogger().handlers[0].formatter._fmt
        assert fmt == "%(message)s"

    def test_debug_format_has_line_numbers(self):
        setup_logging("DEBUG")
        fmt = logging.getLogger().handlers[0].formatter._fmt
        assert "%(lineno)d" in fmt

    def test_info_format_names_the_logger(self):
        setup_logging("INFO")
        fmt = logging.getLogger().handlers[0].formatter._fmt
        assert "%(name)s" in fmt
        assert "%(lineno)d" not in fmt

    def test_console_writes_to_stderr(self):
        setup_logging("WARNING")
        assert logging.getLogger().handlers[0].stream is sys.stderr

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "texscaffold.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")

        root = logging.getLogger()
        assert len(root.handlers) == 2
        assert root.level == logging.DEBUG

        logging.getLogger("texscaffold.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")
