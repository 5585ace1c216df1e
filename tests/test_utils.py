"""Tests for linemark.utils."""

import logging

import pytest

from linemark import parse
from linemark.parsing.inline import parse_inline
from linemark.utils import get_logger


class TestGetLogger:
    """Logger namespacing."""

    def test_prefixes_name(self) -> None:
        assert get_logger("scanner").name == "linemark.scanner"

    def test_keeps_namespaced_name(self) -> None:
        assert get_logger("linemark.parser").name == "linemark.parser"
        assert get_logger("linemark").name == "linemark"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)

    def test_no_handlers_installed(self) -> None:
        assert logging.getLogger("linemark").handlers == []


class TestDebugLogging:
    """Library modules log at debug level only."""

    def test_inline_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="linemark"):
            parse_inline("*a* [b](c)")
        assert "inline: 1 style(s), 1 link(s), 0 escape(s)" in caplog.text

    def test_compactor_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="linemark"):
            parse("\n\n\n")
        assert "dropped 2 redundant line break(s)" in caplog.text

    def test_nothing_above_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="linemark"):
            parse("# t\n```\nopen")
        assert all(record.levelno == logging.DEBUG for record in caplog.records)
