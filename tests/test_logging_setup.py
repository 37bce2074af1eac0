from __future__ import annotations

import io
import logging

import pytest

from canceled_report.logging_setup import _parse_level, configure_logging, get_logger


@pytest.mark.parametrize(
    ("level", "expected"),
    [(logging.DEBUG, logging.DEBUG), ("info", logging.INFO), (" 30 ", 30), ("Error", logging.ERROR)],
)
def test_parse_level_accepts_ints_numbers_and_names(level, expected):
    assert _parse_level(level) == expected


def test_parse_level_falls_back_to_env_then_default(monkeypatch: pytest.MonkeyPatch):
    assert _parse_level(None) == logging.WARNING
    assert _parse_level("bogus") == logging.WARNING

    monkeypatch.setenv("CANCELED_REPORT_LOG_LEVEL", "debug")
    assert _parse_level(None) == logging.DEBUG
    assert _parse_level("bogus") == logging.DEBUG
    assert _parse_level("error") == logging.ERROR


def test_invalid_env_level_uses_default(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CANCELED_REPORT_LOG_LEVEL", "loud")

    assert _parse_level("also-bogus") == logging.WARNING


def test_configure_logging_routes_package_logs_to_stream_once():
    first, second = io.StringIO(), io.StringIO()

    configure_logging("INFO", stream=first, fmt="%(name)s:%(message)s")
    configure_logging("DEBUG", stream=second)
    get_logger("canceled_report.report").info("hello")
    get_logger("canceled_report.report").debug("hidden")

    assert first.getvalue() == "canceled_report.report:hello\n"
    assert second.getvalue() == ""
