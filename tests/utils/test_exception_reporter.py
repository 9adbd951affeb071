from __future__ import annotations

import logging

import pytest

from flix_backend.utils.exception_reporter import ExceptionReporter


def test_log_mode_records_messages_in_order(caplog: pytest.LogCaptureFixture) -> None:
    reporter = ExceptionReporter("log")

    with caplog.at_level(logging.ERROR, logger="flix_backend.utils.exception_reporter"):
        reporter(RuntimeError("Server is broken"))
        reporter(ValueError("second"), context="find tt0076759")

    assert reporter.errors == ["Server is broken", "second"]
    assert "find tt0076759: second" in caplog.text


def test_log_mode_uses_class_name_for_empty_message() -> None:
    reporter = ExceptionReporter()

    reporter(KeyError())

    assert reporter.errors == ["KeyError"]


def test_rethrow_mode_raises_and_records_nothing() -> None:
    reporter = ExceptionReporter("rethrow")

    with pytest.raises(RuntimeError, match="boom"):
        reporter(RuntimeError("boom"))

    assert reporter.errors == []


def test_clear_and_invalid_mode() -> None:
    reporter = ExceptionReporter()
    reporter(RuntimeError("x"))
    reporter.clear()
    assert reporter.errors == []

    with pytest.raises(ValueError):
        ExceptionReporter("silent")  # type: ignore[arg-type]
