"""Unit tests for labelenum.utils.logging warnings and formatters."""

import logging

import pytest

from labelenum.utils.errors.exceptions import LabelAccessWarning
from labelenum.utils.logging.formatters import LabelEnumFormatter, WarningFormatter
from labelenum.utils.logging.logger import get_logger
from labelenum.utils.logging.warnings import catch_warnings, warn


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="labelenum.test",
        level=logging.WARNING,
        pathname="/tmp/module.py",
        lineno=12,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return record


# ---------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------
@pytest.mark.unit
def test_get_logger_configures_once():
    """Test that repeated calls reuse the same configured logger."""
    a = get_logger("unit_test_logger")
    b = get_logger("unit_test_logger")
    assert a is b
    assert a.name == "labelenum.unit_test_logger"
    assert len(a.handlers) == 1
    assert a.propagate is False


@pytest.mark.unit
def test_warnings_logger_uses_banner_formatter():
    """Test that the warnings channel is rendered as banners."""
    logger = get_logger("warnings")
    assert isinstance(logger.handlers[0].formatter, WarningFormatter)


# ---------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------
@pytest.mark.unit
def test_single_line_format():
    """Test the plain single-line layout."""
    line = LabelEnumFormatter().format(_record("hello"))
    assert line.endswith("| hello")
    assert "WARNING" in line
    assert "module:12" in line


@pytest.mark.unit
def test_warning_banner_format():
    """Test banner layout with location and hints."""
    record = _record(
        "Labels not accessible",
        warning_category=LabelAccessWarning,
        warning_filename="/some/path/app.py",
        warning_lineno=7,
        warning_message="Labels not accessible",
        warning_hints=["Use item access."],
    )
    text = WarningFormatter(max_width=60).format(record)
    lines = text.splitlines()
    assert "LabelAccessWarning" in lines[0]
    assert " Location: app.py:7" in lines
    assert any("Use item access." in line for line in lines)
    assert "─" * 10 in lines[-1]


@pytest.mark.unit
def test_warning_formatter_plain_record():
    """Test that records without warning fields fall back to one line."""
    line = WarningFormatter().format(_record("plain"))
    assert line.endswith("| plain")


# ---------------------------------------------------------------------
# warn / catch_warnings
# ---------------------------------------------------------------------
@pytest.mark.unit
def test_catch_warnings_intercepts():
    """Test that captured warnings carry category, hints and call site."""
    with catch_warnings() as caught:
        warn("something odd", category=LabelAccessWarning, hints="try this")

    assert len(caught) == 1
    payload = caught.payloads[0]
    assert payload["category"] is LabelAccessWarning
    assert payload["hints"] == "try this"
    assert payload["filename"] == __file__
    assert caught.match("odd")
    assert not caught.match("missing")


@pytest.mark.unit
def test_warn_logs_outside_interception(caplog):
    """Test that uncaught warnings are sent to the warnings logger."""
    logger = get_logger("warnings")
    logger.propagate = True
    try:
        with caplog.at_level(logging.WARNING, logger="labelenum.warnings"):
            warn("logged warning", category=LabelAccessWarning)
    finally:
        logger.propagate = False

    assert any(r.getMessage() == "logged warning" for r in caplog.records)
