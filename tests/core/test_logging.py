# topmark:header:start
#
#   project      : FrontMeta
#   file         : test_logging.py
#   file_relpath : tests/core/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the FrontMeta logging helpers."""

from __future__ import annotations

import logging

import pytest

from frontmeta.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    FrontmetaLogger,
    get_logger,
    resolve_env_log_level,
)
from tests.conftest import parametrize


@parametrize(
    "raw, expected",
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("15", 15),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None) -> None:
    """Level names and numbers are read from the environment."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert resolve_env_log_level() == expected


def test_unset_env_log_level() -> None:
    """Without the variable no level is forced."""
    assert resolve_env_log_level() is None


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Module loggers are `FrontmetaLogger` instances with a TRACE method."""
    logger: FrontmetaLogger = get_logger("frontmeta.tests.trace")
    assert isinstance(logger, FrontmetaLogger)
    with caplog.at_level(TRACE_LEVEL, logger="frontmeta.tests.trace"):
        logger.trace("deep %s", "detail")
    assert [r.levelname for r in caplog.records] == ["TRACE"]
    assert caplog.records[0].getMessage() == "deep detail"
