# topmark:header:start
#
#   project      : FrontMeta
#   file         : test_diagnostics.py
#   file_relpath : tests/core/test_diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `DiagnosticLog` aggregation."""

from __future__ import annotations

from frontmeta.core.diagnostics import DiagnosticLevel, DiagnosticLog, compute_diagnostic_stats


def test_empty_log() -> None:
    """A new log has no diagnostics."""
    log = DiagnosticLog()
    assert len(log) == 0
    assert not log.has_warning()
    assert not log.has_error()
    assert log.stats().total == 0


def test_counts_by_level() -> None:
    """Stats and `to_dict` count diagnostics per level, in insertion order."""
    log = DiagnosticLog()
    log.add_info("i")
    log.add_warning("w1")
    log.add_warning("w2")
    log.add_error("e")

    assert [d.message for d in log] == ["i", "w1", "w2", "e"]
    assert log.has_warning() and log.has_error()
    assert log.to_dict() == {"info": 1, "warning": 2, "error": 1}
    assert compute_diagnostic_stats(log).total == 4


def test_level_colors_are_callables() -> None:
    """Each level has a color function that keeps the text."""
    for level in DiagnosticLevel:
        assert "msg" in level.color("msg")
