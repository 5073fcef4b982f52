"""Unit tests for null coalescing of relational columns."""
from __future__ import annotations

from datetime import date, datetime

from content.coalesce import coalesce_int, coalesce_str, resolve_override, timestamp_text


def test_absent_string_is_empty() -> None:
    assert coalesce_str(None) == ""


def test_absent_int_is_zero() -> None:
    assert coalesce_int(None) == 0


def test_present_values_pass_through() -> None:
    assert coalesce_str("Derby") == "Derby"
    assert coalesce_str("") == ""
    assert coalesce_int(7) == 7
    assert coalesce_int(-3) == -3


def test_override_wins_when_present() -> None:
    assert resolve_override("2024-05-01T19:00:00", "2024-05-01T18:00:00") == "2024-05-01T19:00:00"


def test_override_falls_back_to_default() -> None:
    assert resolve_override(None, "2024-05-01T18:00:00") == "2024-05-01T18:00:00"
    assert resolve_override(None) == ""


def test_timestamp_text_renders_datetimes() -> None:
    assert timestamp_text(datetime(2024, 5, 1, 18, 30)) == "2024-05-01T18:30:00"
    assert timestamp_text(date(2024, 5, 1)) == "2024-05-01"
    assert timestamp_text("2024-05-01 18:30:00") == "2024-05-01 18:30:00"
    assert timestamp_text(None) is None
