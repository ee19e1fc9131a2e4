"""Clock sampling and hour symbol lookup."""

from __future__ import annotations

from datetime import datetime

import pytest

from lunar_calendar.clock import HOUR_SYMBOLS, TimeSnapshot, hour_symbol, normalize_hour, sample_time


def test_midnight_and_noon_share_a_symbol() -> None:
    """0 and 12 both land on the twelfth symbol."""
    assert hour_symbol(0) == hour_symbol(12) == HOUR_SYMBOLS[11]


@pytest.mark.parametrize("hour", range(1, 12))
def test_symbol_repeats_every_twelve_hours(hour: int) -> None:
    assert hour_symbol(hour) == hour_symbol(hour + 12)


def test_symbols_follow_table_order() -> None:
    assert [hour_symbol(h) for h in range(1, 13)] == list(HOUR_SYMBOLS)


def test_normalize_hour() -> None:
    assert normalize_hour(0) == 12
    assert normalize_hour(5) == 5
    assert normalize_hour(12) == 12
    assert normalize_hour(23) == 11


def test_snapshot_from_datetime() -> None:
    """Weekday is derived from the date; hour is folded to 0-11."""
    snapshot = TimeSnapshot.from_datetime(datetime(2024, 3, 10, 15, 42, 7))

    assert snapshot == TimeSnapshot(hour12=3, minute=42, second=7, year=2024, month=3, weekday="Sunday")
    assert snapshot.header_text() == "Year 2024 - Month 3 - Sunday"


def test_snapshot_weekday_saturday() -> None:
    assert TimeSnapshot.from_datetime(datetime(2024, 3, 9, 0, 0, 0)).weekday == "Saturday"


def test_sample_time_uses_given_moment() -> None:
    moment = datetime(2025, 1, 29, 12, 0, 59)
    snapshot = sample_time(moment)

    assert snapshot.hour12 == 0
    assert snapshot.second == 59
    assert snapshot.weekday == "Wednesday"


def test_snapshot_is_immutable() -> None:
    snapshot = sample_time(datetime(2024, 1, 1, 1, 1, 1))
    with pytest.raises(AttributeError):
        snapshot.minute = 5  # type: ignore[misc]
