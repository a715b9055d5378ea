from __future__ import annotations

from datetime import date, datetime

import pytest

from src.core.errors import BadRequestError
from src.shared.time import parse_as_of, resolve_windows, trailing_month_starts


END_OF_DAY = (23, 59, 59, 999999)


def test_day_and_week_windows_use_monday_start():
    windows = resolve_windows(datetime(2024, 6, 15, 14, 30))

    assert windows["day"].start == datetime(2024, 6, 15)
    assert windows["day"].end == datetime(2024, 6, 15, *END_OF_DAY)
    assert windows["week"].start == datetime(2024, 6, 10)
    assert windows["week"].end == datetime(2024, 6, 16, *END_OF_DAY)


def test_calendar_aligned_month_quarter_and_year():
    windows = resolve_windows(datetime(2024, 2, 10, 8, 0))

    assert windows["month"].start == datetime(2024, 2, 1)
    assert windows["month"].end == datetime(2024, 2, 29, *END_OF_DAY)
    assert windows["quarter"].start == datetime(2024, 1, 1)
    assert windows["quarter"].end == datetime(2024, 3, 31, *END_OF_DAY)
    assert windows["year"].start == datetime(2024, 1, 1)
    assert windows["year"].end == datetime(2024, 12, 31, *END_OF_DAY)


def test_every_window_contains_as_of():
    as_of = datetime(2023, 12, 31, 23, 59, 59)
    windows = resolve_windows(as_of)

    assert list(windows) == ["day", "week", "month", "quarter", "year"]
    for window in windows.values():
        assert window.contains(as_of)
    assert windows["quarter"].start == datetime(2023, 10, 1)


def test_week_can_cross_year_boundary():
    windows = resolve_windows(datetime(2025, 1, 1))

    assert windows["week"].start == datetime(2024, 12, 30)
    assert windows["week"].end == datetime(2025, 1, 5, *END_OF_DAY)


def test_configurable_week_start_on_sunday():
    windows = resolve_windows(datetime(2024, 6, 15), week_start=6)

    assert windows["week"].start == datetime(2024, 6, 9)
    assert windows["week"].end == datetime(2024, 6, 15, *END_OF_DAY)


def test_window_on_week_start_day_begins_that_day():
    windows = resolve_windows(datetime(2024, 6, 10, 0, 0))

    assert windows["week"].start == datetime(2024, 6, 10)


def test_trailing_month_starts_covers_twelve_months():
    months = trailing_month_starts(datetime(2024, 3, 20))

    assert len(months) == 12
    assert months[0] == date(2023, 4, 1)
    assert months[-1] == date(2024, 3, 1)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-06-15", datetime(2024, 6, 15)),
        ("2024-06-15T10:30:00", datetime(2024, 6, 15, 10, 30)),
        ("2024-06-15T10:30:00Z", datetime(2024, 6, 15, 10, 30)),
        ("2024-06-15T10:30:00-03:00", datetime(2024, 6, 15, 10, 30)),
    ],
)
def test_parse_as_of_accepts_iso_values(value, expected):
    assert parse_as_of(value) == expected


@pytest.mark.parametrize("value", ["", "   ", "yesterday", "2024-13-01", "15/06/2024"])
def test_parse_as_of_rejects_malformed_values(value):
    with pytest.raises(BadRequestError) as exc_info:
        parse_as_of(value)
    assert "as_of" in exc_info.value.message
    assert exc_info.value.details == {"parameter": "as_of"}


def test_invalid_week_start_is_rejected():
    with pytest.raises(BadRequestError):
        resolve_windows(datetime(2024, 6, 15), week_start=7)


def test_day_window_covers_the_last_microsecond():
    day = resolve_windows(datetime(2024, 6, 15, 8, 0))["day"]

    assert day.contains(datetime(2024, 6, 15, 23, 59, 59, 999000))
    assert day.contains(datetime(2024, 6, 15, 23, 59, 59, 999999))
    assert not day.contains(datetime(2024, 6, 16))
