from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Dict, List, Optional

from src.core.errors import BadRequestError
from src.schemas.common import TimeWindow


WINDOW_NAMES = ("day", "week", "month", "quarter", "year")


def parse_as_of(value: Optional[str], parameter: str = "as_of") -> datetime:
    """Parse an ISO date or datetime; wall-clock time is kept and any offset dropped."""
    if value is None:
        return datetime.now()
    text = value.strip()
    if not text:
        raise BadRequestError(f"Invalid {parameter}: value is empty", parameter=parameter)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise BadRequestError(
            f"Invalid {parameter}: expected an ISO-8601 date or datetime, got {value!r}",
            parameter=parameter,
        ) from exc
    return wall_clock(parsed)


def wall_clock(value: datetime) -> datetime:
    """Keep the local reading of ``value`` and drop its offset; windows are naive."""
    return value.replace(tzinfo=None)


def resolve_windows(as_of: datetime, week_start: int = 0) -> Dict[str, TimeWindow]:
    """Day, week, month, quarter and year intervals containing ``as_of``.

    ``week_start`` follows ``date.weekday()``: 0 is Monday (ISO), 6 is Sunday.
    """
    if not 0 <= week_start <= 6:
        raise BadRequestError("Invalid week start: expected 0 (Monday) to 6 (Sunday)")
    today = as_of.date()

    week_first = today - timedelta(days=(today.weekday() - week_start) % 7)
    month_first = today.replace(day=1)
    quarter_first = date(today.year, 3 * ((today.month - 1) // 3) + 1, 1)
    year_first = date(today.year, 1, 1)

    return {
        "day": _closed_window(today, today),
        "week": _closed_window(week_first, week_first + timedelta(days=6)),
        "month": _closed_window(month_first, _add_months(month_first, 1) - timedelta(days=1)),
        "quarter": _closed_window(
            quarter_first, _add_months(quarter_first, 3) - timedelta(days=1)
        ),
        "year": _closed_window(year_first, date(today.year, 12, 31)),
    }


def trailing_month_starts(as_of: datetime, months: int = 12) -> List[date]:
    """First day of each month from ``months - 1`` months back through the current one."""
    current = as_of.date().replace(day=1)
    return [_add_months(current, offset) for offset in range(-(months - 1), 1)]


def month_end(month_start: date) -> datetime:
    return datetime.combine(_add_months(month_start, 1) - timedelta(days=1), time.max)


def _closed_window(first_day: date, last_day: date) -> TimeWindow:
    return TimeWindow(
        start=datetime.combine(first_day, time.min),
        end=datetime.combine(last_day, time.max),
    )


def _add_months(value: date, months: int) -> date:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, 1)
