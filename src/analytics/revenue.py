from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from src.models.hotel_operations import (
    ENTRY_TYPE_REVENUE,
    SEASON_HIGH,
    SEASON_LOW,
    FinancialEntryRecord,
)
from src.schemas.common import TimeWindow
from src.schemas.reports import RevenueSummary, RevenueWindowTotals
from src.shared.numbers import ZERO


def sum_revenue(
    entries: Iterable[FinancialEntryRecord],
    window: TimeWindow,
    season_type: Optional[str] = None,
) -> Decimal:
    """Net revenue booked inside ``window``; entries outside it are not prorated."""
    total = ZERO
    for entry in entries:
        if entry.type != ENTRY_TYPE_REVENUE:
            continue
        if not window.contains(entry.occurred_at):
            continue
        if season_type is not None and entry.season_type != season_type:
            continue
        total += entry.net_amount
    return total


def calculate_revenue_summary(
    entries: Iterable[FinancialEntryRecord], windows: Dict[str, TimeWindow]
) -> RevenueSummary:
    rows: List[FinancialEntryRecord] = list(entries)
    summary: RevenueSummary = {}
    for name, window in windows.items():
        summary[name] = RevenueWindowTotals(
            start=window.start,
            end=window.end,
            total=sum_revenue(rows, window),
            high_season=sum_revenue(rows, window, SEASON_HIGH),
            low_season=sum_revenue(rows, window, SEASON_LOW),
        )
    return summary


def covering_window(windows: Dict[str, TimeWindow]) -> TimeWindow:
    """Smallest interval containing every window, used to read entries once."""
    return TimeWindow(
        start=min(window.start for window in windows.values()),
        end=max(window.end for window in windows.values()),
    )
