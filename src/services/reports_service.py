from __future__ import annotations

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from src.analytics.maintenance import (
    LATEST_ISSUES_LIMIT,
    RECURRENCE_LOOKBACK_DAYS,
    VENDOR_LIMIT,
    calculate_maintenance_summary,
)
from src.analytics.occupancy import calculate_occupancy
from src.analytics.profit import calculate_profit_breakdown
from src.analytics.revenue import calculate_revenue_summary, covering_window, sum_revenue
from src.core.config import get_settings
from src.repositories.finance_repository import FinanceRepository
from src.repositories.rooms_repository import RoomsRepository
from src.schemas.common import TimeWindow
from src.schemas.reports import MaintenanceSummary, OccupancyReport, ProfitBreakdown, RevenueSummary
from src.shared.time import resolve_windows


logger = logging.getLogger(__name__)


class ReportsService:
    def __init__(
        self,
        rooms_repository: RoomsRepository,
        finance_repository: FinanceRepository,
    ) -> None:
        self.rooms_repository = rooms_repository
        self.finance_repository = finance_repository
        self.settings = get_settings()

    def get_occupancy_report(self, hotel_id: str) -> OccupancyReport:
        rooms = self.rooms_repository.list_rooms(hotel_id)
        open_issues = self.rooms_repository.list_open_issues(hotel_id)
        report = calculate_occupancy(rooms, open_issues)
        logger.debug(
            "occupancy hotel=%s rooms=%s rate=%.4f",
            hotel_id,
            report.rooms_total,
            report.occupancy_rate,
        )
        return report

    def get_revenue_summary(
        self, hotel_id: str, as_of: Optional[datetime] = None
    ) -> RevenueSummary:
        windows = resolve_windows(as_of or datetime.now(), self.settings.reporting_week_start)
        span = covering_window(windows)
        entries = self.finance_repository.list_revenue_entries(
            hotel_id, start=span.start, end=span.end
        )
        logger.debug("revenue hotel=%s entries=%s span=%s..%s", hotel_id, len(entries), span.start, span.end)
        return calculate_revenue_summary(entries, windows)

    def get_revenue(
        self, hotel_id: str, window: TimeWindow, season_type: Optional[str] = None
    ) -> Decimal:
        entries = self.finance_repository.list_revenue_entries(
            hotel_id, start=window.start, end=window.end
        )
        return sum_revenue(entries, window, season_type)

    def get_profit_breakdown(self, hotel_id: str) -> ProfitBreakdown:
        entries = self.finance_repository.list_revenue_entries(hotel_id)
        return calculate_profit_breakdown(entries)

    def get_maintenance_summary(
        self, hotel_id: str, as_of: Optional[datetime] = None
    ) -> MaintenanceSummary:
        since = (as_of or datetime.now()) - timedelta(days=RECURRENCE_LOOKBACK_DAYS)
        latest = self.rooms_repository.list_latest_issues(hotel_id, limit=LATEST_ISSUES_LIMIT)
        recent = self.rooms_repository.list_issues_reported_since(hotel_id, since)
        vendors = self.rooms_repository.list_vendors(hotel_id, limit=VENDOR_LIMIT)
        return calculate_maintenance_summary(latest, recent, vendors)
