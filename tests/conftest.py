from __future__ import annotations

import os

os.environ.setdefault("SUPABASE_URL", "http://supabase.test")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-key")

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from factories import make_hotel
from src.api.dependencies import (
    get_current_hotel,
    get_dashboard_service,
    get_pricing_service,
    get_reports_service,
)
from src.main import create_app
from src.models.hotel_operations import HotelRecord
from src.schemas.dashboard import DashboardAlerts, DashboardSnapshot, HotelSummary
from src.schemas.pricing import PricingAdjustments, PricingDrivers, PricingSuggestion
from src.schemas.reports import (
    MaintenanceSummary,
    OccupancyReport,
    ProfitBreakdown,
    ProfitGroup,
    RecurringIssue,
    RevenueWindowTotals,
)


def _revenue_summary() -> dict:
    window = RevenueWindowTotals(
        start=datetime(2024, 6, 15),
        end=datetime(2024, 6, 15, 23, 59, 59, 999999),
        total=Decimal("1500"),
        high_season=Decimal("1000"),
        low_season=Decimal("200"),
    )
    return {name: window for name in ("day", "week", "month", "quarter", "year")}


class FakeReportsService:
    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def get_occupancy_report(self, hotel_id: str) -> OccupancyReport:
        self.calls.append(("occupancy", hotel_id))
        return OccupancyReport(
            occupied=6,
            available=1,
            maintenance=2,
            out_of_service=1,
            rooms_total=10,
            occupancy_rate=0.6,
            with_issues=3,
        )

    def get_revenue_summary(self, hotel_id: str, as_of: Optional[datetime] = None) -> dict:
        self.calls.append(("revenue", hotel_id, as_of))
        return _revenue_summary()

    def get_profit_breakdown(self, hotel_id: str) -> ProfitBreakdown:
        self.calls.append(("profit", hotel_id))
        return ProfitBreakdown(
            by_center=[
                ProfitGroup(kind="known", tag="PACKAGE", label="PACKAGE", total=Decimal("300")),
                ProfitGroup(kind="known", tag="ROOM", label="ROOM", total=Decimal("900")),
            ],
            by_room=[
                ProfitGroup(kind="unclassified", tag=None, label="other", total=Decimal("100")),
                ProfitGroup(kind="known", tag="DELUXE", label="DELUXE", total=Decimal("800")),
            ],
            by_package=[],
        )

    def get_maintenance_summary(
        self, hotel_id: str, as_of: Optional[datetime] = None
    ) -> MaintenanceSummary:
        self.calls.append(("maintenance", hotel_id, as_of))
        return MaintenanceSummary(
            recurring=[RecurringIssue(room_id="room-1", category="PLUMBING", count=3)]
        )


def sample_suggestion() -> PricingSuggestion:
    return PricingSuggestion(
        base_rate=Decimal("410.00"),
        suggested_rate=Decimal("472.32"),
        average_competitor_rating=Decimal("4.0000"),
        drivers=PricingDrivers(
            rating_delta=Decimal("0.8000"), occupancy_rate=0.85, weather_summary="no data"
        ),
        adjustments=PricingAdjustments(
            rating=Decimal("13.12"), occupancy=Decimal("49.20"), weather=Decimal("0.00")
        ),
        competitors=[],
    )


class FakePricingService:
    def get_pricing_suggestion(self, hotel_id: str) -> PricingSuggestion:
        return sample_suggestion()


class FakeDashboardService:
    def get_snapshot(self, hotel: HotelRecord, as_of: Optional[datetime] = None) -> DashboardSnapshot:
        reports = FakeReportsService()
        return DashboardSnapshot(
            hotel=HotelSummary(id=hotel.id, name=hotel.name, rating=hotel.rating),
            occupancy=reports.get_occupancy_report(hotel.id),
            revenue=reports.get_revenue_summary(hotel.id),
            profit=reports.get_profit_breakdown(hotel.id),
            pricing=sample_suggestion(),
            alerts=DashboardAlerts(open_maintenance=4, pending_no_show=1, pending_notifications=2),
        )


@pytest.fixture()
def reports_service() -> FakeReportsService:
    return FakeReportsService()


@pytest.fixture()
def client(reports_service: FakeReportsService) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_current_hotel] = lambda: make_hotel()
    app.dependency_overrides[get_reports_service] = lambda: reports_service
    app.dependency_overrides[get_pricing_service] = FakePricingService
    app.dependency_overrides[get_dashboard_service] = FakeDashboardService
    return TestClient(app)
