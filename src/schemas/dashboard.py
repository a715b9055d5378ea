from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from src.schemas.pricing import PricingSuggestion
from src.schemas.reports import OccupancyReport, ProfitBreakdown, RevenueSummary
from src.shared.base import BaseSchema


class HotelSummary(BaseSchema):
    id: str
    name: str
    rating: Optional[float] = None


class MonthlyReservations(BaseSchema):
    key: str
    label: str
    reserved_count: int
    canceled_count: int
    total_amount: Decimal


class MonthlyCancelRate(BaseSchema):
    key: str
    label: str
    total_count: int
    canceled_count: int
    rate: float = Field(..., ge=0.0, le=1.0)


class SourceBreakdown(BaseSchema):
    source: str
    count: int
    canceled_count: int
    rate: float = Field(..., ge=0.0, le=1.0)


class ChannelStatus(BaseSchema):
    channel: str
    status: str
    last_sync_at: Optional[datetime] = None
    message: str


class DashboardAlerts(BaseSchema):
    open_maintenance: int = 0
    pending_no_show: int = 0
    pending_notifications: int = 0


class DashboardSnapshot(BaseSchema):
    hotel: HotelSummary
    occupancy: OccupancyReport
    revenue: RevenueSummary
    profit: ProfitBreakdown
    pricing: PricingSuggestion
    channels: List[ChannelStatus] = Field(default_factory=list)
    reservations_by_month: List[MonthlyReservations] = Field(default_factory=list)
    cancel_rate_by_month: List[MonthlyCancelRate] = Field(default_factory=list)
    reservations_by_source: List[SourceBreakdown] = Field(default_factory=list)
    alerts: DashboardAlerts
