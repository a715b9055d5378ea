from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Literal, Optional

from pydantic import Field

from src.shared.base import BaseSchema


GroupKind = Literal["known", "unclassified"]


class OccupancyReport(BaseSchema):
    occupied: int = 0
    available: int = 0
    maintenance: int = 0
    out_of_service: int = 0
    rooms_total: int = 0
    occupancy_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    with_issues: int = 0


class RevenueWindowTotals(BaseSchema):
    start: datetime
    end: datetime
    total: Decimal
    high_season: Decimal
    low_season: Decimal


RevenueSummary = Dict[str, RevenueWindowTotals]


class ProfitGroup(BaseSchema):
    """One breakdown row.

    ``kind`` separates entries tagged with a real value from entries whose tag was
    null; ``label`` is display text only and may coincide across kinds.
    """

    kind: GroupKind
    tag: Optional[str] = None
    label: str
    total: Decimal


class ProfitBreakdown(BaseSchema):
    by_center: List[ProfitGroup] = Field(default_factory=list)
    by_room: List[ProfitGroup] = Field(default_factory=list)
    by_package: List[ProfitGroup] = Field(default_factory=list)


class OpenIssueItem(BaseSchema):
    id: str
    room_id: str
    category: Optional[str] = None
    status: str
    severity: Optional[str] = None
    reported_at: Optional[datetime] = None


class RecurringIssue(BaseSchema):
    room_id: str
    category: str
    count: int


class VendorItem(BaseSchema):
    id: str
    name: str
    category: Optional[str] = None
    phone: Optional[str] = None
    rating: Optional[float] = None
    last_used_at: Optional[datetime] = None


class MaintenanceSummary(BaseSchema):
    open_issues: List[OpenIssueItem] = Field(default_factory=list)
    recurring: List[RecurringIssue] = Field(default_factory=list)
    vendors: List[VendorItem] = Field(default_factory=list)
