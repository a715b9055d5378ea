from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.shared.time import wall_clock


RoomStatus = Literal["AVAILABLE", "OCCUPIED", "MAINTENANCE", "OUT_OF_SERVICE"]

OPEN_ISSUE_STATUSES = ("OPEN", "IN_PROGRESS")
RESERVATION_CANCELED = "CANCELED"
ENTRY_TYPE_REVENUE = "REVENUE"
PROFIT_CENTER_ROOM = "ROOM"
PROFIT_CENTER_PACKAGE = "PACKAGE"
SEASON_HIGH = "HIGH"
SEASON_LOW = "LOW"
NO_SHOW_PENDING = "PENDING"
NOTIFICATION_QUEUED = "QUEUED"
KNOWN_CHANNELS = ("BOOKING", "WHATSAPP")


class StoreRecord(BaseModel):
    @field_validator("*")
    @classmethod
    def naive_timestamps(cls, value: Any) -> Any:
        # timestamptz columns arrive as "...+00:00".
        if isinstance(value, datetime):
            return wall_clock(value)
        return value


class HotelRecord(StoreRecord):
    id: str
    slug: Optional[str] = None
    name: str
    rating: Optional[float] = None
    timezone: Optional[str] = None


class RoomRecord(StoreRecord):
    id: str
    hotel_id: Optional[str] = None
    number: Optional[str] = None
    category: Optional[str] = None
    status: RoomStatus


class RoomIssueRecord(StoreRecord):
    id: str
    room_id: str
    category: Optional[str] = None
    status: str
    severity: Optional[str] = None
    reported_at: Optional[datetime] = None


class ReservationRecord(StoreRecord):
    id: str
    hotel_id: Optional[str] = None
    room_id: Optional[str] = None
    guest_id: Optional[str] = None
    status: str
    source: str = "DIRECT"
    check_in: datetime
    check_out: Optional[datetime] = None
    total_amount: Optional[Decimal] = None
    season_type: Optional[str] = None


class FinancialEntryRecord(StoreRecord):
    id: str
    hotel_id: Optional[str] = None
    type: str
    profit_center: str
    room_category: Optional[str] = None
    package_type: Optional[str] = None
    season_type: Optional[str] = None
    net_amount: Decimal
    occurred_at: datetime


class CompetitorRateSnapshotRecord(StoreRecord):
    id: Optional[str] = None
    date: Optional[datetime] = None
    # Raw store value; the pricing advisor decides whether it is usable.
    rate: Any = None


class CompetitorHotelRecord(StoreRecord):
    id: str
    name: str
    rating: Optional[float] = None
    distance_km: Optional[float] = None
    snapshots: List[CompetitorRateSnapshotRecord] = Field(
        default_factory=list, alias="competitor_rate_snapshots"
    )

    model_config = ConfigDict(populate_by_name=True)

    @property
    def latest_snapshot(self) -> Optional[CompetitorRateSnapshotRecord]:
        return self.snapshots[0] if self.snapshots else None


class WeatherSnapshotRecord(StoreRecord):
    id: str
    hotel_id: Optional[str] = None
    date: datetime
    temperature_c: Optional[float] = None
    precipitation_chance: Optional[float] = None
    summary: Optional[str] = None


class ChannelSyncRecord(StoreRecord):
    channel: str
    status: str
    last_sync_at: Optional[datetime] = None
    message: Optional[str] = None


class MaintenanceVendorRecord(StoreRecord):
    id: str
    name: str
    category: Optional[str] = None
    phone: Optional[str] = None
    rating: Optional[float] = None
    last_used_at: Optional[datetime] = None
