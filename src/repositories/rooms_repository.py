from __future__ import annotations

from datetime import datetime
from typing import List, Tuple

from src.core.supabase import SupabaseClient
from src.models.hotel_operations import (
    OPEN_ISSUE_STATUSES,
    MaintenanceVendorRecord,
    RoomIssueRecord,
    RoomRecord,
)
from src.repositories.base import parse_rows


ISSUE_COLUMNS = "id,room_id,category,status,severity,reported_at,rooms!inner(hotel_id)"


def _open_status_filter() -> Tuple[str, str]:
    return ("status", f"in.({','.join(OPEN_ISSUE_STATUSES)})")


class RoomsRepository:
    def __init__(self) -> None:
        self.client = SupabaseClient()

    def list_rooms(self, hotel_id: str) -> List[RoomRecord]:
        rows = self.client.select_all(
            table="rooms",
            select="id,hotel_id,number,category,status",
            filters=[("hotel_id", f"eq.{hotel_id}")],
            order="id.asc",
        )
        return parse_rows(RoomRecord, rows, "rooms")

    def list_open_issues(self, hotel_id: str) -> List[RoomIssueRecord]:
        rows = self.client.select_all(
            table="room_issues",
            select=ISSUE_COLUMNS,
            filters=[("rooms.hotel_id", f"eq.{hotel_id}"), _open_status_filter()],
            order="id.asc",
        )
        return parse_rows(RoomIssueRecord, rows, "room_issues")

    def count_open_issues(self, hotel_id: str) -> int:
        return self.client.count(
            "room_issues",
            filters=[("rooms.hotel_id", f"eq.{hotel_id}"), _open_status_filter()],
            select="id,rooms!inner(hotel_id)",
        )

    def list_latest_issues(self, hotel_id: str, limit: int) -> List[RoomIssueRecord]:
        rows, _ = self.client.select(
            table="room_issues",
            select=ISSUE_COLUMNS,
            filters=[("rooms.hotel_id", f"eq.{hotel_id}")],
            order="reported_at.desc",
            limit=limit,
        )
        return parse_rows(RoomIssueRecord, rows, "room_issues")

    def list_issues_reported_since(self, hotel_id: str, since: datetime) -> List[RoomIssueRecord]:
        rows = self.client.select_all(
            table="room_issues",
            select=ISSUE_COLUMNS,
            filters=[
                ("rooms.hotel_id", f"eq.{hotel_id}"),
                ("reported_at", f"gte.{since.isoformat()}"),
            ],
            order="reported_at.asc",
        )
        return parse_rows(RoomIssueRecord, rows, "room_issues")

    def list_vendors(self, hotel_id: str, limit: int) -> List[MaintenanceVendorRecord]:
        rows, _ = self.client.select(
            table="maintenance_vendors",
            select="id,name,category,phone,rating,last_used_at",
            filters=[("hotel_id", f"eq.{hotel_id}")],
            order="rating.desc.nullslast,last_used_at.desc.nullslast",
            limit=limit,
        )
        return parse_rows(MaintenanceVendorRecord, rows, "maintenance_vendors")
