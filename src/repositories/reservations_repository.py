from __future__ import annotations

from datetime import datetime
from typing import List

from src.core.supabase import SupabaseClient
from src.models.hotel_operations import NO_SHOW_PENDING, ReservationRecord
from src.repositories.base import parse_rows


class ReservationsRepository:
    def __init__(self) -> None:
        self.client = SupabaseClient()

    def list_by_check_in(
        self, hotel_id: str, start: datetime, end: datetime
    ) -> List[ReservationRecord]:
        rows = self.client.select_all(
            table="reservations",
            select="id,hotel_id,room_id,guest_id,status,source,check_in,check_out,total_amount,season_type",
            filters=[
                ("hotel_id", f"eq.{hotel_id}"),
                ("check_in", f"gte.{start.isoformat()}"),
                ("check_in", f"lte.{end.isoformat()}"),
            ],
            order="check_in.asc,id.asc",
        )
        return parse_rows(ReservationRecord, rows, "reservations")

    def count_pending_no_shows(self, hotel_id: str) -> int:
        return self.client.count(
            "no_show_cases",
            filters=[
                ("reservations.hotel_id", f"eq.{hotel_id}"),
                ("status", f"eq.{NO_SHOW_PENDING}"),
            ],
            select="id,reservations!inner(hotel_id)",
        )
