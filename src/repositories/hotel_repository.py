from __future__ import annotations

from typing import Any, Dict, Optional

from src.core.supabase import SupabaseClient
from src.models.hotel_operations import HotelRecord
from src.repositories.base import parse_rows


HOTEL_COLUMNS = "id,slug,name,rating,timezone"


class HotelRepository:
    def __init__(self) -> None:
        self.client = SupabaseClient()

    def get_hotel(self, hotel_id: str) -> Optional[HotelRecord]:
        rows, _ = self.client.select(
            table="hotels",
            select=HOTEL_COLUMNS,
            filters=[("id", f"eq.{hotel_id}")],
            limit=1,
        )
        records = parse_rows(HotelRecord, rows, "hotels")
        return records[0] if records else None

    def get_hotel_by_slug(self, slug: str) -> Optional[HotelRecord]:
        rows, _ = self.client.select(
            table="hotels",
            select=HOTEL_COLUMNS,
            filters=[("slug", f"eq.{slug}")],
            limit=1,
        )
        records = parse_rows(HotelRecord, rows, "hotels")
        return records[0] if records else None

    def insert_hotel_if_missing(self, payload: Dict[str, Any]) -> Optional[HotelRecord]:
        """Insert keyed on slug; returns None when another writer got there first."""
        rows = self.client.insert(
            "hotels", payload, upsert=True, on_conflict="slug", ignore_duplicates=True
        )
        records = parse_rows(HotelRecord, rows, "hotels")
        return records[0] if records else None
