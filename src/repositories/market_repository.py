from __future__ import annotations

from typing import List, Optional

from src.core.supabase import SupabaseClient
from src.models.hotel_operations import CompetitorHotelRecord, WeatherSnapshotRecord
from src.repositories.base import parse_rows


class MarketRepository:
    """Competitor rate and weather snapshots used by the rate advisor."""

    def __init__(self) -> None:
        self.client = SupabaseClient()

    def list_competitors_with_latest_rate(self, hotel_id: str) -> List[CompetitorHotelRecord]:
        rows = self.client.select_all(
            table="competitor_hotels",
            select="id,name,rating,distance_km,competitor_rate_snapshots(id,date,rate)",
            filters=[
                ("hotel_id", f"eq.{hotel_id}"),
                ("competitor_rate_snapshots.order", "date.desc"),
                ("competitor_rate_snapshots.limit", "1"),
            ],
            order="name.asc,id.asc",
        )
        return parse_rows(CompetitorHotelRecord, rows, "competitor_hotels")

    def get_latest_weather(self, hotel_id: str) -> Optional[WeatherSnapshotRecord]:
        rows, _ = self.client.select(
            table="weather_snapshots",
            select="id,hotel_id,date,temperature_c,precipitation_chance,summary",
            filters=[("hotel_id", f"eq.{hotel_id}")],
            order="date.desc",
            limit=1,
        )
        records = parse_rows(WeatherSnapshotRecord, rows, "weather_snapshots")
        return records[0] if records else None
