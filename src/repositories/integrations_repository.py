from __future__ import annotations

from typing import List

from src.core.supabase import SupabaseClient
from src.models.hotel_operations import NOTIFICATION_QUEUED, ChannelSyncRecord
from src.repositories.base import parse_rows


class IntegrationsRepository:
    def __init__(self) -> None:
        self.client = SupabaseClient()

    def list_channel_syncs(self, hotel_id: str) -> List[ChannelSyncRecord]:
        rows, _ = self.client.select(
            table="channel_syncs",
            select="channel,status,last_sync_at,message",
            filters=[("hotel_id", f"eq.{hotel_id}")],
        )
        return parse_rows(ChannelSyncRecord, rows, "channel_syncs")

    def count_queued_notifications(self, hotel_id: str) -> int:
        return self.client.count(
            "notifications",
            filters=[
                ("hotel_id", f"eq.{hotel_id}"),
                ("status", f"eq.{NOTIFICATION_QUEUED}"),
            ],
        )
