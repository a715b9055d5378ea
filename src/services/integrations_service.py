from __future__ import annotations

from typing import List

from src.models.hotel_operations import KNOWN_CHANNELS
from src.repositories.integrations_repository import IntegrationsRepository
from src.schemas.dashboard import ChannelStatus


DEFAULT_CHANNEL_STATUS = "IDLE"
NO_SYNC_MESSAGE = "No recent sync"


class IntegrationsService:
    def __init__(self, repository: IntegrationsRepository) -> None:
        self.repository = repository

    def get_channel_sync_status(self, hotel_id: str) -> List[ChannelStatus]:
        by_channel = {record.channel: record for record in self.repository.list_channel_syncs(hotel_id)}
        statuses: List[ChannelStatus] = []
        for channel in KNOWN_CHANNELS:
            record = by_channel.get(channel)
            statuses.append(
                ChannelStatus(
                    channel=channel,
                    status=record.status if record else DEFAULT_CHANNEL_STATUS,
                    last_sync_at=record.last_sync_at if record else None,
                    message=(record.message if record and record.message else NO_SYNC_MESSAGE),
                )
            )
        return statuses

    def count_queued_notifications(self, hotel_id: str) -> int:
        return self.repository.count_queued_notifications(hotel_id)
