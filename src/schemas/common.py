from __future__ import annotations

from datetime import datetime

from src.shared.base import BaseSchema


class TimeWindow(BaseSchema):
    """Closed interval; both ends are inclusive."""

    start: datetime
    end: datetime

    def contains(self, value: datetime) -> bool:
        return self.start <= value <= self.end
