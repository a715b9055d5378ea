from __future__ import annotations

from typing import Dict, Iterable

from src.models.hotel_operations import OPEN_ISSUE_STATUSES, RoomIssueRecord, RoomRecord
from src.schemas.reports import OccupancyReport
from src.shared.numbers import safe_divide


_STATUS_FIELDS = {
    "OCCUPIED": "occupied",
    "AVAILABLE": "available",
    "MAINTENANCE": "maintenance",
    "OUT_OF_SERVICE": "out_of_service",
}


def calculate_occupancy(
    rooms: Iterable[RoomRecord], open_issues: Iterable[RoomIssueRecord]
) -> OccupancyReport:
    counts: Dict[str, int] = {field: 0 for field in _STATUS_FIELDS.values()}
    rooms_total = 0
    for room in rooms:
        counts[_STATUS_FIELDS[room.status]] += 1
        rooms_total += 1

    rooms_with_issues = {
        issue.room_id for issue in open_issues if issue.status in OPEN_ISSUE_STATUSES
    }
    return OccupancyReport(
        **counts,
        rooms_total=rooms_total,
        occupancy_rate=safe_divide(counts["occupied"], rooms_total),
        with_issues=len(rooms_with_issues),
    )
