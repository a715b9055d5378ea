from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Tuple

from src.models.hotel_operations import (
    OPEN_ISSUE_STATUSES,
    MaintenanceVendorRecord,
    RoomIssueRecord,
)
from src.schemas.reports import MaintenanceSummary, OpenIssueItem, RecurringIssue, VendorItem


RECURRENCE_LOOKBACK_DAYS = 120
RECURRENCE_MIN_COUNT = 2
RECURRING_LIMIT = 6
LATEST_ISSUES_LIMIT = 20
VENDOR_LIMIT = 5


def find_recurring_issues(
    recent_issues: Iterable[RoomIssueRecord],
    min_count: int = RECURRENCE_MIN_COUNT,
    limit: int = RECURRING_LIMIT,
) -> List[RecurringIssue]:
    counter: Counter[Tuple[str, str]] = Counter(
        (issue.room_id, issue.category or "") for issue in recent_issues
    )
    # most_common keeps first-seen order among equal counts.
    return [
        RecurringIssue(room_id=room_id, category=category, count=count)
        for (room_id, category), count in counter.most_common()
        if count >= min_count
    ][:limit]


def calculate_maintenance_summary(
    latest_issues: Iterable[RoomIssueRecord],
    recent_issues: Iterable[RoomIssueRecord],
    vendors: Iterable[MaintenanceVendorRecord],
) -> MaintenanceSummary:
    open_issues = [
        OpenIssueItem.model_validate(issue.model_dump())
        for issue in latest_issues
        if issue.status in OPEN_ISSUE_STATUSES
    ]
    return MaintenanceSummary(
        open_issues=open_issues,
        recurring=find_recurring_issues(recent_issues),
        vendors=[VendorItem.model_validate(vendor.model_dump()) for vendor in vendors][
            :VENDOR_LIMIT
        ],
    )
