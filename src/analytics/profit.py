from __future__ import annotations

from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from src.models.hotel_operations import (
    ENTRY_TYPE_REVENUE,
    PROFIT_CENTER_PACKAGE,
    PROFIT_CENTER_ROOM,
    FinancialEntryRecord,
)
from src.schemas.reports import ProfitBreakdown, ProfitGroup
from src.shared.numbers import ZERO


UNCLASSIFIED_ROOM_LABEL = "other"
UNCLASSIFIED_PACKAGE_LABEL = "standard"
UNCLASSIFIED_CENTER_LABEL = "unclassified"

TagGetter = Callable[[FinancialEntryRecord], Optional[str]]


def group_revenue(
    entries: Iterable[FinancialEntryRecord],
    tag_of: TagGetter,
    unclassified_label: str,
) -> List[ProfitGroup]:
    # None is the unclassified bucket; insertion order is first-seen order.
    totals: Dict[Optional[str], Decimal] = {}
    for entry in entries:
        tag = tag_of(entry)
        totals[tag] = totals.get(tag, ZERO) + entry.net_amount
    return [_to_group(tag, total, unclassified_label) for tag, total in totals.items()]


def calculate_profit_breakdown(entries: Iterable[FinancialEntryRecord]) -> ProfitBreakdown:
    revenue = [entry for entry in entries if entry.type == ENTRY_TYPE_REVENUE]
    room_entries = [entry for entry in revenue if entry.profit_center == PROFIT_CENTER_ROOM]
    package_entries = [
        entry for entry in revenue if entry.profit_center == PROFIT_CENTER_PACKAGE
    ]
    return ProfitBreakdown(
        by_center=group_revenue(
            revenue, lambda entry: entry.profit_center or None, UNCLASSIFIED_CENTER_LABEL
        ),
        by_room=group_revenue(
            room_entries, lambda entry: entry.room_category, UNCLASSIFIED_ROOM_LABEL
        ),
        by_package=group_revenue(
            package_entries, lambda entry: entry.package_type, UNCLASSIFIED_PACKAGE_LABEL
        ),
    )


def rank_groups(groups: Iterable[ProfitGroup]) -> List[ProfitGroup]:
    return sorted(groups, key=_rank_key)


def _rank_key(group: ProfitGroup) -> Tuple[Decimal, int, str]:
    return (-group.total, 1 if group.kind == "unclassified" else 0, group.label)


def _to_group(tag: Optional[str], total: Decimal, unclassified_label: str) -> ProfitGroup:
    if tag is None:
        return ProfitGroup(kind="unclassified", tag=None, label=unclassified_label, total=total)
    return ProfitGroup(kind="known", tag=tag, label=tag, total=total)
