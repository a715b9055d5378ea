from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from factories import make_entry
from src.analytics.profit import calculate_profit_breakdown, rank_groups


WHEN = datetime(2023, 3, 1, 12, 0)


def _as_rows(groups):
    return [(group.kind, group.tag, group.label, group.total) for group in groups]


def test_breakdown_groups_lifetime_revenue():
    entries = [
        make_entry("300", WHEN, profit_center="ROOM", room_category="DELUXE"),
        make_entry("120", WHEN, profit_center="ROOM", room_category="STANDARD"),
        make_entry("80", WHEN, profit_center="ROOM"),
        make_entry("200", datetime(2020, 1, 1), profit_center="ROOM", room_category="DELUXE"),
        make_entry("150", WHEN, profit_center="PACKAGE", package_type="HONEYMOON"),
        make_entry("60", WHEN, profit_center="PACKAGE"),
        make_entry("40", WHEN, profit_center="CONSUMPTION"),
        make_entry("500", WHEN, profit_center="ROOM", room_category="DELUXE", entry_type="EXPENSE"),
    ]

    breakdown = calculate_profit_breakdown(entries)

    assert _as_rows(breakdown.by_center) == [
        ("known", "ROOM", "ROOM", Decimal("700")),
        ("known", "PACKAGE", "PACKAGE", Decimal("210")),
        ("known", "CONSUMPTION", "CONSUMPTION", Decimal("40")),
    ]
    assert _as_rows(breakdown.by_room) == [
        ("known", "DELUXE", "DELUXE", Decimal("500")),
        ("known", "STANDARD", "STANDARD", Decimal("120")),
        ("unclassified", None, "other", Decimal("80")),
    ]
    assert _as_rows(breakdown.by_package) == [
        ("known", "HONEYMOON", "HONEYMOON", Decimal("150")),
        ("unclassified", None, "standard", Decimal("60")),
    ]


def test_real_category_named_like_sentinel_stays_distinct():
    entries = [
        make_entry("10", WHEN, profit_center="ROOM", room_category="other"),
        make_entry("20", WHEN, profit_center="ROOM"),
    ]

    by_room = calculate_profit_breakdown(entries).by_room

    assert len(by_room) == 2
    assert {group.kind for group in by_room} == {"known", "unclassified"}
    assert all(group.label == "other" for group in by_room)


def test_empty_ledger_has_empty_groups():
    breakdown = calculate_profit_breakdown([])

    assert breakdown.by_center == []
    assert breakdown.by_room == []
    assert breakdown.by_package == []


def test_rank_groups_orders_by_total_descending():
    entries = [
        make_entry("10", WHEN, profit_center="PACKAGE", package_type="SPA"),
        make_entry("90", WHEN, profit_center="PACKAGE"),
        make_entry("50", WHEN, profit_center="PACKAGE", package_type="GOLF"),
    ]

    ranked = rank_groups(calculate_profit_breakdown(entries).by_package)

    assert [group.label for group in ranked] == ["standard", "GOLF", "SPA"]
