from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from factories import make_reservation
from src.analytics.reservations import breakdown_by_source, bucket_reservations_by_month
from src.shared.time import trailing_month_starts


AS_OF = datetime(2024, 6, 15)


def _reservations():
    return [
        make_reservation("r1", datetime(2024, 6, 1), source="BOOKING", total_amount="300"),
        make_reservation("r2", datetime(2024, 6, 20), status="CANCELED", source="BOOKING", total_amount="900"),
        make_reservation("r3", datetime(2024, 6, 30, 23, 0), source="DIRECT", total_amount=None),
        make_reservation("r4", datetime(2023, 7, 5), source="WHATSAPP", total_amount="120"),
        make_reservation("r5", datetime(2024, 1, 10), status="CANCELED", source="BOOKING"),
        make_reservation("r6", datetime(2023, 6, 30), source="DIRECT", total_amount="999"),
    ]


def test_twelve_buckets_from_eleven_months_ago():
    by_month, cancel_rates = bucket_reservations_by_month(
        _reservations(), trailing_month_starts(AS_OF)
    )

    assert [bucket.key for bucket in by_month][0] == "2023-07"
    assert by_month[-1].key == "2024-06"
    assert by_month[-1].label == "Jun 24"
    assert len(by_month) == len(cancel_rates) == 12


def test_bucket_counts_and_amounts():
    by_month, cancel_rates = bucket_reservations_by_month(
        _reservations(), trailing_month_starts(AS_OF)
    )
    june = by_month[-1]

    assert june.reserved_count == 2
    assert june.canceled_count == 1
    # Canceled reservations never add to the amount.
    assert june.total_amount == Decimal("300")
    assert by_month[0].total_amount == Decimal("120")

    june_rate = cancel_rates[-1]
    assert june_rate.total_count == 3
    assert june_rate.rate == 1 / 3
    january = next(rate for rate in cancel_rates if rate.key == "2024-01")
    assert january.rate == 1.0


def test_empty_months_have_zero_cancel_rate():
    _, cancel_rates = bucket_reservations_by_month([], trailing_month_starts(AS_OF))

    assert all(rate.total_count == 0 and rate.rate == 0 for rate in cancel_rates)


def test_source_breakdown_sorted_by_volume():
    rows = breakdown_by_source(_reservations())

    assert [(row.source, row.count, row.canceled_count) for row in rows] == [
        ("BOOKING", 3, 2),
        ("DIRECT", 2, 0),
        ("WHATSAPP", 1, 0),
    ]
    assert rows[0].rate == 2 / 3
