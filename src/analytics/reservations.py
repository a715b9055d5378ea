from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List

from src.models.hotel_operations import RESERVATION_CANCELED, ReservationRecord
from src.schemas.dashboard import MonthlyCancelRate, MonthlyReservations, SourceBreakdown
from src.shared.numbers import ZERO, safe_divide


MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass
class _MonthStats:
    reserved_count: int = 0
    canceled_count: int = 0
    total_amount: Decimal = ZERO

    @property
    def total_count(self) -> int:
        return self.reserved_count + self.canceled_count


def month_key(value: date) -> str:
    return f"{value.year}-{value.month:02d}"


def month_label(value: date) -> str:
    return f"{MONTH_LABELS[value.month - 1]} {str(value.year)[-2:]}"


def _is_canceled(reservation: ReservationRecord) -> bool:
    return reservation.status == RESERVATION_CANCELED


def _collect_month_stats(
    reservations: Iterable[ReservationRecord], month_starts: List[date]
) -> Dict[str, _MonthStats]:
    stats = {month_key(month): _MonthStats() for month in month_starts}
    for reservation in reservations:
        bucket = stats.get(month_key(reservation.check_in.date()))
        if bucket is None:
            continue
        if _is_canceled(reservation):
            bucket.canceled_count += 1
        else:
            bucket.reserved_count += 1
            if reservation.total_amount is not None:
                bucket.total_amount += reservation.total_amount
    return stats


def bucket_reservations_by_month(
    reservations: Iterable[ReservationRecord], month_starts: List[date]
) -> tuple[List[MonthlyReservations], List[MonthlyCancelRate]]:
    """Reservation volume and cancellation rate per check-in month.

    Reservations whose check-in falls outside ``month_starts`` are ignored.
    """
    stats = _collect_month_stats(reservations, month_starts)
    by_month: List[MonthlyReservations] = []
    cancel_rates: List[MonthlyCancelRate] = []
    for month in month_starts:
        key = month_key(month)
        label = month_label(month)
        bucket = stats[key]
        by_month.append(
            MonthlyReservations(
                key=key,
                label=label,
                reserved_count=bucket.reserved_count,
                canceled_count=bucket.canceled_count,
                total_amount=bucket.total_amount,
            )
        )
        cancel_rates.append(
            MonthlyCancelRate(
                key=key,
                label=label,
                total_count=bucket.total_count,
                canceled_count=bucket.canceled_count,
                rate=safe_divide(bucket.canceled_count, bucket.total_count),
            )
        )
    return by_month, cancel_rates


def breakdown_by_source(reservations: Iterable[ReservationRecord]) -> List[SourceBreakdown]:
    counts: Dict[str, List[int]] = {}
    for reservation in reservations:
        current = counts.setdefault(reservation.source, [0, 0])
        current[0] += 1
        if _is_canceled(reservation):
            current[1] += 1
    rows = [
        SourceBreakdown(
            source=source,
            count=count,
            canceled_count=canceled,
            rate=safe_divide(canceled, count),
        )
        for source, (count, canceled) in counts.items()
    ]
    return sorted(rows, key=lambda row: row.count, reverse=True)
