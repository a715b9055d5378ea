from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from src.analytics.profit import rank_groups
from src.analytics.reservations import breakdown_by_source, bucket_reservations_by_month
from src.core.config import get_settings
from src.models.hotel_operations import HotelRecord
from src.repositories.reservations_repository import ReservationsRepository
from src.repositories.rooms_repository import RoomsRepository
from src.schemas.dashboard import DashboardAlerts, DashboardSnapshot, HotelSummary
from src.schemas.reports import ProfitBreakdown
from src.services.integrations_service import IntegrationsService
from src.services.pricing_service import PricingService
from src.services.reports_service import ReportsService
from src.shared.time import month_end, trailing_month_starts


logger = logging.getLogger(__name__)

TRAILING_MONTHS = 12


class DashboardService:
    def __init__(
        self,
        reports_service: ReportsService,
        pricing_service: PricingService,
        integrations_service: IntegrationsService,
        reservations_repository: ReservationsRepository,
        rooms_repository: RoomsRepository,
    ) -> None:
        self.reports_service = reports_service
        self.pricing_service = pricing_service
        self.integrations_service = integrations_service
        self.reservations_repository = reservations_repository
        self.rooms_repository = rooms_repository
        self.settings = get_settings()

    def get_snapshot(self, hotel: HotelRecord, as_of: Optional[datetime] = None) -> DashboardSnapshot:
        now = as_of or datetime.now()
        month_starts = trailing_month_starts(now, TRAILING_MONTHS)
        range_start = datetime.combine(month_starts[0], datetime.min.time())
        range_end = month_end(month_starts[-1])
        hotel_id = hotel.id

        tasks: Dict[str, Callable[[], Any]] = {
            "occupancy": lambda: self.reports_service.get_occupancy_report(hotel_id),
            "revenue": lambda: self.reports_service.get_revenue_summary(hotel_id, now),
            "profit": lambda: self.reports_service.get_profit_breakdown(hotel_id),
            "pricing": lambda: self.pricing_service.get_pricing_suggestion(hotel_id),
            "channels": lambda: self.integrations_service.get_channel_sync_status(hotel_id),
            "reservations": lambda: self.reservations_repository.list_by_check_in(
                hotel_id, range_start, range_end
            ),
            "open_maintenance": lambda: self.rooms_repository.count_open_issues(hotel_id),
            "pending_no_show": lambda: self.reservations_repository.count_pending_no_shows(hotel_id),
            "pending_notifications": lambda: self.integrations_service.count_queued_notifications(
                hotel_id
            ),
        }
        results = self._run_all(tasks)

        reservations = results["reservations"]
        by_month, cancel_rates = bucket_reservations_by_month(reservations, month_starts)
        profit: ProfitBreakdown = results["profit"]

        return DashboardSnapshot(
            hotel=HotelSummary(id=hotel.id, name=hotel.name, rating=hotel.rating),
            occupancy=results["occupancy"],
            revenue=results["revenue"],
            profit=ProfitBreakdown(
                by_center=rank_groups(profit.by_center),
                by_room=rank_groups(profit.by_room),
                by_package=rank_groups(profit.by_package),
            ),
            pricing=results["pricing"],
            channels=results["channels"],
            reservations_by_month=by_month,
            cancel_rate_by_month=cancel_rates,
            reservations_by_source=breakdown_by_source(reservations),
            alerts=DashboardAlerts(
                open_maintenance=results["open_maintenance"],
                pending_no_show=results["pending_no_show"],
                pending_notifications=results["pending_notifications"],
            ),
        )

    def _run_all(self, tasks: Dict[str, Callable[[], Any]]) -> Dict[str, Any]:
        """Run independent reads concurrently and wait for every one of them.

        The first failure (in task order) is re-raised once all tasks have finished.
        """
        max_workers = min(self.settings.dashboard_max_workers, len(tasks))
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="dashboard") as executor:
            futures: Dict[str, Future] = {name: executor.submit(task) for name, task in tasks.items()}
        results: Dict[str, Any] = {}
        for name, future in futures.items():
            exc = future.exception()
            if exc is not None:
                logger.warning("dashboard task %s failed: %s", name, exc)
                raise exc
            results[name] = future.result()
        return results
