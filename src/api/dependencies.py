from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Query

from src.models.hotel_operations import HotelRecord
from src.repositories.finance_repository import FinanceRepository
from src.repositories.hotel_repository import HotelRepository
from src.repositories.integrations_repository import IntegrationsRepository
from src.repositories.market_repository import MarketRepository
from src.repositories.reservations_repository import ReservationsRepository
from src.repositories.rooms_repository import RoomsRepository
from src.services.dashboard_service import DashboardService
from src.services.hotel_directory_service import HotelDirectoryService
from src.services.integrations_service import IntegrationsService
from src.services.pricing_service import PricingService
from src.services.reports_service import ReportsService
from src.shared.time import parse_as_of


@lru_cache
def get_hotel_repository() -> HotelRepository:
    return HotelRepository()


@lru_cache
def get_rooms_repository() -> RoomsRepository:
    return RoomsRepository()


@lru_cache
def get_finance_repository() -> FinanceRepository:
    return FinanceRepository()


@lru_cache
def get_reservations_repository() -> ReservationsRepository:
    return ReservationsRepository()


@lru_cache
def get_market_repository() -> MarketRepository:
    return MarketRepository()


@lru_cache
def get_integrations_repository() -> IntegrationsRepository:
    return IntegrationsRepository()


def get_hotel_directory_service() -> HotelDirectoryService:
    return HotelDirectoryService(repository=get_hotel_repository())


def get_reports_service() -> ReportsService:
    return ReportsService(
        rooms_repository=get_rooms_repository(),
        finance_repository=get_finance_repository(),
    )


def get_pricing_service() -> PricingService:
    return PricingService(
        hotel_repository=get_hotel_repository(),
        market_repository=get_market_repository(),
        reports_service=get_reports_service(),
    )


def get_integrations_service() -> IntegrationsService:
    return IntegrationsService(repository=get_integrations_repository())


def get_dashboard_service() -> DashboardService:
    return DashboardService(
        reports_service=get_reports_service(),
        pricing_service=get_pricing_service(),
        integrations_service=get_integrations_service(),
        reservations_repository=get_reservations_repository(),
        rooms_repository=get_rooms_repository(),
    )


def get_as_of(as_of: Optional[str] = Query(default=None, alias="as_of")) -> Optional[datetime]:
    # Parsed before the hotel is resolved so bad input never reaches the store.
    if as_of is None:
        return None
    return parse_as_of(as_of)


def get_current_hotel(
    hotel_id: Optional[str] = Query(default=None, alias="hotel_id"),
    directory: HotelDirectoryService = Depends(get_hotel_directory_service),
) -> HotelRecord:
    return directory.resolve_hotel(hotel_id)
