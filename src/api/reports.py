from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends

from src.analytics.profit import rank_groups
from src.api.dependencies import get_as_of, get_current_hotel, get_reports_service
from src.models.hotel_operations import HotelRecord
from src.schemas.reports import (
    MaintenanceSummary,
    OccupancyReport,
    ProfitBreakdown,
    RevenueSummary,
)
from src.services.reports_service import ReportsService
from src.shared.response import ResponseEnvelope, build_meta


router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/occupancy")
def occupancy_report(
    hotel: HotelRecord = Depends(get_current_hotel),
    service: ReportsService = Depends(get_reports_service),
) -> ResponseEnvelope[OccupancyReport]:
    data = service.get_occupancy_report(hotel.id)
    meta = build_meta(source="rooms,room_issues", time_window="now", hotel_id=hotel.id)
    return ResponseEnvelope(data=data, meta=meta)


@router.get("/revenue")
def revenue_summary(
    as_of: Optional[datetime] = Depends(get_as_of),
    hotel: HotelRecord = Depends(get_current_hotel),
    service: ReportsService = Depends(get_reports_service),
) -> ResponseEnvelope[RevenueSummary]:
    data = service.get_revenue_summary(hotel.id, as_of)
    meta = build_meta(
        source="financial_entries",
        time_window="day,week,month,quarter,year",
        as_of=as_of,
        hotel_id=hotel.id,
    )
    return ResponseEnvelope(data=data, meta=meta)


@router.get("/profit")
def profit_breakdown(
    hotel: HotelRecord = Depends(get_current_hotel),
    service: ReportsService = Depends(get_reports_service),
) -> ResponseEnvelope[ProfitBreakdown]:
    breakdown = service.get_profit_breakdown(hotel.id)
    data = ProfitBreakdown(
        by_center=rank_groups(breakdown.by_center),
        by_room=rank_groups(breakdown.by_room),
        by_package=rank_groups(breakdown.by_package),
    )
    meta = build_meta(source="financial_entries", time_window="lifetime", hotel_id=hotel.id)
    return ResponseEnvelope(data=data, meta=meta)


@router.get("/maintenance")
def maintenance_summary(
    as_of: Optional[datetime] = Depends(get_as_of),
    hotel: HotelRecord = Depends(get_current_hotel),
    service: ReportsService = Depends(get_reports_service),
) -> ResponseEnvelope[MaintenanceSummary]:
    data = service.get_maintenance_summary(hotel.id, as_of)
    meta = build_meta(
        source="room_issues,maintenance_vendors",
        time_window="120d",
        as_of=as_of,
        hotel_id=hotel.id,
    )
    return ResponseEnvelope(data=data, meta=meta)
