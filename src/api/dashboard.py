from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends

from src.api.dependencies import get_as_of, get_current_hotel, get_dashboard_service
from src.models.hotel_operations import HotelRecord
from src.schemas.dashboard import DashboardSnapshot
from src.services.dashboard_service import DashboardService
from src.shared.response import ResponseEnvelope, build_meta


router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("")
def dashboard_snapshot(
    as_of: Optional[datetime] = Depends(get_as_of),
    hotel: HotelRecord = Depends(get_current_hotel),
    service: DashboardService = Depends(get_dashboard_service),
) -> ResponseEnvelope[DashboardSnapshot]:
    data = service.get_snapshot(hotel, as_of)
    meta = build_meta(source="dashboard", time_window="12m", as_of=as_of, hotel_id=hotel.id)
    return ResponseEnvelope(data=data, meta=meta)
