from __future__ import annotations

from fastapi import APIRouter, Depends

from src.api.dependencies import get_current_hotel, get_pricing_service
from src.models.hotel_operations import HotelRecord
from src.schemas.pricing import PricingSuggestion
from src.services.pricing_service import PricingService
from src.shared.response import ResponseEnvelope, build_meta


router = APIRouter(prefix="/pricing", tags=["pricing"])


@router.get("/suggestion")
def pricing_suggestion(
    hotel: HotelRecord = Depends(get_current_hotel),
    service: PricingService = Depends(get_pricing_service),
) -> ResponseEnvelope[PricingSuggestion]:
    data = service.get_pricing_suggestion(hotel.id)
    meta = build_meta(
        source="competitor_hotels,competitor_rate_snapshots,weather_snapshots,rooms",
        time_window="latest",
        hotel_id=hotel.id,
    )
    return ResponseEnvelope(data=data, meta=meta)
