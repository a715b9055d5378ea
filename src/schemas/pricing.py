from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from src.shared.base import BaseSchema


NO_WEATHER_SUMMARY = "no data"


class PricingDrivers(BaseSchema):
    rating_delta: Decimal
    occupancy_rate: float
    weather_summary: str = NO_WEATHER_SUMMARY


class PricingAdjustments(BaseSchema):
    rating: Decimal
    occupancy: Decimal
    weather: Decimal


class CompetitorRate(BaseSchema):
    name: str
    rating: Optional[float] = None
    distance_km: Optional[float] = None
    last_rate: Decimal


class PricingSuggestion(BaseSchema):
    base_rate: Decimal
    suggested_rate: Decimal = Field(..., ge=0)
    average_competitor_rating: Decimal
    drivers: PricingDrivers
    adjustments: PricingAdjustments
    competitors: List[CompetitorRate] = Field(default_factory=list)
