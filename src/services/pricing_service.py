from __future__ import annotations

import logging

from src.analytics.pricing import DEFAULT_POLICY, PricingPolicy, suggest_rate
from src.repositories.hotel_repository import HotelRepository
from src.repositories.market_repository import MarketRepository
from src.schemas.pricing import PricingSuggestion
from src.services.reports_service import ReportsService


logger = logging.getLogger(__name__)


class PricingService:
    def __init__(
        self,
        hotel_repository: HotelRepository,
        market_repository: MarketRepository,
        reports_service: ReportsService,
        policy: PricingPolicy = DEFAULT_POLICY,
    ) -> None:
        self.hotel_repository = hotel_repository
        self.market_repository = market_repository
        self.reports_service = reports_service
        self.policy = policy

    def get_pricing_suggestion(self, hotel_id: str) -> PricingSuggestion:
        hotel = self.hotel_repository.get_hotel(hotel_id)
        occupancy = self.reports_service.get_occupancy_report(hotel_id)
        competitors = self.market_repository.list_competitors_with_latest_rate(hotel_id)
        weather = self.market_repository.get_latest_weather(hotel_id)

        suggestion = suggest_rate(
            hotel_rating=hotel.rating if hotel else None,
            occupancy_rate=occupancy.occupancy_rate,
            competitors=competitors,
            weather=weather,
            policy=self.policy,
        )
        logger.debug(
            "pricing hotel=%s competitors=%s base=%s suggested=%s",
            hotel_id,
            len(competitors),
            suggestion.base_rate,
            suggestion.suggested_rate,
        )
        return suggestion
