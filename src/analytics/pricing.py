from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

from src.models.hotel_operations import CompetitorHotelRecord, WeatherSnapshotRecord
from src.schemas.pricing import (
    NO_WEATHER_SUMMARY,
    CompetitorRate,
    PricingAdjustments,
    PricingDrivers,
    PricingSuggestion,
)
from src.shared.numbers import ZERO, quantize_money, safe_average, to_decimal


RATING_PLACES = Decimal("0.0001")


class PricingPolicy(BaseModel):
    """Coefficients of the rate advisor, expressed as fractions of the base rate."""

    model_config = ConfigDict(frozen=True)

    default_hotel_rating: Decimal = Decimal("4.3")
    rating_weight: Decimal = Decimal("0.04")
    high_occupancy_threshold: float = 0.8
    high_occupancy_adjustment: Decimal = Decimal("0.12")
    low_occupancy_threshold: float = 0.5
    low_occupancy_adjustment: Decimal = Decimal("-0.08")
    rain_threshold: float = 0.6
    rain_adjustment: Decimal = Decimal("-0.06")
    hot_threshold_c: float = 28.0
    hot_adjustment: Decimal = Decimal("0.04")
    cold_threshold_c: float = 16.0
    cold_adjustment: Decimal = Decimal("-0.05")


DEFAULT_POLICY = PricingPolicy()


def usable_rate(raw: object) -> Optional[Decimal]:
    rate = to_decimal(raw)
    if rate is None or rate <= 0:
        return None
    return rate


def average_competitor_rate(competitors: Iterable[CompetitorHotelRecord]) -> Decimal:
    rates: List[Decimal] = []
    for competitor in competitors:
        snapshot = competitor.latest_snapshot
        rate = usable_rate(snapshot.rate) if snapshot else None
        if rate is not None:
            rates.append(rate)
    return safe_average(rates)


def average_competitor_rating(competitors: Iterable[CompetitorHotelRecord]) -> Decimal:
    # Defaults to 0 when nobody is rated, which turns the hotel's own rating
    # into a positive differential. Kept for compatibility with existing reports.
    ratings = [
        rating
        for rating in (to_decimal(competitor.rating) for competitor in competitors)
        if rating is not None and rating > 0
    ]
    return safe_average(ratings)


def occupancy_factor(occupancy_rate: float, policy: PricingPolicy = DEFAULT_POLICY) -> Decimal:
    if occupancy_rate >= policy.high_occupancy_threshold:
        return policy.high_occupancy_adjustment
    if occupancy_rate <= policy.low_occupancy_threshold:
        return policy.low_occupancy_adjustment
    return ZERO


def weather_factor(
    weather: Optional[WeatherSnapshotRecord], policy: PricingPolicy = DEFAULT_POLICY
) -> Decimal:
    """First matching rule wins; rules never stack."""
    if weather is None:
        return ZERO
    if weather.precipitation_chance is not None and weather.precipitation_chance > policy.rain_threshold:
        return policy.rain_adjustment
    if weather.temperature_c is not None:
        if weather.temperature_c > policy.hot_threshold_c:
            return policy.hot_adjustment
        if weather.temperature_c < policy.cold_threshold_c:
            return policy.cold_adjustment
    return ZERO


def suggest_rate(
    hotel_rating: Optional[float],
    occupancy_rate: float,
    competitors: Iterable[CompetitorHotelRecord],
    weather: Optional[WeatherSnapshotRecord],
    policy: PricingPolicy = DEFAULT_POLICY,
) -> PricingSuggestion:
    competitor_list = list(competitors)
    base_rate = average_competitor_rate(competitor_list)
    competitor_rating = average_competitor_rating(competitor_list)

    own_rating = to_decimal(hotel_rating)
    if own_rating is None:
        own_rating = policy.default_hotel_rating
    rating_delta = own_rating - competitor_rating

    rating_adjustment = base_rate * rating_delta * policy.rating_weight
    occupancy_adjustment = base_rate * occupancy_factor(occupancy_rate, policy)
    weather_adjustment = base_rate * weather_factor(weather, policy)
    suggested = max(
        ZERO, base_rate + rating_adjustment + occupancy_adjustment + weather_adjustment
    )

    return PricingSuggestion(
        base_rate=quantize_money(base_rate),
        suggested_rate=quantize_money(suggested),
        average_competitor_rating=competitor_rating.quantize(RATING_PLACES),
        drivers=PricingDrivers(
            rating_delta=rating_delta.quantize(RATING_PLACES),
            occupancy_rate=occupancy_rate,
            weather_summary=(weather.summary if weather and weather.summary else NO_WEATHER_SUMMARY),
        ),
        adjustments=PricingAdjustments(
            rating=quantize_money(rating_adjustment),
            occupancy=quantize_money(occupancy_adjustment),
            weather=quantize_money(weather_adjustment),
        ),
        competitors=[_to_competitor_rate(competitor) for competitor in competitor_list],
    )


def _to_competitor_rate(competitor: CompetitorHotelRecord) -> CompetitorRate:
    snapshot = competitor.latest_snapshot
    raw_rate = to_decimal(snapshot.rate) if snapshot else None
    return CompetitorRate(
        name=competitor.name,
        rating=competitor.rating,
        distance_km=competitor.distance_km,
        last_rate=raw_rate if raw_rate is not None else ZERO,
    )
