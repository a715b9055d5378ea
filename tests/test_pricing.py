from __future__ import annotations

from decimal import Decimal

import pytest

from factories import make_competitor, make_weather
from src.analytics.pricing import (
    PricingPolicy,
    average_competitor_rate,
    suggest_rate,
    weather_factor,
)


def test_reference_scenario_with_zero_rate_excluded():
    competitors = [
        make_competitor("Alpha", rate="400", rating=4.0),
        make_competitor("Beta", rate=420, rating=4.0),
        make_competitor("Gamma", rate=0),
    ]

    suggestion = suggest_rate(
        hotel_rating=4.8, occupancy_rate=0.85, competitors=competitors, weather=None
    )

    assert suggestion.base_rate == Decimal("410")
    assert suggestion.drivers.rating_delta == Decimal("0.8")
    assert suggestion.adjustments.rating == Decimal("13.12")
    assert suggestion.adjustments.occupancy == Decimal("49.20")
    assert suggestion.adjustments.weather == Decimal("0")
    assert suggestion.suggested_rate == Decimal("472.32")
    assert suggestion.drivers.occupancy_rate == 0.85
    assert suggestion.drivers.weather_summary == "no data"
    assert [item.last_rate for item in suggestion.competitors] == [
        Decimal("400"),
        Decimal("420"),
        Decimal("0"),
    ]


def test_no_competitors_degrades_to_zero():
    suggestion = suggest_rate(
        hotel_rating=None, occupancy_rate=0.9, competitors=[], weather=make_weather(35.0, 0.0)
    )

    assert suggestion.base_rate == Decimal("0")
    assert suggestion.suggested_rate == Decimal("0")
    assert suggestion.adjustments.rating == Decimal("0")
    # Default hotel rating against the default competitor average of zero.
    assert suggestion.drivers.rating_delta == Decimal("4.3")
    assert suggestion.competitors == []


@pytest.mark.parametrize("rates", [[0, -50], ["abc", None], [-1]])
def test_unusable_rates_never_produce_negative_suggestion(rates):
    competitors = [make_competitor(f"c{i}", rate=rate, rating=4.9) for i, rate in enumerate(rates)]

    suggestion = suggest_rate(
        hotel_rating=1.0, occupancy_rate=0.1, competitors=competitors, weather=make_weather(5.0, 0.9)
    )

    assert suggestion.base_rate == Decimal("0")
    assert suggestion.suggested_rate >= 0
    assert len(suggestion.competitors) == len(rates)


def test_suggestion_is_clamped_at_zero():
    policy = PricingPolicy(rating_weight=Decimal("1"))
    competitors = [make_competitor("Alpha", rate=100, rating=5.0)]

    suggestion = suggest_rate(
        hotel_rating=2.0, occupancy_rate=0.2, competitors=competitors, weather=None, policy=policy
    )

    assert suggestion.adjustments.rating == Decimal("-300.00")
    assert suggestion.suggested_rate == Decimal("0")


@pytest.mark.parametrize(
    "occupancy_rate, expected",
    [
        (0.8, Decimal("12.00")),
        (1.0, Decimal("12.00")),
        (0.79, Decimal("0.00")),
        (0.51, Decimal("0.00")),
        (0.5, Decimal("-8.00")),
        (0.0, Decimal("-8.00")),
    ],
)
def test_occupancy_thresholds(occupancy_rate, expected):
    competitors = [make_competitor("Alpha", rate=100, rating=4.3)]

    suggestion = suggest_rate(
        hotel_rating=4.3, occupancy_rate=occupancy_rate, competitors=competitors, weather=None
    )

    assert suggestion.adjustments.occupancy == expected


@pytest.mark.parametrize(
    "temperature, precipitation, expected",
    [
        (35.0, 0.7, Decimal("-0.06")),
        (35.0, 0.6, Decimal("0.04")),
        (10.0, None, Decimal("-0.05")),
        (0.0, 0.0, Decimal("-0.05")),
        (28.0, 0.2, Decimal("0")),
        (16.0, 0.2, Decimal("0")),
        (None, None, Decimal("0")),
    ],
)
def test_weather_rules_first_match_wins(temperature, precipitation, expected):
    assert weather_factor(make_weather(temperature, precipitation)) == expected


def test_weather_summary_is_exposed_as_driver():
    competitors = [make_competitor("Alpha", rate=200, rating=4.3)]

    suggestion = suggest_rate(
        hotel_rating=4.3,
        occupancy_rate=0.6,
        competitors=competitors,
        weather=make_weather(30.0, 0.1, summary="Sunny"),
    )

    assert suggestion.drivers.weather_summary == "Sunny"
    assert suggestion.adjustments.weather == Decimal("8.00")
    assert suggestion.suggested_rate == Decimal("208.00")


def test_unrated_competitors_fall_back_to_zero_average():
    competitors = [make_competitor("Alpha", rate=100), make_competitor("Beta", rate=300, rating=0)]

    suggestion = suggest_rate(hotel_rating=4.5, occupancy_rate=0.6, competitors=competitors, weather=None)

    assert suggestion.average_competitor_rating == Decimal("0")
    assert suggestion.drivers.rating_delta == Decimal("4.5")
    assert suggestion.adjustments.rating == Decimal("36.00")


def test_only_latest_snapshot_counts():
    competitor = make_competitor("Alpha", rate=150)
    older = competitor.snapshots[0].model_copy(update={"rate": 999})
    competitor = competitor.model_copy(update={"snapshots": [competitor.snapshots[0], older]})

    assert average_competitor_rate([competitor]) == Decimal("150")


def test_repeated_calls_return_identical_results():
    competitors = [make_competitor("Alpha", rate=333, rating=4.1)]
    weather = make_weather(12.0, 0.2)

    first = suggest_rate(4.4, 0.7, competitors, weather)
    second = suggest_rate(4.4, 0.7, competitors, weather)

    assert first == second
