"""단위 변환 상수입니다. / Unit conversion constants."""

from __future__ import annotations

FEET_PER_METER = 3.28084
MPH_PER_METER_PER_SECOND = 2.23694


def meters_to_feet(meters: float) -> float:
    """미터를 피트로 변환합니다. / Convert meters to feet."""

    return meters * FEET_PER_METER


def mps_to_mph(speed: float) -> float:
    """m/s를 mph로 변환합니다. / Convert m/s to mph."""

    return speed * MPH_PER_METER_PER_SECOND


def celsius_to_fahrenheit(celsius: float) -> float:
    """섭씨를 화씨로 변환합니다. / Convert Celsius to Fahrenheit."""

    return celsius * 9 / 5 + 32
