"""서핑 등급 분류입니다. / Surf rating classification."""

from __future__ import annotations

import math
from enum import Enum
from typing import List


class Rating(str, Enum):
    """서핑 품질 등급입니다. / Surf quality rating."""

    EPIC = "Epic"
    GOOD = "Good"
    FAIR = "Fair"
    FLAT = "Flat"


COMPASS_POINTS: List[str] = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]
OFFSHORE_MIN_DEGREES = 0.0
OFFSHORE_MAX_DEGREES = 135.0


def classify_rating(wave_height_feet: float, wind_speed_mph: float) -> Rating:
    """파고와 풍속으로 등급을 정합니다. / Classify by wave height and wind.

    Rules are evaluated in order and the first match wins.
    """

    if 4 <= wave_height_feet <= 8 and wind_speed_mph < 10:
        return Rating.EPIC
    if 2 <= wave_height_feet <= 6:
        return Rating.GOOD
    if wave_height_feet >= 1:
        return Rating.FAIR
    return Rating.FLAT


def compass_direction(degrees: float) -> str:
    """각도를 8방위로 변환합니다. / Convert degrees to 8-point compass."""

    normalized = degrees % 360
    index = math.floor((normalized + 22.5) / 45) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


def is_offshore(degrees: float) -> bool:
    """오프쇼어 바람인지 판단합니다. / Whether the wind is offshore.

    Tuned for the Southern California coastline, where NE to E winds blow
    offshore. Negative inputs are not wrapped.
    """

    return OFFSHORE_MIN_DEGREES <= degrees <= OFFSHORE_MAX_DEGREES
