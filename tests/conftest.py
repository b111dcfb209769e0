"""공용 테스트 픽스처입니다. / Shared test fixtures."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import pytest

from glassy.spots.catalog import SAMPLE_SPOTS, Location

PayloadFactory = Callable[..., Dict[str, Any]]


def build_hour(
    wave_height: Optional[float] = 1.5,
    wave_period: Optional[float] = 12.0,
    wave_direction: Optional[float] = 270.0,
    wind_speed: Optional[float] = 3.0,
    wind_direction: Optional[float] = 45.0,
    water_temperature: Optional[float] = 18.0,
) -> Dict[str, Any]:
    """시간별 항목을 만듭니다. / Build one hourly entry."""

    return {
        "time": "2025-10-15T12:00:00+00:00",
        "waveHeight": {"noaa": wave_height, "sg": 9.9},
        "wavePeriod": {"noaa": wave_period},
        "waveDirection": {"noaa": wave_direction},
        "windSpeed": {"noaa": wind_speed},
        "windDirection": {"noaa": wind_direction},
        "waterTemperature": {"noaa": water_temperature},
    }


@pytest.fixture
def stormglass_payload() -> PayloadFactory:
    """스톰글라스 응답 생성기입니다. / Stormglass response factory."""

    def _factory(**readings: Optional[float]) -> Dict[str, Any]:
        return {
            "hours": [
                build_hour(**readings),
                build_hour(wave_height=0.1, wind_speed=20.0),
            ],
            "meta": {"cost": 1, "dailyQuota": 10},
        }

    return _factory


@pytest.fixture
def spot() -> Location:
    """첫 번째 샘플 스팟입니다. / First sample spot."""

    return SAMPLE_SPOTS[0]
