"""정규화된 서핑 컨디션 모델입니다. / Normalized surf condition models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import ConfigDict, Field, computed_field

from ..base import GlassyBaseModel
from .rating import classify_rating, compass_direction, is_offshore

STORMGLASS_PARAMS: List[str] = [
    "waveHeight",
    "wavePeriod",
    "waveDirection",
    "windSpeed",
    "windDirection",
    "waterTemperature",
]


class DataPoint(GlassyBaseModel):
    """단일 출처 측정값입니다. / Single-source reading."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    noaa: Optional[float] = Field(default=None, allow_inf_nan=False)

    @property
    def value(self) -> float:
        """누락 값을 0으로 취급합니다. / Missing reading reads as zero."""

        return self.noaa if self.noaa is not None else 0.0


class RawObservation(GlassyBaseModel):
    """시간별 원시 관측값입니다. / Raw hourly observation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    wave_height: DataPoint = Field(alias="waveHeight")
    wave_period: DataPoint = Field(alias="wavePeriod")
    wave_direction: DataPoint = Field(alias="waveDirection")
    wind_speed: DataPoint = Field(alias="windSpeed")
    wind_direction: DataPoint = Field(alias="windDirection")
    water_temperature: DataPoint = Field(alias="waterTemperature")


class StormglassResponse(GlassyBaseModel):
    """스톰글라스 응답 본문입니다. / Stormglass response body."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    hours: List[RawObservation]


class ConditionsRecord(GlassyBaseModel):
    """표시용 컨디션 레코드입니다. / Display-ready conditions record."""

    model_config = ConfigDict(allow_inf_nan=False)

    wave_height_feet: float
    wave_period_seconds: float
    wave_direction_degrees: float
    wind_speed_mph: float
    wind_direction_degrees: float
    water_temp_fahrenheit: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def rating(self) -> str:
        """서핑 등급입니다. / Surf rating."""

        return classify_rating(self.wave_height_feet, self.wind_speed_mph).value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def wind_direction_compass(self) -> str:
        """풍향 8방위입니다. / Wind direction compass point."""

        return compass_direction(self.wind_direction_degrees)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_offshore(self) -> bool:
        """오프쇼어 여부입니다. / Whether wind is offshore."""

        return is_offshore(self.wind_direction_degrees)

    @property
    def wave_height_formatted(self) -> str:
        """파고 표시 문자열입니다. / Wave height for display."""

        return f"{self.wave_height_feet:.1f} ft"

    @property
    def wind_speed_formatted(self) -> str:
        """풍속 표시 문자열입니다. / Wind speed for display."""

        return f"{self.wind_speed_mph:.0f} mph"

    @property
    def wave_period_formatted(self) -> str:
        """주기 표시 문자열입니다. / Wave period for display."""

        return f"{int(self.wave_period_seconds)}s"

    @property
    def water_temp_formatted(self) -> str:
        """수온 표시 문자열입니다. / Water temperature for display."""

        return f"{int(self.water_temp_fahrenheit)}°F"

    @property
    def wave_direction_formatted(self) -> str:
        """스웰 방향 표시 문자열입니다. / Swell direction for display."""

        return f"{int(self.wave_direction_degrees)}°"
