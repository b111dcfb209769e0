"""스톰글라스 컨디션 클라이언트입니다. / Stormglass conditions client."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict

import httpx
from pydantic import ValidationError

from ..config import StormglassSettings
from ..spots.catalog import Location
from .models import (
    STORMGLASS_PARAMS,
    ConditionsRecord,
    RawObservation,
    StormglassResponse,
)
from .units import celsius_to_fahrenheit, meters_to_feet, mps_to_mph

LOGGER = logging.getLogger("glassy.conditions.client")


class ConditionsError(Exception):
    """컨디션 조회 오류입니다. / Conditions fetch error."""


class BadURLError(ConditionsError):
    """요청 URL 구성 오류입니다. / Request URL could not be built."""


class ServerError(ConditionsError):
    """비정상 HTTP 상태 오류입니다. / Non-success HTTP status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Server responded with HTTP {status_code}")
        self.status_code = status_code


class ParseError(ConditionsError):
    """응답 파싱 오류입니다. / Response body could not be parsed."""


class NoDataError(ConditionsError):
    """시간별 데이터 없음 오류입니다. / Response had no hourly data."""


class NetworkError(ConditionsError):
    """전송 계층 오류입니다. / Transport level failure."""


class ConditionsClient:
    """스팟 단위 컨디션 클라이언트입니다. / Per-spot conditions client.

    Each call performs exactly one HTTP request and keeps no state between
    calls, so it may be awaited concurrently for many spots.
    """

    def __init__(self, settings: StormglassSettings | None = None) -> None:
        self.settings = settings or StormglassSettings()

    async def fetch_conditions(self, location: Location) -> ConditionsRecord:
        """스팟 컨디션을 조회합니다. / Fetch conditions for a spot."""

        self.validate_location(location)
        params = self.build_params(location)
        headers = self.build_headers()
        client_kwargs: Dict[str, Any] = {}
        if self.settings.timeout_seconds is not None:
            client_kwargs["timeout"] = httpx.Timeout(self.settings.timeout_seconds)
        LOGGER.debug("conditions_request", extra={"spot": location.id})
        try:
            async with httpx.AsyncClient(**client_kwargs) as client:
                response = await client.get(
                    self.settings.base_url,
                    params=params,
                    headers=headers,
                )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise BadURLError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise NetworkError(str(exc)) from exc
        if not response.is_success:
            raise ServerError(response.status_code)
        return self.parse_payload(response.content)

    def validate_location(self, location: Location) -> None:
        """좌표를 검증합니다. / Ensure coordinates are usable."""

        coordinates = (location.latitude, location.longitude)
        if not all(math.isfinite(value) for value in coordinates):
            raise BadURLError(f"Invalid coordinates for {location.id}")

    def build_params(self, location: Location) -> Dict[str, str]:
        """요청 파라미터를 구성합니다. / Build request parameters."""

        return {
            "lat": str(location.latitude),
            "lng": str(location.longitude),
            "params": ",".join(STORMGLASS_PARAMS),
        }

    def build_headers(self) -> Dict[str, str]:
        """요청 헤더를 작성합니다. / Build request headers."""

        headers: Dict[str, str] = {"accept": "application/json"}
        if self.settings.api_key:
            headers["authorization"] = self.settings.api_key
        return headers

    def parse_payload(self, body: bytes) -> ConditionsRecord:
        """응답 본문을 레코드로 변환합니다. / Transform body into a record."""

        try:
            payload = StormglassResponse.model_validate_json(body)
        except ValidationError as exc:
            raise ParseError(str(exc)) from exc
        if not payload.hours:
            raise NoDataError("Response contained no hourly data")
        try:
            return normalize_observation(payload.hours[0])
        except ValidationError as exc:
            raise ParseError(str(exc)) from exc


def normalize_observation(raw: RawObservation) -> ConditionsRecord:
    """원시 관측값을 표시 단위로 변환합니다. / Convert raw units for display."""

    return ConditionsRecord(
        wave_height_feet=meters_to_feet(raw.wave_height.value),
        wave_period_seconds=raw.wave_period.value,
        wave_direction_degrees=raw.wave_direction.value,
        wind_speed_mph=mps_to_mph(raw.wind_speed.value),
        wind_direction_degrees=raw.wind_direction.value,
        water_temp_fahrenheit=celsius_to_fahrenheit(raw.water_temperature.value),
    )
