"""환경 및 설정 로더입니다. / Environment and configuration loader."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import Field, SecretStr, ValidationError

from .base import GlassyBaseModel

STORMGLASS_POINT_URL = "https://api.stormglass.io/v2/weather/point"
API_KEY_ENV = "STORMGLASS_API_KEY"
DEFAULT_CONFIG_PATH = Path("glassy.yaml")


class StormglassSettings(GlassyBaseModel):
    """스톰글라스 API 설정입니다. / Stormglass API settings."""

    base_url: str = STORMGLASS_POINT_URL
    api_key: str | None = None
    timeout_seconds: float | None = Field(default=None, gt=0)


class StormglassSecret(GlassyBaseModel):
    """API 키 시크릿 래퍼입니다. / API key secret wrapper."""

    api_key: SecretStr | None = None


class AppConfig(GlassyBaseModel):
    """애플리케이션 전체 설정입니다. / Application wide configuration."""

    stormglass: StormglassSettings = Field(default_factory=StormglassSettings)
    log_level: str = "INFO"
    favorite_spots: List[str] = Field(default_factory=list)


def load_yaml_config(path: Path) -> Dict[str, Any]:
    """YAML 설정을 읽습니다. / Load YAML configuration."""

    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping")
    return data


def load_secret_from_env() -> StormglassSecret:
    """환경 변수에서 시크릿을 적재합니다. / Load secret from environment."""

    raw_value = os.getenv(API_KEY_ENV)
    secret = SecretStr(raw_value) if raw_value else None
    return StormglassSecret(api_key=secret)


def merge_config(raw: Dict[str, Any], secret: StormglassSecret) -> Dict[str, Any]:
    """환경과 파일 설정을 병합합니다. / Merge file config with secret."""

    if secret.api_key is None:
        return raw
    stormglass = dict(raw.get("stormglass") or {})
    stormglass["api_key"] = secret.api_key.get_secret_value()
    merged = dict(raw)
    merged["stormglass"] = stormglass
    return merged


def load_app_config(path: Path | None = None) -> AppConfig:
    """최종 앱 설정을 반환합니다. / Return final app configuration.

    An explicit path must exist; the default ``glassy.yaml`` is optional.
    """

    if path is not None:
        raw = load_yaml_config(path)
    elif DEFAULT_CONFIG_PATH.exists():
        raw = load_yaml_config(DEFAULT_CONFIG_PATH)
    else:
        raw = {}
    merged = merge_config(raw, load_secret_from_env())
    try:
        return AppConfig.model_validate(merged)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
