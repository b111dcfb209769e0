"""글라시 공통 베이스 모델입니다. / Common base model for Glassy."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class GlassyBaseModel(BaseModel):
    """불변 공통 베이스 모델입니다. / Immutable common base model."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=True,
        validate_assignment=True,
    )

    def model_dump_jsonable(self, **kwargs: Any) -> dict[str, Any]:
        """JSON 직렬화 가능한 덤프입니다. / Dump JSON-serializable dict."""

        data = self.model_dump(mode="json", **kwargs)
        return data
