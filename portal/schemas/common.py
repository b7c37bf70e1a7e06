"""공통 Pydantic 응답 스키마 정의.

Common Pydantic schema definitions shared by every entity:
timestamp rendering (no microseconds), generic confirmation messages and
the partial-update base that keeps explicit nulls out of NOT NULL columns.
"""

from datetime import datetime
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, field_serializer, model_validator

from portal.utils.dates import format_timestamp


class TimestampedResponse(BaseModel):
    """생성/수정 일시를 포함한 응답 베이스.

    Response base carrying ``id`` and the ``created``/``updated`` timestamps,
    rendered as UTC ISO strings without microseconds.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int  # 자동 증가 식별자 (Auto-increment identifier)
    created: datetime | None = None  # 생성 일시 (Creation timestamp)
    updated: datetime | None = None  # 수정 일시 (Last modification timestamp)

    @field_serializer("created", "updated")
    def _render_timestamp(self, value: datetime | None) -> str | None:
        return format_timestamp(value)


class MessageResponse(BaseModel):
    """범용 메시지 응답 스키마.

    Generic message response for actions that return a confirmation text,
    e.g. ``{"message": "사업이 삭제되었습니다."}``.
    """

    message: str  # 응답 메시지 (Human-readable confirmation message)


class PartialUpdate(BaseModel):
    """부분 업데이트 요청 베이스.

    Base of every ``*Update`` schema. Omitted fields keep their stored values;
    an explicit ``null`` is only accepted for nullable columns. Fields listed
    in ``not_nullable`` reject ``null`` with a 422.
    """

    not_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_null_for_required_columns(self) -> Self:
        nulls = sorted(
            name for name in self.model_fields_set & self.not_nullable if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"null 값을 허용하지 않는 필드입니다: {', '.join(nulls)}")
        return self

    def changes(self) -> dict[str, Any]:
        """요청에 포함된 필드만 — Only the fields the request actually sent."""
        return self.model_dump(exclude_unset=True)
