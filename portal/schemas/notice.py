"""공지사항 Pydantic 요청/응답 스키마 정의.

Notice Pydantic request/response schema definitions.
"""

from pydantic import BaseModel

from portal.schemas.common import PartialUpdate, TimestampedResponse


class NoticeCreate(BaseModel):
    """공지사항 생성 요청 스키마.

    Notice creation request schema.

    Attributes:
        title: 공지 제목 (Notice title)
        content: 공지 내용 (Notice body)
        writer: 작성자 (Author name)
        level: 대상 등급 목록 (Comma-separated partner levels, or ``ALL``)
    """

    title: str
    content: str | None = None
    writer: str | None = None
    level: str = "ALL"  # 대상 등급 — 예: "GOLD,PLATINUM" (Target levels)


class NoticeUpdate(PartialUpdate):
    """공지사항 수정 요청 스키마 (부분 업데이트)."""

    title: str | None = None
    content: str | None = None
    writer: str | None = None
    level: str | None = None


class NoticeResponse(TimestampedResponse):
    """공지사항 응답 스키마 — Notice response schema."""

    title: str | None = None
    content: str | None = None
    writer: str | None = None
    level: str | None = None
