"""공통 컬럼 믹스인 — 생성/수정/삭제 타임스탬프.

Shared column mixin for created/updated/removed timestamps.
Every portal table uses soft delete: a row is "deleted" by setting ``removed``
and is kept in the table.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    """현재 UTC 시각 — Current UTC time."""
    return datetime.now(timezone.utc)


class TimestampMixin:
    """생성/수정/삭제 타임스탬프 믹스인.

    Timestamp mixin providing ``created``, ``updated`` and the soft-delete
    marker ``removed`` (NULL while the row is live).
    """

    # 생성 일시 — Record creation timestamp (UTC)
    created: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )
    # 삭제 일시 — Soft-delete marker, NULL for live rows
    removed: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True, default=None)
