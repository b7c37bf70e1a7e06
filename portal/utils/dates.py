"""날짜 표시 형식 유틸리티.

Date rendering helpers shared by the response schemas.
"""

from datetime import date, datetime, timezone

# 날짜 미정 표시값 — Placeholder for an unknown date
EMPTY_DATE: str = "0000-00-00"


def format_date(value: str | date | datetime | None) -> str:
    """날짜를 YYYY-MM-DD 문자열로 변환합니다.

    Render a date as ``YYYY-MM-DD``; empty values become ``0000-00-00``.
    Strings are cut to their date part, so ``2025-01-31T09:00:00`` works too.
    """
    if not value:
        return EMPTY_DATE
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, date):
        return value.isoformat()
    return value[:10]


def format_timestamp(value: datetime | None) -> str | None:
    """마이크로초를 제거한 UTC ISO 타임스탬프 — UTC ISO timestamp without microseconds."""
    if value is None:
        return None
    # 타임존 정보가 없는 값은 UTC로 간주 (Naive values are stored as UTC)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
