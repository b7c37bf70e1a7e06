"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Every list endpoint returns a ``Page`` serialized as
``{items, currentPage, totalItems, totalPages}``.
"""

import math
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


class Page(BaseModel):
    """페이지네이션 결과 모델.

    Pagination result model. Field names are snake_case in Python and
    camelCase on the wire.

    Attributes:
        items: 현재 페이지 항목 목록 (Items for the current page)
        current_page: 현재 페이지 번호, 1부터 시작 (Current page, 1-indexed)
        total_items: 전체 항목 수 (Total count across all pages)
        total_pages: 전체 페이지 수 (ceil(total_items / per_page), 0 when empty)
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[Any]
    current_page: int
    total_items: int
    total_pages: int


def total_pages(total_items: int, per_page: int) -> int:
    """전체 페이지 수를 계산합니다.

    ceil(total_items / per_page); 0 when there is nothing to show or the
    page size is 0.
    """
    if per_page <= 0 or total_items <= 0:
        return 0
    return math.ceil(total_items / per_page)


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page: int = 1,
    per_page: int = 10,
    scalars: bool = True,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated query, returning the page items and the total count.
    Runs a COUNT over the query as a subquery, then the query itself with
    OFFSET/LIMIT.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: 정렬까지 적용된 SELECT 쿼리 (Ordered base query)
        page: 요청 페이지 번호, 1부터 시작 (Page number, 1-indexed)
        per_page: 페이지당 항목 수 (Items per page, 0 returns no items)
        scalars: True면 첫 번째 엔티티만, False면 Row 반환
                 (Return the first entity only, or whole rows for joined selects)

    Returns:
        tuple[Sequence[Any], int]: (항목 목록, 전체 개수)
    """
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    if total == 0 or per_page <= 0:
        return [], total

    offset: int = (max(page, 1) - 1) * per_page
    result = await db.execute(query.offset(offset).limit(per_page))
    items: Sequence[Any] = result.scalars().all() if scalars else result.all()
    return items, total


def build_page(items: list[Any], page: int, per_page: int, total: int) -> Page:
    """응답용 Page 객체 생성 — Assemble the response page."""
    return Page(
        items=items,
        current_page=page,
        total_items=total,
        total_pages=total_pages(total, per_page),
    )
