"""공지사항 라우터 — 공지사항 CRUD 엔드포인트.

Notice Router — CRUD endpoints for notices. Writes need the Admin realm role.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.deps import AdminUser, CurrentUser
from portal.database import get_db
from portal.schemas.notice import NoticeCreate, NoticeResponse, NoticeUpdate
from portal.services.notice_service import notice_service
from portal.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("", response_model=Page)
async def list_notices(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=0)] = 10,
    title: str | None = None,
    level: str | None = None,
    company_id: int | None = None,
) -> Page:
    """공지사항 목록을 조회합니다.

    List notices. ``company_id`` narrows the list to notices addressed to
    that partner's level or to ``ALL``.
    """
    return await notice_service.list_notices(
        db, page, limit, title=title, level=level, company_id=company_id
    )


@router.get("/{notice_id}", response_model=NoticeResponse)
async def get_notice(
    notice_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> NoticeResponse:
    return await notice_service.get_notice(db, notice_id)


@router.post("", response_model=NoticeResponse, status_code=201)
async def create_notice(
    data: NoticeCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> NoticeResponse:
    result: NoticeResponse = await notice_service.create_notice(db, data)
    await db.commit()
    return result


@router.put("/{notice_id}", response_model=NoticeResponse)
async def update_notice(
    notice_id: int,
    data: NoticeUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> NoticeResponse:
    result: NoticeResponse = await notice_service.update_notice(db, notice_id, data)
    await db.commit()
    return result


@router.delete("/{notice_id}", status_code=204)
async def delete_notice(
    notice_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> None:
    await notice_service.delete_notice(db, notice_id)
    await db.commit()
