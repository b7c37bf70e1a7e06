"""기술지원 라우터 — 고객 기술지원 요청 엔드포인트.

Support Router — Endpoints for customer support requests.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.deps import CurrentUser
from portal.database import get_db
from portal.schemas.support import (
    SupportCreate,
    SupportDetailResponse,
    SupportStatus,
    SupportType,
    SupportUpdate,
)
from portal.services.support_service import support_service
from portal.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("", response_model=Page)
async def list_supports(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=0)] = 10,
    name: str | None = None,
    type: SupportType | None = None,
    manager: str | None = None,
    status: SupportStatus | None = None,
    company_id: str | None = None,
) -> Page:
    """기술지원 목록을 조회합니다 — Latest reported first."""
    return await support_service.list_supports(
        db,
        page,
        limit,
        name=name,
        support_type=type,
        manager=manager,
        status=status,
        company_id=company_id,
    )


@router.get("/{support_id}", response_model=SupportDetailResponse)
async def get_support(
    support_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> SupportDetailResponse:
    return await support_service.get_support(db, support_id)


@router.post("", response_model=SupportDetailResponse, status_code=201)
async def create_support(
    data: SupportCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> SupportDetailResponse:
    result: SupportDetailResponse = await support_service.create_support(db, data)
    await db.commit()
    return result


@router.put("/{support_id}", response_model=SupportDetailResponse)
async def update_support(
    support_id: int,
    data: SupportUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> SupportDetailResponse:
    result: SupportDetailResponse = await support_service.update_support(db, support_id, data)
    await db.commit()
    return result


@router.delete("/{support_id}", status_code=204)
async def delete_support(
    support_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> None:
    await support_service.delete_support(db, support_id)
    await db.commit()
