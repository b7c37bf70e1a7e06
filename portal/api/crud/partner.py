"""파트너 라우터 — 파트너 CRUD 엔드포인트.

Partner Router — CRUD endpoints for partner companies.
Reads need any valid token; writes need the Admin realm role.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.deps import AdminUser, CurrentUser
from portal.database import get_db
from portal.schemas.partner import PartnerCreate, PartnerResponse, PartnerUpdate
from portal.services.partner_service import partner_service
from portal.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("", response_model=Page)
async def list_partners(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=0)] = 10,
    level: str | None = None,
    name: str | None = None,
    partner_id: Annotated[int | None, Query(alias="id")] = None,
) -> Page:
    """파트너 목록을 조회합니다.

    List partners; ``name`` matches case-insensitively, ``id`` exactly.
    """
    return await partner_service.list_partners(
        db, page, limit, level=level, name=name, partner_id=partner_id
    )


@router.get("/{partner_id}", response_model=PartnerResponse)
async def get_partner(
    partner_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> PartnerResponse:
    return await partner_service.get_partner(db, partner_id)


@router.post("", response_model=PartnerResponse, status_code=201)
async def create_partner(
    data: PartnerCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> PartnerResponse:
    """새 파트너를 등록합니다 (관리자 전용) — Create a partner (Admin only)."""
    result: PartnerResponse = await partner_service.create_partner(db, data)
    await db.commit()
    return result


@router.put("/{partner_id}", response_model=PartnerResponse)
async def update_partner(
    partner_id: int,
    data: PartnerUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> PartnerResponse:
    result: PartnerResponse = await partner_service.update_partner(db, partner_id, data)
    await db.commit()
    return result


@router.delete("/{partner_id}", status_code=204)
async def delete_partner(
    partner_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> None:
    await partner_service.delete_partner(db, partner_id)
    await db.commit()
