"""크레딧 라우터 — 파트너 크레딧 예치/사용 내역 엔드포인트.

Credit Router — Endpoints for partner credit deposits and usage rows.
"""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.deps import CurrentUser
from portal.database import get_db
from portal.schemas.credit import CreditCreate, CreditDetailResponse, CreditUpdate
from portal.services.credit_service import credit_service
from portal.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("", response_model=Page)
async def list_credits(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=0)] = 10,
    type: Literal["deposit", "credit"] | None = None,
    partner: str | None = None,
    business: str | None = None,
    company_id: int | None = None,
) -> Page:
    """크레딧 목록을 조회합니다.

    ``type=deposit`` lists deposits, ``type=credit`` lists usage rows;
    ``company_id`` narrows to one partner.
    """
    return await credit_service.list_credits(
        db,
        page,
        limit,
        kind=type,
        partner=partner,
        business=business,
        company_id=company_id,
    )


@router.get("/{credit_id}", response_model=CreditDetailResponse)
async def get_credit(
    credit_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> CreditDetailResponse:
    return await credit_service.get_credit(db, credit_id)


@router.post("", response_model=CreditDetailResponse, status_code=201)
async def create_credit(
    data: CreditCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> CreditDetailResponse:
    result: CreditDetailResponse = await credit_service.create_credit(db, data)
    await db.commit()
    return result


@router.put("/{credit_id}", response_model=CreditDetailResponse)
async def update_credit(
    credit_id: int,
    data: CreditUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> CreditDetailResponse:
    result: CreditDetailResponse = await credit_service.update_credit(db, credit_id, data)
    await db.commit()
    return result


@router.delete("/{credit_id}", status_code=204)
async def delete_credit(
    credit_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> None:
    await credit_service.delete_credit(db, credit_id)
    await db.commit()
