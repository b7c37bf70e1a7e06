"""사업 라우터 — 사업 및 사업 이력 CRUD 엔드포인트.

Business Router — CRUD endpoints for businesses, license registration and
the per-business history log.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.deps import CurrentUser
from portal.database import get_db
from portal.schemas.business import (
    BusinessCreate,
    BusinessDetailResponse,
    BusinessHistoryCreate,
    BusinessHistoryResponse,
    BusinessHistoryUpdate,
    BusinessUpdate,
    RegisterLicenseRequest,
)
from portal.services.business_service import business_history_service, business_service
from portal.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("", response_model=Page)
async def list_businesses(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=0)] = 10,
    name: str | None = None,
    available: bool = False,
    manager_id: str | None = None,
) -> Page:
    """사업 목록을 조회합니다.

    List businesses. ``available=true`` keeps only businesses without a
    license.
    """
    return await business_service.list_businesses(
        db, page, limit, name=name, available=available, manager_id=manager_id
    )


@router.get("/{business_id}", response_model=BusinessDetailResponse)
async def get_business(
    business_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> BusinessDetailResponse:
    """사업 상세 정보를 조회합니다 — Retrieve business detail with license fields."""
    return await business_service.get_business(db, business_id)


@router.post("", response_model=BusinessDetailResponse, status_code=201)
async def create_business(
    data: BusinessCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> BusinessDetailResponse:
    result: BusinessDetailResponse = await business_service.create_business(db, data)
    await db.commit()
    return result


@router.put("/{business_id}", response_model=BusinessDetailResponse)
async def update_business(
    business_id: int,
    data: BusinessUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> BusinessDetailResponse:
    """사업 정보를 수정합니다 — Shallow-merge update of a business."""
    result: BusinessDetailResponse = await business_service.update_business(db, business_id, data)
    await db.commit()
    return result


@router.put("/{business_id}/registerLicense", response_model=BusinessDetailResponse)
async def register_license(
    business_id: int,
    data: RegisterLicenseRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> BusinessDetailResponse:
    """사업에 라이센스를 연결합니다 — Link a license to the business."""
    result: BusinessDetailResponse = await business_service.register_license(
        db, business_id, data.license_id
    )
    await db.commit()
    return result


@router.delete("/{business_id}", status_code=204)
async def delete_business(
    business_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> None:
    """사업을 삭제합니다 (soft delete) — Release the license and soft delete."""
    await business_service.delete_business(db, business_id)
    await db.commit()


# === 사업 이력 (Business History) ===

@router.get("/{business_id}/history", response_model=list[BusinessHistoryResponse])
async def list_history(
    business_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> list[BusinessHistoryResponse]:
    """사업 이력 목록을 조회합니다 — History entries of a business, newest first."""
    return await business_history_service.list_history(db, business_id)


@router.post(
    "/{business_id}/history", response_model=BusinessHistoryResponse, status_code=201
)
async def create_history(
    business_id: int,
    data: BusinessHistoryCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> BusinessHistoryResponse:
    result: BusinessHistoryResponse = await business_history_service.create_history(
        db, business_id, data
    )
    await db.commit()
    return result


@router.get("/{business_id}/history/{history_id}", response_model=BusinessHistoryResponse)
async def get_history(
    business_id: int,
    history_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> BusinessHistoryResponse:
    return await business_history_service.get_history(db, business_id, history_id)


@router.put("/{business_id}/history/{history_id}", response_model=BusinessHistoryResponse)
async def update_history(
    business_id: int,
    history_id: int,
    data: BusinessHistoryUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> BusinessHistoryResponse:
    result: BusinessHistoryResponse = await business_history_service.update_history(
        db, business_id, history_id, data
    )
    await db.commit()
    return result


@router.delete("/{business_id}/history/{history_id}", status_code=204)
async def delete_history(
    business_id: int,
    history_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> None:
    await business_history_service.delete_history(db, business_id, history_id)
    await db.commit()
