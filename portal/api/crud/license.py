"""라이센스 라우터 — 라이센스 발급/조회/수정/승인/삭제 엔드포인트.

License Router — Endpoints for issuing, listing, updating, approving and
deleting licenses.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.deps import CurrentUser
from portal.database import get_db
from portal.schemas.license import (
    LicenseApproveRequest,
    LicenseCreate,
    LicenseDetailResponse,
    LicenseUpdate,
)
from portal.services.license_service import license_service
from portal.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("", response_model=Page)
async def list_licenses(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=0)] = 10,
    company_id: int | None = None,
    license_key: str | None = None,
    business_name: str | None = None,
    trial: bool | None = None,
) -> Page:
    """라이센스 목록을 조회합니다 — List licenses with business and product names."""
    return await license_service.list_licenses(
        db,
        page,
        limit,
        company_id=company_id,
        license_key=license_key,
        business_name=business_name,
        trial=trial,
    )


@router.get("/{license_id}", response_model=LicenseDetailResponse)
async def get_license(
    license_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> LicenseDetailResponse:
    return await license_service.get_license(db, license_id)


@router.post("", response_model=LicenseDetailResponse, status_code=201)
async def create_license(
    data: LicenseCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> LicenseDetailResponse:
    """라이센스를 발급합니다.

    Issue a license with a generated key; the linked business, if any, is
    pointed at the new license.
    """
    result: LicenseDetailResponse = await license_service.create_license(db, data)
    await db.commit()
    return result


@router.put("/{license_id}", response_model=LicenseDetailResponse)
async def update_license(
    license_id: int,
    data: LicenseUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> LicenseDetailResponse:
    result: LicenseDetailResponse = await license_service.update_license(db, license_id, data)
    await db.commit()
    return result


@router.put("/{license_id}/approve", response_model=LicenseDetailResponse)
async def approve_license(
    license_id: int,
    data: LicenseApproveRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> LicenseDetailResponse:
    """라이센스를 승인합니다 — Approve and activate a license."""
    result: LicenseDetailResponse = await license_service.approve_license(
        db, license_id, data.approve_user
    )
    await db.commit()
    return result


@router.delete("/{license_id}", status_code=204)
async def delete_license(
    license_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> None:
    """라이센스를 삭제합니다 — Unlink from the business and soft delete."""
    await license_service.delete_license(db, license_id)
    await db.commit()
