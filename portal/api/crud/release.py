"""릴리즈 라우터 — 릴리즈 노트 CRUD 엔드포인트.

Release Router — CRUD endpoints for release notes. Listing shows enabled
releases only.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.deps import AdminUser, CurrentUser
from portal.database import get_db
from portal.schemas.product import ReleaseCreate, ReleaseResponse, ReleaseUpdate
from portal.services.product_service import release_service
from portal.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("", response_model=Page)
async def list_releases(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=0)] = 10,
    version: str | None = None,
    product_id: int | None = None,
) -> Page:
    return await release_service.list_releases(
        db, page, limit, version=version, product_id=product_id
    )


@router.get("/{release_id}", response_model=ReleaseResponse)
async def get_release(
    release_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> ReleaseResponse:
    return await release_service.get_release(db, release_id)


@router.post("", response_model=ReleaseResponse, status_code=201)
async def create_release(
    data: ReleaseCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> ReleaseResponse:
    result: ReleaseResponse = await release_service.create_release(db, data)
    await db.commit()
    return result


@router.put("/{release_id}", response_model=ReleaseResponse)
async def update_release(
    release_id: int,
    data: ReleaseUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> ReleaseResponse:
    result: ReleaseResponse = await release_service.update_release(db, release_id, data)
    await db.commit()
    return result


@router.put("/{release_id}/disabled", response_model=ReleaseResponse)
async def disable_release(
    release_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> ReleaseResponse:
    """릴리즈를 목록에서 숨깁니다 — Hide a release from listings."""
    result: ReleaseResponse = await release_service.disable_release(db, release_id)
    await db.commit()
    return result


@router.delete("/{release_id}", status_code=204)
async def delete_release(
    release_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> None:
    await release_service.delete_release(db, release_id)
    await db.commit()
