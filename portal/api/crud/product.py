"""제품 라우터 — 제품 CRUD 및 활성/비활성 전환 엔드포인트.

Product Router — CRUD endpoints for products plus enable/disable toggles
and the product category list.
Writes need the Admin realm role.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.deps import AdminUser, CurrentUser
from portal.database import get_db
from portal.schemas.product import (
    ProductCategoryCreate,
    ProductCategoryResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)
from portal.services.product_service import product_category_service, product_service
from portal.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("", response_model=Page)
async def list_products(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=0)] = 10,
    name: str | None = None,
    enabled: bool | None = None,
    category_id: int | None = None,
) -> Page:
    return await product_service.list_products(
        db, page, limit, name=name, enabled=enabled, category_id=category_id
    )


# /category 는 /{product_id} 보다 먼저 등록 (must precede the id routes)
@router.get("/category", response_model=Page)
async def list_categories(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=0)] = 10,
    name: str | None = None,
) -> Page:
    """활성 제품 카테고리 목록 — Enabled product categories, newest first."""
    return await product_category_service.list_categories(db, page, limit, name=name)


@router.post("/category", response_model=ProductCategoryResponse, status_code=201)
async def create_category(
    data: ProductCategoryCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> ProductCategoryResponse:
    result: ProductCategoryResponse = await product_category_service.create_category(db, data)
    await db.commit()
    return result


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> ProductResponse:
    return await product_service.get_product(db, product_id)


@router.post("", response_model=ProductResponse, status_code=201)
async def create_product(
    data: ProductCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> ProductResponse:
    result: ProductResponse = await product_service.create_product(db, data)
    await db.commit()
    return result


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    data: ProductUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> ProductResponse:
    result: ProductResponse = await product_service.update_product(db, product_id, data)
    await db.commit()
    return result


@router.put("/{product_id}/enabled", response_model=ProductResponse)
async def enable_product(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> ProductResponse:
    """제품을 활성화합니다 — Show the product in listings."""
    result: ProductResponse = await product_service.set_enabled(db, product_id, True)
    await db.commit()
    return result


@router.put("/{product_id}/disabled", response_model=ProductResponse)
async def disable_product(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> ProductResponse:
    """제품을 비활성화합니다 — Hide the product from listings."""
    result: ProductResponse = await product_service.set_enabled(db, product_id, False)
    await db.commit()
    return result


@router.delete("/{product_id}", status_code=204)
async def delete_product(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: AdminUser,
) -> None:
    await product_service.delete_product(db, product_id)
    await db.commit()
