"""고객 라우터 — 고객 CRUD 엔드포인트.

Customer Router — CRUD endpoints for end customers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.deps import CurrentUser
from portal.database import get_db
from portal.schemas.partner import (
    CustomerCreate,
    CustomerDetailResponse,
    CustomerResponse,
    CustomerUpdate,
)
from portal.services.partner_service import customer_service
from portal.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("", response_model=Page)
async def list_customers(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=0)] = 10,
    name: str | None = None,
    manager_id: str | None = None,
) -> Page:
    """고객 목록을 조회합니다 — List customers, newest first."""
    return await customer_service.list_customers(db, page, limit, name=name, manager_id=manager_id)


@router.get("/{customer_id}", response_model=CustomerDetailResponse)
async def get_customer(
    customer_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> CustomerDetailResponse:
    """고객 상세 정보를 조회합니다 (사업 목록 포함).

    Retrieve a customer with its businesses.
    """
    return await customer_service.get_customer(db, customer_id)


@router.post("", response_model=CustomerResponse, status_code=201)
async def create_customer(
    data: CustomerCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> CustomerResponse:
    result: CustomerResponse = await customer_service.create_customer(db, data)
    await db.commit()
    return result


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: int,
    data: CustomerUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> CustomerResponse:
    result: CustomerResponse = await customer_service.update_customer(db, customer_id, data)
    await db.commit()
    return result


@router.delete("/{customer_id}", status_code=204)
async def delete_customer(
    customer_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: CurrentUser,
) -> None:
    await customer_service.delete_customer(db, customer_id)
    await db.commit()
