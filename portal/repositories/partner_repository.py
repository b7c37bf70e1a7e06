"""파트너/고객 레포지토리 — 파트너 및 고객 목록 필터 쿼리.

Partner and Customer Repositories — list queries with name/level filters.
"""

from typing import Sequence

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.models.partner import Customer, Partner
from portal.repositories.base import BaseRepository


class PartnerRepository(BaseRepository[Partner]):
    """파트너 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the partner table.
    """

    def __init__(self) -> None:
        super().__init__(Partner)

    async def get_list(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        level: str | None = None,
        name: str | None = None,
        partner_id: int | None = None,
    ) -> tuple[Sequence[Partner], int]:
        """필터가 적용된 파트너 목록을 조회합니다.

        Retrieve a page of partners. ``name`` matches case-insensitively,
        ``level`` by substring and ``partner_id`` exactly.
        """
        query: Select = self.live_query()
        if level:
            query = query.where(Partner.level.like(f"%{level}%"))
        if name:
            query = query.where(Partner.name.ilike(f"%{name}%"))
        if partner_id is not None:
            query = query.where(Partner.id == partner_id)
        return await self.get_paginated(db, query, page, per_page)


class CustomerRepository(BaseRepository[Customer]):
    """고객 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the customer table.
    """

    def __init__(self) -> None:
        super().__init__(Customer)

    async def get_list(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        name: str | None = None,
        manager_id: str | None = None,
    ) -> tuple[Sequence[Customer], int]:
        """필터가 적용된 고객 목록을 조회합니다 — Page of customers, newest first."""
        query: Select = self.live_query()
        if name:
            query = query.where(Customer.name.like(f"%{name}%"))
        if manager_id:
            query = query.where(Customer.manager_id == manager_id)
        return await self.get_paginated(db, query, page, per_page)


partner_repository = PartnerRepository()
customer_repository = CustomerRepository()
