"""기술지원 레포지토리 — 고객/사업 이름을 조인한 기술지원 목록/상세 쿼리.

Support Repository — list and detail queries joining the customer and
business names.
"""

from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.models.business import Business
from portal.models.partner import Customer
from portal.models.support import Support
from portal.repositories.base import BaseRepository, to_dict
from portal.utils.pagination import paginate


class SupportRepository(BaseRepository[Support]):
    """기술지원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Support)

    async def get_list(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        name: str | None = None,
        support_type: str | None = None,
        manager: str | None = None,
        status: str | None = None,
        company_id: str | None = None,
    ) -> tuple[list[dict[str, Any]], int]:
        """필터가 적용된 기술지원 목록을 조회합니다.

        Retrieve a page of support requests, latest reported first.

        Args:
            name: 고객 이름 부분 일치 (Customer name substring)
            support_type: 지원 유형 일치 (Exact support type)
            manager: 처리 담당자 부분 일치 (Handler substring)
            status: 처리 상태 일치 (Exact status)
            company_id: 고객 담당 회사 ID 일치 — 파트너 범위 제한
                        (Company managing the customer; partner scoping)
        """
        query: Select = (
            select(Support, Customer.name.label("customer_name"))
            .outerjoin(Customer, Support.customer_id == Customer.id)
            .where(Support.removed.is_(None))
        )
        if name:
            query = query.where(Customer.name.like(f"%{name}%"))
        if support_type:
            query = query.where(Support.type == support_type)
        if manager:
            query = query.where(Support.manager.like(f"%{manager}%"))
        if status:
            query = query.where(Support.status == status)
        if company_id is not None:
            query = query.where(Customer.manager_company_id == company_id)
        query = query.order_by(Support.issued.desc(), Support.created.desc(), Support.id.desc())

        rows, total = await paginate(db, query, page, per_page, scalars=False)
        return [self._row_to_dict(row) for row in rows], total

    async def get_detail(self, db: AsyncSession, support_id: int) -> dict[str, Any] | None:
        query: Select = (
            select(
                Support,
                Customer.name.label("customer_name"),
                Business.name.label("business_name"),
            )
            .outerjoin(Customer, Support.customer_id == Customer.id)
            .outerjoin(Business, Support.business_id == Business.id)
            .where(Support.id == support_id, Support.removed.is_(None))
        )
        row = (await db.execute(query)).first()
        if row is None:
            return None
        return self._row_to_dict(row)

    @staticmethod
    def _row_to_dict(row: Any) -> dict[str, Any]:
        mapping = row._asdict()
        support: Support = mapping.pop("Support")
        return to_dict(support, **mapping)


support_repository = SupportRepository()
