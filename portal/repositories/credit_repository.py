"""크레딧 레포지토리 — 파트너/사업 이름을 조인한 크레딧 목록/상세 쿼리.

Credit Repository — list and detail queries joining the partner and
business names.
"""

from typing import Any, Literal

from sqlalchemy import Select, exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from portal.models.business import Business
from portal.models.credit import Credit
from portal.models.partner import Partner
from portal.repositories.base import BaseRepository, to_dict
from portal.utils.pagination import paginate

# 목록 구분 — Row kind filter: deposits or spent credit
CreditKind = Literal["deposit", "credit"]


class CreditRepository(BaseRepository[Credit]):
    """크레딧 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Credit)

    def _joined_query(self) -> Select:
        return (
            select(
                Credit,
                Partner.name.label("partner_name"),
                Business.name.label("business_name"),
            )
            .outerjoin(Partner, Credit.partner_id == Partner.id)
            .outerjoin(Business, Credit.business_id == Business.id)
            .where(Credit.removed.is_(None))
        )

    async def get_list(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        kind: CreditKind | None = None,
        partner: str | None = None,
        business: str | None = None,
        company_id: int | None = None,
    ) -> tuple[list[dict[str, Any]], int]:
        """필터가 적용된 크레딧 목록을 조회합니다.

        Args:
            kind: ``deposit`` 이면 예치 내역만, ``credit`` 이면 사용 내역만
                  (Only deposit rows, or only usage rows)
            partner: 파트너 이름 부분 일치 (Partner name substring)
            business: 사업 이름 부분 일치 (Business name substring)
            company_id: 파트너 ID 일치 (Exact partner filter)
        """
        query: Select = self._joined_query()
        if kind == "deposit":
            query = query.where(Credit.deposit.is_not(None))
        elif kind == "credit":
            query = query.where(Credit.credit.is_not(None))
        if partner:
            query = query.where(Partner.name.like(f"%{partner}%"))
        if business:
            query = query.where(Business.name.like(f"%{business}%"))
        if company_id is not None:
            query = query.where(Credit.partner_id == company_id)
        query = query.order_by(Credit.created.desc(), Credit.id.desc())

        rows, total = await paginate(db, query, page, per_page, scalars=False)
        return [self._row_to_dict(row) for row in rows], total

    async def get_detail(self, db: AsyncSession, credit_id: int) -> dict[str, Any] | None:
        """크레딧 상세 — ``deposit_use`` 포함.

        ``deposit_use`` tells whether the same partner has other live credit
        rows.
        """
        other = aliased(Credit)
        deposit_use = (
            exists()
            .where(
                other.partner_id == Credit.partner_id,
                other.removed.is_(None),
                other.id != Credit.id,
            )
            .label("deposit_use")
        )
        query: Select = self._joined_query().add_columns(deposit_use).where(Credit.id == credit_id)
        row = (await db.execute(query)).first()
        if row is None:
            return None
        return self._row_to_dict(row)

    @staticmethod
    def _row_to_dict(row: Any) -> dict[str, Any]:
        mapping = row._asdict()
        credit: Credit = mapping.pop("Credit")
        return to_dict(credit, **mapping)


credit_repository = CreditRepository()
