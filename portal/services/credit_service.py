"""크레딧 서비스 — 파트너 크레딧 예치/사용 내역 비즈니스 로직.

Credit Service — Business logic for partner credit deposits and usage.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from portal.models.credit import Credit
from portal.repositories.business_repository import business_repository
from portal.repositories.credit_repository import CreditKind, credit_repository
from portal.repositories.partner_repository import partner_repository
from portal.schemas.credit import (
    CreditCreate,
    CreditDetailResponse,
    CreditResponse,
    CreditUpdate,
)
from portal.utils.exceptions import BadRequestError, NotFoundError
from portal.utils.pagination import Page, build_page


class CreditService:
    """크레딧 관련 비즈니스 로직을 처리하는 서비스.

    Service handling credit CRUD. Referenced partners and businesses must
    exist and be live.
    """

    async def list_credits(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        kind: CreditKind | None = None,
        partner: str | None = None,
        business: str | None = None,
        company_id: int | None = None,
    ) -> Page:
        """크레딧 목록을 조회합니다 — Page of credit rows, newest first."""
        rows, total = await credit_repository.get_list(
            db,
            page,
            per_page,
            kind=kind,
            partner=partner,
            business=business,
            company_id=company_id,
        )
        items = [CreditResponse.model_validate(row) for row in rows]
        return build_page(items, page, per_page, total)

    async def get_credit(self, db: AsyncSession, credit_id: int) -> CreditDetailResponse:
        """크레딧 상세 조회.

        Raises:
            NotFoundError: 크레딧이 없거나 삭제된 경우 (Missing or removed credit)
        """
        row = await credit_repository.get_detail(db, credit_id)
        if row is None:
            raise NotFoundError(f"크레딧 ID {credit_id}를 찾을 수 없습니다.")
        return CreditDetailResponse.model_validate(row)

    async def _check_refs(
        self, db: AsyncSession, partner_id: int | None, business_id: int | None
    ) -> None:
        if partner_id is not None and await partner_repository.get_by_id(db, partner_id) is None:
            raise BadRequestError(f"파트너 ID {partner_id}를 찾을 수 없습니다.")
        if business_id is not None and await business_repository.get_by_id(db, business_id) is None:
            raise BadRequestError(f"사업 ID {business_id}를 찾을 수 없습니다.")

    async def create_credit(self, db: AsyncSession, data: CreditCreate) -> CreditDetailResponse:
        await self._check_refs(db, data.partner_id, data.business_id)
        credit: Credit = await credit_repository.create(db, data.model_dump())
        return await self.get_credit(db, credit.id)

    async def update_credit(
        self, db: AsyncSession, credit_id: int, data: CreditUpdate
    ) -> CreditDetailResponse:
        values = data.changes()
        await self._check_refs(db, values.get("partner_id"), values.get("business_id"))
        if await credit_repository.update(db, credit_id, values) is None:
            raise NotFoundError(f"크레딧 ID {credit_id}를 찾을 수 없습니다.")
        return await self.get_credit(db, credit_id)

    async def delete_credit(self, db: AsyncSession, credit_id: int) -> None:
        if not await credit_repository.soft_delete(db, credit_id):
            raise NotFoundError(f"크레딧 ID {credit_id}를 찾을 수 없습니다.")


credit_service = CreditService()
