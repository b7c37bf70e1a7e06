"""기술지원 서비스 — 고객 기술지원 요청 비즈니스 로직.

Support Service — Business logic for customer support requests.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from portal.models.support import Support
from portal.repositories.business_repository import business_repository
from portal.repositories.partner_repository import customer_repository
from portal.repositories.support_repository import support_repository
from portal.schemas.support import (
    SupportCreate,
    SupportDetailResponse,
    SupportResponse,
    SupportUpdate,
)
from portal.utils.exceptions import BadRequestError, NotFoundError
from portal.utils.pagination import Page, build_page


class SupportService:
    """기술지원 관련 비즈니스 로직을 처리하는 서비스."""

    async def list_supports(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        name: str | None = None,
        support_type: str | None = None,
        manager: str | None = None,
        status: str | None = None,
        company_id: str | None = None,
    ) -> Page:
        rows, total = await support_repository.get_list(
            db,
            page,
            per_page,
            name=name,
            support_type=support_type,
            manager=manager,
            status=status,
            company_id=company_id,
        )
        items = [SupportResponse.model_validate(row) for row in rows]
        return build_page(items, page, per_page, total)

    async def get_support(self, db: AsyncSession, support_id: int) -> SupportDetailResponse:
        """기술지원 상세 조회 — 고객/사업 이름 포함.

        Raises:
            NotFoundError: 요청이 없거나 삭제된 경우 (Missing or removed request)
        """
        row = await support_repository.get_detail(db, support_id)
        if row is None:
            raise NotFoundError(f"기술지원 ID {support_id}를 찾을 수 없습니다.")
        return SupportDetailResponse.model_validate(row)

    async def _check_refs(
        self, db: AsyncSession, customer_id: int | None, business_id: int | None
    ) -> None:
        if customer_id is not None and await customer_repository.get_by_id(db, customer_id) is None:
            raise BadRequestError(f"고객 ID {customer_id}를 찾을 수 없습니다.")
        if business_id is not None and await business_repository.get_by_id(db, business_id) is None:
            raise BadRequestError(f"사업 ID {business_id}를 찾을 수 없습니다.")

    async def create_support(self, db: AsyncSession, data: SupportCreate) -> SupportDetailResponse:
        await self._check_refs(db, data.customer_id, data.business_id)
        support: Support = await support_repository.create(db, data.model_dump())
        return await self.get_support(db, support.id)

    async def update_support(
        self, db: AsyncSession, support_id: int, data: SupportUpdate
    ) -> SupportDetailResponse:
        values = data.changes()
        await self._check_refs(db, values.get("customer_id"), values.get("business_id"))
        if await support_repository.update(db, support_id, values) is None:
            raise NotFoundError(f"기술지원 ID {support_id}를 찾을 수 없습니다.")
        return await self.get_support(db, support_id)

    async def delete_support(self, db: AsyncSession, support_id: int) -> None:
        if not await support_repository.soft_delete(db, support_id):
            raise NotFoundError(f"기술지원 ID {support_id}를 찾을 수 없습니다.")


support_service = SupportService()
