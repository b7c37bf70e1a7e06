"""사업 서비스 — 사업 및 사업 이력 CRUD 비즈니스 로직.

Business Service — Business logic for businesses and their history entries.
Links to licenses are kept two-sided through ``license_link``.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from portal.models.business import Business, BusinessHistory
from portal.repositories.business_repository import (
    business_history_repository,
    business_repository,
)
from portal.repositories.license_repository import license_repository
from portal.schemas.business import (
    BusinessCreate,
    BusinessDetailResponse,
    BusinessHistoryCreate,
    BusinessHistoryResponse,
    BusinessHistoryUpdate,
    BusinessResponse,
    BusinessUpdate,
)
from portal.services import license_link
from portal.utils.exceptions import BadRequestError, NotFoundError, PortalError
from portal.utils.pagination import Page, build_page


def business_not_found(business_id: int) -> NotFoundError:
    return NotFoundError(f"사업 ID {business_id}를 찾을 수 없습니다.")


class BusinessService:
    """사업 관련 비즈니스 로직을 처리하는 서비스.

    Service handling business CRUD and license linking.
    """

    async def list_businesses(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        name: str | None = None,
        available: bool = False,
        manager_id: str | None = None,
    ) -> Page:
        """사업 목록을 페이지 단위로 조회합니다.

        List businesses with customer and product names, newest first.

        Returns:
            Page: ``{items, currentPage, totalItems, totalPages}``
        """
        rows, total = await business_repository.get_list(
            db, page, per_page, name=name, available=available, manager_id=manager_id
        )
        items = [BusinessResponse.model_validate(row) for row in rows]
        return build_page(items, page, per_page, total)

    async def get_business(self, db: AsyncSession, business_id: int) -> BusinessDetailResponse:
        """사업 상세 정보를 조회합니다.

        Retrieve a business with its customer, product and license fields.

        Raises:
            NotFoundError: 사업이 없거나 삭제된 경우 (Missing or removed business)
        """
        row: dict[str, Any] | None = await business_repository.get_detail(db, business_id)
        if row is None:
            raise business_not_found(business_id)
        return BusinessDetailResponse.model_validate(row)

    async def _require_license(
        self, db: AsyncSession, license_id: int, *, missing: type[PortalError]
    ) -> None:
        if await license_repository.get_by_id(db, license_id) is None:
            raise missing(f"라이센스 ID {license_id}를 찾을 수 없습니다.")

    async def create_business(self, db: AsyncSession, data: BusinessCreate) -> BusinessDetailResponse:
        """새 사업을 생성합니다.

        Create a business; a given ``license_id`` is linked on both sides.

        Raises:
            BadRequestError: 라이센스가 없는 경우 (Unknown license)
        """
        values: dict[str, Any] = data.model_dump()
        license_id: int | None = values.pop("license_id")
        if license_id is not None:
            await self._require_license(db, license_id, missing=BadRequestError)

        business: Business = await business_repository.create(db, values)
        if license_id is not None:
            await license_link.link(db, business.id, license_id)
        return await self.get_business(db, business.id)

    async def update_business(
        self, db: AsyncSession, business_id: int, data: BusinessUpdate
    ) -> BusinessDetailResponse:
        """사업 정보를 수정합니다 (얕은 병합).

        Shallow-merge the provided fields into the business. A ``license_id``
        in the request relinks (or, when null, unlinks) the license on both
        sides.

        Raises:
            NotFoundError: 사업이 없거나 삭제된 경우 (Missing or removed business)
            BadRequestError: 라이센스가 없는 경우 (Unknown license)
        """
        values: dict[str, Any] = data.changes()
        relink: bool = "license_id" in values
        license_id: int | None = values.pop("license_id", None)
        if license_id is not None:
            await self._require_license(db, license_id, missing=BadRequestError)

        business: Business | None = await business_repository.update(db, business_id, values)
        if business is None:
            raise business_not_found(business_id)
        if relink:
            if license_id is None:
                await license_link.unlink_business(db, business_id)
            else:
                await license_link.link(db, business_id, license_id)
        return await self.get_business(db, business_id)

    async def delete_business(self, db: AsyncSession, business_id: int) -> None:
        """사업을 삭제합니다 — 라이센스 연결 해제 후 soft delete.

        Release the business's license on both sides, then soft delete the
        business.
        """
        business: Business | None = await business_repository.get_by_id(db, business_id)
        if business is None:
            raise business_not_found(business_id)
        await license_link.unlink_business(db, business_id)
        await business_repository.soft_delete(db, business_id)

    async def register_license(
        self, db: AsyncSession, business_id: int, license_id: int
    ) -> BusinessDetailResponse:
        """사업에 라이센스를 연결합니다.

        Link a license to a business. The business's previous license and
        the license's previous business are released.

        Raises:
            NotFoundError: 사업 또는 라이센스가 없는 경우 (Missing business or license)
        """
        business: Business | None = await business_repository.get_by_id(db, business_id)
        if business is None:
            raise business_not_found(business_id)
        await self._require_license(db, license_id, missing=NotFoundError)

        await license_link.link(db, business_id, license_id)
        return await self.get_business(db, business_id)


class BusinessHistoryService:
    """사업 이력 관련 비즈니스 로직을 처리하는 서비스.

    Service handling history entries; every operation is scoped to a live
    business.
    """

    async def _require_business(self, db: AsyncSession, business_id: int) -> None:
        if await business_repository.get_by_id(db, business_id) is None:
            raise business_not_found(business_id)

    async def _require_history(
        self, db: AsyncSession, business_id: int, history_id: int
    ) -> BusinessHistory:
        history = await business_history_repository.get_for_business(db, business_id, history_id)
        if history is None:
            raise NotFoundError(f"사업 히스토리 ID {history_id}를 찾을 수 없습니다.")
        return history

    async def list_history(
        self, db: AsyncSession, business_id: int
    ) -> list[BusinessHistoryResponse]:
        """사업의 이력 목록 — History of a business, newest first."""
        await self._require_business(db, business_id)
        entries = await business_history_repository.get_by_business(db, business_id)
        return [BusinessHistoryResponse.model_validate(entry) for entry in entries]

    async def get_history(
        self, db: AsyncSession, business_id: int, history_id: int
    ) -> BusinessHistoryResponse:
        await self._require_business(db, business_id)
        history = await self._require_history(db, business_id, history_id)
        return BusinessHistoryResponse.model_validate(history)

    async def create_history(
        self, db: AsyncSession, business_id: int, data: BusinessHistoryCreate
    ) -> BusinessHistoryResponse:
        """사업 이력을 생성합니다 — Append a history entry to a business."""
        await self._require_business(db, business_id)
        history = await business_history_repository.create(
            db, {**data.model_dump(), "business_id": business_id}
        )
        return BusinessHistoryResponse.model_validate(history)

    async def update_history(
        self,
        db: AsyncSession,
        business_id: int,
        history_id: int,
        data: BusinessHistoryUpdate,
    ) -> BusinessHistoryResponse:
        await self._require_business(db, business_id)
        await self._require_history(db, business_id, history_id)
        history = await business_history_repository.update(
            db, history_id, data.changes()
        )
        return BusinessHistoryResponse.model_validate(history)

    async def delete_history(self, db: AsyncSession, business_id: int, history_id: int) -> None:
        await self._require_business(db, business_id)
        await self._require_history(db, business_id, history_id)
        await business_history_repository.soft_delete(db, history_id)


business_service = BusinessService()
business_history_service = BusinessHistoryService()
