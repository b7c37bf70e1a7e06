"""라이센스 서비스 — 라이센스 발급/수정/승인/삭제 비즈니스 로직.

License Service — Business logic for issuing, updating, approving and
deleting licenses. Business links are written on both sides through
``license_link``.
"""

import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from portal.models.license import License
from portal.models.mixins import utcnow
from portal.models.partner import Partner
from portal.repositories.business_repository import business_repository
from portal.repositories.license_repository import license_repository
from portal.repositories.partner_repository import partner_repository
from portal.schemas.license import (
    LicenseCreate,
    LicenseDetailResponse,
    LicenseResponse,
    LicenseUpdate,
)
from portal.services import license_link
from portal.utils.dates import EMPTY_DATE
from portal.utils.exceptions import BadRequestError, NotFoundError
from portal.utils.pagination import Page, build_page

# OEM 파트너 이름 → OEM 코드 — Partner names that imply an OEM build
OEM_BY_PARTNER_NAME: dict[str, str] = {
    "클로잇": "clostack",
    "효성": "hv",
}


def license_not_found(license_id: int) -> NotFoundError:
    return NotFoundError(f"라이센스 ID {license_id}를 찾을 수 없습니다.")


def resolve_oem(partner_name: str | None, requested: str | None) -> str | None:
    """파트너 이름으로 OEM 코드를 결정합니다.

    Known OEM partners force their code; otherwise the requested value is
    kept, with an empty string meaning no OEM.
    """
    if partner_name in OEM_BY_PARTNER_NAME:
        return OEM_BY_PARTNER_NAME[partner_name]
    return requested or None


class LicenseService:
    """라이센스 관련 비즈니스 로직을 처리하는 서비스.

    Service handling license CRUD and approval.
    """

    async def list_licenses(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        company_id: int | None = None,
        license_key: str | None = None,
        business_name: str | None = None,
        trial: bool | None = None,
    ) -> Page:
        """라이센스 목록을 조회합니다.

        List licenses with business and product names, newest first.
        """
        rows, total = await license_repository.get_list(
            db,
            page,
            per_page,
            company_id=company_id,
            license_key=license_key,
            business_name=business_name,
            trial=trial,
        )
        items = [LicenseResponse.model_validate(row) for row in rows]
        return build_page(items, page, per_page, total)

    async def get_license(self, db: AsyncSession, license_id: int) -> LicenseDetailResponse:
        """라이센스 상세 정보를 조회합니다.

        Raises:
            NotFoundError: 라이센스가 없거나 삭제된 경우 (Missing or removed license)
        """
        row: dict[str, Any] | None = await license_repository.get_detail(db, license_id)
        if row is None:
            raise license_not_found(license_id)
        return LicenseDetailResponse.model_validate(row)

    async def _partner_name(self, db: AsyncSession, company_id: int | None) -> str | None:
        if company_id is None:
            return None
        partner: Partner | None = await partner_repository.get_by_id(db, company_id)
        if partner is None:
            raise BadRequestError(f"파트너 ID {company_id}를 찾을 수 없습니다.")
        return partner.name

    async def _require_business(self, db: AsyncSession, business_id: int) -> None:
        if await business_repository.get_by_id(db, business_id) is None:
            raise BadRequestError(f"사업 ID {business_id}를 찾을 수 없습니다.")

    async def create_license(self, db: AsyncSession, data: LicenseCreate) -> LicenseDetailResponse:
        """새 라이센스를 발급합니다.

        Issue a license: generate its key, default unknown dates to
        ``0000-00-00``, derive the OEM code from the partner and link the
        business on both sides when one is given.

        Raises:
            BadRequestError: 파트너 또는 사업이 존재하지 않는 경우
                             (Referenced partner or business does not exist)
        """
        values: dict[str, Any] = data.model_dump()
        business_id: int | None = values.pop("business_id")

        partner_name = await self._partner_name(db, data.company_id)
        if business_id is not None:
            await self._require_business(db, business_id)

        values.update(
            license_key=str(uuid.uuid4()),
            issued=data.issued or EMPTY_DATE,
            expired=data.expired or EMPTY_DATE,
            oem=resolve_oem(partner_name, data.oem),
        )
        license_row: License = await license_repository.create(db, values)

        if business_id is not None:
            await license_link.link(db, business_id, license_row.id)
        return await self.get_license(db, license_row.id)

    async def update_license(
        self, db: AsyncSession, license_id: int, data: LicenseUpdate
    ) -> LicenseDetailResponse:
        """라이센스 정보를 수정합니다 (얕은 병합).

        Shallow-merge the provided fields; empty ``issued``/``expired`` keep
        the stored dates. A ``business_id`` in the request relinks (or, when
        null, unlinks) the business on both sides.

        Raises:
            NotFoundError: 라이센스가 없거나 삭제된 경우 (Missing or removed license)
            BadRequestError: 파트너 또는 사업이 존재하지 않는 경우
                             (Referenced partner or business does not exist)
        """
        values: dict[str, Any] = data.changes()
        for field in ("issued", "expired"):
            if field in values and not values[field]:
                del values[field]

        relink: bool = "business_id" in values
        business_id: int | None = values.pop("business_id", None)
        if values.get("company_id") is not None:
            await self._partner_name(db, values["company_id"])
        if business_id is not None:
            await self._require_business(db, business_id)

        license_row: License | None = await license_repository.update(db, license_id, values)
        if license_row is None:
            raise license_not_found(license_id)
        if relink:
            if business_id is None:
                await license_link.unlink_license(db, license_id)
            else:
                await license_link.link(db, business_id, license_id)
        return await self.get_license(db, license_id)

    async def delete_license(self, db: AsyncSession, license_id: int) -> None:
        """라이센스를 삭제합니다 — 사업 연결 해제 후 soft delete.

        Unlink the license from its business on both sides, then soft delete
        it.
        """
        license_row: License | None = await license_repository.get_by_id(db, license_id)
        if license_row is None:
            raise license_not_found(license_id)
        await license_link.unlink_license(db, license_id)
        await license_repository.soft_delete(db, license_id)

    async def approve_license(
        self, db: AsyncSession, license_id: int, approve_user: str
    ) -> LicenseDetailResponse:
        """라이센스를 승인합니다.

        Record the approver and approval time and activate the license.
        """
        license_row: License | None = await license_repository.update(
            db,
            license_id,
            {"approve_user": approve_user, "approved": utcnow(), "status": "active"},
        )
        if license_row is None:
            raise license_not_found(license_id)
        return await self.get_license(db, license_id)


license_service = LicenseService()
