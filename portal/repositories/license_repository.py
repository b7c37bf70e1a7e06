"""라이센스 레포지토리 — 라이센스 CRUD 및 사업/제품/파트너 조인 쿼리.

License Repository — CRUD plus list and detail queries joining the business,
product and partner display fields.
"""

from typing import Any

from sqlalchemy import Select, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from portal.config import settings
from portal.models.business import Business
from portal.models.license import License
from portal.models.partner import Partner
from portal.models.product import Product
from portal.repositories.base import BaseRepository, to_dict
from portal.utils.pagination import paginate


class LicenseRepository(BaseRepository[License]):
    """라이센스 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the license table.
    """

    def __init__(self) -> None:
        super().__init__(License)

    async def get_list(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        company_id: int | None = None,
        license_key: str | None = None,
        business_name: str | None = None,
        trial: bool | None = None,
    ) -> tuple[list[dict[str, Any]], int]:
        """필터가 적용된 라이센스 목록을 조회합니다.

        Retrieve a page of licenses with the business and product names.

        Args:
            company_id: 파트너 ID 일치 (Exact partner filter)
            license_key: 라이센스 키 부분 일치 (Key substring filter)
            business_name: 사업 이름 부분 일치 (Business name substring filter)
            trial: 체험판 여부 (Trial flag filter)

        Returns:
            tuple[list[dict], int]: (조인된 행 목록, 전체 개수)
        """
        query: Select = (
            select(
                License,
                Business.name.label("business_name"),
                Product.name.label("product_name"),
                Product.version.label("product_version"),
            )
            .outerjoin(Business, License.business_id == Business.id)
            .outerjoin(Product, Business.product_id == Product.id)
            .where(License.removed.is_(None))
        )
        if company_id is not None:
            query = query.where(License.company_id == company_id)
        if license_key:
            query = query.where(License.license_key.like(f"%{license_key}%"))
        if business_name:
            query = query.where(Business.name.like(f"%{business_name}%"))
        if trial is not None:
            query = query.where(License.trial.is_(trial))
        query = query.order_by(License.created.desc(), License.id.desc())

        rows, total = await paginate(db, query, page, per_page, scalars=False)
        return [self._row_to_dict(row) for row in rows], total

    async def get_detail(self, db: AsyncSession, license_id: int) -> dict[str, Any] | None:
        """라이센스 상세 정보를 파트너/사업/제품 정보와 함께 조회합니다.

        Retrieve a license with partner, business and product fields. A
        license without a partner company belongs to the vendor, whose name
        is reported as ``company_name``.
        """
        query: Select = (
            select(
                License,
                func.coalesce(Partner.name, settings.VENDOR_COMPANY_NAME).label("company_name"),
                Partner.telnum.label("company_telnum"),
                Partner.level.label("company_level"),
                Business.name.label("business_name"),
                Product.id.label("product_id"),
                Product.name.label("product_name"),
                Product.version.label("product_version"),
            )
            .outerjoin(Partner, License.company_id == Partner.id)
            .outerjoin(Business, License.business_id == Business.id)
            .outerjoin(Product, Business.product_id == Product.id)
            .where(License.id == license_id, License.removed.is_(None))
        )
        row = (await db.execute(query)).first()
        if row is None:
            return None
        return self._row_to_dict(row)

    async def set_business(
        self, db: AsyncSession, license_id: int, business_id: int | None
    ) -> None:
        """라이센스의 사업 연결을 변경합니다 — Point a license at a business (or none)."""
        await db.execute(
            update(License).where(License.id == license_id).values(business_id=business_id)
        )

    async def clear_business_refs(self, db: AsyncSession, business_id: int) -> None:
        """해당 사업을 참조하는 모든 라이센스의 연결 해제 — Unlink a business from every license."""
        await db.execute(
            update(License).where(License.business_id == business_id).values(business_id=None)
        )

    @staticmethod
    def _row_to_dict(row: Any) -> dict[str, Any]:
        mapping = row._asdict()
        license_row: License = mapping.pop("License")
        return to_dict(license_row, **mapping)


license_repository = LicenseRepository()
