"""사업 레포지토리 — 사업 CRUD 및 목록/상세 조인 쿼리.

Business Repository — CRUD plus list and detail queries joining the
customer, product and license display fields.
"""

from typing import Any, Sequence

from sqlalchemy import Select, and_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from portal.models.business import Business, BusinessHistory
from portal.models.license import License
from portal.models.partner import Customer
from portal.models.product import Product
from portal.repositories.base import BaseRepository, to_dict
from portal.utils.pagination import paginate


class BusinessRepository(BaseRepository[Business]):
    """사업 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the business table.
    """

    def __init__(self) -> None:
        super().__init__(Business)

    def _joined_query(self) -> Select:
        """고객/제품 표시 필드를 조인한 기본 쿼리 — Base query with customer and product names."""
        return (
            select(
                Business,
                Customer.name.label("customer_name"),
                Product.name.label("product_name"),
                Product.version.label("product_version"),
            )
            .outerjoin(Customer, Business.customer_id == Customer.id)
            .outerjoin(Product, Business.product_id == Product.id)
            .where(Business.removed.is_(None))
        )

    async def get_list(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        name: str | None = None,
        available: bool = False,
        manager_id: str | None = None,
    ) -> tuple[list[dict[str, Any]], int]:
        """필터가 적용된 사업 목록을 조회합니다.

        Retrieve a page of businesses, newest first.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            page: 페이지 번호 (Page number, 1-indexed)
            per_page: 페이지당 항목 수 (Items per page)
            name: 사업 이름 부분 일치 (Name substring filter)
            available: True면 라이센스가 없는 사업만 (Only businesses without a license)
            manager_id: 담당자 ID 일치 (Exact manager filter)

        Returns:
            tuple[list[dict], int]: (조인된 행 목록, 전체 개수)
        """
        query: Select = self._joined_query()
        if name:
            query = query.where(Business.name.like(f"%{name}%"))
        if available:
            query = query.where(Business.license_id.is_(None))
        if manager_id:
            query = query.where(Business.manager_id == manager_id)
        query = query.order_by(Business.created.desc(), Business.id.desc())

        rows, total = await paginate(db, query, page, per_page, scalars=False)
        return [self._row_to_dict(row) for row in rows], total

    async def get_detail(self, db: AsyncSession, business_id: int) -> dict[str, Any] | None:
        """사업 상세 정보를 라이센스 정보와 함께 조회합니다.

        Retrieve a business with customer, product and license fields.
        License fields are null when the license has been removed.
        """
        query: Select = (
            self._joined_query()
            .add_columns(
                License.license_key.label("license_key"),
                License.status.label("license_status"),
                License.issued.label("license_issued"),
                License.expired.label("license_expired"),
                License.trial.label("license_trial"),
            )
            .outerjoin(
                License,
                and_(License.id == Business.license_id, License.removed.is_(None)),
            )
            .where(Business.id == business_id)
        )
        row = (await db.execute(query)).first()
        if row is None:
            return None
        return self._row_to_dict(row)

    async def get_by_customer(self, db: AsyncSession, customer_id: int) -> list[dict[str, Any]]:
        """고객의 사업 목록 — Live businesses of a customer, newest first."""
        query: Select = (
            self._joined_query()
            .where(Business.customer_id == customer_id)
            .order_by(Business.created.desc(), Business.id.desc())
        )
        rows: Sequence[Any] = (await db.execute(query)).all()
        return [self._row_to_dict(row) for row in rows]

    async def set_license(
        self, db: AsyncSession, business_id: int, license_id: int | None
    ) -> None:
        """사업의 라이센스 연결을 변경합니다 — Point a business at a license (or none)."""
        await db.execute(
            update(Business).where(Business.id == business_id).values(license_id=license_id)
        )

    async def clear_license_refs(self, db: AsyncSession, license_id: int) -> None:
        """해당 라이센스를 참조하는 모든 사업의 연결 해제 — Unlink a license from every business."""
        await db.execute(
            update(Business).where(Business.license_id == license_id).values(license_id=None)
        )

    @staticmethod
    def _row_to_dict(row: Any) -> dict[str, Any]:
        mapping = row._asdict()
        business: Business = mapping.pop("Business")
        return to_dict(business, **mapping)


class BusinessHistoryRepository(BaseRepository[BusinessHistory]):
    """사업 이력 레포지토리 — Business history queries scoped to a business."""

    def __init__(self) -> None:
        super().__init__(BusinessHistory)

    async def get_by_business(
        self, db: AsyncSession, business_id: int
    ) -> list[BusinessHistory]:
        """사업의 이력 목록 — Live history entries of a business, newest first."""
        query: Select = self.live_query().where(BusinessHistory.business_id == business_id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_for_business(
        self, db: AsyncSession, business_id: int, history_id: int
    ) -> BusinessHistory | None:
        """사업에 속한 이력 단건 조회 — Entries of another business are not returned."""
        history: BusinessHistory | None = await self.get_by_id(db, history_id)
        if history is None or history.business_id != business_id:
            return None
        return history


business_repository = BusinessRepository()
business_history_repository = BusinessHistoryRepository()
