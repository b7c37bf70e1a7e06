"""파트너/고객 서비스 — 파트너 및 고객 CRUD 비즈니스 로직.

Partner and Customer Services — Business logic for partner companies and
end customers.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from portal.models.partner import Customer, Partner
from portal.repositories.business_repository import business_repository
from portal.repositories.partner_repository import customer_repository, partner_repository
from portal.schemas.business import BusinessResponse
from portal.schemas.partner import (
    CustomerCreate,
    CustomerDetailResponse,
    CustomerResponse,
    CustomerUpdate,
    PartnerCreate,
    PartnerResponse,
    PartnerUpdate,
)
from portal.utils.exceptions import NotFoundError
from portal.utils.pagination import Page, build_page


class PartnerService:
    """파트너 관련 비즈니스 로직을 처리하는 서비스.

    Service handling partner CRUD.
    """

    async def list_partners(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        level: str | None = None,
        name: str | None = None,
        partner_id: int | None = None,
    ) -> Page:
        """파트너 목록을 조회합니다 — Page of partners matching the filters."""
        partners, total = await partner_repository.get_list(
            db, page, per_page, level=level, name=name, partner_id=partner_id
        )
        items = [PartnerResponse.model_validate(p) for p in partners]
        return build_page(items, page, per_page, total)

    async def get_partner(self, db: AsyncSession, partner_id: int) -> PartnerResponse:
        """파트너 상세 조회.

        Raises:
            NotFoundError: 파트너가 없거나 삭제된 경우 (Missing or removed partner)
        """
        partner: Partner | None = await partner_repository.get_by_id(db, partner_id)
        if partner is None:
            raise NotFoundError(f"파트너 ID {partner_id}를 찾을 수 없습니다.")
        return PartnerResponse.model_validate(partner)

    async def create_partner(self, db: AsyncSession, data: PartnerCreate) -> PartnerResponse:
        partner: Partner = await partner_repository.create(db, data.model_dump())
        return PartnerResponse.model_validate(partner)

    async def update_partner(
        self, db: AsyncSession, partner_id: int, data: PartnerUpdate
    ) -> PartnerResponse:
        partner: Partner | None = await partner_repository.update(
            db, partner_id, data.changes()
        )
        if partner is None:
            raise NotFoundError(f"파트너 ID {partner_id}를 찾을 수 없습니다.")
        return PartnerResponse.model_validate(partner)

    async def delete_partner(self, db: AsyncSession, partner_id: int) -> None:
        if not await partner_repository.soft_delete(db, partner_id):
            raise NotFoundError(f"파트너 ID {partner_id}를 찾을 수 없습니다.")


class CustomerService:
    """고객 관련 비즈니스 로직을 처리하는 서비스.

    Service handling customer CRUD. The detail view includes the customer's
    live businesses.
    """

    async def list_customers(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        name: str | None = None,
        manager_id: str | None = None,
    ) -> Page:
        """고객 목록을 조회합니다 — Page of customers matching the filters."""
        customers, total = await customer_repository.get_list(
            db, page, per_page, name=name, manager_id=manager_id
        )
        items = [CustomerResponse.model_validate(c) for c in customers]
        return build_page(items, page, per_page, total)

    async def get_customer(self, db: AsyncSession, customer_id: int) -> CustomerDetailResponse:
        """고객 상세 정보를 사업 목록과 함께 조회합니다.

        Retrieve a customer with its businesses.

        Raises:
            NotFoundError: 고객이 없거나 삭제된 경우 (Missing or removed customer)
        """
        customer: Customer | None = await customer_repository.get_by_id(db, customer_id)
        if customer is None:
            raise NotFoundError(f"고객 ID {customer_id}를 찾을 수 없습니다.")

        businesses = await business_repository.get_by_customer(db, customer_id)
        response = CustomerDetailResponse.model_validate(customer)
        response.businesses = [BusinessResponse.model_validate(b) for b in businesses]
        return response

    async def create_customer(self, db: AsyncSession, data: CustomerCreate) -> CustomerResponse:
        customer: Customer = await customer_repository.create(db, data.model_dump())
        return CustomerResponse.model_validate(customer)

    async def update_customer(
        self, db: AsyncSession, customer_id: int, data: CustomerUpdate
    ) -> CustomerResponse:
        customer: Customer | None = await customer_repository.update(
            db, customer_id, data.changes()
        )
        if customer is None:
            raise NotFoundError(f"고객 ID {customer_id}를 찾을 수 없습니다.")
        return CustomerResponse.model_validate(customer)

    async def delete_customer(self, db: AsyncSession, customer_id: int) -> None:
        if not await customer_repository.soft_delete(db, customer_id):
            raise NotFoundError(f"고객 ID {customer_id}를 찾을 수 없습니다.")


partner_service = PartnerService()
customer_service = CustomerService()
