"""파트너 및 고객 관련 Pydantic 요청/응답 스키마 정의.

Partner and customer Pydantic request/response schema definitions.
"""

from typing import Literal

from pydantic import BaseModel

from portal.schemas.business import BusinessResponse
from portal.schemas.common import PartialUpdate, TimestampedResponse

# 파트너 등급 — Accepted partner levels
PartnerLevel = Literal["PLATINUM", "GOLD", "SILVER", "VAR", "VAD"]


# === 파트너 (Partner) 스키마 ===

class PartnerCreate(BaseModel):
    """파트너 생성 요청 스키마.

    Partner creation request schema.

    Attributes:
        name: 파트너사 이름 (Partner company name)
        telnum: 대표 전화번호 (Phone number)
        level: 파트너 등급 (Partner level, default GOLD)
    """

    name: str  # 파트너사 이름 (Partner name)
    telnum: str = ""  # 대표 전화번호 (Phone number)
    level: PartnerLevel = "GOLD"  # 파트너 등급 (Partner level)


class PartnerUpdate(PartialUpdate):
    """파트너 수정 요청 스키마 (부분 업데이트)."""

    not_nullable = frozenset({"name", "telnum", "level"})

    name: str | None = None
    telnum: str | None = None
    level: PartnerLevel | None = None


class PartnerResponse(TimestampedResponse):
    """파트너 응답 스키마 — Partner response schema."""

    name: str
    telnum: str
    level: str


# === 고객 (Customer) 스키마 ===

class CustomerCreate(BaseModel):
    """고객 생성 요청 스키마.

    Customer creation request schema.

    Attributes:
        name: 고객사 이름 (Customer name)
        telnum: 전화번호 (Phone number)
        manager_id: 담당자 사용자 ID (Identity-provider user id of the manager)
        manager_company_id: 담당자 소속 회사 ID (Company id of the manager)
    """

    name: str
    telnum: str = ""
    manager_id: str | None = None
    manager_company_id: str | None = None


class CustomerUpdate(PartialUpdate):
    """고객 수정 요청 스키마 (부분 업데이트)."""

    not_nullable = frozenset({"name", "telnum"})

    name: str | None = None
    telnum: str | None = None
    manager_id: str | None = None
    manager_company_id: str | None = None


class CustomerResponse(TimestampedResponse):
    """고객 응답 스키마 — Customer response schema."""

    name: str
    telnum: str
    manager_id: str | None = None
    manager_company_id: str | None = None


class CustomerDetailResponse(CustomerResponse):
    """고객 상세 응답 스키마 — 진행 중인 사업 목록 포함.

    Customer detail response including the customer's live businesses.
    """

    businesses: list[BusinessResponse] = []  # 고객의 사업 목록 (Customer's businesses)
