"""라이센스 관련 Pydantic 요청/응답 스키마 정의.

License Pydantic request/response schema definitions.
``issued`` and ``expired`` are rendered as ``YYYY-MM-DD``.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, field_serializer

from portal.schemas.common import PartialUpdate, TimestampedResponse
from portal.utils.dates import format_date, format_timestamp

# 라이센스 상태 — Accepted license statuses
LicenseStatus = Literal["active", "inactive", "expired"]


class LicenseCreate(BaseModel):
    """라이센스 생성 요청 스키마.

    License creation request schema. ``license_key`` is generated by the
    server; ``oem`` is derived from the partner name when it matches a known
    OEM partner.

    Attributes:
        issued: 발급일 (Issue date, ``0000-00-00`` when empty)
        expired: 만료일 (Expiry date, ``0000-00-00`` when empty)
        company_id: 발급 대상 파트너 ID (Partner identifier)
        business_id: 연결할 사업 ID (Business to link, optional)
        issued_id: 발급자 사용자 ID (Issuer user id)
    """

    issued: str | None = None
    expired: str | None = None
    status: LicenseStatus = "active"  # 상태 (License status)
    company_id: int | None = None
    business_id: int | None = None
    issued_id: str | None = None
    approve_user: str | None = None
    trial: bool = False  # 체험판 여부 (Trial license flag)
    oem: str | None = None  # OEM 구분 — 비어 있으면 null (OEM flavour, empty means none)


class LicenseUpdate(PartialUpdate):
    """라이센스 수정 요청 스키마 (부분 업데이트).

    License update request schema. Empty or null ``issued``/``expired``
    values keep the stored dates; ``business_id: null`` unlinks the business.
    """

    not_nullable = frozenset({"status", "trial"})

    issued: str | None = None
    expired: str | None = None
    status: LicenseStatus | None = None
    company_id: int | None = None
    business_id: int | None = None
    issued_id: str | None = None
    approve_user: str | None = None
    trial: bool | None = None
    oem: str | None = None


class LicenseApproveRequest(BaseModel):
    """라이센스 승인 요청 스키마 — Approve a license as ``approve_user``."""

    approve_user: str  # 승인자 이름 (Approver username)


class LicenseResponse(TimestampedResponse):
    """라이센스 응답 스키마.

    License response schema. List rows carry the joined business and product
    display fields.
    """

    license_key: str
    issued: str
    expired: str
    status: str
    company_id: int | None = None
    approve_user: str | None = None
    approved: datetime | None = None
    business_id: int | None = None
    issued_id: str | None = None
    trial: bool
    oem: str | None = None
    business_name: str | None = None  # 사업 이름 — 조인된 값 (Business name, resolved)
    product_name: str | None = None  # 제품 이름 — 조인된 값 (Product name, resolved)
    product_version: str | None = None  # 제품 버전 — 조인된 값 (Product version, resolved)

    @field_serializer("issued", "expired")
    def _render_date(self, value: str) -> str:
        return format_date(value)

    @field_serializer("approved")
    def _render_approved(self, value: datetime | None) -> str | None:
        return format_timestamp(value)


class LicenseDetailResponse(LicenseResponse):
    """라이센스 상세 응답 스키마 — 발급 대상 파트너 정보 포함.

    License detail response including the partner company fields.
    """

    company_name: str | None = None
    company_telnum: str | None = None
    company_level: str | None = None
    product_id: int | None = None
