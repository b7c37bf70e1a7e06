"""크레딧 Pydantic 요청/응답 스키마 정의.

Credit Pydantic request/response schema definitions.
"""

from pydantic import BaseModel

from portal.schemas.common import PartialUpdate, TimestampedResponse


class CreditCreate(BaseModel):
    """크레딧 생성 요청 스키마.

    Credit creation request schema. A deposit row sets ``deposit``; a usage
    row sets ``credit`` and usually ``business_id``.
    """

    partner_id: int | None = None  # 파트너 ID (Partner identifier)
    business_id: int | None = None  # 사업 ID (Business identifier)
    deposit: int | None = None  # 예치 금액 (Deposited amount)
    credit: int | None = None  # 사용 크레딧 (Spent credit)
    note: str | None = None


class CreditUpdate(PartialUpdate):
    """크레딧 수정 요청 스키마 (부분 업데이트) — every column is nullable."""

    partner_id: int | None = None
    business_id: int | None = None
    deposit: int | None = None
    credit: int | None = None
    note: str | None = None


class CreditResponse(TimestampedResponse):
    """크레딧 응답 스키마 — 파트너/사업 이름 포함."""

    partner_id: int | None = None
    business_id: int | None = None
    deposit: int | None = None
    credit: int | None = None
    note: str | None = None
    partner_name: str | None = None  # 파트너 이름 — 조인된 값 (Partner name, resolved)
    business_name: str | None = None  # 사업 이름 — 조인된 값 (Business name, resolved)


class CreditDetailResponse(CreditResponse):
    """크레딧 상세 응답 스키마.

    ``deposit_use`` is true when the partner has other live credit rows,
    i.e. the deposit has already been drawn on.
    """

    deposit_use: bool = False
