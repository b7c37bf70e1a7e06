"""기술지원 Pydantic 요청/응답 스키마 정의.

Support Pydantic request/response schema definitions.
"""

from typing import Literal

from pydantic import BaseModel

from portal.schemas.common import PartialUpdate, TimestampedResponse

# 지원 유형 — Support request types
SupportType = Literal["poc", "consult", "technical", "other", "incident"]
# 조치 방법 — How the request was handled
ActionType = Literal["mail", "remote", "phone", "site"]
# 처리 상태 — Handling status
SupportStatus = Literal["processing", "complete"]


class SupportCreate(BaseModel):
    """기술지원 생성 요청 스키마.

    Support creation request schema.

    Attributes:
        customer_id: 고객 ID (Customer identifier)
        business_id: 관련 사업 ID (Related business)
        issued: 접수일 (Date reported, YYYY-MM-DD)
        actioned: 조치일 (Date handled, YYYY-MM-DD)
        manager: 처리 담당자 (Engineer handling the request)
    """

    customer_id: int | None = None
    business_id: int | None = None
    issued: str = ""
    type: SupportType = "consult"
    issue: str | None = None
    solution: str | None = None
    actioned: str = ""
    action_type: ActionType = "remote"
    manager: str = ""
    status: SupportStatus = "processing"
    requester: str = ""  # 요청자 (Requester name)
    requester_telnum: str = ""
    requester_email: str = ""
    note: str | None = None
    writer: str | None = None  # 작성자 (Author)


class SupportUpdate(PartialUpdate):
    """기술지원 수정 요청 스키마 (부분 업데이트)."""

    not_nullable = frozenset({
        "issued", "type", "actioned", "action_type", "manager", "status",
        "requester", "requester_telnum", "requester_email",
    })

    customer_id: int | None = None
    business_id: int | None = None
    issued: str | None = None
    type: SupportType | None = None
    issue: str | None = None
    solution: str | None = None
    actioned: str | None = None
    action_type: ActionType | None = None
    manager: str | None = None
    status: SupportStatus | None = None
    requester: str | None = None
    requester_telnum: str | None = None
    requester_email: str | None = None
    note: str | None = None
    writer: str | None = None


class SupportResponse(TimestampedResponse):
    """기술지원 응답 스키마 — 고객 이름 포함."""

    customer_id: int | None = None
    business_id: int | None = None
    issued: str
    type: str
    issue: str | None = None
    solution: str | None = None
    actioned: str
    action_type: str
    manager: str
    status: str
    requester: str
    requester_telnum: str
    requester_email: str
    note: str | None = None
    writer: str | None = None
    customer_name: str | None = None  # 고객 이름 — 조인된 값 (Customer name, resolved)


class SupportDetailResponse(SupportResponse):
    """기술지원 상세 응답 스키마 — 관련 사업 이름 포함."""

    business_name: str | None = None
