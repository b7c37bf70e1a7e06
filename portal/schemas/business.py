"""사업 및 사업 이력 관련 Pydantic 요청/응답 스키마 정의.

Business and business-history Pydantic request/response schema definitions.
"""

from pydantic import BaseModel

from portal.schemas.common import PartialUpdate, TimestampedResponse


# === 사업 (Business) 스키마 ===

class BusinessCreate(BaseModel):
    """사업 생성 요청 스키마.

    Business creation request schema.

    Attributes:
        name: 사업 이름 (Business name)
        issued: 시작일 (Start date, YYYY-MM-DD)
        expired: 종료일 (End date, YYYY-MM-DD)
        customer_id: 고객 ID (Customer identifier)
        manager_id: 담당자 사용자 ID (Identity-provider user id)
        product_id: 제품 ID (Product identifier)
    """

    name: str  # 사업 이름 (Business name)
    issued: str = ""  # 시작일 (Start date)
    expired: str = ""  # 종료일 (End date)
    license_id: int | None = None  # 연결할 라이센스 ID (License to link, optional)
    customer_id: int | None = None  # 고객 ID (Customer identifier)
    manager_id: str = ""  # 담당자 사용자 ID (Manager user id)
    status: str = ""  # 진행 상태 — 자유 문자열 (Free-form status)
    core_cnt: int = 0  # CPU 코어 수 (Licensed core count)
    node_cnt: int = 0  # 노드 수 (Licensed node count)
    product_id: int | None = None  # 제품 ID (Product identifier)
    details: str | None = None  # 상세 내용 (Free-form details)


class BusinessUpdate(PartialUpdate):
    """사업 수정 요청 스키마 (부분 업데이트).

    Business update request schema (partial update, unset fields are kept).
    ``license_id: null`` unlinks the current license.
    """

    not_nullable = frozenset({"name", "issued", "expired", "status", "core_cnt", "node_cnt", "manager_id"})

    name: str | None = None
    issued: str | None = None
    expired: str | None = None
    license_id: int | None = None
    customer_id: int | None = None
    manager_id: str | None = None
    status: str | None = None
    core_cnt: int | None = None
    node_cnt: int | None = None
    product_id: int | None = None
    details: str | None = None


class RegisterLicenseRequest(BaseModel):
    """사업-라이센스 연결 요청 스키마 — Link a license to a business."""

    license_id: int  # 연결할 라이센스 ID (License identifier)


class BusinessResponse(TimestampedResponse):
    """사업 응답 스키마.

    Business response schema. List rows carry the joined customer and product
    display fields; the detail view also carries the linked license fields.
    """

    name: str
    issued: str
    expired: str
    license_id: int | None = None
    customer_id: int | None = None
    status: str
    core_cnt: int
    node_cnt: int
    manager_id: str
    product_id: int | None = None
    details: str | None = None
    customer_name: str | None = None  # 고객 이름 — 조인된 값 (Customer name, resolved)
    product_name: str | None = None  # 제품 이름 — 조인된 값 (Product name, resolved)
    product_version: str | None = None  # 제품 버전 — 조인된 값 (Product version, resolved)


class BusinessDetailResponse(BusinessResponse):
    """사업 상세 응답 스키마 — 연결된 라이센스 정보 포함.

    Business detail response; license fields are null when the license has
    been removed.
    """

    license_key: str | None = None
    license_status: str | None = None
    license_issued: str | None = None
    license_expired: str | None = None
    license_trial: bool | None = None


# === 사업 이력 (Business History) 스키마 ===

class BusinessHistoryCreate(BaseModel):
    """사업 이력 생성 요청 스키마.

    Business history creation request schema. ``business_id`` comes from the
    URL path.
    """

    issue: str | None = None  # 이슈 내용 (Reported issue)
    solution: str | None = None  # 조치 내용 (Applied solution)
    status: str = ""  # 처리 상태 (Handling status)
    manager: str = ""  # 처리 담당자 (Handler name)
    issued: str = ""  # 접수일 (Date reported)
    started: str = ""  # 처리 시작일 (Date work started)
    ended: str = ""  # 처리 종료일 (Date work ended)
    note: str | None = None  # 비고 (Note)


class BusinessHistoryUpdate(PartialUpdate):
    """사업 이력 수정 요청 스키마 (부분 업데이트)."""

    not_nullable = frozenset({"status", "manager", "issued", "started", "ended"})

    issue: str | None = None
    solution: str | None = None
    status: str | None = None
    manager: str | None = None
    issued: str | None = None
    started: str | None = None
    ended: str | None = None
    note: str | None = None


class BusinessHistoryResponse(TimestampedResponse):
    """사업 이력 응답 스키마 — Business history response schema."""

    business_id: int
    issue: str | None = None
    solution: str | None = None
    status: str
    manager: str
    issued: str
    started: str
    ended: str
    note: str | None = None
