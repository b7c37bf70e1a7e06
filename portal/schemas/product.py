"""제품 및 릴리즈 관련 Pydantic 요청/응답 스키마 정의.

Product category, product and release Pydantic request/response schema definitions.
"""

from pydantic import BaseModel

from portal.schemas.common import PartialUpdate, TimestampedResponse


# === 제품 카테고리 (Product category) 스키마 ===

class ProductCategoryCreate(BaseModel):
    """제품 카테고리 생성 요청 스키마 — Product category creation request."""

    name: str
    enabled: bool = True


class ProductCategoryResponse(TimestampedResponse):
    name: str
    enabled: bool


# === 제품 (Product) 스키마 ===

class ProductCreate(BaseModel):
    """제품 생성 요청 스키마.

    Product creation request schema.

    Attributes:
        name: 제품 이름 (Product name)
        version: 제품 버전 (Product version)
        iso_file_path: ISO 이미지 경로 (ISO image path)
        history: 변경 이력 (Change history text)
        category_id: 제품 카테고리 ID (Product category)
    """

    name: str
    category_id: int | None = None
    version: str = ""
    iso_file_path: str = ""
    history: str = ""
    enabled: bool = True  # 활성 여부 (Listed for download)


class ProductUpdate(PartialUpdate):
    """제품 수정 요청 스키마 (부분 업데이트)."""

    not_nullable = frozenset({"name", "version", "iso_file_path", "history", "enabled"})

    name: str | None = None
    category_id: int | None = None
    version: str | None = None
    iso_file_path: str | None = None
    history: str | None = None
    enabled: bool | None = None


class ProductResponse(TimestampedResponse):
    """제품 응답 스키마 — 카테고리 이름 포함 (with the category name)."""

    name: str
    category_id: int | None = None
    category_name: str | None = None
    version: str
    iso_file_path: str
    history: str
    enabled: bool


# === 릴리즈 (Release) 스키마 ===

class ReleaseCreate(BaseModel):
    """릴리즈 생성 요청 스키마 — 새 릴리즈는 항상 활성 상태.

    Release creation request schema. New releases are always enabled.
    """

    product_id: int | None = None  # 대상 제품 ID (Product identifier)
    version: str = ""  # 릴리즈 버전 (Release version)
    contents: str | None = None  # 릴리즈 노트 (Release notes)


class ReleaseUpdate(PartialUpdate):
    """릴리즈 수정 요청 스키마 (부분 업데이트)."""

    not_nullable = frozenset({"version"})

    product_id: int | None = None
    version: str | None = None
    contents: str | None = None


class ReleaseResponse(TimestampedResponse):
    """릴리즈 응답 스키마 — Release response schema."""

    product_id: int | None = None
    version: str
    contents: str | None = None
    enabled: bool
