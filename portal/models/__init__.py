"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the metadata, which
Alembic and ``Base.metadata.create_all`` rely on.

Modules:
    business: 사업 및 사업 이력 (Business, BusinessHistory)
    partner: 파트너 및 고객 (Partner, Customer)
    license: 라이센스 (License)
    product: 제품 카테고리, 제품 및 릴리즈 (ProductCategory, Product, Release)
    notice: 공지사항 (Notice)
    credit: 파트너 크레딧 (Credit)
    support: 기술지원 (Support)
"""

from portal.models.partner import Partner, Customer
from portal.models.product import ProductCategory, Product, Release
from portal.models.business import Business, BusinessHistory
from portal.models.license import License
from portal.models.notice import Notice
from portal.models.credit import Credit
from portal.models.support import Support

__all__ = [
    "Partner", "Customer",
    "ProductCategory", "Product", "Release",
    "Business", "BusinessHistory",
    "License",
    "Notice",
    "Credit",
    "Support",
]
