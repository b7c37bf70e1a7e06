"""CRUD API 라우터 패키지 — 모든 백엔드 엔드포인트 통합.

CRUD API Router package — Aggregates the backend service endpoints into a
single router for inclusion in the FastAPI application.

Included routers:
    - business: 사업 및 사업 이력 (Businesses and their history)
    - customer: 고객 (Customers)
    - partner: 파트너 (Partners)
    - license: 라이센스 (Licenses)
    - product: 제품 (Products)
    - release: 릴리즈 노트 (Release notes)
    - notice: 공지사항 (Notices)
    - credit: 파트너 크레딧 (Partner credit)
    - support: 기술지원 (Support requests)
"""

from fastapi import APIRouter

from portal.api.crud.business import router as business_router
from portal.api.crud.credit import router as credit_router
from portal.api.crud.customer import router as customer_router
from portal.api.crud.license import router as license_router
from portal.api.crud.notice import router as notice_router
from portal.api.crud.partner import router as partner_router
from portal.api.crud.product import router as product_router
from portal.api.crud.release import router as release_router
from portal.api.crud.support import router as support_router

crud_router: APIRouter = APIRouter()

crud_router.include_router(business_router, prefix="/business", tags=["Business"])
crud_router.include_router(customer_router, prefix="/customer", tags=["Customer"])
crud_router.include_router(partner_router, prefix="/partner", tags=["Partner"])
crud_router.include_router(license_router, prefix="/license", tags=["License"])
crud_router.include_router(product_router, prefix="/product", tags=["Product"])
crud_router.include_router(release_router, prefix="/release", tags=["Release"])
crud_router.include_router(notice_router, prefix="/notice", tags=["Notice"])
crud_router.include_router(credit_router, prefix="/credit", tags=["Credit"])
crud_router.include_router(support_router, prefix="/support", tags=["Support"])
