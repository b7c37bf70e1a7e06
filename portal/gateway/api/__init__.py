"""게이트웨이 API 라우터 패키지 — 모든 /api 엔드포인트 통합.

Gateway API Router package — Aggregates the front-end facing endpoints.

Included routers:
    - business: 사업 및 사업 이력 (Businesses and history, enriched with managers)
    - customer: 고객 (Customers, enriched with managers)
    - partner: 파트너 (Partners)
    - license: 라이센스 (Licenses, enriched with issuers)
    - product: 제품 (Products and their releases)
    - release: 릴리즈 노트 (Release notes)
    - notice: 공지사항 (Notices)
    - credit: 파트너 크레딧 (Partner credit, scoped to the caller)
    - support: 기술지원 (Support requests, scoped to the caller)
    - user: 담당자 후보 사용자 (Identity-provider users for manager pickers)
"""

from fastapi import APIRouter

from portal.gateway.api.business import router as business_router
from portal.gateway.api.credit import router as credit_router
from portal.gateway.api.customer import router as customer_router
from portal.gateway.api.license import router as license_router
from portal.gateway.api.notice import router as notice_router
from portal.gateway.api.partner import router as partner_router
from portal.gateway.api.product import router as product_router
from portal.gateway.api.release import router as release_router
from portal.gateway.api.support import router as support_router
from portal.gateway.api.user import router as user_router

gateway_router: APIRouter = APIRouter()

gateway_router.include_router(business_router, prefix="/business", tags=["Business"])
gateway_router.include_router(customer_router, prefix="/customer", tags=["Customer"])
gateway_router.include_router(partner_router, prefix="/partner", tags=["Partner"])
gateway_router.include_router(license_router, prefix="/license", tags=["License"])
gateway_router.include_router(product_router, prefix="/product", tags=["Product"])
gateway_router.include_router(release_router, prefix="/release", tags=["Release"])
gateway_router.include_router(notice_router, prefix="/notice", tags=["Notice"])
gateway_router.include_router(credit_router, prefix="/credit", tags=["Credit"])
gateway_router.include_router(support_router, prefix="/support", tags=["Support"])
gateway_router.include_router(user_router, prefix="/user", tags=["User"])
