"""게이트웨이 라이센스 라우터 — 라이센스 목록 결합, 승인 및 프록시.

Gateway License Router — License list with issuer enrichment, approval on
behalf of the caller, and proxies for detail and writes.
"""

from typing import Any

import structlog
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from portal.config import settings
from portal.gateway.deps import AccessToken, Downstream, Identity, JsonBody
from portal.gateway.enrichment import company_filter, enrich_with_users
from portal.gateway.errors import IdentityProviderError
from portal.gateway.responses import item_body, list_body, message_body

logger = structlog.get_logger(__name__)

router: APIRouter = APIRouter()


def _license_url(*parts: Any) -> str:
    return "/".join([f"{settings.LICENSE_API_URL}/license", *map(str, parts)])


@router.get("")
async def list_licenses(
    downstream: Downstream,
    identity: Identity,
    token: AccessToken,
    page: int = 1,
    limit: int = 10,
    license_key: str | None = None,
    business_name: str | None = None,
    trial: bool | None = None,
    company_id: int | None = None,
    role: str | None = None,
) -> dict[str, Any]:
    """라이센스 목록을 조회합니다.

    List licenses with ``issued_*`` fields of the issuing user joined in.
    With ``role`` a partner caller only sees its own company's licenses.
    """
    company: int | str | None = company_id
    if role:
        company = company_filter(await identity.get_current_user(token)) or company_id

    data = await downstream.get(
        _license_url(),
        fallback="라이센스 조회에 실패했습니다.",
        params={
            "page": page,
            "limit": limit,
            "license_key": license_key,
            "business_name": business_name,
            "trial": trial,
            "company_id": company,
        },
    )
    items = await enrich_with_users(
        data.get("items") or [], identity, downstream, id_field="issued_id", prefix="issued"
    )
    logger.info("license_list", page=page, rows=len(items), company_id=company)
    return list_body(items, data, page, limit)


@router.post("")
async def create_license(downstream: Downstream, body: JsonBody) -> JSONResponse:
    data = await downstream.post(_license_url(), fallback="라이센스 생성에 실패했습니다.", json=body)
    return JSONResponse(status_code=201, content=item_body(data, 201))


@router.get("/{license_id}")
async def get_license(license_id: int, downstream: Downstream) -> dict[str, Any]:
    data = await downstream.get(_license_url(license_id), fallback="라이센스를 찾을 수 없습니다.")
    return item_body(data)


@router.put("/{license_id}")
async def update_license(license_id: int, downstream: Downstream, body: JsonBody) -> dict[str, Any]:
    data = await downstream.put(
        _license_url(license_id), fallback="라이센스 수정 중 오류가 발생했습니다.", json=body
    )
    return item_body(data)


@router.put("/{license_id}/approve")
async def approve_license(
    license_id: int,
    downstream: Downstream,
    identity: Identity,
    token: AccessToken,
) -> dict[str, Any]:
    """라이센스를 승인합니다 — 승인자는 호출자의 사용자 이름.

    Approve a license in the caller's name.
    """
    current_user = await identity.get_current_user(token)
    username = current_user.get("username")
    if not username:
        raise IdentityProviderError()
    data = await downstream.put(
        _license_url(license_id, "approve"),
        fallback="라이센스 승인 중 오류가 발생했습니다.",
        json={"approve_user": username},
    )
    logger.info("license_approved", license_id=license_id, approve_user=username)
    return item_body(data)


@router.delete("/{license_id}")
async def delete_license(license_id: int, downstream: Downstream) -> dict[str, Any]:
    await downstream.delete(_license_url(license_id), fallback="라이센스 삭제 중 오류가 발생했습니다.")
    return message_body("라이센스가 삭제되었습니다.")
