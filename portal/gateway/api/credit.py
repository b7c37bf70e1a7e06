"""게이트웨이 크레딧 라우터 — 크레딧 목록 범위 제한 및 프록시.

Gateway Credit Router — Credit list narrowed to the caller's partner on
request, plus proxies for detail and writes.
"""

from typing import Any

import structlog
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from portal.config import settings
from portal.gateway.deps import AccessToken, Downstream, Identity, JsonBody
from portal.gateway.enrichment import company_filter
from portal.gateway.responses import item_body, list_body, message_body

logger = structlog.get_logger(__name__)

router: APIRouter = APIRouter()


def _credit_url(*parts: Any) -> str:
    return "/".join([f"{settings.API_URL}/credit", *map(str, parts)])


@router.get("")
async def list_credits(
    downstream: Downstream,
    identity: Identity,
    token: AccessToken,
    page: int = 1,
    limit: int = 10,
    type: str | None = None,
    partner: str | None = None,
    business: str | None = None,
    role: str | None = None,
) -> dict[str, Any]:
    """크레딧 목록을 조회합니다.

    With ``role`` a partner caller only sees its own partner's credit rows.
    """
    company = company_filter(await identity.get_current_user(token)) if role else None
    data = await downstream.get(
        _credit_url(),
        fallback="크레딧 조회에 실패했습니다.",
        params={
            "page": page,
            "limit": limit,
            "type": type,
            "partner": partner,
            "business": business,
            "company_id": company,
        },
    )
    logger.info("credit_list", page=page, company_id=company)
    return list_body(data.get("items") or [], data, page, limit)


@router.post("")
async def create_credit(downstream: Downstream, body: JsonBody) -> JSONResponse:
    data = await downstream.post(_credit_url(), fallback="크레딧 생성에 실패했습니다.", json=body)
    return JSONResponse(status_code=201, content=item_body(data, 201))


@router.get("/{credit_id}")
async def get_credit(credit_id: int, downstream: Downstream) -> dict[str, Any]:
    data = await downstream.get(_credit_url(credit_id), fallback="크레딧을 찾을 수 없습니다.")
    return item_body(data)


@router.put("/{credit_id}")
async def update_credit(credit_id: int, downstream: Downstream, body: JsonBody) -> dict[str, Any]:
    data = await downstream.put(
        _credit_url(credit_id), fallback="크레딧 수정 중 오류가 발생했습니다.", json=body
    )
    return item_body(data)


@router.delete("/{credit_id}")
async def delete_credit(credit_id: int, downstream: Downstream) -> dict[str, Any]:
    await downstream.delete(_credit_url(credit_id), fallback="크레딧 삭제 중 오류가 발생했습니다.")
    return message_body("크레딧이 삭제되었습니다.")
