"""게이트웨이 기술지원 라우터 — 기술지원 목록 범위 제한 및 프록시.

Gateway Support Router — Support request list narrowed to the customers
the caller's company manages, plus proxies for detail and writes.
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


def _support_url(*parts: Any) -> str:
    return "/".join([f"{settings.API_URL}/support", *map(str, parts)])


@router.get("")
async def list_supports(
    downstream: Downstream,
    identity: Identity,
    token: AccessToken,
    page: int = 1,
    limit: int = 10,
    name: str | None = None,
    type: str | None = None,
    manager: str | None = None,
    status: str | None = None,
    role: str | None = None,
) -> dict[str, Any]:
    """기술지원 목록을 조회합니다.

    With ``role`` a partner caller only sees requests of customers its
    company manages.
    """
    company = company_filter(await identity.get_current_user(token)) if role else None
    data = await downstream.get(
        _support_url(),
        fallback="기술지원 조회에 실패했습니다.",
        params={
            "page": page,
            "limit": limit,
            "name": name,
            "type": type,
            "manager": manager,
            "status": status,
            "company_id": company,
        },
    )
    logger.info("support_list", page=page, company_id=company)
    return list_body(data.get("items") or [], data, page, limit)


@router.post("")
async def create_support(downstream: Downstream, body: JsonBody) -> JSONResponse:
    data = await downstream.post(_support_url(), fallback="기술지원 생성에 실패했습니다.", json=body)
    return JSONResponse(status_code=201, content=item_body(data, 201))


@router.get("/{support_id}")
async def get_support(support_id: int, downstream: Downstream) -> dict[str, Any]:
    data = await downstream.get(_support_url(support_id), fallback="기술지원을 찾을 수 없습니다.")
    return item_body(data)


@router.put("/{support_id}")
async def update_support(support_id: int, downstream: Downstream, body: JsonBody) -> dict[str, Any]:
    data = await downstream.put(
        _support_url(support_id), fallback="기술지원 수정 중 오류가 발생했습니다.", json=body
    )
    return item_body(data)


@router.delete("/{support_id}")
async def delete_support(support_id: int, downstream: Downstream) -> dict[str, Any]:
    await downstream.delete(_support_url(support_id), fallback="기술지원 삭제 중 오류가 발생했습니다.")
    return message_body("기술지원이 삭제되었습니다.")
