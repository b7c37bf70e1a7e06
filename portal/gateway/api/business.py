"""게이트웨이 사업 라우터 — 사업 목록 결합 및 사업/이력 프록시.

Gateway Business Router — Business list with manager enrichment and
company scoping, plus proxies for business detail, writes and history.
"""

from typing import Any

import structlog
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from portal.config import settings
from portal.gateway.deps import AccessToken, Downstream, Identity, JsonBody
from portal.gateway.enrichment import enrich_with_users, scope_to_company
from portal.gateway.responses import item_body, list_body, message_body

logger = structlog.get_logger(__name__)

router: APIRouter = APIRouter()


def _business_url(*parts: Any) -> str:
    return "/".join([f"{settings.BUSINESS_API_URL}/business", *map(str, parts)])


def _history_url(business_id: int, *parts: Any) -> str:
    return "/".join([f"{settings.API_URL}/business/{business_id}/history", *map(str, parts)])


@router.get("")
async def list_businesses(
    downstream: Downstream,
    identity: Identity,
    token: AccessToken,
    page: int = 1,
    limit: int = 10,
    name: str | None = None,
    available: bool | None = None,
    role: str | None = None,
) -> dict[str, Any]:
    """사업 목록을 조회합니다.

    List businesses with ``manager_*`` fields joined in. With ``role`` the
    rows are limited to the caller's company unless the caller is a vendor.
    """
    data = await downstream.get(
        _business_url(),
        fallback="사업 조회에 실패했습니다.",
        params={"page": page, "limit": limit, "name": name, "available": available},
    )
    items = await enrich_with_users(data.get("items") or [], identity, downstream)
    if role:
        current_user = await identity.get_current_user(token)
        items = scope_to_company(items, current_user)
    logger.info("business_list", page=page, rows=len(items), scoped=bool(role))
    return list_body(items, data, page, limit)


@router.post("")
async def create_business(
    downstream: Downstream,
    body: JsonBody,
) -> JSONResponse:
    data = await downstream.post(
        _business_url(), fallback="사업 생성에 실패했습니다.", json=body
    )
    return JSONResponse(status_code=201, content=item_body(data, 201))


@router.get("/{business_id}")
async def get_business(business_id: int, downstream: Downstream) -> dict[str, Any]:
    data = await downstream.get(
        _business_url(business_id), fallback="사업을 찾을 수 없습니다."
    )
    return item_body(data)


@router.put("/{business_id}")
async def update_business(
    business_id: int,
    downstream: Downstream,
    body: JsonBody,
) -> dict[str, Any]:
    data = await downstream.put(
        _business_url(business_id), fallback="사업 수정 중 오류가 발생했습니다.", json=body
    )
    return item_body(data)


@router.delete("/{business_id}")
async def delete_business(business_id: int, downstream: Downstream) -> dict[str, Any]:
    """사업을 삭제합니다 — 다운스트림 실패 상태를 그대로 전달.

    Delete a business; downstream failures keep their status and message.
    """
    await downstream.delete(_business_url(business_id), fallback="사업 삭제 중 오류가 발생했습니다.")
    return message_body("사업이 삭제되었습니다.")


# === 사업 이력 (Business History) ===

@router.get("/{business_id}/history")
async def list_history(business_id: int, downstream: Downstream) -> dict[str, Any]:
    data = await downstream.get(
        _history_url(business_id), fallback="사업 히스토리 조회에 실패했습니다."
    )
    return item_body(data or [])


@router.post("/{business_id}/history")
async def create_history(
    business_id: int,
    downstream: Downstream,
    body: JsonBody,
) -> JSONResponse:
    data = await downstream.post(
        _history_url(business_id), fallback="사업 히스토리 생성에 실패했습니다.", json=body
    )
    return JSONResponse(status_code=201, content=item_body(data, 201))


@router.get("/{business_id}/history/{history_id}")
async def get_history(business_id: int, history_id: int, downstream: Downstream) -> dict[str, Any]:
    data = await downstream.get(
        _history_url(business_id, history_id), fallback="사업 히스토리를 찾을 수 없습니다."
    )
    return item_body(data)


@router.put("/{business_id}/history/{history_id}")
async def update_history(
    business_id: int,
    history_id: int,
    downstream: Downstream,
    body: JsonBody,
) -> dict[str, Any]:
    data = await downstream.put(
        _history_url(business_id, history_id),
        fallback="사업 히스토리 수정 중 오류가 발생했습니다.",
        json=body,
    )
    return item_body(data)


@router.delete("/{business_id}/history/{history_id}")
async def delete_history(business_id: int, history_id: int, downstream: Downstream) -> dict[str, Any]:
    await downstream.delete(
        _history_url(business_id, history_id),
        fallback="사업 히스토리 삭제 중 오류가 발생했습니다.",
    )
    return message_body("사업 히스토리가 삭제되었습니다.")
