"""게이트웨이 고객 라우터 — 고객 목록 결합 및 고객 프록시.

Gateway Customer Router — Customer lists with manager enrichment and
company scoping, plus proxies for detail and writes.
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


def _customer_url(*parts: Any) -> str:
    return "/".join([f"{settings.PARTNER_API_URL}/customer", *map(str, parts)])


@router.get("")
async def list_customers(
    downstream: Downstream,
    identity: Identity,
    token: AccessToken,
    page: int = 1,
    limit: int = 10,
    name: str | None = None,
    role: str | None = None,
) -> dict[str, Any]:
    """고객 목록을 조회합니다.

    List customers with ``manager_*`` fields joined in; ``role`` limits the
    rows to the caller's company unless the caller is a vendor.
    """
    data = await downstream.get(
        _customer_url(),
        fallback="고객 조회에 실패했습니다.",
        params={"page": page, "limit": limit, "name": name},
    )
    items = await enrich_with_users(data.get("items") or [], identity, downstream)
    if role:
        items = scope_to_company(items, await identity.get_current_user(token))
    logger.info("customer_list", page=page, rows=len(items), scoped=bool(role))
    return list_body(items, data, page, limit)


@router.get("/forCreateBusiness")
async def list_customers_for_business(
    downstream: Downstream,
    identity: Identity,
    token: AccessToken,
    role: str | None = None,
) -> dict[str, Any]:
    """사업 등록용 고객 전체 목록 — Every customer, unpaginated, for the business form."""
    items = await downstream.get_all(_customer_url(), fallback="고객 조회에 실패했습니다.")
    items = await enrich_with_users(items, identity, downstream)
    if role:
        items = scope_to_company(items, await identity.get_current_user(token))
    return item_body(items)


@router.post("")
async def create_customer(downstream: Downstream, body: JsonBody) -> JSONResponse:
    data = await downstream.post(_customer_url(), fallback="고객 생성에 실패했습니다.", json=body)
    return JSONResponse(status_code=201, content=item_body(data, 201))


@router.get("/{customer_id}")
async def get_customer(customer_id: int, downstream: Downstream) -> dict[str, Any]:
    data = await downstream.get(_customer_url(customer_id), fallback="고객을 찾을 수 없습니다.")
    return item_body(data)


@router.put("/{customer_id}")
async def update_customer(customer_id: int, downstream: Downstream, body: JsonBody) -> dict[str, Any]:
    data = await downstream.put(
        _customer_url(customer_id), fallback="고객 수정 중 오류가 발생했습니다.", json=body
    )
    return item_body(data)


@router.delete("/{customer_id}")
async def delete_customer(customer_id: int, downstream: Downstream) -> dict[str, Any]:
    await downstream.delete(_customer_url(customer_id), fallback="고객 삭제 중 오류가 발생했습니다.")
    return message_body("고객이 삭제되었습니다.")
