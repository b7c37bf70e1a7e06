"""게이트웨이 파트너 라우터 — Gateway Partner Router (plain proxy)."""

from typing import Annotated, Any

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from portal.config import settings
from portal.gateway.deps import Downstream, JsonBody
from portal.gateway.responses import item_body, list_body, message_body

router: APIRouter = APIRouter()


def _partner_url(*parts: Any) -> str:
    return "/".join([f"{settings.PARTNER_API_URL}/partner", *map(str, parts)])


@router.get("")
async def list_partners(
    downstream: Downstream,
    page: int = 1,
    limit: int = 10,
    level: str | None = None,
    name: str | None = None,
    partner_id: Annotated[int | None, Query(alias="id")] = None,
) -> dict[str, Any]:
    data = await downstream.get(
        _partner_url(),
        fallback="파트너 조회에 실패했습니다.",
        params={"page": page, "limit": limit, "level": level, "name": name, "id": partner_id},
    )
    return list_body(data.get("items") or [], data, page, limit)


@router.post("")
async def create_partner(downstream: Downstream, body: JsonBody) -> JSONResponse:
    data = await downstream.post(_partner_url(), fallback="파트너 생성에 실패했습니다.", json=body)
    return JSONResponse(status_code=201, content=item_body(data, 201))


@router.get("/{partner_id}")
async def get_partner(partner_id: int, downstream: Downstream) -> dict[str, Any]:
    data = await downstream.get(_partner_url(partner_id), fallback="파트너를 찾을 수 없습니다.")
    return item_body(data)


@router.put("/{partner_id}")
async def update_partner(partner_id: int, downstream: Downstream, body: JsonBody) -> dict[str, Any]:
    data = await downstream.put(
        _partner_url(partner_id), fallback="파트너 수정 중 오류가 발생했습니다.", json=body
    )
    return item_body(data)


@router.delete("/{partner_id}")
async def delete_partner(partner_id: int, downstream: Downstream) -> dict[str, Any]:
    await downstream.delete(_partner_url(partner_id), fallback="파트너 삭제 중 오류가 발생했습니다.")
    return message_body("파트너가 삭제되었습니다.")
