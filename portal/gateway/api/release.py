"""게이트웨이 릴리즈 라우터 — Gateway Release Router (plain proxy)."""

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from portal.config import settings
from portal.gateway.deps import Downstream, JsonBody
from portal.gateway.responses import item_body, list_body, message_body

router: APIRouter = APIRouter()


def _release_url(*parts: Any) -> str:
    return "/".join([f"{settings.PRODUCT_API_URL}/release", *map(str, parts)])


@router.get("")
async def list_releases(
    downstream: Downstream,
    page: int = 1,
    limit: int = 10,
    version: str | None = None,
    product_id: int | None = None,
) -> dict[str, Any]:
    data = await downstream.get(
        _release_url(),
        fallback="릴리즈 조회에 실패했습니다.",
        params={"page": page, "limit": limit, "version": version, "product_id": product_id},
    )
    return list_body(data.get("items") or [], data, page, limit)


@router.post("")
async def create_release(downstream: Downstream, body: JsonBody) -> JSONResponse:
    data = await downstream.post(_release_url(), fallback="릴리즈 생성에 실패했습니다.", json=body)
    return JSONResponse(status_code=201, content=item_body(data, 201))


@router.get("/{release_id}")
async def get_release(release_id: int, downstream: Downstream) -> dict[str, Any]:
    data = await downstream.get(_release_url(release_id), fallback="릴리즈를 찾을 수 없습니다.")
    return item_body(data)


@router.put("/{release_id}")
async def update_release(release_id: int, downstream: Downstream, body: JsonBody) -> dict[str, Any]:
    data = await downstream.put(
        _release_url(release_id), fallback="릴리즈 수정 중 오류가 발생했습니다.", json=body
    )
    return item_body(data)


@router.put("/{release_id}/disabled")
async def disable_release(release_id: int, downstream: Downstream) -> dict[str, Any]:
    data = await downstream.put(
        _release_url(release_id, "disabled"), fallback="릴리즈 비활성화 중 오류가 발생했습니다."
    )
    return item_body(data)


@router.delete("/{release_id}")
async def delete_release(release_id: int, downstream: Downstream) -> dict[str, Any]:
    await downstream.delete(_release_url(release_id), fallback="릴리즈 삭제 중 오류가 발생했습니다.")
    return message_body("릴리즈가 삭제되었습니다.")
