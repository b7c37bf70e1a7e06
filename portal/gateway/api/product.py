"""게이트웨이 제품 라우터 — 제품 프록시 및 제품별 릴리즈 목록.

Gateway Product Router — Proxies for products, their categories, their
enable/disable toggles and the release notes of a product.
"""

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from portal.config import settings
from portal.gateway.deps import Downstream, JsonBody
from portal.gateway.responses import item_body, list_body, message_body

router: APIRouter = APIRouter()


def _product_url(*parts: Any) -> str:
    return "/".join([f"{settings.PRODUCT_API_URL}/product", *map(str, parts)])


@router.get("")
async def list_products(
    downstream: Downstream,
    page: int = 1,
    limit: int = 10,
    name: str | None = None,
    enabled: bool | None = None,
    category_id: int | None = None,
) -> dict[str, Any]:
    data = await downstream.get(
        _product_url(),
        fallback="제품 조회에 실패했습니다.",
        params={
            "page": page,
            "limit": limit,
            "name": name,
            "enabled": enabled,
            "category_id": category_id,
        },
    )
    return list_body(data.get("items") or [], data, page, limit)


# /category 는 /{product_id} 보다 먼저 등록 (must precede the id routes)
@router.get("/category")
async def list_categories(
    downstream: Downstream,
    page: int = 1,
    limit: int = 10,
    name: str | None = None,
) -> dict[str, Any]:
    """제품 카테고리 목록 — Enabled product categories."""
    data = await downstream.get(
        _product_url("category"),
        fallback="제품 카테고리 조회에 실패했습니다.",
        params={"page": page, "limit": limit, "name": name},
    )
    return list_body(data.get("items") or [], data, page, limit)


@router.post("")
async def create_product(downstream: Downstream, body: JsonBody) -> JSONResponse:
    data = await downstream.post(_product_url(), fallback="제품 생성에 실패했습니다.", json=body)
    return JSONResponse(status_code=201, content=item_body(data, 201))


@router.get("/{product_id}")
async def get_product(product_id: int, downstream: Downstream) -> dict[str, Any]:
    data = await downstream.get(_product_url(product_id), fallback="제품을 찾을 수 없습니다.")
    return item_body(data)


@router.put("/{product_id}")
async def update_product(product_id: int, downstream: Downstream, body: JsonBody) -> dict[str, Any]:
    data = await downstream.put(
        _product_url(product_id), fallback="제품 수정 중 오류가 발생했습니다.", json=body
    )
    return item_body(data)


@router.put("/{product_id}/enabled")
async def enable_product(product_id: int, downstream: Downstream) -> dict[str, Any]:
    data = await downstream.put(
        _product_url(product_id, "enabled"), fallback="제품 활성화 중 오류가 발생했습니다."
    )
    return item_body(data)


@router.put("/{product_id}/disabled")
async def disable_product(product_id: int, downstream: Downstream) -> dict[str, Any]:
    data = await downstream.put(
        _product_url(product_id, "disabled"), fallback="제품 비활성화 중 오류가 발생했습니다."
    )
    return item_body(data)


@router.get("/{product_id}/release")
async def list_product_releases(
    product_id: int,
    downstream: Downstream,
    page: int = 1,
    limit: int = 10,
) -> dict[str, Any]:
    """제품의 릴리즈 노트 목록 — Enabled release notes of a product."""
    data = await downstream.get(
        f"{settings.PRODUCT_API_URL}/release",
        fallback="릴리즈 조회에 실패했습니다.",
        params={"page": page, "limit": limit, "product_id": product_id},
    )
    return list_body(data.get("items") or [], data, page, limit)


@router.delete("/{product_id}")
async def delete_product(product_id: int, downstream: Downstream) -> dict[str, Any]:
    await downstream.delete(_product_url(product_id), fallback="제품 삭제 중 오류가 발생했습니다.")
    return message_body("제품이 삭제되었습니다.")
