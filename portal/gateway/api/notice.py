"""게이트웨이 공지사항 라우터 — 공지사항 프록시.

Gateway Notice Router — Proxies for notices. With ``role`` a partner
caller only sees notices addressed to its partner level or to everyone.
"""

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from portal.config import settings
from portal.gateway.deps import AccessToken, Downstream, Identity, JsonBody
from portal.gateway.enrichment import company_filter
from portal.gateway.responses import item_body, list_body, message_body

router: APIRouter = APIRouter()


def _notice_url(*parts: Any) -> str:
    return "/".join([f"{settings.API_URL}/notice", *map(str, parts)])


@router.get("")
async def list_notices(
    downstream: Downstream,
    identity: Identity,
    token: AccessToken,
    page: int = 1,
    limit: int = 10,
    title: str | None = None,
    level: str | None = None,
    company_id: int | None = None,
    role: str | None = None,
) -> dict[str, Any]:
    company: int | str | None = company_id
    if role:
        company = company_filter(await identity.get_current_user(token)) or company_id

    data = await downstream.get(
        _notice_url(),
        fallback="공지사항 조회에 실패했습니다.",
        params={
            "page": page,
            "limit": limit,
            "title": title,
            "level": level,
            "company_id": company,
        },
    )
    return list_body(data.get("items") or [], data, page, limit)


@router.post("")
async def create_notice(downstream: Downstream, body: JsonBody) -> JSONResponse:
    data = await downstream.post(_notice_url(), fallback="공지사항 생성에 실패했습니다.", json=body)
    return JSONResponse(status_code=201, content=item_body(data, 201))


@router.get("/{notice_id}")
async def get_notice(notice_id: int, downstream: Downstream) -> dict[str, Any]:
    data = await downstream.get(_notice_url(notice_id), fallback="공지사항을 찾을 수 없습니다.")
    return item_body(data)


@router.put("/{notice_id}")
async def update_notice(notice_id: int, downstream: Downstream, body: JsonBody) -> dict[str, Any]:
    data = await downstream.put(
        _notice_url(notice_id), fallback="공지사항 수정 중 오류가 발생했습니다.", json=body
    )
    return item_body(data)


@router.delete("/{notice_id}")
async def delete_notice(notice_id: int, downstream: Downstream) -> dict[str, Any]:
    await downstream.delete(_notice_url(notice_id), fallback="공지사항 삭제 중 오류가 발생했습니다.")
    return message_body("공지사항이 삭제되었습니다.")
