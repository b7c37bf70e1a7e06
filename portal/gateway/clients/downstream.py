"""다운스트림 CRUD 서비스 클라이언트.

Downstream CRUD service client. Forwards the caller's bearer token and turns
every non-2xx answer or transport failure into a ``GatewayError`` so route
handlers only deal with successful payloads.
"""

from typing import Any

import httpx
import structlog

from portal.gateway.errors import GatewayError

logger = structlog.get_logger(__name__)

# 전체 조회 시 페이지 크기 — Page size used when walking every page of a list
FETCH_ALL_PAGE_SIZE: int = 100


def _error_message(response: httpx.Response, fallback: str) -> str:
    """다운스트림 에러 본문에서 메시지 추출 — ``detail``/``message`` or the fallback."""
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict):
        message = body.get("detail") or body.get("message")
        if isinstance(message, str) and message:
            return message
    return fallback


class DownstreamClient:
    """Bearer 토큰을 전달하는 다운스트림 서비스 클라이언트.

    Client for the backend CRUD services, bound to one caller's token.

    Attributes:
        http: 공유 httpx 비동기 클라이언트 (Shared async HTTP client)
        token: 호출자의 Bearer 토큰 (Caller's bearer token)
    """

    def __init__(self, http: httpx.AsyncClient, token: str) -> None:
        self.http = http
        self.token = token

    async def request(
        self,
        method: str,
        url: str,
        *,
        fallback: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """다운스트림 서비스를 호출하고 JSON 본문을 반환합니다.

        Call a downstream service and return its decoded JSON body (``None``
        for empty bodies such as 204).

        Args:
            method: HTTP 메서드 (HTTP method)
            url: 전체 URL (Absolute URL)
            fallback: 다운스트림이 사유를 주지 않을 때의 메시지
                      (Message used when the downstream gives no reason)
            params: 쿼리 파라미터, None 값은 제외 (Query params, None values dropped)
            json: 요청 본문 (JSON body)

        Raises:
            GatewayError: 다운스트림 상태 코드 또는 전송 실패 시 500
                          (Downstream status, or 500 on transport failure)
        """
        query = {k: v for k, v in (params or {}).items() if v is not None}
        try:
            response = await self.http.request(
                method,
                url,
                params=query,
                json=json,
                headers={"Authorization": f"Bearer {self.token}"},
            )
        except httpx.HTTPError as exc:
            logger.error("downstream_unreachable", method=method, url=url, error=str(exc))
            raise GatewayError(500, fallback) from exc

        if response.is_error:
            message = _error_message(response, fallback)
            logger.warning(
                "downstream_error",
                method=method,
                url=url,
                status_code=response.status_code,
                message=message,
            )
            raise GatewayError(response.status_code, message)

        logger.debug("downstream_ok", method=method, url=url, status_code=response.status_code)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise GatewayError(500, fallback) from exc

    async def get(self, url: str, *, fallback: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", url, fallback=fallback, params=params)

    async def post(self, url: str, *, fallback: str, json: Any = None) -> Any:
        return await self.request("POST", url, fallback=fallback, json=json)

    async def put(self, url: str, *, fallback: str, json: Any = None) -> Any:
        return await self.request("PUT", url, fallback=fallback, json=json)

    async def delete(self, url: str, *, fallback: str) -> Any:
        return await self.request("DELETE", url, fallback=fallback)

    async def get_all(
        self, url: str, *, fallback: str, params: dict[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """페이지 목록의 모든 항목을 모아 반환합니다.

        Walk every page of a paginated list endpoint and return all items.
        """
        items: list[dict[str, Any]] = []
        page = 1
        while True:
            body = await self.get(
                url,
                fallback=fallback,
                params={**(params or {}), "page": page, "limit": FETCH_ALL_PAGE_SIZE},
            )
            items.extend(body.get("items") or [])
            if page >= (body.get("totalPages") or 0):
                return items
            page += 1
