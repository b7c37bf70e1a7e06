"""요청 로깅 미들웨어 — structlog 접근 로그 및 Axiom 전송.

Request logging middleware shared by the backend service and the gateway.
Every request produces one ``request_completed`` structlog event; when Axiom
is configured the same event is also ingested into the Axiom dataset.
Sensitive fields (password, token, secret) are masked before sending.

Event fields:
    service, method, path, status_code, duration_ms,
    query_params, request_body (masked), error (for 4xx/5xx)
"""

import json
import re
import time
from typing import Any

import structlog
from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from portal.config import settings

logger = structlog.get_logger(__name__)

# 마스킹 대상 키 — Keys whose values never leave the process
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Health and docs endpoints
_SKIP_PATHS = frozenset({"/health", "/docs", "/redoc", "/openapi.json"})

_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})
_MAX_DEPTH = 5
_MAX_ITEMS = 20
_MAX_ERROR_LEN = 500


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드를 재귀적으로 ``***`` 처리합니다.

    Replace the values of sensitive keys with ``***`` in nested dicts and
    lists. Deep structures are cut at five levels, lists at twenty items.
    """
    if depth > _MAX_DEPTH:
        return "..."
    if isinstance(data, dict):
        masked: dict[Any, Any] = {}
        for key, value in data.items():
            if _SENSITIVE_KEYS.search(str(key)):
                masked[key] = "***"
            else:
                masked[key] = mask_sensitive(value, depth + 1)
        return masked
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:_MAX_ITEMS]]
    return data


def _error_detail(body: bytes) -> str:
    """에러 본문의 사유 — ``detail`` (backend) or ``message`` (gateway)."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:_MAX_ERROR_LEN]
    reason = data.get("detail") or data.get("message") or data if isinstance(data, dict) else data
    return str(reason)[:_MAX_ERROR_LEN]


async def _request_payload(request: Request) -> Any:
    if request.method not in _BODY_METHODS:
        return None
    raw = await request.body()
    if not raw:
        return None
    try:
        return mask_sensitive(json.loads(raw))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(non-json body)"


async def _buffer_error(response: Response) -> tuple[Response, str]:
    """에러 응답 본문을 읽고 같은 내용의 응답으로 교체합니다.

    Drain a streaming error response, returning an equivalent buffered
    response together with the extracted reason.
    """
    chunks: list[bytes] = []
    async for chunk in response.body_iterator:
        chunks.append(chunk if isinstance(chunk, bytes) else chunk.encode("utf-8"))
    body = b"".join(chunks)
    buffered = Response(
        content=body,
        status_code=response.status_code,
        headers=dict(response.headers),
        media_type=response.media_type,
    )
    return buffered, _error_detail(body)


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """요청 단위 접근 로그 미들웨어.

    Access-log middleware. Emits one structlog event per request and ships
    it to Axiom when ``AXIOM_API_TOKEN`` and ``AXIOM_DATASET`` are set.

    Args:
        app: ASGI 애플리케이션 (Wrapped ASGI app)
        service: 로그에 남길 서비스 이름 (Service name recorded on each event)
    """

    def __init__(self, app: Any, service: str | None = None) -> None:
        super().__init__(app)
        self.service: str = service or settings.APP_NAME
        self.dataset: str = settings.AXIOM_DATASET
        self.axiom: AxiomClient | None = (
            AxiomClient(token=settings.AXIOM_API_TOKEN)
            if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET
            else None
        )

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        event: dict[str, Any] = {
            "service": self.service,
            "method": request.method,
            "path": request.url.path,
            "status_code": 500,
        }
        if request.query_params:
            event["query_params"] = mask_sensitive(dict(request.query_params))
        payload = await _request_payload(request)
        if payload is not None:
            event["request_body"] = payload

        try:
            response = await call_next(request)
            event["status_code"] = response.status_code
            if response.status_code >= 400:
                response, event["error"] = await _buffer_error(response)
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            self._emit(event)

        return response

    def _emit(self, event: dict[str, Any]) -> None:
        log = logger.warning if event["status_code"] >= 500 else logger.info
        log("request_completed", **event)
        if self.axiom is None:
            return
        try:
            self.axiom.ingest_events(self.dataset, [event])
        except Exception:
            # Axiom 전송 실패는 응답에 영향 없음 (Ingest failures never fail the request)
            logger.warning("axiom_ingest_failed", path=event["path"], exc_info=True)
