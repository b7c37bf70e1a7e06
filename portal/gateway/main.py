"""게이트웨이 엔트리포인트 — 프론트엔드용 /api 집계 서버.

Gateway entry point — The front-end facing /api server. Proxies the backend
CRUD services and joins identity-provider users onto list rows.

Run:
    uvicorn portal.gateway.main:app --port 3000
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from portal.config import settings
from portal.gateway.api import gateway_router
from portal.gateway.errors import SERVER_ERROR_MESSAGE, GatewayError, gateway_error_handler
from portal.middleware.axiom_logging import AxiomLoggingMiddleware
from portal.utils.log_setup import configure_logging

configure_logging(settings.LOG_LEVEL, json_logs=not settings.DEBUG)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """공유 HTTP 클라이언트 수명 관리 — One pooled client for every downstream call."""
    app.state.http_client = httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)
    logger.info("gateway_started", name=settings.GATEWAY_NAME)
    try:
        yield
    finally:
        await app.state.http_client.aclose()


app: FastAPI = FastAPI(
    title=settings.GATEWAY_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(AxiomLoggingMiddleware, service=settings.GATEWAY_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(GatewayError, gateway_error_handler)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """예상하지 못한 오류 — Unexpected failures answer 500 with a generic message."""
    logger.error("unhandled_error", path=request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": SERVER_ERROR_MESSAGE},
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트 — Health check for load balancers."""
    return {"status": "ok"}


app.include_router(gateway_router, prefix="/api")
