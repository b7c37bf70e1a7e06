"""백엔드 CRUD 서비스 엔트리포인트 — 미들웨어 및 라우터 등록.

Backend CRUD service entry point — Middleware and router registration.
Serves /business, /customer, /partner, /license, /product, /release and
/notice for the gateway.

Run:
    uvicorn portal.main:app --port 3001
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portal.api.crud import crud_router
from portal.config import settings
from portal.middleware.axiom_logging import AxiomLoggingMiddleware
from portal.utils.log_setup import configure_logging

configure_logging(settings.LOG_LEVEL, json_logs=not settings.DEBUG)

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Axiom API 로깅 미들웨어 — CORS보다 먼저 등록하여 모든 요청을 캡처
# (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트 — Health check for load balancers."""
    return {"status": "ok"}


app.include_router(crud_router)
