"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures
for the backend CRUD service, plus a gateway client whose outbound HTTP goes
to an ``httpx.MockTransport`` instead of the network.
Each test gets a fresh schema.
"""

from collections.abc import AsyncGenerator
from typing import Any

import httpx
import jwt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from portal.config import settings
from portal.database import Base, get_db
from portal.gateway.deps import get_http_client
from portal.gateway.main import app as gateway_app
from portal.main import app
from portal.models import *  # noqa: F401,F403 — register all models with metadata

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 새 스키마를 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """백엔드 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 토큰 헬퍼
# ---------------------------------------------------------------------------
def make_token(sub: str = "user-1", roles: list[str] | None = None, **claims: Any) -> str:
    """테스트용 Bearer 토큰을 생성합니다 (realm 역할 포함)."""
    payload = {
        "sub": sub,
        "preferred_username": claims.pop("username", sub),
        "realm_access": {"roles": roles or []},
        **claims,
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


@pytest.fixture
def admin_token() -> str:
    return make_token("admin-1", roles=["Admin"], username="admin")


@pytest.fixture
def user_token() -> str:
    return make_token("user-1", roles=["User"], username="user01")


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def partner(db: AsyncSession):
    """테스트 파트너를 생성합니다."""
    from portal.models.partner import Partner
    p = Partner(name="Test Partner", telnum="02-000-0000", level="GOLD")
    db.add(p)
    await db.flush()
    await db.refresh(p)
    return p


@pytest_asyncio.fixture
async def customer(db: AsyncSession):
    """테스트 고객을 생성합니다."""
    from portal.models.partner import Customer
    c = Customer(name="Test Customer", telnum="02-111-1111", manager_id="user-1")
    db.add(c)
    await db.flush()
    await db.refresh(c)
    return c


@pytest_asyncio.fixture
async def product(db: AsyncSession):
    """테스트 제품을 생성합니다."""
    from portal.models.product import Product
    p = Product(name="ABLESTACK", version="4.0", iso_file_path="/iso/ablestack-4.0.iso")
    db.add(p)
    await db.flush()
    await db.refresh(p)
    return p


@pytest_asyncio.fixture
async def business(db: AsyncSession, customer, product):
    """테스트 사업을 생성합니다 (라이센스 없음)."""
    from portal.models.business import Business
    b = Business(
        name="Test Business",
        issued="2025-01-01",
        expired="2025-12-31",
        customer_id=customer.id,
        product_id=product.id,
        manager_id="user-1",
        status="진행중",
        core_cnt=16,
        node_cnt=3,
    )
    db.add(b)
    await db.flush()
    await db.refresh(b)
    return b


# ---------------------------------------------------------------------------
# 게이트웨이: 외부 HTTP 모킹
# ---------------------------------------------------------------------------
class FakeUpstream:
    """게이트웨이가 호출하는 외부 서비스 모의 객체.

    Records every outbound request and answers from ``routes``, keyed by
    ``(method, path)``. A route value is either a JSON-able body (answered
    with 200) or a callable taking the request and returning an
    ``httpx.Response``.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Any] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, body: Any) -> None:
        self.routes[(method, path)] = body

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"detail": "not mocked"})
        if callable(route):
            return route(request)
        return httpx.Response(200, json=route)


KEYCLOAK_REALM_PATH = f"/realms/{settings.KEYCLOAK_REALM}/protocol/openid-connect"
KEYCLOAK_USERS_PATH = f"/admin/realms/{settings.KEYCLOAK_REALM}/users"


def keycloak_user(user_id: str, username: str, user_type: str, company_id: str | None = None) -> dict:
    """Keycloak 사용자 표현을 생성합니다."""
    attributes: dict[str, list[str]] = {"type": [user_type]}
    if company_id is not None:
        attributes["company_id"] = [company_id]
    return {"id": user_id, "username": username, "attributes": attributes}


@pytest.fixture
def upstream() -> FakeUpstream:
    """client credentials 토큰 발급이 설정된 모의 외부 서비스."""
    fake = FakeUpstream()
    fake.add("POST", f"{KEYCLOAK_REALM_PATH}/token", {"access_token": "client-token"})
    return fake


@pytest_asyncio.fixture
async def gateway(upstream: FakeUpstream) -> AsyncGenerator[AsyncClient, None]:
    """게이트웨이 테스트 클라이언트 — 공유 HTTP 클라이언트를 모의 전송으로 교체합니다."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))
    gateway_app.dependency_overrides[get_http_client] = lambda: http

    transport = ASGITransport(app=gateway_app)
    async with AsyncClient(transport=transport, base_url="http://gateway") as ac:
        yield ac

    gateway_app.dependency_overrides.clear()
    await http.aclose()


def as_caller(upstream: FakeUpstream, user: dict) -> None:
    """userinfo 및 사용자 조회가 ``user``를 반환하도록 설정합니다."""
    upstream.add("GET", f"{KEYCLOAK_REALM_PATH}/userinfo", {"sub": user["id"]})
    upstream.add("GET", f"{KEYCLOAK_USERS_PATH}/{user['id']}", user)
