"""데이터베이스 엔진 및 세션 설정 모듈.

Async SQLAlchemy engine, session factory and declarative base for the
backend CRUD service. PostgreSQL (asyncpg) in deployment; any async
SQLAlchemy URL works, which is how the tests run on aiosqlite.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from portal.config import settings


def _engine_options(url: str) -> dict[str, Any]:
    """드라이버별 엔진 옵션 — Driver specific engine keyword arguments."""
    options: dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if url.startswith("postgresql+asyncpg"):
        # 트랜잭션 모드 풀러 호환 (prepared statement cache off)
        options["connect_args"] = {"statement_cache_size": 0}
        options["pool_size"] = settings.DB_POOL_SIZE
        options["max_overflow"] = settings.DB_MAX_OVERFLOW
    return options


engine: AsyncEngine = create_async_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))

# expire_on_commit=False: 커밋 후 응답 직렬화 시 재조회 없음
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """모든 ORM 모델의 선언적 베이스."""


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 세션 의존성.

    Yields one session per request. Uncommitted work is rolled back when the
    handler raises; routers commit explicitly on success.
    """
    async with async_session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
