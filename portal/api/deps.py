"""FastAPI 의존성 주입 모듈 — 토큰 검증 및 권한 검사.

FastAPI dependency injection module — Authentication and authorization for
the backend CRUD service.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. decode_token()이 토큰 서명/만료를 검증 (decode_token verifies the token)
    3. 실패 시 401 'Failed to fetch user information' — 프론트엔드 강제 로그아웃 신호
       (Failures answer 401 with the forced-logout sentinel message)

Authorization Flow (require_role):
    토큰의 realm_access.roles에 필요한 역할이 없으면 403
    (403 when the token's realm roles lack the required role)
"""

from typing import Annotated, Any, Awaitable, Callable

import jwt
import structlog
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from portal.utils.exceptions import ForbiddenError, UnauthorizedError
from portal.utils.jwt import decode_token, realm_roles

logger = structlog.get_logger(__name__)

# HTTP Bearer 토큰 추출기 — 헤더 누락도 직접 401로 처리 (Missing header handled as 401 below)
security: HTTPBearer = HTTPBearer(auto_error=False)

# 관리자 역할 이름 — Realm role allowed to write partners, products and notices
ADMIN_ROLE: str = "Admin"


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> dict[str, Any]:
    """Bearer 토큰에서 현재 사용자 클레임을 추출합니다.

    Decode the bearer token and return its claims.

    Returns:
        dict[str, Any]: 검증된 토큰 페이로드 (Verified token payload)

    Raises:
        UnauthorizedError: 토큰이 없거나 유효하지 않음 (Missing, invalid or expired token)
    """
    if credentials is None:
        raise UnauthorizedError()
    try:
        payload: dict[str, Any] = decode_token(credentials.credentials)
    except jwt.InvalidTokenError as exc:
        logger.info("token_rejected", reason=type(exc).__name__)
        raise UnauthorizedError()
    if not payload.get("sub"):
        raise UnauthorizedError()
    return payload


def require_role(role: str) -> Callable[..., Awaitable[dict[str, Any]]]:
    """역할 기반 권한 검사 의존성 팩토리.

    Dependency factory enforcing that the caller holds ``role`` in
    ``realm_access.roles``.

    Args:
        role: 필요한 realm 역할 이름 (Required realm role)

    Returns:
        FastAPI 의존성 함수 — 토큰 페이로드 반환 또는 403 발생
        (Dependency returning the token payload or raising 403)
    """
    async def _check(
        current_user: Annotated[dict[str, Any], Depends(get_current_user)],
    ) -> dict[str, Any]:
        if role not in realm_roles(current_user):
            raise ForbiddenError()
        return current_user
    return _check


# 편의 의존성 — Pre-configured dependencies
CurrentUser = Annotated[dict[str, Any], Depends(get_current_user)]
AdminUser = Annotated[dict[str, Any], Depends(require_role(ADMIN_ROLE))]
