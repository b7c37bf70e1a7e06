"""Bearer 토큰 검증 유틸리티 모듈.

Bearer token verification utility module.
Tokens are issued by the identity provider (Keycloak); the backend only
verifies and reads them.

Token payload fields used:
    {
        "sub": "user-uuid",                      # 사용자 ID (User identifier)
        "preferred_username": "user01",          # 사용자 이름 (Username)
        "realm_access": {"roles": ["Admin"]},    # 권한 (Realm roles)
        "exp": 1234567890
    }
"""

from typing import Any

import jwt

from portal.config import settings


def decode_token(token: str) -> dict[str, Any]:
    """토큰을 디코딩하고 검증합니다.

    Decode and verify a bearer token with the configured key and algorithm.
    Audience is checked only when ``JWT_AUDIENCE`` is configured.

    Raises:
        jwt.ExpiredSignatureError: 토큰 만료 시 (When token has expired)
        jwt.InvalidTokenError: 유효하지 않은 토큰 (When token is invalid)
    """
    if settings.JWT_AUDIENCE:
        return jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
        )
    return jwt.decode(
        token,
        settings.JWT_SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        options={"verify_aud": False},
    )


def realm_roles(payload: dict[str, Any]) -> list[str]:
    """페이로드에서 realm 권한 목록을 추출합니다 — Realm roles of a decoded token."""
    realm_access = payload.get("realm_access") or {}
    roles = realm_access.get("roles") or []
    return [str(role) for role in roles]
