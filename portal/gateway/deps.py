"""게이트웨이 의존성 주입 모듈.

Gateway dependency injection module: the shared HTTP client, the caller's
token and the clients bound to them.

Token lookup order:
    1. Authorization: Bearer <token> 헤더 (header)
    2. ``token`` 쿠키 (cookie set by the front end at login)
"""

from typing import Annotated, Any

import httpx
from fastapi import Body, Depends, Request

from portal.gateway.clients.downstream import DownstreamClient
from portal.gateway.clients.identity import IdentityClient
from portal.gateway.errors import AuthTokenMissingError


def get_http_client(request: Request) -> httpx.AsyncClient:
    """애플리케이션 공유 HTTP 클라이언트 — Shared client created in the lifespan."""
    return request.app.state.http_client


def get_access_token(request: Request) -> str:
    """호출자의 Bearer 토큰을 추출합니다.

    Extract the caller's token from the Authorization header or the
    ``token`` cookie.

    Raises:
        AuthTokenMissingError: 토큰이 없을 때 401 (401 when no token was sent)
    """
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    token = request.cookies.get("token")
    if token:
        return token
    raise AuthTokenMissingError()


HttpClient = Annotated[httpx.AsyncClient, Depends(get_http_client)]
AccessToken = Annotated[str, Depends(get_access_token)]


def get_downstream(http: HttpClient, token: AccessToken) -> DownstreamClient:
    return DownstreamClient(http, token)


def get_identity(http: HttpClient) -> IdentityClient:
    return IdentityClient(http)


Downstream = Annotated[DownstreamClient, Depends(get_downstream)]
Identity = Annotated[IdentityClient, Depends(get_identity)]

# 다운스트림으로 그대로 전달되는 JSON 본문 — JSON body forwarded as-is
JsonBody = Annotated[dict[str, Any], Body()]
