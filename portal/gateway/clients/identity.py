"""인증 서버(Keycloak) 클라이언트.

Identity provider (Keycloak) client.

Endpoints used:
    - POST /realms/{realm}/protocol/openid-connect/token  (client credentials)
    - GET  /realms/{realm}/protocol/openid-connect/userinfo  (caller's ``sub``)
    - GET  /admin/realms/{realm}/users/{id}  (user representation)
    - GET  /admin/realms/{realm}/users  (every user, for manager pickers)

User representation fields used:
    {
        "id": "user-uuid",
        "username": "user01",
        "attributes": {"type": ["partner"], "company_id": ["3"]}
    }
"""

from collections.abc import Awaitable
from typing import Any

import httpx
import structlog

from portal.config import settings
from portal.gateway.errors import IdentityProviderError

logger = structlog.get_logger(__name__)

# 사용자 유형 — Identity-provider user types
VENDOR_TYPE: str = "vendor"
PARTNER_TYPE: str = "partner"
CUSTOMER_TYPE: str = "customer"


def user_attribute(user: dict[str, Any], name: str) -> str | None:
    """Keycloak 다중값 속성의 첫 값 — First value of a multi-valued user attribute."""
    values = (user.get("attributes") or {}).get(name) or []
    return str(values[0]) if values else None


class IdentityClient:
    """Keycloak REST API 클라이언트.

    Identity provider client. Every failure (transport, non-2xx, malformed
    body) becomes ``IdentityProviderError``, i.e. 401 with the forced-logout
    sentinel message.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        base_url: str | None = None,
        realm: str | None = None,
    ) -> None:
        self.http = http
        self.base_url = (base_url or settings.KEYCLOAK_API_URL).rstrip("/")
        self.realm = realm or settings.KEYCLOAK_REALM

    @property
    def token_url(self) -> str:
        return f"{self.base_url}/realms/{self.realm}/protocol/openid-connect/token"

    @property
    def userinfo_url(self) -> str:
        return f"{self.base_url}/realms/{self.realm}/protocol/openid-connect/userinfo"

    @property
    def users_url(self) -> str:
        return f"{self.base_url}/admin/realms/{self.realm}/users"

    def user_url(self, user_id: str) -> str:
        return f"{self.users_url}/{user_id}"

    async def _body(self, response_coro: Awaitable[httpx.Response], what: str) -> Any:
        try:
            response: httpx.Response = await response_coro
        except httpx.HTTPError as exc:
            logger.error("identity_unreachable", call=what, error=str(exc))
            raise IdentityProviderError() from exc
        if response.is_error:
            logger.warning("identity_error", call=what, status_code=response.status_code)
            raise IdentityProviderError()
        try:
            body = response.json()
        except ValueError as exc:
            raise IdentityProviderError() from exc
        return body

    async def _json(self, response_coro: Awaitable[httpx.Response], what: str) -> dict[str, Any]:
        body = await self._body(response_coro, what)
        if not isinstance(body, dict) or not body:
            raise IdentityProviderError()
        return body

    async def get_client_token(self) -> str:
        """client credentials 토큰을 발급받습니다.

        Obtain a client-credentials access token for admin API calls.

        Raises:
            IdentityProviderError: 발급 실패 (Token request failed)
        """
        body = await self._json(
            self.http.post(
                self.token_url,
                data={
                    "client_id": settings.CLIENT_ID,
                    "client_secret": settings.CLIENT_SECRET,
                    "scope": settings.SCOPE,
                    "grant_type": "client_credentials",
                },
            ),
            "token",
        )
        token = body.get("access_token")
        if not token:
            raise IdentityProviderError()
        return str(token)

    async def get_user(self, user_id: str, client_token: str) -> dict[str, Any]:
        """사용자 ID로 사용자 정보를 조회합니다.

        Fetch a user representation by id with a client-credentials token.

        Raises:
            IdentityProviderError: 조회 실패 (Lookup failed)
        """
        return await self._json(
            self.http.get(
                self.user_url(user_id),
                headers={"Authorization": f"Bearer {client_token}"},
            ),
            "user",
        )

    async def get_current_user(self, access_token: str) -> dict[str, Any]:
        """호출자의 사용자 정보를 조회합니다.

        Resolve the caller: userinfo with the caller's token gives ``sub``,
        then the admin API returns the full representation with attributes.

        Raises:
            IdentityProviderError: 어느 단계든 실패 (Any step failed)
        """
        userinfo = await self._json(
            self.http.get(
                self.userinfo_url,
                headers={"Authorization": f"Bearer {access_token}"},
            ),
            "userinfo",
        )
        sub = userinfo.get("sub")
        if not sub:
            raise IdentityProviderError()
        client_token = await self.get_client_token()
        return await self.get_user(str(sub), client_token)

    async def list_users(self, client_token: str) -> list[dict[str, Any]]:
        """렐름의 전체 사용자 목록을 조회합니다.

        List every user of the realm with a client-credentials token.

        Raises:
            IdentityProviderError: 조회 실패 또는 목록이 아닌 응답 (Lookup failed)
        """
        body = await self._body(
            self.http.get(
                self.users_url,
                headers={"Authorization": f"Bearer {client_token}"},
            ),
            "users",
        )
        if not isinstance(body, list):
            raise IdentityProviderError()
        return [user for user in body if isinstance(user, dict)]
