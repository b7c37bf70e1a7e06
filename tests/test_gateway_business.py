"""게이트웨이 사업/고객 API 테스트.

Gateway business and customer API tests — manager enrichment batching,
company scoping, token handling and downstream error propagation.
"""

import json

import httpx
from httpx import AsyncClient

from tests.conftest import (
    KEYCLOAK_REALM_PATH,
    KEYCLOAK_USERS_PATH,
    FakeUpstream,
    as_caller,
    auth_header,
    keycloak_user,
)

URL = "/api/business"


def _page(items: list[dict], total_pages: int = 1) -> dict:
    return {"items": items, "currentPage": 1, "totalItems": len(items), "totalPages": total_pages}


def _seed_business_list(upstream: FakeUpstream) -> None:
    upstream.add("GET", "/business", _page([
        {"id": 1, "name": "A", "manager_id": "u-vendor"},
        {"id": 2, "name": "B", "manager_id": "u-vendor"},
        {"id": 3, "name": "C", "manager_id": "u-partner"},
        {"id": 4, "name": "D", "manager_id": "u-ghost"},
        {"id": 5, "name": "E", "manager_id": None},
    ]))
    upstream.add("GET", f"{KEYCLOAK_USERS_PATH}/u-vendor", keycloak_user("u-vendor", "vendor01", "vendor"))
    upstream.add("GET", f"{KEYCLOAK_USERS_PATH}/u-partner", keycloak_user("u-partner", "partner01", "partner", "7"))
    upstream.add("GET", "/partner/7", {"id": 7, "name": "Partner Seven"})


class TestBusinessListEnrichment:
    """사업 목록 담당자 결합 테스트."""

    async def test_rows_enriched_with_manager(self, gateway: AsyncClient, upstream: FakeUpstream):
        _seed_business_list(upstream)

        res = await gateway.get(URL, headers=auth_header("caller-token"))
        assert res.status_code == 200
        body = res.json()
        assert body["success"] is True
        assert body["pagination"] == {
            "currentPage": 1,
            "totalPages": 1,
            "totalItems": 5,
            "itemsPerPage": 10,
        }

        rows = {row["id"]: row for row in body["data"]}
        assert rows[1]["manager_name"] == "vendor01"
        assert rows[1]["manager_type"] == "vendor"
        assert rows[1]["manager_company"] == "ABLECLOUD"
        assert rows[3]["manager_name"] == "partner01"
        assert rows[3]["manager_company_id"] == "7"
        assert rows[3]["manager_company"] == "Partner Seven"

    async def test_unresolved_rows_left_unenriched(self, gateway: AsyncClient, upstream: FakeUpstream):
        """조회되지 않는 사용자의 행은 그대로 반환된다."""
        _seed_business_list(upstream)

        res = await gateway.get(URL, headers=auth_header("caller-token"))
        rows = {row["id"]: row for row in res.json()["data"]}
        assert "manager_name" not in rows[4]
        assert "manager_name" not in rows[5]
        assert [row["id"] for row in res.json()["data"]] == [1, 2, 3, 4, 5]

    async def test_lookups_batched_per_distinct_id(self, gateway: AsyncClient, upstream: FakeUpstream):
        """사용자/회사 조회는 중복 없이 한 번씩만 수행된다."""
        _seed_business_list(upstream)

        await gateway.get(URL, headers=auth_header("caller-token"))
        assert len(upstream.calls("POST", f"{KEYCLOAK_REALM_PATH}/token")) == 1
        assert len(upstream.calls("GET", f"{KEYCLOAK_USERS_PATH}/u-vendor")) == 1
        assert len(upstream.calls("GET", f"{KEYCLOAK_USERS_PATH}/u-partner")) == 1
        assert len(upstream.calls("GET", "/partner/7")) == 1

    async def test_client_token_failure_returns_plain_rows(self, gateway: AsyncClient, upstream: FakeUpstream):
        _seed_business_list(upstream)
        upstream.add("POST", f"{KEYCLOAK_REALM_PATH}/token", lambda request: httpx.Response(500))

        res = await gateway.get(URL, headers=auth_header("caller-token"))
        assert res.status_code == 200
        assert all("manager_name" not in row for row in res.json()["data"])

    async def test_caller_token_forwarded(self, gateway: AsyncClient, upstream: FakeUpstream):
        upstream.add("GET", "/business", _page([]))

        await gateway.get(URL, params={"name": "A", "page": 2}, headers=auth_header("caller-token"))
        request = upstream.calls("GET", "/business")[0]
        assert request.headers["Authorization"] == "Bearer caller-token"
        assert request.url.params["name"] == "A"
        assert request.url.params["page"] == "2"
        assert "available" not in request.url.params

    async def test_total_pages_passed_through(self, gateway: AsyncClient, upstream: FakeUpstream):
        upstream.add("GET", "/business", {"items": [], "currentPage": 1, "totalItems": 0, "totalPages": 0})

        res = await gateway.get(URL, headers=auth_header("caller-token"))
        assert res.json()["pagination"]["totalPages"] == 0
        assert res.json()["data"] == []


class TestBusinessListScoping:
    """역할 지정 시 회사 범위 제한 테스트."""

    async def test_partner_caller_sees_own_company(self, gateway: AsyncClient, upstream: FakeUpstream):
        _seed_business_list(upstream)
        as_caller(upstream, keycloak_user("me", "partner02", "partner", "7"))

        res = await gateway.get(URL, params={"role": "User"}, headers=auth_header("caller-token"))
        assert [row["id"] for row in res.json()["data"]] == [3]

    async def test_vendor_caller_sees_everything(self, gateway: AsyncClient, upstream: FakeUpstream):
        _seed_business_list(upstream)
        as_caller(upstream, keycloak_user("me", "vendor02", "vendor"))

        res = await gateway.get(URL, params={"role": "Admin"}, headers=auth_header("caller-token"))
        assert len(res.json()["data"]) == 5

    async def test_caller_without_company_sees_nothing(self, gateway: AsyncClient, upstream: FakeUpstream):
        _seed_business_list(upstream)
        as_caller(upstream, keycloak_user("me", "nobody", "partner"))

        res = await gateway.get(URL, params={"role": "User"}, headers=auth_header("caller-token"))
        assert res.json()["data"] == []

    async def test_identity_failure_is_forced_logout(self, gateway: AsyncClient, upstream: FakeUpstream):
        """호출자 조회 실패 시 401 강제 로그아웃 메시지."""
        _seed_business_list(upstream)

        res = await gateway.get(URL, params={"role": "User"}, headers=auth_header("caller-token"))
        assert res.status_code == 401
        assert res.json() == {"success": False, "message": "Failed to fetch user information"}


class TestGatewayAuth:
    """게이트웨이 토큰 처리 테스트."""

    async def test_missing_token(self, gateway: AsyncClient, upstream: FakeUpstream):
        res = await gateway.get(URL)
        assert res.status_code == 401
        assert res.json() == {"success": False, "message": "인증 토큰이 필요합니다."}
        assert upstream.requests == []

    async def test_token_from_cookie(self, gateway: AsyncClient, upstream: FakeUpstream):
        upstream.add("GET", "/business", _page([]))

        res = await gateway.get(URL, headers={"Cookie": "token=cookie-token"})
        assert res.status_code == 200
        assert upstream.calls("GET", "/business")[0].headers["Authorization"] == "Bearer cookie-token"


class TestBusinessProxy:
    """사업 단건/쓰기 프록시 테스트."""

    async def test_create_business(self, gateway: AsyncClient, upstream: FakeUpstream):
        upstream.add(
            "POST", "/business", lambda request: httpx.Response(201, json={"id": 9, **json.loads(request.content)})
        )

        res = await gateway.post(URL, json={"name": "New"}, headers=auth_header("caller-token"))
        assert res.status_code == 201
        assert res.json() == {"success": True, "status": 201, "data": {"id": 9, "name": "New"}}

    async def test_update_propagates_downstream_status(self, gateway: AsyncClient, upstream: FakeUpstream):
        """다운스트림 오류 상태와 메시지를 그대로 전달한다."""
        upstream.add(
            "PUT", "/business/5",
            lambda request: httpx.Response(404, json={"detail": "사업 ID 5를 찾을 수 없습니다."}),
        )

        res = await gateway.put(f"{URL}/5", json={"name": "X"}, headers=auth_header("caller-token"))
        assert res.status_code == 404
        assert res.json() == {"success": False, "message": "사업 ID 5를 찾을 수 없습니다."}

    async def test_delete_without_reason_uses_fallback(self, gateway: AsyncClient, upstream: FakeUpstream):
        upstream.add("DELETE", "/business/5", lambda request: httpx.Response(500))

        res = await gateway.delete(f"{URL}/5", headers=auth_header("caller-token"))
        assert res.status_code == 500
        assert res.json()["message"] == "사업 삭제 중 오류가 발생했습니다."

    async def test_delete_business(self, gateway: AsyncClient, upstream: FakeUpstream):
        upstream.add("DELETE", "/business/5", lambda request: httpx.Response(204))

        res = await gateway.delete(f"{URL}/5", headers=auth_header("caller-token"))
        assert res.status_code == 200
        assert res.json() == {"success": True, "status": 200, "message": "사업이 삭제되었습니다."}

    async def test_unreachable_downstream(self, gateway: AsyncClient, upstream: FakeUpstream):
        def _refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        upstream.add("GET", "/business/5", _refuse)

        res = await gateway.get(f"{URL}/5", headers=auth_header("caller-token"))
        assert res.status_code == 500
        assert res.json() == {"success": False, "message": "사업을 찾을 수 없습니다."}

    async def test_history_list(self, gateway: AsyncClient, upstream: FakeUpstream):
        upstream.add("GET", "/business/5/history", [{"id": 1, "issue": "A"}])

        res = await gateway.get(f"{URL}/5/history", headers=auth_header("caller-token"))
        assert res.json()["data"] == [{"id": 1, "issue": "A"}]


class TestCustomerGateway:
    """게이트웨이 고객 API 테스트."""

    async def test_for_create_business_walks_every_page(self, gateway: AsyncClient, upstream: FakeUpstream):
        def _customers(request: httpx.Request) -> httpx.Response:
            page = int(request.url.params["page"])
            return httpx.Response(200, json={
                "items": [{"id": page, "name": f"Customer {page}", "manager_id": "u-vendor"}],
                "currentPage": page,
                "totalItems": 2,
                "totalPages": 2,
            })

        upstream.add("GET", "/customer", _customers)
        upstream.add("GET", f"{KEYCLOAK_USERS_PATH}/u-vendor", keycloak_user("u-vendor", "vendor01", "vendor"))

        res = await gateway.get("/api/customer/forCreateBusiness", headers=auth_header("caller-token"))
        assert res.status_code == 200
        data = res.json()["data"]
        assert [c["id"] for c in data] == [1, 2]
        assert all(c["manager_company"] == "ABLECLOUD" for c in data)
        assert len(upstream.calls("GET", "/customer")) == 2
        assert upstream.calls("GET", "/customer")[0].url.params["limit"] == "100"

    async def test_customer_list_scoped(self, gateway: AsyncClient, upstream: FakeUpstream):
        upstream.add("GET", "/customer", _page([
            {"id": 1, "name": "Mine", "manager_id": "u-partner"},
            {"id": 2, "name": "Vendor's", "manager_id": "u-vendor"},
        ]))
        upstream.add("GET", f"{KEYCLOAK_USERS_PATH}/u-vendor", keycloak_user("u-vendor", "vendor01", "vendor"))
        upstream.add("GET", f"{KEYCLOAK_USERS_PATH}/u-partner", keycloak_user("u-partner", "partner01", "partner", "7"))
        upstream.add("GET", "/partner/7", {"id": 7, "name": "Partner Seven"})
        as_caller(upstream, keycloak_user("me", "partner02", "partner", "7"))

        res = await gateway.get("/api/customer", params={"role": "User"}, headers=auth_header("caller-token"))
        assert [c["name"] for c in res.json()["data"]] == ["Mine"]
