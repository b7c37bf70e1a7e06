"""페이지네이션 테스트.

Pagination tests — page math and the ``{items, currentPage, totalItems,
totalPages}`` wire format.
"""

from httpx import AsyncClient

from portal.utils.pagination import build_page, total_pages
from tests.conftest import auth_header


class TestTotalPages:
    """전체 페이지 수 계산."""

    def test_exact_division(self):
        assert total_pages(20, 10) == 2

    def test_rounds_up(self):
        assert total_pages(21, 10) == 3

    def test_empty(self):
        assert total_pages(0, 10) == 0

    def test_zero_page_size(self):
        assert total_pages(5, 0) == 0

    def test_build_page_camel_case(self):
        page = build_page(["a"], 2, 1, 3)
        assert page.model_dump(by_alias=True) == {
            "items": ["a"],
            "currentPage": 2,
            "totalItems": 3,
            "totalPages": 3,
        }


class TestPaginatedEndpoint:
    """목록 엔드포인트 페이지네이션."""

    async def _seed(self, client: AsyncClient, admin_token: str, count: int) -> None:
        for i in range(count):
            await client.post("/partner", json={"name": f"Partner {i}"}, headers=auth_header(admin_token))

    async def test_second_page(self, client: AsyncClient, admin_token):
        await self._seed(client, admin_token, 5)
        res = await client.get("/partner", params={"page": 2, "limit": 2}, headers=auth_header(admin_token))
        data = res.json()
        assert data["currentPage"] == 2
        assert data["totalItems"] == 5
        assert data["totalPages"] == 3
        assert [p["name"] for p in data["items"]] == ["Partner 2", "Partner 1"]

    async def test_page_past_end(self, client: AsyncClient, admin_token):
        await self._seed(client, admin_token, 2)
        res = await client.get("/partner", params={"page": 5, "limit": 2}, headers=auth_header(admin_token))
        data = res.json()
        assert data["items"] == []
        assert data["totalItems"] == 2

    async def test_limit_zero(self, client: AsyncClient, admin_token):
        await self._seed(client, admin_token, 2)
        res = await client.get("/partner", params={"limit": 0}, headers=auth_header(admin_token))
        data = res.json()
        assert data["items"] == []
        assert data["totalItems"] == 2
        assert data["totalPages"] == 0

    async def test_invalid_page(self, client: AsyncClient, admin_token):
        res = await client.get("/partner", params={"page": 0}, headers=auth_header(admin_token))
        assert res.status_code == 422
