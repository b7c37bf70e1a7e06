"""제품/릴리즈 API 테스트.

Product and release API tests — enable/disable toggles, Admin-only writes,
and release listings hiding disabled releases.
"""

from httpx import AsyncClient

from tests.conftest import auth_header

PRODUCT_URL = "/product"
RELEASE_URL = "/release"


class TestProduct:
    """제품 CRUD 테스트."""

    async def test_create_product(self, client: AsyncClient, admin_token):
        res = await client.post(PRODUCT_URL, json={
            "name": "ABLESTACK",
            "version": "4.1",
            "iso_file_path": "/iso/ablestack-4.1.iso",
        }, headers=auth_header(admin_token))
        assert res.status_code == 201
        data = res.json()
        assert data["version"] == "4.1"
        assert data["enabled"] is True

    async def test_create_product_non_admin_forbidden(self, client: AsyncClient, user_token):
        res = await client.post(PRODUCT_URL, json={"name": "X"}, headers=auth_header(user_token))
        assert res.status_code == 403

    async def test_disable_and_enable(self, client: AsyncClient, admin_token, product):
        res = await client.put(f"{PRODUCT_URL}/{product.id}/disabled", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json()["enabled"] is False

        res = await client.get(PRODUCT_URL, params={"enabled": "true"}, headers=auth_header(admin_token))
        assert res.json()["totalItems"] == 0

        res = await client.put(f"{PRODUCT_URL}/{product.id}/enabled", headers=auth_header(admin_token))
        assert res.json()["enabled"] is True

        res = await client.get(PRODUCT_URL, params={"enabled": "true"}, headers=auth_header(admin_token))
        assert res.json()["totalItems"] == 1

    async def test_list_without_enabled_filter_shows_all(self, client: AsyncClient, admin_token, product):
        await client.put(f"{PRODUCT_URL}/{product.id}/disabled", headers=auth_header(admin_token))
        res = await client.get(PRODUCT_URL, headers=auth_header(admin_token))
        assert res.json()["totalItems"] == 1

    async def test_update_product(self, client: AsyncClient, admin_token, product):
        res = await client.put(
            f"{PRODUCT_URL}/{product.id}", json={"history": "버그 수정"}, headers=auth_header(admin_token)
        )
        assert res.json()["history"] == "버그 수정"
        assert res.json()["name"] == "ABLESTACK"

    async def test_delete_product(self, client: AsyncClient, admin_token, product):
        res = await client.delete(f"{PRODUCT_URL}/{product.id}", headers=auth_header(admin_token))
        assert res.status_code == 204
        res = await client.get(f"{PRODUCT_URL}/{product.id}", headers=auth_header(admin_token))
        assert res.status_code == 404
        assert res.json()["detail"] == f"제품 ID {product.id}를 찾을 수 없습니다."


class TestRelease:
    """릴리즈 노트 테스트."""

    async def test_create_release_is_enabled(self, client: AsyncClient, admin_token, product):
        res = await client.post(RELEASE_URL, json={
            "product_id": product.id,
            "version": "4.0.1",
            "contents": "보안 패치",
        }, headers=auth_header(admin_token))
        assert res.status_code == 201
        assert res.json()["enabled"] is True

    async def test_disabled_release_hidden(self, client: AsyncClient, admin_token, product):
        """비활성화된 릴리즈는 목록에 나타나지 않는다."""
        first = await client.post(
            RELEASE_URL, json={"product_id": product.id, "version": "4.0.1"}, headers=auth_header(admin_token)
        )
        await client.post(
            RELEASE_URL, json={"product_id": product.id, "version": "4.0.2"}, headers=auth_header(admin_token)
        )

        res = await client.put(f"{RELEASE_URL}/{first.json()['id']}/disabled", headers=auth_header(admin_token))
        assert res.json()["enabled"] is False

        res = await client.get(RELEASE_URL, headers=auth_header(admin_token))
        assert [r["version"] for r in res.json()["items"]] == ["4.0.2"]

    async def test_list_by_product(self, client: AsyncClient, admin_token, product):
        other = await client.post(PRODUCT_URL, json={"name": "Other"}, headers=auth_header(admin_token))
        await client.post(
            RELEASE_URL, json={"product_id": product.id, "version": "4.0.1"}, headers=auth_header(admin_token)
        )
        await client.post(
            RELEASE_URL, json={"product_id": other.json()["id"], "version": "1.0"}, headers=auth_header(admin_token)
        )

        res = await client.get(RELEASE_URL, params={"product_id": product.id}, headers=auth_header(admin_token))
        assert [r["version"] for r in res.json()["items"]] == ["4.0.1"]

    async def test_release_write_non_admin_forbidden(self, client: AsyncClient, user_token, product):
        res = await client.post(RELEASE_URL, json={"product_id": product.id}, headers=auth_header(user_token))
        assert res.status_code == 403


class TestProductCategory:
    """제품 카테고리 테스트."""

    async def test_create_and_list_categories(self, client: AsyncClient, admin_token):
        res = await client.post(
            f"{PRODUCT_URL}/category", json={"name": "HCI"}, headers=auth_header(admin_token)
        )
        assert res.status_code == 201
        assert res.json()["enabled"] is True
        await client.post(
            f"{PRODUCT_URL}/category", json={"name": "VDI", "enabled": False}, headers=auth_header(admin_token)
        )

        res = await client.get(f"{PRODUCT_URL}/category", headers=auth_header(admin_token))
        assert res.status_code == 200
        data = res.json()
        assert data["totalItems"] == 1
        assert data["items"][0]["name"] == "HCI"

    async def test_create_category_non_admin_forbidden(self, client: AsyncClient, user_token):
        res = await client.post(
            f"{PRODUCT_URL}/category", json={"name": "HCI"}, headers=auth_header(user_token)
        )
        assert res.status_code == 403

    async def test_product_category_name(self, client: AsyncClient, admin_token):
        res = await client.post(
            f"{PRODUCT_URL}/category", json={"name": "HCI"}, headers=auth_header(admin_token)
        )
        category_id = res.json()["id"]
        res = await client.post(PRODUCT_URL, json={
            "name": "ABLESTACK",
            "version": "4.2",
            "category_id": category_id,
        }, headers=auth_header(admin_token))
        assert res.status_code == 201
        assert res.json()["category_name"] == "HCI"

        await client.post(PRODUCT_URL, json={"name": "Other"}, headers=auth_header(admin_token))
        res = await client.get(
            PRODUCT_URL, params={"category_id": category_id}, headers=auth_header(admin_token)
        )
        items = res.json()["items"]
        assert [item["version"] for item in items] == ["4.2"]
        assert items[0]["category_name"] == "HCI"

    async def test_product_unknown_category(self, client: AsyncClient, admin_token):
        res = await client.post(
            PRODUCT_URL, json={"name": "ABLESTACK", "category_id": 9999}, headers=auth_header(admin_token)
        )
        assert res.status_code == 400

    async def test_null_product_name_rejected(self, client: AsyncClient, admin_token, product):
        res = await client.put(
            f"{PRODUCT_URL}/{product.id}", json={"name": None}, headers=auth_header(admin_token)
        )
        assert res.status_code == 422
