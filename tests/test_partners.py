"""파트너/고객 API 테스트.

Partner and customer API tests — list filters, Admin-only partner writes,
and customer detail with its businesses.
"""

from httpx import AsyncClient

from tests.conftest import auth_header

PARTNER_URL = "/partner"
CUSTOMER_URL = "/customer"


class TestPartnerCreate:
    """파트너 생성 테스트."""

    async def test_create_partner(self, client: AsyncClient, admin_token):
        res = await client.post(PARTNER_URL, json={
            "name": "New Partner",
            "telnum": "02-123-4567",
            "level": "PLATINUM",
        }, headers=auth_header(admin_token))
        assert res.status_code == 201
        data = res.json()
        assert data["name"] == "New Partner"
        assert data["level"] == "PLATINUM"

    async def test_create_partner_default_level(self, client: AsyncClient, admin_token):
        res = await client.post(PARTNER_URL, json={"name": "Default"}, headers=auth_header(admin_token))
        assert res.json()["level"] == "GOLD"

    async def test_create_partner_invalid_level(self, client: AsyncClient, admin_token):
        res = await client.post(
            PARTNER_URL, json={"name": "Bad", "level": "BRONZE"}, headers=auth_header(admin_token)
        )
        assert res.status_code == 422

    async def test_create_partner_non_admin_forbidden(self, client: AsyncClient, user_token):
        """Admin 역할이 없으면 403."""
        res = await client.post(PARTNER_URL, json={"name": "X"}, headers=auth_header(user_token))
        assert res.status_code == 403

    async def test_create_partner_no_auth(self, client: AsyncClient):
        res = await client.post(PARTNER_URL, json={"name": "X"})
        assert res.status_code == 401


class TestPartnerRead:
    """파트너 조회 테스트."""

    async def test_list_partners(self, client: AsyncClient, user_token, partner):
        res = await client.get(PARTNER_URL, headers=auth_header(user_token))
        assert res.status_code == 200
        data = res.json()
        assert data["totalItems"] == 1
        assert data["items"][0]["name"] == "Test Partner"

    async def test_name_filter_case_insensitive(self, client: AsyncClient, user_token, partner):
        res = await client.get(PARTNER_URL, params={"name": "test part"}, headers=auth_header(user_token))
        assert res.json()["totalItems"] == 1

    async def test_level_and_id_filters(self, client: AsyncClient, admin_token, partner):
        res = await client.post(
            PARTNER_URL, json={"name": "Silver One", "level": "SILVER"}, headers=auth_header(admin_token)
        )
        silver_id = res.json()["id"]

        res = await client.get(PARTNER_URL, params={"level": "SILVER"}, headers=auth_header(admin_token))
        assert [p["id"] for p in res.json()["items"]] == [silver_id]

        res = await client.get(PARTNER_URL, params={"id": partner.id}, headers=auth_header(admin_token))
        assert [p["id"] for p in res.json()["items"]] == [partner.id]


class TestPartnerUpdateDelete:
    """파트너 수정/삭제 테스트."""

    async def test_update_partner(self, client: AsyncClient, admin_token, partner):
        res = await client.put(
            f"{PARTNER_URL}/{partner.id}", json={"level": "VAR"}, headers=auth_header(admin_token)
        )
        assert res.status_code == 200
        assert res.json()["level"] == "VAR"
        assert res.json()["name"] == "Test Partner"

    async def test_delete_partner(self, client: AsyncClient, admin_token, partner):
        res = await client.delete(f"{PARTNER_URL}/{partner.id}", headers=auth_header(admin_token))
        assert res.status_code == 204
        res = await client.get(f"{PARTNER_URL}/{partner.id}", headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_delete_partner_non_admin_forbidden(self, client: AsyncClient, user_token, partner):
        res = await client.delete(f"{PARTNER_URL}/{partner.id}", headers=auth_header(user_token))
        assert res.status_code == 403


class TestCustomer:
    """고객 CRUD 테스트."""

    async def test_create_customer(self, client: AsyncClient, user_token):
        res = await client.post(CUSTOMER_URL, json={
            "name": "New Customer",
            "manager_id": "user-2",
            "manager_company_id": "3",
        }, headers=auth_header(user_token))
        assert res.status_code == 201
        data = res.json()
        assert data["manager_id"] == "user-2"
        assert data["telnum"] == ""

    async def test_customer_detail_includes_businesses(self, client: AsyncClient, user_token, customer, business):
        """고객 상세에는 삭제되지 않은 사업만 포함된다."""
        res = await client.post("/business", json={
            "name": "Dropped", "customer_id": customer.id,
        }, headers=auth_header(user_token))
        await client.delete(f"/business/{res.json()['id']}", headers=auth_header(user_token))

        res = await client.get(f"{CUSTOMER_URL}/{customer.id}", headers=auth_header(user_token))
        assert res.status_code == 200
        data = res.json()
        assert data["name"] == "Test Customer"
        assert [b["name"] for b in data["businesses"]] == ["Test Business"]
        assert data["businesses"][0]["product_name"] == "ABLESTACK"

    async def test_list_customers_by_manager(self, client: AsyncClient, user_token, customer):
        await client.post(CUSTOMER_URL, json={"name": "Other", "manager_id": "user-9"}, headers=auth_header(user_token))

        res = await client.get(CUSTOMER_URL, params={"manager_id": "user-1"}, headers=auth_header(user_token))
        assert [c["name"] for c in res.json()["items"]] == ["Test Customer"]

    async def test_update_and_delete_customer(self, client: AsyncClient, user_token, customer):
        res = await client.put(
            f"{CUSTOMER_URL}/{customer.id}", json={"telnum": "010-0000-0000"}, headers=auth_header(user_token)
        )
        assert res.json()["telnum"] == "010-0000-0000"
        assert res.json()["name"] == "Test Customer"

        res = await client.delete(f"{CUSTOMER_URL}/{customer.id}", headers=auth_header(user_token))
        assert res.status_code == 204
        res = await client.get(f"{CUSTOMER_URL}/{customer.id}", headers=auth_header(user_token))
        assert res.status_code == 404


class TestPartnerNullFields:
    """NOT NULL 컬럼에 null 전달 시 422."""

    async def test_null_partner_name_rejected(self, client: AsyncClient, admin_token, partner):
        res = await client.put(
            f"{PARTNER_URL}/{partner.id}", json={"name": None}, headers=auth_header(admin_token)
        )
        assert res.status_code == 422
        assert "name" in str(res.json()["detail"])

    async def test_null_customer_telnum_rejected(self, client: AsyncClient, user_token, customer):
        res = await client.put(
            f"/customer/{customer.id}", json={"telnum": None}, headers=auth_header(user_token)
        )
        assert res.status_code == 422

    async def test_null_customer_manager_accepted(self, client: AsyncClient, user_token, customer):
        res = await client.put(
            f"/customer/{customer.id}", json={"manager_id": None}, headers=auth_header(user_token)
        )
        assert res.status_code == 200
        assert res.json()["manager_id"] is None
