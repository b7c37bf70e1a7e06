"""라이센스 API 테스트.

License API tests — key generation, date defaults, OEM derivation,
business linking, approval and unlinking on delete.
"""

import uuid

from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/license"


async def _partner(db, name: str, level: str = "GOLD"):
    from portal.models.partner import Partner
    p = Partner(name=name, level=level)
    db.add(p)
    await db.flush()
    await db.refresh(p)
    return p


class TestLicenseCreate:
    """라이센스 발급 테스트."""

    async def test_create_license(self, client: AsyncClient, user_token, partner, business):
        """발급 시 키가 생성되고 사업이 라이센스를 가리킨다."""
        res = await client.post(URL, json={
            "issued": "2025-01-01",
            "expired": "2025-12-31",
            "company_id": partner.id,
            "business_id": business.id,
            "issued_id": "user-1",
        }, headers=auth_header(user_token))
        assert res.status_code == 201
        data = res.json()
        uuid.UUID(data["license_key"])
        assert data["status"] == "active"
        assert data["trial"] is False
        assert data["company_name"] == "Test Partner"
        assert data["company_level"] == "GOLD"
        assert data["business_name"] == "Test Business"
        assert data["product_name"] == "ABLESTACK"
        assert data["oem"] is None

        res = await client.get(f"/business/{business.id}", headers=auth_header(user_token))
        assert res.json()["license_id"] == data["id"]

    async def test_create_license_default_dates(self, client: AsyncClient, user_token, partner):
        res = await client.post(URL, json={"company_id": partner.id}, headers=auth_header(user_token))
        assert res.status_code == 201
        data = res.json()
        assert data["issued"] == "0000-00-00"
        assert data["expired"] == "0000-00-00"

    async def test_keys_are_unique(self, client: AsyncClient, user_token, partner):
        first = await client.post(URL, json={"company_id": partner.id}, headers=auth_header(user_token))
        second = await client.post(URL, json={"company_id": partner.id}, headers=auth_header(user_token))
        assert first.json()["license_key"] != second.json()["license_key"]

    async def test_oem_from_partner_name(self, client: AsyncClient, db, user_token):
        """OEM 파트너는 요청 값과 무관하게 OEM 코드가 지정된다."""
        cloit = await _partner(db, "클로잇")
        hyosung = await _partner(db, "효성")

        res = await client.post(URL, json={"company_id": cloit.id, "oem": ""}, headers=auth_header(user_token))
        assert res.json()["oem"] == "clostack"
        res = await client.post(URL, json={"company_id": hyosung.id}, headers=auth_header(user_token))
        assert res.json()["oem"] == "hv"

    async def test_oem_empty_string_is_null(self, client: AsyncClient, user_token, partner):
        res = await client.post(URL, json={"company_id": partner.id, "oem": ""}, headers=auth_header(user_token))
        assert res.json()["oem"] is None

    async def test_create_with_unknown_partner(self, client: AsyncClient, user_token):
        res = await client.post(URL, json={"company_id": 9999}, headers=auth_header(user_token))
        assert res.status_code == 400

    async def test_create_with_unknown_business(self, client: AsyncClient, user_token, partner):
        res = await client.post(
            URL, json={"company_id": partner.id, "business_id": 9999}, headers=auth_header(user_token)
        )
        assert res.status_code == 400

    async def test_create_invalid_status(self, client: AsyncClient, user_token, partner):
        res = await client.post(
            URL, json={"company_id": partner.id, "status": "unknown"}, headers=auth_header(user_token)
        )
        assert res.status_code == 422


class TestLicenseRead:
    """라이센스 조회 테스트."""

    async def test_list_filters(self, client: AsyncClient, db, user_token, partner):
        other = await _partner(db, "Other Partner")
        await client.post(URL, json={"company_id": partner.id, "trial": True}, headers=auth_header(user_token))
        await client.post(URL, json={"company_id": partner.id}, headers=auth_header(user_token))
        await client.post(URL, json={"company_id": other.id}, headers=auth_header(user_token))

        res = await client.get(URL, params={"company_id": partner.id}, headers=auth_header(user_token))
        assert res.json()["totalItems"] == 2

        res = await client.get(URL, params={"trial": "true"}, headers=auth_header(user_token))
        items = res.json()["items"]
        assert len(items) == 1
        assert items[0]["trial"] is True

    async def test_list_business_name_filter(self, client: AsyncClient, user_token, partner, business):
        await client.post(
            URL, json={"company_id": partner.id, "business_id": business.id}, headers=auth_header(user_token)
        )
        await client.post(URL, json={"company_id": partner.id}, headers=auth_header(user_token))

        res = await client.get(URL, params={"business_name": "Test"}, headers=auth_header(user_token))
        items = res.json()["items"]
        assert len(items) == 1
        assert items[0]["business_name"] == "Test Business"

    async def test_get_nonexistent_license(self, client: AsyncClient, user_token):
        res = await client.get(f"{URL}/9999", headers=auth_header(user_token))
        assert res.status_code == 404
        assert res.json()["detail"] == "라이센스 ID 9999를 찾을 수 없습니다."


class TestLicenseUpdate:
    """라이센스 수정/승인 테스트."""

    async def test_empty_dates_keep_stored_values(self, client: AsyncClient, user_token, partner):
        res = await client.post(URL, json={
            "company_id": partner.id,
            "issued": "2025-01-01",
            "expired": "2025-12-31",
        }, headers=auth_header(user_token))
        license_id = res.json()["id"]

        res = await client.put(f"{URL}/{license_id}", json={
            "issued": "",
            "expired": "2026-12-31",
            "status": "inactive",
        }, headers=auth_header(user_token))
        assert res.status_code == 200
        data = res.json()
        assert data["issued"] == "2025-01-01"
        assert data["expired"] == "2026-12-31"
        assert data["status"] == "inactive"

    async def test_approve_license(self, client: AsyncClient, user_token, partner):
        res = await client.post(
            URL, json={"company_id": partner.id, "status": "inactive"}, headers=auth_header(user_token)
        )
        license_id = res.json()["id"]
        assert res.json()["approved"] is None

        res = await client.put(
            f"{URL}/{license_id}/approve", json={"approve_user": "admin"}, headers=auth_header(user_token)
        )
        assert res.status_code == 200
        data = res.json()
        assert data["approve_user"] == "admin"
        assert data["status"] == "active"
        assert data["approved"].endswith("Z")

    async def test_approve_nonexistent(self, client: AsyncClient, user_token):
        res = await client.put(
            f"{URL}/9999/approve", json={"approve_user": "admin"}, headers=auth_header(user_token)
        )
        assert res.status_code == 404


class TestLicenseDelete:
    """라이센스 삭제 테스트."""

    async def test_delete_unlinks_business(self, client: AsyncClient, user_token, partner, business):
        """삭제 시 사업의 라이센스 연결이 해제된다."""
        res = await client.post(
            URL, json={"company_id": partner.id, "business_id": business.id}, headers=auth_header(user_token)
        )
        license_id = res.json()["id"]

        res = await client.delete(f"{URL}/{license_id}", headers=auth_header(user_token))
        assert res.status_code == 204

        res = await client.get(f"{URL}/{license_id}", headers=auth_header(user_token))
        assert res.status_code == 404

        res = await client.get(f"/business/{business.id}", headers=auth_header(user_token))
        assert res.json()["license_id"] is None

        res = await client.get("/business", params={"available": "true"}, headers=auth_header(user_token))
        assert res.json()["totalItems"] == 1

    async def test_delete_then_business_can_take_new_license(
        self, client: AsyncClient, user_token, partner, business
    ):
        res = await client.post(
            URL, json={"company_id": partner.id, "business_id": business.id}, headers=auth_header(user_token)
        )
        await client.delete(f"{URL}/{res.json()['id']}", headers=auth_header(user_token))

        res = await client.post(
            URL, json={"company_id": partner.id, "business_id": business.id}, headers=auth_header(user_token)
        )
        assert res.json()["business_name"] == "Test Business"


class TestLicenseBusinessLink:
    """라이센스 수정 시 사업 연결 양쪽이 함께 바뀐다."""

    async def _business(self, client: AsyncClient, token: str, name: str) -> int:
        res = await client.post("/business", json={"name": name}, headers=auth_header(token))
        return res.json()["id"]

    async def test_update_business_id_relinks(self, client: AsyncClient, user_token, partner, business):
        res = await client.post(
            URL, json={"company_id": partner.id, "business_id": business.id}, headers=auth_header(user_token)
        )
        license_id = res.json()["id"]
        other_id = await self._business(client, user_token, "Other Business")

        res = await client.put(
            f"{URL}/{license_id}", json={"business_id": other_id}, headers=auth_header(user_token)
        )
        assert res.status_code == 200
        assert res.json()["business_name"] == "Other Business"

        res = await client.get(f"/business/{business.id}", headers=auth_header(user_token))
        assert res.json()["license_id"] is None
        res = await client.get(f"/business/{other_id}", headers=auth_header(user_token))
        assert res.json()["license_id"] == license_id

    async def test_update_business_id_releases_business_previous_license(
        self, client: AsyncClient, user_token, partner, business
    ):
        """사업이 이미 다른 라이센스를 가진 경우 그 라이센스는 연결 해제된다."""
        res = await client.post(
            URL, json={"company_id": partner.id, "business_id": business.id}, headers=auth_header(user_token)
        )
        old_id = res.json()["id"]
        res = await client.post(URL, json={"company_id": partner.id}, headers=auth_header(user_token))
        new_id = res.json()["id"]

        res = await client.put(
            f"{URL}/{new_id}", json={"business_id": business.id}, headers=auth_header(user_token)
        )
        assert res.json()["business_name"] == "Test Business"

        res = await client.get(f"{URL}/{old_id}", headers=auth_header(user_token))
        assert res.json()["business_id"] is None
        assert res.json()["business_name"] is None

    async def test_update_business_id_null_unlinks(self, client: AsyncClient, user_token, partner, business):
        res = await client.post(
            URL, json={"company_id": partner.id, "business_id": business.id}, headers=auth_header(user_token)
        )
        license_id = res.json()["id"]

        res = await client.put(
            f"{URL}/{license_id}", json={"business_id": None}, headers=auth_header(user_token)
        )
        assert res.status_code == 200
        assert res.json()["business_id"] is None

        res = await client.get(f"/business/{business.id}", headers=auth_header(user_token))
        assert res.json()["license_id"] is None

    async def test_update_unknown_business(self, client: AsyncClient, user_token, partner):
        res = await client.post(URL, json={"company_id": partner.id}, headers=auth_header(user_token))
        res = await client.put(
            f"{URL}/{res.json()['id']}", json={"business_id": 9999}, headers=auth_header(user_token)
        )
        assert res.status_code == 400

    async def test_null_status_rejected(self, client: AsyncClient, user_token, partner):
        res = await client.post(URL, json={"company_id": partner.id}, headers=auth_header(user_token))
        res = await client.put(
            f"{URL}/{res.json()['id']}", json={"status": None}, headers=auth_header(user_token)
        )
        assert res.status_code == 422


class TestLicenseCompanyName:
    """회사가 없는 라이센스는 벤더 회사명으로 표시된다."""

    async def test_vendor_company_name(self, client: AsyncClient, user_token):
        res = await client.post(URL, json={"issued": "2025-01-01"}, headers=auth_header(user_token))
        assert res.status_code == 201
        assert res.json()["company_name"] == "ABLECLOUD"

        res = await client.get(f"{URL}/{res.json()['id']}", headers=auth_header(user_token))
        assert res.json()["company_name"] == "ABLECLOUD"
