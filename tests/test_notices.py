"""공지사항 API 테스트.

Notice API tests — partner-level audience filtering and Admin-only writes.
"""

from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/notice"


async def _notice(client: AsyncClient, token: str, title: str, level: str) -> int:
    res = await client.post(URL, json={"title": title, "level": level}, headers=auth_header(token))
    assert res.status_code == 201
    return res.json()["id"]


class TestNoticeAudience:
    """파트너 등급별 공지 노출 테스트."""

    async def test_partner_sees_own_level_and_all(self, client: AsyncClient, admin_token, partner):
        await _notice(client, admin_token, "Gold and Platinum", "GOLD,PLATINUM")
        await _notice(client, admin_token, "Silver only", "SILVER")
        await _notice(client, admin_token, "Everyone", "ALL")

        res = await client.get(URL, params={"company_id": partner.id}, headers=auth_header(admin_token))
        titles = [n["title"] for n in res.json()["items"]]
        assert titles == ["Everyone", "Gold and Platinum"]

    async def test_level_match_is_exact_member(self, client: AsyncClient, db, admin_token):
        """VAR 파트너는 VAD 대상 공지를 보지 않는다."""
        from portal.models.partner import Partner
        var = Partner(name="VAR Partner", level="VAR")
        db.add(var)
        await db.flush()

        await _notice(client, admin_token, "VAD notice", "VAD")
        await _notice(client, admin_token, "VAR notice", "SILVER,VAR")

        res = await client.get(URL, params={"company_id": var.id}, headers=auth_header(admin_token))
        assert [n["title"] for n in res.json()["items"]] == ["VAR notice"]

    async def test_unknown_partner_sees_all_only(self, client: AsyncClient, admin_token):
        await _notice(client, admin_token, "Gold", "GOLD")
        await _notice(client, admin_token, "Everyone", "ALL")

        res = await client.get(URL, params={"company_id": 9999}, headers=auth_header(admin_token))
        assert [n["title"] for n in res.json()["items"]] == ["Everyone"]

    async def test_without_company_lists_everything(self, client: AsyncClient, admin_token):
        await _notice(client, admin_token, "Gold", "GOLD")
        await _notice(client, admin_token, "Silver", "SILVER")

        res = await client.get(URL, headers=auth_header(admin_token))
        assert res.json()["totalItems"] == 2


class TestNoticeCrud:
    """공지사항 CRUD 테스트."""

    async def test_default_level_is_all(self, client: AsyncClient, admin_token):
        res = await client.post(URL, json={"title": "공지"}, headers=auth_header(admin_token))
        assert res.json()["level"] == "ALL"

    async def test_create_non_admin_forbidden(self, client: AsyncClient, user_token):
        res = await client.post(URL, json={"title": "공지"}, headers=auth_header(user_token))
        assert res.status_code == 403

    async def test_non_admin_can_read(self, client: AsyncClient, admin_token, user_token):
        notice_id = await _notice(client, admin_token, "Read me", "ALL")
        res = await client.get(f"{URL}/{notice_id}", headers=auth_header(user_token))
        assert res.status_code == 200
        assert res.json()["title"] == "Read me"

    async def test_update_and_delete(self, client: AsyncClient, admin_token):
        notice_id = await _notice(client, admin_token, "Old", "ALL")

        res = await client.put(f"{URL}/{notice_id}", json={"title": "New"}, headers=auth_header(admin_token))
        assert res.json()["title"] == "New"
        assert res.json()["level"] == "ALL"

        res = await client.delete(f"{URL}/{notice_id}", headers=auth_header(admin_token))
        assert res.status_code == 204
        res = await client.get(f"{URL}/{notice_id}", headers=auth_header(admin_token))
        assert res.status_code == 404
