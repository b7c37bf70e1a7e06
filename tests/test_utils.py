"""유틸리티 단위 테스트.

Unit tests for date rendering, OEM resolution, log masking and company
scoping helpers.
"""

from datetime import datetime, timezone

import pytest

from portal.gateway.enrichment import company_filter, company_name, scope_to_company
from portal.gateway.errors import IdentityProviderError
from portal.middleware.axiom_logging import mask_sensitive
from portal.services.license_service import resolve_oem
from portal.utils.dates import format_date, format_timestamp
from tests.conftest import keycloak_user


class TestDates:
    """날짜 표시 형식."""

    def test_format_date_empty(self):
        assert format_date("") == "0000-00-00"
        assert format_date(None) == "0000-00-00"

    def test_format_date_cuts_time(self):
        assert format_date("2025-01-31T09:00:00") == "2025-01-31"

    def test_format_timestamp_drops_microseconds(self):
        value = datetime(2025, 1, 31, 9, 30, 15, 123456, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2025-01-31T09:30:15Z"

    def test_format_timestamp_naive_is_utc(self):
        assert format_timestamp(datetime(2025, 1, 31, 9, 30, 15)) == "2025-01-31T09:30:15Z"


class TestResolveOem:
    """OEM 코드 결정."""

    def test_known_partner_overrides(self):
        assert resolve_oem("클로잇", "other") == "clostack"

    def test_requested_value_kept(self):
        assert resolve_oem("Test Partner", "custom") == "custom"

    def test_empty_is_none(self):
        assert resolve_oem("Test Partner", "") is None


class TestMaskSensitive:
    """로그 마스킹."""

    def test_nested_secrets_masked(self):
        data = {"name": "a", "client_secret": "s", "auth": {"access_token": "t"}}
        assert mask_sensitive(data) == {"name": "a", "client_secret": "***", "auth": {"access_token": "***"}}


class TestCompanyScoping:
    """회사 표시명 및 범위 제한."""

    def test_vendor_company_name(self):
        assert company_name("vendor", None, {}) == "ABLECLOUD"

    def test_partner_company_name(self):
        assert company_name("partner", "7", {("partner", "7"): "Partner Seven"}) == "Partner Seven"
        assert company_name("partner", "8", {}) is None

    def test_scope_matches_type_and_company(self):
        rows = [
            {"id": 1, "manager_type": "partner", "manager_company_id": "7"},
            {"id": 2, "manager_type": "partner", "manager_company_id": "8"},
            {"id": 3, "manager_type": "vendor", "manager_company_id": "7"},
            {"id": 4},
        ]
        caller = keycloak_user("me", "partner02", "partner", "7")
        assert [row["id"] for row in scope_to_company(rows, caller)] == [1]

    def test_company_filter_vendor_sees_everything(self):
        assert company_filter(keycloak_user("me", "vendor01", "vendor")) is None

    def test_company_filter_partner(self):
        assert company_filter(keycloak_user("me", "partner02", "partner", "7")) == "7"

    def test_company_filter_partner_without_company(self):
        with pytest.raises(IdentityProviderError):
            company_filter(keycloak_user("me", "partner02", "partner"))

    def test_company_filter_customer_rejected(self):
        """고객 사용자는 회사 정보가 있어도 목록 범위를 얻지 못한다."""
        with pytest.raises(IdentityProviderError):
            company_filter(keycloak_user("me", "customer01", "customer", "7"))
