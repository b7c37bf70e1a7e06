"""목록 행에 담당자 정보를 결합하는 배치 조인.

Batch join of identity-provider users onto list rows.

For a page of rows:
    1. 외래 키로 쓰인 사용자 ID를 중복 없이 수집 (Collect distinct user ids)
    2. client credentials 토큰을 한 번만 발급 (Acquire one client token)
    3. 사용자별 조회를 동시에 수행 (Look up each distinct user once, concurrently)
    4. 파트너 회사 이름을 회사별로 한 번만 조회 (Resolve each partner company once)
    5. 메모리에서 결합 (Join in memory)

Rows whose user cannot be resolved are returned unchanged.
"""

import asyncio
from typing import Any

import structlog

from portal.config import settings
from portal.gateway.clients.downstream import DownstreamClient
from portal.gateway.clients.identity import PARTNER_TYPE, VENDOR_TYPE, IdentityClient, user_attribute
from portal.gateway.errors import GatewayError, IdentityProviderError

logger = structlog.get_logger(__name__)


async def _lookup_users(
    identity: IdentityClient, user_ids: list[str], client_token: str
) -> dict[str, dict[str, Any]]:
    async def _one(user_id: str) -> tuple[str, dict[str, Any] | None]:
        try:
            return user_id, await identity.get_user(user_id, client_token)
        except GatewayError:
            logger.warning("user_lookup_failed", user_id=user_id)
            return user_id, None

    results = await asyncio.gather(*(_one(user_id) for user_id in user_ids))
    return {user_id: user for user_id, user in results if user is not None}


async def _lookup_companies(
    downstream: DownstreamClient, keys: set[tuple[str, str]]
) -> dict[tuple[str, str], str | None]:
    async def _one(key: tuple[str, str]) -> tuple[tuple[str, str], str | None]:
        company_type, company_id = key
        try:
            company = await downstream.get(
                f"{settings.PARTNER_API_URL}/{company_type}/{company_id}",
                fallback="회사 조회에 실패했습니다.",
            )
        except GatewayError:
            logger.warning("company_lookup_failed", company_type=company_type, company_id=company_id)
            return key, None
        return key, (company or {}).get("name")

    results = await asyncio.gather(*(_one(key) for key in keys))
    return dict(results)


def company_name(
    user_type: str | None,
    company_id: str | None,
    companies: dict[tuple[str, str], str | None],
) -> str | None:
    """사용자 유형별 회사 표시명 — Vendor users belong to the vendor company."""
    if user_type == VENDOR_TYPE:
        return settings.VENDOR_COMPANY_NAME
    if user_type and company_id:
        return companies.get((user_type, company_id))
    return None


async def enrich_with_users(
    items: list[dict[str, Any]],
    identity: IdentityClient,
    downstream: DownstreamClient,
    id_field: str = "manager_id",
    prefix: str = "manager",
) -> list[dict[str, Any]]:
    """행마다 담당자 이름/유형/회사 정보를 결합합니다.

    Add ``<prefix>_name``, ``<prefix>_type``, ``<prefix>_company_id`` and
    ``<prefix>_company`` to every row whose ``id_field`` user resolves.

    Args:
        items: 다운스트림 목록 행 (Rows of a downstream list)
        identity: 인증 서버 클라이언트 (Identity provider client)
        downstream: 파트너 서비스 호출용 클라이언트 (Client used for company lookups)
        id_field: 사용자 ID를 담은 필드 (Field holding the user id)
        prefix: 결합 필드 접두사 (Prefix of the added fields)

    Returns:
        list[dict[str, Any]]: 같은 순서의 행 목록 (Rows in the original order)
    """
    user_ids = sorted({str(item[id_field]) for item in items if item.get(id_field)})
    if not user_ids:
        return items

    try:
        client_token = await identity.get_client_token()
    except GatewayError:
        logger.warning("enrichment_skipped", reason="client_token", rows=len(items))
        return items

    users = await _lookup_users(identity, user_ids, client_token)

    company_keys: set[tuple[str, str]] = set()
    for user in users.values():
        user_type = user_attribute(user, "type")
        company_id = user_attribute(user, "company_id")
        if user_type and company_id and user_type != VENDOR_TYPE:
            company_keys.add((user_type, company_id))
    companies = await _lookup_companies(downstream, company_keys) if company_keys else {}

    enriched: list[dict[str, Any]] = []
    for item in items:
        user = users.get(str(item.get(id_field) or ""))
        if user is None:
            enriched.append(item)
            continue
        user_type = user_attribute(user, "type")
        company_id = user_attribute(user, "company_id")
        enriched.append(
            {
                **item,
                f"{prefix}_name": user.get("username"),
                f"{prefix}_type": user_type,
                f"{prefix}_company_id": company_id,
                f"{prefix}_company": company_name(user_type, company_id, companies),
            }
        )
    return enriched


def scope_to_company(
    items: list[dict[str, Any]],
    current_user: dict[str, Any],
    prefix: str = "manager",
) -> list[dict[str, Any]]:
    """호출자 회사가 담당하는 행만 남깁니다.

    Keep only rows managed by the caller's company. Vendor callers see
    every row.
    """
    user_type = user_attribute(current_user, "type")
    if user_type == VENDOR_TYPE:
        return items
    company_id = user_attribute(current_user, "company_id")
    if company_id is None:
        return []
    return [
        item
        for item in items
        if item.get(f"{prefix}_type") == user_type
        and str(item.get(f"{prefix}_company_id")) == str(company_id)
    ]


def company_filter(current_user: dict[str, Any]) -> str | None:
    """목록 조회 시 적용할 호출자 회사 ID.

    Company id a caller's list queries are narrowed to: ``None`` for vendor
    callers, who see everything, the partner id for partner callers.

    Raises:
        IdentityProviderError: 파트너 사용자에 회사 정보가 없거나, 벤더/파트너가
                               아닌 사용자 (Partner without a company, or a
                               user that is neither vendor nor partner)
    """
    user_type = user_attribute(current_user, "type")
    if user_type == VENDOR_TYPE:
        return None
    company_id = user_attribute(current_user, "company_id")
    if user_type != PARTNER_TYPE or company_id is None:
        raise IdentityProviderError()
    return company_id


async def describe_users(
    users: list[dict[str, Any]], downstream: DownstreamClient
) -> list[dict[str, Any]]:
    """사용자 목록을 담당자 선택용 행으로 변환합니다.

    Flatten the ``type``/``telnum``/``company_id`` attributes of identity
    provider users and add the display ``company``; each partner or customer
    company is looked up once.
    """
    rows: list[dict[str, Any]] = []
    company_keys: set[tuple[str, str]] = set()
    for user in users:
        user_type = user_attribute(user, "type")
        company_id = user_attribute(user, "company_id")
        if user_type and company_id and user_type != VENDOR_TYPE:
            company_keys.add((user_type, company_id))
        rows.append(
            {
                "id": user.get("id"),
                "username": user.get("username"),
                "email": user.get("email"),
                "firstName": user.get("firstName"),
                "lastName": user.get("lastName"),
                "type": user_type,
                "telnum": user_attribute(user, "telnum"),
                "company_id": company_id,
            }
        )
    companies = await _lookup_companies(downstream, company_keys) if company_keys else {}
    for row in rows:
        row["company"] = company_name(row["type"], row["company_id"], companies)
    return rows
