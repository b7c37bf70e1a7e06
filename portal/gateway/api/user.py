"""게이트웨이 사용자 라우터 — 담당자 선택용 사용자 목록.

Gateway User Router — Identity-provider users joined with their company
names, for the manager pickers of the front-end forms.
"""

from typing import Any

import structlog
from fastapi import APIRouter

from portal.gateway.clients.identity import CUSTOMER_TYPE, VENDOR_TYPE, user_attribute
from portal.gateway.deps import AccessToken, Downstream, Identity
from portal.gateway.enrichment import describe_users
from portal.gateway.responses import item_body

logger = structlog.get_logger(__name__)

router: APIRouter = APIRouter()


@router.get("/forManager")
async def list_managers(
    downstream: Downstream,
    identity: Identity,
    company_id: str | None = None,
    type: str | None = None,
) -> dict[str, Any]:
    """담당자 후보 목록.

    Every user with its company name. When both ``company_id`` and ``type``
    are given only users of that company are returned.
    """
    users = await identity.list_users(await identity.get_client_token())
    rows = await describe_users(users, downstream)
    if company_id and type:
        rows = [
            row for row in rows
            if row["type"] == type and str(row["company_id"]) == str(company_id)
        ]
    logger.info("manager_list", rows=len(rows), company_id=company_id, type=type)
    return item_body(rows)


@router.get("/forCreateManager")
async def list_managers_for_create(
    downstream: Downstream,
    identity: Identity,
    token: AccessToken,
    role: str | None = None,
) -> dict[str, Any]:
    """등록 폼용 담당자 후보 목록 — 고객 사용자 제외.

    Users that can be assigned as managers; customer users are never listed.
    With ``role`` a non-vendor caller only sees users of its own company.
    """
    client_token = await identity.get_client_token()
    users = [
        user for user in await identity.list_users(client_token)
        if user_attribute(user, "type") != CUSTOMER_TYPE
    ]
    if role:
        caller = await identity.get_current_user(token)
        caller_type = user_attribute(caller, "type")
        if caller_type != VENDOR_TYPE:
            caller_company = user_attribute(caller, "company_id")
            users = [
                user for user in users
                if user_attribute(user, "type") == caller_type
                and caller_company is not None
                and user_attribute(user, "company_id") == caller_company
            ]
    rows = await describe_users(users, downstream)
    return item_body(rows)
