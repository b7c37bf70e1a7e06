"""사업-라이센스 연결 관리.

A business and a license point at each other through ``business.license_id``
and ``license.business_id``. Every change of that pair goes through this
module: the previous partners on both sides are released first, so a license
is held by at most one business and a business holds at most one license.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from portal.repositories.business_repository import business_repository
from portal.repositories.license_repository import license_repository


async def unlink_business(db: AsyncSession, business_id: int) -> None:
    """사업의 라이센스 연결 해제 — Release whatever license the business holds."""
    await license_repository.clear_business_refs(db, business_id)
    await business_repository.set_license(db, business_id, None)


async def unlink_license(db: AsyncSession, license_id: int) -> None:
    """라이센스의 사업 연결 해제 — Release whatever business holds the license."""
    await business_repository.clear_license_refs(db, license_id)
    await license_repository.set_business(db, license_id, None)


async def link(db: AsyncSession, business_id: int, license_id: int) -> None:
    """사업과 라이센스를 서로 연결합니다.

    Pair a business with a license. The business's previous license and the
    license's previous business are unlinked on both sides first.
    """
    await unlink_business(db, business_id)
    await unlink_license(db, license_id)
    await business_repository.set_license(db, business_id, license_id)
    await license_repository.set_business(db, license_id, business_id)
