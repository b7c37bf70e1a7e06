"""공지사항 서비스 — 공지사항 CRUD 비즈니스 로직.

Notice Service — Business logic for notices. Listing by ``company_id``
shows the notices addressed to that partner's level or to everyone.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from portal.models.notice import Notice
from portal.models.partner import Partner
from portal.repositories.notice_repository import notice_repository
from portal.repositories.partner_repository import partner_repository
from portal.schemas.notice import NoticeCreate, NoticeResponse, NoticeUpdate
from portal.utils.exceptions import NotFoundError
from portal.utils.pagination import Page, build_page


class NoticeService:
    """공지사항 관련 비즈니스 로직을 처리하는 서비스 — Service handling notice CRUD."""

    async def list_notices(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        title: str | None = None,
        level: str | None = None,
        company_id: int | None = None,
    ) -> Page:
        """공지사항 목록을 조회합니다.

        List notices, newest first. With ``company_id`` only notices targeting
        the partner's level or ``ALL`` are returned; an unknown partner sees
        the ``ALL`` notices only.
        """
        audience_level: str | None = None
        if company_id is not None:
            partner: Partner | None = await partner_repository.get_by_id(db, company_id)
            audience_level = partner.level if partner is not None else ""

        notices, total = await notice_repository.get_list(
            db, page, per_page, title=title, level=level, audience_level=audience_level
        )
        items = [NoticeResponse.model_validate(n) for n in notices]
        return build_page(items, page, per_page, total)

    async def get_notice(self, db: AsyncSession, notice_id: int) -> NoticeResponse:
        notice: Notice | None = await notice_repository.get_by_id(db, notice_id)
        if notice is None:
            raise NotFoundError(f"공지사항 ID {notice_id}를 찾을 수 없습니다.")
        return NoticeResponse.model_validate(notice)

    async def create_notice(self, db: AsyncSession, data: NoticeCreate) -> NoticeResponse:
        notice: Notice = await notice_repository.create(db, data.model_dump())
        return NoticeResponse.model_validate(notice)

    async def update_notice(
        self, db: AsyncSession, notice_id: int, data: NoticeUpdate
    ) -> NoticeResponse:
        notice: Notice | None = await notice_repository.update(
            db, notice_id, data.changes()
        )
        if notice is None:
            raise NotFoundError(f"공지사항 ID {notice_id}를 찾을 수 없습니다.")
        return NoticeResponse.model_validate(notice)

    async def delete_notice(self, db: AsyncSession, notice_id: int) -> None:
        if not await notice_repository.soft_delete(db, notice_id):
            raise NotFoundError(f"공지사항 ID {notice_id}를 찾을 수 없습니다.")


notice_service = NoticeService()
