"""공지사항 레포지토리 — 등급 대상 필터를 포함한 공지 목록 쿼리.

Notice Repository — list query including the partner-level audience filter.
"""

from typing import Sequence

from sqlalchemy import Select, literal, or_
from sqlalchemy.ext.asyncio import AsyncSession

from portal.models.notice import Notice
from portal.repositories.base import BaseRepository

# 전체 공개 등급 값 — Level value addressing every partner
ALL_LEVELS: str = "ALL"


class NoticeRepository(BaseRepository[Notice]):
    """공지사항 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the notice table.
    """

    def __init__(self) -> None:
        super().__init__(Notice)

    async def get_list(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        title: str | None = None,
        level: str | None = None,
        audience_level: str | None = None,
    ) -> tuple[Sequence[Notice], int]:
        """필터가 적용된 공지사항 목록을 조회합니다.

        Retrieve a page of notices.

        Args:
            title: 제목 부분 일치 (Title substring filter)
            level: 등급 문자열 부분 일치 (Substring filter on the raw level list)
            audience_level: 파트너 등급 — 해당 등급 또는 ALL 대상 공지만
                            (Partner level; keep notices addressed to it or to ALL)
        """
        query: Select = self.live_query()
        if title:
            query = query.where(Notice.title.like(f"%{title}%"))
        if level:
            query = query.where(Notice.level.like(f"%{level}%"))
        if audience_level is not None:
            query = query.where(
                or_(
                    self._targets(audience_level),
                    self._targets(ALL_LEVELS),
                )
            )
        return await self.get_paginated(db, query, page, per_page)

    @staticmethod
    def _targets(level: str):
        # ",GOLD,PLATINUM," LIKE "%,GOLD,%" — 쉼표 목록 내 정확한 항목 일치 (exact member match)
        return (
            literal(",").concat(Notice.level).concat(",").like(f"%,{level},%")
        )


notice_repository = NoticeRepository()
