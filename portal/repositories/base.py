"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all entity repositories.
Every portal table soft-deletes: rows with ``removed`` set are invisible to
reads but stay in the table.

Usage:
    class PartnerRepository(BaseRepository[Partner]):
        def __init__(self) -> None:
            super().__init__(Partner)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.database import Base
from portal.models.mixins import utcnow
from portal.utils.pagination import paginate

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


def to_dict(obj: Any, **extra: Any) -> dict[str, Any]:
    """ORM 객체의 컬럼 값을 딕셔너리로 변환하고 조인된 값을 덧붙입니다.

    Flatten an ORM instance's column values into a dict, merged with joined
    display fields passed as keyword arguments.
    """
    data: dict[str, Any] = {
        attr.key: getattr(obj, attr.key) for attr in inspect(obj).mapper.column_attrs
    }
    data.update(extra)
    return data


class BaseRepository(Generic[ModelType]):
    """Soft-delete 인식 제네릭 CRUD 레포지토리.

    Generic CRUD repository. Reads skip soft-deleted rows; ``soft_delete``
    only stamps ``removed``.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    def live_query(self) -> Select:
        """삭제되지 않은 행 기본 쿼리 — Base SELECT over live rows, newest first."""
        return (
            select(self.model)
            .where(self.model.removed.is_(None))
            .order_by(self.model.created.desc(), self.model.id.desc())
        )

    async def get_by_id(self, db: AsyncSession, record_id: int) -> ModelType | None:
        """ID로 삭제되지 않은 단일 레코드를 조회합니다.

        Retrieve a live record by id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드 ID (Record identifier)

        Returns:
            ModelType | None: 조회된 레코드, 없거나 삭제된 경우 None
                              (Found record, or None when missing or removed)
        """
        query: Select = select(self.model).where(
            self.model.id == record_id, self.model.removed.is_(None)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_paginated(
        self,
        db: AsyncSession,
        query: Select,
        page: int = 1,
        per_page: int = 10,
    ) -> tuple[Sequence[ModelType], int]:
        """페이지네이션이 적용된 레코드 목록을 조회합니다.

        Retrieve one page of entities for ``query`` plus the total count.
        """
        return await paginate(db, query, page, per_page)

    async def create(self, db: AsyncSession, obj_data: dict[str, Any]) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record. The caller's unit of work commits it.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리 (Column values of the new row)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        record_id: int,
        update_data: dict[str, Any],
    ) -> ModelType | None:
        """기존 레코드를 얕은 병합으로 업데이트합니다.

        Shallow-merge ``update_data`` into a live record; keys not present in
        ``update_data`` keep their stored values.

        Returns:
            ModelType | None: 업데이트된 레코드 또는 None (Updated record or None)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def soft_delete(self, db: AsyncSession, record_id: int) -> bool:
        """레코드를 soft delete 합니다 (removed 설정, 행은 유지).

        Mark a live record as removed.

        Returns:
            bool: 삭제 성공 여부, 대상이 없으면 False (False when nothing to delete)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False

        db_obj.removed = utcnow()
        await db.flush()
        return True
