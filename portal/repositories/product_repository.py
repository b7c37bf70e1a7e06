"""제품/릴리즈 레포지토리 — Product category, Product and Release Repositories."""

from typing import Any, Sequence

from sqlalchemy import Select, and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.models.product import Product, ProductCategory, Release
from portal.repositories.base import BaseRepository, to_dict
from portal.utils.pagination import paginate


class ProductCategoryRepository(BaseRepository[ProductCategory]):
    """제품 카테고리 레포지토리 — 활성 카테고리만 목록에 노출."""

    def __init__(self) -> None:
        super().__init__(ProductCategory)

    async def get_list(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        name: str | None = None,
    ) -> tuple[Sequence[ProductCategory], int]:
        query: Select = self.live_query().where(ProductCategory.enabled.is_(True))
        if name:
            query = query.where(ProductCategory.name.like(f"%{name}%"))
        return await self.get_paginated(db, query, page, per_page)


class ProductRepository(BaseRepository[Product]):
    """제품 테이블 레포지토리 — Repository for the product table.

    List and detail rows carry the category name; a removed category leaves
    ``category_name`` null.
    """

    def __init__(self) -> None:
        super().__init__(Product)

    def _joined_query(self) -> Select:
        return (
            select(Product, ProductCategory.name.label("category_name"))
            .outerjoin(
                ProductCategory,
                and_(
                    ProductCategory.id == Product.category_id,
                    ProductCategory.removed.is_(None),
                ),
            )
            .where(Product.removed.is_(None))
        )

    async def get_list(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        name: str | None = None,
        enabled: bool | None = None,
        category_id: int | None = None,
    ) -> tuple[list[dict[str, Any]], int]:
        """필터가 적용된 제품 목록 — Page of products, newest first."""
        query: Select = self._joined_query()
        if name:
            query = query.where(Product.name.like(f"%{name}%"))
        if enabled is not None:
            query = query.where(Product.enabled.is_(enabled))
        if category_id is not None:
            query = query.where(Product.category_id == category_id)
        query = query.order_by(Product.created.desc(), Product.id.desc())

        rows, total = await paginate(db, query, page, per_page, scalars=False)
        return [self._row_to_dict(row) for row in rows], total

    async def get_detail(self, db: AsyncSession, product_id: int) -> dict[str, Any] | None:
        row = (await db.execute(self._joined_query().where(Product.id == product_id))).first()
        if row is None:
            return None
        return self._row_to_dict(row)

    @staticmethod
    def _row_to_dict(row: Any) -> dict[str, Any]:
        mapping = row._asdict()
        product: Product = mapping.pop("Product")
        return to_dict(product, **mapping)


class ReleaseRepository(BaseRepository[Release]):
    """릴리즈 테이블 레포지토리 — 활성 릴리즈만 목록에 노출.

    Repository for the release table; only enabled releases are listed.
    """

    def __init__(self) -> None:
        super().__init__(Release)

    async def get_list(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        version: str | None = None,
        product_id: int | None = None,
    ) -> tuple[Sequence[Release], int]:
        query: Select = self.live_query().where(Release.enabled.is_(True))
        if version:
            query = query.where(Release.version.like(f"%{version}%"))
        if product_id is not None:
            query = query.where(Release.product_id == product_id)
        return await self.get_paginated(db, query, page, per_page)


product_category_repository = ProductCategoryRepository()
product_repository = ProductRepository()
release_repository = ReleaseRepository()
