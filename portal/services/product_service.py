"""제품/릴리즈 서비스 — 제품 및 릴리즈 노트 CRUD 비즈니스 로직.

Product, Category and Release Services — Business logic for product
categories, products and their release notes. Products and releases can be
hidden from listings without deleting them (``enabled``).
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from portal.models.product import Product, ProductCategory, Release
from portal.repositories.product_repository import (
    product_category_repository,
    product_repository,
    release_repository,
)
from portal.schemas.product import (
    ProductCategoryCreate,
    ProductCategoryResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
    ReleaseCreate,
    ReleaseResponse,
    ReleaseUpdate,
)
from portal.utils.exceptions import BadRequestError, NotFoundError
from portal.utils.pagination import Page, build_page


class ProductCategoryService:
    """제품 카테고리 서비스 — Listing and registering product categories."""

    async def list_categories(
        self, db: AsyncSession, page: int, per_page: int, name: str | None = None
    ) -> Page:
        categories, total = await product_category_repository.get_list(db, page, per_page, name=name)
        items = [ProductCategoryResponse.model_validate(c) for c in categories]
        return build_page(items, page, per_page, total)

    async def create_category(
        self, db: AsyncSession, data: ProductCategoryCreate
    ) -> ProductCategoryResponse:
        category: ProductCategory = await product_category_repository.create(db, data.model_dump())
        return ProductCategoryResponse.model_validate(category)


class ProductService:
    """제품 관련 비즈니스 로직을 처리하는 서비스 — Service handling product CRUD."""

    async def _require_category(self, db: AsyncSession, category_id: int | None) -> None:
        if category_id is None:
            return
        if await product_category_repository.get_by_id(db, category_id) is None:
            raise BadRequestError(f"제품 카테고리 ID {category_id}를 찾을 수 없습니다.")

    async def list_products(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        name: str | None = None,
        enabled: bool | None = None,
        category_id: int | None = None,
    ) -> Page:
        rows, total = await product_repository.get_list(
            db, page, per_page, name=name, enabled=enabled, category_id=category_id
        )
        items = [ProductResponse.model_validate(row) for row in rows]
        return build_page(items, page, per_page, total)

    async def get_product(self, db: AsyncSession, product_id: int) -> ProductResponse:
        """제품 상세 조회.

        Raises:
            NotFoundError: 제품이 없거나 삭제된 경우 (Missing or removed product)
        """
        row: dict[str, Any] | None = await product_repository.get_detail(db, product_id)
        if row is None:
            raise NotFoundError(f"제품 ID {product_id}를 찾을 수 없습니다.")
        return ProductResponse.model_validate(row)

    async def create_product(self, db: AsyncSession, data: ProductCreate) -> ProductResponse:
        """제품 등록 — unknown ``category_id`` answers 400."""
        await self._require_category(db, data.category_id)
        product: Product = await product_repository.create(db, data.model_dump())
        return await self.get_product(db, product.id)

    async def update_product(
        self, db: AsyncSession, product_id: int, data: ProductUpdate
    ) -> ProductResponse:
        values: dict[str, Any] = data.changes()
        await self._require_category(db, values.get("category_id"))
        product: Product | None = await product_repository.update(db, product_id, values)
        if product is None:
            raise NotFoundError(f"제품 ID {product_id}를 찾을 수 없습니다.")
        return await self.get_product(db, product_id)

    async def set_enabled(self, db: AsyncSession, product_id: int, enabled: bool) -> ProductResponse:
        """제품 활성/비활성 전환 — Show or hide a product."""
        product: Product | None = await product_repository.update(
            db, product_id, {"enabled": enabled}
        )
        if product is None:
            raise NotFoundError(f"제품 ID {product_id}를 찾을 수 없습니다.")
        return await self.get_product(db, product_id)

    async def delete_product(self, db: AsyncSession, product_id: int) -> None:
        if not await product_repository.soft_delete(db, product_id):
            raise NotFoundError(f"제품 ID {product_id}를 찾을 수 없습니다.")


class ReleaseService:
    """릴리즈 관련 비즈니스 로직을 처리하는 서비스.

    Service handling release notes. Listing shows enabled releases only;
    disabled releases stay reachable by id.
    """

    async def list_releases(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
        version: str | None = None,
        product_id: int | None = None,
    ) -> Page:
        releases, total = await release_repository.get_list(
            db, page, per_page, version=version, product_id=product_id
        )
        items = [ReleaseResponse.model_validate(r) for r in releases]
        return build_page(items, page, per_page, total)

    async def get_release(self, db: AsyncSession, release_id: int) -> ReleaseResponse:
        release: Release | None = await release_repository.get_by_id(db, release_id)
        if release is None:
            raise NotFoundError(f"릴리즈 ID {release_id}를 찾을 수 없습니다.")
        return ReleaseResponse.model_validate(release)

    async def create_release(self, db: AsyncSession, data: ReleaseCreate) -> ReleaseResponse:
        """새 릴리즈를 등록합니다 (항상 활성) — Create an enabled release."""
        release: Release = await release_repository.create(
            db, {**data.model_dump(), "enabled": True}
        )
        return ReleaseResponse.model_validate(release)

    async def update_release(
        self, db: AsyncSession, release_id: int, data: ReleaseUpdate
    ) -> ReleaseResponse:
        release: Release | None = await release_repository.update(
            db, release_id, data.changes()
        )
        if release is None:
            raise NotFoundError(f"릴리즈 ID {release_id}를 찾을 수 없습니다.")
        return ReleaseResponse.model_validate(release)

    async def disable_release(self, db: AsyncSession, release_id: int) -> ReleaseResponse:
        """릴리즈를 목록에서 숨깁니다 — Hide a release from listings."""
        release: Release | None = await release_repository.update(
            db, release_id, {"enabled": False}
        )
        if release is None:
            raise NotFoundError(f"릴리즈 ID {release_id}를 찾을 수 없습니다.")
        return ReleaseResponse.model_validate(release)

    async def delete_release(self, db: AsyncSession, release_id: int) -> None:
        if not await release_repository.soft_delete(db, release_id):
            raise NotFoundError(f"릴리즈 ID {release_id}를 찾을 수 없습니다.")


product_category_service = ProductCategoryService()
product_service = ProductService()
release_service = ReleaseService()
