"""제품/릴리즈 SQLAlchemy ORM 모델 정의.

Product category, product and release SQLAlchemy ORM model definitions.
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portal.database import Base
from portal.models.mixins import TimestampMixin


class ProductCategory(TimestampMixin, Base):
    """제품 카테고리 모델 — Product category (e.g. HCI, VDI)."""

    __tablename__ = "product_category"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class Product(TimestampMixin, Base):
    """제품 모델 — Product model (name + version + ISO image path)."""

    __tablename__ = "product"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_id: Mapped[int | None] = mapped_column(ForeignKey("product_category.id"), nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    version: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    iso_file_path: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    history: Mapped[str] = mapped_column(Text, nullable=False, default="")
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class Release(TimestampMixin, Base):
    """릴리즈 노트 모델 — Release note of a product version."""

    __tablename__ = "release"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int | None] = mapped_column(ForeignKey("product.id"), nullable=True, index=True)
    version: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    contents: Mapped[str | None] = mapped_column(Text, nullable=True)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
