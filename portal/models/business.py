"""사업 관련 SQLAlchemy ORM 모델 정의.

Business-related SQLAlchemy ORM model definitions.

Tables:
    - business: 고객사 대상 사업(계약) (Customer engagement / contract)
    - business_history: 사업별 이슈 처리 이력 (Issue handling history per business)
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portal.database import Base
from portal.models.mixins import TimestampMixin


class Business(TimestampMixin, Base):
    """사업 모델 — 고객사에 제공되는 제품 계약 단위.

    Business model — A product engagement delivered to a customer.
    The manager is a user of the identity provider, referenced by its id only;
    the manager's display fields are joined in by the gateway.

    Attributes:
        id: 자동 증가 식별자 (Auto-increment identifier)
        name: 사업 이름 (Business name)
        issued: 시작일 YYYY-MM-DD (Start date string)
        expired: 종료일 YYYY-MM-DD (End date string)
        license_id: 연결된 라이센스 ID (Linked license, NULL when available)
        customer_id: 고객 ID (Customer foreign key)
        manager_id: 담당자 사용자 ID (Identity-provider user id of the manager)
        product_id: 제품 ID (Product foreign key)
    """

    __tablename__ = "business"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    issued: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    expired: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    # 라이센스 연결 — plain column, license.business_id points back the other way
    license_id: Mapped[int | None] = mapped_column(Integer, nullable=True, default=None)
    customer_id: Mapped[int | None] = mapped_column(ForeignKey("customer.id"), nullable=True)
    status: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    core_cnt: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    node_cnt: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    manager_id: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    product_id: Mapped[int | None] = mapped_column(ForeignKey("product.id"), nullable=True)
    details: Mapped[str | None] = mapped_column(Text, nullable=True)


class BusinessHistory(TimestampMixin, Base):
    """사업 이력 모델 — 사업 단위 이슈/조치 기록.

    Business history model — Issue and solution log entries of a business.
    """

    __tablename__ = "business_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    business_id: Mapped[int] = mapped_column(ForeignKey("business.id"), nullable=False, index=True)
    issue: Mapped[str | None] = mapped_column(Text, nullable=True)
    solution: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    manager: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    issued: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    started: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    ended: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
