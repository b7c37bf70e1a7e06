"""파트너/고객 SQLAlchemy ORM 모델 정의.

Partner and customer SQLAlchemy ORM model definitions.

Tables:
    - partner: 판매 파트너사 (Reseller partner companies)
    - customer: 최종 고객사 (End customers)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from portal.database import Base
from portal.models.mixins import TimestampMixin

# 파트너 등급 — Partner levels (notice.level also references these, plus "ALL")
PARTNER_LEVELS: tuple[str, ...] = ("PLATINUM", "GOLD", "SILVER", "VAR", "VAD")


class Partner(TimestampMixin, Base):
    """파트너 모델.

    Partner company model. ``id`` is what identity-provider users of type
    ``partner`` carry in their ``company_id`` attribute.
    """

    __tablename__ = "partner"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    telnum: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    # 등급 — One of PARTNER_LEVELS, stored as plain string
    level: Mapped[str] = mapped_column(String(20), nullable=False, default="GOLD")


class Customer(TimestampMixin, Base):
    """고객 모델.

    Customer model, managed by an identity-provider user (``manager_id``).
    """

    __tablename__ = "customer"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    telnum: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    manager_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    manager_company_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
