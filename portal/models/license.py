"""라이센스 SQLAlchemy ORM 모델 정의.

License SQLAlchemy ORM model definition.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from portal.database import Base
from portal.models.mixins import TimestampMixin

# 라이센스 상태 — Plain strings, no transition rules are enforced
LICENSE_STATUSES: tuple[str, ...] = ("active", "inactive", "expired")


class License(TimestampMixin, Base):
    """라이센스 모델.

    License model. ``license_key`` is a generated UUID string, ``issued`` and
    ``expired`` are ``YYYY-MM-DD`` strings (``0000-00-00`` when unknown).

    Attributes:
        company_id: 발급 대상 파트너 ID (Partner the license was issued for)
        business_id: 연결된 사업 ID (Business the license is attached to)
        issued_id: 발급자 사용자 ID (Identity-provider user id of the issuer)
        approve_user: 승인자 이름 (Approver username)
        approved: 승인 일시 (Approval timestamp)
        oem: OEM 구분 (OEM flavour derived from the partner name)
    """

    __tablename__ = "license"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    license_key: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    issued: Mapped[str] = mapped_column(String(20), nullable=False, default="0000-00-00")
    expired: Mapped[str] = mapped_column(String(20), nullable=False, default="0000-00-00")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")
    company_id: Mapped[int | None] = mapped_column(ForeignKey("partner.id"), nullable=True)
    approve_user: Mapped[str | None] = mapped_column(String(50), nullable=True)
    approved: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    business_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    issued_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    trial: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    oem: Mapped[str | None] = mapped_column(String(255), nullable=True)
