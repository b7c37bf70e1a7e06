"""크레딧 SQLAlchemy ORM 모델 정의.

Credit SQLAlchemy ORM model definition. A row records either a deposit paid
by a partner or credit spent on one of its businesses.
"""

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from portal.database import Base
from portal.models.mixins import TimestampMixin


class Credit(TimestampMixin, Base):
    """크레딧 모델 — 파트너 예치금/사용 크레딧 내역.

    Partner credit ledger entry.

    Attributes:
        partner_id: 파트너 ID (Partner owning the credit)
        business_id: 크레딧을 사용한 사업 ID (Business the credit was spent on)
        deposit: 예치 금액 — 예치 내역일 때만 (Deposited amount, deposit rows only)
        credit: 사용 크레딧 — 사용 내역일 때만 (Spent credit, usage rows only)
        note: 비고 (Note)
    """

    __tablename__ = "credit"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    partner_id: Mapped[int | None] = mapped_column(ForeignKey("partner.id"), nullable=True, index=True)
    business_id: Mapped[int | None] = mapped_column(ForeignKey("business.id"), nullable=True)
    deposit: Mapped[int | None] = mapped_column(Integer, nullable=True)
    credit: Mapped[int | None] = mapped_column(Integer, nullable=True)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
