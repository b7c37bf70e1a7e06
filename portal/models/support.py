"""기술지원 SQLAlchemy ORM 모델 정의.

Support SQLAlchemy ORM model definition: customer support requests and how
they were handled.
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portal.database import Base
from portal.models.mixins import TimestampMixin


class Support(TimestampMixin, Base):
    """기술지원 모델 — Support request of a customer.

    ``type``, ``action_type`` and ``status`` hold one of a fixed set of
    values, validated by the request schemas:

        type: poc | consult | technical | other | incident
        action_type: mail | remote | phone | site
        status: processing | complete
    """

    __tablename__ = "support"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[int | None] = mapped_column(ForeignKey("customer.id"), nullable=True, index=True)
    business_id: Mapped[int | None] = mapped_column(ForeignKey("business.id"), nullable=True)
    issued: Mapped[str] = mapped_column(String(100), nullable=False, default="")  # 접수일 (Date reported)
    type: Mapped[str] = mapped_column(String(20), nullable=False, default="consult")
    issue: Mapped[str | None] = mapped_column(Text, nullable=True)
    solution: Mapped[str | None] = mapped_column(Text, nullable=True)
    actioned: Mapped[str] = mapped_column(String(100), nullable=False, default="")  # 조치일 (Date handled)
    action_type: Mapped[str] = mapped_column(String(20), nullable=False, default="remote")
    manager: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="processing")
    requester: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    requester_telnum: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    requester_email: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    writer: Mapped[str | None] = mapped_column(String(255), nullable=True)  # 작성자 (Author)
