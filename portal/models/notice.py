"""공지사항 SQLAlchemy ORM 모델 정의.

Notice SQLAlchemy ORM model definition.
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portal.database import Base
from portal.models.mixins import TimestampMixin


class Notice(TimestampMixin, Base):
    """공지사항 모델.

    Notice model. ``level`` is a comma-separated list of partner levels the
    notice targets (e.g. ``"GOLD,PLATINUM"``) or contains ``ALL``.
    """

    __tablename__ = "notice"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    writer: Mapped[str | None] = mapped_column(String(255), nullable=True)
    level: Mapped[str | None] = mapped_column(String(255), nullable=True)
