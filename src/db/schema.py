"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBSavedBoard(Base):
    __tablename__ = "saved_boards"
    name: Mapped[str] = mapped_column(String(100), primary_key=True)
    board_text: Mapped[str] = mapped_column(Text)
    status: Mapped[str]
    winner: Mapped[Optional[str]]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
