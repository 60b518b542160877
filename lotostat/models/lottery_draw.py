"""Lottery draws stored in one wide table.

Columns:
- id (PK, autoincrement, never reused)
- category
- draw_date
- ball1..ball5
- created_at
"""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from lotostat.models.base import Base


class LotteryDraw(Base):
    """One row per draw with 5 balls."""

    __tablename__ = "lottery_draws"
    # SQLite reuses the max rowid after deletes unless AUTOINCREMENT is set.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category: Mapped[str] = mapped_column(String(8), nullable=False, index=True)
    draw_date: Mapped[date] = mapped_column(Date, nullable=False)

    ball1: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    ball2: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    ball3: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    ball4: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    ball5: Mapped[int] = mapped_column(SmallInteger, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
