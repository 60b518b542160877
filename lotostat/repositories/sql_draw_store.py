"""SQLAlchemy-backed draw store."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session, sessionmaker

from lotostat.models.lottery_draw import LotteryDraw
from lotostat.repositories.records import Category, Draw, NewDraw

logger = logging.getLogger(__name__)


class SqlDrawStore:
    """Draw store over the ``lottery_draws`` table.

    Every operation runs in its own short transaction. Listing orders by
    ``draw_date DESC, id ASC`` so equal dates keep insertion order, the same
    tie-break as the in-memory store.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    @staticmethod
    def _to_record(row: LotteryDraw) -> Draw:
        return Draw(
            id=int(row.id),
            category=Category(row.category),
            draw_date=row.draw_date,
            ball1=int(row.ball1),
            ball2=int(row.ball2),
            ball3=int(row.ball3),
            ball4=int(row.ball4),
            ball5=int(row.ball5),
            created_at=row.created_at,
        )

    def insert(self, new_draw: NewDraw) -> Draw:
        row = LotteryDraw(
            category=Category(new_draw.category).value,
            draw_date=new_draw.draw_date,
            ball1=int(new_draw.ball1),
            ball2=int(new_draw.ball2),
            ball3=int(new_draw.ball3),
            ball4=int(new_draw.ball4),
            ball5=int(new_draw.ball5),
            created_at=datetime.now(timezone.utc),
        )
        with self._session_factory.begin() as session:
            session.add(row)
            session.flush()  # assign PK
            draw = self._to_record(row)

        logger.info("Inserted draw %s (%s, %s)", draw.id, draw.category.value, draw.draw_date)
        return draw

    def get_by_id(self, draw_id: int) -> Draw | None:
        with self._session_factory() as session:
            row = session.get(LotteryDraw, int(draw_id))
            return self._to_record(row) if row is not None else None

    def delete_by_id(self, draw_id: int) -> bool:
        with self._session_factory.begin() as session:
            result = session.execute(delete(LotteryDraw).where(LotteryDraw.id == int(draw_id)))
            removed = int(result.rowcount or 0)

        if not removed:
            logger.debug("Draw %s not found for deletion", draw_id)
            return False
        logger.info("Deleted draw %s", draw_id)
        return True

    def delete_all_in_category(self, category: Category) -> bool:
        category = Category(category)
        where = LotteryDraw.category == category.value
        with self._session_factory.begin() as session:
            expected = int(
                session.scalar(select(func.count()).select_from(LotteryDraw).where(where)) or 0
            )
            result = session.execute(delete(LotteryDraw).where(where))
            removed = int(result.rowcount or 0)

        logger.info("Deleted %d draws in category %s", removed, category.value)
        return removed == expected

    def list_by_category(self, category: Category) -> list[Draw]:
        stmt = (
            select(LotteryDraw)
            .where(LotteryDraw.category == Category(category).value)
            .order_by(LotteryDraw.draw_date.desc(), LotteryDraw.id.asc())
        )
        with self._session_factory() as session:
            return [self._to_record(row) for row in session.scalars(stmt).all()]
