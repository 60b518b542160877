"""In-memory draw store.

Draws live in a dict keyed by id. Python dicts keep insertion order, so a
stable sort over ``values()`` breaks draw-date ties by insertion order.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from threading import Lock
from typing import Protocol

from lotostat.repositories.records import Category, Draw, NewDraw

logger = logging.getLogger(__name__)


class DrawStore(Protocol):
    """Operations every draw store provides."""

    def insert(self, new_draw: NewDraw) -> Draw: ...

    def get_by_id(self, draw_id: int) -> Draw | None: ...

    def delete_by_id(self, draw_id: int) -> bool: ...

    def delete_all_in_category(self, category: Category) -> bool: ...

    def list_by_category(self, category: Category) -> list[Draw]: ...


class InMemoryDrawStore:
    """Process-local draw store.

    Mutations and snapshot reads are serialized by one lock. Ids come from a
    counter that only grows, so a deleted id is never handed out again.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._draws: dict[int, Draw] = {}
        self._next_id = 1

    def insert(self, new_draw: NewDraw) -> Draw:
        with self._lock:
            draw = Draw(
                id=self._next_id,
                category=Category(new_draw.category),
                draw_date=new_draw.draw_date,
                ball1=int(new_draw.ball1),
                ball2=int(new_draw.ball2),
                ball3=int(new_draw.ball3),
                ball4=int(new_draw.ball4),
                ball5=int(new_draw.ball5),
                created_at=datetime.now(timezone.utc),
            )
            self._draws[draw.id] = draw
            self._next_id += 1

        logger.info("Inserted draw %s (%s, %s)", draw.id, draw.category.value, draw.draw_date)
        return draw

    def get_by_id(self, draw_id: int) -> Draw | None:
        with self._lock:
            return self._draws.get(int(draw_id))

    def delete_by_id(self, draw_id: int) -> bool:
        with self._lock:
            removed = self._draws.pop(int(draw_id), None)

        if removed is None:
            logger.debug("Draw %s not found for deletion", draw_id)
            return False
        logger.info("Deleted draw %s", draw_id)
        return True

    def delete_all_in_category(self, category: Category) -> bool:
        category = Category(category)
        success = True
        with self._lock:
            ids = [d.id for d in self._draws.values() if d.category == category]
            for draw_id in ids:
                if self._draws.pop(draw_id, None) is None:
                    success = False

        logger.info("Deleted %d draws in category %s", len(ids), category.value)
        return success

    def list_by_category(self, category: Category) -> list[Draw]:
        category = Category(category)
        with self._lock:
            snapshot = [d for d in self._draws.values() if d.category == category]

        # sorted() stays stable with reverse=True: equal dates keep insertion order.
        return sorted(snapshot, key=lambda d: d.draw_date, reverse=True)
