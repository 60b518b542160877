"""Service layer for recording and removing draws."""

from __future__ import annotations

from lotostat.errors import NotFoundError, ResetFailedError
from lotostat.repositories.draw_store import DrawStore
from lotostat.repositories.records import Category, Draw, NewDraw


class DrawService:
    """Draw use-cases.

    The store reports absence with ``False``; this layer turns it into the
    application's error types.
    """

    def __init__(self, store: DrawStore) -> None:
        self._store = store

    def list_draws(self, category: Category) -> list[Draw]:
        return self._store.list_by_category(category)

    def get_draw(self, draw_id: int) -> Draw:
        draw = self._store.get_by_id(draw_id)
        if draw is None:
            raise NotFoundError(message=f"Draw {draw_id} not found")
        return draw

    def create_draw(self, new_draw: NewDraw) -> Draw:
        return self._store.insert(new_draw)

    def delete_draw(self, draw_id: int) -> None:
        if not self._store.delete_by_id(draw_id):
            raise NotFoundError(message="Draw not found")

    def reset_category(self, category: Category) -> None:
        if not self._store.delete_all_in_category(category):
            raise ResetFailedError(Category(category).value)
