"""Plain records exchanged between the draw store and its consumers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


BALL_MIN = 1
BALL_MAX = 90


class Category(str, Enum):
    GH18 = "GH18"
    CIV10 = "CIV10"
    CIV13 = "CIV13"
    CIV16 = "CIV16"


@dataclass(frozen=True)
class NewDraw:
    """A draw as submitted by a caller, before the store assigns an id."""

    category: Category
    draw_date: date
    ball1: int
    ball2: int
    ball3: int
    ball4: int
    ball5: int

    @property
    def balls(self) -> tuple[int, int, int, int, int]:
        return (self.ball1, self.ball2, self.ball3, self.ball4, self.ball5)


@dataclass(frozen=True)
class Draw:
    """A stored draw."""

    id: int
    category: Category
    draw_date: date
    ball1: int
    ball2: int
    ball3: int
    ball4: int
    ball5: int
    created_at: datetime

    @property
    def balls(self) -> tuple[int, int, int, int, int]:
        return (self.ball1, self.ball2, self.ball3, self.ball4, self.ball5)
