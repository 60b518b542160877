"""ORM models."""

from lotostat.models.lottery_draw import LotteryDraw

__all__ = ["LotteryDraw"]
