"""Parsing of path and query parameters shared by the routes."""

from __future__ import annotations

from lotostat.errors import ValidationError
from lotostat.repositories.records import BALL_MAX, BALL_MIN, Category


def parse_category(raw: str) -> Category:
    try:
        return Category(raw)
    except ValueError as exc:
        raise ValidationError(
            message="Invalid category",
            details={"category": [f"Must be one of {'|'.join(c.value for c in Category)}"]},
        ) from exc


def parse_ball_number(raw: str) -> int:
    try:
        ball_number = int(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError(message="Ball number must be an integer") from exc
    if not BALL_MIN <= ball_number <= BALL_MAX:
        raise ValidationError(message=f"Ball number must be between {BALL_MIN} and {BALL_MAX}")
    return ball_number


def parse_draw_id(raw: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError(message="Invalid ID") from exc


def parse_limit(raw: str | None, default: int) -> int:
    raw = (raw or "").strip()
    if not raw:
        return default
    try:
        limit = int(raw)
    except ValueError as exc:
        raise ValidationError("limit must be an integer") from exc
    if limit <= 0:
        raise ValidationError("limit must be positive")
    return limit
