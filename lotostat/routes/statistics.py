"""Statistics and consultation routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from lotostat.db import get_analytics_service
from lotostat.schemas.draw import ConsultSchema, StatisticsSchema
from lotostat.utils.params import parse_ball_number, parse_category, parse_limit
from lotostat.utils.responses import ok

statistics_bp = Blueprint("statistics", __name__)

_statistics_schema = StatisticsSchema()
_consult_schema = ConsultSchema()


@statistics_bp.get("/statistics/<category>")
def get_statistics(category: str):
    """Return the most/least frequent balls and the full 1..90 frequency table.

    Query params:
    - limit: optional length of the top/least lists (default STATISTICS_LIMIT)
    """

    parsed = parse_category(category)
    limit = parse_limit(request.args.get("limit"), int(current_app.config.get("STATISTICS_LIMIT", 5)))

    result = get_analytics_service().get_statistics(parsed, limit=limit)
    return ok(_statistics_schema.dump(result))


@statistics_bp.get("/consult/<category>/<ball_number>")
def consult_ball(category: str, ball_number: str):
    """Return co-occurrence breakdowns and draw history for one ball."""

    parsed = parse_category(category)
    ball = parse_ball_number(ball_number)

    result = get_analytics_service().consult(parsed, ball)
    return ok(_consult_schema.dump(result))
