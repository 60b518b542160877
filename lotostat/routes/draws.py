"""Draw routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from lotostat.db import get_draw_store
from lotostat.errors import NotFoundError
from lotostat.schemas.draw import DrawCreateSchema, DrawSchema
from lotostat.services.draw_service import DrawService
from lotostat.utils.params import parse_category, parse_draw_id
from lotostat.utils.responses import ok

draws_bp = Blueprint("draws", __name__)

_create_schema = DrawCreateSchema()
_draw_schema = DrawSchema()
_draws_schema = DrawSchema(many=True)


def _service() -> DrawService:
    return DrawService(get_draw_store())


@draws_bp.get("/draws/<category>")
def list_draws(category: str):
    """List a category's draws, newest first."""

    draws = _service().list_draws(parse_category(category))
    return ok(_draws_schema.dump(draws))


@draws_bp.get("/draws/<category>/<draw_id>")
def get_draw(category: str, draw_id: str):
    parsed = parse_category(category)
    draw = _service().get_draw(parse_draw_id(draw_id))
    if draw.category != parsed:
        raise NotFoundError(message=f"Draw {draw.id} not found in {parsed.value}")
    return ok(_draw_schema.dump(draw))


@draws_bp.post("/draws")
def create_draw():
    """Record a new draw."""

    payload = request.get_json(silent=True) or {}
    new_draw = _create_schema.load(payload)

    draw = _service().create_draw(new_draw)
    return ok(_draw_schema.dump(draw), status_code=201)


@draws_bp.delete("/draws/<draw_id>")
def delete_draw(draw_id: str):
    parsed = parse_draw_id(draw_id)
    _service().delete_draw(parsed)
    return ok({"deleted": parsed})


@draws_bp.delete("/categories/<category>/reset")
def reset_category(category: str):
    """Delete every draw of a category."""

    parsed = parse_category(category)
    _service().reset_category(parsed)
    return ok({"category": parsed.value})
