"""Schemas for the draw and statistics API."""

from __future__ import annotations

from marshmallow import Schema, ValidationError, fields, post_load, validate, validates_schema

from lotostat.repositories.records import BALL_MAX, BALL_MIN, Category, NewDraw

BALL_FIELDS = ("ball1", "ball2", "ball3", "ball4", "ball5")


def _ball_field() -> fields.Integer:
    return fields.Integer(required=True, strict=True, validate=validate.Range(min=BALL_MIN, max=BALL_MAX))


class DrawCreateSchema(Schema):
    """Validate a new draw payload and load it as a ``NewDraw``."""

    category = fields.Enum(Category, by_value=True, required=True)
    draw_date = fields.Date(required=True)

    ball1 = _ball_field()
    ball2 = _ball_field()
    ball3 = _ball_field()
    ball4 = _ball_field()
    ball5 = _ball_field()

    @validates_schema
    def _validate_unique_balls(self, data, **kwargs):  # type: ignore[no-untyped-def]
        balls = [data.get(name) for name in BALL_FIELDS]
        if any(b is None for b in balls):
            return
        if len(set(balls)) != len(balls):
            raise ValidationError({"balls": ["All ball numbers must be unique"]})

    @post_load
    def _make_draw(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return NewDraw(**data)


class DrawSchema(Schema):
    """Serialize a stored draw."""

    id = fields.Int(required=True)
    category = fields.Enum(Category, by_value=True, required=True)
    draw_date = fields.Date(required=True)
    ball1 = fields.Int(required=True)
    ball2 = fields.Int(required=True)
    ball3 = fields.Int(required=True)
    ball4 = fields.Int(required=True)
    ball5 = fields.Int(required=True)
    created_at = fields.DateTime(required=True)


class FrequencySchema(Schema):
    ball_number = fields.Int(required=True)
    frequency = fields.Int(required=True)


class StatisticsSchema(Schema):
    top_frequent = fields.List(fields.Nested(FrequencySchema))
    least_frequent = fields.List(fields.Nested(FrequencySchema))
    all_frequencies = fields.List(fields.Nested(FrequencySchema))


class ConsultSchema(Schema):
    simultaneous = fields.List(fields.Nested(FrequencySchema))
    subsequent = fields.List(fields.Nested(FrequencySchema))
    draw_history = fields.List(fields.Nested(DrawSchema))
