"""Bulk import of draws from CSV."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from typing import TextIO

from marshmallow import ValidationError

from lotostat.repositories.draw_store import DrawStore
from lotostat.schemas.draw import BALL_FIELDS, DrawCreateSchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportResult:
    imported: int
    skipped: int


def _coerce_row(row: dict[str, str]) -> dict[str, object]:
    payload: dict[str, object] = {
        "category": (row.get("category") or "").strip(),
        "draw_date": (row.get("draw_date") or "").strip(),
    }
    for name in BALL_FIELDS:
        raw = (row.get(name) or "").strip()
        # Strict integer fields reject strings; leave bad cells for the schema to report.
        try:
            payload[name] = int(raw)
        except ValueError:
            payload[name] = raw
    return payload


def import_csv(store: DrawStore, fh: TextIO) -> ImportResult:
    """Insert every valid row of ``category,draw_date,ball1..ball5`` CSV.

    Rows are validated like API payloads. Invalid rows are logged and skipped.
    """

    schema = DrawCreateSchema()
    imported = 0
    skipped = 0
    for line_no, row in enumerate(csv.DictReader(fh), start=2):
        try:
            new_draw = schema.load(_coerce_row(row))
        except ValidationError as exc:
            logger.warning("Skipping line %s: %s", line_no, exc.messages)
            skipped += 1
            continue

        store.insert(new_draw)
        imported += 1

    return ImportResult(imported=imported, skipped=skipped)
