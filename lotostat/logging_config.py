"""Logging configuration."""

from __future__ import annotations

import logging

from flask import Flask


def configure_logging(app: Flask) -> None:
    """Configure stdlib logging at the level named by ``LOG_LEVEL``."""

    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger("lotostat").setLevel(level)

    # SQL echo is only useful when debugging the sql store itself.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
