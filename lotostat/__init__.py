"""Lottery draw statistics service."""

from __future__ import annotations

from typing import Any

from dotenv import load_dotenv
from flask import Flask

from lotostat.repositories.draw_store import DrawStore


def create_app(store: DrawStore | None = None, config: dict[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        store: draw store to serve; built from ``STORE_BACKEND`` when omitted.
        config: overrides applied after the environment configuration.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from lotostat.config import get_config
    from lotostat.db import init_store
    from lotostat.error_handlers import register_error_handlers
    from lotostat.logging_config import configure_logging
    from lotostat.routes.draws import draws_bp
    from lotostat.routes.health import health_bp
    from lotostat.routes.statistics import statistics_bp

    app = Flask(__name__)
    app.config.from_object(get_config())
    if config:
        app.config.update(config)

    configure_logging(app)
    init_store(app, store)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(draws_bp, url_prefix="/api")
    app.register_blueprint(statistics_bp, url_prefix="/api")

    return app
