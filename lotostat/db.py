"""Draw store construction and per-app registration.

The store is created once per Flask app and kept in ``app.extensions``.
Routes reach it through :func:`get_draw_store` and
:func:`get_analytics_service`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from flask import Flask, current_app
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lotostat.models.base import Base
from lotostat.repositories.draw_store import DrawStore, InMemoryDrawStore
from lotostat.repositories.sql_draw_store import SqlDrawStore
from lotostat.services.analytics_service import AnalyticsService

logger = logging.getLogger(__name__)


def create_app_engine(database_url: str) -> Engine:
    url = make_url(database_url)

    # An in-memory SQLite database lives as long as its single connection.
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            future=True,
        )

    return create_engine(database_url, pool_pre_ping=True, future=True)


def create_sql_store(database_url: str) -> SqlDrawStore:
    """Build a SQL draw store, creating the table if it is missing."""

    engine = create_app_engine(database_url)
    Base.metadata.create_all(bind=engine)
    session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    return SqlDrawStore(session_factory)


def create_draw_store(config: Mapping[str, Any]) -> DrawStore:
    """Build the store named by ``STORE_BACKEND``."""

    backend = str(config.get("STORE_BACKEND", "memory")).lower().strip()
    if backend == "sql":
        return create_sql_store(str(config["DATABASE_URL"]))
    if backend != "memory":
        raise RuntimeError(f"Unknown STORE_BACKEND: {backend!r}")
    return InMemoryDrawStore()


def init_store(app: Flask, store: DrawStore | None = None) -> None:
    """Attach a draw store and its analytics service to the app."""

    if store is None:
        store = create_draw_store(app.config)

    app.extensions["draw_store"] = store
    app.extensions["analytics_service"] = AnalyticsService(store)
    logger.info("Using draw store %s", type(store).__name__)


def get_draw_store() -> DrawStore:
    """Get the current app's draw store."""

    store: DrawStore | None = current_app.extensions.get("draw_store")
    if store is None:
        raise RuntimeError("Draw store not initialized")
    return store


def get_analytics_service() -> AnalyticsService:
    service: AnalyticsService | None = current_app.extensions.get("analytics_service")
    if service is None:
        raise RuntimeError("Draw store not initialized")
    return service
