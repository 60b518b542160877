"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _int_env(name: str, default: int, minimum: int | None = None) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    STORE_BACKEND: str = os.getenv("STORE_BACKEND", "memory").lower().strip()  # "memory" | "sql"

    # SQL backend
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./lotostat.db")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    STATISTICS_LIMIT: int = _int_env("STATISTICS_LIMIT", 5, minimum=1)


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Configuration for the test suite: isolated in-memory store."""

    TESTING: bool = True
    STORE_BACKEND: str = "memory"
    DATABASE_URL: str = "sqlite://"


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
