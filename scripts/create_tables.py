"""Create the draw tables in the configured database.

Reads DATABASE_URL from .env / environment and creates all registered ORM tables.

Usage:
  python scripts/create_tables.py
"""

from __future__ import annotations

import os
import pathlib

from dotenv import load_dotenv
from sqlalchemy import inspect

from lotostat.config import BaseConfig
from lotostat.db import create_app_engine
from lotostat.models.base import Base

# Import models so they register with Base.metadata
from lotostat import models  # noqa: F401

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]


def main() -> int:
    """Create all ORM tables in the target database."""

    load_dotenv()
    env_local = PROJECT_ROOT / ".env.local"
    if env_local.exists():
        load_dotenv(dotenv_path=env_local, override=True)

    database_url = os.getenv("DATABASE_URL", BaseConfig.DATABASE_URL)

    engine = create_app_engine(database_url)
    Base.metadata.create_all(bind=engine)

    tables = sorted(inspect(engine).get_table_names())
    print(f"Created/verified tables on {engine.url.render_as_string(hide_password=True)}: {', '.join(tables)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
