"""Import draw results from a CSV file into the SQL draw store.

Expected header:
  category,draw_date,ball1,ball2,ball3,ball4,ball5

Usage:
  python scripts/import_draws.py draws.csv --database-url sqlite:///./lotostat.db

Rows that fail validation are logged and skipped.
"""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence

from dotenv import load_dotenv

from lotostat.config import BaseConfig
from lotostat.db import create_sql_store
from lotostat.importer import import_csv


logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Import lottery draws from CSV into the SQL store")
    parser.add_argument("csv_path", type=str)
    parser.add_argument("--database-url", dest="database_url", type=str, default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    load_dotenv()

    database_url = args.database_url or os.getenv("DATABASE_URL", BaseConfig.DATABASE_URL)
    store = create_sql_store(database_url)

    with open(args.csv_path, newline="", encoding="utf-8") as fh:
        result = import_csv(store, fh)

    logger.info("Imported %s draws (%s skipped)", result.imported, result.skipped)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
