#!/usr/bin/env python3
"""
Recreate the marketplace schema and load the demo dataset.
Run it directly or with `python -m scripts.seed_db`; it prints the inserted row counts as JSON.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from marketplace.common.db import create_db_engine, create_session_factory
from marketplace.common.logging import configure_logging
from marketplace.common.seed import seed_database
from marketplace.common.settings import get_settings


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the marketplace database with demo data")
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL; defaults to DATABASE_URL from the environment",
    )
    parser.add_argument(
        "--keep-existing",
        action="store_true",
        help="Keep existing tables; rows are only loaded when the profiles table is empty",
    )
    return parser.parse_args()


def main() -> None:
    configure_logging()
    args = parse_args()
    database_url = args.database_url or get_settings().DATABASE_URL

    engine = create_db_engine(database_url)
    session_factory = create_session_factory(engine)
    try:
        with session_factory() as session:
            counts = seed_database(session, reset=not args.keep_existing)
    finally:
        engine.dispose()

    print(json.dumps({"database_url": engine.url.render_as_string(hide_password=True), **counts}, indent=2))


if __name__ == "__main__":
    main()
