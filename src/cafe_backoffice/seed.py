"""
Загрузка начальных данных из снимка:

    python -m cafe_backoffice.seed snapshot.json [--replace]
"""

import argparse
import asyncio
import json
import logging
from pathlib import Path

from cafe_backoffice.config import settings
from cafe_backoffice.crud.snapshot import load_snapshot
from cafe_backoffice.db.session import AsyncSessionLocal, close_db, init_db

logger = logging.getLogger(__name__)


async def seed(path: Path, replace: bool = False) -> dict:
    data = json.loads(path.read_text(encoding="utf-8"))
    await init_db(create_tables=settings.CREATE_TABLES)
    try:
        async with AsyncSessionLocal() as session:
            return await load_snapshot(session, data, replace=replace)
    finally:
        await close_db()


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Load initial records from a snapshot file")
    parser.add_argument("snapshot", type=Path, help="JSON file in the GET /api/data format")
    parser.add_argument("--replace", action="store_true", help="delete existing rows of loaded collections first")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL)
    counts = asyncio.run(seed(args.snapshot, replace=args.replace))
    for collection, count in counts.items():
        print(f"{collection}: {count}")


if __name__ == "__main__":
    main()
