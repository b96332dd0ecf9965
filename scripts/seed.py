# scripts/seed.py
"""
固定カタログ(12件)を equipment テーブルへ投入します。
何度実行しても重複しないよう、id で get-or-create します。

    DATABASE_URL=postgresql+asyncpg://... python -m scripts.seed
"""

import argparse
import asyncio
import logging
import os
import sys

# パス調整（repo 直下から実行する前提）
sys.path.append(os.path.abspath("."))

from app.core.config import get_settings
from app.db import configure_engine, dispose_engine
from app.infra.unit_of_work import SqlAlchemyUnitOfWork
from app.repositories.fixtures import FIXTURE_EQUIPMENT

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def seed(database_url: str, *, dry_run: bool = False) -> int:
    session_factory = configure_engine(database_url)
    try:
        async with SqlAlchemyUnitOfWork(session_factory) as uow:
            existing = await uow.equipment.existing_ids()
            missing = [r for r in FIXTURE_EQUIPMENT if r.id not in existing]
            logger.info("existing=%d missing=%d", len(existing), len(missing))
            if dry_run:
                await uow.rollback()
                return len(missing)
            inserted = await uow.equipment.insert(missing)
        logger.info("inserted=%d", inserted)
        return inserted
    finally:
        await dispose_engine()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Seed the equipment catalog")
    p.add_argument("--database-url", default=None, help="defaults to DATABASE_URL")
    p.add_argument("--dry-run", action="store_true", help="count missing rows without writing")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    url = args.database_url or get_settings().database_url
    if not url:
        logger.error("DATABASE_URL is not set")
        return 2
    asyncio.run(seed(url, dry_run=args.dry_run))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
