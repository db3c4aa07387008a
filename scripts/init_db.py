#!/usr/bin/env python3
"""Create the commission tables directly from the ORM metadata.

For local development; deployed databases are migrated with Alembic.
"""

import asyncio
import logging

from commission_engine.config import settings
from commission_engine.database import close_db, init_db


async def main() -> None:
    try:
        await init_db()
        print(f"Created tables for {settings.postgres_db}")
    finally:
        await close_db()


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    asyncio.run(main())
