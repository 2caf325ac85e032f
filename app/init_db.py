"""Create the catalog tables, indexes and fulltext analyzer in SurrealDB."""

import asyncio
import logging
import sys

import apps.mentor.models  # noqa: F401
import apps.subscription.models  # noqa: F401
from server import config
from server.db import db_manager


async def main() -> None:
    """Connect, define the schema and disconnect."""

    config.Settings.config_logger()
    await db_manager.aconnect()
    try:
        await db_manager.ainit_schema()
    finally:
        await db_manager.adisconnect()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except Exception:
        logging.exception("Schema initialization failed.")
        sys.exit(1)
