"""
Process entry points.

wholesale-api     runs uvicorn with one worker process per CPU unless
                  WEB_CONCURRENCY says otherwise; uvicorn supervises and
                  restarts the workers.
wholesale-initdb  creates any missing tables on the configured database
                  for local development. Deployed databases use Alembic.
"""

import asyncio
import logging
import os

import uvicorn

from app.core.config import config
from app.core.db.engine import init_models

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=config.log_level.upper())
    workers = config.workers or os.cpu_count() or 1
    logger.info(f"Starting {workers} worker process(es) on {config.host}:{config.port}")
    uvicorn.run(
        "app.main:app",
        host=config.host,
        port=config.port,
        workers=workers,
        log_level=config.log_level.lower(),
    )


def init_db() -> None:
    logging.basicConfig(level=config.log_level.upper())
    asyncio.run(init_models())
    logger.info("Database tables created")


if __name__ == "__main__":
    main()
