"""Programmatic Alembic upgrades run at application startup."""

import asyncio
import logging

from alembic import command
from alembic.config import Config

from mockbuster.config import Settings

logger = logging.getLogger(__name__)


def alembic_config(settings: Settings) -> Config:
    """Alembic config pointed at the configured database."""
    config = Config(settings.alembic_config)
    # configparser interpolation treats '%' specially
    config.set_main_option("sqlalchemy.url", settings.database_url.replace("%", "%%"))
    # Keep the application's logging configuration
    config.attributes["configure_logger"] = False
    return config


async def run_migrations(settings: Settings) -> None:
    """
    Upgrade the database schema to the latest revision.

    Alembic's async env.py starts its own event loop, so the upgrade runs
    in a worker thread.
    """
    config = alembic_config(settings)
    await asyncio.to_thread(command.upgrade, config, "head")
    logger.info("Database migrations completed successfully")
