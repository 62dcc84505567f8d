"""Startup — wires logging and the database manager from Settings.

Invariants:
    - Called once per process by the embedding application
    - Never creates tables; schema comes from alembic migrations
"""

import logging

from pizza_catalog.config import Settings, get_settings
from pizza_catalog.infrastructure.database import DatabaseSessionManager, init_db
from pizza_catalog.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def configure(settings: Settings | None = None) -> DatabaseSessionManager:
    """Configure logging and initialize the process-wide session manager."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(settings.database_url, echo=settings.database_echo)
    logger.info("Pizza catalog configured")
    return manager
