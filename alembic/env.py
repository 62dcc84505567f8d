"""Alembic environment — migration runner for the pizza catalog.

Imports all models to ensure metadata is populated before autogenerate.

Design Decisions:
    - Database URL comes from Settings (DATABASE_URL env / .env), same as the app
    - Falls back to alembic.ini value when Settings yields nothing
"""

from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool

from alembic import context

from pizza_catalog.config import get_settings
from pizza_catalog.db.base import Base
# Import all models so Base.metadata has them
import pizza_catalog.models  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _get_database_url() -> str:
    """Get DB URL from settings, else alembic.ini."""
    url = get_settings().database_url
    if url:
        return url
    return config.get_main_option("sqlalchemy.url")


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    context.configure(
        url=_get_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    configuration = config.get_section(config.config_ini_section, {})
    configuration["sqlalchemy.url"] = _get_database_url()
    connectable = engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()
    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
