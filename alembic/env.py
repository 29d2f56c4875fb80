"""Alembic migration environment for the subway schema.

Connection settings come from the API's own Settings (environment or .env),
so migrations and the running service always target the same database.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

import subway_api.models  # noqa: E402, F401  registers stations, lines, sections
from subway_api.config import settings  # noqa: E402
from subway_api.database import Base, transform_database_url_for_psycopg2  # noqa: E402

target_metadata = Base.metadata


def get_url() -> str:
    """Sync URL for migrations: DATABASE_URL_SYNC, else DATABASE_URL without asyncpg."""
    if settings.database_url_sync:
        return settings.database_url_sync
    return transform_database_url_for_psycopg2(settings.database_url)


def run_migrations_offline() -> None:
    """Emit the migration SQL without connecting."""
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a single unpooled connection."""
    configuration = config.get_section(config.config_ini_section)
    configuration["sqlalchemy.url"] = get_url()
    connectable = engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
