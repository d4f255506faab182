"""Alembic environment for the media requests schema.

The target URL is ``sqlalchemy.url`` when the caller sets one, otherwise
``DATABASE_URL`` from settings. SQLite migrations run in batch mode because
SQLite cannot ALTER most column and constraint definitions in place.
"""
from logging.config import fileConfig
from sqlalchemy import engine_from_config, pool
from alembic import context

from media_requests.config import settings
from media_requests.database import Base

# Register models with Base.metadata for autogenerate
from media_requests.models.user import User                 # noqa: F401
from media_requests.models.request import MediaRequest      # noqa: F401

config = context.config
if not config.get_main_option("sqlalchemy.url"):
    config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata
database_url = config.get_main_option("sqlalchemy.url")
render_as_batch = database_url.startswith("sqlite")


def run_migrations_offline() -> None:
    """Emit SQL for ``database_url`` without connecting."""
    context.configure(
        url=database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=render_as_batch,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=render_as_batch,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
