"""Alembic environment for the rolegate schema."""

from alembic import context
from sqlalchemy import engine_from_config, pool

from rolegate.config import get_settings

config = context.config


def _database_url() -> str:
    url = get_settings().database_url or config.get_main_option("sqlalchemy.url")
    if not url:
        raise RuntimeError("Set ROLEGATE_DATABASE_URL to run migrations")
    # SQLAlchemy needs the psycopg 3 dialect spelled out
    if url.startswith("postgresql://"):
        url = "postgresql+psycopg://" + url.removeprefix("postgresql://")
    return url


def run_migrations_offline() -> None:
    context.configure(url=_database_url(), literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = _database_url()
    connectable = engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
