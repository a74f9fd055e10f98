"""Alembic environment for the tag/domain store.

The database URL comes from ``-x url=...``, then the config's
``sqlalchemy.url``, then ``SHORTKIT_DB_URL``. Online runs connect through
`make_engine()` so SQLite gets the same PRAGMAs as the application, and
SQLite migrations are rendered in batch mode.
"""

from logging.config import fileConfig
from typing import Any

from alembic import context

from shortkit import config as settings
from shortkit.adapters.db.dialects import DialectName
from shortkit.adapters.db.engine import make_engine
from shortkit.adapters.db.schema import metadata

# pylint: disable=no-member

alembic_cfg = context.config

if alembic_cfg.config_file_name is not None:
    fileConfig(alembic_cfg.config_file_name)

COMPARE_OPTIONS: dict[str, Any] = {
    "target_metadata": metadata,
    "compare_type": True,
    "compare_server_default": True,
}


def database_url() -> str:
    """Return the URL migrations run against.

    Raises:
        DatabaseUrlNotSetError: No URL given anywhere.
    """
    x_args = context.get_x_argument(as_dictionary=True)
    url = x_args.get("url") or alembic_cfg.get_main_option(settings.ALEMBIC_URL_KEY)
    return url or settings.get_db_url()


def run_offline(url: str) -> None:
    """Emit the migration SQL instead of executing it."""
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMPARE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_online(url: str) -> None:
    engine = make_engine(url)
    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection,
                render_as_batch=(
                    DialectName.of(connection.dialect.name) is DialectName.SQLITE
                ),
                **COMPARE_OPTIONS,
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_offline(database_url())
else:
    run_online(database_url())
