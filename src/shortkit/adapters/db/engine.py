"""Database engine factory.

Every engine SHORTKIT uses comes from `make_engine()`. On SQLite each new DBAPI
connection is tuned for several resolvers writing to the same file: WAL lets
readers proceed during a write and the busy timeout makes a concurrent insert
wait for the lock rather than fail.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

SQLITE_BUSY_TIMEOUT_MS = 5000

SQLITE_PRAGMAS = (
    "foreign_keys=ON",
    "journal_mode=WAL",
    f"busy_timeout={SQLITE_BUSY_TIMEOUT_MS}",
    "synchronous=NORMAL",
)


def is_sqlite(url: str | URL) -> bool:
    """Whether `url` points at a SQLite database."""
    return make_url(str(url)).get_backend_name() == "sqlite"


def apply_sqlite_pragmas(dbapi_conn: Any, _conn_record: Any = None) -> None:
    """Run `SQLITE_PRAGMAS` on a raw sqlite3 connection."""
    cursor = dbapi_conn.cursor()
    try:
        for pragma in SQLITE_PRAGMAS:
            cursor.execute(f"PRAGMA {pragma};")
    finally:
        cursor.close()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an engine for `url`.

    Args:
        url: SQLAlchemy database URL.
        echo: Log every SQL statement.
    """
    engine = create_engine(url, echo=echo)
    if is_sqlite(url):
        event.listen(engine, "connect", apply_sqlite_pragmas)
    logger.debug(
        "Created %s engine for %s",
        engine.dialect.name,
        engine.url.render_as_string(hide_password=True),
    )
    return engine
