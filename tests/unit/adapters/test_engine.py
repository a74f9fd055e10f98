"""Unit tests for the engine factory."""

from pathlib import Path

import pytest
from sqlalchemy import text

from shortkit.adapters.db.engine import SQLITE_BUSY_TIMEOUT_MS, is_sqlite, make_engine

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("sqlite://", True),
        ("sqlite+pysqlite:///tmp/x.db", True),
        ("postgresql+psycopg://u:p@localhost/db", False),
    ],
)
def test_is_sqlite(url, expected):
    """Backend detection ignores the driver part."""
    assert is_sqlite(url) is expected


def test_sqlite_pragmas_applied(tmp_path: Path):
    """Every SQLite connection gets the configured PRAGMAs."""
    engine = make_engine(f"sqlite:///{tmp_path / 'pragmas.db'}")
    with engine.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar_one() == 1
        assert conn.execute(text("PRAGMA journal_mode")).scalar_one() == "wal"
        assert (
            conn.execute(text("PRAGMA busy_timeout")).scalar_one()
            == SQLITE_BUSY_TIMEOUT_MS
        )
        # NORMAL
        assert conn.execute(text("PRAGMA synchronous")).scalar_one() == 1
    engine.dispose()
