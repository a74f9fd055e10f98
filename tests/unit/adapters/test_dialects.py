"""Unit tests for dialect dispatch."""

import pytest
from sqlalchemy.dialects import postgresql, sqlite

from shortkit.adapters.db.dialects import (
    DialectName,
    UnsupportedDialect,
    insert_ignoring_conflicts,
)
from shortkit.adapters.db.schema import tags

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("postgresql", DialectName.POSTGRES),
        ("postgres", DialectName.POSTGRES),
        ("postgresql+psycopg", DialectName.POSTGRES),
        ("PG", DialectName.POSTGRES),
        ("sqlite", DialectName.SQLITE),
        (" sqlite+pysqlite ", DialectName.SQLITE),
    ],
)
def test_of(raw, expected):
    """Aliases and driver-qualified names map onto supported dialects."""
    assert DialectName.of(raw) is expected


@pytest.mark.parametrize("raw", ["mysql", "", "oracle+cx"])
def test_of_unsupported(raw):
    """Anything else is rejected."""
    with pytest.raises(UnsupportedDialect):
        DialectName.of(raw)


@pytest.mark.parametrize(
    ("name", "dialect"),
    [
        (DialectName.SQLITE, sqlite.dialect()),
        (DialectName.POSTGRES, postgresql.dialect()),
    ],
)
def test_insert_ignoring_conflicts(name, dialect):
    """The insert compiles to ON CONFLICT DO NOTHING on both backends."""
    stmt = insert_ignoring_conflicts(tags, name, {"name": "foo"})
    sql = str(stmt.compile(dialect=dialect))
    assert sql.startswith("INSERT INTO tags")
    assert "ON CONFLICT DO NOTHING" in sql
