"""Dialect dispatch for the relation store.

PostgreSQL and SQLite are supported. Both understand
``INSERT ... ON CONFLICT DO NOTHING``, which lets two resolvers race on the
same new tag name without either of them failing.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.sql.dml import Insert


class UnsupportedDialect(Exception):
    """Raised for databases other than PostgreSQL and SQLite."""


class DialectName(str, Enum):
    """Supported SQLAlchemy backend names."""

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def of(cls, name: str) -> DialectName:
        """Map a backend name, alias or driver-qualified name onto a member.

        Example:
            >>> DialectName.of("postgresql+psycopg")
            <DialectName.POSTGRES: 'postgresql'>

        Raises:
            UnsupportedDialect: For anything but PostgreSQL or SQLite.
        """
        backend = name.partition("+")[0].strip().lower()
        try:
            return cls(_ALIASES.get(backend, backend))
        except ValueError as e:
            raise UnsupportedDialect(f"Unsupported dialect: {name!r}") from e


_ALIASES = {"postgres": "postgresql", "pg": "postgresql"}


def insert_ignoring_conflicts(
    table: Table, dialect: DialectName, values: Mapping[str, Any]
) -> Insert:
    """Build an INSERT of `values` that skips rows hitting a unique constraint."""
    insert = pg_insert if dialect is DialectName.POSTGRES else sqlite_insert
    return insert(table).values(**values).on_conflict_do_nothing()
