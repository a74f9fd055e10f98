"""Relation resolver backed by SQLAlchemy (PostgreSQL and SQLite)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from shortkit.adapters.db.dialects import DialectName, insert_ignoring_conflicts
from shortkit.adapters.db.schema import domains, tags
from shortkit.domain.value_objects import Domain, Tag

from .base import StoredRelationResolverBase

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.engine import Connection


class SqlAlchemyRelationResolver(StoredRelationResolverBase):
    """Resolve tags and domains against the ``tags``/``domains`` tables.

    Rows are created with a no-throw insert (``ON CONFLICT DO NOTHING``) and
    then read back, so two resolvers racing on the same new name both end up
    with the single row that won. The caller owns the transaction: nothing is
    committed here.
    """

    def __init__(self, connection: Connection, default_domain: str | None = None):
        super().__init__(default_domain)
        self.connection = connection
        self.dialect = DialectName.of(connection.dialect.name)

    def _get_or_create_tag(self, name: str) -> Tag:
        tag_id = self._insert_and_fetch_id(tags, "name", name)
        return Tag(name, id=tag_id)

    def _get_or_create_domain(self, authority: str) -> Domain:
        domain_id = self._insert_and_fetch_id(domains, "authority", authority)
        return Domain(authority, id=domain_id)

    def _insert_and_fetch_id(self, table: Table, column: str, value: str) -> int:
        stmt = select(table.c.id).where(table.c[column] == value)
        if (existing := self.connection.execute(stmt).scalar_one_or_none()) is not None:
            return int(existing)
        self.connection.execute(
            insert_ignoring_conflicts(table, self.dialect, {column: value})
        )
        return int(self.connection.execute(stmt).scalar_one())

