"""Relational schema for resolved relations.

Defines the ``tags`` and ``domains`` tables used by the storage-backed relation
resolver, attached to a shared `MetaData` with a naming convention so that
constraints and indexes get deterministic names (Alembic autogenerate relies
on that).

Constraints:

| Constraint               | Purpose                               |
|--------------------------|---------------------------------------|
| UNIQUE(tags.name)        | one row per canonical tag name        |
| UNIQUE(domains.authority)| one row per domain authority          |
"""

from __future__ import annotations

from sqlalchemy import Column, Identity, MetaData, String, Table, text

from shortkit.adapters.db.sa_types import BIGINT_PK, UTCDateTime

__all__ = ["metadata", "tags", "domains"]

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(table_name)s_%(column_0_N_label)s",
        "uq": "uq_%(table_name)s_%(column_0_N_name)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_N_name)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

tags = Table(
    "tags",
    metadata,
    Column("id", BIGINT_PK, Identity(start=1), primary_key=True),
    Column(
        "name",
        String(255),
        nullable=False,
        unique=True,
        comment="Canonical tag name.",
    ),
    Column(
        "created_at",
        UTCDateTime(),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    ),
    comment="Tags attached to short URLs.",
)

domains = Table(
    "domains",
    metadata,
    Column("id", BIGINT_PK, Identity(start=1), primary_key=True),
    Column(
        "authority",
        String(512),
        nullable=False,
        unique=True,
        comment="Host (and optional port) short URLs are served from.",
    ),
    Column(
        "created_at",
        UTCDateTime(),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    ),
    comment="Non-default domains.",
)
