"""Fixtures for relation resolver contract tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from shortkit.adapters.relation_resolvers import (
    InMemoryRelationData,
    InMemoryRelationResolver,
    SqlAlchemyRelationResolver,
)
from shortkit.domain.relation_resolver import RelationResolver, SimpleRelationResolver

type ResolverFactory = Callable[[str | None], RelationResolver]


@pytest.fixture(params=["simple", "memory", "sqlalchemy"])
def relation_resolver(request: pytest.FixtureRequest) -> Iterator[RelationResolver]:
    """Return a fresh RelationResolver for the requested backend.

    Supported params:
      - `"simple"` → SimpleRelationResolver
      - `"memory"` → InMemoryRelationResolver
      - `"sqlalchemy"` → SqlAlchemyRelationResolver over in-memory SQLite
    """
    match request.param:
        case "simple":
            yield SimpleRelationResolver()
        case "memory":
            yield InMemoryRelationResolver()
        case "sqlalchemy":
            engine = request.getfixturevalue("sqlite_engine_memory")
            with engine.begin() as conn:
                yield SqlAlchemyRelationResolver(conn)
        case _:
            raise ValueError(f"unknown relation resolver type: {request.param}")


@pytest.fixture(params=["memory", "sqlalchemy"])
def stored_resolver_factory(request: pytest.FixtureRequest) -> Iterator[ResolverFactory]:
    """Yield a factory of storage-backed resolvers sharing one store.

    Every resolver built by the factory sees the same tags and domains, which
    is what two requests served by one deployment would see.
    """
    match request.param:
        case "memory":
            data = InMemoryRelationData()
            yield lambda default_domain=None: InMemoryRelationResolver(
                data, default_domain=default_domain
            )
        case "sqlalchemy":
            engine = request.getfixturevalue("sqlite_engine_memory")
            with engine.begin() as conn:
                yield lambda default_domain=None: SqlAlchemyRelationResolver(
                    conn, default_domain=default_domain
                )
        case _:
            raise ValueError(f"unknown stored resolver type: {request.param}")
