"""``shortkit resolve``: resolve tags and domains against the relation store.

Unknown names are created, known ones are returned as stored. Each resolved
entity is printed to stdout as ``<id>\\t<name>``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

import click
import click_extra as clickx
from sqlalchemy.exc import OperationalError

from shortkit import config
from shortkit.adapters.db.engine import make_engine
from shortkit.adapters.relation_resolvers import (
    InvalidDomainError,
    SqlAlchemyRelationResolver,
)

from .db import MISSING_DB_URL_MSG, UPGRADE_HINT
from .helpers import warn

logger = logging.getLogger(__name__)


@contextmanager
def _resolver() -> Iterator[SqlAlchemyRelationResolver]:
    """Yield a resolver bound to a transaction committed on clean exit."""
    try:
        url = config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e

    engine = make_engine(url)
    try:
        with engine.begin() as conn:
            yield SqlAlchemyRelationResolver(
                conn, default_domain=config.get_default_domain()
            )
    except OperationalError as e:
        logger.debug("Resolution failed", exc_info=True)
        raise click.ClickException(
            f"Database error: {e.orig}\n{UPGRADE_HINT}"
        ) from e
    finally:
        engine.dispose()


def _run[T](action: Callable[[SqlAlchemyRelationResolver], T]) -> T:
    with _resolver() as resolver:
        try:
            return action(resolver)
        except InvalidDomainError as e:
            raise click.ClickException(str(e)) from e


@click.group(cls=clickx.ExtraGroup)
def resolve() -> None:
    """Resolve tags and domains, creating the ones not stored yet."""


@resolve.command()
@click.argument("names", nargs=-1, required=True)
def tags(names: tuple[str, ...]) -> None:
    """Resolve tag NAMES (canonicalized, de-duplicated)."""
    resolved = _run(lambda r: r.resolve_tags(names))
    for tag in sorted(resolved, key=lambda t: t.name):
        click.echo(f"{tag.id}\t{tag.name}")


@resolve.command()
@click.argument("authority")
def domain(authority: str) -> None:
    """Resolve a domain AUTHORITY (e.g. ``s.example.com``)."""
    resolved = _run(lambda r: r.resolve_domain(authority))
    if resolved is None:
        warn(f"{authority.strip()} is the default domain; nothing is stored for it.")
        return
    click.echo(f"{resolved.id}\t{resolved.authority}")
