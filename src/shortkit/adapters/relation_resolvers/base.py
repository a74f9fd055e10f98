"""Shared mechanics for relation resolvers backed by a store."""

from __future__ import annotations

import abc
import logging
import re
from collections.abc import Iterable

from shortkit.domain.relation_resolver import RelationResolver
from shortkit.domain.utils import normalize_tags
from shortkit.domain.value_objects import Domain, Tag

from .errors import InvalidDomainError

logger = logging.getLogger(__name__)

_FORBIDDEN_IN_AUTHORITY = re.compile(r"[\s/]")


def canonical_authority(authority: str) -> str:
    """Validate a domain authority and return it stripped.

    Raises:
        InvalidDomainError: If the authority is blank or contains whitespace
            or a slash.
    """
    stripped = authority.strip()
    if not stripped:
        raise InvalidDomainError(authority, "authority is blank")
    if _FORBIDDEN_IN_AUTHORITY.search(stripped):
        raise InvalidDomainError(authority, "authority contains whitespace or '/'")
    return stripped


class StoredRelationResolverBase(RelationResolver):
    """Resolver that de-duplicates tags and domains against a store.

    Known names resolve to the stored entity, unknown ones are created. The
    configured default domain never becomes a `Domain`: resolving it yields
    None, same as resolving no domain at all.
    """

    def __init__(self, default_domain: str | None = None) -> None:
        self.default_domain = default_domain

    def resolve_tags(self, names: Iterable[str]) -> set[Tag]:
        canonical = normalize_tags(names)
        if not canonical:
            return set()
        resolved = {self._get_or_create_tag(name) for name in sorted(canonical)}
        logger.debug("Resolved %d tag(s) via %s", len(resolved), type(self).__name__)
        return resolved

    def resolve_domain(self, authority: str | None) -> Domain | None:
        if authority is None:
            return None
        canonical = canonical_authority(authority)
        if canonical == self.default_domain:
            return None
        return self._get_or_create_domain(canonical)

    @abc.abstractmethod
    def _get_or_create_tag(self, name: str) -> Tag:
        """Return the stored tag called `name`, creating it when missing."""

    @abc.abstractmethod
    def _get_or_create_domain(self, authority: str) -> Domain:
        """Return the stored domain for `authority`, creating it when missing."""
