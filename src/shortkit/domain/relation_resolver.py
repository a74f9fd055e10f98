"""Relation resolution port.

A relation resolver turns the raw tag names and domain authority found in
creation/edit inputs into `Tag` and `Domain` entities. Implementations may be
purely structural (see `SimpleRelationResolver`) or de-duplicate against a
persistent store (see `shortkit.adapters.relation_resolvers`). The aggregate
does not care which one it is handed.
"""

import abc
from collections.abc import Iterable

from shortkit.domain.utils import normalize_tags
from shortkit.domain.value_objects import Domain, Tag


class RelationResolver(abc.ABC):
    """Contract for resolving tag names and domain authorities into entities."""

    @abc.abstractmethod
    def resolve_tags(self, names: Iterable[str]) -> set[Tag]:
        """Resolve tag names into tag entities.

        Args:
            names: Raw tag names. Duplicates (after canonicalization) and
                empty names are collapsed/dropped.

        Returns:
            One `Tag` per distinct canonical name.
        """

    @abc.abstractmethod
    def resolve_domain(self, authority: str | None) -> Domain | None:
        """Resolve a domain authority into a domain entity.

        Args:
            authority: The domain authority, or None for the default domain.

        Returns:
            None when `authority` is None, otherwise a `Domain`.
        """


class SimpleRelationResolver(RelationResolver):
    """Resolver that performs no lookups.

    Wraps every canonical tag name and domain authority in a fresh entity
    each time it is called.
    """

    def resolve_tags(self, names: Iterable[str]) -> set[Tag]:
        return {Tag(name) for name in normalize_tags(names)}

    def resolve_domain(self, authority: str | None) -> Domain | None:
        if authority is None:
            return None
        return Domain(authority)
