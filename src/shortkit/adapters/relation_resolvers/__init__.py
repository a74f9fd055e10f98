"""Storage-backed relation resolvers.

`SimpleRelationResolver` (in `shortkit.domain.relation_resolver`) never touches
storage; the resolvers here de-duplicate against a store instead.
"""

from .base import StoredRelationResolverBase, canonical_authority
from .errors import InvalidDomainError, RelationResolutionError
from .memory import InMemoryRelationData, InMemoryRelationResolver
from .sqlalchemy_resolver import SqlAlchemyRelationResolver

__all__ = [
    "StoredRelationResolverBase",
    "canonical_authority",
    "InvalidDomainError",
    "RelationResolutionError",
    "InMemoryRelationData",
    "InMemoryRelationResolver",
    "SqlAlchemyRelationResolver",
]
