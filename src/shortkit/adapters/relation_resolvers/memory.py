"""In-memory relation resolver, mainly for tests and single-process use."""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field

from shortkit.domain.value_objects import Domain, Tag

from .base import StoredRelationResolverBase


@dataclass
class InMemoryRelationData:
    """Shared store of tags and domains.

    Several resolvers can share one instance to simulate a common database.
    """

    tags: dict[str, Tag] = field(default_factory=dict)
    domains: dict[str, Domain] = field(default_factory=dict)
    lock: threading.Lock = field(default_factory=threading.Lock)
    _ids: itertools.count = field(default_factory=lambda: itertools.count(1))

    def next_id(self) -> int:
        """Return the next identity (caller must hold `lock`)."""
        return next(self._ids)


class InMemoryRelationResolver(StoredRelationResolverBase):
    """Relation resolver backed by an `InMemoryRelationData` store."""

    def __init__(
        self,
        data: InMemoryRelationData | None = None,
        default_domain: str | None = None,
    ) -> None:
        super().__init__(default_domain)
        self._data = data if data is not None else InMemoryRelationData()

    def _get_or_create_tag(self, name: str) -> Tag:
        with self._data.lock:
            if (tag := self._data.tags.get(name)) is None:
                tag = self._data.tags[name] = Tag(name, id=self._data.next_id())
            return tag

    def _get_or_create_domain(self, authority: str) -> Domain:
        with self._data.lock:
            if (domain := self._data.domains.get(authority)) is None:
                domain = Domain(authority, id=self._data.next_id())
                self._data.domains[authority] = domain
            return domain
