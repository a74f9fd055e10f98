"""Module including value objects used across the domain layer."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class Tag:
    """A tag attached to short URLs.

    Equality and hashing only consider the canonical `name`, so a tag loaded
    from storage and a freshly wrapped one with the same name collapse into a
    single set member.
    """

    name: str
    id: int | None = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Domain:
    """A non-default domain short URLs can be served from."""

    authority: str
    id: int | None = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.authority


class VisitType(Enum):
    """Enumeration of visit origins relevant to a short URL."""

    NORMAL = "normal"
    IMPORTED = "imported"


@dataclass(frozen=True)
class Visit:
    """A recorded visit to a short URL.

    Visits are written by the visit-recording collaborator; the aggregate only
    reads them.
    """

    date: datetime
    potential_bot: bool = False
    type: VisitType = VisitType.NORMAL
    id: int | None = None
