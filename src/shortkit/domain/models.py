"""Input models for creating and editing short URLs.

`ShortUrlCreation` carries everything needed to build a new aggregate.
`ShortUrlEdition` carries a partial edit where every editable field may be
left `UNSET`, explicitly cleared with `None`, or given a new value.

Both expose `from_raw_data()` to map wire-level payloads (camelCase keys, ISO
dates) into the model. Validation of those payloads happens upstream.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from shortkit.domain.short_code import DEFAULT_SHORT_CODE_LENGTH, MIN_SHORT_CODE_LENGTH
from shortkit.domain.unsettable import UNSET, Unsettable, is_provided
from shortkit.domain.utils import normalize_optional_date, normalize_tags

# pylint: disable=too-many-instance-attributes

# Wire keys
LONG_URL = "longUrl"
DOMAIN = "domain"
TAGS = "tags"
TITLE = "title"
VALID_SINCE = "validSince"
VALID_UNTIL = "validUntil"
MAX_VISITS = "maxVisits"
CUSTOM_SLUG = "customSlug"
SHORT_CODE_LENGTH = "shortCodeLength"
CRAWLABLE = "crawlable"
FORWARD_QUERY = "forwardQuery"
API_KEY = "apiKey"
VALIDATE_URL = "validateUrl"
TITLE_WAS_AUTO_RESOLVED = "titleWasAutoResolved"


@dataclass(frozen=True)
class ShortUrlCreation:
    """Input for creating a new short URL."""

    long_url: str
    domain: str | None = None
    tags: frozenset[str] = frozenset()
    title: str | None = None
    title_was_auto_resolved: bool = False
    valid_since: datetime | None = None
    valid_until: datetime | None = None
    max_visits: int | None = None
    custom_slug: str | None = None
    short_code_length: int = DEFAULT_SHORT_CODE_LENGTH
    crawlable: bool = False
    forward_query: bool = True
    api_key: str | None = None
    validate_url: bool = False

    @property
    def has_custom_slug(self) -> bool:
        """Whether a user-chosen short code was supplied."""
        return self.custom_slug is not None

    @classmethod
    def from_raw_data(
        cls,
        data: Mapping[str, Any],
        *,
        default_short_code_length: int = DEFAULT_SHORT_CODE_LENGTH,
    ) -> "ShortUrlCreation":
        """Build a creation input from a raw payload.

        Args:
            data: Payload using wire keys (``longUrl``, ``customSlug``, ...).
            default_short_code_length: Length used when the payload has none.

        Returns:
            The creation input. Tags are canonicalized and dates normalized to UTC.
        """
        length = data.get(SHORT_CODE_LENGTH) or default_short_code_length
        return cls(
            long_url=data[LONG_URL],
            domain=data.get(DOMAIN),
            tags=normalize_tags(data.get(TAGS)),
            title=data.get(TITLE),
            title_was_auto_resolved=bool(data.get(TITLE_WAS_AUTO_RESOLVED, False)),
            valid_since=normalize_optional_date(data.get(VALID_SINCE)),
            valid_until=normalize_optional_date(data.get(VALID_UNTIL)),
            max_visits=data.get(MAX_VISITS),
            custom_slug=data.get(CUSTOM_SLUG),
            short_code_length=max(MIN_SHORT_CODE_LENGTH, int(length)),
            crawlable=bool(data.get(CRAWLABLE, False)),
            forward_query=bool(data.get(FORWARD_QUERY, True)),
            api_key=data.get(API_KEY),
            validate_url=bool(data.get(VALIDATE_URL, False)),
        )


@dataclass(frozen=True)
class ShortUrlEdition:
    """A partial edit of an existing short URL.

    Fields left as ``UNSET`` are not touched by `ShortUrl.update()`.
    """

    long_url: Unsettable[str] = UNSET
    tags: Unsettable[frozenset[str]] = UNSET
    title: Unsettable[str] = UNSET
    title_was_auto_resolved: bool = False
    valid_since: Unsettable[datetime] = UNSET
    valid_until: Unsettable[datetime] = UNSET
    max_visits: Unsettable[int] = UNSET
    crawlable: Unsettable[bool] = UNSET
    forward_query: Unsettable[bool] = UNSET
    validate_url: bool = False

    def was_provided(self, name: str) -> bool:
        """Whether the named field carries a value (possibly None) in this edit."""
        return is_provided(getattr(self, name))

    @classmethod
    def from_raw_data(cls, data: Mapping[str, Any]) -> "ShortUrlEdition":
        """Build an edit from a raw payload; absent keys become ``UNSET``."""

        def _get(key: str) -> Any:
            return data[key] if key in data else UNSET

        tags = _get(TAGS)
        valid_since = _get(VALID_SINCE)
        valid_until = _get(VALID_UNTIL)
        return cls(
            long_url=_get(LONG_URL),
            tags=normalize_tags(tags) if is_provided(tags) else UNSET,
            title=_get(TITLE),
            title_was_auto_resolved=bool(data.get(TITLE_WAS_AUTO_RESOLVED, False)),
            valid_since=(
                normalize_optional_date(valid_since)
                if is_provided(valid_since)
                else UNSET
            ),
            valid_until=(
                normalize_optional_date(valid_until)
                if is_provided(valid_until)
                else UNSET
            ),
            max_visits=_get(MAX_VISITS),
            crawlable=_get(CRAWLABLE),
            forward_query=_get(FORWARD_QUERY),
            validate_url=bool(data.get(VALIDATE_URL, False)),
        )
