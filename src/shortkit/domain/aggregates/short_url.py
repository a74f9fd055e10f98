"""Aggregate representing a short URL."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from enum import Enum

from shortkit.domain import errors
from shortkit.domain.importing import ImportedShortUrl, creation_from_import
from shortkit.domain.models import ShortUrlCreation, ShortUrlEdition
from shortkit.domain.relation_resolver import RelationResolver, SimpleRelationResolver
from shortkit.domain.short_code import (
    DEFAULT_SHORT_CODE_LENGTH,
    RandomShortCodeGenerator,
    ShortCodeGenerator,
)
from shortkit.domain.unsettable import is_provided, resolve
from shortkit.domain.utils import normalize_date, normalize_optional_date
from shortkit.domain.value_objects import Domain, Tag, Visit, VisitType

# pylint: disable=too-many-instance-attributes,too-many-arguments,too-many-locals

logger = logging.getLogger(__name__)


class Status(Enum):
    """Enumeration of possible ShortUrl lifecycle states."""

    DRAFT = "draft"
    PERSISTED = "persisted"


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ShortUrl:
    """Aggregate representing a short URL.

    Build instances through `create()`, `with_long_url()` or `from_import()`.
    The aggregate is a plain mutable object; serializing concurrent edits of the
    same short URL is up to the persistence layer.
    """

    def __init__(
        self,
        *,
        long_url: str,
        short_code: str,
        short_code_length: int,
        date_created: datetime,
        custom_slug_was_provided: bool = False,
        tags: Iterable[Tag] = (),
        domain: Domain | None = None,
        valid_since: datetime | None = None,
        valid_until: datetime | None = None,
        max_visits: int | None = None,
        author_api_key: str | None = None,
        title: str | None = None,
        title_was_auto_resolved: bool = False,
        crawlable: bool = False,
        forward_query: bool = True,
        short_code_generator: ShortCodeGenerator | None = None,
    ) -> None:
        self._id: int | str | None = None
        self._long_url = long_url
        self._short_code = short_code
        self._short_code_length = short_code_length
        self._date_created = normalize_date(date_created)
        self._custom_slug_was_provided = custom_slug_was_provided
        self._tags: set[Tag] = set(tags)
        self._domain = domain
        self._valid_since = normalize_optional_date(valid_since)
        self._valid_until = normalize_optional_date(valid_until)
        self._max_visits = max_visits
        self._author_api_key = author_api_key
        self._title = title
        self._title_was_auto_resolved = title_was_auto_resolved
        self._crawlable = crawlable
        self._forward_query = forward_query
        self._import_source: str | None = None
        self._import_original_short_code: str | None = None
        self._visits: list[Visit] = []
        self._short_code_generator = short_code_generator or RandomShortCodeGenerator()

    # --- Construction Paths ---

    @classmethod
    def create(
        cls,
        creation: ShortUrlCreation,
        relation_resolver: RelationResolver | None = None,
        *,
        short_code_generator: ShortCodeGenerator | None = None,
    ) -> ShortUrl:
        """Create a new, not yet persisted, short URL.

        Args:
            creation: The creation input.
            relation_resolver: Strategy used to materialize tags and domain.
                Defaults to `SimpleRelationResolver`.
            short_code_generator: Generator for the short code (and later
                regenerations). Defaults to `RandomShortCodeGenerator`.

        Returns:
            ShortUrl: The new aggregate. The custom slug, if any, becomes the
            short code; otherwise a code of `creation.short_code_length` is
            generated.

        Raises:
            Whatever the relation resolver raises, unchanged.
        """
        resolver = relation_resolver or SimpleRelationResolver()
        generator = short_code_generator or RandomShortCodeGenerator()

        tags = resolver.resolve_tags(creation.tags)
        domain = resolver.resolve_domain(creation.domain)
        short_code = (
            creation.custom_slug
            if creation.custom_slug is not None
            else generator.generate(creation.short_code_length)
        )

        short_url = cls(
            long_url=creation.long_url,
            short_code=short_code,
            short_code_length=creation.short_code_length,
            date_created=_now(),
            custom_slug_was_provided=creation.has_custom_slug,
            tags=tags,
            domain=domain,
            valid_since=creation.valid_since,
            valid_until=creation.valid_until,
            max_visits=creation.max_visits,
            author_api_key=creation.api_key,
            title=creation.title,
            title_was_auto_resolved=creation.title_was_auto_resolved,
            crawlable=creation.crawlable,
            forward_query=creation.forward_query,
            short_code_generator=generator,
        )
        logger.debug(
            "Created short URL %s (custom slug: %s)",
            short_code,
            creation.has_custom_slug,
        )
        return short_url

    @classmethod
    def with_long_url(cls, long_url: str) -> ShortUrl:
        """Create a short URL with nothing but its destination."""
        return cls.create(ShortUrlCreation(long_url=long_url))

    @classmethod
    def from_import(
        cls,
        url: ImportedShortUrl,
        import_short_code: bool,
        relation_resolver: RelationResolver | None = None,
        *,
        short_code_generator: ShortCodeGenerator | None = None,
        short_code_length: int = DEFAULT_SHORT_CODE_LENGTH,
    ) -> ShortUrl:
        """Create a short URL from a record imported from another shortener.

        The import source, the original short code, the validity window and the
        creation date are taken from the record, overriding what `create()`
        computed.

        Args:
            url: The imported record.
            import_short_code: Keep the record's short code instead of
                generating a new one.
            relation_resolver: Strategy used to materialize tags and domain.
            short_code_generator: Generator used when the code is not imported.
            short_code_length: Length of the generated code when the record's
                own code is not imported.

        Returns:
            ShortUrl: The new aggregate.
        """
        short_url = cls.create(
            creation_from_import(
                url, import_short_code, short_code_length=short_code_length
            ),
            relation_resolver,
            short_code_generator=short_code_generator,
        )
        short_url._import_source = url.source.value
        short_url._import_original_short_code = url.short_code
        short_url._valid_since = normalize_optional_date(url.meta.valid_since)
        short_url._valid_until = normalize_optional_date(url.meta.valid_until)
        short_url._date_created = normalize_date(url.created_at)
        return short_url

    # --- Read accessors ---

    @property
    def id(self) -> int | str | None:
        """Identity assigned by persistence, None while a draft."""
        return self._id

    @property
    def status(self) -> Status:
        """Current lifecycle state."""
        return Status.DRAFT if self._id is None else Status.PERSISTED

    @property
    def long_url(self) -> str:
        return self._long_url

    @property
    def short_code(self) -> str:
        return self._short_code

    @property
    def short_code_length(self) -> int:
        return self._short_code_length

    @property
    def date_created(self) -> datetime:
        return self._date_created

    @property
    def tags(self) -> frozenset[Tag]:
        return frozenset(self._tags)

    @property
    def domain(self) -> Domain | None:
        return self._domain

    @property
    def valid_since(self) -> datetime | None:
        return self._valid_since

    @property
    def valid_until(self) -> datetime | None:
        return self._valid_until

    @property
    def max_visits(self) -> int | None:
        return self._max_visits

    @property
    def custom_slug_was_provided(self) -> bool:
        return self._custom_slug_was_provided

    @property
    def import_source(self) -> str | None:
        return self._import_source

    @property
    def import_original_short_code(self) -> str | None:
        return self._import_original_short_code

    @property
    def author_api_key(self) -> str | None:
        return self._author_api_key

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def title_was_auto_resolved(self) -> bool:
        return self._title_was_auto_resolved

    @property
    def crawlable(self) -> bool:
        return self._crawlable

    @property
    def forward_query(self) -> bool:
        return self._forward_query

    @property
    def visits(self) -> tuple[Visit, ...]:
        return tuple(self._visits)

    # --- State Transitions ---

    def update(
        self,
        edition: ShortUrlEdition,
        relation_resolver: RelationResolver | None = None,
    ) -> None:
        """Apply a partial edit in place.

        Only fields provided in `edition` are overwritten, with two exceptions:
        a None `long_url` is ignored, and the title follows its own precedence
        rule (a user-provided title is never replaced by an auto-resolved one).

        Args:
            edition: The edit to apply.
            relation_resolver: Strategy used to re-resolve tags when they are
                provided. Defaults to `SimpleRelationResolver`.

        Raises:
            Whatever the relation resolver raises, unchanged.
        """
        self._valid_since = normalize_optional_date(
            resolve(edition.valid_since, self._valid_since, clearable=True)
        )
        self._valid_until = normalize_optional_date(
            resolve(edition.valid_until, self._valid_until, clearable=True)
        )
        self._max_visits = resolve(edition.max_visits, self._max_visits, clearable=True)
        self._long_url = resolve(edition.long_url, self._long_url, clearable=False)

        if is_provided(edition.tags):
            resolver = relation_resolver or SimpleRelationResolver()
            self._tags = resolver.resolve_tags(edition.tags or ())

        self._crawlable = resolve(edition.crawlable, self._crawlable, clearable=False)

        if (
            self._title is None
            or edition.was_provided("title")
            or (self._title_was_auto_resolved and edition.title_was_auto_resolved)
        ):
            self._title = edition.title if is_provided(edition.title) else None
            self._title_was_auto_resolved = edition.title_was_auto_resolved

        self._forward_query = resolve(
            edition.forward_query, self._forward_query, clearable=False
        )

    def regenerate_short_code(self) -> None:
        """Assign a freshly generated short code.

        Raises:
            ShortCodeCannotBeRegenerated: If the short URL is already persisted,
                or if it was created with a custom slug and was not imported.
        """
        if self._id is not None:
            raise errors.ShortCodeCannotBeRegenerated.for_short_url_already_persisted()
        if self._custom_slug_was_provided and self._import_source is None:
            raise errors.ShortCodeCannotBeRegenerated.for_short_url_with_custom_slug()

        previous = self._short_code
        self._short_code = self._short_code_generator.generate(self._short_code_length)
        logger.debug("Regenerated short code %s -> %s", previous, self._short_code)

    def mark_persisted(self, short_url_id: int | str) -> None:
        """Record the identity assigned by the persistence layer.

        Once persisted, the short code is frozen. Marking again with the same
        identity is a no-op.

        Raises:
            ShortUrlAlreadyPersistedError: If a different identity was already set.
        """
        if self._id is not None:
            if self._id == short_url_id:
                return  # Idempotent
            raise errors.ShortUrlAlreadyPersistedError(self._id, short_url_id)
        self._id = short_url_id

    def set_visits(self, visits: Iterable[Visit]) -> None:
        """Replace the visit ledger view. Called by the visit-loading collaborator."""
        self._visits = list(visits)

    # --- Derived state ---

    def is_enabled(self, now: datetime | None = None) -> bool:
        """Whether the short URL currently redirects.

        Args:
            now: Reference time; defaults to the current UTC time. A naive
                value is taken as UTC.

        Returns:
            False when the visit quota is used up, when `now` is before
            `valid_since`, or when `now` is after `valid_until`; True otherwise.
        """
        if self._max_visits is not None and self.visits_count() >= self._max_visits:
            return False

        now = _now() if now is None else normalize_date(now)
        if self._valid_since is not None and self._valid_since > now:
            return False
        if self._valid_until is not None and self._valid_until < now:
            return False
        return True

    def visits_count(self) -> int:
        """Total number of visits."""
        return len(self._visits)

    def non_bot_visits_count(self) -> int:
        """Number of visits not flagged as potential bots."""
        return sum(1 for visit in self._visits if not visit.potential_bot)

    def most_recent_imported_visit_date(self) -> datetime | None:
        """Date of the last imported visit, or None if there is none.

        Imported visits are ordered by `id` when all of them have one, otherwise
        by their position in the ledger.
        """
        imported = [v for v in self._visits if v.type is VisitType.IMPORTED]
        if not imported:
            return None
        if all(v.id is not None for v in imported):
            return max(imported, key=lambda v: v.id or 0).date
        return imported[-1].date

    def __repr__(self) -> str:
        return (
            f"ShortUrl(short_code={self._short_code!r}, long_url={self._long_url!r}, "
            f"status={self.status.value})"
        )
