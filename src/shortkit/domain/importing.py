"""Short URLs originating from another shortener.

`ImportedShortUrl` describes a record pulled from an external source and
`creation_from_import()` maps it into a `ShortUrlCreation`. Imported data is
trusted, so URL validation is skipped.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from shortkit.domain import models
from shortkit.domain.models import ShortUrlCreation
from shortkit.domain.short_code import DEFAULT_SHORT_CODE_LENGTH
from shortkit.domain.utils import dict_to_dataclass, normalize_tags


# Wire keys of an imported record, mapped onto field names
_RECORD_KEYS = {
    models.LONG_URL: "long_url",
    "shortCode": "short_code",
    "createdAt": "created_at",
}
_META_KEYS = {
    models.VALID_SINCE: "valid_since",
    models.VALID_UNTIL: "valid_until",
    models.MAX_VISITS: "max_visits",
}


def _field_names(data: Mapping[str, Any], keys: Mapping[str, str]) -> dict[str, Any]:
    return {keys.get(key, key): value for key, value in data.items()}


class ImportSource(Enum):
    """Enumeration of supported import sources."""

    BITLY = "bitly"
    YOURLS = "yourls"
    CSV = "csv"
    SHLINK = "shlink"
    KUTT = "kutt"


@dataclass(frozen=True)
class ImportedShortUrlMeta:
    """Validity and quota metadata carried by an imported record."""

    valid_since: datetime | str | None = None
    valid_until: datetime | str | None = None
    max_visits: int | None = None


@dataclass(frozen=True)
class ImportedShortUrl:
    """A short URL record coming from an external source.

    `source` accepts an `ImportSource` or its string value; `tags` accepts any
    iterable of names and is canonicalized.
    """

    source: ImportSource
    long_url: str
    short_code: str
    created_at: datetime | str
    domain: str | None = None
    tags: frozenset[str] = frozenset()
    title: str | None = None
    meta: ImportedShortUrlMeta = field(default_factory=ImportedShortUrlMeta)

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", ImportSource(self.source))
        object.__setattr__(self, "tags", normalize_tags(self.tags))

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "ImportedShortUrl":
        """Build an imported record from a (possibly nested) dict.

        Keys may be field names (``long_url``) or wire keys (``longUrl``), in
        `record` as well as in its ``meta`` dict.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If `source` is not a known import source.
        """
        data = _field_names(record, _RECORD_KEYS)
        if isinstance(meta := data.get("meta"), Mapping):
            data["meta"] = _field_names(meta, _META_KEYS)
        return dict_to_dataclass(cls, data)


def creation_from_import(
    url: ImportedShortUrl,
    import_short_code: bool,
    *,
    short_code_length: int = DEFAULT_SHORT_CODE_LENGTH,
) -> ShortUrlCreation:
    """Map an imported record into creation input.

    Args:
        url: The imported record.
        import_short_code: Carry the original short code over as a custom slug.
        short_code_length: Length of the generated code when the original one
            is not carried over.

    Returns:
        The creation input. Validity dates and the creation date are not part
        of it; `ShortUrl.from_import()` applies them from the record afterwards.
    """
    return ShortUrlCreation(
        long_url=url.long_url,
        domain=url.domain,
        tags=url.tags,
        title=url.title,
        max_visits=url.meta.max_visits,
        custom_slug=url.short_code if import_short_code else None,
        short_code_length=short_code_length,
        validate_url=False,
    )
