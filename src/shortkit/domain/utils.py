"""Domain layer utilities."""

import re
from collections.abc import Iterable
from dataclasses import MISSING, fields, is_dataclass
from datetime import datetime, timezone
from types import NoneType
from typing import Any, TypeVar, cast, get_args, get_origin, get_type_hints

D = TypeVar("D")

_WHITESPACE = re.compile(r"\s+")


def normalize_tag(name: str) -> str:
    """Return the canonical form of a tag name.

    Leading/trailing whitespace is stripped, the name is lower-cased and inner
    whitespace runs are replaced by a single dash.

    Example:
        >>> normalize_tag("  Foo  Bar ")
        'foo-bar'
    """
    return _WHITESPACE.sub("-", name.strip().lower())


def normalize_tags(names: Iterable[str] | None) -> frozenset[str]:
    """Canonicalize a collection of tag names, dropping empty ones."""
    if names is None:
        return frozenset()
    return frozenset(tag for tag in (normalize_tag(n) for n in names) if tag)


def normalize_date(value: datetime | str) -> datetime:
    """Convert a datetime or ISO-8601 string into an aware UTC datetime.

    Naive values are treated as UTC.

    Raises:
        ValueError: If a string value is not valid ISO-8601.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def normalize_optional_date(value: datetime | str | None) -> datetime | None:
    """Like `normalize_date`, but let None through."""
    return None if value is None else normalize_date(value)


def dict_to_dataclass(dc_type: type[D], values: dict[str, Any]) -> D:
    """Build `dc_type` from a dict, recursing into nested dataclass fields.

    Keys that are not init fields of `dc_type` are ignored and absent fields
    fall back to their defaults. A nested dict is converted when its field is
    annotated with a dataclass, or ``SomeDataclass | None``.

    Raises:
        TypeError: If `dc_type` is not a dataclass.
        KeyError: If a field without a default is absent, even an Optional one.
    """
    if not is_dataclass(dc_type):
        raise TypeError(f"{dc_type} is not a dataclass type")
    hints = get_type_hints(dc_type)
    kwargs: dict[str, Any] = {}
    for f in fields(dc_type):
        if not f.init:
            continue
        if f.name not in values:
            if f.default is MISSING and f.default_factory is MISSING:
                raise KeyError(f"Missing required field '{f.name}'")
            continue
        value = values[f.name]
        nested = _nested_dataclass(hints.get(f.name, f.type))
        if nested is not None and isinstance(value, dict):
            value = dict_to_dataclass(nested, value)
        kwargs[f.name] = value
    return cast(D, dc_type(**kwargs))


def _nested_dataclass(annotation: Any) -> type[Any] | None:
    candidates = [a for a in get_args(annotation) if a is not NoneType]
    if get_origin(annotation) is None:
        candidates = [annotation]
    if len(candidates) == 1 and is_dataclass(candidates[0]):
        return cast(type[Any], candidates[0])
    return None
