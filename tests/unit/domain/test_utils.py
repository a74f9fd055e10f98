"""Unit tests for shortkit.domain.utils module."""

import re
from dataclasses import asdict, dataclass, field
from datetime import datetime, timedelta, timezone

import pytest

from shortkit.domain.utils import (
    dict_to_dataclass,
    normalize_date,
    normalize_optional_date,
    normalize_tag,
    normalize_tags,
)

# pylint: disable=missing-class-docstring, magic-value-comparison


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("foo", "foo"),
        ("  Foo  ", "foo"),
        ("Foo Bar", "foo-bar"),
        ("foo \t  bar\nbaz", "foo-bar-baz"),
        ("ALREADY-dashed", "already-dashed"),
    ],
)
def test_normalize_tag(raw, expected):
    """Tags are trimmed, lower-cased and have whitespace runs dashed."""
    assert normalize_tag(raw) == expected


def test_normalize_tags_deduplicates_and_drops_blanks():
    """Names equal after canonicalization collapse; blank names vanish."""
    assert normalize_tags(["Foo Bar", "foo  bar", " ", "", "baz"]) == {
        "foo-bar",
        "baz",
    }


def test_normalize_tags_none_is_empty():
    """None means no tags."""
    assert normalize_tags(None) == frozenset()


def test_normalize_date_treats_naive_as_utc():
    """Naive datetimes are taken to be UTC already."""
    result = normalize_date(datetime(2025, 1, 2, 3, 4, 5))
    assert result == datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert result.tzinfo is timezone.utc


def test_normalize_date_converts_offsets_to_utc():
    """Aware datetimes are converted, not relabelled."""
    plus_two = timezone(timedelta(hours=2))
    result = normalize_date(datetime(2025, 1, 2, 12, 0, tzinfo=plus_two))
    assert result == datetime(2025, 1, 2, 10, 0, tzinfo=timezone.utc)
    assert result.utcoffset() == timedelta(0)


@pytest.mark.parametrize(
    "raw",
    ["2025-01-02T10:00:00+00:00", "2025-01-02T12:00:00+02:00", "2025-01-02T10:00:00Z"],
)
def test_normalize_date_parses_iso_strings(raw):
    """ISO-8601 strings are parsed and normalized to UTC."""
    assert normalize_date(raw) == datetime(2025, 1, 2, 10, 0, tzinfo=timezone.utc)


def test_normalize_date_rejects_garbage():
    """Non ISO-8601 strings raise ValueError."""
    with pytest.raises(ValueError):
        normalize_date("next tuesday")


def test_normalize_optional_date_passes_none_through():
    """None stays None."""
    assert normalize_optional_date(None) is None


def test_dict_to_dataclass_round_trip():
    """dict_to_dataclass rebuilds a nested dataclass from its dict form."""

    @dataclass(frozen=True, slots=True)
    class Inner:
        a: int
        b: str

    @dataclass(frozen=True, slots=True)
    class Outer:
        x: float
        y: Inner
        z: dict[str, int]

    original = Outer(x=3.14, y=Inner(a=42, b="hello"), z={"key": 1})
    assert dict_to_dataclass(Outer, asdict(original)) == original


def test_dict_to_dataclass_type_error():
    """A non-dataclass target raises TypeError."""
    with pytest.raises(
        TypeError, match=re.escape("<class 'int'> is not a dataclass type")
    ):
        dict_to_dataclass(int, {"a": 1})


@pytest.mark.parametrize(
    "data, missing", [({"a": 1, "c": None}, "b"), ({"a": 1, "b": "test"}, "c")]
)
def test_dict_to_dataclass_missing_field(data, missing):
    """A required field absent from the dict raises KeyError, even if Optional."""

    @dataclass(frozen=True, slots=True)
    class Foo:
        a: int
        b: str
        c: float | None

    with pytest.raises(KeyError, match=f"Missing required field '{missing}'"):
        dict_to_dataclass(Foo, data)


def test_dict_to_dataclass_defaults_and_extra_fields():
    """Defaults and default factories fill gaps; unknown keys are ignored."""

    @dataclass
    class Foo:
        a: int
        b: list[int] = field(default_factory=list)
        c: str = "c"
        d: int = field(default=0, init=False)

    foo = dict_to_dataclass(Foo, {"a": 1, "unexpected": True})
    assert foo == Foo(a=1)
    assert foo.b == []
    assert foo.c == "c"
