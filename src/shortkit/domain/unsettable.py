"""Tri-state fields for partial edits of a short URL.

An ``Unsettable[T]`` edit field is in one of three states:

* ``UNSET``: not part of the edit; the current value is kept.
* ``None``: cleared, for the fields that may be cleared.
* a ``T``: replaced by that value.

This saves each edit model from carrying a "was provided" flag per field.
"""

from enum import Enum
from typing import TypeVar


class _Unset(Enum):
    """Type of the `UNSET` sentinel. An enum member pickles and copies as itself."""

    UNSET = "UNSET"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return self.value


UNSET = _Unset.UNSET

T = TypeVar("T")
type Unsettable[T] = T | _Unset | None


def is_provided(value: object) -> bool:
    """Whether `value` is anything but ``UNSET`` (None included)."""
    return value is not UNSET


def resolve(value: "Unsettable[T]", current: T, *, clearable: bool) -> T | None:
    """Apply one tri-state edit field to the current value.

    ``UNSET`` keeps `current`. ``None`` clears only when `clearable`, and
    otherwise also keeps `current`. Any other value replaces it.
    """
    if value is UNSET or (value is None and not clearable):
        return current
    return value  # type: ignore[return-value]
