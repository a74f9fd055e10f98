"""Column types shared by the relation store tables."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import BigInteger, Integer
from sqlalchemy.types import DateTime, TypeDecorator

from shortkit.adapters.db.dialects import DialectName
from shortkit.domain.utils import normalize_date

if TYPE_CHECKING:
    from sqlalchemy.engine.interfaces import Dialect

__all__ = ["BIGINT_PK", "UTCDateTime"]

# SQLite only auto-increments INTEGER PRIMARY KEY columns
BIGINT_PK = BigInteger().with_variant(Integer(), "sqlite")


class UTCDateTime(TypeDecorator[datetime]):  # pylint: disable=too-many-ancestors
    """Datetime column that always reads back as aware UTC.

    Naive values are taken as UTC, like everywhere else in SHORTKIT. SQLite
    has no time zone support, so values are stored there as naive UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    @property
    def python_type(self) -> type[datetime]:
        return datetime

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> Any:
        if value is None:
            return None
        value = normalize_date(value)
        if DialectName.of(dialect.name) is DialectName.SQLITE:
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value: Any, dialect: Dialect) -> datetime | None:
        return None if value is None else normalize_date(value)
