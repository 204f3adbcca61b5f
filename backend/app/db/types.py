"""Column Types — identifier and timestamp storage shared by all ORM models.

Invariants:
    - UUIDBytes stores every identifier as a fixed 16-byte blob (core/identity.py encoding)
    - UTCDateTime always hands back timezone-aware UTC datetimes, whatever the backend stores
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, LargeBinary
from sqlalchemy.types import TypeDecorator

from app.core import identity


class UUIDBytes(TypeDecorator):
    """uuid.UUID <-> BLOB(16)."""

    impl = LargeBinary(identity.IDENTIFIER_LENGTH)
    cache_ok = True

    def process_bind_param(self, value: uuid.UUID | None, dialect) -> bytes | None:
        if value is None:
            return None
        return identity.encode(value)

    def process_result_value(self, value: bytes | None, dialect) -> uuid.UUID | None:
        if value is None:
            return None
        return identity.decode(value)


class UTCDateTime(TypeDecorator):
    """Naive values are read as UTC; aware values are converted to UTC before binding."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        return as_utc(value)

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        return as_utc(value)


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
