"""User ORM — persists a board member and their hashed credential.

Invariants:
    - id is a 16-byte UUID blob, None until the repository inserts the row
    - username is unique (constraint enforced by the store)
    - password_hash is the encoded Argon2 string, never the raw password
    - created_at/updated_at are assigned on insert
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.db.types import UTCDateTime, UUIDBytes, utcnow


class User(Base):
    """Board member — authors of messages."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(UUIDBytes, primary_key=True)
    display_name: Mapped[str] = mapped_column(String(200), nullable=False)
    username: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True,
    )
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow, onupdate=utcnow,
    )

    def __repr__(self) -> str:
        return f"User(id={self.id!s}, username={self.username!r})"
