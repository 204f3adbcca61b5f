"""Message ORM — persists a post; a non-null parent_message_id makes it a reply.

Invariants:
    - user_id is required; parent_message_id is optional (None = root message)
    - user_id and parent_message_id are soft references: no foreign keys, targets may be gone
    - Deleting a message never touches its replies

Design Decisions:
    - No ORM relationships: the graph layer resolves author, parent and replies lazily,
      one repository call per field
"""

import uuid
from datetime import datetime

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.db.types import UTCDateTime, UUIDBytes, utcnow


class Message(Base):
    """Board message — root post or reply."""
    __tablename__ = "messages"

    id: Mapped[uuid.UUID] = mapped_column(UUIDBytes, primary_key=True)
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUIDBytes, nullable=False, index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    parent_message_id: Mapped[uuid.UUID | None] = mapped_column(
        UUIDBytes, nullable=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow, index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow, onupdate=utcnow,
    )

    @property
    def is_reply(self) -> bool:
        return self.parent_message_id is not None

    def __repr__(self) -> str:
        return f"Message(id={self.id!s}, parent={self.parent_message_id!s})"
