"""Message Repository — CRUD plus thread-aware queries for board messages.

Invariants:
    - insert() assigns id, created_at and updated_at; caller-supplied values are overwritten
    - update() and delete() are keyed by the message's own id
    - get_replies() filters on parent_message_id; get_by_author() filters on user_id
    - get_by_time_range() bounds are inclusive on both ends; naive bounds are read as UTC
    - delete() removes one row only; replies keep their parent_message_id
    - List queries are ordered by created_at and return [] when nothing matches
"""

import logging
from datetime import datetime

from sqlalchemy import select

from app.core import identity
from app.core.domain_types import MessageId, UserId
from app.core.errors import ResourceNotFoundError
from app.db.types import as_utc, utcnow
from app.infrastructure.database import DatabaseSessionManager
from app.models.message import Message

logger = logging.getLogger(__name__)


class MessageRepository:
    """Store access for Message rows."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def insert(self, message: Message) -> Message:
        """Persist an unsaved message and return it with id and timestamps populated."""
        message.id = identity.generate()
        message.created_at = message.updated_at = utcnow()
        async with self._db.session() as db:
            db.add(message)
            await db.commit()
            await db.refresh(message)
        logger.info(
            "Message created",
            extra={"entity_id": str(message.id), "operation": "insert"},
        )
        return message

    async def update(self, message_id: MessageId, content: str) -> Message:
        async with self._db.session() as db:
            message = await db.get(Message, message_id)
            if message is None:
                raise ResourceNotFoundError("Message", str(message_id))
            message.content = content
            await db.commit()
            await db.refresh(message)
        return message

    async def get(self, message_id: MessageId) -> Message:
        async with self._db.session() as db:
            result = await db.execute(
                select(Message).where(Message.id == message_id),
            )
            message = result.scalar_one_or_none()
        if message is None:
            raise ResourceNotFoundError("Message", str(message_id))
        return message

    async def get_by_time_range(
        self, user_id: UserId | None, after: datetime, before: datetime,
    ) -> list[Message]:
        """Messages created within [after, before], optionally by one author."""
        query = select(Message).where(
            Message.created_at >= as_utc(after),
            Message.created_at <= as_utc(before),
        )
        if user_id is not None:
            query = query.where(Message.user_id == user_id)
        return await self._fetch_all(query.order_by(Message.created_at))

    async def get_replies(self, parent_id: MessageId) -> list[Message]:
        return await self._fetch_all(
            select(Message)
            .where(Message.parent_message_id == parent_id)
            .order_by(Message.created_at)
        )

    async def get_by_author(
        self, user_id: UserId, roots_only: bool = False,
    ) -> list[Message]:
        """Messages written by user_id; roots_only drops replies."""
        query = select(Message).where(Message.user_id == user_id)
        if roots_only:
            query = query.where(Message.parent_message_id.is_(None))
        return await self._fetch_all(query.order_by(Message.created_at))

    async def delete(self, message_id: MessageId) -> Message:
        """Delete one message and return its last persisted state."""
        async with self._db.session() as db:
            message = await db.get(Message, message_id)
            if message is None:
                raise ResourceNotFoundError("Message", str(message_id))
            await db.delete(message)
            await db.commit()
        logger.info(
            "Message deleted",
            extra={"entity_id": str(message_id), "operation": "delete"},
        )
        return message

    async def _fetch_all(self, query) -> list[Message]:
        async with self._db.session() as db:
            result = await db.execute(query)
            return list(result.scalars().all())
