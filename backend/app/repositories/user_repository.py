"""User Repository — insert and point lookup for board members.

Invariants:
    - insert() always assigns a fresh identifier and timestamps, overwriting any on the input
    - get() raises ResourceNotFoundError when no row matches
    - Duplicate usernames fail at commit and surface as DatabaseError
"""

import logging

from sqlalchemy import select

from app.core import identity
from app.core.domain_types import UserId
from app.core.errors import ResourceNotFoundError
from app.db.types import utcnow
from app.infrastructure.database import DatabaseSessionManager
from app.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Store access for User rows."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def insert(self, user: User) -> User:
        """Persist an unsaved user and return it with id and timestamps populated."""
        user.id = identity.generate()
        user.created_at = user.updated_at = utcnow()
        async with self._db.session() as db:
            db.add(user)
            await db.commit()
            await db.refresh(user)
        logger.info(
            f"User created: {user.username}",
            extra={"entity_id": str(user.id), "operation": "insert"},
        )
        return user

    async def get(self, user_id: UserId) -> User:
        async with self._db.session() as db:
            result = await db.execute(select(User).where(User.id == user_id))
            user = result.scalar_one_or_none()
        if user is None:
            raise ResourceNotFoundError("User", str(user_id))
        return user
