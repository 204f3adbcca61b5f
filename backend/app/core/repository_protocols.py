"""Boundary Protocols — contracts between the graph layer and the store.

Invariants:
    - The graph layer depends on these Protocols, never on SQLAlchemy directly
    - Point lookups raise ResourceNotFoundError; list queries return [] when nothing matches
    - Every method performs exactly one store statement on one pooled session

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass fakes without inheritance
"""

from datetime import datetime
from typing import Protocol

from app.core.domain_types import MessageId, UserId
from app.models.message import Message
from app.models.user import User


class UserRepositoryLike(Protocol):
    """Contract for user persistence."""
    async def insert(self, user: User) -> User: ...
    async def get(self, user_id: UserId) -> User: ...


class MessageRepositoryLike(Protocol):
    """Contract for message persistence, including thread queries."""
    async def insert(self, message: Message) -> Message: ...
    async def update(self, message_id: MessageId, content: str) -> Message: ...
    async def get(self, message_id: MessageId) -> Message: ...
    async def get_by_time_range(
        self, user_id: UserId | None, after: datetime, before: datetime,
    ) -> list[Message]: ...
    async def get_replies(self, parent_id: MessageId) -> list[Message]: ...
    async def get_by_author(
        self, user_id: UserId, roots_only: bool = False,
    ) -> list[Message]: ...
    async def delete(self, message_id: MessageId) -> Message: ...


class PasswordHasherLike(Protocol):
    """Contract for one-way credential hashing."""
    def hash(self, password: str) -> str: ...
    def verify(self, password_hash: str, password: str) -> bool: ...
