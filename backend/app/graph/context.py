"""GraphQL Context — per-request bundle of repositories and the process-wide hasher.

Invariants:
    - Repositories are rebuilt per request on top of the shared DatabaseSessionManager
    - One CredentialHasher per process
"""

from strawberry.fastapi import BaseContext

from app.config import get_settings
from app.core.repository_protocols import (
    MessageRepositoryLike, PasswordHasherLike, UserRepositoryLike,
)
from app.infrastructure.database import get_db_manager
from app.infrastructure.password_hasher import CredentialHasher
from app.repositories.message_repository import MessageRepository
from app.repositories.user_repository import UserRepository

_hasher = CredentialHasher()


class GraphContext(BaseContext):
    def __init__(
        self,
        users: UserRepositoryLike,
        messages: MessageRepositoryLike,
        hasher: PasswordHasherLike,
        surface_faults: bool = False,
    ):
        super().__init__()
        self.users = users
        self.messages = messages
        self.hasher = hasher
        self.surface_faults = surface_faults


async def get_context() -> GraphContext:
    """FastAPI dependency feeding strawberry's context_getter."""
    db = get_db_manager()
    return GraphContext(
        users=UserRepository(db),
        messages=MessageRepository(db),
        hasher=_hasher,
        surface_faults=get_settings().graph_surface_faults,
    )
