"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with all tables created
    - db_manager is a DatabaseSessionManager bound to that database and is installed
      as the process singleton while the test runs
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

import app.models  # noqa: E402,F401
import app.infrastructure.database as db_module  # noqa: E402
from app.core import identity  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.db.types import utcnow  # noqa: E402
from app.infrastructure.database import DatabaseSessionManager  # noqa: E402
from app.models.message import Message  # noqa: E402
from app.repositories.message_repository import MessageRepository  # noqa: E402
from app.repositories.user_repository import UserRepository  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def db_manager(test_engine, test_session_factory):
    """Session manager over the test engine, installed as the singleton."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory

    original = db_module.db_manager
    db_module.db_manager = manager
    yield manager
    db_module.db_manager = original


@pytest.fixture
def user_repo(db_manager):
    return UserRepository(db_manager)


@pytest.fixture
def message_repo(db_manager):
    return MessageRepository(db_manager)


@pytest.fixture
def seed_message(test_session_factory):
    """Write a message row directly with an explicit created_at.

    Repository inserts always stamp the current time, so time-window tests
    place rows through a plain session instead.
    """
    async def _seed(user_id, content="hello", created_at=None, parent_id=None) -> Message:
        stamp = created_at or utcnow()
        message = Message(
            id=identity.generate(),
            user_id=user_id,
            content=content,
            parent_message_id=parent_id,
            created_at=stamp,
            updated_at=stamp,
        )
        async with test_session_factory() as session:
            session.add(message)
            await session.commit()
        return message
    return _seed
