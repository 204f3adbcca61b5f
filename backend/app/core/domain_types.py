"""Domain Types — identity types that replace bare UUIDs across the codebase.

Invariants:
    - UserId and MessageId wrap UUIDs; repositories and resolvers take these, not bare UUID

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType
from uuid import UUID


UserId = NewType("UserId", UUID)
MessageId = NewType("MessageId", UUID)
