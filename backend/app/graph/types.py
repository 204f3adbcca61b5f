"""Graph Types — client-facing projections of User and Message.

Invariants:
    - password_hash is never part of a projection
    - Scalar fields are copied from the ORM row; relationship fields fetch lazily,
      one repository call each (no batching)
    - parentMessage of a root message is null without touching the store
"""

from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

import strawberry
from strawberry.types import Info

from app.core.domain_types import MessageId, UserId
from app.graph.resolution import resolve
from app.models.message import Message
from app.models.user import User


@strawberry.type(name="Message", description="A board message; replies point at a parent")
class MessageNode:
    id: UUID | None
    user_id: UUID
    content: str
    created_at: datetime | None
    updated_at: datetime | None
    parent_message_id: strawberry.Private[UUID | None]

    @strawberry.field
    def is_reply(self) -> bool:
        return self.parent_message_id is not None

    @strawberry.field
    async def parent_message(self, info: Info) -> Optional["MessageNode"]:
        if self.parent_message_id is None:
            return None
        parent = await resolve(
            info, "Message.parentMessage",
            info.context.messages.get(MessageId(self.parent_message_id)),
        )
        return message_node(parent)

    @strawberry.field
    async def replies(self, info: Info) -> Optional[list["MessageNode"]]:
        if self.id is None:
            return None
        rows = await resolve(
            info, "Message.replies",
            info.context.messages.get_replies(MessageId(self.id)),
        )
        return message_nodes(rows)

    @classmethod
    def from_model(cls, message: Message) -> "MessageNode":
        return cls(
            id=message.id,
            user_id=message.user_id,
            content=message.content,
            created_at=message.created_at,
            updated_at=message.updated_at,
            parent_message_id=message.parent_message_id,
        )


@strawberry.type(name="User", description="A board member")
class UserNode:
    id: UUID | None
    display_name: str
    username: str
    created_at: datetime | None
    updated_at: datetime | None

    @strawberry.field(description="Messages authored by this user; root messages unless includeReplies")
    async def messages(
        self,
        info: Info,
        include_replies: Annotated[
            bool, strawberry.argument(description="also return the user's replies"),
        ] = False,
    ) -> list[MessageNode] | None:
        if self.id is None:
            return None
        rows = await resolve(
            info, "User.messages",
            info.context.messages.get_by_author(
                UserId(self.id), roots_only=not include_replies,
            ),
        )
        return message_nodes(rows)

    @classmethod
    def from_model(cls, user: User) -> "UserNode":
        return cls(
            id=user.id,
            display_name=user.display_name,
            username=user.username,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


def message_node(message: Message | None) -> MessageNode | None:
    return None if message is None else MessageNode.from_model(message)


def message_nodes(messages: list[Message] | None) -> list[MessageNode] | None:
    if messages is None:
        return None
    return [MessageNode.from_model(m) for m in messages]


def user_node(user: User | None) -> UserNode | None:
    return None if user is None else UserNode.from_model(user)


# ─── Inputs ─────────────────────────────────────────────────────

@strawberry.input(name="InputUser", description="User input object")
class CreateUserInput:
    display_name: str
    username: str
    password: str


@strawberry.input(name="InputMessage", description="Message input object")
class CreateMessageInput:
    user_id: UUID
    content: str
    parent_message_id: UUID | None = None


@strawberry.input(name="UpdateMessage", description="Message update input object")
class UpdateMessageInput:
    id: UUID
    content: str
