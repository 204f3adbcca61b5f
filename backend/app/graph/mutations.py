"""Mutate Root — createUser, createMessage, updateMessage, deleteMessage.

Invariants:
    - Passwords are hashed before anything reaches the store; a hash failure returns null
      without a store call
    - updateMessage is keyed by the message id from its input, never the author id
    - deleteMessage returns the deleted message's last state and leaves replies in place
"""

import asyncio
from typing import Annotated
from uuid import UUID

import strawberry
from strawberry.types import Info

from app.core.domain_types import MessageId, UserId
from app.core.outcome import Found
from app.graph.resolution import project, resolve, settle
from app.graph.types import (
    CreateMessageInput, CreateUserInput, MessageNode, UpdateMessageInput, UserNode,
    message_node, user_node,
)
from app.models.message import Message
from app.models.user import User


@strawberry.type(name="Mutate")
class Mutation:
    @strawberry.mutation
    async def create_user(
        self, info: Info, input: CreateUserInput,
    ) -> UserNode | None:
        # Argon2 is CPU-bound; keep it off the event loop.
        hashed = await settle(
            asyncio.to_thread(info.context.hasher.hash, input.password),
            "Mutate.createUser",
        )
        if not isinstance(hashed, Found):
            return project(hashed, info.context.surface_faults)
        new_user = User(
            display_name=input.display_name,
            username=input.username,
            password_hash=hashed.value,
        )
        user = await resolve(
            info, "Mutate.createUser", info.context.users.insert(new_user),
        )
        return user_node(user)

    @strawberry.mutation
    async def create_message(
        self, info: Info, input: CreateMessageInput,
    ) -> MessageNode | None:
        new_message = Message(
            user_id=UserId(input.user_id),
            content=input.content,
            parent_message_id=(
                MessageId(input.parent_message_id)
                if input.parent_message_id is not None else None
            ),
        )
        message = await resolve(
            info, "Mutate.createMessage", info.context.messages.insert(new_message),
        )
        return message_node(message)

    @strawberry.mutation
    async def update_message(
        self, info: Info, input: UpdateMessageInput,
    ) -> MessageNode | None:
        message = await resolve(
            info, "Mutate.updateMessage",
            info.context.messages.update(MessageId(input.id), input.content),
        )
        return message_node(message)

    @strawberry.mutation
    async def delete_message(
        self,
        info: Info,
        id: Annotated[
            UUID, strawberry.argument(description="id of the message to be deleted"),
        ],
    ) -> MessageNode | None:
        message = await resolve(
            info, "Mutate.deleteMessage",
            info.context.messages.delete(MessageId(id)),
        )
        return message_node(message)
