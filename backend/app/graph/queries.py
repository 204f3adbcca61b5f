"""Query Root — read operations: user, message, messages.

Invariants:
    - Each field is one repository call; failures resolve to null
    - messages returns [] (not null) when the range holds no messages
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

import strawberry
from strawberry.types import Info

from app.core.domain_types import MessageId, UserId
from app.graph.resolution import resolve
from app.graph.types import MessageNode, UserNode, message_node, message_nodes, user_node


@strawberry.type
class Query:
    @strawberry.field
    async def user(
        self,
        info: Info,
        id: Annotated[UUID, strawberry.argument(description="id of the user")],
    ) -> UserNode | None:
        user = await resolve(info, "Query.user", info.context.users.get(UserId(id)))
        return user_node(user)

    @strawberry.field
    async def message(
        self,
        info: Info,
        id: Annotated[UUID, strawberry.argument(description="id of the message")],
    ) -> MessageNode | None:
        message = await resolve(
            info, "Query.message", info.context.messages.get(MessageId(id)),
        )
        return message_node(message)

    @strawberry.field(description="Messages created within [after, before], inclusive")
    async def messages(
        self,
        info: Info,
        after: Annotated[datetime, strawberry.argument(description="after datetime")],
        before: Annotated[datetime, strawberry.argument(description="before datetime")],
        user_id: Annotated[
            UUID | None, strawberry.argument(description="(optional) user id"),
        ] = None,
    ) -> list[MessageNode] | None:
        author = UserId(user_id) if user_id is not None else None
        rows = await resolve(
            info, "Query.messages",
            info.context.messages.get_by_time_range(author, after, before),
        )
        return message_nodes(rows)
