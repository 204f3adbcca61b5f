"""GraphQL Schema — Query + Mutate roots and the FastAPI router serving them.

Invariants:
    - No subscriptions
    - /graphql accepts GET and POST; the GraphiQL IDE is served only when enabled
"""

import strawberry
from strawberry.fastapi import GraphQLRouter

from app.config import Settings
from app.graph.context import get_context
from app.graph.mutations import Mutation
from app.graph.queries import Query

schema = strawberry.Schema(query=Query, mutation=Mutation)


def create_graphql_router(settings: Settings) -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphql_ide else None,
    )
