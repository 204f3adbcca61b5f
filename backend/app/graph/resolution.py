"""Resolution Helpers — settle repository calls into Outcomes and project them for clients.

Invariants:
    - Only ThreadboardError is settled; anything else is a bug and propagates to strawberry
    - NotFound is logged at debug, every other fault at error with its code
    - A Fault becomes a GraphQL error only when the context asks for surfaced faults
"""

import logging
from typing import Awaitable, TypeVar

from graphql import GraphQLError
from strawberry.types import Info

from app.core.errors import ThreadboardError
from app.core.outcome import Fault, Found, Missing, Outcome, from_error, value_or_none

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def settle(operation: Awaitable[T], field_name: str) -> Outcome[T]:
    """Await one data-access call and classify its result."""
    try:
        return Found(await operation)
    except ThreadboardError as e:
        outcome = from_error(e)
        extra = {"field_name": field_name, "error_code": e.code}
        if isinstance(outcome, Missing):
            logger.debug(f"{field_name}: {e.message}", extra=extra)
        else:
            logger.error(f"{field_name} failed: {e.message}", extra=extra)
        return outcome


def project(outcome: Outcome[T], surface_faults: bool) -> T | None:
    if isinstance(outcome, Fault) and surface_faults:
        raise GraphQLError(
            outcome.error.message, extensions=outcome.error.to_extensions(),
        )
    return value_or_none(outcome)


async def resolve(info: Info, field_name: str, operation: Awaitable[T]) -> T | None:
    """settle() then project() with the request's fault policy."""
    outcome = await settle(operation, field_name)
    return project(outcome, info.context.surface_faults)
