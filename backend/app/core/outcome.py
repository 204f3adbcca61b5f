"""Outcome — typed result of a data-access call: a value, an explicit absence, or a fault.

Invariants:
    - Found carries the value; Missing carries the NotFound error (if any); Fault carries
      a non-NotFound ThreadboardError
    - value_or_none() is the only place an Outcome collapses to Optional

Design Decisions:
    - Pure module: no IO, no logging. The graph layer logs when it settles an outcome
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from app.core.errors import ResourceNotFoundError, ThreadboardError

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class Missing:
    error: ResourceNotFoundError | None = None


@dataclass(frozen=True)
class Fault:
    error: ThreadboardError


Outcome = Union[Found[T], Missing, Fault]


def from_error(error: ThreadboardError) -> Missing | Fault:
    """Classify a raised error: NotFound becomes Missing, everything else a Fault."""
    if isinstance(error, ResourceNotFoundError):
        return Missing(error)
    return Fault(error)


def value_or_none(outcome: "Outcome[T]") -> T | None:
    if isinstance(outcome, Found):
        return outcome.value
    return None
