"""Result types for railway-oriented programming.

Adapters that can fail for expected reasons (an unreachable permission
store, a denied decision) hand back a Result instead of raising, and the
caller branches on the variant.

Usage:
    match await store.list_grants("u-17"):
        case Success(value=grants):
            ...
        case Failure(error=error):
            ...

    result = await engine.authorize(actor, "reports", "write")
    if isinstance(result, Failure):
        raise to_http(result.error)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: Payload (grants, an allowing decision, ...).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Expected failure carried as data.

    Attributes:
        error: DomainError subclass describing what went wrong.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
