"""Permission store protocol (port).

The permission store holds fine-grained, per-user grants that role tables
cannot express. The decision engine consults it only when no role rule
applies.

Implementations:
    - InMemoryPermissionStore: role grants merged with per-user overrides
    - CasbinPermissionStore: implicit permissions from a Casbin enforcer

Usage:
    result = await store.list_grants("u-17")
    match result:
        case Success(value=grants):
            ...
        case Failure(error=error):
            ...  # engine denies with permission-store-unavailable
"""

from typing import Protocol

from accessgate.core.result import Result
from accessgate.domain.errors import PermissionStoreError
from accessgate.domain.value_objects import PermissionGrant


class PermissionStoreProtocol(Protocol):
    """Protocol for permission grant sources.

    Error Handling:
        Expected failures (backend unreachable) are returned as
        Failure(PermissionStoreError). Unexpected exceptions may still be
        raised; the engine treats both the same way (fail-closed).

    Retries:
        Retry/backoff, if any, belongs to the implementation. The engine
        calls list_grants at most once per decision.
    """

    async def list_grants(
        self,
        actor_id: str,
    ) -> Result[list[PermissionGrant], PermissionStoreError]:
        """List every grant that applies to an actor.

        Grants may repeat; uniqueness is not guaranteed. Revoked overrides
        may be returned with granted=False or omitted.

        Args:
            actor_id: Actor identity key.

        Returns:
            Success(list[PermissionGrant]) or Failure(PermissionStoreError).
        """
        ...
