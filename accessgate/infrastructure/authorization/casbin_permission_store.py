"""Casbin implementation of PermissionStoreProtocol.

Reads an actor's implicit permissions (direct policies plus those inherited
through role links) from a Casbin Enforcer and returns them as grants.

Policy layout (see model.conf):
    p, <subject>, <resource>, <action>      grant
    g, <actor_id>, <role>                   role link

Following hexagonal architecture:
- Infrastructure implements the domain protocol
- Domain doesn't know about Casbin
- Swap with InMemoryPermissionStore in tests
"""

import asyncio
from typing import TYPE_CHECKING

import casbin

from accessgate.core.enums import ErrorCode
from accessgate.core.result import Failure, Result, Success
from accessgate.domain.errors import PermissionStoreError
from accessgate.domain.value_objects import PermissionGrant

if TYPE_CHECKING:
    from accessgate.domain.protocols.logger_protocol import LoggerProtocol


class CasbinPermissionStore:
    """Casbin-backed permission store.

    Note:
        Enforcer reads are synchronous in Casbin. They run on a worker
        thread so the engine deadline can stop waiting on a slow read; the
        thread itself finishes in the background.

    Attributes:
        _enforcer: Casbin Enforcer instance with loaded policy.
        _logger: Structured logger.
    """

    def __init__(
        self,
        enforcer: casbin.Enforcer,
        logger: "LoggerProtocol",
    ) -> None:
        """Initialize store with dependencies.

        Args:
            enforcer: Pre-initialized Casbin Enforcer.
            logger: Structured logger.
        """
        self._enforcer = enforcer
        self._logger = logger

    async def list_grants(
        self,
        actor_id: str,
    ) -> Result[list[PermissionGrant], PermissionStoreError]:
        """List implicit permissions for an actor.

        Rows that are too short or carry an unknown action are skipped
        with a warning; the remaining rows are still returned.

        Args:
            actor_id: Actor identity key (Casbin subject).

        Returns:
            Success(list[PermissionGrant]) or Failure(PermissionStoreError).
        """
        try:
            rows = await asyncio.to_thread(
                self._enforcer.get_implicit_permissions_for_user, actor_id
            )
        except Exception as e:
            self._logger.error(
                "casbin_read_error",
                error=e,
                actor_id=actor_id,
            )
            return Failure(
                error=PermissionStoreError(
                    code=ErrorCode.PERMISSION_STORE_UNAVAILABLE,
                    message="Casbin policy could not be read",
                    actor_id=actor_id,
                )
            )

        grants: list[PermissionGrant] = []
        for row in rows:
            grant = None
            if len(row) >= 3:
                grant = PermissionGrant.from_record(
                    {"resource": row[1], "action": row[2]}
                )
            if grant is None:
                self._logger.warning(
                    "malformed_grant_skipped",
                    actor_id=actor_id,
                    row=list(row),
                )
                continue
            grants.append(grant)

        return Success(value=grants)
