"""In-memory permission store.

Grants come from two layers, merged per actor:

    1. role grants for the actor's stored role
    2. per-user overrides, which replace a role grant for the same
       resource/action (granted=False revokes it)

Revoked rows are dropped from the result. Used in tests and by host
applications that load grants once at startup.

Usage:
    store = InMemoryPermissionStore(
        role_grants={"accountant": [PermissionGrant(resource="reports", action=Action.READ)]},
        user_roles={"u-9": "accountant"},
    )
    result = await store.list_grants("u-9")
"""

from collections.abc import Iterable, Mapping
from typing import Any

from accessgate.core.result import Result, Success
from accessgate.domain.errors import PermissionStoreError
from accessgate.domain.value_objects import PermissionGrant


class InMemoryPermissionStore:
    """Permission store backed by dictionaries.

    Attributes:
        _role_grants: Role value → grants.
        _user_grants: Actor id → override grants.
        _user_roles: Actor id → role value used for role grants.
    """

    def __init__(
        self,
        *,
        role_grants: Mapping[str, Iterable[PermissionGrant]] | None = None,
        user_grants: Mapping[str, Iterable[PermissionGrant]] | None = None,
        user_roles: Mapping[str, str] | None = None,
    ) -> None:
        self._role_grants = {
            role: tuple(grants) for role, grants in (role_grants or {}).items()
        }
        self._user_grants = {
            actor_id: tuple(grants)
            for actor_id, grants in (user_grants or {}).items()
        }
        self._user_roles = dict(user_roles or {})

    @classmethod
    def from_records(
        cls,
        *,
        role_records: Mapping[str, Iterable[Mapping[str, Any]]] | None = None,
        user_records: Mapping[str, Iterable[Mapping[str, Any]]] | None = None,
        user_roles: Mapping[str, str] | None = None,
    ) -> "InMemoryPermissionStore":
        """Build a store from raw rows, skipping malformed ones.

        Args:
            role_records: Role value → rows with resource/action keys.
            user_records: Actor id → override rows (may carry ``granted``).
            user_roles: Actor id → role value.

        Returns:
            InMemoryPermissionStore: Store holding every well-formed row.
        """
        return cls(
            role_grants={
                role: _parse(rows) for role, rows in (role_records or {}).items()
            },
            user_grants={
                actor_id: _parse(rows)
                for actor_id, rows in (user_records or {}).items()
            },
            user_roles=user_roles,
        )

    async def list_grants(
        self,
        actor_id: str,
    ) -> Result[list[PermissionGrant], PermissionStoreError]:
        """List effective grants for an actor.

        Args:
            actor_id: Actor identity key.

        Returns:
            Success(list[PermissionGrant]): Granted rows only.
        """
        merged: dict[tuple[str, str], PermissionGrant] = {}

        role = self._user_roles.get(actor_id)
        if role is not None:
            for grant in self._role_grants.get(role, ()):
                merged[_key(grant)] = grant

        # User overrides take precedence
        for grant in self._user_grants.get(actor_id, ()):
            merged[_key(grant)] = grant

        return Success(value=[grant for grant in merged.values() if grant.granted])


def _key(grant: PermissionGrant) -> tuple[str, str]:
    return (grant.resource, str(getattr(grant.action, "value", grant.action)))


def _parse(rows: Iterable[Mapping[str, Any]]) -> list[PermissionGrant]:
    grants = []
    for row in rows:
        grant = PermissionGrant.from_record(row)
        if grant is not None:
            grants.append(grant)
    return grants
