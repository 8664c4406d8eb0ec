"""Permission grant value object.

A grant is one row from the permission store: a resource, an action, and
whether the row grants or revokes it. Stores may return duplicates; callers
evaluate grants with an existence check and never key on them.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from accessgate.domain.enums import Action


@dataclass(frozen=True, slots=True, kw_only=True)
class PermissionGrant:
    """Fine-grained grant from the permission store.

    Attributes:
        resource: Resource name the grant applies to.
        action: Granted action. READ_WRITE covers READ and WRITE.
        description: Optional human-readable description.
        granted: False for a per-user override that revokes the grant.
    """

    resource: str
    action: Action
    description: str | None = None
    granted: bool = True

    def satisfies(self, resource: str, action: Action) -> bool:
        """Check whether this grant permits resource/action.

        Args:
            resource: Requested resource.
            action: Requested action.

        Returns:
            bool: True if granted, resource matches and action is covered.
        """
        return (
            self.granted
            and self.resource == resource
            and self.action.satisfies(action)
        )

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "PermissionGrant | None":
        """Build a grant from a raw store row.

        Rows missing a resource or action, or carrying an action outside the
        closed set, are malformed and produce None so callers can skip them
        without aborting the rest of the batch.

        Args:
            record: Mapping with ``resource``, ``action`` and optional
                ``description`` and ``granted`` keys.

        Returns:
            PermissionGrant | None: Parsed grant, or None if malformed.
        """
        resource = record.get("resource")
        action = record.get("action")
        if not isinstance(resource, str) or not resource:
            return None
        if not isinstance(action, str) or action not in Action.values():
            return None
        return cls(
            resource=resource,
            action=Action(action),
            description=record.get("description"),
            granted=bool(record.get("granted", True)),
        )

    def is_well_formed(self) -> bool:
        """Check the grant carries a usable resource and action.

        Frozen dataclasses do not validate field types, so adapters that
        construct grants directly can still hand over bad rows.

        Returns:
            bool: True if resource is a non-empty string and action is an Action.
        """
        return (
            isinstance(self.resource, str)
            and bool(self.resource)
            and isinstance(self.action, Action)
        )
