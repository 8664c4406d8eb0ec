"""Permission store errors.

Returned inside Failure by permission store adapters when grants cannot be
read. The decision engine converts any of these into a fail-closed deny.
"""

from dataclasses import dataclass
from typing import Any

from accessgate.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class PermissionStoreError(DomainError):
    """Permission store could not be read.

    Attributes:
        code: ErrorCode enum (PERMISSION_STORE_UNAVAILABLE).
        message: Human-readable message.
        actor_id: Actor whose grants were requested.
        transient: True when a later retry may succeed (network, timeout).
        details: Additional context.
    """

    actor_id: str | None = None
    transient: bool = True

    def log_context(self) -> dict[str, Any]:
        # Explicit base call: zero-arg super() fails in slotted dataclasses
        context = DomainError.log_context(self)
        context["actor_id"] = self.actor_id
        context["transient"] = self.transient
        return context
