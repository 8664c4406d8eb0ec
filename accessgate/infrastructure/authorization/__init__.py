"""Permission store adapters."""

from accessgate.infrastructure.authorization.casbin_permission_store import (
    CasbinPermissionStore,
)
from accessgate.infrastructure.authorization.in_memory_permission_store import (
    InMemoryPermissionStore,
)

__all__ = ["CasbinPermissionStore", "InMemoryPermissionStore"]
