"""Domain errors package."""

from accessgate.domain.errors.permission_store_error import PermissionStoreError

__all__ = ["PermissionStoreError"]
