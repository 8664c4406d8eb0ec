"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming convention and travel with
DomainError values inside Result types.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    AUTHENTICATION_REQUIRED = "authentication_required"

    # Permission store errors
    PERMISSION_STORE_UNAVAILABLE = "permission_store_unavailable"
