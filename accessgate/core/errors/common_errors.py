"""Common error classes shared across layers.

Usage:
    from accessgate.core.errors import AuthorizationError
    from accessgate.core.enums import ErrorCode

    error = AuthorizationError(
        code=ErrorCode.PERMISSION_DENIED,
        message="Permission denied",
        required_permission="reports:write",
    )
"""

from dataclasses import dataclass

from accessgate.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        required_permission: Permission that was required ("resource:action").
        reason_code: Decision reason that produced the denial.
        details: Additional context.
    """

    required_permission: str | None = None
    reason_code: str | None = None
