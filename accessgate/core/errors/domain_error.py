"""Base error for failures returned as data.

Authorization never raises for an expected outcome: a denial or an
unreadable permission store travels inside ``Failure``. DomainError is the
shared shape of those payloads.

Usage:
    @dataclass(frozen=True, slots=True, kw_only=True)
    class PermissionStoreError(DomainError):
        actor_id: str | None = None

    logger.error("permission_store_unavailable", **error.log_context())
"""

from dataclasses import dataclass
from typing import Any

from accessgate.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Expected failure (not an Exception; never raised).

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message, safe to return to clients.
        details: Extra string context for logs.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def log_context(self) -> dict[str, Any]:
        """Structured fields for logging this error.

        Returns:
            dict[str, Any]: error_code, error_message and any details.
        """
        context: dict[str, Any] = {
            "error_code": self.code.value,
            "error_message": self.message,
        }
        if self.details:
            context.update(self.details)
        return context
