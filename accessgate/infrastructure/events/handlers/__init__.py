"""Domain event handlers."""

from accessgate.infrastructure.events.handlers.audit_logging_handler import (
    AuditLoggingHandler,
)

__all__ = ["AuditLoggingHandler"]
