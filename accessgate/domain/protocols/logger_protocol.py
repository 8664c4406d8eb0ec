"""Logging port.

The engine and adapters log through this protocol so the domain never
imports structlog. Every call is an event name plus key-value context; no
interpolated strings.

Events emitted by this package:
    permission_store_unavailable  ERROR    store failed, decision denied
    malformed_grant_skipped       WARNING  bad grant row ignored
    casbin_read_error             ERROR    enforcer raised while reading
    access_granted / access_denied         audit channel
    event_handler_failed          WARNING  audit handler raised

Usage:
    log = logger.bind(actor_id=actor.actor_id, resource="reports")
    log.error("permission_store_unavailable", error=e, cause="timeout")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger.

    ``bind`` and ``with_context`` return a child logger and leave the
    receiver untouched.
    """

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at ERROR.

        Args:
            message: Event name.
            error: Exception to describe; adapters add its type and text.
            **context: Structured fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol: ...

    def with_context(self, **context: Any) -> LoggerProtocol: ...
