"""Audit logging handler for access decisions.

Turns AccessDecisionRecorded events into structured log lines keyed by
reason_code. Allowed decisions log at INFO as ``access_granted``; denials
log at WARNING as ``access_denied`` so they surface in alerting.

Usage:
    >>> handler = AuditLoggingHandler(logger=get_logger())
    >>> event_bus.subscribe(AccessDecisionRecorded, handler.handle_access_decision)
"""

from accessgate.domain.events import AccessDecisionRecorded
from accessgate.domain.protocols.logger_protocol import LoggerProtocol


class AuditLoggingHandler:
    """Structured audit log for access decisions.

    Attributes:
        _logger: Logger protocol implementation.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle_access_decision(self, event: AccessDecisionRecorded) -> None:
        """Log a single access decision.

        Args:
            event: Decision event.
        """
        context = {
            "event_id": str(event.event_id),
            "occurred_at": event.occurred_at.isoformat(),
            "actor_id": event.actor_id,
            "role": event.role,
            "resource": event.resource,
            "action": event.action,
            "allowed": event.allowed,
            "reason_code": event.reason_code,
        }
        if event.allowed:
            self._logger.info("access_granted", **context)
        else:
            self._logger.warning("access_denied", **context)
