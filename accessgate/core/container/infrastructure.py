"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (structlog console adapter)
- Event bus (in-memory, with audit logging subscribed)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from accessgate.core.config import settings

if TYPE_CHECKING:
    from accessgate.domain.protocols.event_bus_protocol import EventBusProtocol
    from accessgate.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from accessgate.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.environment.renders_json_logs,
        level=settings.log_level,
    ).bind(
        app=settings.app_name,
        app_version=settings.app_version,
        environment=settings.environment.value,
    )


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Return the application-scoped event bus singleton.

    Subscribes the audit logging handler to AccessDecisionRecorded when
    decision auditing is enabled.

    Returns:
        EventBusProtocol: In-memory event bus.
    """
    from accessgate.domain.events import AccessDecisionRecorded
    from accessgate.infrastructure.events.handlers.audit_logging_handler import (
        AuditLoggingHandler,
    )
    from accessgate.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)

    if settings.audit_decisions:
        audit_handler = AuditLoggingHandler(logger=logger.bind(channel="audit"))
        event_bus.subscribe(AccessDecisionRecorded, audit_handler.handle_access_decision)

    return event_bus
