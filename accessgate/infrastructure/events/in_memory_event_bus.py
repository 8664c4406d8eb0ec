"""In-process event bus.

Routes each event to the handlers subscribed to its exact class and runs
them concurrently. Delivery is fail-open: a handler that raises is logged
as ``event_handler_failed`` and the publisher carries on, so a broken audit
sink can never change an access decision.

Usage:
    bus = InMemoryEventBus(logger=get_logger())
    bus.subscribe(AccessDecisionRecorded, audit.handle_access_decision)
    await bus.publish(event)
"""

import asyncio
from collections import defaultdict

from accessgate.domain.events.base_event import DomainEvent
from accessgate.domain.protocols.event_bus_protocol import EventHandler
from accessgate.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """Dictionary-backed EventBusProtocol implementation.

    Subscriptions happen at startup in the container; publish only reads
    the registry, so concurrent publishers are safe.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        self._handlers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Deliver an event to its subscribers.

        Args:
            event: Event to deliver. Types nobody subscribed to are dropped.
        """
        handlers = self._handlers.get(type(event))
        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=type(event).__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )
        await asyncio.gather(*(self._deliver(handler, event) for handler in handlers))

    async def _deliver(self, handler: EventHandler, event: DomainEvent) -> None:
        try:
            await handler(event)
        except Exception as e:
            self._logger.warning(
                "event_handler_failed",
                event_type=type(event).__name__,
                event_id=str(event.event_id),
                handler_name=getattr(handler, "__name__", repr(handler)),
                error_type=type(e).__name__,
                error_message=str(e),
            )
