"""Event bus port.

Access decisions are published as events so auditing stays out of the
decision path. The engine only publishes; subscribers are wired in the
container.

Contract:
    - handlers are coroutines taking the event
    - routing is by exact event class
    - a failing handler is logged by the bus and never reaches the publisher
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from accessgate.domain.events.base_event import DomainEvent

EventHandler: TypeAlias = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Publish/subscribe for domain events."""

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None: ...

    async def publish(self, event: DomainEvent) -> None:
        """Deliver an event to every handler subscribed to its class.

        Args:
            event: Event to deliver. Unsubscribed types are dropped.
        """
        ...
