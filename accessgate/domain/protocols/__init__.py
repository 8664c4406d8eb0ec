"""Domain protocols (ports).

Usage:
    from accessgate.domain.protocols import PermissionStoreProtocol
"""

from accessgate.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from accessgate.domain.protocols.logger_protocol import LoggerProtocol
from accessgate.domain.protocols.permission_store_protocol import (
    PermissionStoreProtocol,
)

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "PermissionStoreProtocol",
]
