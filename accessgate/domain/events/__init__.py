"""Domain events package."""

from accessgate.domain.events.authorization_events import AccessDecisionRecorded
from accessgate.domain.events.base_event import DomainEvent

__all__ = ["AccessDecisionRecorded", "DomainEvent"]
