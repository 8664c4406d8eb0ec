"""Authorization domain events.

Decisions are not logged inside the engine. Instead every decision is
published as an AccessDecisionRecorded event and observability handlers
(structured audit logging) subscribe to it.

Handlers:
- AuditLoggingHandler: logs access_granted / access_denied keyed by reason_code
"""

from dataclasses import dataclass

from accessgate.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class AccessDecisionRecorded(DomainEvent):
    """An access decision was made.

    Attributes:
        actor_id: Actor evaluated. None when no actor was supplied.
        role: Actor's role value as supplied (may be unrecognized).
        resource: Requested resource.
        action: Requested action value.
        allowed: Decision outcome.
        reason_code: Rule that fired (DecisionReason value).
    """

    actor_id: str | None
    role: str | None
    resource: str
    action: str
    allowed: bool
    reason_code: str
