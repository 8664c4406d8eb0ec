"""Domain event base.

Events are immutable records of something that already happened, named in
past tense. Each instance gets its own id and UTC timestamp at creation so
audit lines can be correlated and ordered.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base for every event published on the bus.

    Subclasses are frozen, keyword-only dataclasses.

    Attributes:
        event_id: Unique id of this occurrence.
        occurred_at: Creation time (UTC).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utc_now)
