"""accessgate: authorization engine for the operations dashboard.

Decides whether an actor may perform an action on a resource, and which
branch partition the actor's data is scoped to.

Usage:
    from accessgate import Action, Actor, Resource, UserRole
    from accessgate.core.container import get_access_engine

    engine = get_access_engine()
    actor = Actor(actor_id="u-17", role=UserRole.STAFF, branch_id=3)

    decision = await engine.decide(actor, Resource.PRODUCTS, Action.WRITE)
    branch_filter = engine.resolve_branch_filter(actor)
"""

from accessgate.application.services.access_decision_engine import (
    AccessDecisionEngine,
)
from accessgate.domain.enums import (
    Action,
    Capability,
    DecisionReason,
    Resource,
    UserRole,
)
from accessgate.domain.value_objects import (
    AccessDecision,
    AccessRequest,
    Actor,
    BranchFilter,
    PermissionGrant,
)

__all__ = [
    "AccessDecision",
    "AccessDecisionEngine",
    "AccessRequest",
    "Action",
    "Actor",
    "BranchFilter",
    "Capability",
    "DecisionReason",
    "PermissionGrant",
    "Resource",
    "UserRole",
]
