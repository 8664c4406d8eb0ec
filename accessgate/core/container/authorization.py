"""Authorization dependency factories.

Casbin enforcer, permission store and the access decision engine, all
application-scoped. Nothing here is request-scoped: the engine takes the
actor explicitly on every call.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from accessgate.core.config import settings
from accessgate.core.container.infrastructure import get_event_bus, get_logger

if TYPE_CHECKING:
    from casbin import Enforcer

    from accessgate.application.services.access_decision_engine import (
        AccessDecisionEngine,
    )
    from accessgate.domain.protocols.permission_store_protocol import (
        PermissionStoreProtocol,
    )


@lru_cache()
def get_enforcer() -> "Enforcer":
    """Get Casbin Enforcer singleton.

    Creates the enforcer from settings.casbin_model_path and, when set,
    loads policy from settings.casbin_policy_path (CSV). Without a policy
    path the enforcer starts empty and every fallback check finds no grant.

    Returns:
        Initialized Enforcer.
    """
    import casbin

    if settings.casbin_policy_path:
        enforcer = casbin.Enforcer(settings.casbin_model_path, settings.casbin_policy_path)
    else:
        enforcer = casbin.Enforcer(settings.casbin_model_path)

    get_logger().info(
        "casbin_enforcer_initialized",
        model_path=settings.casbin_model_path,
        policy_path=settings.casbin_policy_path,
    )
    return enforcer


@lru_cache()
def get_permission_store() -> "PermissionStoreProtocol":
    """Get the permission store singleton (Casbin-backed).

    Returns:
        PermissionStoreProtocol implementation.
    """
    from accessgate.infrastructure.authorization.casbin_permission_store import (
        CasbinPermissionStore,
    )

    return CasbinPermissionStore(enforcer=get_enforcer(), logger=get_logger())


@lru_cache()
def get_access_engine() -> "AccessDecisionEngine":
    """Get the access decision engine singleton.

    Returns:
        AccessDecisionEngine wired with the permission store, logger, event
        bus and the configured permission store deadline.

    Usage:
        engine = get_access_engine()
        decision = await engine.decide(actor, "reports", "write")
    """
    from accessgate.application.services.access_decision_engine import (
        AccessDecisionEngine,
    )

    return AccessDecisionEngine(
        permission_store=get_permission_store(),
        logger=get_logger(),
        event_bus=get_event_bus(),
        timeout_seconds=settings.permission_store_timeout_seconds,
    )
