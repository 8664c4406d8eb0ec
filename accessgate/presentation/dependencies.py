"""FastAPI authorization dependencies.

Gate routes in a host application with the access decision engine. The
host's authentication layer is expected to place an Actor on
``request.state.actor``; this module never issues or verifies tokens.

Status codes:
    401: no actor on the request
    403: actor present but the decision is a deny

Usage:
    @router.get("/reports")
    async def list_reports(
        _: Annotated[AccessDecision, Depends(require_permission("reports", "read"))],
        branch: Annotated[BranchFilter, Depends(get_branch_filter)],
    ):
        return repo.list_reports(branch)

    @router.delete("/owners/{id}")
    async def remove_owner(
        _: Annotated[Actor, Depends(require_super_admin())],
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from accessgate.application.services.access_decision_engine import (
    AccessDecisionEngine,
)
from accessgate.core.container import get_access_engine
from accessgate.core.enums import ErrorCode
from accessgate.core.errors import AuthorizationError
from accessgate.core.result import Failure
from accessgate.domain.enums import Action, Resource
from accessgate.domain.value_objects import (
    AccessDecision,
    AccessRequest,
    Actor,
    BranchFilter,
)


def get_current_actor(request: Request) -> Actor | None:
    """Read the authenticated actor placed on the request.

    Args:
        request: Incoming request.

    Returns:
        Actor | None: Actor, or None when unauthenticated.
    """
    actor = getattr(request.state, "actor", None)
    if isinstance(actor, Actor):
        return actor
    return None


def require_actor(
    actor: Annotated[Actor | None, Depends(get_current_actor)],
) -> Actor:
    """Require an authenticated actor.

    Raises:
        HTTPException 401: If no actor is on the request.
    """
    if actor is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return actor


def require_permission(
    resource: Resource | str,
    action: Action | str = Action.READ,
) -> Callable[..., Awaitable[AccessDecision]]:
    """Create a dependency that requires a resource/action permission.

    The action is validated when the dependency is declared, so a typo in
    a route definition fails at import time rather than per request.

    Args:
        resource: Resource name or enum member.
        action: Action name or enum member.

    Returns:
        Dependency returning the allowing AccessDecision.

    Raises:
        ValueError: If action is outside the closed Action set.
        HTTPException 401/403: Per request, when denied.
    """
    access_request = AccessRequest.create(resource, action)

    async def permission_checker(
        actor: Annotated[Actor | None, Depends(get_current_actor)],
        engine: Annotated[AccessDecisionEngine, Depends(get_access_engine)],
    ) -> AccessDecision:
        result = await engine.authorize(
            actor, access_request.resource, access_request.action
        )
        if isinstance(result, Failure):
            raise _to_http_exception(result.error)
        return result.value

    return permission_checker


def require_any_permission(
    *permissions: tuple[Resource | str, Action | str],
) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires at least one of the permissions.

    Args:
        *permissions: (resource, action) pairs.

    Returns:
        Dependency function.

    Raises:
        HTTPException 401: If no actor is on the request.
        HTTPException 403: If none of the permissions is granted.
    """
    requests = [AccessRequest.create(resource, action) for resource, action in permissions]

    async def permission_checker(
        actor: Annotated[Actor, Depends(require_actor)],
        engine: Annotated[AccessDecisionEngine, Depends(get_access_engine)],
    ) -> None:
        for access_request in requests:
            decision = await engine.decide(
                actor, access_request.resource, access_request.action
            )
            if decision.allowed:
                return

        perms_str = ", ".join(r.permission for r in requests)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Permission denied: requires one of [{perms_str}]",
        )

    return permission_checker


def require_all_permissions(
    *permissions: tuple[Resource | str, Action | str],
) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires every listed permission.

    Args:
        *permissions: (resource, action) pairs.

    Returns:
        Dependency function.

    Raises:
        HTTPException 401: If no actor is on the request.
        HTTPException 403: On the first permission that is denied.
    """
    requests = [AccessRequest.create(resource, action) for resource, action in permissions]

    async def permission_checker(
        actor: Annotated[Actor, Depends(require_actor)],
        engine: Annotated[AccessDecisionEngine, Depends(get_access_engine)],
    ) -> None:
        for access_request in requests:
            result = await engine.authorize(
                actor, access_request.resource, access_request.action
            )
            if isinstance(result, Failure):
                raise _to_http_exception(result.error)

    return permission_checker


def require_super_admin() -> Callable[..., Awaitable[Actor]]:
    """Create a dependency that requires the bypass role.

    Returns:
        Dependency returning the actor.

    Raises:
        HTTPException 401: If no actor is on the request.
        HTTPException 403: If the actor does not hold the bypass role.
    """

    async def role_checker(
        actor: Annotated[Actor, Depends(require_actor)],
        engine: Annotated[AccessDecisionEngine, Depends(get_access_engine)],
    ) -> Actor:
        if not engine.has_bypass_role(actor):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Super admin access required",
            )
        return actor

    return role_checker


def get_branch_filter(
    actor: Annotated[Actor, Depends(require_actor)],
    engine: Annotated[AccessDecisionEngine, Depends(get_access_engine)],
) -> BranchFilter:
    """Branch filter for scoping list queries to the current actor.

    Raises:
        HTTPException 401: If no actor is on the request.
    """
    return engine.resolve_branch_filter(actor)


def _to_http_exception(error: AuthorizationError) -> HTTPException:
    if error.code is ErrorCode.AUTHENTICATION_REQUIRED:
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=error.message,
        )
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=error.message,
    )
