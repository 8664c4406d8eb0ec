"""Access decision engine.

Single entry point for authorization in the dashboard. Combines the role
catalog, the branch scope resolver and the permission store into one
allow/deny decision per (actor, resource, action), plus branch scoping and
presentation helpers.

Evaluation order (first match wins):
    1. no actor                    → deny   (no-actor)
    2. bypass role                 → allow  (role-bypass)
    3. deny-list role              → allow unless resource denied (role-deny-list)
    4. allow-list role             → allow iff resource listed (role-allow-list)
    5. permission store fallback   → allow iff a grant satisfies the request
                                     (permission-store-fallback / -no-match)

Failure semantics:
    The permission store is the only external dependency. Any failure
    (exception, Failure result, a response that is not Success of a list,
    timeout, store not configured) becomes a deny with reason
    permission-store-unavailable. Nothing degrades to allow. A failing
    audit publish is logged and leaves the decision as computed. Caller
    cancellation propagates unchanged.

Usage:
    engine = get_access_engine()

    decision = await engine.decide(actor, Resource.REPORTS, Action.WRITE)
    if not decision.allowed:
        ...

    branch_filter = engine.resolve_branch_filter(actor)
"""

import asyncio

from accessgate.core.enums import ErrorCode
from accessgate.core.errors import AuthorizationError
from accessgate.core.result import Failure, Result, Success
from accessgate.domain.enums import Action, Capability, DecisionReason, Resource, UserRole
from accessgate.domain.events import AccessDecisionRecorded
from accessgate.domain.protocols import (
    EventBusProtocol,
    LoggerProtocol,
    PermissionStoreProtocol,
)
from accessgate.domain.services import ROLE_CATALOG, BranchScopeResolver, RoleCatalog
from accessgate.domain.value_objects import (
    AccessDecision,
    AccessRequest,
    Actor,
    BranchFilter,
    PermissionGrant,
)


class AccessDecisionEngine:
    """Authorization orchestrator.

    Holds only immutable collaborators, so one instance can serve any
    number of concurrent callers. Nothing is cached between calls.

    Dependencies (injected via constructor):
        - PermissionStoreProtocol: fallback grant source (optional; absent
          means every fallback is denied as unavailable)
        - LoggerProtocol: failure diagnostics
        - EventBusProtocol: audit side-channel (optional)
        - RoleCatalog: static role rules
    """

    def __init__(
        self,
        *,
        permission_store: PermissionStoreProtocol | None,
        logger: LoggerProtocol,
        event_bus: EventBusProtocol | None = None,
        catalog: RoleCatalog = ROLE_CATALOG,
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize engine with dependencies.

        Args:
            permission_store: Grant source consulted in the fallback step.
            logger: Structured logger.
            event_bus: When set, every decision is published as an
                AccessDecisionRecorded event.
            catalog: Role rule table.
            timeout_seconds: Default deadline for the permission store
                read. None means no deadline.
        """
        self._store = permission_store
        self._logger = logger
        self._event_bus = event_bus
        self._catalog = catalog
        self._branches = BranchScopeResolver(catalog)
        self._timeout_seconds = timeout_seconds

    # =========================================================================
    # Resource/action decisions
    # =========================================================================

    async def decide(
        self,
        actor: Actor | None,
        resource: Resource | str,
        action: Action | str = Action.READ,
        *,
        timeout: float | None = None,
    ) -> AccessDecision:
        """Decide whether an actor may perform an action on a resource.

        Args:
            actor: Authenticated actor, or None when unauthenticated.
            resource: Resource name or enum member.
            action: Requested action. Defaults to READ.
            timeout: Deadline for the permission store read, overriding the
                engine default for this call.

        Returns:
            AccessDecision: Outcome with the reason code of the rule that fired.

        Raises:
            ValueError: If action is outside the closed Action set.
            TypeError: If resource is not a string.
        """
        request = AccessRequest.create(resource, action)
        decision = await self._evaluate(actor, request, timeout)

        if self._event_bus is not None:
            try:
                await self._event_bus.publish(
                    AccessDecisionRecorded(
                        actor_id=actor.actor_id if actor is not None else None,
                        role=_role_value(actor),
                        resource=decision.resource,
                        action=decision.action.value,
                        allowed=decision.allowed,
                        reason_code=decision.reason_code,
                    )
                )
            except Exception as e:
                # Audit never changes the decision
                self._logger.warning(
                    "audit_publish_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                    reason_code=decision.reason_code,
                )

        return decision

    async def authorize(
        self,
        actor: Actor | None,
        resource: Resource | str,
        action: Action | str = Action.READ,
        *,
        timeout: float | None = None,
    ) -> Result[AccessDecision, AuthorizationError]:
        """Decide and return the outcome as a Result.

        Convenience for callers on the railway: allowed decisions are
        Success, denials are Failure(AuthorizationError).

        Args:
            actor: Authenticated actor, or None.
            resource: Resource name or enum member.
            action: Requested action.
            timeout: Deadline override for the permission store read.

        Returns:
            Success(AccessDecision) or Failure(AuthorizationError).
        """
        decision = await self.decide(actor, resource, action, timeout=timeout)
        if decision.allowed:
            return Success(value=decision)

        required = f"{decision.resource}:{decision.action.value}"
        if decision.reason is DecisionReason.NO_ACTOR:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.AUTHENTICATION_REQUIRED,
                    message="Authentication required",
                    required_permission=required,
                    reason_code=decision.reason_code,
                )
            )
        return Failure(
            error=AuthorizationError(
                code=ErrorCode.PERMISSION_DENIED,
                message=f"Permission denied: {required}",
                required_permission=required,
                reason_code=decision.reason_code,
            )
        )

    async def can_read(self, actor: Actor | None, resource: Resource | str) -> bool:
        return (await self.decide(actor, resource, Action.READ)).allowed

    async def can_write(self, actor: Actor | None, resource: Resource | str) -> bool:
        return (await self.decide(actor, resource, Action.WRITE)).allowed

    async def can_read_write(
        self, actor: Actor | None, resource: Resource | str
    ) -> bool:
        return (await self.decide(actor, resource, Action.READ_WRITE)).allowed

    async def _evaluate(
        self,
        actor: Actor | None,
        request: AccessRequest,
        timeout: float | None,
    ) -> AccessDecision:
        # Order is load-bearing: first matching rule wins.
        if actor is None:
            return _decision(request, False, DecisionReason.NO_ACTOR)

        if self._catalog.is_bypass_role(actor.role):
            return _decision(request, True, DecisionReason.ROLE_BYPASS)

        if self._catalog.is_deny_list_role(actor.role):
            denied = self._catalog.denied_resources_for_role(actor.role)
            return _decision(
                request,
                request.resource not in denied,
                DecisionReason.ROLE_DENY_LIST,
            )

        if self._catalog.has_allow_list(actor.role):
            allowed = self._catalog.resources_for_role(actor.role)
            return _decision(
                request,
                request.resource in allowed,
                DecisionReason.ROLE_ALLOW_LIST,
            )

        return await self._check_permission_store(actor, request, timeout)

    async def _check_permission_store(
        self,
        actor: Actor,
        request: AccessRequest,
        timeout: float | None,
    ) -> AccessDecision:
        """Fallback step: look for a satisfying grant in the store.

        Exactly one store read, bounded by the deadline. Every failure path
        returns a permission-store-unavailable deny.
        """
        log = self._logger.bind(
            actor_id=actor.actor_id,
            role=_role_value(actor),
            resource=request.resource,
            action=request.action.value,
        )

        if self._store is None:
            log.error("permission_store_unavailable", cause="not_configured")
            return _decision(request, False, DecisionReason.PERMISSION_STORE_UNAVAILABLE)

        deadline = timeout if timeout is not None else self._timeout_seconds
        try:
            async with asyncio.timeout(deadline):
                result = await self._store.list_grants(actor.actor_id)
        except TimeoutError as e:
            log.error(
                "permission_store_unavailable",
                error=e,
                cause="timeout",
                timeout_seconds=deadline,
            )
            return _decision(request, False, DecisionReason.PERMISSION_STORE_UNAVAILABLE)
        except Exception as e:
            # Fail closed on errors
            log.error("permission_store_unavailable", error=e, cause="exception")
            return _decision(request, False, DecisionReason.PERMISSION_STORE_UNAVAILABLE)

        if isinstance(result, Failure):
            log.error(
                "permission_store_unavailable",
                cause="store_error",
                **result.error.log_context(),
            )
            return _decision(request, False, DecisionReason.PERMISSION_STORE_UNAVAILABLE)

        if not isinstance(result, Success) or not isinstance(result.value, (list, tuple)):
            log.error(
                "permission_store_unavailable",
                cause="invalid_response",
                response_type=type(result).__name__,
            )
            return _decision(request, False, DecisionReason.PERMISSION_STORE_UNAVAILABLE)

        for grant in result.value:
            if not isinstance(grant, PermissionGrant) or not grant.is_well_formed():
                log.warning("malformed_grant_skipped", grant=repr(grant))
                continue
            if grant.satisfies(request.resource, request.action):
                return _decision(request, True, DecisionReason.PERMISSION_STORE_FALLBACK)

        return _decision(request, False, DecisionReason.PERMISSION_STORE_NO_MATCH)

    # =========================================================================
    # Branch scoping
    # =========================================================================

    def resolve_branch_filter(self, actor: Actor) -> BranchFilter:
        """Branch filter for scoping an actor's list queries.

        Args:
            actor: Authenticated actor.

        Returns:
            BranchFilter: Unrestricted or restricted to one branch.
        """
        return self._branches.resolve(actor)

    def can_access_branch_data(
        self,
        actor: Actor | None,
        target_branch_id: int | None = None,
    ) -> bool:
        """Check whether an actor may see data owned by a branch.

        Args:
            actor: Authenticated actor, or None.
            target_branch_id: Branch owning the data; None for global data.

        Returns:
            bool: False for a missing actor, otherwise the resolved
            filter's verdict.
        """
        if actor is None:
            return False
        return self._branches.can_access_branch_data(actor, target_branch_id)

    def can_access_all_branches(self, actor: Actor | None) -> bool:
        if actor is None:
            return False
        return self._branches.can_access_all_branches(actor)

    def branch_display_name(self, actor: Actor) -> str:
        return self._branches.branch_display_name(actor)

    # =========================================================================
    # Role helpers
    # =========================================================================

    def has_bypass_role(self, actor: Actor | None) -> bool:
        if actor is None:
            return False
        return self._catalog.is_bypass_role(actor.role)

    def has_capability(self, actor: Actor | None, capability: Capability) -> bool:
        """Check a role-granted management capability.

        Args:
            actor: Authenticated actor, or None.
            capability: Capability to check.

        Returns:
            bool: True if the actor's role grants the capability.
        """
        if actor is None:
            return False
        return self._catalog.has_capability(actor.role, capability)

    def display_name_for_role(self, role: UserRole | str | None) -> str:
        return self._catalog.display_name_for_role(role)


def _decision(
    request: AccessRequest,
    allowed: bool,
    reason: DecisionReason,
) -> AccessDecision:
    return AccessDecision(
        allowed=allowed,
        reason=reason,
        resource=request.resource,
        action=request.action,
    )


def _role_value(actor: Actor | None) -> str | None:
    if actor is None or actor.role is None:
        return None
    if isinstance(actor.role, UserRole):
        return actor.role.value
    return str(actor.role)
