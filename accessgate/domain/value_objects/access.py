"""Access request and decision value objects."""

from dataclasses import dataclass

from accessgate.domain.enums import Action, DecisionReason, Resource


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessRequest:
    """Resource/action pair being checked.

    Build through ``create`` so enum members and raw strings are normalized
    and invalid actions fail at the call boundary.

    Attributes:
        resource: Resource name.
        action: Requested action.
    """

    resource: str
    action: Action

    @classmethod
    def create(
        cls,
        resource: Resource | str,
        action: Action | str,
    ) -> "AccessRequest":
        """Normalize and validate a request.

        Args:
            resource: Resource enum member or name. Any string is accepted;
                names outside the catalog are simply not granted by role.
            action: Action enum member or its value.

        Returns:
            AccessRequest: Normalized request.

        Raises:
            TypeError: If resource is not a string.
            ValueError: If action is outside the closed Action set.
        """
        if isinstance(resource, Resource):
            resource = resource.value
        elif not isinstance(resource, str):
            raise TypeError(
                f"resource must be a string, got {type(resource).__name__}"
            )

        if not isinstance(action, Action):
            if not isinstance(action, str) or action not in Action.values():
                raise ValueError(
                    f"action '{action}' not valid. "
                    f"Must be one of: {Action.values()}"
                )
            action = Action(action)

        return cls(resource=resource, action=action)

    @property
    def permission(self) -> str:
        """Permission string in resource:action form."""
        return f"{self.resource}:{self.action.value}"


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessDecision:
    """Outcome of a single access check.

    Attributes:
        allowed: Whether the request is permitted.
        reason: Rule that produced the outcome.
        resource: Evaluated resource.
        action: Evaluated action.
    """

    allowed: bool
    reason: DecisionReason
    resource: str
    action: Action

    @property
    def reason_code(self) -> str:
        """Reason as its string code (e.g., "role-bypass")."""
        return self.reason.value

    def __bool__(self) -> bool:
        return self.allowed
