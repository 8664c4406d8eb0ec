"""Actor value object.

The authenticated subject whose access is being evaluated. Built once per
session by the identity layer and passed explicitly to every check, so the
engine never reaches into request-scoped state.
"""

from dataclasses import dataclass

from accessgate.domain.enums import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class Actor:
    """Immutable snapshot of an authenticated user.

    Attributes:
        actor_id: Identity key used to look up fine-grained grants.
        role: Single active role. Unknown strings and None are kept as-is
            and evaluated as an unrecognized (fully denied) role.
        branch_id: Branch the actor is bound to. None means not
            branch-bound.
        can_access_all_branches: Per-user flag lifting branch scoping,
            independent of role.
        branch_name: Human-readable branch name for display.

    Example:
        >>> actor = Actor(actor_id="u-17", role=UserRole.STAFF, branch_id=3)
        >>> actor.user_role
        <UserRole.STAFF: 'staff'>
    """

    actor_id: str
    role: UserRole | str | None
    branch_id: int | None = None
    can_access_all_branches: bool = False
    branch_name: str | None = None

    @property
    def user_role(self) -> UserRole | None:
        """Role as a UserRole, or None when unrecognized."""
        return UserRole.from_value(self.role)
