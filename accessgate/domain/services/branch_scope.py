"""Branch scope resolution.

Computes which branch an actor's data queries are limited to. Resolution
depends only on the actor (role, all-branches flag, assigned branch) and
never on the resource or action being checked.

Precedence:
    1. bypass role or can_access_all_branches → unrestricted
    2. no assigned branch → unrestricted (global data, not a denial)
    3. otherwise → restricted to the assigned branch
"""

from accessgate.domain.services.role_catalog import ROLE_CATALOG, RoleCatalog
from accessgate.domain.value_objects import Actor, BranchFilter

ALL_BRANCHES_DISPLAY_NAME = "All Branches"
UNKNOWN_BRANCH_DISPLAY_NAME = "Unknown Branch"


class BranchScopeResolver:
    """Resolve branch filters for actors.

    Stateless apart from the (immutable) role catalog; safe to share.
    """

    def __init__(self, catalog: RoleCatalog = ROLE_CATALOG) -> None:
        self._catalog = catalog

    def can_access_all_branches(self, actor: Actor) -> bool:
        """Check whether branch scoping is lifted for an actor.

        Args:
            actor: Actor to check.

        Returns:
            bool: True for the bypass role or when the per-user flag is set.
        """
        return (
            self._catalog.is_bypass_role(actor.role)
            or actor.can_access_all_branches is True
        )

    def resolve(self, actor: Actor) -> BranchFilter:
        """Build the branch filter for an actor.

        Args:
            actor: Actor to scope.

        Returns:
            BranchFilter: Unrestricted, or restricted to actor.branch_id.
        """
        if self.can_access_all_branches(actor):
            return BranchFilter.all_branches()
        if actor.branch_id is None:
            return BranchFilter.all_branches()
        return BranchFilter.only(actor.branch_id)

    def can_access_branch_data(
        self,
        actor: Actor,
        target_branch_id: int | None = None,
    ) -> bool:
        """Check whether an actor may see data owned by a branch.

        Args:
            actor: Actor to check.
            target_branch_id: Branch owning the data; None for global data.

        Returns:
            bool: True if visible.
        """
        return self.resolve(actor).permits(target_branch_id)

    def branch_display_name(self, actor: Actor) -> str:
        """Label for the actor's branch scope.

        Args:
            actor: Actor to describe.

        Returns:
            str: "All Branches", the actor's branch name, or
            "Unknown Branch".
        """
        if self.can_access_all_branches(actor):
            return ALL_BRANCHES_DISPLAY_NAME
        return actor.branch_name or UNKNOWN_BRANCH_DISPLAY_NAME
