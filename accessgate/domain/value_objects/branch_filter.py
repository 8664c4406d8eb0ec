"""Branch filter value object.

Describes which branch partition an actor's list queries are scoped to.
It is a descriptor, not a yes/no answer: repositories translate it into a
WHERE clause (or nothing, when unrestricted).
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class BranchFilter:
    """Branch scoping descriptor.

    Exactly two shapes are valid:
        BranchFilter(unrestricted=True)
        BranchFilter(unrestricted=False, branch_id=<int>)

    Attributes:
        unrestricted: True when every branch is visible.
        branch_id: The single visible branch when restricted.

    Raises:
        ValueError: On any other combination.
    """

    unrestricted: bool
    branch_id: int | None = None

    def __post_init__(self) -> None:
        if self.unrestricted and self.branch_id is not None:
            raise ValueError("branch_id must be None when unrestricted is True.")
        if not self.unrestricted and not isinstance(self.branch_id, int):
            raise ValueError("branch_id must be an int when unrestricted is False.")

    @classmethod
    def all_branches(cls) -> "BranchFilter":
        """Filter that places no restriction on branch."""
        return cls(unrestricted=True)

    @classmethod
    def only(cls, branch_id: int) -> "BranchFilter":
        """Filter restricted to a single branch."""
        return cls(unrestricted=False, branch_id=branch_id)

    def permits(self, target_branch_id: int | None) -> bool:
        """Check whether data belonging to a branch is visible.

        Precedence: unrestricted wins; data with no branch is global and
        visible to everyone; otherwise the branch must match exactly.

        Args:
            target_branch_id: Branch that owns the data, or None for global
                data.

        Returns:
            bool: True if the data is visible under this filter.
        """
        if self.unrestricted:
            return True
        if target_branch_id is None:
            return True
        return self.branch_id == target_branch_id
