"""Unit tests for branch scope resolution.

Tests cover:
- BranchFilter shapes and permits() precedence
- Resolution per role, all-branches flag and assigned branch
- Branch data visibility for restricted actors
- Branch display names
"""

import pytest

from accessgate.domain.enums import UserRole
from accessgate.domain.services.branch_scope import BranchScopeResolver
from accessgate.domain.value_objects import BranchFilter
from tests.conftest import make_actor


@pytest.fixture
def resolver() -> BranchScopeResolver:
    return BranchScopeResolver()


@pytest.mark.unit
class TestBranchFilter:
    """Test BranchFilter value object."""

    def test_all_branches(self):
        """Test unrestricted filter has no branch id."""
        branch_filter = BranchFilter.all_branches()

        assert branch_filter.unrestricted is True
        assert branch_filter.branch_id is None

    def test_only(self):
        """Test restricted filter carries the branch id."""
        branch_filter = BranchFilter.only(3)

        assert branch_filter.unrestricted is False
        assert branch_filter.branch_id == 3

    def test_unrestricted_with_branch_id_rejected(self):
        """Test unrestricted filter cannot carry a branch id."""
        with pytest.raises(ValueError, match="must be None"):
            BranchFilter(unrestricted=True, branch_id=3)

    def test_restricted_without_branch_id_rejected(self):
        """Test restricted filter requires a branch id."""
        with pytest.raises(ValueError, match="must be an int"):
            BranchFilter(unrestricted=False)

    def test_unrestricted_permits_everything(self):
        """Test unrestricted filter permits any branch."""
        branch_filter = BranchFilter.all_branches()

        assert branch_filter.permits(1) is True
        assert branch_filter.permits(99) is True
        assert branch_filter.permits(None) is True

    def test_restricted_permits_matching_branch_only(self):
        """Test restricted filter compares branch ids exactly."""
        branch_filter = BranchFilter.only(3)

        assert branch_filter.permits(3) is True
        assert branch_filter.permits(4) is False

    def test_restricted_permits_global_data(self):
        """Test data without a branch is visible to restricted filters."""
        assert BranchFilter.only(3).permits(None) is True

    def test_equality(self):
        """Test filters compare by value."""
        assert BranchFilter.only(2) == BranchFilter.only(2)
        assert BranchFilter.all_branches() != BranchFilter.only(2)


@pytest.mark.unit
class TestResolve:
    """Test BranchScopeResolver.resolve."""

    def test_super_admin_unrestricted_even_with_branch(self, resolver):
        """Test bypass role ignores its assigned branch."""
        actor = make_actor(UserRole.SUPER_ADMIN, branch_id=7)

        assert resolver.resolve(actor) == BranchFilter.all_branches()

    def test_all_branches_flag_lifts_scope(self, resolver):
        """Test per-user flag lifts scoping for any role."""
        actor = make_actor(UserRole.STAFF, branch_id=3, can_access_all_branches=True)

        assert resolver.resolve(actor) == BranchFilter.all_branches()

    def test_admin_with_branch_is_restricted(self, resolver):
        """Test admin is branch-scoped unless flagged."""
        actor = make_actor(UserRole.ADMIN, branch_id=2)

        assert resolver.resolve(actor) == BranchFilter.only(2)

    def test_no_branch_is_unrestricted(self, resolver):
        """Test an actor not bound to a branch sees global data."""
        actor = make_actor(UserRole.MANAGER, branch_id=None)

        assert resolver.resolve(actor) == BranchFilter.all_branches()

    def test_unknown_role_with_branch_is_restricted(self, resolver):
        """Test unknown roles still get branch scoping."""
        actor = make_actor("intern", branch_id=5)

        assert resolver.resolve(actor) == BranchFilter.only(5)

    def test_resolution_is_repeatable(self, resolver):
        """Test resolving twice yields equal filters."""
        actor = make_actor(UserRole.STAFF, branch_id=3)

        assert resolver.resolve(actor) == resolver.resolve(actor)


@pytest.mark.unit
class TestCanAccessBranchData:
    """Test branch data visibility."""

    def test_staff_branch_three(self, resolver):
        """Test staff bound to branch 3 sees branch 3 and global data only."""
        actor = make_actor(UserRole.STAFF, branch_id=3)

        assert resolver.can_access_branch_data(actor, 3) is True
        assert resolver.can_access_branch_data(actor, None) is True
        assert resolver.can_access_branch_data(actor) is True
        for other in (1, 2, 4, 100):
            assert resolver.can_access_branch_data(actor, other) is False

    def test_super_admin_sees_every_branch(self, resolver):
        """Test bypass role sees any branch."""
        actor = make_actor(UserRole.SUPER_ADMIN, branch_id=3)

        assert resolver.can_access_branch_data(actor, 42) is True

    def test_can_access_all_branches(self, resolver):
        """Test all-branches check for role and flag."""
        assert resolver.can_access_all_branches(make_actor(UserRole.SUPER_ADMIN))
        assert resolver.can_access_all_branches(
            make_actor(UserRole.STAFF, can_access_all_branches=True)
        )
        assert not resolver.can_access_all_branches(make_actor(UserRole.ADMIN))


@pytest.mark.unit
class TestBranchDisplayName:
    """Test branch display names."""

    def test_all_branches_label(self, resolver):
        """Test unrestricted actors show All Branches."""
        actor = make_actor(UserRole.SUPER_ADMIN, branch_name="Downtown")

        assert resolver.branch_display_name(actor) == "All Branches"

    def test_branch_name(self, resolver):
        """Test restricted actors show their branch name."""
        actor = make_actor(UserRole.STAFF, branch_id=3, branch_name="Downtown")

        assert resolver.branch_display_name(actor) == "Downtown"

    def test_unknown_branch(self, resolver):
        """Test missing branch name falls back to Unknown Branch."""
        actor = make_actor(UserRole.STAFF, branch_id=3)

        assert resolver.branch_display_name(actor) == "Unknown Branch"
