"""Unit tests for authorization value objects.

Tests cover:
- AccessRequest normalization and validation
- AccessDecision reason codes and truthiness
- PermissionGrant matching, record parsing and well-formedness
- Actor role coercion
"""

from dataclasses import FrozenInstanceError

import pytest

from accessgate.domain.enums import Action, DecisionReason, Resource, UserRole
from accessgate.domain.value_objects import (
    AccessDecision,
    AccessRequest,
    Actor,
    PermissionGrant,
)


@pytest.mark.unit
class TestAccessRequest:
    """Test AccessRequest.create."""

    def test_enum_members_normalized(self):
        """Test enum members become plain resource and Action."""
        request = AccessRequest.create(Resource.REPORTS, Action.WRITE)

        assert request.resource == "reports"
        assert type(request.resource) is str
        assert request.action is Action.WRITE

    def test_raw_strings_accepted(self):
        """Test raw strings are converted."""
        request = AccessRequest.create("orders", "read_write")

        assert request.resource == "orders"
        assert request.action is Action.READ_WRITE

    def test_unknown_resource_accepted(self):
        """Test resources outside the catalog are not rejected here."""
        assert AccessRequest.create("ledger", "read").resource == "ledger"

    @pytest.mark.parametrize("action", ["delete", "READ", "", None, 1])
    def test_invalid_action_raises(self, action):
        """Test actions outside the closed set raise ValueError."""
        with pytest.raises(ValueError, match="not valid"):
            AccessRequest.create("reports", action)

    def test_non_string_resource_raises(self):
        """Test a non-string resource raises TypeError."""
        with pytest.raises(TypeError, match="resource must be a string"):
            AccessRequest.create(42, "read")  # type: ignore[arg-type]

    def test_permission_string(self):
        """Test resource:action permission string."""
        assert AccessRequest.create("sales", "write").permission == "sales:write"


@pytest.mark.unit
class TestAccessDecision:
    """Test AccessDecision."""

    def test_reason_code(self):
        """Test reason_code exposes the string code."""
        decision = AccessDecision(
            allowed=True,
            reason=DecisionReason.ROLE_BYPASS,
            resource="reports",
            action=Action.READ,
        )

        assert decision.reason_code == "role-bypass"

    def test_truthiness_follows_allowed(self):
        """Test a decision is truthy only when allowed."""
        allowed = AccessDecision(
            allowed=True,
            reason=DecisionReason.ROLE_ALLOW_LIST,
            resource="orders",
            action=Action.READ,
        )
        denied = AccessDecision(
            allowed=False,
            reason=DecisionReason.ROLE_ALLOW_LIST,
            resource="salary",
            action=Action.READ,
        )

        assert bool(allowed) is True
        assert bool(denied) is False

    def test_immutable(self):
        """Test decisions cannot be modified."""
        decision = AccessDecision(
            allowed=False,
            reason=DecisionReason.NO_ACTOR,
            resource="orders",
            action=Action.READ,
        )

        with pytest.raises(FrozenInstanceError):
            decision.allowed = True  # type: ignore[misc]


@pytest.mark.unit
class TestPermissionGrant:
    """Test PermissionGrant."""

    def test_exact_match_satisfies(self):
        """Test same resource and action matches."""
        grant = PermissionGrant(resource="reports", action=Action.WRITE)

        assert grant.satisfies("reports", Action.WRITE) is True

    def test_read_write_satisfies_narrower_actions(self):
        """Test read_write grant satisfies read and write."""
        grant = PermissionGrant(resource="reports", action=Action.READ_WRITE)

        assert grant.satisfies("reports", Action.READ) is True
        assert grant.satisfies("reports", Action.WRITE) is True

    def test_read_grant_does_not_satisfy_write(self):
        """Test read grant does not cover write."""
        grant = PermissionGrant(resource="reports", action=Action.READ)

        assert grant.satisfies("reports", Action.WRITE) is False

    def test_resource_must_match(self):
        """Test grants are resource-specific."""
        grant = PermissionGrant(resource="reports", action=Action.READ_WRITE)

        assert grant.satisfies("sales", Action.READ) is False

    def test_revoked_grant_never_satisfies(self):
        """Test granted=False rows never match."""
        grant = PermissionGrant(resource="reports", action=Action.READ, granted=False)

        assert grant.satisfies("reports", Action.READ) is False

    def test_from_record(self):
        """Test parsing a well-formed row."""
        grant = PermissionGrant.from_record(
            {"resource": "sales", "action": "read", "description": "View sales"}
        )

        assert grant == PermissionGrant(
            resource="sales", action=Action.READ, description="View sales"
        )

    def test_from_record_granted_flag(self):
        """Test granted flag is carried over."""
        grant = PermissionGrant.from_record(
            {"resource": "sales", "action": "read", "granted": False}
        )

        assert grant is not None
        assert grant.granted is False

    @pytest.mark.parametrize(
        "record",
        [
            {},
            {"action": "read"},
            {"resource": "", "action": "read"},
            {"resource": None, "action": "read"},
            {"resource": "sales"},
            {"resource": "sales", "action": "delete"},
            {"resource": "sales", "action": 1},
        ],
    )
    def test_from_record_malformed_returns_none(self, record):
        """Test malformed rows produce None."""
        assert PermissionGrant.from_record(record) is None

    def test_is_well_formed(self):
        """Test well-formedness check."""
        assert PermissionGrant(resource="sales", action=Action.READ).is_well_formed()
        assert not PermissionGrant(resource="", action=Action.READ).is_well_formed()
        assert not PermissionGrant(
            resource="sales", action="read"  # type: ignore[arg-type]
        ).is_well_formed()


@pytest.mark.unit
class TestActor:
    """Test Actor."""

    def test_defaults(self):
        """Test branch fields default to unbound."""
        actor = Actor(actor_id="u-1", role=UserRole.STAFF)

        assert actor.branch_id is None
        assert actor.can_access_all_branches is False
        assert actor.branch_name is None

    def test_user_role_coerces_string(self):
        """Test stored role strings coerce to UserRole."""
        assert Actor(actor_id="u-1", role="manager").user_role is UserRole.MANAGER

    def test_user_role_unknown_is_none(self):
        """Test unknown roles coerce to None but are kept as supplied."""
        actor = Actor(actor_id="u-1", role="intern")

        assert actor.user_role is None
        assert actor.role == "intern"
