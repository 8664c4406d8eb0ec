"""Role catalog: static role → resource rules.

The catalog is the only place role semantics live. Each role carries one
rule kind:

    BYPASS      every resource, no further checks (exactly one role)
    DENY_LIST   every resource except the listed ones (at most one role)
    ALLOW_LIST  only the listed resources

Allow-lists are resource-only: a listed resource is allowed for every
action. Roles outside the table (unknown strings, None) resolve to an
empty rule set, which is a valid fully-denied state, not an error.

Usage:
    from accessgate.domain.services.role_catalog import ROLE_CATALOG

    ROLE_CATALOG.is_bypass_role("super_admin")        # True
    ROLE_CATALOG.resources_for_role("staff")          # frozenset({...})
    ROLE_CATALOG.resources_for_role("intern")         # frozenset()
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from accessgate.domain.enums import Capability, Resource, UserRole

UNKNOWN_ROLE_DISPLAY_NAME = "Unknown"


class RoleRuleKind(str, Enum):
    """How a role's resource list is interpreted."""

    BYPASS = "bypass"
    DENY_LIST = "deny_list"
    ALLOW_LIST = "allow_list"


@dataclass(frozen=True, slots=True, kw_only=True)
class RoleRule:
    """Static rule attached to a role.

    Attributes:
        kind: Interpretation of ``resources``.
        resources: Allowed resources (ALLOW_LIST) or denied resources
            (DENY_LIST). Empty for BYPASS.
        display_name: Label shown in the dashboard.
        capabilities: Management capabilities granted by the role.
    """

    kind: RoleRuleKind
    display_name: str
    resources: frozenset[str] = field(default_factory=frozenset)
    capabilities: frozenset[Capability] = field(default_factory=frozenset)


def _names(resources: Iterable[Resource]) -> frozenset[str]:
    return frozenset(resource.value for resource in resources)


ROLE_RULES: Mapping[UserRole, RoleRule] = MappingProxyType(
    {
        UserRole.SUPER_ADMIN: RoleRule(
            kind=RoleRuleKind.BYPASS,
            display_name="Super Admin",
            capabilities=frozenset(Capability),
        ),
        UserRole.ADMIN: RoleRule(
            kind=RoleRuleKind.DENY_LIST,
            display_name="Administrator",
            resources=_names([Resource.SUPER_ADMIN]),
            capabilities=frozenset(
                {
                    Capability.MANAGE_USERS,
                    Capability.MANAGE_STAFF,
                    Capability.VIEW_FINANCE,
                    Capability.MANAGE_SETTINGS,
                    Capability.MANAGE_BRANCHES,
                }
            ),
        ),
        UserRole.MANAGER: RoleRule(
            kind=RoleRuleKind.ALLOW_LIST,
            display_name="Manager",
            resources=_names(
                [
                    Resource.DASHBOARD,
                    Resource.PRODUCTS,
                    Resource.INVENTORY,
                    Resource.ORDERS,
                    Resource.PRODUCTION,
                    Resource.CUSTOMERS,
                    Resource.PARTIES,
                    Resource.ASSETS,
                    Resource.EXPENSES,
                    Resource.SALES,
                    Resource.PURCHASES,
                    Resource.REPORTS,
                    Resource.STAFF,
                    Resource.ATTENDANCE,
                    Resource.SALARY,
                    Resource.LEAVE_REQUESTS,
                ]
            ),
            capabilities=frozenset({Capability.MANAGE_STAFF, Capability.VIEW_FINANCE}),
        ),
        UserRole.SUPERVISOR: RoleRule(
            kind=RoleRuleKind.ALLOW_LIST,
            display_name="Supervisor",
            resources=_names(
                [
                    Resource.DASHBOARD,
                    Resource.PRODUCTS,
                    Resource.INVENTORY,
                    Resource.ORDERS,
                    Resource.PRODUCTION,
                    Resource.CUSTOMERS,
                    Resource.STAFF,
                    Resource.ATTENDANCE,
                ]
            ),
        ),
        UserRole.MARKETER: RoleRule(
            kind=RoleRuleKind.ALLOW_LIST,
            display_name="Marketer",
            resources=_names(
                [
                    Resource.DASHBOARD,
                    Resource.PRODUCTS,
                    Resource.CUSTOMERS,
                    Resource.ORDERS,
                    Resource.SALES,
                    Resource.REPORTS,
                ]
            ),
        ),
        UserRole.STAFF: RoleRule(
            kind=RoleRuleKind.ALLOW_LIST,
            display_name="Staff",
            resources=_names(
                [
                    Resource.DASHBOARD,
                    Resource.PRODUCTS,
                    Resource.INVENTORY,
                    Resource.ORDERS,
                    Resource.PRODUCTION,
                ]
            ),
        ),
    }
)


class RoleCatalog:
    """Read-only view over a role rule table.

    All lookups are total over any input: unrecognized roles behave as a
    role with no rule.

    Attributes:
        _rules: Role → rule table.
        _bypass_role: The single BYPASS role.
    """

    def __init__(self, rules: Mapping[UserRole, RoleRule]) -> None:
        """Validate and wrap a rule table.

        Args:
            rules: Role → rule table.

        Raises:
            ValueError: If the table does not have exactly one BYPASS role
                or has more than one DENY_LIST role.
        """
        bypass = [r for r, rule in rules.items() if rule.kind is RoleRuleKind.BYPASS]
        if len(bypass) != 1:
            raise ValueError(
                f"Role table must define exactly one bypass role, found {len(bypass)}."
            )
        deny_list = [
            r for r, rule in rules.items() if rule.kind is RoleRuleKind.DENY_LIST
        ]
        if len(deny_list) > 1:
            raise ValueError(
                f"Role table may define at most one deny-list role, found {len(deny_list)}."
            )

        self._rules = MappingProxyType(dict(rules))
        self._bypass_role = bypass[0]

    @property
    def bypass_role(self) -> UserRole:
        """The role whose decisions are unconditional."""
        return self._bypass_role

    def rule_for(self, role: UserRole | str | None) -> RoleRule | None:
        """Look up the rule for a role.

        Args:
            role: Role member, raw value, or None.

        Returns:
            RoleRule | None: Rule, or None for an unrecognized role.
        """
        user_role = UserRole.from_value(role)
        if user_role is None:
            return None
        return self._rules.get(user_role)

    def is_bypass_role(self, role: UserRole | str | None) -> bool:
        rule = self.rule_for(role)
        return rule is not None and rule.kind is RoleRuleKind.BYPASS

    def is_deny_list_role(self, role: UserRole | str | None) -> bool:
        rule = self.rule_for(role)
        return rule is not None and rule.kind is RoleRuleKind.DENY_LIST

    def has_allow_list(self, role: UserRole | str | None) -> bool:
        rule = self.rule_for(role)
        return rule is not None and rule.kind is RoleRuleKind.ALLOW_LIST

    def resources_for_role(self, role: UserRole | str | None) -> frozenset[str]:
        """Resources a role is allowed by its allow-list.

        Only ALLOW_LIST roles have a finite set; every other role (bypass,
        deny-list, unknown) yields the empty set here.

        Args:
            role: Role member, raw value, or None.

        Returns:
            frozenset[str]: Allowed resource names.
        """
        rule = self.rule_for(role)
        if rule is None or rule.kind is not RoleRuleKind.ALLOW_LIST:
            return frozenset()
        return rule.resources

    def denied_resources_for_role(self, role: UserRole | str | None) -> frozenset[str]:
        """Resources a deny-list role is refused.

        Args:
            role: Role member, raw value, or None.

        Returns:
            frozenset[str]: Denied resource names; empty for other roles.
        """
        rule = self.rule_for(role)
        if rule is None or rule.kind is not RoleRuleKind.DENY_LIST:
            return frozenset()
        return rule.resources

    def has_capability(
        self,
        role: UserRole | str | None,
        capability: Capability,
    ) -> bool:
        rule = self.rule_for(role)
        return rule is not None and capability in rule.capabilities

    def display_name_for_role(self, role: UserRole | str | None) -> str:
        """Human-readable role label.

        Args:
            role: Role member, raw value, or None.

        Returns:
            str: Display name, or "Unknown" for unrecognized roles.
        """
        rule = self.rule_for(role)
        if rule is None:
            return UNKNOWN_ROLE_DISPLAY_NAME
        return rule.display_name


ROLE_CATALOG = RoleCatalog(ROLE_RULES)
